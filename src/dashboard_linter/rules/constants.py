"""Rules applied to every rendered line of a dashboard document.

The table is built once at import time. Every matching rule fires and the
warnings of a single line follow table order.

Patterns for ``linkedEntityGuids`` and ``accountId`` accept only the exact
literal value (``null`` / ``0``) followed by a comma or the end of the line.
The ``accountIds`` pattern matches the stringified array produced by
:func:`dashboard_linter.validators.line_checker.render_document`, not a
native JSON array.
"""

from __future__ import annotations

from dashboard_linter.domain.models.rule import Rule

GUID_MESSAGE = '"guid" should not be used'
ENTITY_GUID_MESSAGE = '"entityGuid" should not be used'
PERMISSIONS_MESSAGE = '"permissions" field should not be used'
ACCOUNT_ID_MESSAGE = '"accountId" must be zero'
ACCOUNT_IDS_MESSAGE = '"accountIds" must be set to []'

RULES: tuple[Rule, ...] = (
    Rule.compile(r"guid[`'\") ]", GUID_MESSAGE),
    Rule.compile(r"entityGuid", ENTITY_GUID_MESSAGE),
    Rule.compile(r'"linkedEntityGuids": (?!null\s*(?:,|$))', ENTITY_GUID_MESSAGE),
    Rule.compile(r'"permissions": ', PERMISSIONS_MESSAGE),
    Rule.compile(r'"accountId": (?!0\s*(?:,|$))', ACCOUNT_ID_MESSAGE),
    Rule.compile(r'"accountIds": "\[(?!\s*\])([^\]\[]+)\]"', ACCOUNT_IDS_MESSAGE),
)
