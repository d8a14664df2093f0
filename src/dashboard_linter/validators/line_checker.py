"""Scan dashboard JSON documents line by line against the rule table."""

from __future__ import annotations

import json
import math
from typing import Any, Iterable, Optional

from dashboard_linter.domain.models.rule import Rule
from dashboard_linter.rules.constants import RULES

_INDENT = 2
_COMPACT_SEPARATORS = (",", ":")


def check_line(line: str, rules: Optional[Iterable[Rule]] = None) -> list[str]:
    """Return the warnings triggered by a single rendered line.

    Every rule is evaluated independently, so one line may produce several
    warnings. The result follows rule order.
    """
    return [rule.message for rule in (RULES if rules is None else rules) if rule.matches(line)]


def _normalize_numbers(node: Any) -> Any:
    """Render floats the way JSON.stringify does.

    Integral floats become ints (``0.0`` renders as ``0``) and non-finite
    floats become ``None``.
    """
    if isinstance(node, float):
        if not math.isfinite(node):
            return None
        return int(node) if node.is_integer() else node
    if isinstance(node, (list, tuple)):
        return [_normalize_numbers(item) for item in node]
    if isinstance(node, dict):
        return {key: _normalize_numbers(value) for key, value in node.items()}
    return node


def _flatten_arrays(node: Any) -> Any:
    """Replace every array with its single-line JSON text.

    Arrays nested inside an array are part of that array's text and are not
    visited separately.
    """
    if isinstance(node, (list, tuple)):
        return json.dumps(
            _normalize_numbers(node), separators=_COMPACT_SEPARATORS, ensure_ascii=False
        )
    if isinstance(node, dict):
        return {key: _flatten_arrays(value) for key, value in node.items()}
    return _normalize_numbers(node)


def render_document(document: Any) -> str:
    """Serialize *document* with a 2-space indent and flattened arrays.

    Key order is preserved. The input is never mutated.
    """
    return json.dumps(_flatten_arrays(document), indent=_INDENT, ensure_ascii=False)


def get_warnings(document: Any, rules: Optional[Iterable[Rule]] = None) -> list[str]:
    """Collect the warnings of every line of *document*, in document order.

    Args:
        document: Any parsed JSON value.
        rules: Rule table override; defaults to :data:`RULES`.

    Returns:
        One message per (line, rule) match, line order first, then rule order.
    """
    active_rules = RULES if rules is None else tuple(rules)
    warnings: list[str] = []
    for line in render_document(document).split("\n"):
        warnings.extend(check_line(line, active_rules))
    return warnings
