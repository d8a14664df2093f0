"""Markdown comment posted on pull requests with dashboard warnings."""

from __future__ import annotations

from typing import Sequence

from dashboard_linter.config.models import DEFAULT_DOCS_URL

NEWLINE = "\n"

HEADING = f"### The PR checks have run and found the following warnings:{NEWLINE}"
TABLE_HEADER = f"| Warning | Filepath | {NEWLINE}| --- | --- | "
FOOTER_TEMPLATE = (
    f"{NEWLINE}Reference the [Contributing Docs for Dashboards]({{docs_url}}) "
    f"for more information. {NEWLINE}"
)


def create_warning_comment(entries: Sequence[str], docs_url: str = DEFAULT_DOCS_URL) -> str:
    """Wrap pre-formatted table rows into the full comment body.

    Args:
        entries: Rows such as ``| <warning> | <filename> |``, kept verbatim.
        docs_url: Link target of the footer.

    Returns:
        Heading, table header, the rows and the footer joined by newlines.
    """
    lines = [HEADING, TABLE_HEADER]
    lines.extend(entries)
    lines.append(FOOTER_TEMPLATE.format(docs_url=docs_url))
    return NEWLINE.join(lines)
