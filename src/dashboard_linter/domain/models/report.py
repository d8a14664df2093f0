"""Report entities produced by a pull request check."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ReportEntry:
    """A warning tied to the file it was found in."""

    warning: str
    filename: str

    def as_row(self) -> str:
        """Render the entry as a Markdown table row."""
        return f"| {self.warning} | {self.filename} |"


@dataclass
class CheckOutcome:
    """Aggregated result of one check run."""

    files_checked: list[str] = field(default_factory=list)
    entries: list[ReportEntry] = field(default_factory=list)
    comment: Optional[str] = None

    @property
    def has_warnings(self) -> bool:
        return bool(self.entries)

    @property
    def rows(self) -> list[str]:
        return [entry.as_row() for entry in self.entries]
