"""Domain models for the dashboard linter."""

from dashboard_linter.domain.models.pull_request import ChangedFile
from dashboard_linter.domain.models.report import CheckOutcome, ReportEntry
from dashboard_linter.domain.models.rule import Rule

__all__ = ["ChangedFile", "CheckOutcome", "ReportEntry", "Rule"]
