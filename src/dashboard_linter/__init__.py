"""Dashboard linter — flag deprecated fields in dashboard JSON of pull requests."""

from dashboard_linter.reporting.comment import create_warning_comment
from dashboard_linter.validators.line_checker import check_line, get_warnings

__version__ = "1.0.0"

__all__ = ["check_line", "create_warning_comment", "get_warnings"]
