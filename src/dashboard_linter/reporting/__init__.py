"""Pull request comment rendering."""

from dashboard_linter.reporting.comment import create_warning_comment

__all__ = ["create_warning_comment"]
