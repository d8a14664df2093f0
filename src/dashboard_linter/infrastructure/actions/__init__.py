"""GitHub Actions integration."""

from dashboard_linter.infrastructure.actions.output import format_output, set_output

__all__ = ["format_output", "set_output"]
