"""Dashboard rule table."""

from dashboard_linter.rules.constants import RULES

__all__ = ["RULES"]
