"""Linter configuration package."""

from dashboard_linter.config.loader import get_config, load_config
from dashboard_linter.config.models import DEFAULT_DOCS_URL, LinterConfig

__all__ = ["DEFAULT_DOCS_URL", "LinterConfig", "get_config", "load_config"]
