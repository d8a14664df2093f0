"""GitHub access — pull request file listing and raw downloads."""

from dashboard_linter.infrastructure.github.client import GitHubClient
from dashboard_linter.infrastructure.github.filters import (
    filter_out_test_files,
    is_dashboard_file,
    is_not_removed,
    select_dashboards,
)

__all__ = [
    "GitHubClient",
    "filter_out_test_files",
    "is_dashboard_file",
    "is_not_removed",
    "select_dashboards",
]
