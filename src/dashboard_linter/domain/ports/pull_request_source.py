"""Port: Pull request source — list changed files and download documents."""

from abc import ABC, abstractmethod
from typing import Any

from dashboard_linter.domain.models.pull_request import ChangedFile


class PullRequestSourcePort(ABC):
    """Contract for reading a pull request from a hosting service."""

    @abstractmethod
    def list_changed_files(self, files_url: str) -> list[ChangedFile]:
        """Return every file changed by the pull request, across all pages.

        Raises:
            FetchError: If any page cannot be fetched.
        """
        ...

    @abstractmethod
    def fetch_document(self, raw_url: str) -> Any:
        """Download a file and return its parsed JSON content.

        Raises:
            FetchError: If the download fails.
            DocumentLoadError: If the content is not valid JSON.
        """
        ...
