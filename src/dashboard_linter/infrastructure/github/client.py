"""GitHub REST client — implements PullRequestSourcePort.

Lists the files of a pull request page by page, following the ``Link``
header, and downloads raw file content with the same token.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests
from pydantic import ValidationError

from dashboard_linter.domain.errors import DocumentLoadError, FetchError, GitHubAPIError
from dashboard_linter.domain.models.pull_request import ChangedFile
from dashboard_linter.domain.ports.pull_request_source import PullRequestSourcePort

logger = logging.getLogger(__name__)

_ACCEPT = "application/vnd.github+json"
_TIMEOUT = 10  # seconds
_PER_PAGE = 100


class GitHubClient(PullRequestSourcePort):
    """Read pull request files through the GitHub REST API.

    Parameters
    ----------
    token : str
        Token sent as ``Authorization: token <token>``.
    timeout : float
        Per-request timeout in seconds.
    per_page : int
        Page size added to the first listing request when the URL has none.
    session : requests.Session | None
        Session to reuse (useful for testing); one is created otherwise.
    """

    def __init__(
        self,
        token: str,
        timeout: float = _TIMEOUT,
        per_page: int = _PER_PAGE,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._timeout = timeout
        self._per_page = per_page
        self._session = session or requests.Session()
        self._session.headers.update({"Authorization": f"token {token}"})

    def close(self) -> None:
        self._session.close()

    # -- PullRequestSourcePort -------------------------------------------------

    def list_changed_files(self, files_url: str) -> list[ChangedFile]:
        """Return every changed file, following ``rel="next"`` links.

        Raises:
            GitHubAPIError: A page answered with a non-success status.
            FetchError: Network error or unexpected payload.
        """
        files: list[ChangedFile] = []
        next_url: Optional[str] = self._with_page_size(files_url)
        page = 0

        while next_url:
            page += 1
            logger.debug("Fetching page %d: %s", page, next_url)
            resp = self._get(next_url, headers={"Accept": _ACCEPT})
            if not resp.ok:
                raise GitHubAPIError(resp.status_code, next_url, resp.reason or "")

            try:
                payload = resp.json()
            except ValueError as exc:
                raise FetchError(f"Invalid JSON from {next_url}: {exc}") from exc
            if not isinstance(payload, list):
                raise FetchError(f"Expected a list of files from {next_url}")
            try:
                files.extend(ChangedFile.model_validate(item) for item in payload)
            except ValidationError as exc:
                raise FetchError(f"Unexpected file entry from {next_url}: {exc}") from exc

            next_url = resp.links.get("next", {}).get("url")

        logger.debug("Listed %d changed file(s) over %d page(s)", len(files), page)
        return files

    def fetch_document(self, raw_url: str) -> Any:
        """Download *raw_url* and parse it as JSON.

        Raises:
            FetchError: Network error or non-success status.
            DocumentLoadError: The body is not valid JSON.
        """
        resp = self._get(raw_url)
        if not resp.ok:
            raise FetchError(f"{resp.status_code} - {raw_url}")
        try:
            return resp.json()
        except ValueError as exc:
            raise DocumentLoadError(f"Invalid JSON in {raw_url}: {exc}") from exc

    # -- Helpers ---------------------------------------------------------------

    def _get(self, url: str, headers: Optional[dict[str, str]] = None) -> requests.Response:
        try:
            return self._session.get(url, headers=headers, timeout=self._timeout)
        except requests.RequestException as exc:
            raise FetchError(f"Request to {url} failed: {exc}") from exc

    def _with_page_size(self, url: str) -> str:
        if "per_page=" in url:
            return url
        separator = "&" if "?" in url else "?"
        return f"{url}{separator}per_page={self._per_page}"
