"""Shared fixtures for the dashboard linter tests."""

from __future__ import annotations

from typing import Any

import pytest

from dashboard_linter.config.loader import clear_cache
from dashboard_linter.domain.errors import FetchError
from dashboard_linter.domain.models.pull_request import ChangedFile
from dashboard_linter.domain.ports.pull_request_source import PullRequestSourcePort

FILES_URL = "https://api.github.com/repos/acme/quickstarts/pulls/42/files"


class FakeSource(PullRequestSourcePort):
    """In-memory pull request: a file listing plus raw documents by URL."""

    def __init__(self, files: list[dict[str, Any]], documents: dict[str, Any]) -> None:
        self._files = [ChangedFile.model_validate(f) for f in files]
        self._documents = documents
        self.listed: list[str] = []
        self.fetched: list[str] = []
        self.closed = False

    def list_changed_files(self, files_url: str) -> list[ChangedFile]:
        self.listed.append(files_url)
        return list(self._files)

    def fetch_document(self, raw_url: str) -> Any:
        self.fetched.append(raw_url)
        document = self._documents[raw_url]
        if isinstance(document, Exception):
            raise document
        return document

    def close(self) -> None:
        self.closed = True


def changed(filename: str, status: str = "modified") -> dict[str, Any]:
    return {
        "filename": filename,
        "status": status,
        "raw_url": f"https://github.com/acme/quickstarts/raw/abc123/{filename}",
        "additions": 3,
        "deletions": 1,
    }


def raw(filename: str) -> str:
    return f"https://github.com/acme/quickstarts/raw/abc123/{filename}"


@pytest.fixture(autouse=True)
def _fresh_config_cache():
    """Ensure a clean config cache for every test."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def pr_source() -> FakeSource:
    """A pull request touching two dashboards, a fixture, a removed file and docs."""
    files = [
        changed("dashboards/apache/apache.json"),
        changed("dashboards/mock_files/bad.json"),
        changed("dashboards/old/old.json", status="removed"),
        changed("quickstarts/apache/config.yml"),
        changed("dashboards/nginx/nginx.json", status="added"),
    ]
    documents = {
        raw("dashboards/apache/apache.json"): {
            "name": "Apache",
            "permissions": "PUBLIC_READ_WRITE",
            "pages": [{"name": "Overview", "widgets": []}],
        },
        raw("dashboards/nginx/nginx.json"): {
            "name": "Nginx",
            "accountId": 12345,
            "accountIds": [12345],
        },
        raw("dashboards/mock_files/bad.json"): FetchError("fixtures must not be fetched"),
        raw("dashboards/old/old.json"): FetchError("removed files must not be fetched"),
    }
    return FakeSource(files, documents)
