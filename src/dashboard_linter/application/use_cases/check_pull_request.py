"""Use Case: Check the dashboards changed by a pull request.

Lists the pull request files through an injected PullRequestSourcePort,
scans every added or modified dashboard and builds the warning comment.
"""

from __future__ import annotations

import logging

from pydantic import HttpUrl, TypeAdapter, ValidationError

from dashboard_linter.config.models import LinterConfig
from dashboard_linter.domain.errors import InvalidPullRequestUrlError
from dashboard_linter.domain.models.report import CheckOutcome, ReportEntry
from dashboard_linter.domain.ports.pull_request_source import PullRequestSourcePort
from dashboard_linter.infrastructure.github.filters import select_dashboards
from dashboard_linter.reporting.comment import create_warning_comment
from dashboard_linter.validators.line_checker import get_warnings

logger = logging.getLogger(__name__)

_URL_ADAPTER = TypeAdapter(HttpUrl)


def validate_files_url(files_url: str) -> str:
    """Return *files_url* unchanged if it is an absolute http(s) URL.

    Raises:
        InvalidPullRequestUrlError: If the URL cannot be parsed.
    """
    try:
        _URL_ADAPTER.validate_python(files_url)
    except ValidationError as exc:
        raise InvalidPullRequestUrlError(f"Invalid pull request URL: {files_url!r}") from exc
    return files_url


class CheckPullRequestUseCase:
    """Orchestrate a dashboard check over one pull request."""

    def __init__(self, source: PullRequestSourcePort, config: LinterConfig) -> None:
        self._source = source
        self._config = config

    def execute(self, files_url: str) -> CheckOutcome:
        """Scan the pull request's dashboards.

        Args:
            files_url: The "list pull request files" API URL.

        Returns:
            A CheckOutcome; ``comment`` is ``None`` when nothing was found.

        Raises:
            InvalidPullRequestUrlError: If *files_url* is not a valid URL.
            FetchError: On the first listing or download failure; no partial
                result is returned.
        """
        validate_files_url(files_url)

        files = self._source.list_changed_files(files_url)
        dashboards = select_dashboards(
            files,
            dashboard_pattern=self._config.dashboard_pattern,
            test_file_pattern=self._config.test_file_pattern,
        )
        logger.info(
            "Pull request changes %d file(s), %d dashboard(s) to check",
            len(files),
            len(dashboards),
        )

        outcome = CheckOutcome()
        for dash in dashboards:
            document = self._source.fetch_document(dash.raw_url)
            outcome.files_checked.append(dash.filename)
            outcome.entries.extend(
                ReportEntry(warning=w, filename=dash.filename) for w in get_warnings(document)
            )

        if outcome.has_warnings:
            logger.info("Found warnings: %s", outcome.rows)
            outcome.comment = create_warning_comment(outcome.rows, docs_url=self._config.docs_url)
        return outcome
