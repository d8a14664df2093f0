"""Use Case: Lint local dashboard files.

Applies the same line rules as the pull request check to files on disk.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from dashboard_linter.config.models import LinterConfig
from dashboard_linter.domain.errors import DocumentLoadError
from dashboard_linter.domain.models.report import CheckOutcome, ReportEntry
from dashboard_linter.reporting.comment import create_warning_comment
from dashboard_linter.validators.line_checker import get_warnings

logger = logging.getLogger(__name__)


def load_document(path: Path):
    """Read and parse one JSON file.

    Raises:
        DocumentLoadError: If the file is missing, unreadable or not JSON.
    """
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise DocumentLoadError(f"Cannot read {path}: {exc}") from exc
    except ValueError as exc:
        raise DocumentLoadError(f"Invalid JSON in {path}: {exc}") from exc


class LintFilesUseCase:
    """Scan dashboard files from the local filesystem."""

    def __init__(self, config: LinterConfig) -> None:
        self._config = config

    def execute(self, paths: Iterable[Path]) -> CheckOutcome:
        """Lint every path, reporting each under the path as given."""
        outcome = CheckOutcome()
        for path in paths:
            document = load_document(Path(path))
            filename = str(path)
            outcome.files_checked.append(filename)
            outcome.entries.extend(
                ReportEntry(warning=w, filename=filename) for w in get_warnings(document)
            )
        logger.info(
            "Linted %d file(s), %d warning(s)", len(outcome.files_checked), len(outcome.entries)
        )

        if outcome.has_warnings:
            outcome.comment = create_warning_comment(outcome.rows, docs_url=self._config.docs_url)
        return outcome
