"""Filters applied to the file listing of a pull request."""

from __future__ import annotations

import re
from typing import Iterable, Union

from dashboard_linter.domain.models.pull_request import ChangedFile

_Pattern = Union[str, re.Pattern]


def filter_out_test_files(files: Iterable[ChangedFile], pattern: _Pattern) -> list[ChangedFile]:
    """Drop files whose path marks them as test fixtures."""
    regex = re.compile(pattern)
    return [f for f in files if not regex.search(f.filename)]


def is_not_removed(file: ChangedFile) -> bool:
    return not file.is_removed


def is_dashboard_file(file: ChangedFile, pattern: _Pattern) -> bool:
    return re.search(pattern, file.filename) is not None


def select_dashboards(
    files: Iterable[ChangedFile],
    dashboard_pattern: _Pattern,
    test_file_pattern: _Pattern,
) -> list[ChangedFile]:
    """Keep the added or modified dashboard files, in listing order."""
    return [
        f
        for f in filter_out_test_files(files, test_file_pattern)
        if is_not_removed(f) and is_dashboard_file(f, dashboard_pattern)
    ]
