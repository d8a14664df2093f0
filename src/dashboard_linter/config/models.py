"""Pydantic models for the linter configuration.

These models validate and type the JSON configuration file that drives
which pull request files are checked and how the report is rendered.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

DEFAULT_DOCS_URL = (
    "https://github.com/newrelic/newrelic-quickstarts/blob/main/CONTRIBUTING.md#dashboards"
)


class LinterConfig(BaseModel):
    """Root configuration model."""

    dashboard_pattern: str = Field(
        default=r"^dashboards/\S*\.json$",
        description="Regex a changed filename must match to be checked.",
    )
    test_file_pattern: str = Field(
        default=r"(mock_files)|(__tests__)",
        description="Regex marking test fixtures, which are never checked.",
    )
    docs_url: str = Field(
        default=DEFAULT_DOCS_URL,
        description="Contributor documentation linked from the comment footer.",
    )
    api_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Timeout in seconds for each hosting API request.",
    )
    per_page: int = Field(
        default=100,
        ge=1,
        le=100,
        description="Page size requested when listing pull request files.",
    )
    output_name: str = Field(
        default="comment",
        min_length=1,
        description="Name of the step output that receives the comment.",
    )

    @field_validator("dashboard_pattern", "test_file_pattern")
    @classmethod
    def _must_compile(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as exc:
            raise ValueError(f"Invalid regular expression {v!r}: {exc}") from exc
        return v
