"""Tests for GitHub Actions step outputs."""

from __future__ import annotations

import pytest

from dashboard_linter.infrastructure.actions.output import (
    GITHUB_OUTPUT_ENV,
    format_output,
    set_output,
)


class TestFormatOutput:
    def test_multiline_block(self):
        block = format_output("comment", "line 1\nline 2", delimiter="EOF")
        assert block == "comment<<EOF\nline 1\nline 2\nEOF\n"

    def test_random_delimiter(self):
        block = format_output("comment", "x")
        assert block.startswith("comment<<ghadelimiter_")
        assert format_output("comment", "x") != block

    def test_delimiter_in_value(self):
        with pytest.raises(ValueError, match="delimiter"):
            format_output("comment", "a\nEOF\nb", delimiter="EOF")


class TestSetOutput:
    def test_writes_to_explicit_file(self, tmp_path):
        target = tmp_path / "out.txt"
        assert set_output("comment", "hello\nworld", target) is True
        content = target.read_text(encoding="utf-8")
        assert content.startswith("comment<<ghadelimiter_")
        assert "\nhello\nworld\n" in content

    def test_appends_using_env(self, tmp_path, monkeypatch):
        target = tmp_path / "github_output"
        target.write_text("previous=1\n", encoding="utf-8")
        monkeypatch.setenv(GITHUB_OUTPUT_ENV, str(target))

        assert set_output("comment", "body") is True
        content = target.read_text(encoding="utf-8")
        assert content.startswith("previous=1\ncomment<<")

    def test_no_output_file(self, monkeypatch):
        monkeypatch.delenv(GITHUB_OUTPUT_ENV, raising=False)
        assert set_output("comment", "body") is False
