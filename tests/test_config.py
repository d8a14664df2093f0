"""Tests for the linter configuration system."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from dashboard_linter.config.loader import load_config
from dashboard_linter.config.models import DEFAULT_DOCS_URL, LinterConfig
from dashboard_linter.domain.errors import ConfigurationError
from dashboard_linter.infrastructure.config.json_config_provider import JsonConfigProvider


class TestDefaultConfig:
    """Tests for loading the built-in linter_default.json."""

    def test_loads_without_error(self):
        assert isinstance(load_config(), LinterConfig)

    def test_default_values(self):
        cfg = load_config()
        assert cfg.dashboard_pattern == r"^dashboards/\S*\.json$"
        assert cfg.test_file_pattern == "(mock_files)|(__tests__)"
        assert cfg.docs_url == DEFAULT_DOCS_URL
        assert cfg.api_timeout == 10
        assert cfg.per_page == 100
        assert cfg.output_name == "comment"

    def test_file_matches_model_defaults(self):
        assert load_config() == LinterConfig()

    def test_cached(self):
        assert load_config() is load_config()


class TestCustomConfig:
    def _write(self, tmp_path, data):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    def test_partial_override(self, tmp_path):
        cfg = load_config(self._write(tmp_path, {"per_page": 30}))
        assert cfg.per_page == 30
        assert cfg.output_name == "comment"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.json")

    def test_accepts_str_path(self, tmp_path):
        cfg = load_config(str(self._write(tmp_path, {"output_name": "report"})))
        assert cfg.output_name == "report"

    def test_invalid_regex(self, tmp_path):
        with pytest.raises(ValidationError, match="Invalid regular expression"):
            load_config(self._write(tmp_path, {"dashboard_pattern": "(unclosed"}))

    @pytest.mark.parametrize("per_page", [0, 101])
    def test_per_page_bounds(self, tmp_path, per_page):
        with pytest.raises(ValidationError):
            load_config(self._write(tmp_path, {"per_page": per_page}))

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            LinterConfig(api_timeout=0)


class TestJsonConfigProvider:
    def test_default(self):
        assert JsonConfigProvider().get_config() == LinterConfig()

    def test_lazy_and_cached(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text('{"output_name": "report"}', encoding="utf-8")
        provider = JsonConfigProvider(str(path))
        assert provider.get_config().output_name == "report"
        assert provider.get_config() is provider.get_config()

    def test_missing_file_is_configuration_error(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            JsonConfigProvider(str(tmp_path / "missing.json")).get_config()

    def test_invalid_content_is_configuration_error(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"per_page": "lots"}', encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            JsonConfigProvider(str(path)).get_config()

    def test_invalid_default_names_its_path(self, tmp_path, monkeypatch):
        from dashboard_linter.config import loader

        bad_default = tmp_path / "linter_default.json"
        bad_default.write_text('{"per_page": 0}', encoding="utf-8")
        monkeypatch.setattr(loader, "DEFAULT_CONFIG_PATH", bad_default)

        with pytest.raises(ConfigurationError) as excinfo:
            JsonConfigProvider().get_config()
        assert str(bad_default) in str(excinfo.value)
        assert "'None'" not in str(excinfo.value)

    def test_malformed_json_is_configuration_error(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            JsonConfigProvider(str(path)).get_config()
