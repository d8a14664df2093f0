"""JSON config provider — implements ConfigProviderPort on top of config/loader.py."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from dashboard_linter.domain.errors import ConfigurationError
from dashboard_linter.domain.ports.config_provider import ConfigProviderPort


class JsonConfigProvider(ConfigProviderPort):
    """Load linter configuration from JSON files, lazily."""

    def __init__(self, config_path: str | None = None) -> None:
        self._config_path = config_path
        self._config: Any = None

    def get_config(self) -> Any:
        """Return the current configuration, loading it on first access.

        Raises:
            ConfigurationError: If the file is missing or invalid.
        """
        if self._config is None:
            from dashboard_linter.config.loader import DEFAULT_CONFIG_PATH, load_config

            path = Path(self._config_path) if self._config_path else DEFAULT_CONFIG_PATH
            try:
                self._config = load_config(path)
            except FileNotFoundError as exc:
                raise ConfigurationError(str(exc)) from exc
            except ValueError as exc:
                # pydantic.ValidationError and json.JSONDecodeError are both ValueErrors
                raise ConfigurationError(f"Invalid configuration in '{path}': {exc}") from exc
        return self._config
