"""Read the linter settings that select pull request files and shape the comment.

Settings come from ``linter_default.json`` unless a file is given with
``--config``. Parsed files are kept per resolved path, so the GitHub client
and both use cases of one run share a single ``LinterConfig``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Union

from dashboard_linter.config.models import LinterConfig

DEFAULT_CONFIG_PATH = Path(__file__).parent / "linter_default.json"

# resolved path -> validated settings
_loaded: dict[str, LinterConfig] = {}


def load_config(path: Optional[Union[str, Path]] = None) -> LinterConfig:
    """Return the settings stored in *path*, or the bundled defaults.

    A custom file may set any subset of the ``LinterConfig`` fields; the rest
    keep their defaults.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ValueError
        If the file is not JSON (``json.JSONDecodeError``) or a field fails
        validation (``pydantic.ValidationError``), e.g. a regex that does not
        compile or ``per_page`` above 100.
    """
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH
    key = str(config_path.resolve())
    if key in _loaded:
        return _loaded[key]

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    settings = LinterConfig.model_validate(json.loads(config_path.read_text(encoding="utf-8")))
    _loaded[key] = settings
    return settings


def get_config() -> LinterConfig:
    """Bundled default settings."""
    return load_config()


def clear_cache() -> None:
    """Forget every loaded file; tests call this between cases."""
    _loaded.clear()
