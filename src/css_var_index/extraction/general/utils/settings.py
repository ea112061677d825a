# src/css_var_index/extraction/general/utils/settings.py
from __future__ import annotations

"""
settings.py

Does: Typed indexing settings (discovery globs, caps, resolution depth) loaded
      from the packaged data/settings.json or a user-supplied file via load_config.
Returns: IndexSettings (frozen) and load_settings().
Used by: Orchestrator, discovery, CLI.
"""

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from .load_config import ConfigParseError, ConfigTypeError, load_config

__all__ = [
    "IndexSettings",
    "DEFAULT_SETTINGS",
    "PACKAGED_SETTINGS",
    "load_settings",
    "settings_path",
    "validate_settings",
]

log = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "CSS_VAR_INDEX_SETTINGS"
# utils -> general -> extraction -> css_var_index/data
PACKAGED_SETTINGS = Path(__file__).resolve().parents[3] / "data" / "settings.json"


@dataclass(frozen=True)
class IndexSettings:
    include: tuple[str, ...] = ("**/*.css",)
    exclude: tuple[str, ...] = ("**/node_modules/**",)
    max_files: int = 100
    max_text_length: int = 2_000_000
    max_matches: int = 10_000
    resolve_depth: int = 0
    encoding: str = "utf-8"

    def with_overrides(self, **changes: Any) -> IndexSettings:
        """Does: Copy with the non-None overrides applied (CLI flags)."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


DEFAULT_SETTINGS = IndexSettings()

_GLOB_KEYS = ("include", "exclude")
_INT_KEYS = ("max_files", "max_text_length", "max_matches", "resolve_depth")


def validate_settings(data: dict[str, Any]) -> dict[str, Any]:
    """Check keys/types of a settings payload and coerce globs to tuples."""
    known = {f.name for f in fields(IndexSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigParseError(f"unknown settings keys: {', '.join(unknown)}")

    out: dict[str, Any] = {}
    for key, value in data.items():
        if key in _GLOB_KEYS:
            if isinstance(value, str):
                value = [value]
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigTypeError(f"'{key}' must be a list of glob strings")
            out[key] = tuple(value)
        elif key in _INT_KEYS:
            # bool is an int subclass; reject it explicitly
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigTypeError(f"'{key}' must be an integer, got {type(value).__name__}")
            if value < 0:
                raise ConfigParseError(f"'{key}' must be >= 0, got {value}")
            out[key] = value
        elif key == "encoding":
            if not isinstance(value, str) or not value:
                raise ConfigTypeError("'encoding' must be a non-empty string")
            out[key] = value
    return out


def settings_path() -> Path:
    """Does: CSS_VAR_INDEX_SETTINGS if set, else the packaged data/settings.json."""
    override = os.environ.get(SETTINGS_ENV_VAR)
    return Path(os.path.expanduser(override)) if override else PACKAGED_SETTINGS


def load_settings(path: str | Path | None = None) -> IndexSettings:
    """
    Does: Load settings from `path` (any .json/.json5 file), falling back to
          settings_path(). Missing keys take IndexSettings defaults.
    """
    payload = load_config(path or settings_path(), validator=validate_settings)
    settings = IndexSettings(**payload)
    log.debug("Loaded settings: %s", settings)
    return settings
