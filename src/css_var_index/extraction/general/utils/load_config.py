# src/css_var_index/extraction/general/utils/load_config.py

"""Read a settings file (JSON, or JSON5 when the optional `json5` package is
installed) into a validated dict, cached by path + mtime.

Used by settings.load_settings; hosts that re-index on every save hit the cache.
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

try:  # optional extra: css-var-index[json5]
    import json5 as _json5
except ImportError:  # pragma: no cover - only hit when json5 missing
    _json5 = None  # type: ignore[assignment]

__all__ = [
    "load_config",
    "clear_config_cache",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

Validator = Callable[[dict[str, Any]], dict[str, Any]]


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the settings file is missing or unreadable."""


class ConfigParseError(ValueError):
    """Raise when the file is not valid JSON/JSON5 or fails validation."""


class ConfigTypeError(TypeError):
    """Raise when the payload (or one of its values) has the wrong type."""


log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
_CONFIG_CACHE: dict[tuple[Path, float], dict[str, Any]] = {}


def clear_config_cache() -> None:
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()


def _read(path: Path, encoding: str) -> Any:
    use_json5 = path.suffix == ".json5"
    if use_json5 and _json5 is None:
        raise ConfigParseError(f"{path.name}: .json5 settings need the 'json5' extra installed")
    try:
        with path.open("r", encoding=encoding) as f:
            return _json5.load(f) if use_json5 else json.load(f)
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e
    except ValueError as e:  # JSONDecodeError, json5 errors, UnicodeDecodeError
        raise ConfigParseError(f"Cannot parse {path}: {e}") from e


def load_config(
    path: str | Path,
    *,
    validator: Validator | None = None,
    encoding: str = "utf-8",
) -> dict[str, Any]:
    """Load a JSON object from `path`, run `validator` on a copy, and return it."""
    p = Path(path).resolve()
    try:
        mtime = p.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Config file not found: {p}") from e

    key = (p, mtime)
    with _CACHE_LOCK:
        data = _CONFIG_CACHE.get(key)
    if data is None:
        raw = _read(p, encoding)
        if not isinstance(raw, dict):
            raise ConfigTypeError(f"{p.name}: expected a JSON object, got {type(raw).__name__}")
        data = raw
        with _CACHE_LOCK:
            _CONFIG_CACHE[key] = data
        log.debug("Config loaded: %s", p)
    else:
        log.debug("Config cache HIT: %s", p)

    result = dict(data)
    if validator is None:
        return result
    try:
        return validator(result)
    except (ConfigTypeError, ConfigParseError):
        raise
    except Exception as e:
        raise ConfigParseError(f"{p.name}: validator failed: {e}") from e
