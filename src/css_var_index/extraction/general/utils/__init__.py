# css_var_index/extraction/general/utils/__init__.py
"""

Does: Provide settings loading and topic-gated trace logging for the index stack.
Returns: Public API via load_settings/load_config and trace/enable_topics.
Used by: Orchestrator, parser, registry, CLI, tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    clear_config_cache,
    load_config,
)
from .log import (
    enable_topics,
    reload_topics,
    trace,
)
from .settings import DEFAULT_SETTINGS, IndexSettings, load_settings, settings_path

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Settings
    "IndexSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "settings_path",
    # Trace helpers
    "trace",
    "enable_topics",
    "reload_topics",
]
