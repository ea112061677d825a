# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: Run one full indexing pass: read every text unit, parse it, fold the
      results into a fresh Registry snapshot (last write wins) and optionally
      resolve aliased colors.
Returns:
  - read_unit(path, encoding) -> str | None
  - index_sources([(path, text | None), ...], settings) -> Registry
  - index_workspace(root, settings) -> Registry
Used by: CLI, host integrations (publish the result through RegistryHolder).
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from css_var_index.discovery import discover_files
from css_var_index.extraction.general.types import VariableDefinition
from css_var_index.extraction.general.utils.settings import DEFAULT_SETTINGS, IndexSettings
from css_var_index.extraction.parser.variables import parse
from css_var_index.index.registry import Registry
from css_var_index.index.resolve import resolve_references

logger = logging.getLogger(__name__)

__all__ = [
    "read_unit",
    "parse_units",
    "index_sources",
    "index_workspace",
]

TextUnit = tuple[str, Optional[str]]


def read_unit(path: str | Path, encoding: str = "utf-8") -> Optional[str]:
    """Read one source file; None (logged) when it cannot be read or decoded."""
    try:
        return Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read %s: %s", path, e)
        return None


def parse_units(
    units: Iterable[TextUnit], settings: IndexSettings = DEFAULT_SETTINGS
) -> list[tuple[VariableDefinition, ...]]:
    """Parse every unit in order; an unreadable unit (text None) contributes nothing."""
    parsed: list[tuple[VariableDefinition, ...]] = []
    for path, text in units:
        if text is None:
            parsed.append(())
            continue
        definitions = parse(
            text,
            source=path,
            max_matches=settings.max_matches,
            max_text_length=settings.max_text_length,
        )
        logger.debug("%s: %d definitions", path, len(definitions))
        parsed.append(definitions)
    return parsed


def index_sources(
    units: Iterable[TextUnit], settings: IndexSettings = DEFAULT_SETTINGS
) -> Registry:
    """
    Build a Registry from a fixed snapshot of units.

    Every unit is parsed before the Registry is constructed, so a failure
    mid-pass never yields a partially built snapshot.
    """
    parsed = parse_units(units, settings)
    registry = Registry.build(parsed)
    if settings.resolve_depth > 0:
        registry = resolve_references(registry, settings.resolve_depth)
    logger.info(
        "Indexed %d variables from %d units (%d collisions)",
        len(registry), len(parsed), registry.collision_count,
    )
    return registry


def index_workspace(
    root: str | Path, settings: Optional[IndexSettings] = None
) -> Registry:
    """Discover, read and index every candidate stylesheet under `root`."""
    settings = settings or DEFAULT_SETTINGS
    files = discover_files(
        root,
        include=settings.include,
        exclude=settings.exclude,
        max_files=settings.max_files,
    )
    units = [(str(p), read_unit(p, settings.encoding)) for p in files]
    return index_sources(units, settings)
