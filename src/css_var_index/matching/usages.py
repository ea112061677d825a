# src/css_var_index/matching/usages.py
from __future__ import annotations

"""
usages.py

Does: Find every `var(--name)` in an arbitrary buffer whose name resolves to a
      colored definition in a Registry snapshot.
Returns: Usage records (full `var(...)` span + color), left to right.
Used by: Decoration adapters, CLI.
"""

import logging
import re
from collections.abc import Iterator
from itertools import islice
from typing import Optional

from css_var_index.extraction.general.types import Usage
from css_var_index.index.registry import Registry

__all__ = ["USAGE_RE", "iter_usages", "find_usages"]

log = logging.getLogger(__name__)

USAGE_RE = re.compile(r"var\((--[\w-]+)\)", re.ASCII)


def iter_usages(
    text: str, registry: Registry, *, max_matches: Optional[int] = None
) -> Iterator[Usage]:
    """
    Does: Yield a Usage for each known, colored reference, color as #RRGGBB.

    Unknown names and names without a color are skipped silently: most
    `var()` references in code are not color-bearing. `max_matches` bounds the
    number of `var(...)` occurrences inspected, not the number emitted.
    """
    matches = USAGE_RE.finditer(text)
    if max_matches is not None:
        matches = islice(matches, max_matches)

    for m in matches:
        definition = registry.lookup_exact(m.group(1))
        color = definition.canonical_color if definition is not None else None
        if color is None:
            continue
        yield Usage(start=m.start(), end=m.end(), name=definition.name, color=color)


def find_usages(
    text: str, registry: Registry, *, max_matches: Optional[int] = None
) -> tuple[Usage, ...]:
    """Eager form of iter_usages."""
    return tuple(iter_usages(text, registry, max_matches=max_matches))
