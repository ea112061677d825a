# src/css_var_index/index/resolve.py
from __future__ import annotations

"""
resolve.py

Does: Opt-in, depth-bounded color inheritance through `var()` references
      (`--a: var(--b)` or `--a: rgb(var(--b))`), with cycle detection.
Returns: A NEW Registry; the input snapshot is never touched.
Used by: Orchestrator when settings.resolve_depth > 0.
"""

import logging
import re
from dataclasses import replace
from typing import Optional

from css_var_index.extraction.general.types import VariableDefinition
from .registry import Registry

__all__ = ["referenced_name", "resolve_color", "resolve_references"]

log = logging.getLogger(__name__)

_REFERENCE_RES = (
    re.compile(r"^var\(\s*(--[\w-]+)\s*\)$", re.ASCII),
    re.compile(r"^rgba?\(\s*var\(\s*(--[\w-]+)\s*\)\s*\)$", re.ASCII),
)


def referenced_name(raw_value: str) -> Optional[str]:
    """Does: Return the single variable a value is a plain alias of, if any."""
    for pattern in _REFERENCE_RES:
        m = pattern.match(raw_value.strip())
        if m:
            return m.group(1)
    return None


def resolve_color(
    definition: VariableDefinition, registry: Registry, max_depth: int
) -> Optional[str]:
    """Does: Follow up to `max_depth` alias hops; stop on unknown names or cycles."""
    if definition.color is not None:
        return definition.color

    seen = {definition.name}
    current = definition
    for _ in range(max_depth):
        target_name = referenced_name(current.raw_value)
        if target_name is None:
            return None
        if target_name in seen:
            log.debug("Reference cycle through %s; leaving %s unresolved", target_name, definition.name)
            return None
        target = registry.lookup_exact(target_name)
        if target is None:
            return None
        if target.color is not None:
            return target.color
        seen.add(target_name)
        current = target
    return None


def resolve_references(registry: Registry, max_depth: int) -> Registry:
    """Does: Build a new snapshot where color-less aliases inherit their target's color."""
    if max_depth <= 0:
        return registry

    resolved: dict[str, VariableDefinition] = {}
    filled = 0
    for definition in registry:
        color = resolve_color(definition, registry, max_depth)
        if color is not None and definition.color is None:
            definition = replace(definition, color=color)
            filled += 1
        resolved[definition.name] = definition

    log.debug("Resolved %d aliased colors (max_depth=%d)", filled, max_depth)
    return Registry(resolved, collisions=registry.collisions)
