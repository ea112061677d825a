# src/css_var_index/index/registry.py
from __future__ import annotations

"""
registry.py

Does: Merge parsed definitions from many text units into one immutable,
      name-keyed snapshot with a last-write-wins policy, and serve exact and
      prefix lookups.
Returns: Registry, Collision, build().
Used by: Usage matcher, completion filter, host adapters, CLI.
"""

import itertools
import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from css_var_index.extraction.general.types import VariableDefinition
from css_var_index.extraction.general.utils.log import trace

__all__ = ["Collision", "Registry", "build"]

log = logging.getLogger(__name__)

_VERSIONS = itertools.count(1)


@dataclass(frozen=True)
class Collision:
    """A definition that silently replaced an earlier one with the same name."""

    name: str
    replaced: VariableDefinition
    replacement: VariableDefinition


class Registry:
    """
    Immutable snapshot mapping variable name -> VariableDefinition.

    Ordering follows first insertion of each name; a later definition replaces
    the earlier one in place (last write wins, no field merging). Two
    registries are equal when their ordered definitions are equal; `version`
    tells distinct builds apart.
    """

    __slots__ = ("_by_name", "_collisions", "_version")

    def __init__(
        self,
        definitions: Mapping[str, VariableDefinition] | None = None,
        *,
        collisions: Iterable[Collision] = (),
    ) -> None:
        self._by_name: Mapping[str, VariableDefinition] = MappingProxyType(dict(definitions or {}))
        self._collisions: tuple[Collision, ...] = tuple(collisions)
        self._version: int = next(_VERSIONS)

    # ── Construction ─────────────────────────────────────────────────────────
    @classmethod
    def build(cls, sources: Iterable[Iterable[VariableDefinition]]) -> Registry:
        """Does: Fold definitions from each source (in caller order) into a new snapshot."""
        merged: dict[str, VariableDefinition] = {}
        collisions: list[Collision] = []
        for unit in sources:
            for definition in unit:
                previous = merged.get(definition.name)
                if previous is not None:
                    collisions.append(Collision(definition.name, previous, definition))
                    log.debug(
                        "%s redefined: %r (%s) replaces %r (%s)",
                        definition.name,
                        definition.raw_value, definition.source or "?",
                        previous.raw_value, previous.source or "?",
                    )
                merged[definition.name] = definition
        registry = cls(merged, collisions=collisions)
        trace(
            "registry", "v%d: %d names, %d collisions",
            registry.version, len(registry), len(collisions),
        )
        return registry

    # ── Lookups ──────────────────────────────────────────────────────────────
    def lookup_exact(self, name: str) -> Optional[VariableDefinition]:
        return self._by_name.get(name)

    def lookup_by_prefix(self, prefix: str) -> tuple[VariableDefinition, ...]:
        """Does: Case-sensitive prefix match on the full name (sigil included)."""
        return tuple(d for n, d in self._by_name.items() if n.startswith(prefix))

    def names(self) -> tuple[str, ...]:
        return tuple(self._by_name)

    def definitions(self) -> tuple[VariableDefinition, ...]:
        return tuple(self._by_name.values())

    # ── Diagnostics ──────────────────────────────────────────────────────────
    @property
    def collisions(self) -> tuple[Collision, ...]:
        return self._collisions

    @property
    def collision_count(self) -> int:
        return len(self._collisions)

    @property
    def version(self) -> int:
        return self._version

    # ── Container protocol ───────────────────────────────────────────────────
    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self) -> Iterator[VariableDefinition]:
        return iter(self._by_name.values())

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Registry):
            return NotImplemented
        return tuple(self._by_name.items()) == tuple(other._by_name.items())

    def __hash__(self) -> int:
        return hash(tuple(self._by_name.items()))

    def __repr__(self) -> str:
        return f"Registry(version={self._version}, size={len(self)}, collisions={self.collision_count})"


def build(sources: Iterable[Iterable[VariableDefinition]]) -> Registry:
    """Module-level alias for Registry.build."""
    return Registry.build(sources)
