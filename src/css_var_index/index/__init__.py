"""
index.
=====

Does: Immutable variable registry, its build/merge policy, opt-in alias
      resolution and a holder for publishing fresh snapshots.
"""

from .registry import Collision, Registry, build
from .resolve import referenced_name, resolve_color, resolve_references
from .snapshot import RegistryHolder

__all__ = [
    "Collision",
    "Registry",
    "build",
    "referenced_name",
    "resolve_color",
    "resolve_references",
    "RegistryHolder",
]
