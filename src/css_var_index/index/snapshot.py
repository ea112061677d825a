# src/css_var_index/index/snapshot.py
from __future__ import annotations

"""
snapshot.py

Does: Own the "current" Registry for a long-lived host and swap it atomically
      when a rebuild completes.
Used by: Host integrations that rebuild on file changes.
"""

import logging
import threading
from typing import Optional

from .registry import Registry

__all__ = ["RegistryHolder"]

log = logging.getLogger(__name__)


class RegistryHolder:
    """Readers grab `current` once and keep using that snapshot; writers `publish`."""

    def __init__(self, initial: Optional[Registry] = None) -> None:
        self._lock = threading.Lock()
        self._current = initial if initial is not None else Registry()

    @property
    def current(self) -> Registry:
        with self._lock:
            return self._current

    def publish(self, registry: Registry) -> Registry:
        """Does: Replace the current snapshot; returns the one it replaced."""
        with self._lock:
            previous, self._current = self._current, registry
        log.debug("Published %r (replaced v%d)", registry, previous.version)
        return previous

    def is_stale(self, registry: Registry) -> bool:
        return registry.version != self.current.version
