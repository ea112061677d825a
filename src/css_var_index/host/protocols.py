"""
protocols.py.

Does: Define the narrow capability interfaces an editor host implements so the
core can push decorations and completion items outward without knowing the
host's object model.
Used by: host.decorations, host.completions.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .completions import CompletionItem
    from .decorations import Decoration


@runtime_checkable
class DecorationSink(Protocol):
    """Accepts the full list of swatch decorations for one buffer (replacing any previous list)."""

    def set_decorations(self, decorations: Sequence[Decoration]) -> None: ...


@runtime_checkable
class CompletionSink(Protocol):
    """Accepts completion items plus the span the accepted item replaces."""

    def offer(self, items: Sequence[CompletionItem], replace: tuple[int, int]) -> None: ...


__all__ = ["DecorationSink", "CompletionSink"]
