# src/css_var_index/host/decorations.py
from __future__ import annotations

"""
decorations.py

Does: Turn Usage spans into swatch decorations (fixed-size colored box drawn
      before each `var(--name)`) and push them to a DecorationSink.
Used by: Editor integrations, CLI.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from css_var_index.index.registry import Registry
from css_var_index.matching.usages import iter_usages
from .protocols import DecorationSink

__all__ = ["SwatchStyle", "Decoration", "build_decorations", "decorate"]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SwatchStyle:
    background_color: str
    content_text: str = " "
    margin: str = "0 0 0 4px"
    width: str = "12px"
    height: str = "12px"
    border: str = "1px solid #ccc"


@dataclass(frozen=True)
class Decoration:
    start: int
    end: int
    color: str
    style: SwatchStyle = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "style", SwatchStyle(background_color=self.color))


def build_decorations(
    text: str, registry: Registry, *, max_matches: Optional[int] = None
) -> list[Decoration]:
    return [
        Decoration(u.start, u.end, u.color)
        for u in iter_usages(text, registry, max_matches=max_matches)
    ]


def decorate(
    text: str,
    registry: Registry,
    sink: DecorationSink,
    *,
    max_matches: Optional[int] = None,
) -> int:
    """Does: Recompute decorations for `text` and hand them to `sink`; returns the count."""
    decorations = build_decorations(text, registry, max_matches=max_matches)
    sink.set_decorations(decorations)
    log.debug("Pushed %d decorations (registry v%d)", len(decorations), registry.version)
    return len(decorations)
