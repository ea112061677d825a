"""
host.
====

Does: Editor-facing adapters. The core pushes decorations and completion items
      through the DecorationSink / CompletionSink protocols.
"""

from .completions import (
    CompletionItem,
    build_completion_items,
    color_preview_markdown,
    provide_completions,
    to_completion_item,
)
from .decorations import Decoration, SwatchStyle, build_decorations, decorate
from .protocols import CompletionSink, DecorationSink

__all__ = [
    "CompletionSink",
    "DecorationSink",
    "CompletionItem",
    "build_completion_items",
    "color_preview_markdown",
    "provide_completions",
    "to_completion_item",
    "Decoration",
    "SwatchStyle",
    "build_decorations",
    "decorate",
]
