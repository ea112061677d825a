# src/css_var_index/host/completions.py
from __future__ import annotations

"""
completions.py

Does: Render completion candidates as host-neutral CompletionItems (label,
      detail = raw value, markdown color preview) and push them to a
      CompletionSink.
Used by: Editor integrations, CLI.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from css_var_index.extraction.general.types import (
    CompletionContext,
    CompletionKind,
    VariableDefinition,
)
from css_var_index.index.registry import Registry
from css_var_index.matching.completion import complete
from css_var_index.matching.ranking import rank_candidates
from .protocols import CompletionSink

__all__ = [
    "SWATCH_URL",
    "CompletionItem",
    "color_preview_markdown",
    "to_completion_item",
    "build_completion_items",
    "provide_completions",
]

log = logging.getLogger(__name__)

SWATCH_URL = "https://via.placeholder.com/10/{hex}/000000?text=+"


@dataclass(frozen=True)
class CompletionItem:
    label: str
    insert_text: str
    kind: str = "variable"
    detail: Optional[str] = None
    documentation: Optional[str] = None


def color_preview_markdown(color: str, raw_value: str) -> str:
    """Does: Swatch image + hex code + raw value, one markdown block."""
    url = SWATCH_URL.format(hex=color.lstrip("#"))
    return f"![color]({url}) `{color}`\n`{raw_value}`"


def to_completion_item(definition: VariableDefinition, kind: CompletionKind) -> CompletionItem:
    if kind is CompletionKind.BARE_NAME:
        return CompletionItem(label=definition.name, insert_text=definition.name)
    color = definition.canonical_color
    if color is None:
        return CompletionItem(
            label=definition.name,
            insert_text=definition.name,
            detail=definition.raw_value,
        )
    return CompletionItem(
        label=definition.name,
        insert_text=definition.name,
        kind="color",
        detail=definition.raw_value,
        documentation=color_preview_markdown(color, definition.raw_value),
    )


def build_completion_items(
    context: CompletionContext,
    definitions: tuple[VariableDefinition, ...] | list[VariableDefinition],
) -> list[CompletionItem]:
    """Does: One item per definition (e.g. `candidates(context, registry)`), in the given order."""
    return [to_completion_item(d, context.kind) for d in definitions]


def provide_completions(
    preceding_text: str,
    registry: Registry,
    sink: CompletionSink,
    *,
    rank: bool = False,
    limit: Optional[int] = None,
) -> bool:
    """
    Does: Classify the cursor position and, when it is a completion context,
          offer items to `sink`.
    Returns: False (nothing offered) when the cursor is not in a variable name.
    """
    result = complete(preceding_text, registry)
    if result is None:
        return False

    pool = list(result.candidates)
    if rank:
        pool = rank_candidates(result.context.partial, pool, limit=limit)
    elif limit is not None:
        pool = pool[:limit]

    items = build_completion_items(result.context, pool)
    sink.offer(items, result.context.span)
    log.debug("Offered %d items for %r", len(items), result.context.partial)
    return True
