# src/css_var_index/matching/completion.py
from __future__ import annotations

"""
completion.py

Does: Decide whether the text before the cursor is a variable-name completion
      position (`var(--par` or a bare `--par`) and hand back the candidates
      plus the replacement span of the partial identifier.
Returns: CompletionContext | None, CompletionResult | None.
Used by: Completion adapters, CLI.
"""

import re
from dataclasses import dataclass
from typing import Optional

from css_var_index.extraction.general.types import (
    CompletionContext,
    CompletionKind,
    VariableDefinition,
)
from css_var_index.extraction.general.utils.log import trace
from css_var_index.index.registry import Registry

__all__ = [
    "CompletionResult",
    "classify",
    "candidates",
    "complete",
]

# Both anchored at the end: the cursor must sit right after the partial name.
_VALUE_REFERENCE_RE = re.compile(r"var\(\s*(--[\w-]*)$", re.ASCII)
_BARE_NAME_RE = re.compile(r"(?<![\w-])(--[\w-]*)$", re.ASCII)


@dataclass(frozen=True)
class CompletionResult:
    context: CompletionContext
    candidates: tuple[VariableDefinition, ...]


def classify(preceding_text: str) -> Optional[CompletionContext]:
    """
    Does: Match `var(--partial` (spaces allowed after the paren) first, then a bare `--partial`.

    Examples:
        >>> classify("background: var(--pri").kind
        <CompletionKind.VALUE_REFERENCE: 'value_reference'>
        >>> classify("var(--pri)") is None
        True
    """
    m = _VALUE_REFERENCE_RE.search(preceding_text)
    kind = CompletionKind.VALUE_REFERENCE
    if m is None:
        m = _BARE_NAME_RE.search(preceding_text)
        kind = CompletionKind.BARE_NAME
    if m is None:
        return None

    context = CompletionContext(kind=kind, partial=m.group(1), start=m.start(1), end=m.end(1))
    trace("completion", "%s %r at %d:%d", kind.value, context.partial, context.start, context.end)
    return context


def candidates(context: CompletionContext, registry: Registry) -> tuple[VariableDefinition, ...]:
    """Does: Full listing; narrowing by the partial is left to rank_candidates / the host."""
    return registry.definitions()


def complete(preceding_text: str, registry: Registry) -> Optional[CompletionResult]:
    context = classify(preceding_text)
    if context is None:
        return None
    return CompletionResult(context=context, candidates=candidates(context, registry))
