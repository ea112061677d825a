# src/css_var_index/matching/ranking.py
from __future__ import annotations

"""
ranking.py

Does: Optional host-side narrowing of completion candidates by the typed
      partial: exact-prefix hits first, then fuzzy hits scored with rapidfuzz.
Used by: Completion adapters, CLI `complete --rank`.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from rapidfuzz import fuzz

from css_var_index.extraction.general.types import VariableDefinition

__all__ = ["DEFAULT_SCORE_CUTOFF", "rank_candidates"]

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
DEFAULT_SCORE_CUTOFF = 70.0


def _strip_sigil(name: str) -> str:
    return name[2:] if name.startswith("--") else name


def rank_candidates(
    partial: str,
    definitions: Iterable[VariableDefinition],
    *,
    limit: Optional[int] = None,
    score_cutoff: float = DEFAULT_SCORE_CUTOFF,
) -> list[VariableDefinition]:
    """
    Does: Order candidates for a typed partial.
    Returns: Prefix matches (input order), then fuzzy matches by descending
             partial_ratio (ties keep input order); at most `limit` items.
    """
    pool = list(definitions)
    needle = _strip_sigil(partial)
    if not needle:
        return pool[:limit] if limit is not None else pool

    prefixed = [d for d in pool if d.name.startswith(partial)]
    scored: list[tuple[float, int, VariableDefinition]] = []
    for idx, d in enumerate(pool):
        if d.name.startswith(partial):
            continue
        score = fuzz.partial_ratio(needle, _strip_sigil(d.name))
        if score >= score_cutoff:
            scored.append((score, idx, d))
    scored.sort(key=lambda t: (-t[0], t[1]))

    ranked = prefixed + [d for _, _, d in scored]
    log.debug("rank %r: %d prefix, %d fuzzy", partial, len(prefixed), len(scored))
    return ranked[:limit] if limit is not None else ranked
