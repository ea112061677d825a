"""
matching.
========

Does: Read-only scans against a Registry snapshot: usage spans for
      decorations and completion contexts/candidates.
"""

from .completion import CompletionResult, candidates, classify, complete
from .ranking import rank_candidates
from .usages import find_usages, iter_usages

__all__ = [
    "find_usages",
    "iter_usages",
    "classify",
    "candidates",
    "complete",
    "CompletionResult",
    "rank_candidates",
]
