"""
general.
=======

Shared data types and utilities used across parsing, indexing and matching.

Exports:
- VariableDefinition, Usage, CompletionContext, CompletionKind.
"""

from .types import CanonicalColor, CompletionContext, CompletionKind, Usage, VariableDefinition

__all__ = [
    "CanonicalColor",
    "VariableDefinition",
    "Usage",
    "CompletionKind",
    "CompletionContext",
]
