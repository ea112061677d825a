# css_var_index/extraction/general/types.py
from __future__ import annotations

"""
types.py.

Does: Define the value records shared by parser, registry and matchers:
variable definitions, usage spans and completion contexts.
"""

from dataclasses import dataclass
from enum import Enum

from css_var_index.extraction.color.normalize import normalize_hex

CanonicalColor = str


@dataclass(frozen=True)
class VariableDefinition:
    """
    One `--name: value;` declaration.

    `color` is either the verbatim `/* #hex */` annotation or the normalized
    RGB triplet; None means "no swatch", never an error.
    """

    name: str
    raw_value: str
    color: CanonicalColor | None = None
    source: str | None = None

    @property
    def canonical_color(self) -> CanonicalColor | None:
        """Does: Return color as #RRGGBB uppercase (3-digit annotations expanded)."""
        if self.color is None:
            return None
        return normalize_hex(self.color)


@dataclass(frozen=True)
class Usage:
    start: int
    end: int
    name: str
    color: CanonicalColor

    @property
    def span(self) -> tuple[int, int]:
        return self.start, self.end


class CompletionKind(str, Enum):
    VALUE_REFERENCE = "value_reference"  # var(--partial
    BARE_NAME = "bare_name"  # --partial


@dataclass(frozen=True)
class CompletionContext:
    kind: CompletionKind
    partial: str
    start: int
    end: int

    @property
    def span(self) -> tuple[int, int]:
        """Offsets of the partial identifier to replace on acceptance."""
        return self.start, self.end


__all__ = [
    "CanonicalColor",
    "VariableDefinition",
    "Usage",
    "CompletionKind",
    "CompletionContext",
]

__docformat__ = "google"
