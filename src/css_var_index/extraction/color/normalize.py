"""
normalize.py
============

Does: Turn CSS color-ish values into the canonical `#RRGGBB` (uppercase) form:
      bare `r, g, b` triplets (the common "opacity channel" custom-property
      idiom) and `#RGB`/`#RRGGBB` hex codes.
Used By: Variable parser (fallback color), VariableDefinition.canonical_color.
Returns: Canonical hex string or None; never raises for str input.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

import webcolors

__all__ = ["RGB", "normalize_rgb", "normalize_hex", "parse_rgb_triplet"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]

# Anchored both ends; applied to the trimmed value only.
_TRIPLET_RE = re.compile(r"^([0-9]+)\s*,\s*([0-9]+)\s*,\s*([0-9]+)$", re.ASCII)
_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$", re.ASCII)


def parse_rgb_triplet(value: str) -> Optional[RGB]:
    """Does: Parse `r, g, b` into an int triple; None on shape mismatch or out-of-range."""
    if not isinstance(value, str):
        return None
    m = _TRIPLET_RE.match(value.strip())
    if not m:
        return None
    r, g, b = (int(c) for c in m.groups())
    if not all(0 <= v <= 255 for v in (r, g, b)):
        return None
    return r, g, b


def normalize_rgb(value: str) -> Optional[str]:
    """
    Does: Convert a comma-separated RGB triplet into `#RRGGBB`.

    Example:
        >>> normalize_rgb("167, 79, 249")
        '#A74FF9'
    """
    rgb = parse_rgb_triplet(value)
    if rgb is None:
        return None
    return webcolors.rgb_to_hex(rgb).upper()


def normalize_hex(value: str) -> Optional[str]:
    """Does: Expand/uppercase a `#RGB` or `#RRGGBB` code; None when it is neither."""
    if not isinstance(value, str):
        return None
    candidate = value.strip()
    if not _HEX_RE.match(candidate):
        return None
    return webcolors.normalize_hex(candidate).upper()
