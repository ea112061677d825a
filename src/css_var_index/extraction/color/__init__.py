"""
color.
=====

Does: Color resolution helpers for custom-property values.
Used By: Variable parser, data types, host adapters.
Returns: Pure functions; no side effects.
"""

from .normalize import RGB, normalize_hex, normalize_rgb, parse_rgb_triplet

__all__ = [
    "RGB",
    "normalize_rgb",
    "normalize_hex",
    "parse_rgb_triplet",
]
