"""
parser.
======

Does: Extract custom-property definitions from CSS text.
Exports: iter_definitions, parse, parse_file.
"""

from .variables import ANNOTATION_RE, NAME_RE, iter_definitions, parse, parse_file

__all__ = ["ANNOTATION_RE", "NAME_RE", "iter_definitions", "parse", "parse_file"]
