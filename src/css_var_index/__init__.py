"""
css_var_index
=============

Does: Root package for the CSS custom-property index: parse stylesheets into
      variable definitions, merge them into an immutable Registry, and query it
      for colored var() usages and name completions.
Returns: The core entry points re-exported below.
Used by: Editor integrations, the `css-var-index` CLI, tests.
"""

from .extraction.color.normalize import normalize_rgb
from .extraction.general.types import CompletionContext, CompletionKind, Usage, VariableDefinition
from .extraction.orchestrator import index_sources, index_workspace
from .extraction.parser.variables import parse
from .index.registry import Registry, build
from .matching.completion import classify, complete
from .matching.usages import find_usages

__all__: list[str] = [
    "normalize_rgb",
    "parse",
    "build",
    "Registry",
    "find_usages",
    "classify",
    "complete",
    "index_sources",
    "index_workspace",
    "VariableDefinition",
    "Usage",
    "CompletionKind",
    "CompletionContext",
]
__docformat__ = "google"
