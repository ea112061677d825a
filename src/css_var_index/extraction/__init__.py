# css_var_index/extraction/__init__.py

"""
extraction
==========

Does: Turn raw CSS text into VariableDefinition records (parser, color
      normalization) and orchestrate a full indexing pass over many units.
Used by: Index builders, CLI, host integrations.
"""

__all__: list[str] = []
__docformat__ = "google"
