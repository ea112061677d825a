# src/css_var_index/discovery.py
from __future__ import annotations

"""
discovery.py

Does: Enumerate candidate stylesheet files under a root directory using
      include/exclude globs and a result-count cap.
Returns: Sorted list of Paths (deterministic order = deterministic merge order).
Used by: Orchestrator.index_workspace, CLI.
"""

import fnmatch
import logging
from collections.abc import Iterable
from pathlib import Path

__all__ = ["is_excluded", "discover_files"]

log = logging.getLogger(__name__)


def is_excluded(relative: str, exclude: Iterable[str]) -> bool:
    """Does: Glob-match a root-relative POSIX path against exclusion patterns."""
    # "/" + rel lets "**/node_modules/**" also hit a top-level node_modules
    forms = (relative, "/" + relative)
    return any(fnmatch.fnmatchcase(f, pat) for pat in exclude for f in forms)


def discover_files(
    root: str | Path,
    include: Iterable[str] = ("**/*.css",),
    exclude: Iterable[str] = ("**/node_modules/**",),
    max_files: int = 100,
) -> list[Path]:
    root_path = Path(root).resolve()
    if not root_path.is_dir():
        log.warning("Discovery root is not a directory: %s", root_path)
        return []

    exclude = tuple(exclude)
    found: set[Path] = set()
    for pattern in include:
        for p in root_path.glob(pattern):
            if not p.is_file():
                continue
            if is_excluded(p.relative_to(root_path).as_posix(), exclude):
                continue
            found.add(p)

    files = sorted(found)
    if len(files) > max_files:
        log.info("Discovery capped at %d of %d files under %s", max_files, len(files), root_path)
        files = files[:max_files]
    return files
