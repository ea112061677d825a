# src/css_var_index/extraction/parser/variables.py
from __future__ import annotations

"""
variables.py

Does: Single-pass extraction of custom-property declarations (`--name: value;`
      with an optional trailing `/* #hex */` annotation) from one unit of CSS
      text.
Returns: VariableDefinition records in textual order (lazy or eager).
Used by: Indexing orchestrator, CLI, tests.
"""

import logging
import re
from collections.abc import Iterator
from pathlib import Path
from typing import Optional

from css_var_index.extraction.color.normalize import normalize_rgb
from css_var_index.extraction.general.types import VariableDefinition
from css_var_index.extraction.general.utils.log import trace

__all__ = [
    "NAME_RE",
    "ANNOTATION_RE",
    "iter_definitions",
    "parse",
    "parse_file",
]

log = logging.getLogger(__name__)

# A name must start an identifier: `.btn--primary:hover` is a selector, not a declaration.
NAME_RE = re.compile(r"(?<![\w-])(--[\w-]+)\s*:", re.ASCII)
# Values end at ';' or at the closing '}' of the block; '{' means we were in a selector.
_STOP_RE = re.compile(r"[;{}]")
ANNOTATION_RE = re.compile(
    r"\s*/\*\s*(#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{3}))\s*\*/",
    re.ASCII,
)


def _clip(text: str, max_text_length: Optional[int], source: Optional[str]) -> str:
    if max_text_length is None or len(text) <= max_text_length:
        return text
    log.debug(
        "Truncating %s from %d to %d characters before scanning",
        source or "<text>", len(text), max_text_length,
    )
    return text[:max_text_length]


def iter_definitions(
    text: str,
    *,
    source: Optional[str] = None,
    max_matches: Optional[int] = None,
    max_text_length: Optional[int] = None,
) -> Iterator[VariableDefinition]:
    """
    Does: Yield one VariableDefinition per declaration, first to last.

    The hex annotation (only after a ';') is kept verbatim; otherwise the
    trimmed value is tried as an `r, g, b` triplet; otherwise color stays None.
    Declarations with an empty value are skipped.

    The next terminator position is reused across names, so a run of
    unterminated `--x:` fragments costs one scan of the text, not one per name.
    """
    scanned = _clip(text, max_text_length, source)
    end = len(scanned)
    pos = 0
    stop = -1
    emitted = 0

    while max_matches is None or emitted < max_matches:
        m = NAME_RE.search(scanned, pos)
        if m is None:
            return
        value_start = m.end()
        if stop < value_start:
            s = _STOP_RE.search(scanned, value_start)
            stop = s.start() if s else end
        pos = value_start

        terminator = scanned[stop] if stop < end else ""
        if terminator not in (";", "}"):
            continue
        raw_value = scanned[value_start:stop].strip()
        if not raw_value:
            continue

        color = None
        if terminator == ";":
            pos = stop + 1
            a = ANNOTATION_RE.match(scanned, pos)
            if a is not None:
                color = a.group(1)
                pos = a.end()
        else:
            pos = stop
        if color is None:
            color = normalize_rgb(raw_value)

        trace("parser", "%s = %r -> %s", m.group(1), raw_value, color)
        emitted += 1
        yield VariableDefinition(
            name=m.group(1),
            raw_value=raw_value,
            color=color,
            source=source,
        )


def parse(
    text: str,
    *,
    source: Optional[str] = None,
    max_matches: Optional[int] = None,
    max_text_length: Optional[int] = None,
) -> tuple[VariableDefinition, ...]:
    """Does: Eager form of iter_definitions (restartable, deterministic)."""
    return tuple(
        iter_definitions(
            text,
            source=source,
            max_matches=max_matches,
            max_text_length=max_text_length,
        )
    )


def parse_file(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    max_matches: Optional[int] = None,
    max_text_length: Optional[int] = None,
) -> tuple[VariableDefinition, ...]:
    """
    Does: Read and parse one file.
    Raises: OSError / UnicodeDecodeError; the orchestrator turns these into
            an empty contribution.
    """
    p = Path(path)
    text = p.read_text(encoding=encoding)
    return parse(
        text,
        source=str(p),
        max_matches=max_matches,
        max_text_length=max_text_length,
    )
