# tests/test_matching_usages.py
"""Usage matcher: spans, color lookup, silent skips, bounds."""

from __future__ import annotations

import pytest

from css_var_index.extraction.parser import parse
from css_var_index.index import build
from css_var_index.matching import find_usages, iter_usages


@pytest.fixture
def registry():
    return build(
        [
            parse(
                "--accent: 10, 10, 10; /* #112233 */\n"
                "--gap: 4px;\n"
                "--brand: 167, 79, 249;\n"
            )
        ]
    )


def test_single_usage_span_covers_full_reference(registry):
    text = "a { color: var(--accent); }"
    (usage,) = find_usages(text, registry)
    assert text[usage.start : usage.end] == "var(--accent)"
    assert usage.span == (11, 24)
    assert usage.color == "#112233"
    assert usage.name == "--accent"


def test_unknown_name_yields_nothing():
    empty = build([])
    assert find_usages("a { color: var(--accent); }", empty) == ()


def test_uncolored_definition_is_skipped(registry):
    assert find_usages("margin: var(--gap);", registry) == ()


def test_multiple_usages_left_to_right(registry):
    text = "<div style={{ color: 'var(--brand)', border: 'var(--gap)', bg: 'var(--accent)' }} />"
    usages = find_usages(text, registry)
    assert [u.name for u in usages] == ["--brand", "--accent"]
    assert usages[0].start < usages[1].start
    assert [text[u.start : u.end] for u in usages] == ["var(--brand)", "var(--accent)"]
    assert usages[0].color == "#A74FF9"


@pytest.mark.parametrize(
    "text",
    [
        "var( --accent )",
        "var(--accent, red)",
        "var(accent)",
        "var(--accent",
        "--accent",
    ],
)
def test_non_literal_references_are_not_matched(registry, text):
    assert find_usages(text, registry) == ()


def test_adjacent_references(registry):
    text = "var(--accent)var(--accent)"
    assert [u.span for u in find_usages(text, registry)] == [(0, 13), (13, 26)]


def test_max_matches_bounds_scanned_occurrences(registry):
    text = "var(--gap) var(--accent) var(--brand)"
    assert [u.name for u in find_usages(text, registry, max_matches=2)] == ["--accent"]


def test_scan_is_read_only_and_repeatable(registry):
    text = "x: var(--accent);"
    before = registry.definitions()
    first = find_usages(text, registry)
    second = tuple(iter_usages(text, registry))
    assert first == second
    assert registry.definitions() == before


@pytest.mark.parametrize(
    "annotation,expect",
    [
        ("#fff", "#FFFFFF"),
        ("#abcDEF", "#ABCDEF"),
        ("#a1b", "#AA11BB"),
    ],
)
def test_usage_color_is_canonical_hex(annotation, expect):
    reg = build([parse(f"--a: red; /* {annotation} */")])
    (usage,) = find_usages("color: var(--a);", reg)
    assert usage.color == expect
    assert reg.lookup_exact("--a").color == annotation  # definition keeps it verbatim
