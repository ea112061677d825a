# tests/test_parser.py
"""Parser tests: declaration extraction, color policy, ordering and bounds."""

from __future__ import annotations

import time

import pytest

from css_var_index.extraction.general.types import VariableDefinition
from css_var_index.extraction.parser import iter_definitions, parse, parse_file

SAMPLE = (
    "--color-primary-opacity: 167, 79, 249; "
    "--color-primary: rgb(var(--color-primary-opacity));"
)

STYLESHEET = """
:root {
  --color-primary-opacity: 167, 79, 249;
  --color-primary: rgb(var(--color-primary-opacity)); /* #A74FF9 */
  --gap : 4px ;
  --accent: 10, 10, 10; /* #112233 */
}

.button {
  color: var(--color-primary);
  margin: var(--gap);
}
"""


# ──────────────────────────────────────────────────────────────────────────────
# Extraction
# ──────────────────────────────────────────────────────────────────────────────
def test_parse_sample_yields_two_definitions_without_transitive_color():
    assert parse(SAMPLE) == (
        VariableDefinition("--color-primary-opacity", "167, 79, 249", "#A74FF9"),
        VariableDefinition("--color-primary", "rgb(var(--color-primary-opacity))", None),
    )


def test_parse_stylesheet_order_and_values():
    defs = parse(STYLESHEET, source="theme.css")
    assert [d.name for d in defs] == [
        "--color-primary-opacity",
        "--color-primary",
        "--gap",
        "--accent",
    ]
    by_name = {d.name: d for d in defs}
    assert by_name["--gap"].raw_value == "4px"
    assert by_name["--gap"].color is None
    assert by_name["--color-primary"].color == "#A74FF9"
    assert all(d.source == "theme.css" for d in defs)


def test_usage_sites_are_not_definitions():
    defs = parse("a { color: var(--x); } b { --y: 1, 2, 3; }")
    assert [d.name for d in defs] == ["--y"]


# ──────────────────────────────────────────────────────────────────────────────
# Declaration boundaries
# ──────────────────────────────────────────────────────────────────────────────
BEM_SHEET = ":root { --primary: 1, 2, 3; }\n.btn--primary:hover { color: red; }\n"


def test_bem_selector_is_not_a_declaration():
    assert parse(BEM_SHEET) == (VariableDefinition("--primary", "1, 2, 3", "#010203"),)


@pytest.mark.parametrize(
    "css",
    [
        ".card--wide:hover { color: red; }",
        "a.nav--item:focus-visible { outline: none; }",
        "#id--x:not(.y) { top: 0; }",
    ],
)
def test_double_hyphen_inside_selector_is_ignored(css):
    assert parse(css) == ()


def test_last_declaration_without_semicolon_ends_at_brace():
    defs = parse(":root { --a: 1, 2, 3 }\n.b { color: red; }")
    assert defs == (VariableDefinition("--a", "1, 2, 3", "#010203"),)


def test_value_never_crosses_into_next_rule():
    defs = parse(":root { --a: 4px }\n.b { --c: 5, 6, 7; }")
    assert [(d.name, d.raw_value) for d in defs] == [("--a", "4px"), ("--c", "5, 6, 7")]


def test_annotation_after_closing_brace_is_not_attached():
    (d,) = parse(":root { --a: red } /* #000000 */")
    assert d.color is None


@pytest.mark.parametrize(
    "css",
    [
        "--a: 1, 2, 3",  # runs to end of text
        "--a: 1, 2 { color: red; }",  # reaches a block opener
    ],
)
def test_unterminated_value_is_not_a_declaration(css):
    assert parse(css) == ()


@pytest.mark.parametrize("css", ["--a: ;", "--a:;", ":root { --a: }"])
def test_empty_value_is_skipped(css):
    assert parse(css) == ()


def test_empty_value_does_not_hide_the_next_declaration():
    defs = parse("--a: ; --b: 1, 2, 3;")
    assert [d.name for d in defs] == ["--b"]


# ──────────────────────────────────────────────────────────────────────────────
# Color policy
# ──────────────────────────────────────────────────────────────────────────────
def test_hex_annotation_beats_rgb_value():
    (d,) = parse("--accent: 10, 10, 10; /* #112233 */")
    assert d.color == "#112233"


@pytest.mark.parametrize(
    "css,expect",
    [
        ("--a: red; /* #abcDEF */", "#abcDEF"),
        ("--a: red; /* #fff */", "#fff"),
        ("--a: red;/*#000*/", "#000"),
        ("--a: red;\n   /*   #123456   */", "#123456"),
    ],
)
def test_hex_annotation_kept_verbatim(css, expect):
    (d,) = parse(css)
    assert d.color == expect


def test_canonical_color_expands_short_annotation():
    (d,) = parse("--a: red; /* #fff */")
    assert d.canonical_color == "#FFFFFF"


@pytest.mark.parametrize(
    "css",
    [
        "--a: red; /* #abcd */",
        "--a: red; /* #12345 */",
        "--a: red; /* 112233 */",
        "--a: red; /* #1122334 */",
    ],
)
def test_malformed_annotation_is_ignored(css):
    (d,) = parse(css)
    assert d.color is None


def test_annotation_must_follow_the_semicolon():
    defs = parse("--a: 1, 2, 3; color: red; /* #000000 */")
    assert defs[0].color == "#010203"


def test_out_of_range_rgb_leaves_color_absent():
    (d,) = parse("--bad: 256, 0, 0;")
    assert d.raw_value == "256, 0, 0"
    assert d.color is None


# ──────────────────────────────────────────────────────────────────────────────
# Laziness, determinism, bounds
# ──────────────────────────────────────────────────────────────────────────────
def test_iter_definitions_is_lazy_and_ordered():
    it = iter_definitions(SAMPLE)
    assert next(it).name == "--color-primary-opacity"
    assert next(it).name == "--color-primary"
    with pytest.raises(StopIteration):
        next(it)


def test_parse_is_deterministic():
    assert parse(STYLESHEET) == parse(STYLESHEET)


def test_max_matches_bounds_output():
    assert len(parse(STYLESHEET, max_matches=2)) == 2


def test_max_text_length_truncates_before_scanning():
    defs = parse("--a: 1;--b: 2;", max_text_length=7)
    assert [d.name for d in defs] == ["--a"]


def test_empty_and_plain_text():
    assert parse("") == ()
    assert parse("body { color: red; }") == ()


@pytest.mark.parametrize(
    "css",
    [
        "--a:" * 50_000,
        ":root { " + "--a: b " * 50_000,
        "--" + "a" * 200_000,
    ],
)
def test_pathological_input_scans_in_linear_time(css):
    t0 = time.perf_counter()
    assert parse(css) == ()
    assert time.perf_counter() - t0 < 2.0


# ──────────────────────────────────────────────────────────────────────────────
# Files
# ──────────────────────────────────────────────────────────────────────────────
def test_parse_file_sets_source(tmp_path):
    f = tmp_path / "vars.css"
    f.write_text(":root { --x: 1, 2, 3; }", encoding="utf-8")
    (d,) = parse_file(f)
    assert d.source == str(f)
    assert d.color == "#010203"


def test_parse_file_missing_raises(tmp_path):
    with pytest.raises(OSError):
        parse_file(tmp_path / "missing.css")
