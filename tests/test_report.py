from __future__ import annotations

from models import Language, Stats
from report import EMPTY_TABLE_TEXT, render_languages, render_stats

RUST = Language(
    name="Rust",
    year=2010,
    creators=("Graydon Hoare",),
    paradigm=("functional", "imperative"),
    typing="static, strong",
    influenced_by=("OCaml",),
)

GO = Language(
    name="Go",
    year=2009,
    creators=("Robert Griesemer", "Rob Pike", "Ken Thompson"),
    paradigm=("concurrent", "imperative"),
    typing="static, strong",
    influenced_by=("C",),
)


def test_render_languages_header_and_rows() -> None:
    lines = render_languages([RUST, GO]).splitlines()

    assert [cell.strip() for cell in lines[0].split(" | ")] == [
        "Name",
        "Year",
        "Creators",
        "Paradigm",
        "Typing",
    ]
    assert set(lines[1]) <= {"-", "+"}
    assert len(lines) == 4
    assert lines[2].startswith("Rust")
    assert lines[3].startswith("Go")


def test_render_languages_joins_list_cells() -> None:
    row = render_languages([GO]).splitlines()[2]
    cells = [cell.strip() for cell in row.split(" | ")]

    assert cells == [
        "Go",
        "2009",
        "Robert Griesemer, Rob Pike, Ken Thompson",
        "concurrent, imperative",
        "static, strong",
    ]


def test_render_languages_columns_are_aligned() -> None:
    lines = render_languages([RUST, GO]).splitlines()
    separator_positions = [i for i, ch in enumerate(lines[1]) if ch == "+"]

    for line in (lines[0], lines[2], lines[3]):
        pipes = [i for i, ch in enumerate(line) if ch == "|"]
        assert pipes == separator_positions


def test_render_languages_empty_sequence() -> None:
    assert render_languages([]) == EMPTY_TABLE_TEXT


def test_render_stats_summary_lines() -> None:
    stats = Stats(
        total=2,
        earliest=GO,
        latest=RUST,
        paradigm_counts={"functional": 1, "imperative": 2, "concurrent": 1},
    )

    lines = render_stats(stats).splitlines()

    assert lines[:6] == [
        "Programming Language Statistics:",
        "- Total languages: 2",
        "- Earliest language: Go (2009)",
        "- Latest language: Rust (2010)",
        "",
        "Paradigm Counts:",
    ]


def test_render_stats_paradigm_table_sorted_by_count_then_name() -> None:
    stats = Stats(
        total=2,
        earliest=GO,
        latest=RUST,
        paradigm_counts={"functional": 1, "imperative": 2, "concurrent": 1},
    )

    table = render_stats(stats).splitlines()[6:]
    rows = [[cell.strip() for cell in line.split(" | ")] for line in table[2:]]

    assert [cell.strip() for cell in table[0].split(" | ")] == ["Paradigm", "Count"]
    assert rows == [["imperative", "2"], ["concurrent", "1"], ["functional", "1"]]
