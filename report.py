"""Plain-text rendering of catalog query results.

Two views are produced:

  language table: one row per language with Name, Year, Creators, Paradigm
                  and Typing columns; list fields are joined with ", ".

  statistics:     total count, earliest/latest language, then a
                  Paradigm / Count table sorted most common first.

Both return strings; printing is left to the caller.
"""

from __future__ import annotations

from typing import Sequence

from models import Language, Stats

# ---------------------------------------------------------------------------
# Output schemas
# ---------------------------------------------------------------------------

LANGUAGE_COLUMNS = ["Name", "Year", "Creators", "Paradigm", "Typing"]

PARADIGM_COLUMNS = ["Paradigm", "Count"]

EMPTY_TABLE_TEXT = "(no entries)"

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _format_table(columns: list[str], rows: list[list[str]]) -> str:
    if not rows:
        return EMPTY_TABLE_TEXT
    widths = [
        max(len(col), *(len(row[i]) for row in rows)) for i, col in enumerate(columns)
    ]
    lines = [
        " | ".join(col.ljust(widths[i]) for i, col in enumerate(columns)).rstrip(),
        "-+-".join("-" * w for w in widths),
    ]
    for row in rows:
        lines.append(" | ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip())
    return "\n".join(lines)


def _language_row(lang: Language) -> list[str]:
    return [
        lang.name,
        str(lang.year),
        ", ".join(lang.creators),
        ", ".join(lang.paradigm),
        lang.typing,
    ]


# ---------------------------------------------------------------------------
# Public renderers
# ---------------------------------------------------------------------------


def render_languages(languages: Sequence[Language]) -> str:
    """Render languages as a table, in the order given."""
    return _format_table(LANGUAGE_COLUMNS, [_language_row(lang) for lang in languages])


def render_stats(stats: Stats) -> str:
    """Render the statistics summary followed by the paradigm table."""
    ranked = sorted(stats.paradigm_counts.items(), key=lambda kv: (-kv[1], kv[0]))
    paradigm_rows = [[tag, str(count)] for tag, count in ranked]

    lines = [
        "Programming Language Statistics:",
        f"- Total languages: {stats.total}",
        f"- Earliest language: {stats.earliest.name} ({stats.earliest.year})",
        f"- Latest language: {stats.latest.name} ({stats.latest.year})",
        "",
        "Paradigm Counts:",
        _format_table(PARADIGM_COLUMNS, paradigm_rows),
    ]
    return "\n".join(lines)
