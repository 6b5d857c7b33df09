"""Pure query operations over an in-memory language catalog."""

from __future__ import annotations

from types import MappingProxyType
from typing import Sequence

from models import Language, Stats


class EmptyCatalog(RuntimeError):
    """Statistics were requested for a catalog with no records."""


def list_all(languages: Sequence[Language]) -> list[Language]:
    return list(languages)


def search_by_name(languages: Sequence[Language], query: str) -> list[Language]:
    """Return languages whose name contains query, ignoring case.

    An empty query matches every language.
    """
    needle = query.lower()
    return [lang for lang in languages if needle in lang.name.lower()]


def filter_by_year(languages: Sequence[Language], year: int) -> list[Language]:
    return [lang for lang in languages if lang.year == year]


def filter_by_creator(languages: Sequence[Language], query: str) -> list[Language]:
    """Return languages with at least one creator containing query, ignoring case."""
    needle = query.lower()
    return [
        lang
        for lang in languages
        if any(needle in creator.lower() for creator in lang.creators)
    ]


def compute_stats(languages: Sequence[Language]) -> Stats:
    """Summarize the catalog: size, earliest/latest language, paradigm counts.

    Ties on year resolve to the first language in catalog order, both for
    earliest and latest. A paradigm tag listed twice on one language is
    counted once for that language.

    Raises:
        EmptyCatalog: languages is empty.
    """
    if not languages:
        raise EmptyCatalog("Cannot compute statistics for an empty catalog")

    # min() and max() both keep the first of equal keys.
    earliest = min(languages, key=lambda lang: lang.year)
    latest = max(languages, key=lambda lang: lang.year)

    paradigm_counts: dict[str, int] = {}
    for lang in languages:
        for tag in dict.fromkeys(lang.paradigm):
            paradigm_counts[tag] = paradigm_counts.get(tag, 0) + 1

    return Stats(
        total=len(languages),
        earliest=earliest,
        latest=latest,
        paradigm_counts=MappingProxyType(paradigm_counts),
    )
