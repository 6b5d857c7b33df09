"""Shared typed models for the language catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True, slots=True)
class Language:
    """One catalog entry, as loaded from languages.json."""

    name: str
    year: int
    creators: tuple[str, ...]
    paradigm: tuple[str, ...]
    typing: str
    influenced_by: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Stats:
    """Aggregate view over a non-empty catalog."""

    total: int
    earliest: Language
    latest: Language
    paradigm_counts: Mapping[str, int]
