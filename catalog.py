"""Catalog loading: locate languages.json and parse it into Language records."""

from __future__ import annotations

import json
import logging
import os
import sys
from json import JSONDecodeError
from pathlib import Path
from typing import Any, Iterable

from platformdirs import user_data_path

from models import Language

LOGGER = logging.getLogger(__name__)

APP_NAME = "kapa"
DATA_FILENAME = "languages.json"
SYSTEM_DATA_DIR = Path("/usr/local/share") / APP_NAME

_MAX_YEAR = 2**32 - 1
_REQUIRED_KEYS = ("name", "year", "creators", "paradigm", "typing", "influenced_by")
_STRING_FIELDS = ("name", "typing")
_LIST_FIELDS = ("creators", "paradigm", "influenced_by")


class DataNotFound(RuntimeError):
    """No candidate location held a readable catalog file."""

    def __init__(self, paths: Iterable[Path]) -> None:
        self.paths = tuple(paths)
        searched = "\n- ".join(str(p) for p in self.paths)
        super().__init__(
            f"Could not find {DATA_FILENAME} in any of these locations:\n- {searched}\n\n"
            "Please ensure the data file exists in one of these paths"
        )


class MalformedData(RuntimeError):
    """A readable catalog file did not parse into Language records."""


def candidate_paths(data_file: str | Path | None = None) -> list[Path]:
    """Return catalog locations in probe order.

    An explicit data_file (or KAPA_DATA_FILE) is tried first; after it come
    the working directory, the program's own directory, the system-wide
    share directory and the user's local data directory.
    """
    override = data_file or os.getenv("KAPA_DATA_FILE")

    paths: list[Path] = []
    if override:
        paths.append(Path(override))
    paths.extend([
        Path(DATA_FILENAME),
        Path(sys.argv[0]).resolve().parent / DATA_FILENAME,
        SYSTEM_DATA_DIR / DATA_FILENAME,
        user_data_path(APP_NAME, appauthor=False) / DATA_FILENAME,
    ])
    return paths


def load_languages(paths: Iterable[str | Path] | None = None) -> list[Language]:
    """Load the catalog from the first readable candidate path.

    The first file that can be read commits the loader: if it fails to
    parse, MalformedData is raised and later candidates are never tried.

    Args:
        paths: Locations to probe, in order. Defaults to candidate_paths().

    Raises:
        DataNotFound: none of the paths could be read.
        MalformedData: the first readable file is not a valid catalog.
    """
    tried = [Path(p) for p in paths] if paths is not None else candidate_paths()

    for path in tried:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.debug("catalog: skipping %s: %s", path, exc)
            continue

        languages = parse_languages(text, source=str(path))
        LOGGER.info("catalog: loaded %s languages from %s", len(languages), path)
        return languages

    raise DataNotFound(tried)


def parse_languages(text: str, source: str = "<string>") -> list[Language]:
    """Parse catalog JSON text into Language records, preserving file order."""
    try:
        payload = json.loads(text)
    except JSONDecodeError as exc:
        raise MalformedData(f"Failed to parse JSON data in {source}: {exc}") from exc

    if not isinstance(payload, list):
        raise MalformedData(
            f"Unexpected catalog shape in {source}: expected a list, got {type(payload).__name__}"
        )

    return [_parse_language(item, index, source) for index, item in enumerate(payload)]


def _parse_language(item: Any, index: int, source: str) -> Language:
    if not isinstance(item, dict):
        raise MalformedData(f"{source}: record {index} is not an object")

    missing = [key for key in _REQUIRED_KEYS if key not in item]
    if missing:
        raise MalformedData(f"{source}: record {index} is missing required keys: {missing}")

    for key in _STRING_FIELDS:
        if not isinstance(item[key], str):
            raise MalformedData(f"{source}: record {index} field '{key}' must be a string")

    year = item["year"]
    # bool is an int subclass; JSON true/false is not a year.
    if isinstance(year, bool) or not isinstance(year, int) or not 0 <= year <= _MAX_YEAR:
        raise MalformedData(
            f"{source}: record {index} field 'year' must be a non-negative integer"
        )

    lists = {key: _as_str_tuple(item[key], key, index, source) for key in _LIST_FIELDS}

    return Language(
        name=item["name"],
        year=year,
        creators=lists["creators"],
        paradigm=lists["paradigm"],
        typing=item["typing"],
        influenced_by=lists["influenced_by"],
    )


def _as_str_tuple(value: Any, key: str, index: int, source: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise MalformedData(
            f"{source}: record {index} field '{key}' must be a list of strings"
        )
    return tuple(value)
