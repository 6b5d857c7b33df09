"""CLI entrypoint for kapa, the programming language information tool."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Callable

from dotenv import load_dotenv

from catalog import DataNotFound, MalformedData, candidate_paths, load_languages
from models import Language
from queries import (
    EmptyCatalog,
    compute_stats,
    filter_by_creator,
    filter_by_year,
    list_all,
    search_by_name,
)
from report import render_languages, render_stats

try:
    __version__ = version("kapa")
except PackageNotFoundError:
    # Running from a source checkout without an install.
    __version__ = "0+unknown"

LOGGER = logging.getLogger(__name__)

Handler = Callable[[list[Language], argparse.Namespace], str]


def _year(value: str) -> int:
    try:
        year = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid year: {value!r}") from None
    if year < 0:
        raise argparse.ArgumentTypeError(f"year must be non-negative: {value!r}")
    return year


def _with_table(heading: str, languages: list[Language]) -> str:
    return f"{heading}\n{render_languages(languages)}"


def handle_list(languages: list[Language], args: argparse.Namespace) -> str:
    return _with_table("Displaying all programming languages:", list_all(languages))


def handle_search(languages: list[Language], args: argparse.Namespace) -> str:
    matches = search_by_name(languages, args.name)
    if not matches:
        return f"No languages found matching '{args.name}'"
    return _with_table(f"Search results for '{args.name}':", matches)


def handle_year(languages: list[Language], args: argparse.Namespace) -> str:
    matches = filter_by_year(languages, args.year)
    if not matches:
        return f"No languages created in {args.year}"
    return _with_table(f"Languages created in {args.year}:", matches)


def handle_creator(languages: list[Language], args: argparse.Namespace) -> str:
    matches = filter_by_creator(languages, args.name)
    if not matches:
        return f"No languages found created by '{args.name}'"
    return _with_table(f"Languages created by '{args.name}':", matches)


def handle_stats(languages: list[Language], args: argparse.Namespace) -> str:
    return render_stats(compute_stats(languages))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kapa", description="Programming language information tool")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--data-file",
        default=None,
        help="Catalog JSON tried before the standard locations (defaults to $KAPA_DATA_FILE)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    list_parser = sub.add_parser("list", help="List all languages")
    list_parser.set_defaults(func=handle_list)

    search_parser = sub.add_parser("search", help="Search for a specific language")
    search_parser.add_argument("name", help="Language name to search for")
    search_parser.set_defaults(func=handle_search)

    year_parser = sub.add_parser("year", help="Display languages created in a specific year")
    year_parser.add_argument("year", type=_year, help="Year to filter languages by")
    year_parser.set_defaults(func=handle_year)

    creator_parser = sub.add_parser("creator", help="Display languages by creator")
    creator_parser.add_argument("name", help="Creator name to filter by")
    creator_parser.set_defaults(func=handle_creator)

    stats_parser = sub.add_parser("stats", help="Display statistics")
    stats_parser.set_defaults(func=handle_stats)

    return parser


def _resolve_log_level(verbose: bool) -> tuple[int, str | None]:
    """Return the root log level and, if KAPA_LOG_LEVEL was not a known name, that name."""
    if verbose:
        return logging.DEBUG, None
    name = os.getenv("KAPA_LOG_LEVEL", "WARNING").strip().upper()
    levels = logging.getLevelNamesMapping()
    if name not in levels:
        return logging.WARNING, name
    return levels[name], None


def main(argv: list[str] | None = None) -> int:
    """Load the catalog, run one query and print the result.

    Returns the process exit code: 0 on success (zero-result queries
    included), 1 when the catalog cannot be loaded or stats are requested
    for an empty catalog. Fatal diagnostics go to stderr regardless of
    the configured log level.
    """
    load_dotenv()
    args = build_parser().parse_args(argv)

    level, unknown_level = _resolve_log_level(args.verbose)
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")
    if unknown_level:
        LOGGER.warning("Unknown KAPA_LOG_LEVEL %r, using WARNING", unknown_level)

    handler: Handler = args.func
    try:
        languages = load_languages(candidate_paths(args.data_file))
        LOGGER.debug("Running command=%s over %s languages", args.command, len(languages))
        output = handler(languages, args)
    except (DataNotFound, MalformedData, EmptyCatalog) as exc:
        LOGGER.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
