"""
interfaces/cli.py
──────────────────────────────────────────────────────────────────────────────
Command-line interface for the suburb finder.

Usage:
  # Interactive session (enter an empty suburb and postcode to quit)
  python -m suburb_finder.interfaces.cli

  # Single lookup
  python -m suburb_finder.interfaces.cli --suburb "Surry Hills" --postcode 2010

  # JSON output, alternative dataset
  python -m suburb_finder.interfaces.cli -s sydney -p 2000 --json --data ./aus_suburbs.json

  # Via installed entry-point (pyproject.toml [project.scripts])
  suburb-finder -s sydney -p 2000

Exit codes:
  0 : success
  1 : lookup failed or dataset unusable (single lookup only)
  2 : argument or configuration error
"""
from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

from suburb_finder.config import messages
from suburb_finder.config.settings import Settings, get_settings
from suburb_finder.domain.exceptions import (
    ConfigurationError,
    NonPhysicalAddress,
    QueryError,
    SuburbFinderError,
    UnknownCombination,
)
from suburb_finder.domain.models import SearchResults
from suburb_finder.services.container import (
    build_console_session,
    build_result_sink,
    get_finder,
)

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"


# ── Argument parser ────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="suburb-finder",
        description="Find the nearby (≤ 10 km) and fringe (≤ 50 km) suburbs "
                    "of an Australian suburb.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "--suburb", "-s",
        metavar="NAME",
        help="Suburb name for a single lookup (requires --postcode).",
    )
    p.add_argument(
        "--postcode", "-p",
        metavar="CODE",
        help="Postcode for a single lookup (requires --suburb).",
    )
    p.add_argument(
        "--data", "-d",
        metavar="FILE",
        type=Path,
        help="Path to the suburbs JSON dataset. (default: $SUBURBS_JSON_PATH)",
    )
    p.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output single-lookup results (or the lookup error) as JSON on stdout.",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    return p


# ── Configuration helpers ──────────────────────────────────────────────────

def _resolve_log_level(args: argparse.Namespace, settings: Settings) -> int:
    """DEBUG with --verbose, otherwise the LOG_LEVEL setting."""
    if args.verbose:
        return logging.DEBUG
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown LOG_LEVEL '{settings.log_level}'. "
            "Valid values: DEBUG, INFO, WARNING, ERROR, CRITICAL."
        )
    return level


def _resolve_settings(args: argparse.Namespace) -> Settings:
    settings = get_settings()
    if args.data is not None:
        settings = dataclasses.replace(settings, suburbs_json_path=args.data)
    return settings


# ── Output helpers ─────────────────────────────────────────────────────────

def _print_results_json(results: SearchResults) -> None:
    """Print SearchResults as JSON to stdout."""
    print(json.dumps(results.to_dict(), indent=2, ensure_ascii=False))


def _print_error_json(kind: str, exc: QueryError, message: str) -> None:
    """Print a failed lookup as a JSON error object on stdout."""
    payload = {
        "error": kind,
        "suburb": exc.name,
        "postcode": exc.postcode,
        "message": message,
    }
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _report_lookup_error(
    args: argparse.Namespace, kind: str, exc: QueryError, message: str
) -> None:
    if args.json_output:
        _print_error_json(kind, exc, message)
    else:
        print(message, file=sys.stderr)


# ── Main logic ─────────────────────────────────────────────────────────────

def run_single(args: argparse.Namespace, settings: Settings) -> int:
    """Look up one suburb and print the outcome.

    With --json, failed lookups are reported as a JSON error object on
    stdout instead of a plain-text notice on stderr.

    Returns:
        Exit code (0 = results or nothing found, 1 = lookup failure).
    """
    finder = get_finder(settings)
    if not len(finder.index):
        print(
            f"ERROR: No suburbs could be loaded from {settings.suburbs_json_path}",
            file=sys.stderr,
        )
        return 1

    sink = build_result_sink()
    try:
        results = finder.find(args.suburb, args.postcode)
    except UnknownCombination as exc:
        _report_lookup_error(
            args, "unknown_combination", exc,
            messages.unknown_combination(exc.name, exc.postcode),
        )
        return 1
    except NonPhysicalAddress as exc:
        _report_lookup_error(
            args, "non_physical_address", exc,
            messages.non_physical_address(exc.name, exc.postcode),
        )
        return 1

    if args.json_output:
        _print_results_json(results)
    elif results.is_empty:
        sink.notice(messages.nothing_found(results.suburb, results.postcode))
    else:
        sink.results(results)
    return 0


def run_interactive(settings: Settings) -> int:
    """Run the prompt loop until an empty suburb and postcode are entered."""
    session = build_console_session(get_finder(settings))
    try:
        session.run()
    except KeyboardInterrupt:
        print()
    return 0


def run(args: argparse.Namespace) -> int:
    """Execute the CLI for already-parsed arguments.

    Returns:
        Exit code.
    """
    settings = _resolve_settings(args)
    try:
        if args.suburb is not None:
            return run_single(args, settings)
        return run_interactive(settings)
    except SuburbFinderError as exc:
        logger.exception("Suburb finder failed")
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1


def main() -> None:
    """Entry point for the suburb-finder console script."""
    parser = _build_parser()
    args = parser.parse_args()

    if (args.suburb is None) != (args.postcode is None):
        parser.error("--suburb and --postcode must be given together")

    try:
        log_level = _resolve_log_level(args, _resolve_settings(args))
    except ConfigurationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(2)

    logging.basicConfig(level=log_level, format=_LOG_FORMAT)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
