"""
FARS Command-Line Interface

Exposes two subcommands over the yearly ``accident_<YEAR>.csv.bz2`` files:

    fars summarize --years 2013 2014 [...]    Month-by-year accident counts
    fars map --state 22 --year 2014 [...]     Accident map for one state

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .analysis.states import InvalidStateError
from .analysis.summary import EmptyDatasetError
from .analysis.values import StateCode, TypeConversionError, Year
from .utils.logging import configure_logging

# Errors that end a command with a one-line message instead of a traceback.
_USER_ERRORS = (
    FileNotFoundError,
    TypeConversionError,
    InvalidStateError,
    EmptyDatasetError,
)


# ===========================================================================
# Shared helpers
# ===========================================================================

def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\n❌  Error: {message}", file=sys.stderr)
    sys.exit(1)


def _resolve_data_dir(raw: Optional[str]) -> Path:
    """Return the data directory, defaulting to the working directory.

    Raises:
        SystemExit: When the directory does not exist.
    """
    data_dir = Path(raw) if raw else Path.cwd()
    if not data_dir.is_dir():
        _die(f"Data directory not found: {data_dir}")
    return data_dir


# ===========================================================================
# Subcommand handlers
# ===========================================================================

# ---------------------------------------------------------------------------
# summarize
# ---------------------------------------------------------------------------

def handle_summarize(args: argparse.Namespace) -> None:
    """Print (and optionally save) the month-by-year accident table.

    Args:
        args: Parsed CLI arguments.  Required field: ``args.years``.
    """
    from fars.reports.generators import summarize, write_summary

    data_dir = _resolve_data_dir(args.data_dir)

    print(f"\n📊  Summarising accidents for {', '.join(args.years)}")
    print(f"    Data: {data_dir}")

    try:
        table = summarize(args.years, data_dir=data_dir)
    except _USER_ERRORS as exc:
        _die(str(exc))

    print()
    print(table.to_string())

    if args.output:
        out_path = write_summary(table, args.output)
        print(f"\n✅  Summary saved → {out_path}")


# ---------------------------------------------------------------------------
# map
# ---------------------------------------------------------------------------

def handle_map(args: argparse.Namespace) -> None:
    """Render the accident map for one state and year to HTML.

    Args:
        args: Parsed CLI arguments.  Required fields: ``args.state``,
              ``args.year``.
    """
    from fars.reports.generators import plot_state

    data_dir = _resolve_data_dir(args.data_dir)

    try:
        code = StateCode.parse(args.state)
        year = Year.parse(args.year)
    except TypeConversionError as exc:
        _die(str(exc))

    out_path = Path(args.output) if args.output else Path(f"state_{code}_{year}.html")

    print(f"\n🗺️   Mapping accidents for STATE {code}, {year}")
    print(f"    Data:   {data_dir}")

    try:
        fig = plot_state(code, year, data_dir=data_dir, output_path=out_path)
    except _USER_ERRORS as exc:
        _die(str(exc))

    if fig is None:
        print("\n⏭️   No accidents to plot — no map written.")
        return
    print(f"\n✅  Map saved → {out_path}")


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser.

    Returns:
        Configured ``ArgumentParser`` with ``summarize`` and ``map``
        subcommands attached.
    """
    parser = argparse.ArgumentParser(
        prog="fars",
        description=(
            "FARS – Fatality Analysis Reporting System toolkit\n"
            "Monthly accident summaries and state accident maps from yearly\n"
            "accident_<YEAR>.csv.bz2 extracts."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr (default: INFO).",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON objects.",
    )
    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        help="Count accidents per month for one or more years.",
        description=(
            "Load accident_<YEAR>.csv.bz2 for every requested year and print\n"
            "a table with one row per month and one column per year.\n\n"
            "Years whose file is missing are reported as warnings and\n"
            "skipped; the command fails only if no year can be loaded."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        metavar="YEAR",
        help="One or more years, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help="Directory holding the yearly files (default: current directory).",
    )
    p_sum.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="Also write the table to this CSV file.",
    )
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        help="Plot one state's accident locations for a year.",
        description=(
            "Draw every accident with a known location for the given STATE\n"
            "code and year over US state outlines, written as an HTML file."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_map.add_argument(
        "--state",
        required=True,
        metavar="CODE",
        help="FARS STATE code, e.g. 22.",
    )
    p_map.add_argument(
        "--year",
        required=True,
        metavar="YEAR",
        help="Dataset year, e.g. 2014.",
    )
    p_map.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help="Directory holding the yearly files (default: current directory).",
    )
    p_map.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="HTML output path (default: state_<CODE>_<YEAR>.html).",
    )
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    parser = _build_parser()
    args   = parser.parse_args(argv)
    configure_logging(level=args.log_level, json_format=args.log_json)
    args.func(args)


if __name__ == "__main__":
    main()
