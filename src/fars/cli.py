"""
FARS Command-Line Interface

Exposes two subcommands:

    fars summarize --years 2013 2014 [...]   Monthly accident counts per year
    fars map --state 1 --year 2013 [...]     Accident location map for a state

Dataset files (``accident_<year>.csv.bz2``) are looked up in the working
directory unless ``--data-dir`` is given.

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .utils.logging import configure_logging


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


# ===========================================================================
# Subcommand handlers
# ===========================================================================

# ---------------------------------------------------------------------------
# summarize
# ---------------------------------------------------------------------------

def handle_summarize(args: argparse.Namespace) -> None:
    """Print (or save) the month x year accident count table.

    Years without a readable dataset are reported as warnings by the
    loader and left out of the table.  Exits with status 1 only when no
    requested year could be loaded.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.reports.generators import summarize_years, write_summary_csv

    try:
        summary = summarize_years(args.years, data_dir=args.data_dir)
    except PermissionError as exc:
        _die(str(exc))

    if len(summary.columns) <= 1:
        _die(f"No data loaded for years: {', '.join(args.years)}")

    if args.output:
        path = write_summary_csv(summary, args.output)
        print(f"✅  Summary written to {path}")
        return

    with pd.option_context("display.max_columns", None, "display.width", 200):
        print(summary.to_string(index=False))


# ---------------------------------------------------------------------------
# map
# ---------------------------------------------------------------------------

def handle_map(args: argparse.Namespace) -> None:
    """Render the accident map for one state and year.

    Writes an HTML file when ``--output`` is given, otherwise opens the
    figure in the default plotly renderer.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.analysis.geography import InvalidStateError
    from fars.data.reader import DatasetParseError, YearCoercionError
    from fars.reports.generators import render_state_map

    try:
        fig = render_state_map(
            args.state,
            args.year,
            data_dir=args.data_dir,
            output_path=args.output,
        )
    except (FileNotFoundError, PermissionError, YearCoercionError,
            DatasetParseError, InvalidStateError) as exc:
        _die(str(exc))

    if fig is None:
        print("no accidents to plot")
        return

    if args.output:
        print(f"✅  Map written to {args.output}")
    else:
        fig.show()


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
            "FARS – Fatality Analysis Reporting System accident tools\n"
            "Monthly summaries and state accident maps from yearly files."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for the fars package (default: WARNING).",
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
            "Count accidents per month for each requested year.\n\n"
            "Rows are months, columns are years.  Months with no accidents\n"
            "in a year are shown as <NA>, not 0."
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
        type=Path,
        default=None,
        metavar="DIR",
        help="Directory holding accident_<year>.csv.bz2 (default: cwd).",
    )
    p_sum.add_argument(
        "--output",
        type=Path,
        default=None,
        metavar="FILE",
        help="Write the summary to this CSV file instead of printing it.",
    )
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        help="Plot accident locations for one state and year.",
        description=(
            "Plot accident locations for a FARS state number and year.\n\n"
            "Unknown coordinates (LONGITUD > 900, LATITUDE > 90) are\n"
            "dropped from the map."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_map.add_argument(
        "--state",
        required=True,
        metavar="N",
        help="FARS state number, e.g. 1 for Alabama.",
    )
    p_map.add_argument(
        "--year",
        required=True,
        metavar="YEAR",
        help="Dataset year, e.g. 2013.",
    )
    p_map.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        metavar="DIR",
        help="Directory holding accident_<year>.csv.bz2 (default: cwd).",
    )
    p_map.add_argument(
        "--output",
        type=Path,
        default=None,
        metavar="FILE",
        help="Write the map to this HTML file instead of opening it.",
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
    configure_logging(args.log_level, json_format=args.log_json)
    args.func(args)


if __name__ == "__main__":
    main()
