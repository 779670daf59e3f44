"""CLI argument parsing."""

from __future__ import annotations

import argparse

from sheet_export.core.constants import DEFAULT_EXPORT, INPUT_FORMATS
from sheet_export.core.logging import VALID_LOG_LEVELS
from sheet_export.core.version import __version__


def _positive_int(value: str) -> int:
    """Argparse type for an integer >= 0."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"must be an integer, got {value!r}") from e
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sheet-export",
        description="Export a CSV or JSON table to a styled, filterable xlsx sheet",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # CSV to xlsx (sheet named after the default)
  sheet-export orders.csv -o orders.xlsx

  # JSON records with a custom sheet name
  sheet-export orders.json -o orders.xlsx --sheet-name Orders

  # Structured logs, no progress bar
  sheet-export orders.csv -o orders.xlsx --log-format json --quiet
""",
    )
    parser.add_argument("input", help="Input file (.csv or .json records)")
    parser.add_argument("-o", "--output", required=True, help="Output .xlsx path")
    parser.add_argument("--sheet-name", default=None, help="Worksheet name (default: sheet01)")
    parser.add_argument(
        "--input-format",
        choices=INPUT_FORMATS,
        default=None,
        help="Input format (default: inferred from the file extension)",
    )
    parser.add_argument(
        "--min-column-width",
        type=_positive_int,
        default=DEFAULT_EXPORT.min_column_width,
        help="Minimum auto-fit column width (default: %(default)s)",
    )
    parser.add_argument(
        "--max-column-width",
        type=_positive_int,
        default=DEFAULT_EXPORT.max_column_width,
        help="Maximum auto-fit column width (default: %(default)s)",
    )
    parser.add_argument("--tmpdir", default=None, help="Directory for streaming temp files")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        default=None,
        help="Logging level (default: $LOG_LEVEL or INFO)",
    )
    parser.add_argument("--log-format", choices=("text", "json"), default="text", help="Log output format")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    parser.add_argument("-q", "--quiet", action="store_true", help="No progress bar or summary line")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    return build_parser().parse_args(argv)
