"""CLI module - Command-line interface components."""

from sheet_export.cli.main import main, read_table
from sheet_export.cli.parser import build_parser, parse_arguments

__all__ = [
    "build_parser",
    "main",
    "parse_arguments",
    "read_table",
]
