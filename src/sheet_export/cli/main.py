"""CLI entry point: read a table with pandas and export it to xlsx."""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
from dotenv import load_dotenv
from tqdm import tqdm

from sheet_export.cli.parser import parse_arguments
from sheet_export.core.config import ExportConfig
from sheet_export.core.constants import EXTENSION_TO_INPUT_FORMAT, TQDM_BAR_FORMAT
from sheet_export.core.exceptions import InvalidInputError, SheetExportError
from sheet_export.core.logging import flush_logging_handlers, setup_logging
from sheet_export.exporter import export_dataframe

EXIT_OK = 0
EXIT_EXPORT_ERROR = 1


def infer_input_format(path: str | Path) -> str | None:
    """Map a file extension to an input format, or None when unknown."""
    return EXTENSION_TO_INPUT_FORMAT.get(Path(path).suffix.lower())


def read_table(path: str | Path, input_format: str | None = None) -> pd.DataFrame:
    """Load the input table.

    Raises:
        InvalidInputError: Unknown format, or the file cannot be read/parsed
    """
    input_format = input_format or infer_input_format(path)
    if input_format is None:
        raise InvalidInputError(
            "Cannot infer input format", argument="input", details=f"use --input-format for {path}"
        )
    try:
        if input_format == "csv":
            return pd.read_csv(path)
        return pd.read_json(path, orient="records")
    except (OSError, ValueError) as e:
        raise InvalidInputError(f"Cannot read {input_format.upper()} input", argument="input", details=str(e)) from e


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the ``sheet-export`` command."""
    load_dotenv()
    args = parse_arguments(argv)
    logger = setup_logging(log_level=args.log_level, log_format=args.log_format, log_file=args.log_file)

    try:
        config = ExportConfig.from_args(args).validate()
        logger.debug(f"Export config: {config.to_dict()}")
        df = read_table(args.input, args.input_format)
        logger.debug(f"Loaded {len(df)} row(s) x {len(df.columns)} column(s) from {args.input}")

        def progress(rows):
            return tqdm(rows, total=len(df), desc="Writing rows", bar_format=TQDM_BAR_FORMAT, disable=args.quiet)

        report = export_dataframe(df, args.output, args.sheet_name, config=config, logger=logger, progress=progress)
    except SheetExportError as e:
        logger.error(str(e))
        flush_logging_handlers()
        return EXIT_EXPORT_ERROR

    if not args.quiet:
        print(f"{report.summary()} -> {args.output}")
    flush_logging_handlers()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
