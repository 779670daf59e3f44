"""Streaming sheet writer: header, data rows, auto-fit widths and autofilter."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from sheet_export.core.config import ExportConfig
from sheet_export.core.constants import (
    COLUMN_WIDTH_PADDING,
    DEFAULT_EXPORT,
    MAX_CELL_TEXT_LENGTH,
    MAX_SHEET_ROWS,
)
from sheet_export.core.exceptions import InvalidInputError, OutputError
from sheet_export.output.cells import CellKind, CellValue, render_cell
from sheet_export.output.styles import RowKind, StyleFormatCache, style_for


def _display_width(text: str) -> int:
    # Multi-line values are sized by their first line, as Excel wraps the rest.
    return len(text.split("\n", 1)[0])


class SheetWriter:
    """Write one worksheet row by row.

    Rows must arrive in order: header first, then data rows. In the
    workbook's constant-memory mode each row is flushed to disk as soon as
    the next one starts, so only the current row and one width counter per
    column are held in memory.

    Usage:
        writer = SheetWriter(workbook, "Orders", 3)
        writer.write_header(["id", "name", "total"])
        writer.write_row([1, "Alice", 9.5], is_last=True)
        writer.finalize()
    """

    def __init__(
        self,
        workbook,
        sheet_name: str,
        column_count: int,
        *,
        config: ExportConfig | None = None,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ):
        if column_count < 1:
            raise InvalidInputError("A sheet needs at least one column", argument="column_count")
        self.config = config or DEFAULT_EXPORT
        self.logger = logger or logging.getLogger(__name__)
        self.sheet_name = sheet_name
        self.column_count = column_count
        try:
            self.worksheet = workbook.add_worksheet(sheet_name)
        except OSError as e:
            # constant_memory mode opens a temp file per worksheet
            raise OutputError("Cannot create worksheet temp file", details=str(e), original_error=e) from e
        self.formats = StyleFormatCache(workbook)
        self.rows_written = 0
        self._next_row = 0
        self._widths = [0] * column_count
        self._finalized = False

    def write_header(self, headers: Sequence[str]) -> None:
        """Write row 0: header text verbatim, header style on every cell."""
        if self._next_row != 0:
            raise InvalidInputError("Header must be the first row written", argument="headers")
        self._check_length(headers, "headers")
        for col, header in enumerate(headers):
            text = str(header)
            fmt = self.formats.get_format(style_for(RowKind.HEADER, col, self.column_count))
            self._write_text(0, col, text, fmt)
            self._track_width(col, text)
        self._next_row = 1

    def write_row(self, values: Sequence[Any], is_last: bool = False) -> None:
        """Render, style and write one data row.

        Raises:
            InvalidInputError: If the row length differs from the column count,
                the header was not written, or the sheet row limit is reached
        """
        if self._next_row == 0:
            raise InvalidInputError("Header must be written before data rows", argument="rows")
        if self._next_row >= MAX_SHEET_ROWS:
            raise InvalidInputError(
                f"Sheet cannot have more than {MAX_SHEET_ROWS - 1} data rows", argument="rows"
            )
        self._check_length(values, f"row {self.rows_written}")

        row = self._next_row
        for col, raw in enumerate(values):
            cell = render_cell(raw)
            fmt = self.formats.get_format(style_for(RowKind.DATA, col, self.column_count, is_last))
            self._write_cell(row, col, cell, fmt)
            self._track_width(col, cell.text)
        self._next_row += 1
        self.rows_written += 1

    def finalize(self) -> None:
        """Auto-fit every column and apply one autofilter over the written range."""
        if self._finalized:
            return
        min_width = self.config.min_column_width
        max_width = self.config.max_column_width
        for col, max_len in enumerate(self._widths):
            width = min(max(max_len + COLUMN_WIDTH_PADDING, min_width), max_width)
            self.worksheet.set_column(col, col, width)

        # With no data rows the filter covers the header row only.
        self.worksheet.autofilter(0, 0, self.rows_written, self.column_count - 1)
        self._finalized = True
        self.logger.debug(
            f"Finalized sheet {self.sheet_name!r}: {self.rows_written} data row(s), filter rows 0-{self.rows_written}"
        )

    @property
    def filter_range(self) -> tuple[int, int, int, int]:
        """(first_row, first_col, last_row, last_col) of the autofilter."""
        return 0, 0, self.rows_written, self.column_count - 1

    def _check_length(self, values: Sequence[Any], what: str) -> None:
        if len(values) != self.column_count:
            raise InvalidInputError(
                "Row length does not match the column count",
                argument=what,
                details=f"expected {self.column_count}, got {len(values)}",
            )

    def _track_width(self, col: int, text: str) -> None:
        width = _display_width(text)
        if width > self._widths[col]:
            self._widths[col] = width

    def _write_cell(self, row: int, col: int, cell: CellValue, fmt: Any) -> None:
        if cell.is_number:
            self.worksheet.write_number(row, col, cell.value, fmt)
        elif cell.kind is CellKind.BOOLEAN:
            self.worksheet.write_boolean(row, col, cell.value, fmt)
        else:
            self._write_text(row, col, cell.value, fmt)

    def _write_text(self, row: int, col: int, text: str, fmt: Any) -> None:
        # write_string, never write(): text such as "=1+1" or a URL stays literal.
        if len(text) > MAX_CELL_TEXT_LENGTH:
            self.logger.warning(
                f"Truncating cell ({row}, {col}) in sheet {self.sheet_name!r} "
                f"from {len(text)} to {MAX_CELL_TEXT_LENGTH} characters"
            )
            text = text[:MAX_CELL_TEXT_LENGTH]
        self.worksheet.write_string(row, col, text, fmt)
