"""Output module - cell rendering, styling and streaming xlsx writing."""

from sheet_export.output.cells import CellKind, CellValue, render_cell
from sheet_export.output.sheet import SheetWriter
from sheet_export.output.sink import check_destination, open_workbook
from sheet_export.output.styles import BorderStyle, CellStyle, RowKind, StyleFormatCache, style_for

__all__ = [
    "BorderStyle",
    "CellKind",
    "CellStyle",
    "CellValue",
    "RowKind",
    "SheetWriter",
    "StyleFormatCache",
    "check_destination",
    "open_workbook",
    "render_cell",
    "style_for",
]
