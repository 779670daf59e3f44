"""Position-derived cell styles and the workbook format cache."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any


class RowKind(Enum):
    HEADER = "header"
    DATA = "data"


class BorderStyle(IntEnum):
    """xlsxwriter border indices."""

    THIN = 1
    THICK = 5
    DOUBLE = 6


@dataclass(frozen=True)
class CellStyle:
    """Borders, alignment and weight of one cell."""

    top: BorderStyle = BorderStyle.THIN
    bottom: BorderStyle = BorderStyle.THIN
    left: BorderStyle = BorderStyle.THIN
    right: BorderStyle = BorderStyle.THIN
    align: str | None = None
    bold: bool = False

    def to_format_properties(self) -> dict[str, Any]:
        """Return the xlsxwriter ``add_format`` properties for this style."""
        properties: dict[str, Any] = {
            "top": int(self.top),
            "bottom": int(self.bottom),
            "left": int(self.left),
            "right": int(self.right),
        }
        if self.align:
            properties["align"] = self.align
        if self.bold:
            properties["bold"] = True
        return properties


def style_for(row_kind: RowKind, column_index: int, column_count: int, is_last_data_row: bool = False) -> CellStyle:
    """Compute the style of a cell from its position alone.

    Header cells get a thick top, double bottom, centered bold text. The last
    data row gets a thick bottom. The first and last columns get a thick left
    and right edge respectively (both, for a single-column sheet). Every
    other edge is thin.
    """
    top = bottom = left = right = BorderStyle.THIN
    align = None
    bold = False

    if row_kind is RowKind.HEADER:
        top = BorderStyle.THICK
        bottom = BorderStyle.DOUBLE
        align = "center"
        bold = True
    elif is_last_data_row:
        bottom = BorderStyle.THICK

    if column_index == 0:
        left = BorderStyle.THICK
    if column_index == column_count - 1:
        right = BorderStyle.THICK

    return CellStyle(top=top, bottom=bottom, left=left, right=right, align=align, bold=bold)


class StyleFormatCache:
    """Cache of xlsxwriter Format objects keyed by CellStyle.

    xlsxwriter keeps every format created by ``add_format()`` for the life of
    the workbook. Styles are recomputed for every cell, but only one Format
    exists per distinct style (at most a dozen per sheet), so a streamed
    export does not accumulate formats per cell.

    Usage:
        cache = StyleFormatCache(workbook)
        fmt = cache.get_format(style_for(RowKind.HEADER, 0, 3))
    """

    def __init__(self, workbook):
        self.workbook = workbook
        self._cache: dict[CellStyle, Any] = {}

    def get_format(self, style: CellStyle) -> Any:
        """Get or create the xlsxwriter Format for ``style``."""
        if style not in self._cache:
            self._cache[style] = self.workbook.add_format(style.to_format_properties())
        return self._cache[style]

    def __len__(self) -> int:
        return len(self._cache)
