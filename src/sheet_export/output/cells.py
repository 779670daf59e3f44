"""Map raw Python values to typed cell payloads."""

from __future__ import annotations

import datetime as dt
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from sheet_export.core.constants import (
    DATE_FORMAT,
    DATETIME_FORMAT,
    EMPTY_CELL_TEXT,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    TIME_FORMAT,
)


class CellKind(Enum):
    """Kind of content held by one cell."""

    INTEGER = "integer"
    LONG = "long"
    DOUBLE = "double"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    TEXT = "text"
    EMPTY = "empty"


NUMERIC_KINDS = frozenset({CellKind.INTEGER, CellKind.LONG, CellKind.DOUBLE, CellKind.FLOAT})


@dataclass(frozen=True)
class CellValue:
    """Rendered cell content. Every non-numeric, non-boolean kind carries text."""

    kind: CellKind
    value: int | float | bool | str

    @property
    def is_number(self) -> bool:
        return self.kind in NUMERIC_KINDS

    @property
    def text(self) -> str:
        """Display text, used for column auto-fit."""
        if self.kind is CellKind.BOOLEAN:
            return "TRUE" if self.value else "FALSE"
        return str(self.value)


EMPTY_CELL = CellValue(CellKind.EMPTY, EMPTY_CELL_TEXT)


def render_cell(value: Any) -> CellValue:
    """Render one raw value. Total over all inputs: unknown types fall back to ``str()``.

    bool is tested before the integer kinds and datetime before date because
    of Python's subclass relations; otherwise the order is integer, long,
    double, float, boolean, date, datetime, time, empty, text.
    """
    if isinstance(value, (bool, np.bool_)):
        return CellValue(CellKind.BOOLEAN, bool(value))

    if isinstance(value, numbers.Integral):
        number = int(value)
        if INT32_MIN <= number <= INT32_MAX:
            return CellValue(CellKind.INTEGER, number)
        if INT64_MIN <= number <= INT64_MAX:
            return CellValue(CellKind.LONG, number)
        # Wider than 64 bits: no numeric cell can hold it exactly.
        return CellValue(CellKind.TEXT, str(value))

    if isinstance(value, (np.float32, np.float16)):
        return CellValue(CellKind.FLOAT, float(value))
    if isinstance(value, float):
        return CellValue(CellKind.DOUBLE, value)

    if isinstance(value, np.datetime64):
        if np.isnat(value):
            return EMPTY_CELL
        moment = value.astype("datetime64[us]").item()
        if not isinstance(moment, dt.datetime):
            # Outside the range of datetime.datetime
            return CellValue(CellKind.TEXT, str(value))
        value = moment

    if isinstance(value, dt.datetime):
        if value != value:  # pandas.NaT
            return EMPTY_CELL
        return CellValue(CellKind.DATETIME, DATETIME_FORMAT.format(value))
    if isinstance(value, dt.date):
        return CellValue(CellKind.DATE, DATE_FORMAT.format(value))
    if isinstance(value, dt.time):
        return CellValue(CellKind.TIME, TIME_FORMAT.format(value))

    if value is None:
        return EMPTY_CELL
    text = str(value)
    if len(text.strip()) == 0:
        return EMPTY_CELL
    return CellValue(CellKind.TEXT, text)
