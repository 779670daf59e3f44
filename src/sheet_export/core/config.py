"""Configuration dataclasses for sheet-export.

These dataclasses centralize all configuration options for type safety
and easy testing. They can be created from command-line arguments or
used directly in code.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Any

from sheet_export.core.exceptions import InvalidInputError

FIELD_ERROR_POLICIES = ("skip", "raise")


@dataclass
class ExportConfig:
    """Configuration for a single export call.

    Attributes:
        record_sheet_name: Sheet name used for record exports without an override (default: "sheet1")
        matrix_sheet_name: Sheet name used for header/matrix exports without a name (default: "sheet01")
        min_column_width: Lower bound for auto-fitted column widths (default: 8)
        max_column_width: Upper bound for auto-fitted column widths (default: 100)
        on_field_error: "skip" writes an empty cell and records the failure,
            "raise" aborts the export (default: "skip")
        max_reported_failures: Failures kept on the ExportReport; the count is always exact (default: 1000)
        constant_memory: Stream rows to disk instead of holding the sheet in memory (default: True)
        tmpdir: Directory for the streaming temp files (default: system temp dir)
    """

    record_sheet_name: str = "sheet1"
    matrix_sheet_name: str = "sheet01"
    min_column_width: int = 8
    max_column_width: int = 100
    on_field_error: str = "skip"
    max_reported_failures: int = 1000
    constant_memory: bool = True
    tmpdir: str | None = None

    def validate(self) -> ExportConfig:
        """Raise InvalidInputError when an option is out of range; return self."""
        if self.on_field_error not in FIELD_ERROR_POLICIES:
            raise InvalidInputError(
                f"on_field_error must be one of {', '.join(FIELD_ERROR_POLICIES)}",
                argument="on_field_error",
                details=f"got {self.on_field_error!r}",
            )
        if self.min_column_width < 0:
            raise InvalidInputError("min_column_width cannot be negative", argument="min_column_width")
        if self.max_column_width < self.min_column_width:
            raise InvalidInputError(
                "max_column_width must be >= min_column_width",
                argument="max_column_width",
                details=f"{self.max_column_width} < {self.min_column_width}",
            )
        if self.max_reported_failures < 0:
            raise InvalidInputError("max_reported_failures cannot be negative", argument="max_reported_failures")
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary (used for debug logging)."""
        return {
            "record_sheet_name": self.record_sheet_name,
            "matrix_sheet_name": self.matrix_sheet_name,
            "min_column_width": self.min_column_width,
            "max_column_width": self.max_column_width,
            "on_field_error": self.on_field_error,
            "max_reported_failures": self.max_reported_failures,
            "constant_memory": self.constant_memory,
            "tmpdir": self.tmpdir,
        }

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> ExportConfig:
        """Create configuration from parsed command-line arguments."""
        return cls(
            min_column_width=getattr(args, "min_column_width", 8),
            max_column_width=getattr(args, "max_column_width", 100),
            tmpdir=getattr(args, "tmpdir", None),
        )

