"""
sheet-export - streaming xlsx export for records, header/matrix pairs and DataFrames.

A small library for writing in-memory tabular data to a single styled
spreadsheet sheet without holding the whole sheet in memory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
    "__version__",
    "ColumnSpec",
    "ExportConfig",
    "ExportReport",
    "FieldAccessError",
    "FieldOptions",
    "InvalidInputError",
    "InvalidSchemaError",
    "OutputError",
    "RecordDescriptor",
    "Schema",
    "SheetExportError",
    "column",
    "export_dataframe",
    "export_matrix",
    "export_matrix_to_bytes",
    "export_records",
    "export_records_to_bytes",
    "resolve_schema",
]

_EXPORTS = {
    "__version__": "sheet_export.core.version",
    "ColumnSpec": "sheet_export.schema.models",
    "ExportConfig": "sheet_export.core.config",
    "ExportReport": "sheet_export.records.report",
    "FieldAccessError": "sheet_export.core.exceptions",
    "FieldOptions": "sheet_export.schema.models",
    "InvalidInputError": "sheet_export.core.exceptions",
    "InvalidSchemaError": "sheet_export.core.exceptions",
    "OutputError": "sheet_export.core.exceptions",
    "RecordDescriptor": "sheet_export.schema.models",
    "Schema": "sheet_export.schema.models",
    "SheetExportError": "sheet_export.core.exceptions",
    "column": "sheet_export.schema.models",
    "export_dataframe": "sheet_export.exporter",
    "export_matrix": "sheet_export.exporter",
    "export_matrix_to_bytes": "sheet_export.exporter",
    "export_records": "sheet_export.exporter",
    "export_records_to_bytes": "sheet_export.exporter",
    "resolve_schema": "sheet_export.schema.resolver",
}

if TYPE_CHECKING:
    from sheet_export.core.config import ExportConfig
    from sheet_export.core.exceptions import (
        FieldAccessError,
        InvalidInputError,
        InvalidSchemaError,
        OutputError,
        SheetExportError,
    )
    from sheet_export.core.version import __version__
    from sheet_export.exporter import (
        export_dataframe,
        export_matrix,
        export_matrix_to_bytes,
        export_records,
        export_records_to_bytes,
    )
    from sheet_export.records.report import ExportReport
    from sheet_export.schema.models import ColumnSpec, FieldOptions, RecordDescriptor, Schema, column
    from sheet_export.schema.resolver import resolve_schema


def __getattr__(name: str) -> Any:
    if name in _EXPORTS:
        import importlib

        return getattr(importlib.import_module(_EXPORTS[name]), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
