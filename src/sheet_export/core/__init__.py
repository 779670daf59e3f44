"""Core module - Foundation components with no internal dependencies.

This module provides the basic building blocks used throughout the package:
- Version information
- Custom exceptions
- Configuration dataclasses
- Constants and defaults
"""

from sheet_export.core.version import __version__

from sheet_export.core.exceptions import (
    SheetExportError,
    InvalidInputError,
    InvalidSchemaError,
    FieldAccessError,
    OutputError,
)

from sheet_export.core.config import (
    ExportConfig,
)

from sheet_export.core.constants import (
    DEFAULT_EXPORT,
    DEFAULT_RECORD_SHEET_NAME,
    DEFAULT_MATRIX_SHEET_NAME,
    EMPTY_CELL_TEXT,
    DATE_FORMAT,
    DATETIME_FORMAT,
    TIME_FORMAT,
    MAX_SHEET_ROWS,
    MAX_SHEET_COLUMNS,
)

__all__ = [
    # Version
    '__version__',
    # Exceptions
    'SheetExportError',
    'InvalidInputError',
    'InvalidSchemaError',
    'FieldAccessError',
    'OutputError',
    # Config dataclasses
    'ExportConfig',
    # Constants
    'DEFAULT_EXPORT',
    'DEFAULT_RECORD_SHEET_NAME',
    'DEFAULT_MATRIX_SHEET_NAME',
    'EMPTY_CELL_TEXT',
    'DATE_FORMAT',
    'DATETIME_FORMAT',
    'TIME_FORMAT',
    'MAX_SHEET_ROWS',
    'MAX_SHEET_COLUMNS',
]
