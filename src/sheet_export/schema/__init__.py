"""Schema module - column specs, record descriptors and schema resolution."""

from sheet_export.schema.models import (
    ColumnSpec,
    FieldOptions,
    RecordDescriptor,
    Schema,
    column,
    default_accessor,
)
from sheet_export.schema.resolver import resolve_schema, validate_sheet_name

__all__ = [
    "ColumnSpec",
    "FieldOptions",
    "RecordDescriptor",
    "Schema",
    "column",
    "default_accessor",
    "resolve_schema",
    "validate_sheet_name",
]
