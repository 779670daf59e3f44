"""Resolve the output column schema from explicit headers or a record descriptor."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sheet_export.core.constants import (
    DEFAULT_RECORD_SHEET_NAME,
    INVALID_SHEET_NAME_CHARS,
    MAX_SHEET_COLUMNS,
    MAX_SHEET_NAME_LENGTH,
)
from sheet_export.core.exceptions import InvalidInputError, InvalidSchemaError
from sheet_export.schema.models import ColumnSpec, RecordDescriptor, Schema, default_accessor

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or len(value.strip()) == 0


def validate_sheet_name(sheet_name: str) -> str:
    """Check ``sheet_name`` against the xlsx worksheet naming rules and return it.

    Raises:
        InvalidInputError: If the name is too long or contains a forbidden character
    """
    if len(sheet_name) > MAX_SHEET_NAME_LENGTH:
        raise InvalidInputError(
            f"Sheet name must be {MAX_SHEET_NAME_LENGTH} characters or less",
            argument="sheet_name",
            details=f"{sheet_name!r} has {len(sheet_name)}",
        )
    bad_chars = sorted(set(sheet_name) & INVALID_SHEET_NAME_CHARS)
    if bad_chars:
        raise InvalidInputError(
            "Sheet name contains invalid characters",
            argument="sheet_name",
            details=f"{sheet_name!r} contains {''.join(bad_chars)!r}",
        )
    if sheet_name.startswith("'") or sheet_name.endswith("'"):
        raise InvalidInputError(
            "Sheet name cannot start or end with an apostrophe", argument="sheet_name", details=repr(sheet_name)
        )
    return sheet_name


def resolve_schema(
    descriptor: RecordDescriptor | None = None,
    headers: Sequence[str] | None = None,
    *,
    default_sheet_name: str = DEFAULT_RECORD_SHEET_NAME,
    sheet_name: str | None = None,
) -> Schema:
    """Resolve the ordered column schema for one export call.

    Explicit ``headers`` win: the schema is exactly those names, in order,
    without field ids or accessors. Otherwise the descriptor's fields are
    walked in declaration order, skipped fields dropped and display-name
    overrides applied.

    Args:
        descriptor: Record field description (used when ``headers`` is None)
        headers: Explicit header names
        default_sheet_name: Sheet name when no non-blank override is present
        sheet_name: Override for the header path (the descriptor carries its own)

    Returns:
        Resolved Schema

    Raises:
        InvalidSchemaError: If neither input is given or no column remains
        InvalidInputError: If the sheet name is illegal or there are too many columns
    """
    if headers is not None:
        columns = tuple(ColumnSpec(display_name=str(header)) for header in headers)
        name = sheet_name
    elif descriptor is not None:
        columns = tuple(
            ColumnSpec(
                display_name=options.name if _is_blank(options.display_name) else options.display_name,
                source_field_id=options.name,
                accessor=options.accessor or default_accessor(options.name),
            )
            for options in descriptor.fields
            if not options.skip
        )
        name = descriptor.sheet_name
    else:
        raise InvalidSchemaError("Cannot resolve schema", details="neither a record descriptor nor headers were given")

    if not columns:
        raise InvalidSchemaError("Cannot resolve schema", details="no eligible columns")
    if len(columns) > MAX_SHEET_COLUMNS:
        raise InvalidInputError(
            f"Sheet cannot have more than {MAX_SHEET_COLUMNS} columns",
            argument="headers" if headers is not None else "descriptor",
            details=f"got {len(columns)}",
        )

    resolved_name = validate_sheet_name(default_sheet_name if _is_blank(name) else name)
    logger.debug("Resolved schema for sheet %r with %d column(s)", resolved_name, len(columns))
    return Schema(columns=columns, sheet_name=resolved_name)
