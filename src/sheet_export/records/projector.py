"""Project records onto a schema, one raw value per column."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from sheet_export.core.exceptions import FieldAccessError, InvalidSchemaError
from sheet_export.records.report import ExportReport, FieldAccessFailure
from sheet_export.schema.models import Schema


def project_records(
    schema: Schema,
    records: Iterable[Any],
    *,
    report: ExportReport,
    on_field_error: str = "skip",
    logger: logging.Logger | logging.LoggerAdapter | None = None,
) -> Iterator[list[Any]]:
    """Lazily yield one row of raw values per record, in schema column order.

    A failing accessor yields None for that cell (rendered as empty) and is
    recorded on ``report``; with ``on_field_error="raise"`` it aborts instead.
    The schema is checked eagerly, before the first record is read.

    Raises:
        InvalidSchemaError: If a column has no accessor (header-only schema)
        FieldAccessError: On the first failed read when ``on_field_error="raise"``
    """
    if not schema.projectable:
        raise InvalidSchemaError("Schema has columns without accessors", details="records need a record descriptor")
    return _iter_rows(schema, records, report, on_field_error, logger or logging.getLogger(__name__))


def _iter_rows(
    schema: Schema,
    records: Iterable[Any],
    report: ExportReport,
    on_field_error: str,
    logger: logging.Logger | logging.LoggerAdapter,
) -> Iterator[list[Any]]:
    columns = list(enumerate(schema.columns))
    for row_index, record in enumerate(records):
        row: list[Any] = [None] * len(columns)
        for column_index, column in columns:
            try:
                row[column_index] = column.accessor(record)
            except Exception as e:
                if on_field_error == "raise":
                    raise FieldAccessError(
                        "Cannot read record field",
                        row_index=row_index,
                        column=column.display_name,
                        details=f"{type(e).__name__}: {e}",
                        original_error=e,
                    ) from e
                logger.debug("Field %r unreadable on row %d: %s", column.source_field_id, row_index, e)
                report.record_failure(
                    FieldAccessFailure(
                        row_index=row_index,
                        column_index=column_index,
                        column=column.display_name,
                        error=f"{type(e).__name__}: {e}",
                    )
                )
        yield row
