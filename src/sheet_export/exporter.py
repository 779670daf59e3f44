"""Export entry points: records, header/matrix pairs and DataFrames to xlsx.

Every entry point runs the same pipeline on the caller's thread:
resolve schema -> open workbook sink -> header row -> stream data rows ->
auto-fit + autofilter -> close. Input errors are raised before the
destination is touched; I/O errors surface as OutputError.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

import pandas as pd

from sheet_export.core.config import ExportConfig
from sheet_export.core.constants import DEFAULT_EXPORT
from sheet_export.core.exceptions import InvalidInputError, SheetExportError, _format_error_msg
from sheet_export.core.logging import with_log_context
from sheet_export.output.sheet import SheetWriter
from sheet_export.output.sink import Destination, check_destination, open_workbook
from sheet_export.records.projector import project_records
from sheet_export.records.report import ExportReport
from sheet_export.schema.models import RecordDescriptor, Schema
from sheet_export.schema.resolver import resolve_schema

_logger = logging.getLogger(__name__)


def _with_last_flag(rows: Iterable[Sequence[Any]]) -> Iterator[tuple[Sequence[Any], bool]]:
    """Yield (row, is_last) pairs holding at most one row of lookahead."""
    iterator = iter(rows)
    try:
        current = next(iterator)
    except StopIteration:
        return
    for following in iterator:
        yield current, False
        current = following
    yield current, True


def _require(value: Any, argument: str) -> None:
    if value is None:
        raise InvalidInputError(f"{argument.capitalize()} is required", argument=argument)


def _write_sheet(
    schema: Schema,
    rows: Iterable[Sequence[Any]],
    destination: Destination,
    report: ExportReport,
    config: ExportConfig,
    logger: logging.Logger | logging.LoggerAdapter,
) -> ExportReport:
    try:
        with open_workbook(destination, config, logger) as workbook:
            writer = SheetWriter(workbook, schema.sheet_name, len(schema), config=config, logger=logger)
            writer.write_header(schema.headers)
            for row, is_last in _with_last_flag(rows):
                writer.write_row(row, is_last=is_last)
                report.rows_written = writer.rows_written
            writer.finalize()
    except SheetExportError as e:
        logger.error(_format_error_msg("exporting workbook", sheet_name=schema.sheet_name, error=e))
        raise

    if report.failure_count:
        message = f"{report.failure_count} field value(s) could not be read and were written as empty"
        if report.failures:
            first = report.failures[0]
            message += f" (first: row {first.row_index}, column {first.column!r})"
        logger.warning(message)
    logger.info(f"Excel sheet written: {report.summary()}")
    return report


def _new_report(schema: Schema, destination: Destination, config: ExportConfig) -> ExportReport:
    return ExportReport(
        sheet_name=schema.sheet_name,
        columns=schema.headers,
        max_failures=config.max_reported_failures,
        destination=check_destination(destination),
    )


def export_records(
    records: Iterable[Any],
    descriptor: RecordDescriptor | type,
    destination: Destination,
    *,
    config: ExportConfig | None = None,
    logger: logging.Logger | logging.LoggerAdapter | None = None,
) -> ExportReport:
    """
    Write records to a single-sheet workbook, one row per record.

    Args:
        records: Records in output order (any iterable; consumed once)
        descriptor: RecordDescriptor, or a dataclass type to derive one from
        destination: File path or writable binary stream
        config: Export options (defaults to DEFAULT_EXPORT)
        logger: Logger instance

    Returns:
        ExportReport with row count and any unreadable field values

    Raises:
        InvalidInputError: Missing argument or malformed input (before any output)
        InvalidSchemaError: No eligible columns
        FieldAccessError: Unreadable value under the "raise" policy
        OutputError: Destination cannot be created or written
    """
    config = (config or DEFAULT_EXPORT).validate()
    _require(records, "records")
    _require(descriptor, "descriptor")
    _require(destination, "destination")
    if isinstance(descriptor, type):
        try:
            descriptor = RecordDescriptor.from_dataclass(descriptor)
        except TypeError as e:
            raise InvalidInputError("Record type is not a dataclass", argument="descriptor", details=str(e)) from e

    schema = resolve_schema(descriptor, default_sheet_name=config.record_sheet_name)
    log = with_log_context(logger or _logger, sheet_name=schema.sheet_name)
    report = _new_report(schema, destination, config)
    rows = project_records(schema, records, report=report, on_field_error=config.on_field_error, logger=log)
    log.info(f"Exporting records to sheet {schema.sheet_name!r} ({len(schema)} columns)")
    return _write_sheet(schema, rows, destination, report, config, log)


def export_matrix(
    headers: Sequence[str],
    data: Iterable[Sequence[Any]],
    destination: Destination,
    sheet_name: str | None = None,
    *,
    config: ExportConfig | None = None,
    logger: logging.Logger | logging.LoggerAdapter | None = None,
) -> ExportReport:
    """
    Write a header list and a row-major matrix of raw values to a workbook.

    When ``data`` is a sequence every row length is checked against the
    header count before the destination is opened; other iterables are
    checked row by row while streaming.

    Args:
        headers: Header texts, written verbatim
        data: Rows of raw values, one value per header
        destination: File path or writable binary stream
        sheet_name: Sheet name (config.matrix_sheet_name when blank)
        config: Export options (defaults to DEFAULT_EXPORT)
        logger: Logger instance

    Returns:
        ExportReport with the row count
    """
    config = (config or DEFAULT_EXPORT).validate()
    _require(headers, "headers")
    _require(data, "data")
    _require(destination, "destination")
    if isinstance(headers, str):
        raise InvalidInputError("Headers must be a sequence of strings, not a string", argument="headers")

    schema = resolve_schema(headers=headers, default_sheet_name=config.matrix_sheet_name, sheet_name=sheet_name)
    if isinstance(data, Sequence):
        for index, row in enumerate(data):
            if row is None or len(row) != len(schema):
                raise InvalidInputError(
                    "Row length does not match the header count",
                    argument=f"row {index}",
                    details=f"expected {len(schema)}, got {'None' if row is None else len(row)}",
                )

    log = with_log_context(logger or _logger, sheet_name=schema.sheet_name)
    report = _new_report(schema, destination, config)
    log.info(f"Exporting matrix to sheet {schema.sheet_name!r} ({len(schema)} columns)")
    return _write_sheet(schema, data, destination, report, config, log)


def dataframe_rows(df: pd.DataFrame) -> Iterator[list[Any]]:
    """Yield DataFrame rows as lists, with NaN/NaT/None mapped to None."""
    for values in df.itertuples(index=False, name=None):
        yield [None if _is_missing(value) else value for value in values]


def _is_missing(value: Any) -> bool:
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # Array-like cell values: not a scalar missing marker.
        return False


def export_dataframe(
    df: pd.DataFrame,
    destination: Destination,
    sheet_name: str | None = None,
    *,
    config: ExportConfig | None = None,
    logger: logging.Logger | logging.LoggerAdapter | None = None,
    progress: Any = None,
) -> ExportReport:
    """
    Write a DataFrame (columns as headers, index dropped) to a workbook.

    Args:
        df: Source DataFrame
        destination: File path or writable binary stream
        sheet_name: Sheet name (config.matrix_sheet_name when blank)
        config: Export options
        logger: Logger instance
        progress: Optional wrapper applied to the row iterator (e.g. a tqdm factory)

    Returns:
        ExportReport with the row count
    """
    _require(df, "dataframe")
    rows: Iterable[list[Any]] = dataframe_rows(df)
    if progress is not None:
        rows = progress(rows)
    return export_matrix(
        [str(column) for column in df.columns], rows, destination, sheet_name, config=config, logger=logger
    )


def export_records_to_bytes(
    records: Iterable[Any],
    descriptor: RecordDescriptor | type,
    *,
    config: ExportConfig | None = None,
    logger: logging.Logger | logging.LoggerAdapter | None = None,
) -> bytes:
    """Build the workbook for ``records`` in memory and return its bytes."""
    buffer = io.BytesIO()
    export_records(records, descriptor, buffer, config=config, logger=logger)
    return buffer.getvalue()


def export_matrix_to_bytes(
    headers: Sequence[str],
    data: Iterable[Sequence[Any]],
    sheet_name: str | None = None,
    *,
    config: ExportConfig | None = None,
    logger: logging.Logger | logging.LoggerAdapter | None = None,
) -> bytes:
    """Build the workbook for a header/matrix pair in memory and return its bytes."""
    buffer = io.BytesIO()
    export_matrix(headers, data, buffer, sheet_name, config=config, logger=logger)
    return buffer.getvalue()
