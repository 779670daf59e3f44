"""Workbook sink: bind an xlsxwriter workbook to a path or binary stream."""

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterator
from typing import IO, Union

import xlsxwriter
from xlsxwriter.exceptions import FileCreateError

from sheet_export.core.config import ExportConfig
from sheet_export.core.constants import DEFAULT_EXPORT
from sheet_export.core.exceptions import InvalidInputError, OutputError

Destination = Union[str, "os.PathLike[str]", IO[bytes]]


def is_path_destination(destination: object) -> bool:
    return isinstance(destination, (str, os.PathLike))


def check_destination(destination: object) -> str | None:
    """Validate ``destination`` and return its path (None for streams).

    Raises:
        InvalidInputError: If destination is None, blank, or neither a path nor writable
    """
    if destination is None:
        raise InvalidInputError("Destination is required", argument="destination")
    if is_path_destination(destination):
        if not os.fspath(destination).strip():
            raise InvalidInputError("Destination path is blank", argument="destination")
        return os.path.normpath(os.fspath(destination))
    if not callable(getattr(destination, "write", None)):
        raise InvalidInputError(
            "Destination must be a file path or a writable binary stream",
            argument="destination",
            details=type(destination).__name__,
        )
    return None


@contextlib.contextmanager
def open_workbook(
    destination: Destination,
    config: ExportConfig | None = None,
    logger: logging.Logger | logging.LoggerAdapter | None = None,
) -> Iterator[xlsxwriter.Workbook]:
    """Yield a workbook that is serialized to ``destination`` on exit.

    The workbook is closed on every exit path so its streaming temp files are
    released. On a failure inside the block the workbook is still closed, so
    whatever rows were written may remain at the destination. Caller-owned
    streams are written to but never closed.

    Raises:
        OutputError: If the destination cannot be created or written
    """
    config = config or DEFAULT_EXPORT
    logger = logger or logging.getLogger(__name__)
    output_path = check_destination(destination)
    target = output_path if output_path is not None else destination

    options = {
        "constant_memory": config.constant_memory,
        "nan_inf_to_errors": True,
    }
    if config.tmpdir:
        options["tmpdir"] = config.tmpdir

    workbook = xlsxwriter.Workbook(target, options)
    try:
        yield workbook
    except BaseException:
        try:
            workbook.close()
        except Exception as close_error:
            logger.warning(f"Could not close workbook after failure: {close_error}")
        raise

    try:
        workbook.close()
    except FileCreateError as e:
        logger.error(f"Cannot create workbook file {output_path}: {e}")
        raise OutputError(
            "Cannot create workbook file", output_path=output_path, details=str(e), original_error=e
        ) from e
    except OSError as e:
        logger.error(f"OS error writing workbook: {e}")
        logger.error("Check disk space and path validity")
        raise OutputError(
            "Cannot write workbook", output_path=output_path, details=str(e), original_error=e
        ) from e
