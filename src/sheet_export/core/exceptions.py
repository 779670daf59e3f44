"""Custom exceptions for sheet-export.

All exception classes carry a short message plus optional details so that
callers (and the CLI) can print a single actionable line.
"""


class SheetExportError(Exception):
    """Base exception for all sheet-export errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class InvalidInputError(SheetExportError):
    """Exception raised when a required argument is missing or malformed.

    Examples:
        - Record list, headers, data or destination is None
        - Sheet name is not a legal worksheet name
        - A matrix row does not have one value per header
        - The sheet would exceed the xlsx row or column limit
    """

    def __init__(self, message: str, argument: str | None = None, details: str | None = None):
        self.argument = argument
        super().__init__(message, details)


class InvalidSchemaError(SheetExportError):
    """Exception raised when no usable column schema can be resolved.

    Examples:
        - Neither a record descriptor nor explicit headers were supplied
        - Every field of the record descriptor is marked skip
        - An empty header list
    """

    pass


class FieldAccessError(SheetExportError):
    """Exception raised when a record value cannot be read and the policy is "raise".

    Under the default "skip" policy the failure is recorded on the
    ExportReport instead and the cell is written as empty.
    """

    def __init__(
        self,
        message: str,
        row_index: int | None = None,
        column: str | None = None,
        details: str | None = None,
        original_error: Exception | None = None,
    ):
        self.row_index = row_index
        self.column = column
        self.original_error = original_error
        super().__init__(message, details)

    def __str__(self) -> str:
        parts = [self.message]
        if self.row_index is not None:
            parts.append(f"row {self.row_index}")
        if self.column is not None:
            parts.append(f"column {self.column!r}")
        if self.details:
            parts.append(self.details)
        return " - ".join(parts)


class OutputError(SheetExportError):
    """Exception raised for workbook writing failures.

    Examples:
        - Permission denied
        - Missing parent directory
        - Disk full
    """

    def __init__(
        self,
        message: str,
        output_path: str | None = None,
        details: str | None = None,
        original_error: Exception | None = None,
    ):
        self.output_path = output_path
        self.original_error = original_error
        super().__init__(message, details)


def _format_error_msg(operation: str, sheet_name: str | None = None, error: Exception | None = None) -> str:
    """
    Format error messages consistently across the package.

    Args:
        operation: Description of the operation that failed (e.g., "writing workbook")
        sheet_name: Optional sheet name context
        error: Optional exception to include in the message

    Returns:
        Formatted error message string
    """
    msg = f"Error {operation}"
    if sheet_name:
        msg += f" for sheet {sheet_name!r}"
    if error:
        msg += f": {error!s}"
    return msg
