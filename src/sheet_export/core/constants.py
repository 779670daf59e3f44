"""Constants and default values for sheet-export.

This module centralizes the fixed rendering formats, xlsx limits and
default configuration instances used throughout the package.
"""

from sheet_export.core.config import ExportConfig

# ==================== DEFAULT CONFIG INSTANCES ====================

DEFAULT_EXPORT = ExportConfig()

DEFAULT_RECORD_SHEET_NAME: str = DEFAULT_EXPORT.record_sheet_name
DEFAULT_MATRIX_SHEET_NAME: str = DEFAULT_EXPORT.matrix_sheet_name

# ==================== CELL RENDERING ====================

EMPTY_CELL_TEXT: str = "-"
# str.format templates over date/time attributes; years always have four digits
DATE_FORMAT: str = "{0.year:04d}-{0.month:02d}-{0.day:02d}"
DATETIME_FORMAT: str = DATE_FORMAT + " {0.hour:02d}:{0.minute:02d}:{0.second:02d}"
TIME_FORMAT: str = "{0.hour:02d}:{0.minute:02d}:{0.second:02d}"

# Signed integer ranges used to classify integral values
INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

# ==================== XLSX LIMITS ====================

MAX_SHEET_ROWS: int = 1_048_576  # header row included
MAX_SHEET_COLUMNS: int = 16_384
MAX_SHEET_NAME_LENGTH: int = 31
INVALID_SHEET_NAME_CHARS: frozenset[str] = frozenset("[]:*?/\\")
MAX_CELL_TEXT_LENGTH: int = 32_767

# Padding added to the widest value when auto-fitting a column
COLUMN_WIDTH_PADDING: int = 2

# ==================== LOGGING DEFAULTS ====================

LOG_FILE_MAX_BYTES: int = 10 * 1024 * 1024  # 10MB
LOG_FILE_BACKUP_COUNT: int = 5

# ==================== CLI ====================

TQDM_BAR_FORMAT = "{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}]"
INPUT_FORMATS: tuple[str, ...] = ("csv", "json")
EXTENSION_TO_INPUT_FORMAT: dict[str, str] = {
    ".csv": "csv",
    ".json": "json",
}
