"""Per-export outcome report."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FieldAccessFailure:
    """One accessor call that raised instead of returning a value."""

    row_index: int
    column_index: int
    column: str
    error: str


@dataclass
class ExportReport:
    """Summary of one export call.

    Attributes:
        sheet_name: Name of the written sheet
        columns: Header texts in column order
        rows_written: Data rows written (header excluded)
        failure_count: Total failed field reads, exact even when ``failures`` is truncated
        failures: First ``max_failures`` failed field reads, in encounter order
        max_failures: Cap on ``failures`` so a pathological export stays bounded in memory
        destination: Output path, or None when writing to a stream
    """

    sheet_name: str
    columns: list[str]
    rows_written: int = 0
    failure_count: int = 0
    failures: list[FieldAccessFailure] = field(default_factory=list)
    max_failures: int = 1000
    destination: str | None = None

    @property
    def ok(self) -> bool:
        return self.failure_count == 0

    @property
    def failures_truncated(self) -> bool:
        return self.failure_count > len(self.failures)

    def record_failure(self, failure: FieldAccessFailure) -> None:
        self.failure_count += 1
        if len(self.failures) < self.max_failures:
            self.failures.append(failure)

    def summary(self) -> str:
        text = f"Sheet {self.sheet_name!r}: {self.rows_written} row(s) x {len(self.columns)} column(s)"
        if self.failure_count:
            text += f", {self.failure_count} unreadable field value(s) written as empty"
        return text
