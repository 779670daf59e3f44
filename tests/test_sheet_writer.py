"""Tests for the streaming sheet writer against real xlsx output"""
import io
from datetime import date

import pytest
import xlsxwriter

from sheet_export.core.config import ExportConfig
from sheet_export.core.exceptions import InvalidInputError
from sheet_export.output.sheet import SheetWriter
from sheet_export.output.sink import open_workbook


def _write(headers, rows, config=None, sheet_name="Data"):
    buffer = io.BytesIO()
    with open_workbook(buffer, config) as workbook:
        writer = SheetWriter(workbook, sheet_name, len(headers), config=config)
        writer.write_header(headers)
        for index, row in enumerate(rows):
            writer.write_row(row, is_last=index == len(rows) - 1)
        writer.finalize()
    return buffer.getvalue(), writer


class TestSheetContent:
    def test_row_and_cell_counts(self, sheet_rows):
        data, writer = _write(["a", "b", "c"], [[1, 2, 3], [4, 5, 6]])
        rows = sheet_rows(data)
        assert len(rows) == 3
        assert all(len(row) == 3 for row in rows)
        assert writer.rows_written == 2

    def test_header_verbatim(self, sheet_rows):
        headers = ["  id ", "Name & <Type>", "id"]
        data, _ = _write(headers, [[1, "x", 2]])
        assert sheet_rows(data)[0] == headers

    def test_typed_values(self, sheet_rows):
        data, _ = _write(
            ["int", "float", "bool", "date", "none", "text"],
            [[7, 2.5, True, date(2024, 1, 2), None, "=1+1"]],
        )
        assert sheet_rows(data)[1] == [7, 2.5, True, "2024-01-02", "-", "=1+1"]

    def test_sheet_name(self, load_sheet):
        data, _ = _write(["a"], [[1]], sheet_name="Orders")
        assert load_sheet(data).title == "Orders"


class TestStyles:
    def test_header_corner(self, load_sheet):
        data, _ = _write(["a", "b"], [[1, 2]])
        cell = load_sheet(data)["A1"]
        assert cell.border.top.style == "thick"
        assert cell.border.bottom.style == "double"
        assert cell.border.left.style == "thick"
        assert cell.border.right.style == "thin"
        assert cell.alignment.horizontal == "center"
        assert cell.font.b

    def test_last_row_and_edges(self, load_sheet):
        data, _ = _write(["a", "b", "c"], [[1, 2, 3], [4, 5, 6]])
        ws = load_sheet(data)
        assert ws["B2"].border.bottom.style == "thin"
        assert ws["B3"].border.bottom.style == "thick"
        assert ws["A3"].border.left.style == "thick"
        assert ws["C2"].border.right.style == "thick"
        assert ws["B2"].border.left.style == "thin"
        assert not ws["B2"].font.b

    def test_single_cell_dataset(self, load_sheet):
        data, _ = _write(["only"], [["v"]])
        border = load_sheet(data)["A2"].border
        assert (border.bottom.style, border.left.style, border.right.style) == ("thick", "thick", "thick")


class TestFinalize:
    def test_autofilter_spans_written_range(self, load_sheet):
        data, writer = _write(["a", "b"], [[1, 2], [3, 4]])
        assert load_sheet(data).auto_filter.ref == "A1:B3"
        assert writer.filter_range == (0, 0, 2, 1)

    def test_zero_rows_filter_is_header_only(self, load_sheet, sheet_rows):
        data, writer = _write(["a", "b", "c"], [])
        assert load_sheet(data).auto_filter.ref == "A1:C1"
        assert writer.filter_range == (0, 0, 0, 2)
        assert sheet_rows(data) == [["a", "b", "c"]]

    def test_column_widths_follow_content(self, load_sheet):
        config = ExportConfig(min_column_width=4, max_column_width=20)
        data, _ = _write(["id", "description", "x"], [[1, "short", "y" * 50], [2, "first line\nsecond line is longer", "z"]], config)
        ws = load_sheet(data)
        assert int(ws.column_dimensions["A"].width) == 4  # "id" + padding below minimum
        assert int(ws.column_dimensions["B"].width) == 13  # "description" (11) + 2
        assert int(ws.column_dimensions["C"].width) == 20  # capped

    def test_finalize_is_idempotent(self):
        buffer = io.BytesIO()
        with open_workbook(buffer) as workbook:
            writer = SheetWriter(workbook, "s", 1)
            writer.write_header(["a"])
            writer.finalize()
            writer.finalize()


class TestStreaming:
    def test_strings_are_written_inline(self, sheet_xml):
        """constant_memory mode writes each row straight to the sheet part"""
        data, _ = _write(["name"], [["Alice"], ["Bob"]])
        xml = sheet_xml(data)
        assert 'inlineStr' in xml
        assert "Alice" in xml

    def test_in_memory_mode_uses_shared_strings(self, sheet_xml, sheet_rows):
        data, _ = _write(["name"], [["Alice"]], ExportConfig(constant_memory=False))
        assert "Alice" not in sheet_xml(data)
        assert sheet_rows(data) == [["name"], ["Alice"]]

    def test_state_is_per_column_not_per_row(self):
        buffer = io.BytesIO()
        with open_workbook(buffer) as workbook:
            writer = SheetWriter(workbook, "s", 2)
            writer.write_header(["a", "b"])
            for i in range(500):
                writer.write_row([i, f"row {i}"], is_last=i == 499)
            writer.finalize()
            assert len(writer._widths) == 2
            assert len(writer.formats) <= 6
        assert writer.rows_written == 500


class TestContractViolations:
    def test_short_row_rejected(self):
        with pytest.raises(InvalidInputError, match="expected 2, got 1"):
            _write(["a", "b"], [[1]])

    def test_header_length_checked(self):
        buffer = io.BytesIO()
        with pytest.raises(InvalidInputError):
            with open_workbook(buffer) as workbook:
                SheetWriter(workbook, "s", 2).write_header(["a"])

    def test_rows_before_header_rejected(self):
        workbook = xlsxwriter.Workbook(io.BytesIO(), {"in_memory": True})
        writer = SheetWriter(workbook, "s", 1)
        with pytest.raises(InvalidInputError):
            writer.write_row([1])
        workbook.close()

    def test_zero_columns_rejected(self):
        workbook = xlsxwriter.Workbook(io.BytesIO(), {"in_memory": True})
        with pytest.raises(InvalidInputError):
            SheetWriter(workbook, "s", 0)
        workbook.close()

    def test_long_text_truncated(self, sheet_rows, caplog):
        data, _ = _write(["t"], [["x" * 40_000]])
        assert len(sheet_rows(data)[1][0]) == 32_767
        assert "Truncating cell" in caplog.text
