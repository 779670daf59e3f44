"""Pytest configuration and fixtures for sheet-export tests"""
import io
import zipfile
from dataclasses import dataclass, field
from datetime import date, datetime

import openpyxl
import pytest

from sheet_export.schema.models import FieldOptions, RecordDescriptor, column


@dataclass
class Employee:
    """Record type with one override, one skipped field and one plain field"""
    __sheet_name__ = "Staff"

    employee_id: int = column("ID")
    name: str = ""
    password: str = column(skip=True, default="")
    hired: date | None = None


@dataclass
class Event:
    """Record type without any column options"""
    title: str
    starts_at: datetime
    attendees: int = 0
    tags: list = field(default_factory=list)


@pytest.fixture
def employees():
    return [
        Employee(1, "Alice", "s3cret", date(2020, 1, 15)),
        Employee(2, "Bob", "hunter2", None),
        Employee(3, "   ", "", date(2023, 7, 1)),
    ]


@pytest.fixture
def employee_descriptor():
    return RecordDescriptor.from_dataclass(Employee)


@pytest.fixture
def dict_descriptor():
    """Descriptor for plain dict records"""
    return RecordDescriptor(
        fields=[
            FieldOptions("sku", display_name="SKU"),
            FieldOptions("qty"),
            FieldOptions("cost", skip=True),
        ],
        sheet_name="Stock",
    )


@pytest.fixture
def load_sheet():
    """Open an xlsx path or bytes with openpyxl and return its only worksheet"""

    def _load(source):
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(source)
        workbook = openpyxl.load_workbook(source)
        assert len(workbook.worksheets) == 1
        return workbook.worksheets[0]

    return _load


@pytest.fixture
def sheet_rows(load_sheet):
    """Return all rows of the only worksheet as lists of values"""

    def _rows(source):
        ws = load_sheet(source)
        return [list(row) for row in ws.iter_rows(values_only=True)]

    return _rows


@pytest.fixture
def sheet_xml():
    """Return the raw XML of the first worksheet part"""

    def _xml(source):
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(source)
        with zipfile.ZipFile(source) as zf:
            return zf.read("xl/worksheets/sheet1.xml").decode("utf-8")

    return _xml


@pytest.fixture
def restore_logging():
    """Undo the root handler changes made by setup_logging"""
    import logging

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
