"""Records module - record projection and export reports."""

from sheet_export.records.projector import project_records
from sheet_export.records.report import ExportReport, FieldAccessFailure

__all__ = [
    "ExportReport",
    "FieldAccessFailure",
    "project_records",
]
