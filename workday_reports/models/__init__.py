"""Data models for workday reports.

This package contains:
- BaseDataModel: Base class with common Pydantic configuration
- WorkdayEntry, MonthlyReportRequest, MonthlyReportResponse: Request models
- ReportModel and its parts: Render-ready output of the builder
"""

from workday_reports.models.base import BaseDataModel
from workday_reports.models.report import (
    ComputedRow,
    DocumentMetadata,
    FooterText,
    ReportHeader,
    ReportModel,
    ReportTotals,
    RowKind,
    TableRow,
)
from workday_reports.models.workday import (
    MonthlyReportRequest,
    MonthlyReportResponse,
    WorkdayEntry,
)

__all__ = [
    "BaseDataModel",
    "ComputedRow",
    "DocumentMetadata",
    "FooterText",
    "MonthlyReportRequest",
    "MonthlyReportResponse",
    "ReportHeader",
    "ReportModel",
    "ReportTotals",
    "RowKind",
    "TableRow",
    "WorkdayEntry",
]
