"""Service layer for workday reports.

This package contains:
- WorkdayReportService: Request handler producing monthly report PDFs
"""

from workday_reports.services.workday_service import WorkdayReportService

__all__ = ["WorkdayReportService"]
