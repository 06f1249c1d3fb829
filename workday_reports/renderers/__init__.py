"""Renderers turning report models into documents."""

from workday_reports.renderers.pdf_renderer import ReportPdfRenderer

__all__ = ["ReportPdfRenderer"]
