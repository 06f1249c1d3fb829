"""Report model builders."""

from workday_reports.builders.report_model_builder import ReportModelBuilder

__all__ = ["ReportModelBuilder"]
