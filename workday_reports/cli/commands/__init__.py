"""CLI commands."""

from workday_reports.cli.commands.generate import generate_report
from workday_reports.cli.commands.preview import preview_report

__all__ = ["generate_report", "preview_report"]
