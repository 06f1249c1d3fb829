"""Calculator modules for workday reports."""

from workday_reports.calculators.clock import (
    SECONDS_PER_DAY,
    compute_work_seconds,
    crosses_midnight,
    format_seconds_as_clock,
    parse_clock_seconds,
)

__all__ = [
    "SECONDS_PER_DAY",
    "compute_work_seconds",
    "crosses_midnight",
    "format_seconds_as_clock",
    "parse_clock_seconds",
]
