"""Request and response models for the monthly workday report.

This module defines:
- WorkdayEntry: One recorded shift
- MonthlyReportRequest: Everything needed to build one monthly report
- MonthlyReportResponse: The rendered PDF returned to the caller
"""

import datetime as dt
from typing import List, Optional

from pydantic import Field, field_validator

from workday_reports.calculators.clock import parse_clock_seconds
from workday_reports.localization.languages import Language, parse_language
from workday_reports.models.base import BaseDataModel


class WorkdayEntry(BaseDataModel):
    """Represents a single recorded shift.

    Clock fields are kept as strings. Every clock field that is present is
    checked on validation, so a malformed value surfaces as a ParseError
    even for a shift that is still open.

    Attributes:
        date: Civil date of the shift
        start_time: Shift start (HH:MM:SS)
        end_time: Shift end (HH:MM:SS), or None while the shift is open
        rest_time: Break duration (HH:MM:SS)
        overnight: Whether the driver slept away; descriptive only

    Example:
        >>> entry = WorkdayEntry(
        ...     date=dt.date(2024, 3, 5),
        ...     startTime="08:00:00",
        ...     endTime="16:00:00",
        ...     restTime="00:30:00",
        ... )
        >>> entry.end_time
        '16:00:00'
    """

    date: dt.date = Field(..., description="Date of the shift")
    start_time: str = Field(..., alias="startTime", description="Shift start")
    end_time: Optional[str] = Field(None, alias="endTime", description="Shift end")
    rest_time: str = Field(..., alias="restTime", description="Break duration")
    overnight: bool = Field(False, description="Whether the shift was overnight")

    @field_validator("end_time", mode="before")
    @classmethod
    def empty_end_time_is_open(cls, v):
        """Treat an empty end time (wire default) as an open shift."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("start_time", "end_time", "rest_time")
    @classmethod
    def validate_clock(cls, v: Optional[str]) -> Optional[str]:
        """Reject clock strings that are not HH:MM:SS.

        ParseError is not a ValueError, so it propagates out of model
        validation unchanged.
        """
        if v is not None:
            parse_clock_seconds(v)
        return v


class MonthlyReportRequest(BaseDataModel):
    """Request for one driver's monthly workday report.

    Attributes:
        driver_first_name: Driver's first name
        driver_last_name: Driver's last name
        month: Report month (1-12)
        year: Report year
        language: Report language
        workdays: Shifts in display order
    """

    driver_first_name: str = Field(..., alias="driverFirstname")
    driver_last_name: str = Field(..., alias="driverLastname")
    month: int = Field(..., ge=1, le=12)
    year: int = Field(..., ge=1)
    language: Language
    workdays: List[WorkdayEntry] = Field(default_factory=list)

    @field_validator("language", mode="before")
    @classmethod
    def validate_language(cls, v) -> Language:
        """Reject unsupported languages before any formatting work.

        InvalidLanguageError is not a ValueError, so it propagates out of
        model validation unchanged.
        """
        return parse_language(v)

    @field_validator("driver_first_name", "driver_last_name")
    @classmethod
    def strip_names(cls, v: str) -> str:
        """Ensure driver names are not blank."""
        if not v.strip():
            raise ValueError("Driver name must not be empty")
        return v.strip()

    @property
    def driver_name(self) -> str:
        return f"{self.driver_first_name} {self.driver_last_name}".strip()


class MonthlyReportResponse(BaseDataModel):
    """Response carrying the rendered report."""

    pdf_content: bytes = Field(..., alias="pdfContent")
