"""Exceptions raised while building and rendering workday reports."""

from typing import Any, Optional


class WorkdayReportError(Exception):
    """Base class for all report generation errors."""

    pass


class ParseError(WorkdayReportError):
    """A clock string is not a valid ``HH:MM:SS`` time of day."""

    def __init__(self, value: Any, reason: str):
        """
        Initialize parse error.

        Args:
            value: The offending clock string
            reason: Short description of what is wrong with it
        """
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid clock string {value!r}: {reason}")


class InvalidLanguageError(WorkdayReportError):
    """The requested language is outside the supported set."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Unrecognized language: {value!r}")


class RenderError(WorkdayReportError):
    """The PDF engine failed to turn a report model into bytes."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)
