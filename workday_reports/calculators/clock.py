"""Clock arithmetic for workday reports.

This module provides the low-level utilities for working with civil clock
strings (fixed-width 24-hour ``HH:MM:SS``):
- Parsing a clock string to seconds since midnight
- Calculating worked seconds for a shift, with midnight wraparound
- Formatting a number of seconds back to ``HH:MM:SS``

Clock strings are compared as strings to detect wraparound. This is valid
because the format is fixed-width and zero-padded, so lexicographic order
equals chronological order within a day.
"""

from workday_reports.exceptions import ParseError

SECONDS_PER_DAY = 24 * 3600

# (upper bound inclusive) for hours, minutes, seconds
_COMPONENT_LIMITS = (23, 59, 59)


def parse_clock_seconds(value: str) -> int:
    """Convert a clock string to seconds since midnight.

    Args:
        value: Clock string in ``HH:MM:SS`` format

    Returns:
        Number of seconds since midnight (0-86399)

    Raises:
        ParseError: If the string is not three two-digit components or a
            component is out of range

    Example:
        >>> parse_clock_seconds("00:00:00")
        0
        >>> parse_clock_seconds("08:30:15")
        30615
        >>> parse_clock_seconds("23:59:59")
        86399
    """
    if not isinstance(value, str):
        raise ParseError(value, "expected a string")

    parts = value.split(":")
    if len(parts) != 3:
        raise ParseError(value, "expected HH:MM:SS")

    numbers = []
    for part, limit in zip(parts, _COMPONENT_LIMITS):
        if len(part) != 2 or not part.isdigit():
            raise ParseError(value, f"component {part!r} is not a two-digit number")
        number = int(part)
        if number > limit:
            raise ParseError(value, f"component {part!r} is out of range")
        numbers.append(number)

    hours, minutes, seconds = numbers
    return hours * 3600 + minutes * 60 + seconds


def crosses_midnight(start: str, end: str) -> bool:
    """Tell whether a shift from ``start`` to ``end`` wraps past midnight.

    The decision only compares the two strings; the entry's overnight flag
    is not consulted. Equal times count as a wraparound.

    Example:
        >>> crosses_midnight("22:00:00", "06:00:00")
        True
        >>> crosses_midnight("08:00:00", "16:00:00")
        False
    """
    return not start < end


def compute_work_seconds(start: str, end: str, rest: str) -> int:
    """Calculate worked seconds for a shift, minus its break.

    Args:
        start: Shift start clock string
        end: Shift end clock string
        rest: Break duration as a clock string

    Returns:
        Worked seconds. May be zero or negative when the break is longer
        than the shift; callers decide how to display that.

    Raises:
        ParseError: If any of the three strings is malformed

    Example:
        >>> compute_work_seconds("08:00:00", "16:00:00", "00:30:00")
        27000
        >>> compute_work_seconds("22:00:00", "06:00:00", "00:00:00")
        28800

    Note:
        When start == end the shift is treated as a full 24 hours, so the
        result is 86400 minus the break.
    """
    start_seconds = parse_clock_seconds(start)
    end_seconds = parse_clock_seconds(end)
    rest_seconds = parse_clock_seconds(rest)

    if not crosses_midnight(start, end):
        return end_seconds - start_seconds - rest_seconds

    # e.g. 22:00 -> 06:00 = 86400 - (79200 - 21600)
    return SECONDS_PER_DAY - (start_seconds - end_seconds) - rest_seconds


def format_seconds_as_clock(seconds: int) -> str:
    """Format a number of seconds as ``HH:MM:SS``.

    Hours are not capped at 24, so monthly totals stay readable.

    Args:
        seconds: Non-negative number of seconds

    Returns:
        Zero-padded clock string

    Raises:
        ValueError: If seconds is negative

    Example:
        >>> format_seconds_as_clock(27000)
        '07:30:00'
        >>> format_seconds_as_clock(0)
        '00:00:00'
        >>> format_seconds_as_clock(360000)
        '100:00:00'
    """
    if seconds < 0:
        raise ValueError(f"seconds must be non-negative, got {seconds}")

    hours, remainder = divmod(seconds, 3600)
    minutes, remaining_seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{remaining_seconds:02d}"
