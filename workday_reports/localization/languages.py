"""Supported report languages and boundary validation."""

from enum import Enum
from typing import Any

from workday_reports.exceptions import InvalidLanguageError


class Language(str, Enum):
    """Languages a report can be generated in."""

    ENGLISH = "English"
    FRENCH = "French"


def parse_language(value: Any) -> Language:
    """Validate an incoming language value.

    Accepts a Language member, its value ("French") or its name ("FRENCH"),
    case-insensitively. Anything else is rejected so that no unrecognized
    value ever reaches the formatting code.

    Args:
        value: Raw language value from a request

    Returns:
        The matching Language

    Raises:
        InvalidLanguageError: If the value is not a supported language

    Example:
        >>> parse_language("french")
        <Language.FRENCH: 'French'>
    """
    if isinstance(value, Language):
        return value

    if isinstance(value, str):
        candidate = value.strip().lower()
        for language in Language:
            if candidate in (language.value.lower(), language.name.lower()):
                return language

    raise InvalidLanguageError(value)
