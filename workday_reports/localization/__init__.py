"""Localization for workday reports.

This package contains:
- Language: The closed set of supported report languages
- parse_language: Boundary validation of incoming language values
- LocalizedStrings: Month names, labels and templates for one language
- resolve: Lookup into the immutable strings table
"""

from workday_reports.localization.languages import Language, parse_language
from workday_reports.localization.strings import (
    LOCALIZED_STRINGS,
    LocalizedStrings,
    resolve,
)

__all__ = [
    "LOCALIZED_STRINGS",
    "Language",
    "LocalizedStrings",
    "parse_language",
    "resolve",
]
