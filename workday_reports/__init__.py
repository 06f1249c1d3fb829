"""Localized monthly workday reports."""

__version__ = "1.0.0"
