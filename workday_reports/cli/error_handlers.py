"""Error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click

from workday_reports.cli.utils.formatters import format_error, format_warning
from workday_reports.exceptions import InvalidLanguageError, ParseError, RenderError


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration issues."""

    pass


class DataValidationError(CLIError):
    """The report request could not be read or validated."""

    pass


class ProcessingError(CLIError):
    """The report could not be produced or written."""

    pass


# (exception type, heading, exit code); first match wins
_CLI_ERRORS = (
    (ConfigurationError, "Configuration Error", 1),
    (DataValidationError, "Data Validation Error", 3),
    (ProcessingError, "Processing Error", 4),
)

_REPORT_ERRORS = (
    (
        InvalidLanguageError,
        "Unsupported Language",
        3,
        "Use one of: English, French",
    ),
    (
        ParseError,
        "Invalid Clock Time",
        3,
        "Times must be written HH:MM:SS, e.g. 08:30:00",
    ),
    (
        RenderError,
        "PDF Rendering Failed",
        5,
        "Check the logo file and run with --debug for details",
    ),
)


def handle_cli_error(error: Exception, debug: bool = False) -> int:
    """
    Print a user-friendly message for an error.

    Args:
        error: The exception that occurred
        debug: Whether to show full stack trace

    Returns:
        Exit code (1-5 for known error types, 130 on abort, 255 otherwise)
    """
    for error_type, heading, exit_code in _CLI_ERRORS:
        if isinstance(error, error_type):
            click.echo(format_error(f"{heading}: {error.message}"))
            if error.recovery_hint:
                click.echo(format_warning(f"Hint: {error.recovery_hint}"))
            return exit_code

    for error_type, heading, exit_code, hint in _REPORT_ERRORS:
        if isinstance(error, error_type):
            click.echo(format_error(f"{heading}: {error}"))
            click.echo(format_warning(f"Hint: {hint}"))
            return exit_code

    if isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"))
        return 130  # Standard exit code for SIGINT

    click.echo(format_error(f"Unexpected Error: {type(error).__name__}"))
    click.echo(str(error))

    if debug:
        click.echo("\nFull stack trace:")
        click.echo(
            "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )
        )
    else:
        click.echo(format_warning("\nRun with --debug flag for full stack trace"))

    return 255


class _ErrorHandler:
    """Context manager turning exceptions into CLI exit codes."""

    def __init__(self, show_debug: bool):
        self.show_debug = show_debug

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_val is not None and isinstance(exc_val, Exception):
            sys.exit(handle_cli_error(exc_val, self.show_debug))
        return False


def with_error_handling(debug: bool = False) -> _ErrorHandler:
    """
    Standardized error handling for CLI commands.

    Example:
        @click.command()
        @click.option('--debug', is_flag=True)
        def my_command(debug):
            with with_error_handling(debug):
                ...
    """
    return _ErrorHandler(debug)
