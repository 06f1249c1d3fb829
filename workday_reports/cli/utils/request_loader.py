"""Loading report requests from JSON files."""

import json
from pathlib import Path

from pydantic import ValidationError

from workday_reports.cli.error_handlers import DataValidationError
from workday_reports.models.workday import MonthlyReportRequest


def load_request(path: Path) -> MonthlyReportRequest:
    """Read and validate a report request from a JSON file.

    The file holds the same payload the RPC receives, camelCase or
    snake_case field names.

    Args:
        path: Path to the JSON request file

    Returns:
        Validated MonthlyReportRequest

    Raises:
        DataValidationError: If the file is not JSON or the payload is invalid
        InvalidLanguageError: If the payload names an unsupported language
    """
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise DataValidationError(
            f"{path} is not valid JSON: {e}",
            recovery_hint="Check the request file syntax",
        ) from e

    try:
        return MonthlyReportRequest.model_validate(payload)
    except ValidationError as e:
        raise DataValidationError(
            f"Invalid report request in {path}:\n{e}",
            recovery_hint=(
                "Expected fields: driverFirstname, driverLastname, month, year, "
                "language, workdays"
            ),
        ) from e
