"""Generate report command."""

import time
from pathlib import Path
from typing import Optional

import click

from workday_reports.cli.error_handlers import (
    ConfigurationError,
    ProcessingError,
    with_error_handling,
)
from workday_reports.cli.utils.formatters import format_info, format_success
from workday_reports.cli.utils.request_loader import load_request
from workday_reports.cli.utils.settings_loader import load_settings
from workday_reports.config.settings import WorkdayReportConfig
from workday_reports.services.workday_service import WorkdayReportService


def _create_service(config: WorkdayReportConfig) -> WorkdayReportService:
    try:
        return WorkdayReportService.from_config(config)
    except FileNotFoundError as e:
        raise ConfigurationError(
            f"Logo file not found: {e.filename}",
            recovery_hint="Fix LOGO_PATH or remove it to render without a logo",
        ) from e


@click.command(name="generate")
@click.option(
    "--request",
    "request_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file holding the report request",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to write the PDF (default: request file with .pdf suffix)",
)
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def generate_report(request_file: Path, output: Optional[Path], debug: bool):
    """Generate the monthly workday report PDF for a request file.

    Example:
        workday-report generate --request march.json
        workday-report generate --request march.json -o reports/march.pdf
    """
    start_time = time.time()

    with with_error_handling(debug):
        config = load_settings()
        request = load_request(request_file)
        click.echo(
            format_info(
                f"Generating report for {request.driver_name} "
                f"({request.month:02d}/{request.year}, {len(request.workdays)} entries)"
            )
        )

        service = _create_service(config)
        pdf = service.generate_monthly_workday_pdf(request)

        target = output or request_file.with_suffix(".pdf")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(pdf)
        except OSError as e:
            raise ProcessingError(
                f"Could not write {target}: {e.strerror}",
                recovery_hint="Choose another --output location",
            ) from e

        duration = time.time() - start_time
        click.echo(format_success(f"Report written to {target}"))
        click.echo(f"  Size:     {len(pdf)} bytes")
        click.echo(f"  Duration: {duration:.2f}s")
