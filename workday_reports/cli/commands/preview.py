"""Preview report command."""

from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import click

from workday_reports.builders.report_model_builder import ReportModelBuilder
from workday_reports.cli.error_handlers import ConfigurationError, with_error_handling
from workday_reports.cli.utils.formatters import format_table
from workday_reports.cli.utils.request_loader import load_request
from workday_reports.cli.utils.settings_loader import load_settings
from workday_reports.models.report import RowKind


def _resolve_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(
            f"Unknown timezone: {name}",
            recovery_hint="Use an IANA zone name such as Europe/Paris",
        ) from e


@click.command(name="preview")
@click.option(
    "--request",
    "request_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file holding the report request",
)
@click.option(
    "--timezone",
    default=None,
    help="Timezone for the generation timestamp (default: REPORT_TIMEZONE)",
)
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def preview_report(request_file: Path, timezone: Optional[str], debug: bool):
    """Print the report table to the terminal without rendering a PDF.

    Example:
        workday-report preview --request march.json
    """
    with with_error_handling(debug):
        config = load_settings()
        builder = ReportModelBuilder(
            _resolve_timezone(timezone or config.report_timezone),
            site_url=config.website_url,
            brand_name=config.brand_name,
        )

        request = load_request(request_file)
        model = builder.build(request)

        header_row, *body = model.table
        rows = [row.cells for row in body if row.kind != RowKind.SPACER]

        click.echo(model.header.document_title)
        click.echo(model.header.driver_name)
        click.echo(model.header.period_text)
        click.echo()
        click.echo(format_table(header_row.cells, rows))
        click.echo(model.footer.site_url)
