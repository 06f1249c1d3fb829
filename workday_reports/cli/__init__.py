"""Workday Report CLI.

This module provides a command-line interface for producing monthly
workday reports from JSON request files.
"""

import click

from workday_reports import __version__
from workday_reports.cli.commands.generate import generate_report
from workday_reports.cli.commands.preview import preview_report


@click.group(help="Workday Report CLI - Build monthly workday reports for drivers")
@click.version_option(version=__version__)
def cli():
    """Workday Report CLI main entry point."""
    pass


# Register commands
cli.add_command(generate_report)
cli.add_command(preview_report)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
