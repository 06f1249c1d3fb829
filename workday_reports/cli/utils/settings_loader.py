"""Loading service settings for CLI commands."""

from pydantic import ValidationError

from workday_reports.cli.error_handlers import ConfigurationError
from workday_reports.config.logging_config import LoggingConfig, configure_logging
from workday_reports.config.settings import WorkdayReportConfig, get_config


def load_settings() -> WorkdayReportConfig:
    """Load the settings and configure logging from them.

    Returns:
        The global WorkdayReportConfig

    Raises:
        ConfigurationError: If the environment or .env file is invalid
    """
    try:
        config = get_config()
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration:\n{e}",
            recovery_hint="Set WEBSITE_URL (and optionally LOGO_PATH) in .env",
        ) from e

    configure_logging(LoggingConfig.from_settings(config))
    return config
