"""
Configuration management for the workday report service.
"""

from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import find_dotenv, load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WorkdayReportConfig(BaseSettings):
    """Configuration settings for the workday report service."""

    # Report content
    website_url: str = Field(alias="WEBSITE_URL")
    logo_path: Optional[str] = Field(default=None, alias="LOGO_PATH")
    brand_name: str = Field(default="Plannify", alias="BRAND_NAME")
    report_timezone: str = Field(default="Europe/Paris", alias="REPORT_TIMEZONE")

    # Application Configuration
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    @field_validator("website_url")
    @classmethod
    def validate_website_url(cls, v):
        """Ensure the site URL is not blank."""
        if not v or not v.strip():
            raise ValueError("WEBSITE_URL must not be empty")
        return v.strip()

    @field_validator("report_timezone")
    @classmethod
    def validate_report_timezone(cls, v):
        """Ensure the timezone is a known IANA zone."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timezone: {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Ensure environment is valid."""
        valid_envs = ["development", "testing", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()

    @property
    def timezone(self) -> ZoneInfo:
        return ZoneInfo(self.report_timezone)

    def load_logo(self) -> Optional[bytes]:
        """Read the brand logo, if one is configured.

        Raises:
            FileNotFoundError: If LOGO_PATH points to a missing file
        """
        if not self.logo_path:
            return None
        return Path(self.logo_path).read_bytes()


def load_config(env_file: Optional[str] = None) -> WorkdayReportConfig:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))

    return WorkdayReportConfig()


# Global configuration instance
_config: Optional[WorkdayReportConfig] = None


def get_config() -> WorkdayReportConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> WorkdayReportConfig:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
