"""
Unit tests for configuration management.
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from workday_reports.config.settings import (
    WorkdayReportConfig,
    get_config,
    reload_config,
)


class TestWorkdayReportConfig:
    """Test cases for WorkdayReportConfig."""

    def test_config_with_valid_env_vars(self, test_config):
        """Test configuration loads correctly with valid environment variables."""
        assert test_config.website_url == "https://plannify.test"
        assert test_config.report_timezone == "Europe/Paris"
        assert test_config.environment == "testing"
        assert test_config.debug is True
        assert test_config.log_level == "DEBUG"

    def test_default_values(self, mock_env):
        """Test default configuration values."""
        config = WorkdayReportConfig()
        assert config.brand_name == "Plannify"
        assert config.logo_path is None

    def test_missing_website_url(self, mock_env, monkeypatch):
        """Test that WEBSITE_URL is required."""
        monkeypatch.delenv("WEBSITE_URL")
        with pytest.raises(ValidationError):
            WorkdayReportConfig(_env_file=None)

    def test_blank_website_url(self, mock_env, monkeypatch):
        """Test that a blank WEBSITE_URL is rejected."""
        monkeypatch.setenv("WEBSITE_URL", "   ")
        with pytest.raises(ValidationError, match="must not be empty"):
            WorkdayReportConfig()

    def test_env_file_may_hold_logging_variables(
        self, mock_env, monkeypatch, tmp_path
    ):
        """Test logging-only keys in .env do not break the settings."""
        monkeypatch.delenv("WEBSITE_URL")
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text(
            "WEBSITE_URL=https://from-dotenv.test\nLOG_FORMAT=json\nLOG_FILE=app.log\n",
            encoding="utf-8",
        )

        config = WorkdayReportConfig()
        assert config.website_url == "https://from-dotenv.test"

    def test_timezone_property(self, test_config):
        """Test the configured zone is usable."""
        assert test_config.timezone.key == "Europe/Paris"

    def test_invalid_timezone(self, mock_env, monkeypatch):
        """Test that unknown timezones are rejected."""
        monkeypatch.setenv("REPORT_TIMEZONE", "Mars/Olympus_Mons")
        with pytest.raises(ValidationError, match="Unknown timezone"):
            WorkdayReportConfig()

    @pytest.mark.parametrize("log_level", ["debug", "Info", "WARNING"])
    def test_log_level_normalized(self, mock_env, log_level):
        """Test log level is upper-cased."""
        with patch.dict(os.environ, {"LOG_LEVEL": log_level}):
            config = WorkdayReportConfig()
        assert config.log_level == log_level.upper()

    def test_invalid_log_level(self, mock_env):
        """Test invalid log level is rejected."""
        with patch.dict(os.environ, {"LOG_LEVEL": "VERBOSE"}):
            with pytest.raises(ValidationError, match="Log level must be one of"):
                WorkdayReportConfig()

    def test_invalid_environment(self, mock_env):
        """Test invalid environment is rejected."""
        with patch.dict(os.environ, {"ENVIRONMENT": "staging"}):
            with pytest.raises(ValidationError, match="Environment must be one of"):
                WorkdayReportConfig()

    def test_load_logo(self, test_config, tmp_path):
        """Test reading the configured logo."""
        assert test_config.load_logo() is None

        logo_file = tmp_path / "logo.png"
        logo_file.write_bytes(b"\x89PNG")
        test_config.logo_path = str(logo_file)
        assert test_config.load_logo() == b"\x89PNG"

    def test_missing_logo_file(self, test_config, tmp_path):
        """Test that a missing logo file is reported."""
        test_config.logo_path = str(tmp_path / "missing.png")
        with pytest.raises(FileNotFoundError):
            test_config.load_logo()


class TestConfigLoading:
    """Test module-level loading helpers."""

    def test_get_config_is_cached(self, mock_env):
        """Test get_config returns the same instance."""
        assert get_config() is get_config()

    def test_reload_config_replaces_instance(self, mock_env, monkeypatch):
        """Test reload_config picks up new environment values."""
        first = get_config()
        monkeypatch.setenv("BRAND_NAME", "Acme")
        second = reload_config()
        assert second is not first
        assert second.brand_name == "Acme"
        assert get_config() is second

    def test_reload_from_env_file(self, mock_env, monkeypatch, tmp_path):
        """Test loading values from an explicit .env file."""
        monkeypatch.delenv("WEBSITE_URL")
        env_file = tmp_path / "test.env"
        env_file.write_text("WEBSITE_URL=https://from-file.test\n")

        config = reload_config(str(env_file))
        assert config.website_url == "https://from-file.test"
        monkeypatch.delenv("WEBSITE_URL")
