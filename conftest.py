"""
Global pytest configuration and fixtures.
"""
import datetime as dt
from typing import Dict
from zoneinfo import ZoneInfo

import pytest

from workday_reports.builders.report_model_builder import ReportModelBuilder
from workday_reports.config import WorkdayReportConfig, reload_config
from workday_reports.config.logging_config import reset_logging
from workday_reports.models.workday import MonthlyReportRequest

PARIS = ZoneInfo("Europe/Paris")


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        'WEBSITE_URL': 'https://plannify.test',
        'REPORT_TIMEZONE': 'Europe/Paris',
        'ENVIRONMENT': 'testing',
        'DEBUG': 'true',
        'LOG_LEVEL': 'DEBUG'
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv('LOGO_PATH', raising=False)
    monkeypatch.delenv('BRAND_NAME', raising=False)
    monkeypatch.delenv('LOG_FORMAT', raising=False)
    monkeypatch.delenv('LOG_FILE', raising=False)

    # Clear the global config to force reload with test values
    import workday_reports.config.settings
    workday_reports.config.settings._config = None

    yield test_env_vars

    workday_reports.config.settings._config = None


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop root handlers installed by CLI commands after each test."""
    yield
    reset_logging()


@pytest.fixture
def test_config(mock_env) -> WorkdayReportConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def fixed_now() -> dt.datetime:
    """A fixed generation time (2024-04-02 09:15:30 in Paris)."""
    return dt.datetime(2024, 4, 2, 7, 15, 30, tzinfo=dt.timezone.utc)


@pytest.fixture
def builder() -> ReportModelBuilder:
    """Report model builder using the Paris timezone."""
    return ReportModelBuilder(PARIS, site_url='https://plannify.test')


@pytest.fixture
def sample_payload() -> Dict:
    """A March 2024 request payload as received over the wire."""
    return {
        'driverFirstname': 'Jeanne',
        'driverLastname': 'Martin',
        'month': 3,
        'year': 2024,
        'language': 'French',
        'workdays': [
            {'date': '2024-03-04', 'startTime': '08:00:00', 'endTime': '16:00:00',
             'restTime': '00:30:00', 'overnight': False},
            {'date': '2024-03-05', 'startTime': '22:00:00', 'endTime': '06:00:00',
             'restTime': '00:00:00', 'overnight': True},
            {'date': '2024-03-06', 'startTime': '07:00:00', 'endTime': '08:00:00',
             'restTime': '02:00:00', 'overnight': False},
            {'date': '2024-03-07', 'startTime': '09:00:00',
             'restTime': '00:15:00', 'overnight': False},
        ],
    }


@pytest.fixture
def sample_request(sample_payload) -> MonthlyReportRequest:
    """Validated request built from sample_payload."""
    return MonthlyReportRequest.model_validate(sample_payload)


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "pdf: mark test as rendering a real PDF"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "renderer" in item.name.lower() or "pdf" in item.name.lower():
            item.add_marker(pytest.mark.pdf)
