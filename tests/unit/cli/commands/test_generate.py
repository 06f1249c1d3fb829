"""Unit tests for generate command."""

import json
import logging
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from workday_reports.cli.commands.generate import generate_report
from workday_reports.config.settings import WorkdayReportConfig
from workday_reports.exceptions import RenderError


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def request_file(tmp_path, sample_payload):
    """Request payload written to a JSON file."""
    path = tmp_path / "march.json"
    path.write_text(json.dumps(sample_payload), encoding="utf-8")
    return path


class TestGenerateCommand:
    """Test suite for generate command."""

    def test_writes_pdf_next_to_request(self, runner, mock_env, request_file):
        """Test the default output path and a real PDF."""
        result = runner.invoke(generate_report, ["--request", str(request_file)])

        assert result.exit_code == 0, result.output
        output = request_file.with_suffix(".pdf")
        assert output.read_bytes().startswith(b"%PDF")
        assert "Report written to" in result.output
        assert "Jeanne Martin" in result.output

    def test_explicit_output_path(self, runner, mock_env, request_file, tmp_path):
        """Test --output creates missing directories."""
        output = tmp_path / "reports" / "out.pdf"
        result = runner.invoke(
            generate_report, ["--request", str(request_file), "-o", str(output)]
        )

        assert result.exit_code == 0, result.output
        assert output.exists()

    def test_missing_request_file(self, runner, tmp_path):
        """Test click rejects a missing request file."""
        result = runner.invoke(
            generate_report, ["--request", str(tmp_path / "missing.json")]
        )
        assert result.exit_code != 0

    def test_invalid_json(self, runner, mock_env, tmp_path):
        """Test malformed JSON exits with the validation code."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        result = runner.invoke(generate_report, ["--request", str(path)])
        assert result.exit_code == 3
        assert "not valid JSON" in result.output

    def test_invalid_payload(self, runner, mock_env, tmp_path, sample_payload):
        """Test an out-of-range month exits with the validation code."""
        sample_payload["month"] = 13
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(sample_payload), encoding="utf-8")

        result = runner.invoke(generate_report, ["--request", str(path)])
        assert result.exit_code == 3
        assert "Data Validation Error" in result.output

    def test_unsupported_language(
        self, runner, mock_env, tmp_path, sample_payload
    ):
        """Test an unsupported language exits with the validation code."""
        sample_payload["language"] = "German"
        path = tmp_path / "german.json"
        path.write_text(json.dumps(sample_payload), encoding="utf-8")

        result = runner.invoke(generate_report, ["--request", str(path)])
        assert result.exit_code == 3
        assert "Unsupported Language" in result.output

    def test_missing_configuration(self, runner, request_file, monkeypatch):
        """Test missing WEBSITE_URL exits with the configuration code."""
        monkeypatch.delenv("WEBSITE_URL", raising=False)
        with patch(
            "workday_reports.cli.utils.settings_loader.get_config",
            side_effect=lambda: WorkdayReportConfig(_env_file=None),
        ):
            result = runner.invoke(generate_report, ["--request", str(request_file)])

        assert result.exit_code == 1
        assert "Configuration Error" in result.output

    def test_render_failure(self, runner, mock_env, request_file):
        """Test renderer failures exit with the render code."""
        with patch(
            "workday_reports.services.workday_service.ReportPdfRenderer.render",
            side_effect=RenderError("engine crashed"),
        ):
            result = runner.invoke(generate_report, ["--request", str(request_file)])

        assert result.exit_code == 5
        assert "PDF Rendering Failed" in result.output

    def test_missing_logo_file(self, runner, mock_env, request_file, monkeypatch):
        """Test a LOGO_PATH pointing nowhere exits with the configuration code."""
        monkeypatch.setenv("LOGO_PATH", str(request_file.parent / "missing.png"))
        result = runner.invoke(generate_report, ["--request", str(request_file)])

        assert result.exit_code == 1
        assert "Logo file not found" in result.output

    def test_logging_follows_settings(
        self, runner, mock_env, request_file, monkeypatch, tmp_path
    ):
        """Test DEBUG from the settings sets the level and LOG_FILE is used."""
        log_file = tmp_path / "logs" / "workday.log"
        monkeypatch.setenv("LOG_FILE", str(log_file))

        result = runner.invoke(generate_report, ["--request", str(request_file)])

        assert result.exit_code == 0, result.output
        assert logging.getLogger().level == logging.DEBUG
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "Rendered plannify-03-2024" in log_file.read_text(encoding="utf-8")
