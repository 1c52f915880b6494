"""Command line tests via typer's CliRunner."""

import pytest
from typer.testing import CliRunner

from run import app

runner = CliRunner()


@pytest.fixture
def invoke(config_dir):
    def _invoke(*args):
        return runner.invoke(app, ["--config-dir", str(config_dir), *args])
    return _invoke


class TestCalendarCommands:
    def test_month(self, invoke):
        result = invoke("month", "2024", "2")
        assert result.exit_code == 0
        assert "February 2024: 5 rows, 4 leading, 2 trailing" in result.output
        assert "[28]" in result.output

    def test_month_svg(self, invoke, tmp_path):
        target = tmp_path / "feb.svg"
        result = invoke("month", "2024", "2", "--monday", "--svg", str(target))
        assert result.exit_code == 0
        assert "February 2024" in target.read_text(encoding="utf-8")

    def test_month_outside_date_range(self, invoke):
        result = invoke("month", "1", "1")
        assert result.exit_code == 1
        assert "outside the supported date range" in result.output

    def test_week_crossing_years(self, invoke):
        result = invoke("week", "2021-01-01")
        assert result.exit_code == 0
        assert "Week 53: December 28, 2020 - January 3, 2021" in result.output

    def test_margins(self, invoke):
        result = invoke("margins")
        assert result.exit_code == 0
        assert "left=36.0 right=54.0" in result.output
        assert "left=54.0 right=36.0" in result.output

    def test_unknown_profile(self, invoke):
        result = invoke("margins", "--profile", "tabloid")
        assert result.exit_code == 1
        assert "Profile 'tabloid' not found" in result.output


class TestQRCommands:
    def test_qr(self, invoke):
        result = invoke("qr", "2024-01-08")
        assert result.exit_code == 0
        assert result.output.strip() == "01020240108"

    def test_qr_bad_template(self, invoke):
        result = invoke("qr", "2024-01-08", "--template", "1")
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_decode(self, invoke):
        result = invoke("decode-qr", "01120240112")
        assert result.exit_code == 0
        assert "template=01 page=right date=2024-01-12" in result.output

    def test_decode_malformed(self, invoke):
        result = invoke("decode-qr", "0112024")
        assert result.exit_code == 1
        assert "11 digits" in result.output


class TestPlanCommands:
    def test_plan(self, invoke, tmp_path):
        result = invoke("plan", "--start-date", "2024-01-01", "--no-qr", "--output", str(tmp_path))
        assert result.exit_code == 0
        text = (tmp_path / "planner_20240101.txt").read_text(encoding="utf-8")
        assert "Spreads: 65" in text

    def test_plan_without_monthly(self, invoke, tmp_path):
        result = invoke("plan", "--start-date", "2024-01-01", "--no-monthly", "--no-qr", "--output", str(tmp_path))
        assert result.exit_code == 0
        assert "Spreads: 53" in (tmp_path / "planner_20240101.txt").read_text(encoding="utf-8")

    def test_plan_rejects_single_sided_profile(self, invoke, tmp_path):
        result = invoke("plan", "--profile", "letter_flat", "--output", str(tmp_path))
        assert result.exit_code == 1
        assert "facing pages" in result.output

    def test_tabs(self, invoke):
        result = invoke("tabs")
        assert result.exit_code == 0
        assert "January    top=36.00 height=60.00 radius=12 cmyk=85/10/100/0" in result.output

    def test_verify_config(self, invoke):
        result = invoke("verify-config")
        assert result.exit_code == 0
        assert "Found 3 document profiles." in result.output

    def test_verify_config_missing_dir(self, tmp_path):
        result = runner.invoke(app, ["--config-dir", str(tmp_path), "verify-config"])
        assert result.exit_code == 1
        assert "Configuration invalid" in result.output
