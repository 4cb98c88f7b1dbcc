"""Tests for the pacecalc CLI."""

import json

import pytest
from typer.testing import CliRunner

from pacecalc import __version__
from pacecalc.cli.main import app
from pacecalc.config import reset_settings

runner = CliRunner()


@pytest.fixture(autouse=True)
def metric_settings(monkeypatch):
    """Run commands with metric defaults."""
    monkeypatch.setenv("PACECALC_UNIT_SYSTEM", "metric")
    reset_settings()
    yield
    reset_settings()


def test_version():
    """Test --version output."""
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"pacecalc version {__version__}" in result.output


def test_calc_prints_result():
    """Test a successful calculation."""
    result = runner.invoke(app, ["calc", "5km", "in", "25min"])

    assert result.exit_code == 0
    assert "5:00min/km" in result.output


def test_calc_imperial_flag():
    """Test that --imperial reads and shows paces per mile."""
    result = runner.invoke(app, ["calc", "--imperial", "4:00 for 4min"])

    assert result.exit_code == 0
    assert "4:00min/mi" in result.output


def test_calc_uses_configured_unit_system(monkeypatch):
    """Test the PACECALC_UNIT_SYSTEM default."""
    monkeypatch.setenv("PACECALC_UNIT_SYSTEM", "imperial")
    reset_settings()

    result = runner.invoke(app, ["calc", "4:00 for 4min"])

    assert result.exit_code == 0
    assert "4:00min/mi" in result.output


def test_calc_error_exits_nonzero():
    """Test that unparseable input fails."""
    result = runner.invoke(app, ["calc", "test"])

    assert result.exit_code == 1
    assert "Cannot calculate" in result.output


def test_calc_without_result():
    """Test a lone distance."""
    result = runner.invoke(app, ["calc", "5km"])

    assert result.exit_code == 0
    assert "Nothing to calculate" in result.output


def test_calc_json_output():
    """Test serialized output."""
    result = runner.invoke(app, ["calc", "--json", "5km in 20min"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["result"] == {"kind": "pace", "data": {"seconds_per_km": 240.0}}
    assert [part["kind"] for part in data["parts"]] == ["distance", "operator", "duration"]


def test_examples():
    """Test the examples table."""
    result = runner.invoke(app, ["examples"])

    assert result.exit_code == 0
    assert "Examples" in result.output


def test_calc_json_output_for_errors():
    """Test that failed calculations still serialize."""
    result = runner.invoke(app, ["calc", "--json", "5km in test"])

    assert result.exit_code == 1
    data = json.loads(result.output)
    assert data["result"] is None
    assert data["parts"][-1] == {"kind": "error", "data": {"message": "test"}}
