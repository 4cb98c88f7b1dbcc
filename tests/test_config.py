"""Tests for application settings."""

import pytest

from pacecalc.config import Settings, get_settings, reset_settings
from pacecalc.models import UnitSystem


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings around each test."""
    reset_settings()
    yield
    reset_settings()


def test_default_settings(monkeypatch):
    """Test defaults when no environment is set."""
    monkeypatch.delenv("PACECALC_UNIT_SYSTEM", raising=False)
    monkeypatch.delenv("PACECALC_LOG_LEVEL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.unit_system == UnitSystem.METRIC
    assert settings.log_level == "WARNING"


def test_settings_from_environment(monkeypatch):
    """Test prefixed environment variables."""
    monkeypatch.setenv("PACECALC_UNIT_SYSTEM", "imperial")
    monkeypatch.setenv("PACECALC_LOG_LEVEL", "DEBUG")

    settings = get_settings()

    assert settings.unit_system == UnitSystem.IMPERIAL
    assert settings.log_level == "DEBUG"


def test_get_settings_is_cached(monkeypatch):
    """Test singleton behavior and reset."""
    monkeypatch.setenv("PACECALC_UNIT_SYSTEM", "metric")
    first = get_settings()

    monkeypatch.setenv("PACECALC_UNIT_SYSTEM", "imperial")
    assert get_settings() is first

    reset_settings()
    assert get_settings().unit_system == UnitSystem.IMPERIAL
