"""Tests for environment settings."""

import pytest

from chronometry import GREGORIAN, ConfigurationError, Settings, gregorian_calendar, load_settings
from chronometry.config import ACTIVATION_YEAR_ENV, LOG_LEVEL_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(ACTIVATION_YEAR_ENV, raising=False)


def test_defaults_without_environment():
    """Test the default settings."""
    assert load_settings() == Settings(log_level="WARNING", gregorian_activation_year=1582)


def test_settings_read_from_environment(monkeypatch):
    """Test that values are read and normalized."""
    monkeypatch.setenv(LOG_LEVEL_ENV, " debug ")
    monkeypatch.setenv(ACTIVATION_YEAR_ENV, "1752")

    assert load_settings() == Settings(log_level="DEBUG", gregorian_activation_year=1752)


def test_blank_activation_year_uses_default(monkeypatch):
    """Test that a blank value counts as unset."""
    monkeypatch.setenv(ACTIVATION_YEAR_ENV, "  ")

    assert load_settings().gregorian_activation_year == 1582


def test_invalid_log_level_raises(monkeypatch):
    """Test log level validation."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "LOUD")

    with pytest.raises(ConfigurationError, match="CHRONOMETRY_LOG_LEVEL"):
        load_settings()


def test_invalid_activation_year_raises(monkeypatch):
    """Test activation year validation."""
    monkeypatch.setenv(ACTIVATION_YEAR_ENV, "sixteen")

    with pytest.raises(ConfigurationError, match="not an integer"):
        load_settings()


def test_gregorian_calendar_uses_builtin_by_default():
    """Test that the default activation year returns the built-in calendar."""
    assert gregorian_calendar() is GREGORIAN


def test_gregorian_calendar_with_british_adoption():
    """Test a Gregorian variant activating in 1752."""
    calendar = gregorian_calendar(Settings(gregorian_activation_year=1752))

    assert calendar.iri == GREGORIAN.iri
    assert calendar.month_lengths(1600)[1] == 28
    assert calendar.month_lengths(1756)[1] == 29
    assert GREGORIAN.month_lengths(1600)[1] == 29
