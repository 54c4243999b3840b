"""Tests for logging integration."""

import logging

from chronometry import UNIX_TIME, configure_logging, position_to_coordinate


def test_package_logger_has_null_handler():
    """Test that importing the library never prints by itself."""
    handlers = logging.getLogger("chronometry").handlers

    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)


def test_conversions_log_at_debug(caplog):
    """Test that conversions emit DEBUG records from the converter logger."""
    with caplog.at_level(logging.DEBUG, logger="chronometry"):
        position_to_coordinate(60, UNIX_TIME)

    records = [record for record in caplog.records if record.name == "chronometry.converter"]
    assert records
    assert all(record.levelno == logging.DEBUG for record in records)


def test_configure_logging_forwards_to_basic_config(monkeypatch):
    """Test the root logger setup helper."""
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging(level="DEBUG", force=True)

    assert calls[0]["level"] == "DEBUG"
    assert calls[0]["force"] is True
    assert "%(name)s" in calls[0]["format"]
