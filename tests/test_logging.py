"""
Tests for logging utilities and configuration.
"""

import io
import json
import logging

import pytest

from geogrid import create_mgrs, create_utm, create_wgs
from geogrid.core.errors import ParseError
from geogrid.core.logging_config import (
    LOGGER_NAME,
    JSONFormatter,
    get_log_level,
    get_logger,
    setup_logging,
)


def _make_record(msg: str = "test", level: int = logging.INFO, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="geogrid.test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    record.__dict__.update(extra)
    return record


@pytest.fixture
def restore_geogrid_logger():
    """Restore the geogrid logger's handlers and level after a test."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestLoggingConfig:
    """Tests for logging configuration."""

    def test_get_log_level(self):
        """Test log level name conversion."""
        assert get_log_level("DEBUG") == logging.DEBUG
        assert get_log_level("INFO") == logging.INFO
        assert get_log_level("WARNING") == logging.WARNING
        assert get_log_level("ERROR") == logging.ERROR
        assert get_log_level("CRITICAL") == logging.CRITICAL
        assert get_log_level("invalid") == logging.INFO  # Default

    def test_get_log_level_case_insensitive(self):
        """Test log level is case insensitive."""
        assert get_log_level("debug") == logging.DEBUG
        assert get_log_level("DeBuG") == logging.DEBUG

    def test_setup_logging_leaves_root_alone(self, restore_geogrid_logger):
        """Test only the geogrid logger gets a handler."""
        root_handlers = list(logging.getLogger().handlers)

        logger = setup_logging(log_level="DEBUG", stream=io.StringIO())

        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert logging.getLogger().handlers == root_handlers

    def test_setup_logging_replaces_own_handler(self, restore_geogrid_logger):
        """Test repeated setup does not stack handlers."""
        before = len(logging.getLogger(LOGGER_NAME).handlers)

        setup_logging(log_level="INFO", stream=io.StringIO())
        setup_logging(log_level="WARNING", stream=io.StringIO())

        logger = logging.getLogger(LOGGER_NAME)
        assert len(logger.handlers) == before + 1
        assert logger.level == logging.WARNING

    def test_setup_logging_json_stream(self, restore_geogrid_logger):
        """Test rejected input is written as JSON with its context."""
        stream = io.StringIO()
        setup_logging(log_level="DEBUG", json_logs=True, stream=stream)

        with pytest.raises(ParseError):
            create_mgrs("32VPM9700043000")

        entries = [json.loads(line) for line in stream.getvalue().splitlines()]
        rejected = [entry for entry in entries if entry.get("system") == "mgrs"]
        assert rejected[-1]["raw_input"] == "32VPM9700043000"
        assert rejected[-1]["level"] == "DEBUG"
        assert rejected[-1]["logger"] == "geogrid.core.factory"

    def test_get_logger(self):
        """Test get_logger keeps loggers inside the geogrid namespace."""
        assert get_logger("geogrid.core.factory").name == "geogrid.core.factory"
        assert get_logger("geogrid").name == "geogrid"
        assert get_logger("__main__").name == "geogrid.__main__"


class TestFormatters:
    """Tests for log formatters."""

    def test_json_formatter(self):
        """Test JSON formatter output."""
        record = _make_record("Rejected input", raw_input="33VVE7220287839", system="mgrs")

        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["message"] == "Rejected input"
        assert data["raw_input"] == "33VVE7220287839"
        assert data["system"] == "mgrs"
        assert "timestamp" in data

    def test_json_formatter_without_context(self):
        """Test records without extras omit the context keys."""
        data = json.loads(JSONFormatter().format(_make_record()))

        assert "raw_input" not in data
        assert "system" not in data


class TestLibraryLogging:
    """Tests for log output of the factories."""

    def test_rejected_utm_logged_at_debug(self, caplog: pytest.LogCaptureFixture):
        """Test that rejected grid input is logged before raising."""
        with caplog.at_level(logging.DEBUG, logger="geogrid"):
            with pytest.raises(ParseError):
                create_utm("61U 448251 5411932")

        records = [r for r in caplog.records if "Rejected UTM input" in r.getMessage()]
        assert records[-1].raw_input == "61U 448251 5411932"
        assert records[-1].system == "utm"

    def test_rejected_wgs_logged_at_debug(self, caplog: pytest.LogCaptureFixture):
        """Test WGS rejections carry their input."""
        with caplog.at_level(logging.DEBUG, logger="geogrid"):
            with pytest.raises(ParseError):
                create_wgs("40° 61' N, 74° W")

        assert any(getattr(r, "system", None) == "wgs" for r in caplog.records)
