"""Tests for structured logging."""

import json
import logging
import sys
from io import StringIO
from unittest.mock import patch

from prodfloor.core.logging import (
    ConsoleFormatter,
    JSONFormatter,
    LoggerAdapter,
    build_formatter,
    get_logger,
)
from prodfloor.repositories import InMemoryJobRepository
from prodfloor.services.job_service import JobListingService


def _record(msg="Test message", level=logging.INFO, exc_info=None):
    return logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="/app/test.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestJSONFormatter:
    """Tests for JSON log formatter."""

    def test_basic_log_format(self):
        parsed = json.loads(JSONFormatter().format(_record()))

        assert parsed["level"] == "INFO"
        assert parsed["logger"] == "test.logger"
        assert parsed["message"] == "Test message"
        assert parsed["line"] == 42
        assert "timestamp" in parsed
        assert "extra" not in parsed

    def test_json_formatter_with_extra(self):
        record = _record()
        record.category = "Cat1"
        record.page = 2

        parsed = json.loads(JSONFormatter().format(record))

        assert parsed["extra"] == {"category": "Cat1", "page": 2}

    def test_json_formatter_without_extra(self):
        record = _record()
        record.category = "Cat1"

        parsed = json.loads(JSONFormatter(include_extra=False).format(record))

        assert "extra" not in parsed

    def test_json_formatter_with_exception(self):
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        parsed = json.loads(JSONFormatter().format(_record(level=logging.ERROR, exc_info=exc_info)))

        assert parsed["exception"]["type"] == "ValueError"
        assert parsed["exception"]["message"] == "Test error"
        assert isinstance(parsed["exception"]["traceback"], list)

    def test_json_formatter_handles_non_serializable(self):
        record = _record()
        record.custom_object = object()

        parsed = json.loads(JSONFormatter().format(record))

        assert "object" in parsed["extra"]["custom_object"].lower()


class TestConsoleFormatter:
    """Tests for console log formatter."""

    def test_basic_console_format(self):
        output = ConsoleFormatter().format(_record())

        assert "INFO" in output
        assert "test.logger" in output
        assert "Test message" in output

    def test_console_formatter_with_colors(self):
        formatter = ConsoleFormatter()
        for level, color in ConsoleFormatter.COLORS.items():
            output = formatter.format(_record(level=getattr(logging, level)))
            assert color in output, f"Color code missing for {level}"


class TestFormatterSelection:
    """Tests for LOG_FORMAT / environment driven formatter choice."""

    def test_explicit_json(self):
        with patch("prodfloor.core.logging.settings") as mock_settings:
            mock_settings.log_format = "json"
            assert isinstance(build_formatter(), JSONFormatter)

    def test_production_defaults_to_json(self):
        with patch("prodfloor.core.logging.settings") as mock_settings:
            mock_settings.log_format = None
            mock_settings.environment = "production"
            assert isinstance(build_formatter(), JSONFormatter)

    def test_development_defaults_to_console(self):
        with patch("prodfloor.core.logging.settings") as mock_settings:
            mock_settings.log_format = None
            mock_settings.environment = "development"
            assert isinstance(build_formatter(), ConsoleFormatter)


class TestLoggerAdapter:
    """Tests for LoggerAdapter context injection."""

    def test_adapter_merges_context_with_extra(self):
        base_logger = logging.getLogger("test.adapter")
        base_logger.setLevel(logging.DEBUG)
        stream = StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(JSONFormatter())
        base_logger.addHandler(handler)

        try:
            adapter = LoggerAdapter(base_logger, {"request_id": "abc-123"})
            adapter.info("Listing", extra={"page": 3})
            parsed = json.loads(stream.getvalue())
        finally:
            base_logger.removeHandler(handler)

        assert parsed["extra"]["request_id"] == "abc-123"
        assert parsed["extra"]["page"] == 3

    def test_get_logger_returns_named_logger(self):
        assert get_logger("prodfloor.test").name == "prodfloor.test"


def test_listing_logs_bind_category_and_page(caplog, typed_jobs):
    """The service binds category and page through LoggerAdapter context."""
    service = JobListingService(InMemoryJobRepository(typed_jobs), page_size=3)

    with caplog.at_level(logging.DEBUG, logger="prodfloor.services.job_service"):
        service.list("Cat2", 2)

    record = next(r for r in caplog.records if r.getMessage() == "Listed jobs")
    assert record.category == "Cat2"
    assert record.page == 2
    assert record.returned == 0
    assert record.total_items == 2
    assert record.total_pages == 1
