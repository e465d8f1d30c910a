"""Tests for logging configuration."""

import json
import logging

from infrastructure.config import get_logger
from infrastructure.config.logger import JSONFormatter, TextFormatter


def make_record(**extra):
    record = logging.LogRecord("incubator.test", logging.INFO, __file__, 10, "hello %s", ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestFormatters:
    """Test JSON and text formatters."""

    def test_json_includes_context_fields(self):
        payload = json.loads(JSONFormatter().format(make_record(application_id=7, channel="review")))

        assert payload["message"] == "hello world"
        assert payload["level"] == "INFO"
        assert payload["application_id"] == 7
        assert payload["channel"] == "review"
        assert "tracking_token" not in payload

    def test_text_format(self):
        line = TextFormatter().format(make_record())
        assert "incubator.test - hello world" in line


class TestGetLogger:
    """Test logger naming."""

    def test_names_nest_under_service_logger(self):
        assert get_logger("audit").name == "incubator.audit"
        assert get_logger("incubator.audit").name == "incubator.audit"
        assert get_logger().name == "incubator"
