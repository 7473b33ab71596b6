"""Tests for logging configuration and helpers."""

import json
import logging
import sys
from logging.handlers import RotatingFileHandler

import pytest
import structlog

from ghl_community_mcp.utils.config_types import Settings
from ghl_community_mcp.utils.logging_config import (
    MASK,
    JsonFormatter,
    configure_logging,
    log_performance,
    mask_sensitive_data,
    operation_var,
)


@pytest.fixture
def restore_logging():
    """Put the root logger and structlog back the way they were."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, RotatingFileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    structlog.reset_defaults()


class TestMaskSensitiveData:
    def test_masks_nested_keys(self):
        data = {
            "headers": {"Token-Id": "tok", "x-location-id": "loc"},
            "items": [{"password": "p"}, ("a", {"secret": "s"})],
        }

        masked = mask_sensitive_data(data)

        assert masked["headers"] == {"Token-Id": MASK, "x-location-id": "loc"}
        assert masked["items"][0] == {"password": MASK}
        assert masked["items"][1] == ("a", {"secret": MASK})

    def test_additional_patterns(self):
        assert mask_sensitive_data({"userId": "u"}, {"userid"}) == {"userId": MASK}


class TestJsonFormatter:
    def test_format_includes_extra_data_and_masks(self):
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)
        record.extra_data = {"token": "tok", "duration_ms": 5}

        output = json.loads(JsonFormatter().format(record))

        assert output["message"] == "hello"
        assert output["level"] == "INFO"
        assert output["token"] == MASK
        assert output["duration_ms"] == 5


class TestLogPerformance:
    async def test_logs_completion(self, caplog):
        caplog.set_level(logging.DEBUG)

        @log_performance("sample_op")
        async def sample():
            assert operation_var.get() == "sample_op"
            return 42

        assert await sample() == 42
        assert operation_var.get() is None
        assert any("Completed sample_op" in r.message for r in caplog.records)

    async def test_logs_failure_and_reraises(self, caplog):
        caplog.set_level(logging.DEBUG)

        @log_performance()
        async def broken():
            raise ValueError("nope")

        with pytest.raises(ValueError):
            await broken()

        assert any("Failed" in r.message for r in caplog.records)


class TestConfigureLogging:
    def test_console_handler_on_stderr(self, restore_logging):
        configure_logging(Settings(log_level="DEBUG"))

        root = restore_logging
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_structured_uses_json(self, restore_logging):
        configure_logging(Settings(), structured=True)

        assert isinstance(restore_logging.handlers[0].formatter, JsonFormatter)

    def test_file_handler(self, restore_logging, tmp_path):
        log_file = tmp_path / "logs" / "server.log"

        configure_logging(Settings(log_file=str(log_file)))

        assert any(isinstance(h, RotatingFileHandler) for h in restore_logging.handlers)
        assert log_file.parent.is_dir()

    def test_level_override(self, restore_logging):
        configure_logging(Settings(log_level="DEBUG"), log_level_override="error")

        assert restore_logging.level == logging.ERROR
        assert restore_logging.handlers[0].level == logging.ERROR

    def test_structlog_writes_to_stderr(self, restore_logging, capsys):
        configure_logging(Settings())

        structlog.get_logger("test").info("structlog_event", answer=42)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "structlog_event" in captured.err
