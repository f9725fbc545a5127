"""Tests for BotApiLogger and its JSON formatter."""

import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tgbotapi import config
from tgbotapi.core.logger import BotApiLogger, _JsonFormatter, init_library_logging


@pytest.fixture()
def fresh_logger(monkeypatch: pytest.MonkeyPatch):
    """Detach the shared handlers so a new singleton can be built, then restore them."""
    logger = logging.getLogger(BotApiLogger.LOGGER_NAME)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    saved_propagate = logger.propagate
    for handler in saved_handlers:
        logger.removeHandler(handler)
    monkeypatch.setattr(BotApiLogger, "_instance", None)
    yield logger
    if BotApiLogger._instance is not None:
        BotApiLogger._instance.cleanup()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in saved_handlers:
        logger.addHandler(handler)
    logger.setLevel(saved_level)
    logger.propagate = saved_propagate


# ── _JsonFormatter ───────────────────────────────────────────────────────────


class TestJsonFormatter:
    """Each record becomes one JSON object."""

    def test_standard_fields(self) -> None:
        record = logging.LogRecord("tgbotapi.codec", logging.INFO, __file__, 10, "Decode failed", (), None)
        entry = json.loads(_JsonFormatter().format(record))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "tgbotapi.codec"
        assert entry["message"] == "Decode failed"
        assert {"timestamp", "module", "func_name"} <= set(entry)

    def test_extra_fields_are_merged(self) -> None:
        record = logging.LogRecord("tgbotapi.request", logging.DEBUG, __file__, 10, "Request built", (), None)
        record.api_endpoint = "sendMessage"
        record.parameter_keys = ["chat_id", "text"]
        entry = json.loads(_JsonFormatter().format(record))
        assert entry["api_endpoint"] == "sendMessage"
        assert entry["parameter_keys"] == ["chat_id", "text"]

    def test_message_args(self) -> None:
        record = logging.LogRecord("tgbotapi", logging.WARNING, __file__, 1, "%s rejected", ("url",), None)
        assert json.loads(_JsonFormatter().format(record))["message"] == "url rejected"


# ── BotApiLogger ─────────────────────────────────────────────────────────────


class TestBotApiLogger:
    """Singleton wiring."""

    def test_singleton(self, fresh_logger: logging.Logger) -> None:
        assert BotApiLogger(log_file="") is BotApiLogger()
        assert BotApiLogger.get_logger() is logging.getLogger("tgbotapi")

    def test_console_only_without_file(self, fresh_logger: logging.Logger) -> None:
        BotApiLogger(level=logging.INFO, log_file="")
        assert [type(h) for h in fresh_logger.handlers] == [logging.StreamHandler]
        assert fresh_logger.level == logging.INFO

    def test_rotating_file(self, fresh_logger: logging.Logger, tmp_path) -> None:
        log_file = tmp_path / "logs" / "tgbotapi.log"
        BotApiLogger(level=logging.DEBUG, log_file=str(log_file))
        file_handlers = [h for h in fresh_logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == 5 * 1024 * 1024
        assert file_handlers[0].backupCount == 5

        fresh_logger.debug("Request built", extra={"api_endpoint": "getMe"})
        file_handlers[0].flush()
        entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert entry["api_endpoint"] == "getMe"

    def test_cleanup_removes_handlers(self, fresh_logger: logging.Logger) -> None:
        instance = BotApiLogger(level=logging.INFO, log_file="")
        instance.cleanup()
        assert fresh_logger.handlers == []
        assert fresh_logger.propagate is True
        assert BotApiLogger._instance is None

    def test_does_not_propagate_while_attached(self, fresh_logger: logging.Logger) -> None:
        BotApiLogger(level=logging.INFO, log_file="")
        assert fresh_logger.propagate is False


# ── init_library_logging ─────────────────────────────────────────────────────


class TestLibraryLogging:
    """Import-time wiring of the tgbotapi logger."""

    def test_silent_by_default(self, fresh_logger: logging.Logger) -> None:
        init_library_logging(enabled=False)
        assert [type(h) for h in fresh_logger.handlers] == [logging.NullHandler]
        assert fresh_logger.propagate is True
        assert BotApiLogger._instance is None

    def test_null_handler_added_once(self, fresh_logger: logging.Logger) -> None:
        init_library_logging(enabled=False)
        init_library_logging(enabled=False)
        assert len(fresh_logger.handlers) == 1

    def test_records_reach_host_handlers(self, fresh_logger: logging.Logger, caplog: pytest.LogCaptureFixture) -> None:
        init_library_logging(enabled=False)
        caplog.set_level(logging.WARNING, logger="tgbotapi")
        logging.getLogger("tgbotapi.request").warning("Request URL rejected")
        assert [r.getMessage() for r in caplog.records] == ["Request URL rejected"]

    def test_enabled_from_config(self, fresh_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(config, "LOGGING_ENABLED", True)
        monkeypatch.setattr(config, "LOG_FILE", None)
        logger = init_library_logging()
        assert logger is fresh_logger
        streams = [h for h in fresh_logger.handlers if type(h) is logging.StreamHandler]
        assert len(streams) == 1
        assert isinstance(streams[0].formatter, _JsonFormatter)
        assert fresh_logger.propagate is False
