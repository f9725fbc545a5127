"""Tests for environment-driven settings."""

import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tgbotapi import config


class TestLogLevel:
    """TGBOTAPI_LOG_LEVEL parsing."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (None, logging.WARNING),
            ("", logging.WARNING),
            ("debug", logging.DEBUG),
            (" ERROR ", logging.ERROR),
            ("15", 15),
            ("chatty", logging.WARNING),
        ],
    )
    def test_parse(self, raw, expected: int) -> None:
        assert config._parse_log_level(raw) == expected


class TestApiBaseUrl:
    """TELEGRAM_API_URL resolution."""

    def test_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TELEGRAM_API_URL", raising=False)
        assert config._resolve_api_base_url() == "https://api.telegram.org"

    def test_local_server(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TELEGRAM_API_URL", "http://localhost:8081/")
        assert config._resolve_api_base_url() == "http://localhost:8081"
