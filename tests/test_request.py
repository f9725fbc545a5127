"""Tests for Request payload encoding and URL assembly."""

import json
import logging
import os
import sys

import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tgbotapi import config
from tgbotapi.exceptions import BotApiError, RequestConstructionError
from tgbotapi.methods import get_me, send_message
from tgbotapi.models import InlineKeyboardButton, InlineKeyboardMarkup
from tgbotapi.request import CONTENT_TYPE, Request

TOKEN = "123456:ABC-DEF_ghi"


# ── Payload ──────────────────────────────────────────────────────────────────


class TestPayload:
    """JSON body produced from a Request."""

    def test_content_type(self) -> None:
        assert CONTENT_TYPE == "application/json; charset=utf-8"

    def test_to_json_is_compact_utf8(self) -> None:
        body = send_message(chat_id=42, text="héllo").to_json()
        assert body == '{"chat_id":42,"text":"héllo"}'

    def test_to_json_nested_models(self) -> None:
        markup = InlineKeyboardMarkup(inline_keyboard=[[InlineKeyboardButton(text="A", url="https://example.org")]])
        body = json.loads(send_message(chat_id="@news", text="x", reply_markup=markup).to_json())
        assert body["reply_markup"] == {"inline_keyboard": [[{"text": "A", "url": "https://example.org"}]]}

    def test_empty_payload(self) -> None:
        assert get_me().to_json() == "{}"

    def test_request_is_immutable(self) -> None:
        request = get_me()
        with pytest.raises(ValidationError):
            request.method = "logOut"


# ── URL ──────────────────────────────────────────────────────────────────────


class TestUrl:
    """Target URL assembly."""

    def test_default_base(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(config, "API_BASE_URL", "https://api.telegram.org")
        assert get_me().url(TOKEN) == f"https://api.telegram.org/bot{TOKEN}/getMe"

    def test_local_server_base(self) -> None:
        url = send_message(chat_id=1, text="x").url(TOKEN, base_url="http://localhost:8081/")
        assert url == f"http://localhost:8081/bot{TOKEN}/sendMessage"

    @pytest.mark.parametrize(
        "token, reason",
        [
            ("", "bot token is empty"),
            ("not-a-token", "bot token is malformed"),
            ("123:abc/def", "bot token is malformed"),
            ("123:abc\n", "bot token is malformed"),
        ],
    )
    def test_bad_token(self, token: str, reason: str) -> None:
        with pytest.raises(RequestConstructionError) as excinfo:
            get_me().url(token, base_url="https://api.telegram.org")
        assert excinfo.value.reason == reason
        assert excinfo.value.method == "getMe"
        assert isinstance(excinfo.value, BotApiError)

    @pytest.mark.parametrize("method", ["send/Message", "getMe\n", ""])
    def test_bad_method_name(self, method: str) -> None:
        with pytest.raises(RequestConstructionError) as excinfo:
            Request(method=method).url(TOKEN, base_url="https://api.telegram.org")
        assert excinfo.value.reason == "method name is malformed"

    @pytest.mark.parametrize("base_url", ["ftp://example.org", "api.telegram.org", "https://"])
    def test_bad_base_url(self, base_url: str) -> None:
        with pytest.raises(RequestConstructionError):
            get_me().url(TOKEN, base_url=base_url)

    def test_rejection_is_logged_without_token(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING, logger="tgbotapi")
        secret = "999:secret-part"
        with pytest.raises(RequestConstructionError):
            get_me().url(secret, base_url="ftp://example.org")
        record = next(r for r in caplog.records if r.getMessage() == "Request URL rejected")
        assert record.api_endpoint == "getMe"
        assert all(secret not in str(value) for value in record.__dict__.values())
