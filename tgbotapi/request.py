"""Request value produced by every builder in :mod:`tgbotapi.methods`.

A :class:`Request` is just the Bot API method name plus a sparse parameter
map.  Sending it is the caller's job: POST :meth:`Request.to_json` to
:meth:`Request.url` with the :data:`CONTENT_TYPE` header.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field

from tgbotapi import config
from tgbotapi.codec import encode
from tgbotapi.exceptions import RequestConstructionError

_request_logger = logging.getLogger("tgbotapi.request")

CONTENT_TYPE: str = "application/json; charset=utf-8"

# <bot id>:<secret>, as issued by @BotFather.
_TOKEN_PATTERN = re.compile(r"\d+:[A-Za-z0-9_-]+")
_METHOD_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9]*")


class Request(BaseModel):
    """A Bot API call: method name and the parameters that were actually supplied."""

    method: str
    parameters: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    def payload(self) -> Dict[str, Any]:
        """Return the parameters encoded to plain JSON values with wire names."""
        return encode(self.parameters)

    def to_json(self) -> str:
        """Serialize :meth:`payload` to a compact JSON document."""
        return json.dumps(self.payload(), ensure_ascii=False, separators=(",", ":"))

    def url(self, token: str, base_url: Optional[str] = None) -> str:
        """Return ``<base_url>/bot<token>/<method>``.

        *base_url* defaults to :data:`tgbotapi.config.API_BASE_URL`.

        Raises:
            RequestConstructionError: If the token, method name or base URL is unusable.
        """
        base = (config.API_BASE_URL if base_url is None else base_url).rstrip("/")
        reason = self._url_problem(token, base)
        if reason is not None:
            _request_logger.warning(
                "Request URL rejected",
                extra={"api_endpoint": self.method, "reason": reason},
            )
            raise RequestConstructionError(self.method, reason)
        return f"{base}/bot{token}/{self.method}"

    def _url_problem(self, token: str, base: str) -> Optional[str]:
        if not token:
            return "bot token is empty"
        if not _TOKEN_PATTERN.fullmatch(token):
            return "bot token is malformed"
        if not _METHOD_PATTERN.fullmatch(self.method):
            return "method name is malformed"
        parts = urlsplit(base)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            return "base URL must be an absolute http(s) URL"
        return None


def build_request(method: str, parameters: Dict[str, Any]) -> Request:
    """Wrap an already sparse parameter map into a :class:`Request`."""
    _request_logger.debug(
        "Request built",
        extra={"api_endpoint": method, "parameter_keys": sorted(parameters)},
    )
    return Request(method=method, parameters=parameters)
