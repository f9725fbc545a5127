"""tgbotapi: request builders and a typed JSON codec for the Telegram Bot API.

Typical use::

    from tgbotapi import decode, methods
    from tgbotapi.models import Update

    request = methods.send_message(chat_id=42, text="hi")
    url, body = request.url(token), request.to_json()
    # … POST body to url with any HTTP client, then:
    updates = decode(List[Update], response["result"])
"""

from tgbotapi import methods, models
from tgbotapi.codec import decode, decode_json, encode, one_of
from tgbotapi.core.logger import BotApiLogger, init_library_logging
from tgbotapi.exceptions import (
    BotApiError,
    DecodingError,
    NoVariantMatched,
    RequestConstructionError,
)
from tgbotapi.request import CONTENT_TYPE, Request

__version__ = "7.7.0"

init_library_logging()

__all__ = [
    "BotApiError",
    "BotApiLogger",
    "CONTENT_TYPE",
    "DecodingError",
    "NoVariantMatched",
    "Request",
    "RequestConstructionError",
    "decode",
    "decode_json",
    "encode",
    "methods",
    "models",
    "one_of",
]
