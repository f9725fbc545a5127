"""Builders for Telegram Passport."""

from __future__ import annotations

from typing import Any, Dict, List

from tgbotapi.models import PassportElementError
from tgbotapi.request import Request, build_request


def set_passport_data_errors(user_id: int, errors: List[PassportElementError]) -> Request:
    """Informs a user that some of the Telegram Passport elements they provided contains errors. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["user_id"] = user_id
    parameters["errors"] = errors
    return build_request("setPassportDataErrors", parameters)
