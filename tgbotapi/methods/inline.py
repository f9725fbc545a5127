"""Builders for inline mode answers."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from tgbotapi.models import InlineQueryResult, InlineQueryResultsButton
from tgbotapi.request import Request, build_request


def answer_inline_query(inline_query_id: str, results: List[InlineQueryResult], cache_time: Optional[int] = None, is_personal: Optional[bool] = None, next_offset: Optional[str] = None, button: Optional[InlineQueryResultsButton] = None) -> Request:
    """Use this method to send answers to an inline query. On success, True is returned. No more than 50 results per query are allowed."""
    parameters: Dict[str, Any] = {}
    parameters["inline_query_id"] = inline_query_id
    parameters["results"] = results
    if cache_time is not None:
        parameters["cache_time"] = cache_time
    if is_personal is not None:
        parameters["is_personal"] = is_personal
    if next_offset is not None:
        parameters["next_offset"] = next_offset
    if button is not None:
        parameters["button"] = button
    return build_request("answerInlineQuery", parameters)


def answer_web_app_query(web_app_query_id: str, result: InlineQueryResult) -> Request:
    """Use this method to set the result of an interaction with a Web App and send a corresponding message on behalf of the user. On success, a SentWebAppMessage object is returned."""
    parameters: Dict[str, Any] = {}
    parameters["web_app_query_id"] = web_app_query_id
    parameters["result"] = result
    return build_request("answerWebAppQuery", parameters)
