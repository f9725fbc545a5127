"""Builders for games and high score tables."""

from __future__ import annotations

from typing import Any, Dict, Optional

from tgbotapi.models import InlineKeyboardMarkup, ReplyParameters
from tgbotapi.request import Request, build_request


def send_game(chat_id: int, game_short_name: str, business_connection_id: Optional[str] = None, message_thread_id: Optional[int] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, message_effect_id: Optional[str] = None, reply_parameters: Optional[ReplyParameters] = None, reply_markup: Optional[InlineKeyboardMarkup] = None) -> Request:
    """Use this method to send a game. On success, the sent Message is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["game_short_name"] = game_short_name
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    if disable_notification is not None:
        parameters["disable_notification"] = disable_notification
    if protect_content is not None:
        parameters["protect_content"] = protect_content
    if message_effect_id is not None:
        parameters["message_effect_id"] = message_effect_id
    if reply_parameters is not None:
        parameters["reply_parameters"] = reply_parameters
    if reply_markup is not None:
        parameters["reply_markup"] = reply_markup
    return build_request("sendGame", parameters)


def set_game_score(user_id: int, score: int, force: Optional[bool] = None, disable_edit_message: Optional[bool] = None, chat_id: Optional[int] = None, message_id: Optional[int] = None, inline_message_id: Optional[str] = None) -> Request:
    """Use this method to set the score of the specified user in a game message. On success, the edited Message is returned, otherwise True is returned."""
    parameters: Dict[str, Any] = {}
    parameters["user_id"] = user_id
    parameters["score"] = score
    if force is not None:
        parameters["force"] = force
    if disable_edit_message is not None:
        parameters["disable_edit_message"] = disable_edit_message
    if chat_id is not None:
        parameters["chat_id"] = chat_id
    if message_id is not None:
        parameters["message_id"] = message_id
    if inline_message_id is not None:
        parameters["inline_message_id"] = inline_message_id
    return build_request("setGameScore", parameters)


def get_game_high_scores(user_id: int, chat_id: Optional[int] = None, message_id: Optional[int] = None, inline_message_id: Optional[str] = None) -> Request:
    """Use this method to get data for high score tables. Returns an Array of GameHighScore objects."""
    parameters: Dict[str, Any] = {}
    parameters["user_id"] = user_id
    if chat_id is not None:
        parameters["chat_id"] = chat_id
    if message_id is not None:
        parameters["message_id"] = message_id
    if inline_message_id is not None:
        parameters["inline_message_id"] = inline_message_id
    return build_request("getGameHighScores", parameters)
