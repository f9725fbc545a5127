"""Builders for callback answers and the bot's own settings (commands, name, menu button)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from tgbotapi.models import BotCommand, BotCommandScope, ChatAdministratorRights, MenuButton
from tgbotapi.request import Request, build_request


def answer_callback_query(callback_query_id: str, text: Optional[str] = None, show_alert: Optional[bool] = None, url: Optional[str] = None, cache_time: Optional[int] = None) -> Request:
    """Use this method to send answers to callback queries sent from inline keyboards. On success, True is returned."""
    parameters: Dict[str, Any] = {}
    parameters["callback_query_id"] = callback_query_id
    if text is not None:
        parameters["text"] = text
    if show_alert is not None:
        parameters["show_alert"] = show_alert
    if url is not None:
        parameters["url"] = url
    if cache_time is not None:
        parameters["cache_time"] = cache_time
    return build_request("answerCallbackQuery", parameters)


def set_my_commands(commands: List[BotCommand], scope: Optional[BotCommandScope] = None, language_code: Optional[str] = None) -> Request:
    """Use this method to change the list of the bot's commands. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["commands"] = commands
    if scope is not None:
        parameters["scope"] = scope
    if language_code is not None:
        parameters["language_code"] = language_code
    return build_request("setMyCommands", parameters)


def delete_my_commands(scope: Optional[BotCommandScope] = None, language_code: Optional[str] = None) -> Request:
    """Use this method to delete the list of the bot's commands for the given scope and user language. Returns True on success."""
    parameters: Dict[str, Any] = {}
    if scope is not None:
        parameters["scope"] = scope
    if language_code is not None:
        parameters["language_code"] = language_code
    return build_request("deleteMyCommands", parameters)


def get_my_commands(scope: Optional[BotCommandScope] = None, language_code: Optional[str] = None) -> Request:
    """Use this method to get the current list of the bot's commands for the given scope and user language. Returns an Array of BotCommand objects."""
    parameters: Dict[str, Any] = {}
    if scope is not None:
        parameters["scope"] = scope
    if language_code is not None:
        parameters["language_code"] = language_code
    return build_request("getMyCommands", parameters)


def set_my_name(name: Optional[str] = None, language_code: Optional[str] = None) -> Request:
    """Use this method to change the bot's name. Returns True on success."""
    parameters: Dict[str, Any] = {}
    if name is not None:
        parameters["name"] = name
    if language_code is not None:
        parameters["language_code"] = language_code
    return build_request("setMyName", parameters)


def get_my_name(language_code: Optional[str] = None) -> Request:
    """Use this method to get the current bot name for the given user language. Returns BotName on success."""
    parameters: Dict[str, Any] = {}
    if language_code is not None:
        parameters["language_code"] = language_code
    return build_request("getMyName", parameters)


def set_my_description(description: Optional[str] = None, language_code: Optional[str] = None) -> Request:
    """Use this method to change the bot's description, which is shown in the chat with the bot if the chat is empty. Returns True on success."""
    parameters: Dict[str, Any] = {}
    if description is not None:
        parameters["description"] = description
    if language_code is not None:
        parameters["language_code"] = language_code
    return build_request("setMyDescription", parameters)


def get_my_description(language_code: Optional[str] = None) -> Request:
    """Use this method to get the current bot description for the given user language. Returns BotDescription on success."""
    parameters: Dict[str, Any] = {}
    if language_code is not None:
        parameters["language_code"] = language_code
    return build_request("getMyDescription", parameters)


def set_my_short_description(short_description: Optional[str] = None, language_code: Optional[str] = None) -> Request:
    """Use this method to change the bot's short description, which is shown on the bot's profile page. Returns True on success."""
    parameters: Dict[str, Any] = {}
    if short_description is not None:
        parameters["short_description"] = short_description
    if language_code is not None:
        parameters["language_code"] = language_code
    return build_request("setMyShortDescription", parameters)


def get_my_short_description(language_code: Optional[str] = None) -> Request:
    """Use this method to get the current bot short description for the given user language. Returns BotShortDescription on success."""
    parameters: Dict[str, Any] = {}
    if language_code is not None:
        parameters["language_code"] = language_code
    return build_request("getMyShortDescription", parameters)


def set_chat_menu_button(chat_id: Optional[int] = None, menu_button: Optional[MenuButton] = None) -> Request:
    """Use this method to change the bot's menu button in a private chat, or the default menu button. Returns True on success."""
    parameters: Dict[str, Any] = {}
    if chat_id is not None:
        parameters["chat_id"] = chat_id
    if menu_button is not None:
        parameters["menu_button"] = menu_button
    return build_request("setChatMenuButton", parameters)


def get_chat_menu_button(chat_id: Optional[int] = None) -> Request:
    """Use this method to get the current value of the bot's menu button in a private chat, or the default menu button. Returns MenuButton on success."""
    parameters: Dict[str, Any] = {}
    if chat_id is not None:
        parameters["chat_id"] = chat_id
    return build_request("getChatMenuButton", parameters)


def set_my_default_administrator_rights(rights: Optional[ChatAdministratorRights] = None, for_channels: Optional[bool] = None) -> Request:
    """Use this method to change the default administrator rights requested by the bot when it's added as an administrator to groups or channels. Returns True on success."""
    parameters: Dict[str, Any] = {}
    if rights is not None:
        parameters["rights"] = rights
    if for_channels is not None:
        parameters["for_channels"] = for_channels
    return build_request("setMyDefaultAdministratorRights", parameters)


def get_my_default_administrator_rights(for_channels: Optional[bool] = None) -> Request:
    """Use this method to get the current default administrator rights of the bot. Returns ChatAdministratorRights on success."""
    parameters: Dict[str, Any] = {}
    if for_channels is not None:
        parameters["for_channels"] = for_channels
    return build_request("getMyDefaultAdministratorRights", parameters)
