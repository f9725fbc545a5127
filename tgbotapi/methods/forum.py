"""Builders for forum topic management."""

from __future__ import annotations

from typing import Any, Dict, Optional

from tgbotapi.models import ChatId
from tgbotapi.request import Request, build_request


def get_forum_topic_icon_stickers() -> Request:
    """Use this method to get custom emoji stickers, which can be used as a forum topic icon by any user. Returns an Array of Sticker objects."""
    return build_request("getForumTopicIconStickers", {})


def create_forum_topic(chat_id: ChatId, name: str, icon_color: Optional[int] = None, icon_custom_emoji_id: Optional[str] = None) -> Request:
    """Use this method to create a topic in a forum supergroup chat. Returns information about the created topic as a ForumTopic object."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["name"] = name
    if icon_color is not None:
        parameters["icon_color"] = icon_color
    if icon_custom_emoji_id is not None:
        parameters["icon_custom_emoji_id"] = icon_custom_emoji_id
    return build_request("createForumTopic", parameters)


def edit_forum_topic(chat_id: ChatId, message_thread_id: int, name: Optional[str] = None, icon_custom_emoji_id: Optional[str] = None) -> Request:
    """Use this method to edit name and icon of a topic in a forum supergroup chat. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["message_thread_id"] = message_thread_id
    if name is not None:
        parameters["name"] = name
    if icon_custom_emoji_id is not None:
        parameters["icon_custom_emoji_id"] = icon_custom_emoji_id
    return build_request("editForumTopic", parameters)


def close_forum_topic(chat_id: ChatId, message_thread_id: int) -> Request:
    """Use this method to close an open topic in a forum supergroup chat. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["message_thread_id"] = message_thread_id
    return build_request("closeForumTopic", parameters)


def reopen_forum_topic(chat_id: ChatId, message_thread_id: int) -> Request:
    """Use this method to reopen a closed topic in a forum supergroup chat. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["message_thread_id"] = message_thread_id
    return build_request("reopenForumTopic", parameters)


def delete_forum_topic(chat_id: ChatId, message_thread_id: int) -> Request:
    """Use this method to delete a forum topic along with all its messages in a forum supergroup chat. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["message_thread_id"] = message_thread_id
    return build_request("deleteForumTopic", parameters)


def unpin_all_forum_topic_messages(chat_id: ChatId, message_thread_id: int) -> Request:
    """Use this method to clear the list of pinned messages in a forum topic. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["message_thread_id"] = message_thread_id
    return build_request("unpinAllForumTopicMessages", parameters)


def edit_general_forum_topic(chat_id: ChatId, name: str) -> Request:
    """Use this method to edit the name of the 'General' topic in a forum supergroup chat. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["name"] = name
    return build_request("editGeneralForumTopic", parameters)


def close_general_forum_topic(chat_id: ChatId) -> Request:
    """Use this method to close an open 'General' topic in a forum supergroup chat. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    return build_request("closeGeneralForumTopic", parameters)


def reopen_general_forum_topic(chat_id: ChatId) -> Request:
    """Use this method to reopen a closed 'General' topic in a forum supergroup chat. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    return build_request("reopenGeneralForumTopic", parameters)


def hide_general_forum_topic(chat_id: ChatId) -> Request:
    """Use this method to hide the 'General' topic in a forum supergroup chat. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    return build_request("hideGeneralForumTopic", parameters)


def unhide_general_forum_topic(chat_id: ChatId) -> Request:
    """Use this method to unhide the 'General' topic in a forum supergroup chat. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    return build_request("unhideGeneralForumTopic", parameters)


def unpin_all_general_forum_topic_messages(chat_id: ChatId) -> Request:
    """Use this method to clear the list of pinned messages in a General forum topic. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    return build_request("unpinAllGeneralForumTopicMessages", parameters)
