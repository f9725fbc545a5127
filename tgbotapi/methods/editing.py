"""Builders for updating and deleting messages.

Edits target either ``chat_id`` + ``message_id`` or ``inline_message_id``;
which pair is required depends on how the message was sent, so all three are
optional here.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from tgbotapi.models import ChatId, InlineKeyboardMarkup, InputMedia, LinkPreviewOptions, MessageEntity
from tgbotapi.request import Request, build_request


def edit_message_text(text: str, business_connection_id: Optional[str] = None, chat_id: Optional[ChatId] = None, message_id: Optional[int] = None, inline_message_id: Optional[str] = None, parse_mode: Optional[str] = None, entities: Optional[List[MessageEntity]] = None, link_preview_options: Optional[LinkPreviewOptions] = None, reply_markup: Optional[InlineKeyboardMarkup] = None) -> Request:
    """Use this method to edit text and game messages. On success, the edited Message is returned, otherwise True is returned."""
    parameters: Dict[str, Any] = {}
    parameters["text"] = text
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if chat_id is not None:
        parameters["chat_id"] = chat_id
    if message_id is not None:
        parameters["message_id"] = message_id
    if inline_message_id is not None:
        parameters["inline_message_id"] = inline_message_id
    if parse_mode is not None:
        parameters["parse_mode"] = parse_mode
    if entities is not None:
        parameters["entities"] = entities
    if link_preview_options is not None:
        parameters["link_preview_options"] = link_preview_options
    if reply_markup is not None:
        parameters["reply_markup"] = reply_markup
    return build_request("editMessageText", parameters)


def edit_message_caption(business_connection_id: Optional[str] = None, chat_id: Optional[ChatId] = None, message_id: Optional[int] = None, inline_message_id: Optional[str] = None, caption: Optional[str] = None, parse_mode: Optional[str] = None, caption_entities: Optional[List[MessageEntity]] = None, show_caption_above_media: Optional[bool] = None, reply_markup: Optional[InlineKeyboardMarkup] = None) -> Request:
    """Use this method to edit captions of messages. On success, the edited Message is returned, otherwise True is returned."""
    parameters: Dict[str, Any] = {}
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if chat_id is not None:
        parameters["chat_id"] = chat_id
    if message_id is not None:
        parameters["message_id"] = message_id
    if inline_message_id is not None:
        parameters["inline_message_id"] = inline_message_id
    if caption is not None:
        parameters["caption"] = caption
    if parse_mode is not None:
        parameters["parse_mode"] = parse_mode
    if caption_entities is not None:
        parameters["caption_entities"] = caption_entities
    if show_caption_above_media is not None:
        parameters["show_caption_above_media"] = show_caption_above_media
    if reply_markup is not None:
        parameters["reply_markup"] = reply_markup
    return build_request("editMessageCaption", parameters)


def edit_message_media(media: InputMedia, business_connection_id: Optional[str] = None, chat_id: Optional[ChatId] = None, message_id: Optional[int] = None, inline_message_id: Optional[str] = None, reply_markup: Optional[InlineKeyboardMarkup] = None) -> Request:
    """Use this method to edit animation, audio, document, photo, or video messages. On success, the edited Message is returned, otherwise True is returned."""
    parameters: Dict[str, Any] = {}
    parameters["media"] = media
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if chat_id is not None:
        parameters["chat_id"] = chat_id
    if message_id is not None:
        parameters["message_id"] = message_id
    if inline_message_id is not None:
        parameters["inline_message_id"] = inline_message_id
    if reply_markup is not None:
        parameters["reply_markup"] = reply_markup
    return build_request("editMessageMedia", parameters)


def edit_message_live_location(latitude: float, longitude: float, business_connection_id: Optional[str] = None, chat_id: Optional[ChatId] = None, message_id: Optional[int] = None, inline_message_id: Optional[str] = None, live_period: Optional[int] = None, horizontal_accuracy: Optional[float] = None, heading: Optional[int] = None, proximity_alert_radius: Optional[int] = None, reply_markup: Optional[InlineKeyboardMarkup] = None) -> Request:
    """Use this method to edit live location messages. On success, the edited Message is returned, otherwise True is returned."""
    parameters: Dict[str, Any] = {}
    parameters["latitude"] = latitude
    parameters["longitude"] = longitude
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if chat_id is not None:
        parameters["chat_id"] = chat_id
    if message_id is not None:
        parameters["message_id"] = message_id
    if inline_message_id is not None:
        parameters["inline_message_id"] = inline_message_id
    if live_period is not None:
        parameters["live_period"] = live_period
    if horizontal_accuracy is not None:
        parameters["horizontal_accuracy"] = horizontal_accuracy
    if heading is not None:
        parameters["heading"] = heading
    if proximity_alert_radius is not None:
        parameters["proximity_alert_radius"] = proximity_alert_radius
    if reply_markup is not None:
        parameters["reply_markup"] = reply_markup
    return build_request("editMessageLiveLocation", parameters)


def stop_message_live_location(business_connection_id: Optional[str] = None, chat_id: Optional[ChatId] = None, message_id: Optional[int] = None, inline_message_id: Optional[str] = None, reply_markup: Optional[InlineKeyboardMarkup] = None) -> Request:
    """Use this method to stop updating a live location message before live_period expires. On success, the edited Message is returned, otherwise True is returned."""
    parameters: Dict[str, Any] = {}
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if chat_id is not None:
        parameters["chat_id"] = chat_id
    if message_id is not None:
        parameters["message_id"] = message_id
    if inline_message_id is not None:
        parameters["inline_message_id"] = inline_message_id
    if reply_markup is not None:
        parameters["reply_markup"] = reply_markup
    return build_request("stopMessageLiveLocation", parameters)


def edit_message_reply_markup(business_connection_id: Optional[str] = None, chat_id: Optional[ChatId] = None, message_id: Optional[int] = None, inline_message_id: Optional[str] = None, reply_markup: Optional[InlineKeyboardMarkup] = None) -> Request:
    """Use this method to edit only the reply markup of messages. On success, the edited Message is returned, otherwise True is returned."""
    parameters: Dict[str, Any] = {}
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if chat_id is not None:
        parameters["chat_id"] = chat_id
    if message_id is not None:
        parameters["message_id"] = message_id
    if inline_message_id is not None:
        parameters["inline_message_id"] = inline_message_id
    if reply_markup is not None:
        parameters["reply_markup"] = reply_markup
    return build_request("editMessageReplyMarkup", parameters)


def stop_poll(chat_id: ChatId, message_id: int, business_connection_id: Optional[str] = None, reply_markup: Optional[InlineKeyboardMarkup] = None) -> Request:
    """Use this method to stop a poll which was sent by the bot. On success, the stopped Poll is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["message_id"] = message_id
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if reply_markup is not None:
        parameters["reply_markup"] = reply_markup
    return build_request("stopPoll", parameters)


def delete_message(chat_id: ChatId, message_id: int) -> Request:
    """Use this method to delete a message, including service messages. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["message_id"] = message_id
    return build_request("deleteMessage", parameters)


def delete_messages(chat_id: ChatId, message_ids: List[int]) -> Request:
    """Use this method to delete multiple messages simultaneously. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["message_ids"] = message_ids
    return build_request("deleteMessages", parameters)
