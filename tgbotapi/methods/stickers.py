"""Builders for sending stickers and managing sticker sets."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from tgbotapi.models import ChatId, FileOrPath, InputFile, InputSticker, MaskPosition, ReplyMarkup, ReplyParameters
from tgbotapi.request import Request, build_request


def send_sticker(chat_id: ChatId, sticker: FileOrPath, business_connection_id: Optional[str] = None, message_thread_id: Optional[int] = None, emoji: Optional[str] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, message_effect_id: Optional[str] = None, reply_parameters: Optional[ReplyParameters] = None, reply_markup: Optional[ReplyMarkup] = None) -> Request:
    """Use this method to send static .WEBP, animated .TGS, or video .WEBM stickers. On success, the sent Message is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["sticker"] = sticker
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    if emoji is not None:
        parameters["emoji"] = emoji
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
    return build_request("sendSticker", parameters)


def get_sticker_set(name: str) -> Request:
    """Use this method to get a sticker set. On success, a StickerSet object is returned."""
    parameters: Dict[str, Any] = {}
    parameters["name"] = name
    return build_request("getStickerSet", parameters)


def get_custom_emoji_stickers(custom_emoji_ids: List[str]) -> Request:
    """Use this method to get information about custom emoji stickers by their identifiers. Returns an Array of Sticker objects."""
    parameters: Dict[str, Any] = {}
    parameters["custom_emoji_ids"] = custom_emoji_ids
    return build_request("getCustomEmojiStickers", parameters)


def upload_sticker_file(user_id: int, sticker: InputFile, sticker_format: str) -> Request:
    """Use this method to upload a file with a sticker for later use in the createNewStickerSet, addStickerToSet, or replaceStickerInSet methods. Returns the uploaded File on success."""
    parameters: Dict[str, Any] = {}
    parameters["user_id"] = user_id
    parameters["sticker"] = sticker
    parameters["sticker_format"] = sticker_format
    return build_request("uploadStickerFile", parameters)


def create_new_sticker_set(user_id: int, name: str, title: str, stickers: List[InputSticker], sticker_type: Optional[str] = None, needs_repainting: Optional[bool] = None) -> Request:
    """Use this method to create a new sticker set owned by a user. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["user_id"] = user_id
    parameters["name"] = name
    parameters["title"] = title
    parameters["stickers"] = stickers
    if sticker_type is not None:
        parameters["sticker_type"] = sticker_type
    if needs_repainting is not None:
        parameters["needs_repainting"] = needs_repainting
    return build_request("createNewStickerSet", parameters)


def add_sticker_to_set(user_id: int, name: str, sticker: InputSticker) -> Request:
    """Use this method to add a new sticker to a set created by the bot. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["user_id"] = user_id
    parameters["name"] = name
    parameters["sticker"] = sticker
    return build_request("addStickerToSet", parameters)


def set_sticker_position_in_set(sticker: str, position: int) -> Request:
    """Use this method to move a sticker in a set created by the bot to a specific position. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["sticker"] = sticker
    parameters["position"] = position
    return build_request("setStickerPositionInSet", parameters)


def delete_sticker_from_set(sticker: str) -> Request:
    """Use this method to delete a sticker from a set created by the bot. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["sticker"] = sticker
    return build_request("deleteStickerFromSet", parameters)


def replace_sticker_in_set(user_id: int, name: str, old_sticker: str, sticker: InputSticker) -> Request:
    """Use this method to replace an existing sticker in a sticker set with a new one. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["user_id"] = user_id
    parameters["name"] = name
    parameters["old_sticker"] = old_sticker
    parameters["sticker"] = sticker
    return build_request("replaceStickerInSet", parameters)


def set_sticker_emoji_list(sticker: str, emoji_list: List[str]) -> Request:
    """Use this method to change the list of emoji assigned to a regular or custom emoji sticker. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["sticker"] = sticker
    parameters["emoji_list"] = emoji_list
    return build_request("setStickerEmojiList", parameters)


def set_sticker_keywords(sticker: str, keywords: Optional[List[str]] = None) -> Request:
    """Use this method to change search keywords assigned to a regular or custom emoji sticker. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["sticker"] = sticker
    if keywords is not None:
        parameters["keywords"] = keywords
    return build_request("setStickerKeywords", parameters)


def set_sticker_mask_position(sticker: str, mask_position: Optional[MaskPosition] = None) -> Request:
    """Use this method to change the mask position of a mask sticker. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["sticker"] = sticker
    if mask_position is not None:
        parameters["mask_position"] = mask_position
    return build_request("setStickerMaskPosition", parameters)


def set_sticker_set_title(name: str, title: str) -> Request:
    """Use this method to set the title of a created sticker set. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["name"] = name
    parameters["title"] = title
    return build_request("setStickerSetTitle", parameters)


def set_sticker_set_thumbnail(name: str, user_id: int, format: str, thumbnail: Optional[FileOrPath] = None) -> Request:
    """Use this method to set the thumbnail of a regular or mask sticker set. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["name"] = name
    parameters["user_id"] = user_id
    parameters["format"] = format
    if thumbnail is not None:
        parameters["thumbnail"] = thumbnail
    return build_request("setStickerSetThumbnail", parameters)


def set_custom_emoji_sticker_set_thumbnail(name: str, custom_emoji_id: Optional[str] = None) -> Request:
    """Use this method to set the thumbnail of a custom emoji sticker set. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["name"] = name
    if custom_emoji_id is not None:
        parameters["custom_emoji_id"] = custom_emoji_id
    return build_request("setCustomEmojiStickerSetThumbnail", parameters)


def delete_sticker_set(name: str) -> Request:
    """Use this method to delete a sticker set that was created by the bot. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["name"] = name
    return build_request("deleteStickerSet", parameters)
