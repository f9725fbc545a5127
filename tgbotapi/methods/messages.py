"""Builders for sending, forwarding and copying messages, plus the basic bot calls.

Most ``send_*`` builders accept the usual ``reply_parameters`` /
``reply_markup`` pair and the business-account ``business_connection_id``.
Files are passed either as an :class:`~tgbotapi.models.InputFile` placeholder
or as a file_id / URL string.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from tgbotapi.models import (
    ChatId,
    FileOrPath,
    InputMedia,
    InputPaidMedia,
    InputPollOption,
    LinkPreviewOptions,
    MessageEntity,
    ReactionType,
    ReplyMarkup,
    ReplyParameters,
)
from tgbotapi.request import Request, build_request


def get_me() -> Request:
    """A simple method for testing your bot's authentication token. Returns basic information about the bot in form of a User object."""
    return build_request("getMe", {})


def log_out() -> Request:
    """Use this method to log out from the cloud Bot API server before launching the bot locally. Returns True on success."""
    return build_request("logOut", {})


def close() -> Request:
    """Use this method to close the bot instance before moving it from one local server to another. Returns True on success."""
    return build_request("close", {})


def send_message(chat_id: ChatId, text: str, business_connection_id: Optional[str] = None, message_thread_id: Optional[int] = None, parse_mode: Optional[str] = None, entities: Optional[List[MessageEntity]] = None, link_preview_options: Optional[LinkPreviewOptions] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, message_effect_id: Optional[str] = None, reply_parameters: Optional[ReplyParameters] = None, reply_markup: Optional[ReplyMarkup] = None) -> Request:
    """Use this method to send text messages. On success, the sent Message is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["text"] = text
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    if parse_mode is not None:
        parameters["parse_mode"] = parse_mode
    if entities is not None:
        parameters["entities"] = entities
    if link_preview_options is not None:
        parameters["link_preview_options"] = link_preview_options
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
    return build_request("sendMessage", parameters)


def forward_message(chat_id: ChatId, from_chat_id: ChatId, message_id: int, message_thread_id: Optional[int] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None) -> Request:
    """Use this method to forward messages of any kind. On success, the sent Message is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["from_chat_id"] = from_chat_id
    parameters["message_id"] = message_id
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    if disable_notification is not None:
        parameters["disable_notification"] = disable_notification
    if protect_content is not None:
        parameters["protect_content"] = protect_content
    return build_request("forwardMessage", parameters)


def forward_messages(chat_id: ChatId, from_chat_id: ChatId, message_ids: List[int], message_thread_id: Optional[int] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None) -> Request:
    """Use this method to forward multiple messages of any kind. On success, an array of MessageId of the sent messages is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["from_chat_id"] = from_chat_id
    parameters["message_ids"] = message_ids
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    if disable_notification is not None:
        parameters["disable_notification"] = disable_notification
    if protect_content is not None:
        parameters["protect_content"] = protect_content
    return build_request("forwardMessages", parameters)


def copy_message(chat_id: ChatId, from_chat_id: ChatId, message_id: int, message_thread_id: Optional[int] = None, caption: Optional[str] = None, parse_mode: Optional[str] = None, caption_entities: Optional[List[MessageEntity]] = None, show_caption_above_media: Optional[bool] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_parameters: Optional[ReplyParameters] = None, reply_markup: Optional[ReplyMarkup] = None) -> Request:
    """Use this method to copy messages of any kind. Returns the MessageId of the sent message on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["from_chat_id"] = from_chat_id
    parameters["message_id"] = message_id
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    if caption is not None:
        parameters["caption"] = caption
    if parse_mode is not None:
        parameters["parse_mode"] = parse_mode
    if caption_entities is not None:
        parameters["caption_entities"] = caption_entities
    if show_caption_above_media is not None:
        parameters["show_caption_above_media"] = show_caption_above_media
    if disable_notification is not None:
        parameters["disable_notification"] = disable_notification
    if protect_content is not None:
        parameters["protect_content"] = protect_content
    if reply_parameters is not None:
        parameters["reply_parameters"] = reply_parameters
    if reply_markup is not None:
        parameters["reply_markup"] = reply_markup
    return build_request("copyMessage", parameters)


def copy_messages(chat_id: ChatId, from_chat_id: ChatId, message_ids: List[int], message_thread_id: Optional[int] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, remove_caption: Optional[bool] = None) -> Request:
    """Use this method to copy messages of any kind without a link to the original. On success, an array of MessageId of the sent messages is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["from_chat_id"] = from_chat_id
    parameters["message_ids"] = message_ids
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    if disable_notification is not None:
        parameters["disable_notification"] = disable_notification
    if protect_content is not None:
        parameters["protect_content"] = protect_content
    if remove_caption is not None:
        parameters["remove_caption"] = remove_caption
    return build_request("copyMessages", parameters)


def send_photo(chat_id: ChatId, photo: FileOrPath, business_connection_id: Optional[str] = None, message_thread_id: Optional[int] = None, caption: Optional[str] = None, parse_mode: Optional[str] = None, caption_entities: Optional[List[MessageEntity]] = None, show_caption_above_media: Optional[bool] = None, has_spoiler: Optional[bool] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, message_effect_id: Optional[str] = None, reply_parameters: Optional[ReplyParameters] = None, reply_markup: Optional[ReplyMarkup] = None) -> Request:
    """Use this method to send photos. On success, the sent Message is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["photo"] = photo
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    if caption is not None:
        parameters["caption"] = caption
    if parse_mode is not None:
        parameters["parse_mode"] = parse_mode
    if caption_entities is not None:
        parameters["caption_entities"] = caption_entities
    if show_caption_above_media is not None:
        parameters["show_caption_above_media"] = show_caption_above_media
    if has_spoiler is not None:
        parameters["has_spoiler"] = has_spoiler
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
    return build_request("sendPhoto", parameters)


def send_audio(chat_id: ChatId, audio: FileOrPath, business_connection_id: Optional[str] = None, message_thread_id: Optional[int] = None, caption: Optional[str] = None, parse_mode: Optional[str] = None, caption_entities: Optional[List[MessageEntity]] = None, duration: Optional[int] = None, performer: Optional[str] = None, title: Optional[str] = None, thumbnail: Optional[FileOrPath] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, message_effect_id: Optional[str] = None, reply_parameters: Optional[ReplyParameters] = None, reply_markup: Optional[ReplyMarkup] = None) -> Request:
    """Use this method to send audio files, if you want Telegram clients to display them in the music player. On success, the sent Message is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["audio"] = audio
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    if caption is not None:
        parameters["caption"] = caption
    if parse_mode is not None:
        parameters["parse_mode"] = parse_mode
    if caption_entities is not None:
        parameters["caption_entities"] = caption_entities
    if duration is not None:
        parameters["duration"] = duration
    if performer is not None:
        parameters["performer"] = performer
    if title is not None:
        parameters["title"] = title
    if thumbnail is not None:
        parameters["thumbnail"] = thumbnail
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
    return build_request("sendAudio", parameters)


def send_document(chat_id: ChatId, document: FileOrPath, business_connection_id: Optional[str] = None, message_thread_id: Optional[int] = None, thumbnail: Optional[FileOrPath] = None, caption: Optional[str] = None, parse_mode: Optional[str] = None, caption_entities: Optional[List[MessageEntity]] = None, disable_content_type_detection: Optional[bool] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, message_effect_id: Optional[str] = None, reply_parameters: Optional[ReplyParameters] = None, reply_markup: Optional[ReplyMarkup] = None) -> Request:
    """Use this method to send general files. On success, the sent Message is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["document"] = document
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    if thumbnail is not None:
        parameters["thumbnail"] = thumbnail
    if caption is not None:
        parameters["caption"] = caption
    if parse_mode is not None:
        parameters["parse_mode"] = parse_mode
    if caption_entities is not None:
        parameters["caption_entities"] = caption_entities
    if disable_content_type_detection is not None:
        parameters["disable_content_type_detection"] = disable_content_type_detection
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
    return build_request("sendDocument", parameters)


def send_video(chat_id: ChatId, video: FileOrPath, business_connection_id: Optional[str] = None, message_thread_id: Optional[int] = None, duration: Optional[int] = None, width: Optional[int] = None, height: Optional[int] = None, thumbnail: Optional[FileOrPath] = None, caption: Optional[str] = None, parse_mode: Optional[str] = None, caption_entities: Optional[List[MessageEntity]] = None, show_caption_above_media: Optional[bool] = None, has_spoiler: Optional[bool] = None, supports_streaming: Optional[bool] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, message_effect_id: Optional[str] = None, reply_parameters: Optional[ReplyParameters] = None, reply_markup: Optional[ReplyMarkup] = None) -> Request:
    """Use this method to send video files, Telegram clients support MPEG4 videos. On success, the sent Message is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["video"] = video
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    if duration is not None:
        parameters["duration"] = duration
    if width is not None:
        parameters["width"] = width
    if height is not None:
        parameters["height"] = height
    if thumbnail is not None:
        parameters["thumbnail"] = thumbnail
    if caption is not None:
        parameters["caption"] = caption
    if parse_mode is not None:
        parameters["parse_mode"] = parse_mode
    if caption_entities is not None:
        parameters["caption_entities"] = caption_entities
    if show_caption_above_media is not None:
        parameters["show_caption_above_media"] = show_caption_above_media
    if has_spoiler is not None:
        parameters["has_spoiler"] = has_spoiler
    if supports_streaming is not None:
        parameters["supports_streaming"] = supports_streaming
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
    return build_request("sendVideo", parameters)


def send_animation(chat_id: ChatId, animation: FileOrPath, business_connection_id: Optional[str] = None, message_thread_id: Optional[int] = None, duration: Optional[int] = None, width: Optional[int] = None, height: Optional[int] = None, thumbnail: Optional[FileOrPath] = None, caption: Optional[str] = None, parse_mode: Optional[str] = None, caption_entities: Optional[List[MessageEntity]] = None, show_caption_above_media: Optional[bool] = None, has_spoiler: Optional[bool] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, message_effect_id: Optional[str] = None, reply_parameters: Optional[ReplyParameters] = None, reply_markup: Optional[ReplyMarkup] = None) -> Request:
    """Use this method to send animation files (GIF or H.264/MPEG-4 AVC video without sound). On success, the sent Message is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["animation"] = animation
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    if duration is not None:
        parameters["duration"] = duration
    if width is not None:
        parameters["width"] = width
    if height is not None:
        parameters["height"] = height
    if thumbnail is not None:
        parameters["thumbnail"] = thumbnail
    if caption is not None:
        parameters["caption"] = caption
    if parse_mode is not None:
        parameters["parse_mode"] = parse_mode
    if caption_entities is not None:
        parameters["caption_entities"] = caption_entities
    if show_caption_above_media is not None:
        parameters["show_caption_above_media"] = show_caption_above_media
    if has_spoiler is not None:
        parameters["has_spoiler"] = has_spoiler
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
    return build_request("sendAnimation", parameters)


def send_voice(chat_id: ChatId, voice: FileOrPath, business_connection_id: Optional[str] = None, message_thread_id: Optional[int] = None, caption: Optional[str] = None, parse_mode: Optional[str] = None, caption_entities: Optional[List[MessageEntity]] = None, duration: Optional[int] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, message_effect_id: Optional[str] = None, reply_parameters: Optional[ReplyParameters] = None, reply_markup: Optional[ReplyMarkup] = None) -> Request:
    """Use this method to send audio files, if you want Telegram clients to display the file as a playable voice message. On success, the sent Message is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["voice"] = voice
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    if caption is not None:
        parameters["caption"] = caption
    if parse_mode is not None:
        parameters["parse_mode"] = parse_mode
    if caption_entities is not None:
        parameters["caption_entities"] = caption_entities
    if duration is not None:
        parameters["duration"] = duration
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
    return build_request("sendVoice", parameters)


def send_video_note(chat_id: ChatId, video_note: FileOrPath, business_connection_id: Optional[str] = None, message_thread_id: Optional[int] = None, duration: Optional[int] = None, length: Optional[int] = None, thumbnail: Optional[FileOrPath] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, message_effect_id: Optional[str] = None, reply_parameters: Optional[ReplyParameters] = None, reply_markup: Optional[ReplyMarkup] = None) -> Request:
    """Use this method to send video messages (rounded square MPEG4 videos of up to 1 minute long). On success, the sent Message is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["video_note"] = video_note
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    if duration is not None:
        parameters["duration"] = duration
    if length is not None:
        parameters["length"] = length
    if thumbnail is not None:
        parameters["thumbnail"] = thumbnail
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
    return build_request("sendVideoNote", parameters)


def send_paid_media(chat_id: ChatId, star_count: int, media: List[InputPaidMedia], caption: Optional[str] = None, parse_mode: Optional[str] = None, caption_entities: Optional[List[MessageEntity]] = None, show_caption_above_media: Optional[bool] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, reply_parameters: Optional[ReplyParameters] = None, reply_markup: Optional[ReplyMarkup] = None) -> Request:
    """Use this method to send paid media to channel chats. On success, the sent Message is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["star_count"] = star_count
    parameters["media"] = media
    if caption is not None:
        parameters["caption"] = caption
    if parse_mode is not None:
        parameters["parse_mode"] = parse_mode
    if caption_entities is not None:
        parameters["caption_entities"] = caption_entities
    if show_caption_above_media is not None:
        parameters["show_caption_above_media"] = show_caption_above_media
    if disable_notification is not None:
        parameters["disable_notification"] = disable_notification
    if protect_content is not None:
        parameters["protect_content"] = protect_content
    if reply_parameters is not None:
        parameters["reply_parameters"] = reply_parameters
    if reply_markup is not None:
        parameters["reply_markup"] = reply_markup
    return build_request("sendPaidMedia", parameters)


def send_media_group(chat_id: ChatId, media: List[InputMedia], business_connection_id: Optional[str] = None, message_thread_id: Optional[int] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, message_effect_id: Optional[str] = None, reply_parameters: Optional[ReplyParameters] = None) -> Request:
    """Use this method to send a group of photos, videos, documents or audios as an album. On success, an array of Messages that were sent is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["media"] = media
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
    return build_request("sendMediaGroup", parameters)


def send_location(chat_id: ChatId, latitude: float, longitude: float, business_connection_id: Optional[str] = None, message_thread_id: Optional[int] = None, horizontal_accuracy: Optional[float] = None, live_period: Optional[int] = None, heading: Optional[int] = None, proximity_alert_radius: Optional[int] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, message_effect_id: Optional[str] = None, reply_parameters: Optional[ReplyParameters] = None, reply_markup: Optional[ReplyMarkup] = None) -> Request:
    """Use this method to send point on the map. On success, the sent Message is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["latitude"] = latitude
    parameters["longitude"] = longitude
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    if horizontal_accuracy is not None:
        parameters["horizontal_accuracy"] = horizontal_accuracy
    if live_period is not None:
        parameters["live_period"] = live_period
    if heading is not None:
        parameters["heading"] = heading
    if proximity_alert_radius is not None:
        parameters["proximity_alert_radius"] = proximity_alert_radius
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
    return build_request("sendLocation", parameters)


def send_venue(chat_id: ChatId, latitude: float, longitude: float, title: str, address: str, business_connection_id: Optional[str] = None, message_thread_id: Optional[int] = None, foursquare_id: Optional[str] = None, foursquare_type: Optional[str] = None, google_place_id: Optional[str] = None, google_place_type: Optional[str] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, message_effect_id: Optional[str] = None, reply_parameters: Optional[ReplyParameters] = None, reply_markup: Optional[ReplyMarkup] = None) -> Request:
    """Use this method to send information about a venue. On success, the sent Message is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["latitude"] = latitude
    parameters["longitude"] = longitude
    parameters["title"] = title
    parameters["address"] = address
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    if foursquare_id is not None:
        parameters["foursquare_id"] = foursquare_id
    if foursquare_type is not None:
        parameters["foursquare_type"] = foursquare_type
    if google_place_id is not None:
        parameters["google_place_id"] = google_place_id
    if google_place_type is not None:
        parameters["google_place_type"] = google_place_type
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
    return build_request("sendVenue", parameters)


def send_contact(chat_id: ChatId, phone_number: str, first_name: str, business_connection_id: Optional[str] = None, message_thread_id: Optional[int] = None, last_name: Optional[str] = None, vcard: Optional[str] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, message_effect_id: Optional[str] = None, reply_parameters: Optional[ReplyParameters] = None, reply_markup: Optional[ReplyMarkup] = None) -> Request:
    """Use this method to send phone contacts. On success, the sent Message is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["phone_number"] = phone_number
    parameters["first_name"] = first_name
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    if last_name is not None:
        parameters["last_name"] = last_name
    if vcard is not None:
        parameters["vcard"] = vcard
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
    return build_request("sendContact", parameters)


def send_poll(chat_id: ChatId, question: str, options: List[InputPollOption], business_connection_id: Optional[str] = None, message_thread_id: Optional[int] = None, question_parse_mode: Optional[str] = None, question_entities: Optional[List[MessageEntity]] = None, is_anonymous: Optional[bool] = None, type: Optional[str] = None, allows_multiple_answers: Optional[bool] = None, correct_option_id: Optional[int] = None, explanation: Optional[str] = None, explanation_parse_mode: Optional[str] = None, explanation_entities: Optional[List[MessageEntity]] = None, open_period: Optional[int] = None, close_date: Optional[int] = None, is_closed: Optional[bool] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, message_effect_id: Optional[str] = None, reply_parameters: Optional[ReplyParameters] = None, reply_markup: Optional[ReplyMarkup] = None) -> Request:
    """Use this method to send a native poll. On success, the sent Message is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["question"] = question
    parameters["options"] = options
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    if question_parse_mode is not None:
        parameters["question_parse_mode"] = question_parse_mode
    if question_entities is not None:
        parameters["question_entities"] = question_entities
    if is_anonymous is not None:
        parameters["is_anonymous"] = is_anonymous
    if type is not None:
        parameters["type"] = type
    if allows_multiple_answers is not None:
        parameters["allows_multiple_answers"] = allows_multiple_answers
    if correct_option_id is not None:
        parameters["correct_option_id"] = correct_option_id
    if explanation is not None:
        parameters["explanation"] = explanation
    if explanation_parse_mode is not None:
        parameters["explanation_parse_mode"] = explanation_parse_mode
    if explanation_entities is not None:
        parameters["explanation_entities"] = explanation_entities
    if open_period is not None:
        parameters["open_period"] = open_period
    if close_date is not None:
        parameters["close_date"] = close_date
    if is_closed is not None:
        parameters["is_closed"] = is_closed
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
    return build_request("sendPoll", parameters)


def send_dice(chat_id: ChatId, business_connection_id: Optional[str] = None, message_thread_id: Optional[int] = None, emoji: Optional[str] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, message_effect_id: Optional[str] = None, reply_parameters: Optional[ReplyParameters] = None, reply_markup: Optional[ReplyMarkup] = None) -> Request:
    """Use this method to send an animated emoji that will display a random value. On success, the sent Message is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
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
    return build_request("sendDice", parameters)


def send_chat_action(chat_id: ChatId, action: str, business_connection_id: Optional[str] = None, message_thread_id: Optional[int] = None) -> Request:
    """Use this method when you need to tell the user that something is happening on the bot's side. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["action"] = action
    if business_connection_id is not None:
        parameters["business_connection_id"] = business_connection_id
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    return build_request("sendChatAction", parameters)


def set_message_reaction(chat_id: ChatId, message_id: int, reaction: Optional[List[ReactionType]] = None, is_big: Optional[bool] = None) -> Request:
    """Use this method to change the chosen reactions on a message. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["message_id"] = message_id
    if reaction is not None:
        parameters["reaction"] = reaction
    if is_big is not None:
        parameters["is_big"] = is_big
    return build_request("setMessageReaction", parameters)


def get_user_profile_photos(user_id: int, offset: Optional[int] = None, limit: Optional[int] = None) -> Request:
    """Use this method to get a list of profile pictures for a user. Returns a UserProfilePhotos object."""
    parameters: Dict[str, Any] = {}
    parameters["user_id"] = user_id
    if offset is not None:
        parameters["offset"] = offset
    if limit is not None:
        parameters["limit"] = limit
    return build_request("getUserProfilePhotos", parameters)


def get_file(file_id: str) -> Request:
    """Use this method to get basic information about a file and prepare it for downloading. On success, a File object is returned."""
    parameters: Dict[str, Any] = {}
    parameters["file_id"] = file_id
    return build_request("getFile", parameters)
