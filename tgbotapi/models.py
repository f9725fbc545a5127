"""Pydantic data models for every Telegram Bot API 7.7 object.

Every class corresponds to an object documented at
https://core.telegram.org/bots/api#available-types.  Field names are the
snake_case wire names; the single wire name that is not a Python identifier,
``from``, is exposed as ``from_field`` with ``alias="from"``.

Union types ("one of N shapes") are declared with :func:`tgbotapi.codec.one_of`
right after their variants.  A decoded union value is the variant instance
itself.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from tgbotapi.codec import one_of


class TelegramObject(BaseModel):
    """Base class for all Bot API objects.

    Unknown keys coming from newer Bot API versions are ignored.
    """

    model_config = ConfigDict(populate_by_name=True)


# ── Placeholders ─────────────────────────────────────────────────────────────


class InputFile(TelegramObject):
    """This object represents the contents of a file to be uploaded. Must be posted using multipart/form-data."""


class CallbackGame(TelegramObject):
    """A placeholder, currently holds no information. Use BotFather to set up your game."""


# ── Scalar unions ────────────────────────────────────────────────────────────

ChatId = one_of("ChatId", StrictInt, StrictStr)
"""Unique identifier for the target chat or username of the target channel (``@channelusername``)."""

FileOrPath = one_of("FileOrPath", InputFile, StrictStr)
"""A file to upload, or a file_id / HTTP URL string of a file that already exists."""


# ── Updates ──────────────────────────────────────────────────────────────────


class Update(TelegramObject):
    """This object represents an incoming update. At most **one** of the optional parameters can be present in any given update."""

    update_id: int
    message: Optional["Message"] = None
    edited_message: Optional["Message"] = None
    channel_post: Optional["Message"] = None
    edited_channel_post: Optional["Message"] = None
    business_connection: Optional["BusinessConnection"] = None
    business_message: Optional["Message"] = None
    edited_business_message: Optional["Message"] = None
    deleted_business_messages: Optional["BusinessMessagesDeleted"] = None
    message_reaction: Optional["MessageReactionUpdated"] = None
    message_reaction_count: Optional["MessageReactionCountUpdated"] = None
    inline_query: Optional["InlineQuery"] = None
    chosen_inline_result: Optional["ChosenInlineResult"] = None
    callback_query: Optional["CallbackQuery"] = None
    shipping_query: Optional["ShippingQuery"] = None
    pre_checkout_query: Optional["PreCheckoutQuery"] = None
    poll: Optional["Poll"] = None
    poll_answer: Optional["PollAnswer"] = None
    my_chat_member: Optional["ChatMemberUpdated"] = None
    chat_member: Optional["ChatMemberUpdated"] = None
    chat_join_request: Optional["ChatJoinRequest"] = None
    chat_boost: Optional["ChatBoostUpdated"] = None
    removed_chat_boost: Optional["ChatBoostRemoved"] = None


class WebhookInfo(TelegramObject):
    """Describes the current status of a webhook."""

    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: Optional[str] = None
    last_error_date: Optional[int] = None
    last_error_message: Optional[str] = None
    last_synchronization_error_date: Optional[int] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None


# ── Users and chats ──────────────────────────────────────────────────────────


class User(TelegramObject):
    """This object represents a Telegram user or bot."""

    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    is_premium: Optional[bool] = None
    added_to_attachment_menu: Optional[bool] = None
    can_join_groups: Optional[bool] = None
    can_read_all_group_messages: Optional[bool] = None
    supports_inline_queries: Optional[bool] = None
    can_connect_to_business: Optional[bool] = None


class Chat(TelegramObject):
    """This object represents a chat."""

    id: int
    type: str
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_forum: Optional[bool] = None


class ChatFullInfo(TelegramObject):
    """This object contains full information about a chat."""

    id: int
    type: str
    accent_color_id: int
    max_reaction_count: int
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_forum: Optional[bool] = None
    photo: Optional["ChatPhoto"] = None
    active_usernames: Optional[List[str]] = None
    birthdate: Optional["Birthdate"] = None
    business_intro: Optional["BusinessIntro"] = None
    business_location: Optional["BusinessLocation"] = None
    business_opening_hours: Optional["BusinessOpeningHours"] = None
    personal_chat: Optional["Chat"] = None
    available_reactions: Optional[List["ReactionType"]] = None
    background_custom_emoji_id: Optional[str] = None
    profile_accent_color_id: Optional[int] = None
    profile_background_custom_emoji_id: Optional[str] = None
    emoji_status_custom_emoji_id: Optional[str] = None
    emoji_status_expiration_date: Optional[int] = None
    bio: Optional[str] = None
    has_private_forwards: Optional[bool] = None
    has_restricted_voice_and_video_messages: Optional[bool] = None
    join_to_send_messages: Optional[bool] = None
    join_by_request: Optional[bool] = None
    description: Optional[str] = None
    invite_link: Optional[str] = None
    pinned_message: Optional["Message"] = None
    permissions: Optional["ChatPermissions"] = None
    slow_mode_delay: Optional[int] = None
    unrestrict_boost_count: Optional[int] = None
    message_auto_delete_time: Optional[int] = None
    has_aggressive_anti_spam_enabled: Optional[bool] = None
    has_hidden_members: Optional[bool] = None
    has_protected_content: Optional[bool] = None
    has_visible_history: Optional[bool] = None
    sticker_set_name: Optional[str] = None
    can_set_sticker_set: Optional[bool] = None
    custom_emoji_sticker_set_name: Optional[str] = None
    linked_chat_id: Optional[int] = None
    location: Optional["ChatLocation"] = None


# ── Messages ─────────────────────────────────────────────────────────────────


class Message(TelegramObject):
    """This object represents a message."""

    message_id: int
    date: int
    chat: "Chat"
    message_thread_id: Optional[int] = None
    from_field: Optional["User"] = Field(None, alias="from")
    sender_chat: Optional["Chat"] = None
    sender_boost_count: Optional[int] = None
    sender_business_bot: Optional["User"] = None
    business_connection_id: Optional[str] = None
    forward_origin: Optional["MessageOrigin"] = None
    is_topic_message: Optional[bool] = None
    is_automatic_forward: Optional[bool] = None
    reply_to_message: Optional["Message"] = None
    external_reply: Optional["ExternalReplyInfo"] = None
    quote: Optional["TextQuote"] = None
    reply_to_story: Optional["Story"] = None
    via_bot: Optional["User"] = None
    edit_date: Optional[int] = None
    has_protected_content: Optional[bool] = None
    is_from_offline: Optional[bool] = None
    media_group_id: Optional[str] = None
    author_signature: Optional[str] = None
    text: Optional[str] = None
    entities: Optional[List["MessageEntity"]] = None
    link_preview_options: Optional["LinkPreviewOptions"] = None
    effect_id: Optional[str] = None
    animation: Optional["Animation"] = None
    audio: Optional["Audio"] = None
    document: Optional["Document"] = None
    paid_media: Optional["PaidMediaInfo"] = None
    photo: Optional[List["PhotoSize"]] = None
    sticker: Optional["Sticker"] = None
    story: Optional["Story"] = None
    video: Optional["Video"] = None
    video_note: Optional["VideoNote"] = None
    voice: Optional["Voice"] = None
    caption: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    show_caption_above_media: Optional[bool] = None
    has_media_spoiler: Optional[bool] = None
    contact: Optional["Contact"] = None
    dice: Optional["Dice"] = None
    game: Optional["Game"] = None
    poll: Optional["Poll"] = None
    venue: Optional["Venue"] = None
    location: Optional["Location"] = None
    new_chat_members: Optional[List["User"]] = None
    left_chat_member: Optional["User"] = None
    new_chat_title: Optional[str] = None
    new_chat_photo: Optional[List["PhotoSize"]] = None
    delete_chat_photo: Optional[bool] = None
    group_chat_created: Optional[bool] = None
    supergroup_chat_created: Optional[bool] = None
    channel_chat_created: Optional[bool] = None
    message_auto_delete_timer_changed: Optional["MessageAutoDeleteTimerChanged"] = None
    migrate_to_chat_id: Optional[int] = None
    migrate_from_chat_id: Optional[int] = None
    pinned_message: Optional["MaybeInaccessibleMessage"] = None
    invoice: Optional["Invoice"] = None
    successful_payment: Optional["SuccessfulPayment"] = None
    users_shared: Optional["UsersShared"] = None
    chat_shared: Optional["ChatShared"] = None
    connected_website: Optional[str] = None
    write_access_allowed: Optional["WriteAccessAllowed"] = None
    passport_data: Optional["PassportData"] = None
    proximity_alert_triggered: Optional["ProximityAlertTriggered"] = None
    boost_added: Optional["ChatBoostAdded"] = None
    chat_background_set: Optional["ChatBackground"] = None
    forum_topic_created: Optional["ForumTopicCreated"] = None
    forum_topic_edited: Optional["ForumTopicEdited"] = None
    forum_topic_closed: Optional["ForumTopicClosed"] = None
    forum_topic_reopened: Optional["ForumTopicReopened"] = None
    general_forum_topic_hidden: Optional["GeneralForumTopicHidden"] = None
    general_forum_topic_unhidden: Optional["GeneralForumTopicUnhidden"] = None
    giveaway_created: Optional["GiveawayCreated"] = None
    giveaway: Optional["Giveaway"] = None
    giveaway_winners: Optional["GiveawayWinners"] = None
    giveaway_completed: Optional["GiveawayCompleted"] = None
    video_chat_scheduled: Optional["VideoChatScheduled"] = None
    video_chat_started: Optional["VideoChatStarted"] = None
    video_chat_ended: Optional["VideoChatEnded"] = None
    video_chat_participants_invited: Optional["VideoChatParticipantsInvited"] = None
    web_app_data: Optional["WebAppData"] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None


class MessageId(TelegramObject):
    """This object represents a unique message identifier."""

    message_id: int


class InaccessibleMessage(TelegramObject):
    """This object describes a message that was deleted or is otherwise inaccessible to the bot."""

    chat: "Chat"
    message_id: int
    # Always the JSON integer 0; booleans and floats must not select this variant.
    date: StrictInt = Field(ge=0, le=0)


# Inaccessible messages always carry date == 0, so they are tried first.
MaybeInaccessibleMessage = one_of("MaybeInaccessibleMessage", InaccessibleMessage, Message)


class MessageEntity(TelegramObject):
    """This object represents one special entity in a text message. For example, hashtags, usernames, URLs, etc."""

    type: str
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional["User"] = None
    language: Optional[str] = None
    custom_emoji_id: Optional[str] = None


class TextQuote(TelegramObject):
    """This object contains information about the quoted part of a message that is replied to by the given message."""

    text: str
    position: int
    entities: Optional[List["MessageEntity"]] = None
    is_manual: Optional[bool] = None


class ExternalReplyInfo(TelegramObject):
    """This object contains information about a message that is being replied to, which may come from another chat or forum topic."""

    origin: "MessageOrigin"
    chat: Optional["Chat"] = None
    message_id: Optional[int] = None
    link_preview_options: Optional["LinkPreviewOptions"] = None
    animation: Optional["Animation"] = None
    audio: Optional["Audio"] = None
    document: Optional["Document"] = None
    paid_media: Optional["PaidMediaInfo"] = None
    photo: Optional[List["PhotoSize"]] = None
    sticker: Optional["Sticker"] = None
    story: Optional["Story"] = None
    video: Optional["Video"] = None
    video_note: Optional["VideoNote"] = None
    voice: Optional["Voice"] = None
    has_media_spoiler: Optional[bool] = None
    contact: Optional["Contact"] = None
    dice: Optional["Dice"] = None
    game: Optional["Game"] = None
    giveaway: Optional["Giveaway"] = None
    giveaway_winners: Optional["GiveawayWinners"] = None
    invoice: Optional["Invoice"] = None
    location: Optional["Location"] = None
    poll: Optional["Poll"] = None
    venue: Optional["Venue"] = None


class ReplyParameters(TelegramObject):
    """Describes reply parameters for the message that is being sent."""

    message_id: int
    chat_id: Optional["ChatId"] = None
    allow_sending_without_reply: Optional[bool] = None
    quote: Optional[str] = None
    quote_parse_mode: Optional[str] = None
    quote_entities: Optional[List["MessageEntity"]] = None
    quote_position: Optional[int] = None


class MessageOriginUser(TelegramObject):
    """The message was originally sent by a known user."""

    type: Literal["user"] = "user"
    date: int
    sender_user: "User"


class MessageOriginHiddenUser(TelegramObject):
    """The message was originally sent by an unknown user."""

    type: Literal["hidden_user"] = "hidden_user"
    date: int
    sender_user_name: str


class MessageOriginChat(TelegramObject):
    """The message was originally sent on behalf of a chat to a group chat."""

    type: Literal["chat"] = "chat"
    date: int
    sender_chat: "Chat"
    author_signature: Optional[str] = None


class MessageOriginChannel(TelegramObject):
    """The message was originally sent to a channel chat."""

    type: Literal["channel"] = "channel"
    date: int
    chat: "Chat"
    message_id: int
    author_signature: Optional[str] = None


MessageOrigin = one_of(
    "MessageOrigin",
    MessageOriginUser,
    MessageOriginHiddenUser,
    MessageOriginChat,
    MessageOriginChannel,
    tag="type",
)


# ── Media ────────────────────────────────────────────────────────────────────


class PhotoSize(TelegramObject):
    """This object represents one size of a photo or a file / sticker thumbnail."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: Optional[int] = None


class Animation(TelegramObject):
    """This object represents an animation file (GIF or H.264/MPEG-4 AVC video without sound)."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumbnail: Optional["PhotoSize"] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Audio(TelegramObject):
    """This object represents an audio file to be treated as music by the Telegram clients."""

    file_id: str
    file_unique_id: str
    duration: int
    performer: Optional[str] = None
    title: Optional[str] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None
    thumbnail: Optional["PhotoSize"] = None


class Document(TelegramObject):
    """This object represents a general file (as opposed to photos, voice messages and audio files)."""

    file_id: str
    file_unique_id: str
    thumbnail: Optional["PhotoSize"] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Story(TelegramObject):
    """This object represents a story."""

    chat: "Chat"
    id: int


class Video(TelegramObject):
    """This object represents a video file."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumbnail: Optional["PhotoSize"] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class VideoNote(TelegramObject):
    """This object represents a video message."""

    file_id: str
    file_unique_id: str
    length: int
    duration: int
    thumbnail: Optional["PhotoSize"] = None
    file_size: Optional[int] = None


class Voice(TelegramObject):
    """This object represents a voice note."""

    file_id: str
    file_unique_id: str
    duration: int
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class PaidMediaInfo(TelegramObject):
    """Describes the paid media added to a message."""

    star_count: int
    paid_media: List["PaidMedia"]


class PaidMediaPreview(TelegramObject):
    """The paid media isn't available before the payment."""

    type: Literal["preview"] = "preview"
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None


class PaidMediaPhoto(TelegramObject):
    """The paid media is a photo."""

    type: Literal["photo"] = "photo"
    photo: List["PhotoSize"]


class PaidMediaVideo(TelegramObject):
    """The paid media is a video."""

    type: Literal["video"] = "video"
    video: "Video"


PaidMedia = one_of("PaidMedia", PaidMediaPreview, PaidMediaPhoto, PaidMediaVideo, tag="type")


class Contact(TelegramObject):
    """This object represents a phone contact."""

    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    user_id: Optional[int] = None
    vcard: Optional[str] = None


class Dice(TelegramObject):
    """This object represents an animated emoji that displays a random value."""

    emoji: str
    value: int


class PollOption(TelegramObject):
    """This object contains information about one answer option in a poll."""

    text: str
    voter_count: int
    text_entities: Optional[List["MessageEntity"]] = None


class InputPollOption(TelegramObject):
    """This object contains information about one answer option in a poll to be sent."""

    text: str
    text_parse_mode: Optional[str] = None
    text_entities: Optional[List["MessageEntity"]] = None


class PollAnswer(TelegramObject):
    """This object represents an answer of a user in a non-anonymous poll."""

    poll_id: str
    option_ids: List[int]
    voter_chat: Optional["Chat"] = None
    user: Optional["User"] = None


class Poll(TelegramObject):
    """This object contains information about a poll."""

    id: str
    question: str
    options: List["PollOption"]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    type: str
    allows_multiple_answers: bool
    question_entities: Optional[List["MessageEntity"]] = None
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    explanation_entities: Optional[List["MessageEntity"]] = None
    open_period: Optional[int] = None
    close_date: Optional[int] = None


class Location(TelegramObject):
    """This object represents a point on the map."""

    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class Venue(TelegramObject):
    """This object represents a venue."""

    location: "Location"
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class WebAppData(TelegramObject):
    """Describes data sent from a Web App to the bot."""

    data: str
    button_text: str


class ProximityAlertTriggered(TelegramObject):
    """This object represents the content of a service message, sent whenever a user in the chat triggers a proximity alert set by another user."""

    traveler: "User"
    watcher: "User"
    distance: int


class MessageAutoDeleteTimerChanged(TelegramObject):
    """This object represents a service message about a change in auto-delete timer settings."""

    message_auto_delete_time: int


class ChatBoostAdded(TelegramObject):
    """This object represents a service message about a user boosting a chat."""

    boost_count: int


# ── Chat backgrounds ─────────────────────────────────────────────────────────


class BackgroundFillSolid(TelegramObject):
    """The background is filled using the selected color."""

    type: Literal["solid"] = "solid"
    color: int


class BackgroundFillGradient(TelegramObject):
    """The background is a gradient fill."""

    type: Literal["gradient"] = "gradient"
    top_color: int
    bottom_color: int
    rotation_angle: int


class BackgroundFillFreeformGradient(TelegramObject):
    """The background is a freeform gradient that rotates after every message in the chat."""

    type: Literal["freeform_gradient"] = "freeform_gradient"
    colors: List[int]


BackgroundFill = one_of(
    "BackgroundFill",
    BackgroundFillSolid,
    BackgroundFillGradient,
    BackgroundFillFreeformGradient,
    tag="type",
)


class BackgroundTypeFill(TelegramObject):
    """The background is automatically filled based on the selected colors."""

    type: Literal["fill"] = "fill"
    fill: "BackgroundFill"
    dark_theme_dimming: int


class BackgroundTypeWallpaper(TelegramObject):
    """The background is a wallpaper in the JPEG format."""

    type: Literal["wallpaper"] = "wallpaper"
    document: "Document"
    dark_theme_dimming: int
    is_blurred: Optional[bool] = None
    is_moving: Optional[bool] = None


class BackgroundTypePattern(TelegramObject):
    """The background is a PNG or TGV pattern to be combined with the background fill chosen by the user."""

    type: Literal["pattern"] = "pattern"
    document: "Document"
    fill: "BackgroundFill"
    intensity: int
    is_inverted: Optional[bool] = None
    is_moving: Optional[bool] = None


class BackgroundTypeChatTheme(TelegramObject):
    """The background is taken directly from a built-in chat theme."""

    type: Literal["chat_theme"] = "chat_theme"
    theme_name: str


BackgroundType = one_of(
    "BackgroundType",
    BackgroundTypeFill,
    BackgroundTypeWallpaper,
    BackgroundTypePattern,
    BackgroundTypeChatTheme,
    tag="type",
)


class ChatBackground(TelegramObject):
    """This object represents a chat background."""

    type: "BackgroundType"


# ── Service messages ─────────────────────────────────────────────────────────


class ForumTopicCreated(TelegramObject):
    """This object represents a service message about a new forum topic created in the chat."""

    name: str
    icon_color: int
    icon_custom_emoji_id: Optional[str] = None


class ForumTopicClosed(TelegramObject):
    """This object represents a service message about a forum topic closed in the chat. Currently holds no information."""


class ForumTopicEdited(TelegramObject):
    """This object represents a service message about an edited forum topic."""

    name: Optional[str] = None
    icon_custom_emoji_id: Optional[str] = None


class ForumTopicReopened(TelegramObject):
    """This object represents a service message about a forum topic reopened in the chat. Currently holds no information."""


class GeneralForumTopicHidden(TelegramObject):
    """This object represents a service message about General forum topic hidden in the chat. Currently holds no information."""


class GeneralForumTopicUnhidden(TelegramObject):
    """This object represents a service message about General forum topic unhidden in the chat. Currently holds no information."""


class SharedUser(TelegramObject):
    """This object contains information about a user that was shared with the bot using a KeyboardButtonRequestUsers button."""

    user_id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None
    photo: Optional[List["PhotoSize"]] = None


class UsersShared(TelegramObject):
    """This object contains information about the users whose identifiers were shared with the bot."""

    request_id: int
    users: List["SharedUser"]


class ChatShared(TelegramObject):
    """This object contains information about a chat that was shared with the bot."""

    request_id: int
    chat_id: int
    title: Optional[str] = None
    username: Optional[str] = None
    photo: Optional[List["PhotoSize"]] = None


class WriteAccessAllowed(TelegramObject):
    """This object represents a service message about a user allowing a bot to write messages."""

    from_request: Optional[bool] = None
    web_app_name: Optional[str] = None
    from_attachment_menu: Optional[bool] = None


class VideoChatScheduled(TelegramObject):
    """This object represents a service message about a video chat scheduled in the chat."""

    start_date: int


class VideoChatStarted(TelegramObject):
    """This object represents a service message about a video chat started in the chat. Currently holds no information."""


class VideoChatEnded(TelegramObject):
    """This object represents a service message about a video chat ended in the chat."""

    duration: int


class VideoChatParticipantsInvited(TelegramObject):
    """This object represents a service message about new members invited to a video chat."""

    users: List["User"]


class GiveawayCreated(TelegramObject):
    """This object represents a service message about the creation of a scheduled giveaway. Currently holds no information."""


class Giveaway(TelegramObject):
    """This object represents a message about a scheduled giveaway."""

    chats: List["Chat"]
    winners_selection_date: int
    winner_count: int
    only_new_members: Optional[bool] = None
    has_public_winners: Optional[bool] = None
    prize_description: Optional[str] = None
    country_codes: Optional[List[str]] = None
    premium_subscription_month_count: Optional[int] = None


class GiveawayWinners(TelegramObject):
    """This object represents a message about the completion of a giveaway with public winners."""

    chat: "Chat"
    giveaway_message_id: int
    winners_selection_date: int
    winner_count: int
    winners: List["User"]
    additional_chat_count: Optional[int] = None
    premium_subscription_month_count: Optional[int] = None
    unclaimed_prize_count: Optional[int] = None
    only_new_members: Optional[bool] = None
    was_refunded: Optional[bool] = None
    prize_description: Optional[str] = None


class GiveawayCompleted(TelegramObject):
    """This object represents a service message about the completion of a giveaway without public winners."""

    winner_count: int
    unclaimed_prize_count: Optional[int] = None
    giveaway_message: Optional["Message"] = None


class LinkPreviewOptions(TelegramObject):
    """Describes the options used for link preview generation."""

    is_disabled: Optional[bool] = None
    url: Optional[str] = None
    prefer_small_media: Optional[bool] = None
    prefer_large_media: Optional[bool] = None
    show_above_text: Optional[bool] = None


class UserProfilePhotos(TelegramObject):
    """This object represent a user's profile pictures."""

    total_count: int
    photos: List[List["PhotoSize"]]


class File(TelegramObject):
    """This object represents a file ready to be downloaded.

    The file can be downloaded via ``https://api.telegram.org/file/bot<token>/<file_path>``.
    """

    file_id: str
    file_unique_id: str
    file_size: Optional[int] = None
    file_path: Optional[str] = None


class WebAppInfo(TelegramObject):
    """Describes a Web App."""

    url: str


# ── Keyboards ────────────────────────────────────────────────────────────────


class ReplyKeyboardMarkup(TelegramObject):
    """This object represents a custom keyboard with reply options."""

    keyboard: List[List["KeyboardButton"]]
    is_persistent: Optional[bool] = None
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None


class KeyboardButton(TelegramObject):
    """This object represents one button of the reply keyboard."""

    text: str
    request_users: Optional["KeyboardButtonRequestUsers"] = None
    request_chat: Optional["KeyboardButtonRequestChat"] = None
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None
    request_poll: Optional["KeyboardButtonPollType"] = None
    web_app: Optional["WebAppInfo"] = None


class KeyboardButtonRequestUsers(TelegramObject):
    """This object defines the criteria used to request suitable users."""

    request_id: int
    user_is_bot: Optional[bool] = None
    user_is_premium: Optional[bool] = None
    max_quantity: Optional[int] = None
    request_name: Optional[bool] = None
    request_username: Optional[bool] = None
    request_photo: Optional[bool] = None


class KeyboardButtonRequestChat(TelegramObject):
    """This object defines the criteria used to request a suitable chat."""

    request_id: int
    chat_is_channel: bool
    chat_is_forum: Optional[bool] = None
    chat_has_username: Optional[bool] = None
    chat_is_created: Optional[bool] = None
    user_administrator_rights: Optional["ChatAdministratorRights"] = None
    bot_administrator_rights: Optional["ChatAdministratorRights"] = None
    bot_is_member: Optional[bool] = None
    request_title: Optional[bool] = None
    request_username: Optional[bool] = None
    request_photo: Optional[bool] = None


class KeyboardButtonPollType(TelegramObject):
    """This object represents type of a poll, which is allowed to be created and sent when the corresponding button is pressed."""

    type: Optional[str] = None


class ReplyKeyboardRemove(TelegramObject):
    """Upon receiving a message with this object, Telegram clients will remove the current custom keyboard."""

    remove_keyboard: bool
    selective: Optional[bool] = None


class InlineKeyboardMarkup(TelegramObject):
    """This object represents an inline keyboard that appears right next to the message it belongs to."""

    inline_keyboard: List[List["InlineKeyboardButton"]]


class InlineKeyboardButton(TelegramObject):
    """This object represents one button of an inline keyboard. Exactly one of the optional fields must be used."""

    text: str
    url: Optional[str] = None
    callback_data: Optional[str] = None
    web_app: Optional["WebAppInfo"] = None
    login_url: Optional["LoginUrl"] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    switch_inline_query_chosen_chat: Optional["SwitchInlineQueryChosenChat"] = None
    callback_game: Optional["CallbackGame"] = None
    pay: Optional[bool] = None


class LoginUrl(TelegramObject):
    """This object represents a parameter of the inline keyboard button used to automatically authorize a user."""

    url: str
    forward_text: Optional[str] = None
    bot_username: Optional[str] = None
    request_write_access: Optional[bool] = None


class SwitchInlineQueryChosenChat(TelegramObject):
    """This object represents an inline button that switches the current user to inline mode in a chosen chat."""

    query: Optional[str] = None
    allow_user_chats: Optional[bool] = None
    allow_bot_chats: Optional[bool] = None
    allow_group_chats: Optional[bool] = None
    allow_channel_chats: Optional[bool] = None


class ForceReply(TelegramObject):
    """Upon receiving a message with this object, Telegram clients will display a reply interface to the user."""

    force_reply: bool
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None


ReplyMarkup = one_of(
    "ReplyMarkup",
    InlineKeyboardMarkup,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ForceReply,
)


class CallbackQuery(TelegramObject):
    """This object represents an incoming callback query from a callback button in an inline keyboard."""

    id: str
    from_field: "User" = Field(..., alias="from")
    chat_instance: str
    message: Optional["MaybeInaccessibleMessage"] = None
    inline_message_id: Optional[str] = None
    data: Optional[str] = None
    game_short_name: Optional[str] = None


# ── Chat administration ──────────────────────────────────────────────────────


class ChatPhoto(TelegramObject):
    """This object represents a chat photo."""

    small_file_id: str
    small_file_unique_id: str
    big_file_id: str
    big_file_unique_id: str


class ChatInviteLink(TelegramObject):
    """Represents an invite link for a chat."""

    invite_link: str
    creator: "User"
    creates_join_request: bool
    is_primary: bool
    is_revoked: bool
    name: Optional[str] = None
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None
    pending_join_request_count: Optional[int] = None


class ChatAdministratorRights(TelegramObject):
    """Represents the rights of an administrator in a chat."""

    is_anonymous: bool
    can_manage_chat: bool
    can_delete_messages: bool
    can_manage_video_chats: bool
    can_restrict_members: bool
    can_promote_members: bool
    can_change_info: bool
    can_invite_users: bool
    can_post_stories: bool
    can_edit_stories: bool
    can_delete_stories: bool
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    can_manage_topics: Optional[bool] = None


class ChatMemberUpdated(TelegramObject):
    """This object represents changes in the status of a chat member."""

    chat: "Chat"
    from_field: "User" = Field(..., alias="from")
    date: int
    old_chat_member: "ChatMember"
    new_chat_member: "ChatMember"
    invite_link: Optional["ChatInviteLink"] = None
    via_join_request: Optional[bool] = None
    via_chat_folder_invite_link: Optional[bool] = None


class ChatMemberOwner(TelegramObject):
    """Represents a chat member that owns the chat and has all administrator privileges."""

    status: Literal["creator"] = "creator"
    user: "User"
    is_anonymous: bool
    custom_title: Optional[str] = None


class ChatMemberAdministrator(TelegramObject):
    """Represents a chat member that has some additional privileges."""

    status: Literal["administrator"] = "administrator"
    user: "User"
    can_be_edited: bool
    is_anonymous: bool
    can_manage_chat: bool
    can_delete_messages: bool
    can_manage_video_chats: bool
    can_restrict_members: bool
    can_promote_members: bool
    can_change_info: bool
    can_invite_users: bool
    can_post_stories: bool
    can_edit_stories: bool
    can_delete_stories: bool
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    can_manage_topics: Optional[bool] = None
    custom_title: Optional[str] = None


class ChatMemberMember(TelegramObject):
    """Represents a chat member that has no additional privileges or restrictions."""

    status: Literal["member"] = "member"
    user: "User"


class ChatMemberRestricted(TelegramObject):
    """Represents a chat member that is under certain restrictions in the chat. Supergroups only."""

    status: Literal["restricted"] = "restricted"
    user: "User"
    is_member: bool
    can_send_messages: bool
    can_send_audios: bool
    can_send_documents: bool
    can_send_photos: bool
    can_send_videos: bool
    can_send_video_notes: bool
    can_send_voice_notes: bool
    can_send_polls: bool
    can_send_other_messages: bool
    can_add_web_page_previews: bool
    can_change_info: bool
    can_invite_users: bool
    can_pin_messages: bool
    can_manage_topics: bool
    until_date: int


class ChatMemberLeft(TelegramObject):
    """Represents a chat member that isn't currently a member of the chat, but may join it themselves."""

    status: Literal["left"] = "left"
    user: "User"


class ChatMemberBanned(TelegramObject):
    """Represents a chat member that was banned in the chat and can't return to the chat or view chat messages."""

    status: Literal["kicked"] = "kicked"
    user: "User"
    until_date: int


ChatMember = one_of(
    "ChatMember",
    ChatMemberOwner,
    ChatMemberAdministrator,
    ChatMemberMember,
    ChatMemberRestricted,
    ChatMemberLeft,
    ChatMemberBanned,
    tag="status",
)


class ChatJoinRequest(TelegramObject):
    """Represents a join request sent to a chat."""

    chat: "Chat"
    from_field: "User" = Field(..., alias="from")
    user_chat_id: int
    date: int
    bio: Optional[str] = None
    invite_link: Optional["ChatInviteLink"] = None


class ChatPermissions(TelegramObject):
    """Describes actions that a non-administrator user is allowed to take in a chat."""

    can_send_messages: Optional[bool] = None
    can_send_audios: Optional[bool] = None
    can_send_documents: Optional[bool] = None
    can_send_photos: Optional[bool] = None
    can_send_videos: Optional[bool] = None
    can_send_video_notes: Optional[bool] = None
    can_send_voice_notes: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    can_manage_topics: Optional[bool] = None


class Birthdate(TelegramObject):
    """Describes the birthdate of a user."""

    day: int
    month: int
    year: Optional[int] = None


class BusinessIntro(TelegramObject):
    """Contains information about the start page settings of a Telegram Business account."""

    title: Optional[str] = None
    message: Optional[str] = None
    sticker: Optional["Sticker"] = None


class BusinessLocation(TelegramObject):
    """Contains information about the location of a Telegram Business account."""

    address: str
    location: Optional["Location"] = None


class BusinessOpeningHoursInterval(TelegramObject):
    """Describes an interval of time during which a business is open."""

    opening_minute: int
    closing_minute: int


class BusinessOpeningHours(TelegramObject):
    """Describes the opening hours of a business."""

    time_zone_name: str
    opening_hours: List["BusinessOpeningHoursInterval"]


class ChatLocation(TelegramObject):
    """Represents a location to which a chat is connected."""

    location: "Location"
    address: str


# ── Reactions ────────────────────────────────────────────────────────────────


class ReactionTypeEmoji(TelegramObject):
    """The reaction is based on an emoji."""

    type: Literal["emoji"] = "emoji"
    emoji: str


class ReactionTypeCustomEmoji(TelegramObject):
    """The reaction is based on a custom emoji."""

    type: Literal["custom_emoji"] = "custom_emoji"
    custom_emoji_id: str


ReactionType = one_of("ReactionType", ReactionTypeEmoji, ReactionTypeCustomEmoji, tag="type")


class ReactionCount(TelegramObject):
    """Represents a reaction added to a message along with the number of times it was added."""

    type: "ReactionType"
    total_count: int


class MessageReactionUpdated(TelegramObject):
    """This object represents a change of a reaction on a message performed by a user."""

    chat: "Chat"
    message_id: int
    date: int
    old_reaction: List["ReactionType"]
    new_reaction: List["ReactionType"]
    user: Optional["User"] = None
    actor_chat: Optional["Chat"] = None


class MessageReactionCountUpdated(TelegramObject):
    """This object represents reaction changes on a message with anonymous reactions."""

    chat: "Chat"
    message_id: int
    date: int
    reactions: List["ReactionCount"]


class ForumTopic(TelegramObject):
    """This object represents a forum topic."""

    message_thread_id: int
    name: str
    icon_color: int
    icon_custom_emoji_id: Optional[str] = None


# ── Bot commands and settings ────────────────────────────────────────────────


class BotCommand(TelegramObject):
    """This object represents a bot command."""

    command: str
    description: str


class BotCommandScopeDefault(TelegramObject):
    """Represents the default scope of bot commands."""

    type: Literal["default"] = "default"


class BotCommandScopeAllPrivateChats(TelegramObject):
    """Represents the scope of bot commands, covering all private chats."""

    type: Literal["all_private_chats"] = "all_private_chats"


class BotCommandScopeAllGroupChats(TelegramObject):
    """Represents the scope of bot commands, covering all group and supergroup chats."""

    type: Literal["all_group_chats"] = "all_group_chats"


class BotCommandScopeAllChatAdministrators(TelegramObject):
    """Represents the scope of bot commands, covering all group and supergroup chat administrators."""

    type: Literal["all_chat_administrators"] = "all_chat_administrators"


class BotCommandScopeChat(TelegramObject):
    """Represents the scope of bot commands, covering a specific chat."""

    type: Literal["chat"] = "chat"
    chat_id: "ChatId"


class BotCommandScopeChatAdministrators(TelegramObject):
    """Represents the scope of bot commands, covering all administrators of a specific group or supergroup chat."""

    type: Literal["chat_administrators"] = "chat_administrators"
    chat_id: "ChatId"


class BotCommandScopeChatMember(TelegramObject):
    """Represents the scope of bot commands, covering a specific member of a group or supergroup chat."""

    type: Literal["chat_member"] = "chat_member"
    chat_id: "ChatId"
    user_id: int


BotCommandScope = one_of(
    "BotCommandScope",
    BotCommandScopeDefault,
    BotCommandScopeAllPrivateChats,
    BotCommandScopeAllGroupChats,
    BotCommandScopeAllChatAdministrators,
    BotCommandScopeChat,
    BotCommandScopeChatAdministrators,
    BotCommandScopeChatMember,
    tag="type",
)


class BotName(TelegramObject):
    """This object represents the bot's name."""

    name: str


class BotDescription(TelegramObject):
    """This object represents the bot's description."""

    description: str


class BotShortDescription(TelegramObject):
    """This object represents the bot's short description."""

    short_description: str


class MenuButtonCommands(TelegramObject):
    """Represents a menu button, which opens the bot's list of commands."""

    type: Literal["commands"] = "commands"


class MenuButtonWebApp(TelegramObject):
    """Represents a menu button, which launches a Web App."""

    type: Literal["web_app"] = "web_app"
    text: str
    web_app: "WebAppInfo"


class MenuButtonDefault(TelegramObject):
    """Describes that no specific value for the menu button was set."""

    type: Literal["default"] = "default"


MenuButton = one_of("MenuButton", MenuButtonCommands, MenuButtonWebApp, MenuButtonDefault, tag="type")


# ── Boosts and business ──────────────────────────────────────────────────────


class ChatBoostSourcePremium(TelegramObject):
    """The boost was obtained by subscribing to Telegram Premium or by gifting a Telegram Premium subscription to another user."""

    source: Literal["premium"] = "premium"
    user: "User"


class ChatBoostSourceGiftCode(TelegramObject):
    """The boost was obtained by the creation of Telegram Premium gift codes to boost a chat."""

    source: Literal["gift_code"] = "gift_code"
    user: "User"


class ChatBoostSourceGiveaway(TelegramObject):
    """The boost was obtained by the creation of a Telegram Premium giveaway."""

    source: Literal["giveaway"] = "giveaway"
    giveaway_message_id: int
    user: Optional["User"] = None
    is_unclaimed: Optional[bool] = None


ChatBoostSource = one_of(
    "ChatBoostSource",
    ChatBoostSourcePremium,
    ChatBoostSourceGiftCode,
    ChatBoostSourceGiveaway,
    tag="source",
)


class ChatBoost(TelegramObject):
    """This object contains information about a chat boost."""

    boost_id: str
    add_date: int
    expiration_date: int
    source: "ChatBoostSource"


class ChatBoostUpdated(TelegramObject):
    """This object represents a boost added to a chat or changed."""

    chat: "Chat"
    boost: "ChatBoost"


class ChatBoostRemoved(TelegramObject):
    """This object represents a boost removed from a chat."""

    chat: "Chat"
    boost_id: str
    remove_date: int
    source: "ChatBoostSource"


class UserChatBoosts(TelegramObject):
    """This object represents a list of boosts added to a chat by a user."""

    boosts: List["ChatBoost"]


class BusinessConnection(TelegramObject):
    """Describes the connection of the bot with a business account."""

    id: str
    user: "User"
    user_chat_id: int
    date: int
    can_reply: bool
    is_enabled: bool


class BusinessMessagesDeleted(TelegramObject):
    """This object is received when messages are deleted from a connected business account."""

    business_connection_id: str
    chat: "Chat"
    message_ids: List[int]


class ResponseParameters(TelegramObject):
    """Describes why a request was unsuccessful."""

    migrate_to_chat_id: Optional[int] = None
    retry_after: Optional[int] = None


# ── Input media ──────────────────────────────────────────────────────────────


class InputMediaPhoto(TelegramObject):
    """Represents a photo to be sent."""

    type: Literal["photo"] = "photo"
    media: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    show_caption_above_media: Optional[bool] = None
    has_spoiler: Optional[bool] = None


class InputMediaVideo(TelegramObject):
    """Represents a video to be sent."""

    type: Literal["video"] = "video"
    media: str
    thumbnail: Optional["FileOrPath"] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    show_caption_above_media: Optional[bool] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    supports_streaming: Optional[bool] = None
    has_spoiler: Optional[bool] = None


class InputMediaAnimation(TelegramObject):
    """Represents an animation file (GIF or H.264/MPEG-4 AVC video without sound) to be sent."""

    type: Literal["animation"] = "animation"
    media: str
    thumbnail: Optional["FileOrPath"] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    show_caption_above_media: Optional[bool] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    has_spoiler: Optional[bool] = None


class InputMediaAudio(TelegramObject):
    """Represents an audio file to be treated as music to be sent."""

    type: Literal["audio"] = "audio"
    media: str
    thumbnail: Optional["FileOrPath"] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None


class InputMediaDocument(TelegramObject):
    """Represents a general file to be sent."""

    type: Literal["document"] = "document"
    media: str
    thumbnail: Optional["FileOrPath"] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    disable_content_type_detection: Optional[bool] = None


InputMedia = one_of(
    "InputMedia",
    InputMediaAnimation,
    InputMediaDocument,
    InputMediaAudio,
    InputMediaPhoto,
    InputMediaVideo,
    tag="type",
)


class InputPaidMediaPhoto(TelegramObject):
    """The paid media to send is a photo."""

    type: Literal["photo"] = "photo"
    media: str


class InputPaidMediaVideo(TelegramObject):
    """The paid media to send is a video."""

    type: Literal["video"] = "video"
    media: str
    thumbnail: Optional["FileOrPath"] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    supports_streaming: Optional[bool] = None


InputPaidMedia = one_of("InputPaidMedia", InputPaidMediaPhoto, InputPaidMediaVideo, tag="type")


# ── Stickers ─────────────────────────────────────────────────────────────────


class Sticker(TelegramObject):
    """This object represents a sticker."""

    file_id: str
    file_unique_id: str
    type: str
    width: int
    height: int
    is_animated: bool
    is_video: bool
    thumbnail: Optional["PhotoSize"] = None
    emoji: Optional[str] = None
    set_name: Optional[str] = None
    premium_animation: Optional["File"] = None
    mask_position: Optional["MaskPosition"] = None
    custom_emoji_id: Optional[str] = None
    needs_repainting: Optional[bool] = None
    file_size: Optional[int] = None


class StickerSet(TelegramObject):
    """This object represents a sticker set."""

    name: str
    title: str
    sticker_type: str
    stickers: List["Sticker"]
    thumbnail: Optional["PhotoSize"] = None


class MaskPosition(TelegramObject):
    """This object describes the position on faces where a mask should be placed by default."""

    point: str
    x_shift: float
    y_shift: float
    scale: float


class InputSticker(TelegramObject):
    """This object describes a sticker to be added to a sticker set."""

    sticker: "FileOrPath"
    format: str
    emoji_list: List[str]
    mask_position: Optional["MaskPosition"] = None
    keywords: Optional[List[str]] = None


# ── Inline mode ──────────────────────────────────────────────────────────────


class InlineQuery(TelegramObject):
    """This object represents an incoming inline query."""

    id: str
    from_field: "User" = Field(..., alias="from")
    query: str
    offset: str
    chat_type: Optional[str] = None
    location: Optional["Location"] = None


class InlineQueryResultsButton(TelegramObject):
    """This object represents a button to be shown above inline query results."""

    text: str
    web_app: Optional["WebAppInfo"] = None
    start_parameter: Optional[str] = None


class InputTextMessageContent(TelegramObject):
    """Represents the content of a text message to be sent as the result of an inline query."""

    message_text: str
    parse_mode: Optional[str] = None
    entities: Optional[List["MessageEntity"]] = None
    link_preview_options: Optional["LinkPreviewOptions"] = None


class InputLocationMessageContent(TelegramObject):
    """Represents the content of a location message to be sent as the result of an inline query."""

    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class InputVenueMessageContent(TelegramObject):
    """Represents the content of a venue message to be sent as the result of an inline query."""

    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class InputContactMessageContent(TelegramObject):
    """Represents the content of a contact message to be sent as the result of an inline query."""

    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None


class InputInvoiceMessageContent(TelegramObject):
    """Represents the content of an invoice message to be sent as the result of an inline query."""

    title: str
    description: str
    payload: str
    currency: str
    prices: List["LabeledPrice"]
    provider_token: Optional[str] = None
    max_tip_amount: Optional[int] = None
    suggested_tip_amounts: Optional[List[int]] = None
    provider_data: Optional[str] = None
    photo_url: Optional[str] = None
    photo_size: Optional[int] = None
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    need_name: Optional[bool] = None
    need_phone_number: Optional[bool] = None
    need_email: Optional[bool] = None
    need_shipping_address: Optional[bool] = None
    send_phone_number_to_provider: Optional[bool] = None
    send_email_to_provider: Optional[bool] = None
    is_flexible: Optional[bool] = None


# A venue payload is also a valid location payload, so venue is tried first.
InputMessageContent = one_of(
    "InputMessageContent",
    InputTextMessageContent,
    InputVenueMessageContent,
    InputLocationMessageContent,
    InputContactMessageContent,
    InputInvoiceMessageContent,
)


class InlineQueryResultCachedAudio(TelegramObject):
    """Represents a link to an MP3 audio file stored on the Telegram servers."""

    type: Literal["audio"] = "audio"
    id: str
    audio_file_id: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultCachedDocument(TelegramObject):
    """Represents a link to a file stored on the Telegram servers."""

    type: Literal["document"] = "document"
    id: str
    title: str
    document_file_id: str
    description: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultCachedGif(TelegramObject):
    """Represents a link to an animated GIF file stored on the Telegram servers."""

    type: Literal["gif"] = "gif"
    id: str
    gif_file_id: str
    title: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    show_caption_above_media: Optional[bool] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultCachedMpeg4Gif(TelegramObject):
    """Represents a link to a video animation (H.264/MPEG-4 AVC video without sound) stored on the Telegram servers."""

    type: Literal["mpeg4_gif"] = "mpeg4_gif"
    id: str
    mpeg4_file_id: str
    title: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    show_caption_above_media: Optional[bool] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultCachedPhoto(TelegramObject):
    """Represents a link to a photo stored on the Telegram servers."""

    type: Literal["photo"] = "photo"
    id: str
    photo_file_id: str
    title: Optional[str] = None
    description: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    show_caption_above_media: Optional[bool] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultCachedSticker(TelegramObject):
    """Represents a link to a sticker stored on the Telegram servers."""

    type: Literal["sticker"] = "sticker"
    id: str
    sticker_file_id: str
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultCachedVideo(TelegramObject):
    """Represents a link to a video file stored on the Telegram servers."""

    type: Literal["video"] = "video"
    id: str
    video_file_id: str
    title: str
    description: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    show_caption_above_media: Optional[bool] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultCachedVoice(TelegramObject):
    """Represents a link to a voice message stored on the Telegram servers."""

    type: Literal["voice"] = "voice"
    id: str
    voice_file_id: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultArticle(TelegramObject):
    """Represents a link to an article or web page."""

    type: Literal["article"] = "article"
    id: str
    title: str
    input_message_content: "InputMessageContent"
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    url: Optional[str] = None
    hide_url: Optional[bool] = None
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    thumbnail_width: Optional[int] = None
    thumbnail_height: Optional[int] = None


class InlineQueryResultAudio(TelegramObject):
    """Represents a link to an MP3 audio file."""

    type: Literal["audio"] = "audio"
    id: str
    audio_url: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    performer: Optional[str] = None
    audio_duration: Optional[int] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultContact(TelegramObject):
    """Represents a contact with a phone number."""

    type: Literal["contact"] = "contact"
    id: str
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None
    thumbnail_url: Optional[str] = None
    thumbnail_width: Optional[int] = None
    thumbnail_height: Optional[int] = None


class InlineQueryResultGame(TelegramObject):
    """Represents a Game."""

    type: Literal["game"] = "game"
    id: str
    game_short_name: str
    reply_markup: Optional["InlineKeyboardMarkup"] = None


class InlineQueryResultDocument(TelegramObject):
    """Represents a link to a file. Currently, only .PDF and .ZIP files can be sent using this method."""

    type: Literal["document"] = "document"
    id: str
    title: str
    document_url: str
    mime_type: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    description: Optional[str] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None
    thumbnail_url: Optional[str] = None
    thumbnail_width: Optional[int] = None
    thumbnail_height: Optional[int] = None


class InlineQueryResultGif(TelegramObject):
    """Represents a link to an animated GIF file."""

    type: Literal["gif"] = "gif"
    id: str
    gif_url: str
    thumbnail_url: str
    gif_width: Optional[int] = None
    gif_height: Optional[int] = None
    gif_duration: Optional[int] = None
    thumbnail_mime_type: Optional[str] = None
    title: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    show_caption_above_media: Optional[bool] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultLocation(TelegramObject):
    """Represents a location on a map."""

    type: Literal["location"] = "location"
    id: str
    latitude: float
    longitude: float
    title: str
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None
    thumbnail_url: Optional[str] = None
    thumbnail_width: Optional[int] = None
    thumbnail_height: Optional[int] = None


class InlineQueryResultMpeg4Gif(TelegramObject):
    """Represents a link to a video animation (H.264/MPEG-4 AVC video without sound)."""

    type: Literal["mpeg4_gif"] = "mpeg4_gif"
    id: str
    mpeg4_url: str
    thumbnail_url: str
    mpeg4_width: Optional[int] = None
    mpeg4_height: Optional[int] = None
    mpeg4_duration: Optional[int] = None
    thumbnail_mime_type: Optional[str] = None
    title: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    show_caption_above_media: Optional[bool] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultPhoto(TelegramObject):
    """Represents a link to a photo."""

    type: Literal["photo"] = "photo"
    id: str
    photo_url: str
    thumbnail_url: str
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    show_caption_above_media: Optional[bool] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultVenue(TelegramObject):
    """Represents a venue."""

    type: Literal["venue"] = "venue"
    id: str
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None
    thumbnail_url: Optional[str] = None
    thumbnail_width: Optional[int] = None
    thumbnail_height: Optional[int] = None


class InlineQueryResultVideo(TelegramObject):
    """Represents a link to a page containing an embedded video player or a video file."""

    type: Literal["video"] = "video"
    id: str
    video_url: str
    mime_type: str
    thumbnail_url: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    show_caption_above_media: Optional[bool] = None
    video_width: Optional[int] = None
    video_height: Optional[int] = None
    video_duration: Optional[int] = None
    description: Optional[str] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultVoice(TelegramObject):
    """Represents a link to a voice recording in an .OGG container encoded with OPUS."""

    type: Literal["voice"] = "voice"
    id: str
    voice_url: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    voice_duration: Optional[int] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


# Cached and URL variants share tag values; the cached ones are tried first.
InlineQueryResult = one_of(
    "InlineQueryResult",
    InlineQueryResultCachedAudio,
    InlineQueryResultCachedDocument,
    InlineQueryResultCachedGif,
    InlineQueryResultCachedMpeg4Gif,
    InlineQueryResultCachedPhoto,
    InlineQueryResultCachedSticker,
    InlineQueryResultCachedVideo,
    InlineQueryResultCachedVoice,
    InlineQueryResultArticle,
    InlineQueryResultAudio,
    InlineQueryResultContact,
    InlineQueryResultGame,
    InlineQueryResultDocument,
    InlineQueryResultGif,
    InlineQueryResultLocation,
    InlineQueryResultMpeg4Gif,
    InlineQueryResultPhoto,
    InlineQueryResultVenue,
    InlineQueryResultVideo,
    InlineQueryResultVoice,
    tag="type",
)


class ChosenInlineResult(TelegramObject):
    """Represents a result of an inline query that was chosen by the user and sent to their chat partner."""

    result_id: str
    from_field: "User" = Field(..., alias="from")
    query: str
    location: Optional["Location"] = None
    inline_message_id: Optional[str] = None


class SentWebAppMessage(TelegramObject):
    """Describes an inline message sent by a Web App on behalf of a user."""

    inline_message_id: Optional[str] = None


# ── Payments ─────────────────────────────────────────────────────────────────


class LabeledPrice(TelegramObject):
    """This object represents a portion of the price for goods or services."""

    label: str
    amount: int


class Invoice(TelegramObject):
    """This object contains basic information about an invoice."""

    title: str
    description: str
    start_parameter: str
    currency: str
    total_amount: int


class ShippingAddress(TelegramObject):
    """This object represents a shipping address."""

    country_code: str
    state: str
    city: str
    street_line1: str
    street_line2: str
    post_code: str


class OrderInfo(TelegramObject):
    """This object represents information about an order."""

    name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    shipping_address: Optional["ShippingAddress"] = None


class ShippingOption(TelegramObject):
    """This object represents one shipping option."""

    id: str
    title: str
    prices: List["LabeledPrice"]


class SuccessfulPayment(TelegramObject):
    """This object contains basic information about a successful payment."""

    currency: str
    total_amount: int
    invoice_payload: str
    telegram_payment_charge_id: str
    provider_payment_charge_id: str
    shipping_option_id: Optional[str] = None
    order_info: Optional["OrderInfo"] = None


class ShippingQuery(TelegramObject):
    """This object contains information about an incoming shipping query."""

    id: str
    from_field: "User" = Field(..., alias="from")
    invoice_payload: str
    shipping_address: "ShippingAddress"


class PreCheckoutQuery(TelegramObject):
    """This object contains information about an incoming pre-checkout query."""

    id: str
    from_field: "User" = Field(..., alias="from")
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional["OrderInfo"] = None


class RevenueWithdrawalStatePending(TelegramObject):
    """The withdrawal is in progress."""

    type: Literal["pending"] = "pending"


class RevenueWithdrawalStateSucceeded(TelegramObject):
    """The withdrawal succeeded."""

    type: Literal["succeeded"] = "succeeded"
    date: int
    url: str


class RevenueWithdrawalStateFailed(TelegramObject):
    """The withdrawal failed and the transaction was refunded."""

    type: Literal["failed"] = "failed"


RevenueWithdrawalState = one_of(
    "RevenueWithdrawalState",
    RevenueWithdrawalStatePending,
    RevenueWithdrawalStateSucceeded,
    RevenueWithdrawalStateFailed,
    tag="type",
)


class TransactionPartnerFragment(TelegramObject):
    """Describes a withdrawal transaction with Fragment."""

    type: Literal["fragment"] = "fragment"
    withdrawal_state: Optional["RevenueWithdrawalState"] = None


class TransactionPartnerUser(TelegramObject):
    """Describes a transaction with a user."""

    type: Literal["user"] = "user"
    user: "User"
    invoice_payload: Optional[str] = None


class TransactionPartnerTelegramAds(TelegramObject):
    """Describes a withdrawal transaction to the Telegram Ads platform."""

    type: Literal["telegram_ads"] = "telegram_ads"


class TransactionPartnerOther(TelegramObject):
    """Describes a transaction with an unknown source or recipient."""

    type: Literal["other"] = "other"


TransactionPartner = one_of(
    "TransactionPartner",
    TransactionPartnerFragment,
    TransactionPartnerUser,
    TransactionPartnerTelegramAds,
    TransactionPartnerOther,
    tag="type",
)


class StarTransaction(TelegramObject):
    """Describes a Telegram Star transaction."""

    id: str
    amount: int
    date: int
    source: Optional["TransactionPartner"] = None
    receiver: Optional["TransactionPartner"] = None


class StarTransactions(TelegramObject):
    """Contains a list of Telegram Star transactions."""

    transactions: List["StarTransaction"]


# ── Telegram Passport ────────────────────────────────────────────────────────


class PassportData(TelegramObject):
    """Describes Telegram Passport data shared with the bot by the user."""

    data: List["EncryptedPassportElement"]
    credentials: "EncryptedCredentials"


class PassportFile(TelegramObject):
    """This object represents a file uploaded to Telegram Passport."""

    file_id: str
    file_unique_id: str
    file_size: int
    file_date: int


class EncryptedPassportElement(TelegramObject):
    """Describes documents or other Telegram Passport elements shared with the bot by the user."""

    type: str
    hash: str
    data: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    files: Optional[List["PassportFile"]] = None
    front_side: Optional["PassportFile"] = None
    reverse_side: Optional["PassportFile"] = None
    selfie: Optional["PassportFile"] = None
    translation: Optional[List["PassportFile"]] = None


class EncryptedCredentials(TelegramObject):
    """Describes data required for decrypting and authenticating EncryptedPassportElement."""

    data: str
    hash: str
    secret: str


class PassportElementErrorDataField(TelegramObject):
    """Represents an issue in one of the data fields that was provided by the user."""

    source: Literal["data"] = "data"
    type: str
    field_name: str
    data_hash: str
    message: str


class PassportElementErrorFrontSide(TelegramObject):
    """Represents an issue with the front side of a document."""

    source: Literal["front_side"] = "front_side"
    type: str
    file_hash: str
    message: str


class PassportElementErrorReverseSide(TelegramObject):
    """Represents an issue with the reverse side of a document."""

    source: Literal["reverse_side"] = "reverse_side"
    type: str
    file_hash: str
    message: str


class PassportElementErrorSelfie(TelegramObject):
    """Represents an issue with the selfie with a document."""

    source: Literal["selfie"] = "selfie"
    type: str
    file_hash: str
    message: str


class PassportElementErrorFile(TelegramObject):
    """Represents an issue with a document scan."""

    source: Literal["file"] = "file"
    type: str
    file_hash: str
    message: str


class PassportElementErrorFiles(TelegramObject):
    """Represents an issue with a list of scans."""

    source: Literal["files"] = "files"
    type: str
    file_hashes: List[str]
    message: str


class PassportElementErrorTranslationFile(TelegramObject):
    """Represents an issue with one of the files that constitute the translation of a document."""

    source: Literal["translation_file"] = "translation_file"
    type: str
    file_hash: str
    message: str


class PassportElementErrorTranslationFiles(TelegramObject):
    """Represents an issue with the translated version of a document."""

    source: Literal["translation_files"] = "translation_files"
    type: str
    file_hashes: List[str]
    message: str


class PassportElementErrorUnspecified(TelegramObject):
    """Represents an issue in an unspecified place."""

    source: Literal["unspecified"] = "unspecified"
    type: str
    element_hash: str
    message: str


PassportElementError = one_of(
    "PassportElementError",
    PassportElementErrorDataField,
    PassportElementErrorFrontSide,
    PassportElementErrorReverseSide,
    PassportElementErrorSelfie,
    PassportElementErrorFile,
    PassportElementErrorFiles,
    PassportElementErrorTranslationFile,
    PassportElementErrorTranslationFiles,
    PassportElementErrorUnspecified,
    tag="source",
)


# ── Games ────────────────────────────────────────────────────────────────────


class Game(TelegramObject):
    """This object represents a game. Use BotFather to create and edit games, their short names will act as unique identifiers."""

    title: str
    description: str
    photo: List["PhotoSize"]
    text: Optional[str] = None
    text_entities: Optional[List["MessageEntity"]] = None
    animation: Optional["Animation"] = None


class GameHighScore(TelegramObject):
    """This object represents one row of the high scores table for a game."""

    position: int
    user: "User"
    score: int


# Forward references across the module are only resolvable once every class exists.
for _model in list(globals().values()):
    if isinstance(_model, type) and issubclass(_model, TelegramObject) and _model is not TelegramObject:
        _model.model_rebuild()
del _model
