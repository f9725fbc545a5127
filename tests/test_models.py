"""Tests for the Bot API data models."""

import os
import inspect
import re
import sys

import pytest
from pydantic import ValidationError

# Ensure the project root is importable.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tgbotapi import models
from tgbotapi.codec import decode, encode
from tgbotapi.models import (
    BotCommandScopeChat,
    CallbackGame,
    CallbackQuery,
    Chat,
    ChatFullInfo,
    ChatMemberAdministrator,
    ChatMemberUpdated,
    ForumTopicClosed,
    GeneralForumTopicHidden,
    GiveawayCreated,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    InputFile,
    InputMediaVideo,
    Location,
    Message,
    MessageEntity,
    MessageOriginUser,
    PhotoSize,
    ReactionTypeEmoji,
    ReplyParameters,
    TelegramObject,
    Update,
    User,
    VideoChatStarted,
    WebhookInfo,
)

ADA = User(id=7, is_bot=False, first_name="Ada")
GROUP = Chat(id=-100123, type="supergroup", title="Readers")


# ── User ─────────────────────────────────────────────────────────────────────


class TestUserModel:
    """Validate the User schema."""

    def test_required_fields(self) -> None:
        assert ADA.id == 7
        assert ADA.is_bot is False
        assert ADA.first_name == "Ada"

    def test_optional_fields_default_to_none(self) -> None:
        assert ADA.username is None
        assert ADA.is_premium is None

    def test_missing_required_raises(self) -> None:
        with pytest.raises(ValidationError):
            User(id=1, is_bot=False)  # missing first_name

    def test_omission(self) -> None:
        assert set(encode(ADA)) == {"id", "is_bot", "first_name"}


# ── Message ──────────────────────────────────────────────────────────────────


class TestMessageModel:
    """Validate the Message schema and its `from` alias."""

    def test_from_alias_on_decode(self) -> None:
        msg = decode(Message, {"message_id": 1, "date": 2, "chat": {"id": 3, "type": "private"}, "from": {"id": 7, "is_bot": False, "first_name": "Ada"}})
        assert msg.from_field == ADA

    def test_from_alias_on_encode(self) -> None:
        msg = Message(message_id=1, date=2, chat=GROUP, from_field=ADA)
        wire = encode(msg)
        assert wire["from"]["first_name"] == "Ada"
        assert "from_field" not in wire

    def test_round_trip(self) -> None:
        msg = Message(
            message_id=42,
            date=1700000000,
            chat=GROUP,
            from_field=ADA,
            message_thread_id=5,
            text="see /start",
            entities=[MessageEntity(type="bot_command", offset=4, length=6)],
            forward_origin=MessageOriginUser(date=1699999999, sender_user=ADA),
            photo=[PhotoSize(file_id="f", file_unique_id="u", width=90, height=90)],
            location=Location(latitude=52.52, longitude=13.405),
            forum_topic_closed=ForumTopicClosed(),
            reply_markup=InlineKeyboardMarkup(
                inline_keyboard=[[InlineKeyboardButton(text="Go", callback_data="go")]]
            ),
        )
        assert decode(Message, encode(msg)) == msg

    def test_unset_optionals_are_absent(self) -> None:
        msg = Message(message_id=1, date=2, chat=GROUP, text="hi")
        wire = encode(msg)
        assert set(wire) == {"message_id", "date", "chat", "text"}
        assert "caption" not in wire

    def test_pinned_inaccessible_message(self) -> None:
        raw = {
            "message_id": 2,
            "date": 10,
            "chat": {"id": 3, "type": "group"},
            "pinned_message": {"message_id": 1, "date": 0, "chat": {"id": 3, "type": "group"}},
        }
        msg = decode(Message, raw)
        assert type(msg.pinned_message).__name__ == "InaccessibleMessage"


# ── Update ───────────────────────────────────────────────────────────────────


class TestUpdateModel:
    """Validate the Update container."""

    def test_only_update_id(self) -> None:
        update = Update(update_id=5)
        assert encode(update) == {"update_id": 5}

    def test_payload_fields(self) -> None:
        payload_fields = set(Update.model_fields) - {"update_id"}
        assert len(payload_fields) == 22
        assert {"business_message", "message_reaction_count", "removed_chat_boost"} <= payload_fields

    def test_chat_member_update(self) -> None:
        raw = {
            "update_id": 1,
            "my_chat_member": {
                "chat": {"id": 3, "type": "group"},
                "from": {"id": 7, "is_bot": False, "first_name": "Ada"},
                "date": 1,
                "old_chat_member": {"status": "left", "user": {"id": 9, "is_bot": True, "first_name": "Bot"}},
                "new_chat_member": {
                    "status": "administrator",
                    "user": {"id": 9, "is_bot": True, "first_name": "Bot"},
                    "can_be_edited": False,
                    "is_anonymous": False,
                    "can_manage_chat": True,
                    "can_delete_messages": True,
                    "can_manage_video_chats": False,
                    "can_restrict_members": True,
                    "can_promote_members": False,
                    "can_change_info": False,
                    "can_invite_users": True,
                    "can_post_stories": False,
                    "can_edit_stories": False,
                    "can_delete_stories": False,
                },
            },
        }
        update = decode(Update, raw)
        assert isinstance(update.my_chat_member, ChatMemberUpdated)
        assert isinstance(update.my_chat_member.new_chat_member, ChatMemberAdministrator)
        assert update.my_chat_member.old_chat_member.status == "left"


# ── WebhookInfo ──────────────────────────────────────────────────────────────


class TestWebhookInfoModel:
    """Validate the WebhookInfo schema."""

    def test_round_trip(self) -> None:
        info = WebhookInfo(url="https://example.org/hook", has_custom_certificate=False, pending_update_count=3, allowed_updates=["message"])
        assert decode(WebhookInfo, encode(info)) == info


# ── ChatFullInfo ─────────────────────────────────────────────────────────────


class TestChatFullInfoModel:
    """Validate the getChat result."""

    def test_reactions_are_decoded(self) -> None:
        raw = {
            "id": 3,
            "type": "supergroup",
            "accent_color_id": 1,
            "max_reaction_count": 11,
            "available_reactions": [{"type": "emoji", "emoji": "👍"}],
        }
        info = decode(ChatFullInfo, raw)
        assert info.available_reactions == [ReactionTypeEmoji(emoji="👍")]

    def test_missing_required_raises(self) -> None:
        with pytest.raises(ValidationError):
            ChatFullInfo(id=3, type="private")


# ── Placeholders ─────────────────────────────────────────────────────────────


class TestPlaceholders:
    """Zero-field marker objects."""

    @pytest.mark.parametrize(
        "marker",
        [InputFile, CallbackGame, ForumTopicClosed, GeneralForumTopicHidden, VideoChatStarted, GiveawayCreated],
    )
    def test_encodes_to_empty_object(self, marker: type) -> None:
        assert marker.model_fields == {}
        assert encode(marker()) == {}
        assert isinstance(decode(marker, {}), marker)

    def test_every_model_is_a_telegram_object(self) -> None:
        assert issubclass(InputFile, TelegramObject)


# ── Inputs with unions ───────────────────────────────────────────────────────


class TestInputModels:
    """Models that hold ChatId / FileOrPath values."""

    def test_reply_parameters_chat_id(self) -> None:
        assert encode(ReplyParameters(message_id=1, chat_id="@channel")) == {"message_id": 1, "chat_id": "@channel"}
        assert decode(ReplyParameters, {"message_id": 1, "chat_id": -100}).chat_id == -100

    def test_scope_chat_id(self) -> None:
        assert encode(BotCommandScopeChat(chat_id=5)) == {"type": "chat", "chat_id": 5}

    def test_media_thumbnail(self) -> None:
        media = InputMediaVideo(media="attach://clip", thumbnail="attach://thumb")
        assert encode(media) == {"type": "video", "media": "attach://clip", "thumbnail": "attach://thumb"}

    def test_callback_query_requires_from(self) -> None:
        with pytest.raises(ValidationError):
            CallbackQuery(id="1", chat_instance="c")


# ── Wire names ───────────────────────────────────────────────────────────────


def _all_models():
    return [
        obj
        for _, obj in inspect.getmembers(models, inspect.isclass)
        if issubclass(obj, TelegramObject) and obj is not TelegramObject
    ]


class TestWireNames:
    """The wire-name table is read off the model fields."""

    def test_every_bot_api_object_is_modelled(self) -> None:
        assert len(_all_models()) > 200

    def test_from_is_the_only_renamed_field(self) -> None:
        renamed = {
            (model.__name__, name, field.alias)
            for model in _all_models()
            for name, field in model.model_fields.items()
            if field.alias is not None and field.alias != name
        }
        assert renamed
        assert {(name, alias) for _, name, alias in renamed} == {("from_field", "from")}

    def test_python_names_are_snake_case(self) -> None:
        for model in _all_models():
            for name in model.model_fields:
                if name == "from_field":
                    continue
                assert re.fullmatch(r"[a-z][a-z0-9]*(_[a-z0-9]+)*", name), (model.__name__, name)
