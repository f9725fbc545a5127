"""Tests for the union machinery and the decode / encode entry points."""

import json
import logging
import os
import sys
from typing import List, Literal

import pytest
from pydantic import BaseModel, ValidationError

# Ensure the project root is importable.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tgbotapi.codec import decode, decode_json, encode, one_of, union_name
from tgbotapi.exceptions import BotApiError, DecodingError, NoVariantMatched
from tgbotapi.models import (
    BackgroundFillGradient,
    BackgroundType,
    BackgroundTypeFill,
    ChatId,
    ChatMember,
    ChatMemberBanned,
    ChatMemberOwner,
    FileOrPath,
    ForceReply,
    InaccessibleMessage,
    InlineKeyboardMarkup,
    InlineQueryResult,
    InlineQueryResultArticle,
    InlineQueryResultCachedPhoto,
    InlineQueryResultPhoto,
    InputFile,
    InputMessageContent,
    InputTextMessageContent,
    InputVenueMessageContent,
    MaybeInaccessibleMessage,
    Message,
    MessageOrigin,
    MessageOriginHiddenUser,
    PassportElementError,
    PassportElementErrorFiles,
    ReplyKeyboardMarkup,
    ReplyMarkup,
    Update,
    User,
)

CHAT = {"id": -100123, "type": "supergroup", "title": "Readers"}
USER = {"id": 7, "is_bot": False, "first_name": "Ada"}


# ── Scalar unions ────────────────────────────────────────────────────────────


class TestChatId:
    """ChatId is an int or a string, never coerced."""

    def test_integer(self) -> None:
        value = decode(ChatId, 12345)
        assert value == 12345
        assert type(value) is int

    def test_channel_username(self) -> None:
        value = decode(ChatId, "@channelname")
        assert value == "@channelname"
        assert type(value) is str

    def test_numeric_string_stays_string(self) -> None:
        assert decode(ChatId, "123") == "123"

    def test_bool_is_not_a_chat_id(self) -> None:
        with pytest.raises(NoVariantMatched) as excinfo:
            decode(ChatId, True)
        assert excinfo.value.union == "ChatId"

    def test_union_name(self) -> None:
        assert union_name(ChatId) == "ChatId"
        assert union_name(User) is None


class TestFileOrPath:
    """Either-style union of an upload placeholder and a file_id / URL."""

    def test_string_value_is_identity(self) -> None:
        raw = "AgACAgIAAxkBAAIBQ2"
        value = decode(FileOrPath, raw)
        assert value == raw
        assert json.dumps(encode(value)) == json.dumps(encode(raw))

    def test_input_file_instance_passes_through(self) -> None:
        upload = InputFile()
        assert decode(FileOrPath, upload) is upload
        assert encode(upload) == {}


# ── Tagless unions ───────────────────────────────────────────────────────────


class TestReplyMarkup:
    """Keyboard markups are told apart by their required fields."""

    def test_reply_keyboard_is_not_force_reply(self) -> None:
        raw = {"keyboard": [[{"text": "Yes"}, {"text": "No"}]], "one_time_keyboard": True}
        value = decode(ReplyMarkup, raw)
        assert isinstance(value, ReplyKeyboardMarkup)
        assert not isinstance(value, ForceReply)
        assert value.keyboard[0][1].text == "No"

    def test_force_reply(self) -> None:
        value = decode(ReplyMarkup, {"force_reply": True, "input_field_placeholder": "Reply"})
        assert isinstance(value, ForceReply)

    def test_inline_keyboard(self) -> None:
        raw = {"inline_keyboard": [[{"text": "Open", "url": "https://example.org"}]]}
        assert isinstance(decode(ReplyMarkup, raw), InlineKeyboardMarkup)

    def test_nothing_matches(self) -> None:
        with pytest.raises(NoVariantMatched) as excinfo:
            decode(ReplyMarkup, {"selective": True})
        assert str(excinfo.value) == "no variant of ReplyMarkup matched"


class TestFirstMatchWins:
    """A value valid for two candidates commits to the earlier one."""

    def test_generic_union(self) -> None:
        class Circle(BaseModel):
            radius: int

        class Wheel(BaseModel):
            radius: int
            spokes: int = 0

        Shape = one_of("Shape", Circle, Wheel)
        value = decode(Shape, {"radius": 3, "spokes": 12})
        assert type(value) is Circle

    def test_venue_payload_is_not_decoded_as_location(self) -> None:
        raw = {"latitude": 52.52, "longitude": 13.4, "title": "Museum", "address": "Island 1"}
        value = decode(InputMessageContent, raw)
        assert isinstance(value, InputVenueMessageContent)

    def test_text_wins_over_contact(self) -> None:
        raw = {"message_text": "hello", "phone_number": "+100", "first_name": "Bo"}
        assert isinstance(decode(InputMessageContent, raw), InputTextMessageContent)


class TestMaybeInaccessibleMessage:
    """Deleted messages carry date 0; everything else is a full Message."""

    def test_inaccessible(self) -> None:
        value = decode(MaybeInaccessibleMessage, {"chat": CHAT, "message_id": 9, "date": 0})
        assert isinstance(value, InaccessibleMessage)

    def test_accessible(self) -> None:
        raw = {"chat": CHAT, "message_id": 9, "date": 1700000000, "text": "pinned"}
        value = decode(MaybeInaccessibleMessage, raw)
        assert isinstance(value, Message)
        assert value.text == "pinned"

    @pytest.mark.parametrize("date", [False, 0.0, "0"])
    def test_only_integer_zero_is_inaccessible(self, date) -> None:
        raw = {"chat": CHAT, "message_id": 9, "date": date}
        with pytest.raises(ValidationError):
            InaccessibleMessage.model_validate(raw)

    def test_neither_shape_fails_with_named_error(self) -> None:
        with pytest.raises(NoVariantMatched) as excinfo:
            decode(MaybeInaccessibleMessage, {"chat": CHAT})
        exc = excinfo.value
        assert exc.union == "MaybeInaccessibleMessage"
        assert str(exc) == "no variant of MaybeInaccessibleMessage matched"
        assert isinstance(exc, DecodingError)
        assert isinstance(exc, BotApiError)


# ── Tagged unions ────────────────────────────────────────────────────────────


class TestDiscriminantDispatch:
    """Unions carrying type / status / source dispatch on that field."""

    def test_chat_member_status(self) -> None:
        value = decode(ChatMember, {"status": "kicked", "user": USER, "until_date": 0})
        assert isinstance(value, ChatMemberBanned)

    def test_chat_member_owner(self) -> None:
        value = decode(ChatMember, {"status": "creator", "user": USER, "is_anonymous": False})
        assert isinstance(value, ChatMemberOwner)

    def test_message_origin(self) -> None:
        raw = {"type": "hidden_user", "date": 1, "sender_user_name": "Anon"}
        assert isinstance(decode(MessageOrigin, raw), MessageOriginHiddenUser)

    def test_passport_error_source(self) -> None:
        raw = {"source": "files", "type": "passport", "file_hashes": ["a", "b"], "message": "blurry"}
        value = decode(PassportElementError, raw)
        assert isinstance(value, PassportElementErrorFiles)
        assert encode(value)["source"] == "files"

    def test_shared_tag_prefers_cached_variant(self) -> None:
        raw = {
            "type": "photo",
            "id": "1",
            "photo_file_id": "AgAD",
            "photo_url": "https://example.org/p.jpg",
            "thumbnail_url": "https://example.org/t.jpg",
        }
        assert isinstance(decode(InlineQueryResult, raw), InlineQueryResultCachedPhoto)

    def test_shared_tag_falls_through_to_url_variant(self) -> None:
        raw = {
            "type": "photo",
            "id": "1",
            "photo_url": "https://example.org/p.jpg",
            "thumbnail_url": "https://example.org/t.jpg",
        }
        assert isinstance(decode(InlineQueryResult, raw), InlineQueryResultPhoto)

    def test_article_with_nested_content(self) -> None:
        raw = {
            "type": "article",
            "id": "a1",
            "title": "Result",
            "input_message_content": {"message_text": "picked"},
        }
        value = decode(InlineQueryResult, raw)
        assert isinstance(value, InlineQueryResultArticle)
        assert isinstance(value.input_message_content, InputTextMessageContent)

    def test_tag_selects_group_only(self) -> None:
        # Fields of a cached photo under a gif tag match no gif variant.
        with pytest.raises(NoVariantMatched):
            decode(InlineQueryResult, {"type": "gif", "id": "1", "photo_file_id": "AgAD"})

    def test_unknown_tag(self) -> None:
        with pytest.raises(NoVariantMatched) as excinfo:
            decode(ChatMember, {"status": "visitor", "user": USER})
        assert excinfo.value.union == "ChatMember"

    def test_non_object_value(self) -> None:
        with pytest.raises(NoVariantMatched):
            decode(MessageOrigin, "user")

    @pytest.mark.parametrize(
        "union, raw",
        [
            (InlineQueryResult, {"type": ["photo"], "id": "1"}),
            (ChatMember, {"status": {"x": 1}, "user": USER}),
            (MessageOrigin, {"type": 1, "date": 1, "sender_user_name": "Anon"}),
        ],
    )
    def test_non_string_tag(self, union, raw: dict) -> None:
        with pytest.raises(NoVariantMatched):
            decode(union, raw)

    def test_non_string_tag_in_nested_field(self) -> None:
        raw = {"message_id": 1, "date": 2, "chat": CHAT, "forward_origin": {"type": ["user"], "date": 1}}
        with pytest.raises(DecodingError) as excinfo:
            decode(Message, raw)
        assert not isinstance(excinfo.value, NoVariantMatched)
        assert excinfo.value.errors[0]["type"] == "union_no_match"

    def test_nested_tagged_unions(self) -> None:
        raw = {
            "type": "fill",
            "dark_theme_dimming": 20,
            "fill": {"type": "gradient", "top_color": 1, "bottom_color": 2, "rotation_angle": 45},
        }
        value = decode(BackgroundType, raw)
        assert isinstance(value, BackgroundTypeFill)
        assert isinstance(value.fill, BackgroundFillGradient)


# ── decode / decode_json / encode ────────────────────────────────────────────


class TestDecode:
    """Top-level decode behaviour and failure surfaces."""

    def test_update_with_only_message(self) -> None:
        raw = {"update_id": 10, "message": {"message_id": 1, "date": 5, "chat": CHAT, "from": USER}}
        update = decode(Update, raw)
        assert update.message.from_field.first_name == "Ada"
        for name in ("edited_message", "channel_post", "callback_query", "chat_boost"):
            assert getattr(update, name) is None
        assert update.model_fields_set == {"update_id", "message"}
        assert set(encode(update)) == {"update_id", "message"}

    def test_list_of_updates(self) -> None:
        updates = decode(List[Update], [{"update_id": 1}, {"update_id": 2}])
        assert [u.update_id for u in updates] == [1, 2]

    def test_unknown_keys_are_ignored(self) -> None:
        user = decode(User, dict(USER, has_main_web_app=True))
        assert user == User(id=7, is_bot=False, first_name="Ada")

    def test_missing_required_field(self) -> None:
        with pytest.raises(DecodingError) as excinfo:
            decode(User, {"id": 1})
        exc = excinfo.value
        assert not isinstance(exc, NoVariantMatched)
        assert exc.type_name == "User"
        assert str(exc).startswith("failed to decode User: ")
        assert {e["loc"][0] for e in exc.errors} == {"is_bot", "first_name"}

    def test_nested_union_exhaustion(self) -> None:
        raw = {"message_id": 1, "date": 5, "chat": CHAT, "pinned_message": {"foo": 1}}
        with pytest.raises(DecodingError) as excinfo:
            decode(Message, raw)
        exc = excinfo.value
        assert not isinstance(exc, NoVariantMatched)
        assert exc.errors[0]["type"] == "union_no_match"
        assert exc.errors[0]["loc"][0] == "pinned_message"

    def test_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="tgbotapi")
        with pytest.raises(NoVariantMatched):
            decode(ReplyMarkup, {})
        rejected = [r for r in caplog.records if r.getMessage() == "Union candidate rejected"]
        assert [r.candidate for r in rejected] == [
            "InlineKeyboardMarkup",
            "ReplyKeyboardMarkup",
            "ReplyKeyboardRemove",
            "ForceReply",
        ]
        failed = [r for r in caplog.records if r.getMessage() == "Decode failed"]
        assert failed and failed[0].type_name == "ReplyMarkup"


class TestDecodeJson:
    """JSON text input."""

    def test_bytes(self) -> None:
        user = decode_json(User, b'{"id": 7, "is_bot": false, "first_name": "Ada"}')
        assert user.id == 7

    def test_malformed_json(self) -> None:
        with pytest.raises(DecodingError) as excinfo:
            decode_json(User, "{not json")
        assert excinfo.value.errors == []
        assert "malformed JSON" in str(excinfo.value)


class TestEncode:
    """encode() produces plain, sparse wire data."""

    def test_containers(self) -> None:
        value = {"a": None, "b": [InputFile(), ("x", 1)], "c": {"d": None}}
        assert encode(value) == {"b": [{}, ["x", 1]], "c": {}}

    def test_scalars_pass_through(self) -> None:
        assert encode(3) == 3
        assert encode("x") == "x"
        assert encode(None) is None

    def test_tag_literal_is_emitted(self) -> None:
        origin = MessageOriginHiddenUser(date=1, sender_user_name="Anon")
        assert encode(origin) == {"type": "hidden_user", "date": 1, "sender_user_name": "Anon"}

    def test_tagged_variant_declares_default(self) -> None:
        class Dot(BaseModel):
            kind: Literal["dot"] = "dot"

        Mark = one_of("Mark", Dot, tag="kind")
        assert isinstance(decode(Mark, {"kind": "dot"}), Dot)
