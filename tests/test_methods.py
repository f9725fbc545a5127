"""Tests for the request builders in tgbotapi.methods."""

import logging
import os
import re
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tgbotapi import methods
from tgbotapi.models import (
    BotCommand,
    BotCommandScopeChat,
    ChatPermissions,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    InlineQueryResultArticle,
    InputFile,
    InputMediaPhoto,
    InputPaidMediaPhoto,
    InputPollOption,
    InputTextMessageContent,
    LabeledPrice,
    MenuButtonCommands,
    PassportElementErrorSelfie,
    ReactionTypeEmoji,
    ReplyKeyboardRemove,
    ReplyParameters,
)
from tgbotapi.request import Request

# Every Bot API 7.7 method.
BOT_API_METHODS = [
    "getUpdates", "setWebhook", "deleteWebhook", "getWebhookInfo",
    "getMe", "logOut", "close", "sendMessage", "forwardMessage",
    "forwardMessages", "copyMessage", "copyMessages", "sendPhoto",
    "sendAudio", "sendDocument", "sendVideo", "sendAnimation", "sendVoice",
    "sendVideoNote", "sendPaidMedia", "sendMediaGroup", "sendLocation",
    "sendVenue", "sendContact", "sendPoll", "sendDice", "sendChatAction",
    "setMessageReaction", "getUserProfilePhotos", "getFile",
    "banChatMember", "unbanChatMember", "restrictChatMember",
    "promoteChatMember", "setChatAdministratorCustomTitle",
    "banChatSenderChat", "unbanChatSenderChat", "setChatPermissions",
    "exportChatInviteLink", "createChatInviteLink", "editChatInviteLink",
    "revokeChatInviteLink", "approveChatJoinRequest",
    "declineChatJoinRequest", "setChatPhoto", "deleteChatPhoto",
    "setChatTitle", "setChatDescription", "pinChatMessage",
    "unpinChatMessage", "unpinAllChatMessages", "leaveChat", "getChat",
    "getChatAdministrators", "getChatMemberCount", "getChatMember",
    "setChatStickerSet", "deleteChatStickerSet", "getUserChatBoosts",
    "getBusinessConnection",
    "getForumTopicIconStickers", "createForumTopic", "editForumTopic",
    "closeForumTopic", "reopenForumTopic", "deleteForumTopic",
    "unpinAllForumTopicMessages", "editGeneralForumTopic",
    "closeGeneralForumTopic", "reopenGeneralForumTopic",
    "hideGeneralForumTopic", "unhideGeneralForumTopic",
    "unpinAllGeneralForumTopicMessages",
    "answerCallbackQuery", "setMyCommands", "deleteMyCommands",
    "getMyCommands", "setMyName", "getMyName", "setMyDescription",
    "getMyDescription", "setMyShortDescription", "getMyShortDescription",
    "setChatMenuButton", "getChatMenuButton",
    "setMyDefaultAdministratorRights", "getMyDefaultAdministratorRights",
    "editMessageText", "editMessageCaption", "editMessageMedia",
    "editMessageLiveLocation", "stopMessageLiveLocation",
    "editMessageReplyMarkup", "stopPoll", "deleteMessage", "deleteMessages",
    "sendSticker", "getStickerSet", "getCustomEmojiStickers",
    "uploadStickerFile", "createNewStickerSet", "addStickerToSet",
    "setStickerPositionInSet", "deleteStickerFromSet", "replaceStickerInSet",
    "setStickerEmojiList", "setStickerKeywords", "setStickerMaskPosition",
    "setStickerSetTitle", "setStickerSetThumbnail",
    "setCustomEmojiStickerSetThumbnail", "deleteStickerSet",
    "answerInlineQuery", "answerWebAppQuery",
    "sendInvoice", "createInvoiceLink", "answerShippingQuery",
    "answerPreCheckoutQuery", "getStarTransactions", "refundStarPayment",
    "setPassportDataErrors",
    "sendGame", "setGameScore", "getGameHighScores",
]

_NO_ARGUMENT_METHODS = {
    "getWebhookInfo", "getMe", "logOut", "close", "getForumTopicIconStickers",
    "getUpdates", "deleteWebhook", "deleteMyCommands", "getMyCommands",
    "setMyName", "getMyName", "setMyDescription", "getMyDescription",
    "setMyShortDescription", "getMyShortDescription", "setChatMenuButton",
    "getChatMenuButton", "setMyDefaultAdministratorRights",
    "getMyDefaultAdministratorRights", "getStarTransactions",
}


def _snake(name: str) -> str:
    return re.sub(r"([A-Z])", lambda m: "_" + m.group(1).lower(), name)


# ── Coverage ─────────────────────────────────────────────────────────────────


class TestBuilderCoverage:
    """Every Bot API method has a builder."""

    def test_all_methods_exist(self) -> None:
        missing = [name for name in BOT_API_METHODS if not callable(getattr(methods, _snake(name), None))]
        assert missing == []

    def test_exports_match(self) -> None:
        assert len(BOT_API_METHODS) == len(set(BOT_API_METHODS)) == 124
        assert sorted(methods.__all__) == sorted(_snake(name) for name in BOT_API_METHODS)

    @pytest.mark.parametrize("name", sorted(_NO_ARGUMENT_METHODS))
    def test_parameterless_calls(self, name: str) -> None:
        request = getattr(methods, _snake(name))()
        assert request == Request(method=name, parameters={})


# ── Sparse parameter maps ────────────────────────────────────────────────────


class TestParameterMaps:
    """Only supplied parameters reach the map."""

    def test_get_updates_offset_only(self) -> None:
        assert methods.get_updates(offset=5).parameters == {"offset": 5}

    def test_send_message_minimal(self) -> None:
        request = methods.send_message(chat_id=42, text="hi")
        assert request.method == "sendMessage"
        assert request.parameters == {"chat_id": 42, "text": "hi"}

    def test_false_and_zero_are_kept(self) -> None:
        request = methods.answer_callback_query("cb", show_alert=False, cache_time=0)
        assert request.parameters == {"callback_query_id": "cb", "show_alert": False, "cache_time": 0}

    def test_caller_objects_are_kept(self) -> None:
        markup = ReplyKeyboardRemove(remove_keyboard=True)
        request = methods.send_message(chat_id="@news", text="bye", reply_markup=markup)
        assert request.parameters["reply_markup"] is markup

    def test_send_message_payload(self) -> None:
        request = methods.send_message(
            chat_id=42,
            text="pick",
            reply_parameters=ReplyParameters(message_id=7),
            reply_markup=InlineKeyboardMarkup(inline_keyboard=[[InlineKeyboardButton(text="A", callback_data="a")]]),
        )
        assert request.payload() == {
            "chat_id": 42,
            "text": "pick",
            "reply_parameters": {"message_id": 7},
            "reply_markup": {"inline_keyboard": [[{"text": "A", "callback_data": "a"}]]},
        }

    def test_send_photo_upload_placeholder(self) -> None:
        request = methods.send_photo(chat_id=1, photo=InputFile(), has_spoiler=True)
        assert request.payload() == {"chat_id": 1, "photo": {}, "has_spoiler": True}

    def test_send_media_group(self) -> None:
        request = methods.send_media_group(chat_id=1, media=[InputMediaPhoto(media="attach://a"), InputMediaPhoto(media="file-id")])
        assert request.payload()["media"] == [
            {"type": "photo", "media": "attach://a"},
            {"type": "photo", "media": "file-id"},
        ]

    def test_send_paid_media(self) -> None:
        request = methods.send_paid_media(chat_id="@chan", star_count=10, media=[InputPaidMediaPhoto(media="file-id")])
        assert request.payload() == {"chat_id": "@chan", "star_count": 10, "media": [{"type": "photo", "media": "file-id"}]}

    def test_send_poll(self) -> None:
        request = methods.send_poll(chat_id=1, question="Tea?", options=[InputPollOption(text="Yes"), InputPollOption(text="No")], type="regular")
        assert request.payload() == {
            "chat_id": 1,
            "question": "Tea?",
            "options": [{"text": "Yes"}, {"text": "No"}],
            "type": "regular",
        }

    def test_set_message_reaction(self) -> None:
        request = methods.set_message_reaction(chat_id=1, message_id=2, reaction=[ReactionTypeEmoji(emoji="🔥")])
        assert request.payload()["reaction"] == [{"type": "emoji", "emoji": "🔥"}]


# ── One builder per API area ─────────────────────────────────────────────────


class TestBuilderGroups:
    """Representative builders for each module."""

    def test_set_webhook(self) -> None:
        request = methods.set_webhook("https://example.org/hook", secret_token="s3")
        assert request.parameters == {"url": "https://example.org/hook", "secret_token": "s3"}

    def test_restrict_chat_member(self) -> None:
        request = methods.restrict_chat_member(chat_id=-100, user_id=7, permissions=ChatPermissions(can_send_messages=False))
        assert request.method == "restrictChatMember"
        assert request.payload() == {"chat_id": -100, "user_id": 7, "permissions": {"can_send_messages": False}}

    def test_create_forum_topic(self) -> None:
        request = methods.create_forum_topic(chat_id=-100, name="Ideas", icon_color=7322096)
        assert request.parameters == {"chat_id": -100, "name": "Ideas", "icon_color": 7322096}

    def test_set_my_commands(self) -> None:
        request = methods.set_my_commands([BotCommand(command="start", description="Start")], scope=BotCommandScopeChat(chat_id=5))
        assert request.payload() == {
            "commands": [{"command": "start", "description": "Start"}],
            "scope": {"type": "chat", "chat_id": 5},
        }

    def test_set_chat_menu_button(self) -> None:
        request = methods.set_chat_menu_button(menu_button=MenuButtonCommands())
        assert request.payload() == {"menu_button": {"type": "commands"}}

    def test_edit_message_text_inline(self) -> None:
        request = methods.edit_message_text(text="updated", inline_message_id="abc")
        assert request.parameters == {"text": "updated", "inline_message_id": "abc"}

    def test_delete_messages(self) -> None:
        assert methods.delete_messages(1, [3, 4]).parameters == {"chat_id": 1, "message_ids": [3, 4]}

    def test_get_sticker_set(self) -> None:
        assert methods.get_sticker_set("animals").parameters == {"name": "animals"}

    def test_answer_inline_query(self) -> None:
        result = InlineQueryResultArticle(id="1", title="Hi", input_message_content=InputTextMessageContent(message_text="hi"))
        request = methods.answer_inline_query("q1", [result], cache_time=0)
        assert request.payload() == {
            "inline_query_id": "q1",
            "results": [{"type": "article", "id": "1", "title": "Hi", "input_message_content": {"message_text": "hi"}}],
            "cache_time": 0,
        }

    def test_send_invoice_payload_parameter(self) -> None:
        request = methods.send_invoice(
            chat_id=1,
            title="Book",
            description="Paperback",
            payload="order-1",
            currency="XTR",
            prices=[LabeledPrice(label="Book", amount=50)],
        )
        assert request.payload() == {
            "chat_id": 1,
            "title": "Book",
            "description": "Paperback",
            "payload": "order-1",
            "currency": "XTR",
            "prices": [{"label": "Book", "amount": 50}],
        }

    def test_set_passport_data_errors(self) -> None:
        error = PassportElementErrorSelfie(type="passport", file_hash="h", message="blurry")
        request = methods.set_passport_data_errors(7, [error])
        assert request.payload()["errors"] == [{"source": "selfie", "type": "passport", "file_hash": "h", "message": "blurry"}]

    def test_get_game_high_scores(self) -> None:
        request = methods.get_game_high_scores(user_id=7, chat_id=1, message_id=2)
        assert request.parameters == {"user_id": 7, "chat_id": 1, "message_id": 2}


# ── Logging ──────────────────────────────────────────────────────────────────


class TestBuilderLogging:
    """Builders emit a debug record naming the endpoint."""

    def test_request_built_record(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="tgbotapi")
        methods.send_message(chat_id=42, text="hi")
        record = next(r for r in caplog.records if r.getMessage() == "Request built")
        assert record.api_endpoint == "sendMessage"
        assert record.parameter_keys == ["chat_id", "text"]
