"""One request builder per Bot API method, grouped by API area.

Each builder returns a :class:`~tgbotapi.request.Request`; nothing here does I/O.
"""

from tgbotapi.methods.bot import (
    answer_callback_query,
    set_my_commands,
    delete_my_commands,
    get_my_commands,
    set_my_name,
    get_my_name,
    set_my_description,
    get_my_description,
    set_my_short_description,
    get_my_short_description,
    set_chat_menu_button,
    get_chat_menu_button,
    set_my_default_administrator_rights,
    get_my_default_administrator_rights,
)
from tgbotapi.methods.chats import (
    ban_chat_member,
    unban_chat_member,
    restrict_chat_member,
    promote_chat_member,
    set_chat_administrator_custom_title,
    ban_chat_sender_chat,
    unban_chat_sender_chat,
    set_chat_permissions,
    export_chat_invite_link,
    create_chat_invite_link,
    edit_chat_invite_link,
    revoke_chat_invite_link,
    approve_chat_join_request,
    decline_chat_join_request,
    set_chat_photo,
    delete_chat_photo,
    set_chat_title,
    set_chat_description,
    pin_chat_message,
    unpin_chat_message,
    unpin_all_chat_messages,
    leave_chat,
    get_chat,
    get_chat_administrators,
    get_chat_member_count,
    get_chat_member,
    set_chat_sticker_set,
    delete_chat_sticker_set,
    get_user_chat_boosts,
    get_business_connection,
)
from tgbotapi.methods.editing import (
    edit_message_text,
    edit_message_caption,
    edit_message_media,
    edit_message_live_location,
    stop_message_live_location,
    edit_message_reply_markup,
    stop_poll,
    delete_message,
    delete_messages,
)
from tgbotapi.methods.forum import (
    get_forum_topic_icon_stickers,
    create_forum_topic,
    edit_forum_topic,
    close_forum_topic,
    reopen_forum_topic,
    delete_forum_topic,
    unpin_all_forum_topic_messages,
    edit_general_forum_topic,
    close_general_forum_topic,
    reopen_general_forum_topic,
    hide_general_forum_topic,
    unhide_general_forum_topic,
    unpin_all_general_forum_topic_messages,
)
from tgbotapi.methods.games import (
    send_game,
    set_game_score,
    get_game_high_scores,
)
from tgbotapi.methods.inline import (
    answer_inline_query,
    answer_web_app_query,
)
from tgbotapi.methods.messages import (
    get_me,
    log_out,
    close,
    send_message,
    forward_message,
    forward_messages,
    copy_message,
    copy_messages,
    send_photo,
    send_audio,
    send_document,
    send_video,
    send_animation,
    send_voice,
    send_video_note,
    send_paid_media,
    send_media_group,
    send_location,
    send_venue,
    send_contact,
    send_poll,
    send_dice,
    send_chat_action,
    set_message_reaction,
    get_user_profile_photos,
    get_file,
)
from tgbotapi.methods.passport import (
    set_passport_data_errors,
)
from tgbotapi.methods.payments import (
    send_invoice,
    create_invoice_link,
    answer_shipping_query,
    answer_pre_checkout_query,
    get_star_transactions,
    refund_star_payment,
)
from tgbotapi.methods.stickers import (
    send_sticker,
    get_sticker_set,
    get_custom_emoji_stickers,
    upload_sticker_file,
    create_new_sticker_set,
    add_sticker_to_set,
    set_sticker_position_in_set,
    delete_sticker_from_set,
    replace_sticker_in_set,
    set_sticker_emoji_list,
    set_sticker_keywords,
    set_sticker_mask_position,
    set_sticker_set_title,
    set_sticker_set_thumbnail,
    set_custom_emoji_sticker_set_thumbnail,
    delete_sticker_set,
)
from tgbotapi.methods.updates import (
    get_updates,
    set_webhook,
    delete_webhook,
    get_webhook_info,
)

__all__ = [
    # updates
    "get_updates",
    "set_webhook",
    "delete_webhook",
    "get_webhook_info",
    # messages
    "get_me",
    "log_out",
    "close",
    "send_message",
    "forward_message",
    "forward_messages",
    "copy_message",
    "copy_messages",
    "send_photo",
    "send_audio",
    "send_document",
    "send_video",
    "send_animation",
    "send_voice",
    "send_video_note",
    "send_paid_media",
    "send_media_group",
    "send_location",
    "send_venue",
    "send_contact",
    "send_poll",
    "send_dice",
    "send_chat_action",
    "set_message_reaction",
    "get_user_profile_photos",
    "get_file",
    # chats
    "ban_chat_member",
    "unban_chat_member",
    "restrict_chat_member",
    "promote_chat_member",
    "set_chat_administrator_custom_title",
    "ban_chat_sender_chat",
    "unban_chat_sender_chat",
    "set_chat_permissions",
    "export_chat_invite_link",
    "create_chat_invite_link",
    "edit_chat_invite_link",
    "revoke_chat_invite_link",
    "approve_chat_join_request",
    "decline_chat_join_request",
    "set_chat_photo",
    "delete_chat_photo",
    "set_chat_title",
    "set_chat_description",
    "pin_chat_message",
    "unpin_chat_message",
    "unpin_all_chat_messages",
    "leave_chat",
    "get_chat",
    "get_chat_administrators",
    "get_chat_member_count",
    "get_chat_member",
    "set_chat_sticker_set",
    "delete_chat_sticker_set",
    "get_user_chat_boosts",
    "get_business_connection",
    # forum
    "get_forum_topic_icon_stickers",
    "create_forum_topic",
    "edit_forum_topic",
    "close_forum_topic",
    "reopen_forum_topic",
    "delete_forum_topic",
    "unpin_all_forum_topic_messages",
    "edit_general_forum_topic",
    "close_general_forum_topic",
    "reopen_general_forum_topic",
    "hide_general_forum_topic",
    "unhide_general_forum_topic",
    "unpin_all_general_forum_topic_messages",
    # bot
    "answer_callback_query",
    "set_my_commands",
    "delete_my_commands",
    "get_my_commands",
    "set_my_name",
    "get_my_name",
    "set_my_description",
    "get_my_description",
    "set_my_short_description",
    "get_my_short_description",
    "set_chat_menu_button",
    "get_chat_menu_button",
    "set_my_default_administrator_rights",
    "get_my_default_administrator_rights",
    # editing
    "edit_message_text",
    "edit_message_caption",
    "edit_message_media",
    "edit_message_live_location",
    "stop_message_live_location",
    "edit_message_reply_markup",
    "stop_poll",
    "delete_message",
    "delete_messages",
    # stickers
    "send_sticker",
    "get_sticker_set",
    "get_custom_emoji_stickers",
    "upload_sticker_file",
    "create_new_sticker_set",
    "add_sticker_to_set",
    "set_sticker_position_in_set",
    "delete_sticker_from_set",
    "replace_sticker_in_set",
    "set_sticker_emoji_list",
    "set_sticker_keywords",
    "set_sticker_mask_position",
    "set_sticker_set_title",
    "set_sticker_set_thumbnail",
    "set_custom_emoji_sticker_set_thumbnail",
    "delete_sticker_set",
    # inline
    "answer_inline_query",
    "answer_web_app_query",
    # payments
    "send_invoice",
    "create_invoice_link",
    "answer_shipping_query",
    "answer_pre_checkout_query",
    "get_star_transactions",
    "refund_star_payment",
    # passport
    "set_passport_data_errors",
    # games
    "send_game",
    "set_game_score",
    "get_game_high_scores",
]
