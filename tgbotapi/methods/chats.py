"""Builders for chat administration: members, invite links, chat settings and boosts."""

from __future__ import annotations

from typing import Any, Dict, Optional

from tgbotapi.models import ChatId, ChatPermissions, InputFile
from tgbotapi.request import Request, build_request


def ban_chat_member(chat_id: ChatId, user_id: int, until_date: Optional[int] = None, revoke_messages: Optional[bool] = None) -> Request:
    """Use this method to ban a user in a group, a supergroup or a channel. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["user_id"] = user_id
    if until_date is not None:
        parameters["until_date"] = until_date
    if revoke_messages is not None:
        parameters["revoke_messages"] = revoke_messages
    return build_request("banChatMember", parameters)


def unban_chat_member(chat_id: ChatId, user_id: int, only_if_banned: Optional[bool] = None) -> Request:
    """Use this method to unban a previously banned user in a supergroup or channel. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["user_id"] = user_id
    if only_if_banned is not None:
        parameters["only_if_banned"] = only_if_banned
    return build_request("unbanChatMember", parameters)


def restrict_chat_member(chat_id: ChatId, user_id: int, permissions: ChatPermissions, use_independent_chat_permissions: Optional[bool] = None, until_date: Optional[int] = None) -> Request:
    """Use this method to restrict a user in a supergroup. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["user_id"] = user_id
    parameters["permissions"] = permissions
    if use_independent_chat_permissions is not None:
        parameters["use_independent_chat_permissions"] = use_independent_chat_permissions
    if until_date is not None:
        parameters["until_date"] = until_date
    return build_request("restrictChatMember", parameters)


def promote_chat_member(chat_id: ChatId, user_id: int, is_anonymous: Optional[bool] = None, can_manage_chat: Optional[bool] = None, can_delete_messages: Optional[bool] = None, can_manage_video_chats: Optional[bool] = None, can_restrict_members: Optional[bool] = None, can_promote_members: Optional[bool] = None, can_change_info: Optional[bool] = None, can_invite_users: Optional[bool] = None, can_post_stories: Optional[bool] = None, can_edit_stories: Optional[bool] = None, can_delete_stories: Optional[bool] = None, can_post_messages: Optional[bool] = None, can_edit_messages: Optional[bool] = None, can_pin_messages: Optional[bool] = None, can_manage_topics: Optional[bool] = None) -> Request:
    """Use this method to promote or demote a user in a supergroup or a channel. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["user_id"] = user_id
    if is_anonymous is not None:
        parameters["is_anonymous"] = is_anonymous
    if can_manage_chat is not None:
        parameters["can_manage_chat"] = can_manage_chat
    if can_delete_messages is not None:
        parameters["can_delete_messages"] = can_delete_messages
    if can_manage_video_chats is not None:
        parameters["can_manage_video_chats"] = can_manage_video_chats
    if can_restrict_members is not None:
        parameters["can_restrict_members"] = can_restrict_members
    if can_promote_members is not None:
        parameters["can_promote_members"] = can_promote_members
    if can_change_info is not None:
        parameters["can_change_info"] = can_change_info
    if can_invite_users is not None:
        parameters["can_invite_users"] = can_invite_users
    if can_post_stories is not None:
        parameters["can_post_stories"] = can_post_stories
    if can_edit_stories is not None:
        parameters["can_edit_stories"] = can_edit_stories
    if can_delete_stories is not None:
        parameters["can_delete_stories"] = can_delete_stories
    if can_post_messages is not None:
        parameters["can_post_messages"] = can_post_messages
    if can_edit_messages is not None:
        parameters["can_edit_messages"] = can_edit_messages
    if can_pin_messages is not None:
        parameters["can_pin_messages"] = can_pin_messages
    if can_manage_topics is not None:
        parameters["can_manage_topics"] = can_manage_topics
    return build_request("promoteChatMember", parameters)


def set_chat_administrator_custom_title(chat_id: ChatId, user_id: int, custom_title: str) -> Request:
    """Use this method to set a custom title for an administrator in a supergroup promoted by the bot. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["user_id"] = user_id
    parameters["custom_title"] = custom_title
    return build_request("setChatAdministratorCustomTitle", parameters)


def ban_chat_sender_chat(chat_id: ChatId, sender_chat_id: int) -> Request:
    """Use this method to ban a channel chat in a supergroup or a channel. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["sender_chat_id"] = sender_chat_id
    return build_request("banChatSenderChat", parameters)


def unban_chat_sender_chat(chat_id: ChatId, sender_chat_id: int) -> Request:
    """Use this method to unban a previously banned channel chat in a supergroup or channel. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["sender_chat_id"] = sender_chat_id
    return build_request("unbanChatSenderChat", parameters)


def set_chat_permissions(chat_id: ChatId, permissions: ChatPermissions, use_independent_chat_permissions: Optional[bool] = None) -> Request:
    """Use this method to set default chat permissions for all members. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["permissions"] = permissions
    if use_independent_chat_permissions is not None:
        parameters["use_independent_chat_permissions"] = use_independent_chat_permissions
    return build_request("setChatPermissions", parameters)


def export_chat_invite_link(chat_id: ChatId) -> Request:
    """Use this method to generate a new primary invite link for a chat. Returns the new invite link as String on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    return build_request("exportChatInviteLink", parameters)


def create_chat_invite_link(chat_id: ChatId, name: Optional[str] = None, expire_date: Optional[int] = None, member_limit: Optional[int] = None, creates_join_request: Optional[bool] = None) -> Request:
    """Use this method to create an additional invite link for a chat. Returns the new invite link as ChatInviteLink object."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    if name is not None:
        parameters["name"] = name
    if expire_date is not None:
        parameters["expire_date"] = expire_date
    if member_limit is not None:
        parameters["member_limit"] = member_limit
    if creates_join_request is not None:
        parameters["creates_join_request"] = creates_join_request
    return build_request("createChatInviteLink", parameters)


def edit_chat_invite_link(chat_id: ChatId, invite_link: str, name: Optional[str] = None, expire_date: Optional[int] = None, member_limit: Optional[int] = None, creates_join_request: Optional[bool] = None) -> Request:
    """Use this method to edit a non-primary invite link created by the bot. Returns the edited invite link as a ChatInviteLink object."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["invite_link"] = invite_link
    if name is not None:
        parameters["name"] = name
    if expire_date is not None:
        parameters["expire_date"] = expire_date
    if member_limit is not None:
        parameters["member_limit"] = member_limit
    if creates_join_request is not None:
        parameters["creates_join_request"] = creates_join_request
    return build_request("editChatInviteLink", parameters)


def revoke_chat_invite_link(chat_id: ChatId, invite_link: str) -> Request:
    """Use this method to revoke an invite link created by the bot. Returns the revoked invite link as ChatInviteLink object."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["invite_link"] = invite_link
    return build_request("revokeChatInviteLink", parameters)


def approve_chat_join_request(chat_id: ChatId, user_id: int) -> Request:
    """Use this method to approve a chat join request. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["user_id"] = user_id
    return build_request("approveChatJoinRequest", parameters)


def decline_chat_join_request(chat_id: ChatId, user_id: int) -> Request:
    """Use this method to decline a chat join request. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["user_id"] = user_id
    return build_request("declineChatJoinRequest", parameters)


def set_chat_photo(chat_id: ChatId, photo: InputFile) -> Request:
    """Use this method to set a new profile photo for the chat. Photos can't be changed for private chats. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["photo"] = photo
    return build_request("setChatPhoto", parameters)


def delete_chat_photo(chat_id: ChatId) -> Request:
    """Use this method to delete a chat photo. Photos can't be changed for private chats. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    return build_request("deleteChatPhoto", parameters)


def set_chat_title(chat_id: ChatId, title: str) -> Request:
    """Use this method to change the title of a chat. Titles can't be changed for private chats. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["title"] = title
    return build_request("setChatTitle", parameters)


def set_chat_description(chat_id: ChatId, description: Optional[str] = None) -> Request:
    """Use this method to change the description of a group, a supergroup or a channel. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    if description is not None:
        parameters["description"] = description
    return build_request("setChatDescription", parameters)


def pin_chat_message(chat_id: ChatId, message_id: int, disable_notification: Optional[bool] = None) -> Request:
    """Use this method to add a message to the list of pinned messages in a chat. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["message_id"] = message_id
    if disable_notification is not None:
        parameters["disable_notification"] = disable_notification
    return build_request("pinChatMessage", parameters)


def unpin_chat_message(chat_id: ChatId, message_id: Optional[int] = None) -> Request:
    """Use this method to remove a message from the list of pinned messages in a chat. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    if message_id is not None:
        parameters["message_id"] = message_id
    return build_request("unpinChatMessage", parameters)


def unpin_all_chat_messages(chat_id: ChatId) -> Request:
    """Use this method to clear the list of pinned messages in a chat. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    return build_request("unpinAllChatMessages", parameters)


def leave_chat(chat_id: ChatId) -> Request:
    """Use this method for your bot to leave a group, supergroup or channel. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    return build_request("leaveChat", parameters)


def get_chat(chat_id: ChatId) -> Request:
    """Use this method to get up-to-date information about the chat. Returns a ChatFullInfo object on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    return build_request("getChat", parameters)


def get_chat_administrators(chat_id: ChatId) -> Request:
    """Use this method to get a list of administrators in a chat, which aren't bots. Returns an Array of ChatMember objects."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    return build_request("getChatAdministrators", parameters)


def get_chat_member_count(chat_id: ChatId) -> Request:
    """Use this method to get the number of members in a chat. Returns Int on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    return build_request("getChatMemberCount", parameters)


def get_chat_member(chat_id: ChatId, user_id: int) -> Request:
    """Use this method to get information about a member of a chat. Returns a ChatMember object on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["user_id"] = user_id
    return build_request("getChatMember", parameters)


def set_chat_sticker_set(chat_id: ChatId, sticker_set_name: str) -> Request:
    """Use this method to set a new group sticker set for a supergroup. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["sticker_set_name"] = sticker_set_name
    return build_request("setChatStickerSet", parameters)


def delete_chat_sticker_set(chat_id: ChatId) -> Request:
    """Use this method to delete a group sticker set from a supergroup. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    return build_request("deleteChatStickerSet", parameters)


def get_user_chat_boosts(chat_id: ChatId, user_id: int) -> Request:
    """Use this method to get the list of boosts added to a chat by a user. Returns a UserChatBoosts object."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["user_id"] = user_id
    return build_request("getUserChatBoosts", parameters)


def get_business_connection(business_connection_id: str) -> Request:
    """Use this method to get information about the connection of the bot with a business account. Returns a BusinessConnection object on success."""
    parameters: Dict[str, Any] = {}
    parameters["business_connection_id"] = business_connection_id
    return build_request("getBusinessConnection", parameters)
