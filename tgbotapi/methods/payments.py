"""Builders for invoices, checkout answers and Telegram Stars."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from tgbotapi.models import ChatId, InlineKeyboardMarkup, LabeledPrice, ReplyParameters, ShippingOption
from tgbotapi.request import Request, build_request


def send_invoice(chat_id: ChatId, title: str, description: str, payload: str, currency: str, prices: List[LabeledPrice], message_thread_id: Optional[int] = None, provider_token: Optional[str] = None, max_tip_amount: Optional[int] = None, suggested_tip_amounts: Optional[List[int]] = None, start_parameter: Optional[str] = None, provider_data: Optional[str] = None, photo_url: Optional[str] = None, photo_size: Optional[int] = None, photo_width: Optional[int] = None, photo_height: Optional[int] = None, need_name: Optional[bool] = None, need_phone_number: Optional[bool] = None, need_email: Optional[bool] = None, need_shipping_address: Optional[bool] = None, send_phone_number_to_provider: Optional[bool] = None, send_email_to_provider: Optional[bool] = None, is_flexible: Optional[bool] = None, disable_notification: Optional[bool] = None, protect_content: Optional[bool] = None, message_effect_id: Optional[str] = None, reply_parameters: Optional[ReplyParameters] = None, reply_markup: Optional[InlineKeyboardMarkup] = None) -> Request:
    """Use this method to send invoices. On success, the sent Message is returned."""
    parameters: Dict[str, Any] = {}
    parameters["chat_id"] = chat_id
    parameters["title"] = title
    parameters["description"] = description
    parameters["payload"] = payload
    parameters["currency"] = currency
    parameters["prices"] = prices
    if message_thread_id is not None:
        parameters["message_thread_id"] = message_thread_id
    if provider_token is not None:
        parameters["provider_token"] = provider_token
    if max_tip_amount is not None:
        parameters["max_tip_amount"] = max_tip_amount
    if suggested_tip_amounts is not None:
        parameters["suggested_tip_amounts"] = suggested_tip_amounts
    if start_parameter is not None:
        parameters["start_parameter"] = start_parameter
    if provider_data is not None:
        parameters["provider_data"] = provider_data
    if photo_url is not None:
        parameters["photo_url"] = photo_url
    if photo_size is not None:
        parameters["photo_size"] = photo_size
    if photo_width is not None:
        parameters["photo_width"] = photo_width
    if photo_height is not None:
        parameters["photo_height"] = photo_height
    if need_name is not None:
        parameters["need_name"] = need_name
    if need_phone_number is not None:
        parameters["need_phone_number"] = need_phone_number
    if need_email is not None:
        parameters["need_email"] = need_email
    if need_shipping_address is not None:
        parameters["need_shipping_address"] = need_shipping_address
    if send_phone_number_to_provider is not None:
        parameters["send_phone_number_to_provider"] = send_phone_number_to_provider
    if send_email_to_provider is not None:
        parameters["send_email_to_provider"] = send_email_to_provider
    if is_flexible is not None:
        parameters["is_flexible"] = is_flexible
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
    return build_request("sendInvoice", parameters)


def create_invoice_link(title: str, description: str, payload: str, currency: str, prices: List[LabeledPrice], provider_token: Optional[str] = None, max_tip_amount: Optional[int] = None, suggested_tip_amounts: Optional[List[int]] = None, provider_data: Optional[str] = None, photo_url: Optional[str] = None, photo_size: Optional[int] = None, photo_width: Optional[int] = None, photo_height: Optional[int] = None, need_name: Optional[bool] = None, need_phone_number: Optional[bool] = None, need_email: Optional[bool] = None, need_shipping_address: Optional[bool] = None, send_phone_number_to_provider: Optional[bool] = None, send_email_to_provider: Optional[bool] = None, is_flexible: Optional[bool] = None) -> Request:
    """Use this method to create a link for an invoice. Returns the created invoice link as String on success."""
    parameters: Dict[str, Any] = {}
    parameters["title"] = title
    parameters["description"] = description
    parameters["payload"] = payload
    parameters["currency"] = currency
    parameters["prices"] = prices
    if provider_token is not None:
        parameters["provider_token"] = provider_token
    if max_tip_amount is not None:
        parameters["max_tip_amount"] = max_tip_amount
    if suggested_tip_amounts is not None:
        parameters["suggested_tip_amounts"] = suggested_tip_amounts
    if provider_data is not None:
        parameters["provider_data"] = provider_data
    if photo_url is not None:
        parameters["photo_url"] = photo_url
    if photo_size is not None:
        parameters["photo_size"] = photo_size
    if photo_width is not None:
        parameters["photo_width"] = photo_width
    if photo_height is not None:
        parameters["photo_height"] = photo_height
    if need_name is not None:
        parameters["need_name"] = need_name
    if need_phone_number is not None:
        parameters["need_phone_number"] = need_phone_number
    if need_email is not None:
        parameters["need_email"] = need_email
    if need_shipping_address is not None:
        parameters["need_shipping_address"] = need_shipping_address
    if send_phone_number_to_provider is not None:
        parameters["send_phone_number_to_provider"] = send_phone_number_to_provider
    if send_email_to_provider is not None:
        parameters["send_email_to_provider"] = send_email_to_provider
    if is_flexible is not None:
        parameters["is_flexible"] = is_flexible
    return build_request("createInvoiceLink", parameters)


def answer_shipping_query(shipping_query_id: str, ok: bool, shipping_options: Optional[List[ShippingOption]] = None, error_message: Optional[str] = None) -> Request:
    """Use this method to reply to shipping queries. On success, True is returned."""
    parameters: Dict[str, Any] = {}
    parameters["shipping_query_id"] = shipping_query_id
    parameters["ok"] = ok
    if shipping_options is not None:
        parameters["shipping_options"] = shipping_options
    if error_message is not None:
        parameters["error_message"] = error_message
    return build_request("answerShippingQuery", parameters)


def answer_pre_checkout_query(pre_checkout_query_id: str, ok: bool, error_message: Optional[str] = None) -> Request:
    """Use this method to respond to pre-checkout queries. On success, True is returned."""
    parameters: Dict[str, Any] = {}
    parameters["pre_checkout_query_id"] = pre_checkout_query_id
    parameters["ok"] = ok
    if error_message is not None:
        parameters["error_message"] = error_message
    return build_request("answerPreCheckoutQuery", parameters)


def get_star_transactions(offset: Optional[int] = None, limit: Optional[int] = None) -> Request:
    """Returns the bot's Telegram Star transactions in chronological order. On success, returns a StarTransactions object."""
    parameters: Dict[str, Any] = {}
    if offset is not None:
        parameters["offset"] = offset
    if limit is not None:
        parameters["limit"] = limit
    return build_request("getStarTransactions", parameters)


def refund_star_payment(user_id: int, telegram_payment_charge_id: str) -> Request:
    """Refunds a successful payment in Telegram Stars. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["user_id"] = user_id
    parameters["telegram_payment_charge_id"] = telegram_payment_charge_id
    return build_request("refundStarPayment", parameters)
