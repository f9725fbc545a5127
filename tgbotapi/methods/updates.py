"""Builders for getting updates: long polling and webhook management.

Only the wire parameters are assembled here; polling loops and webhook
servers belong to the caller.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from tgbotapi.models import InputFile
from tgbotapi.request import Request, build_request


def get_updates(offset: Optional[int] = None, limit: Optional[int] = None, timeout: Optional[int] = None, allowed_updates: Optional[List[str]] = None) -> Request:
    """Use this method to receive incoming updates using long polling. Returns an Array of Update objects."""
    parameters: Dict[str, Any] = {}
    if offset is not None:
        parameters["offset"] = offset
    if limit is not None:
        parameters["limit"] = limit
    if timeout is not None:
        parameters["timeout"] = timeout
    if allowed_updates is not None:
        parameters["allowed_updates"] = allowed_updates
    return build_request("getUpdates", parameters)


def set_webhook(url: str, certificate: Optional[InputFile] = None, ip_address: Optional[str] = None, max_connections: Optional[int] = None, allowed_updates: Optional[List[str]] = None, drop_pending_updates: Optional[bool] = None, secret_token: Optional[str] = None) -> Request:
    """Use this method to specify a URL and receive incoming updates via an outgoing webhook. Returns True on success."""
    parameters: Dict[str, Any] = {}
    parameters["url"] = url
    if certificate is not None:
        parameters["certificate"] = certificate
    if ip_address is not None:
        parameters["ip_address"] = ip_address
    if max_connections is not None:
        parameters["max_connections"] = max_connections
    if allowed_updates is not None:
        parameters["allowed_updates"] = allowed_updates
    if drop_pending_updates is not None:
        parameters["drop_pending_updates"] = drop_pending_updates
    if secret_token is not None:
        parameters["secret_token"] = secret_token
    return build_request("setWebhook", parameters)


def delete_webhook(drop_pending_updates: Optional[bool] = None) -> Request:
    """Use this method to remove webhook integration if you decide to switch back to getUpdates. Returns True on success."""
    parameters: Dict[str, Any] = {}
    if drop_pending_updates is not None:
        parameters["drop_pending_updates"] = drop_pending_updates
    return build_request("deleteWebhook", parameters)


def get_webhook_info() -> Request:
    """Use this method to get current webhook status. On success, returns a WebhookInfo object."""
    return build_request("getWebhookInfo", {})
