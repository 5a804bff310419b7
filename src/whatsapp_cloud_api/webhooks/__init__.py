"""Recepção de webhooks do WhatsApp (verificação, assinatura e eventos)."""

from __future__ import annotations

from whatsapp_cloud_api.webhooks.handlers import (
    extract_events,
    handle_notification,
    verify_subscription,
)
from whatsapp_cloud_api.webhooks.models import InboundMessage, StatusUpdate
from whatsapp_cloud_api.webhooks.router import create_app, create_webhook_router
from whatsapp_cloud_api.webhooks.signature import (
    SignatureResult,
    compute_signature,
    verify_meta_signature,
)

__all__ = [
    "InboundMessage",
    "SignatureResult",
    "StatusUpdate",
    "compute_signature",
    "create_app",
    "create_webhook_router",
    "extract_events",
    "handle_notification",
    "verify_meta_signature",
    "verify_subscription",
]
