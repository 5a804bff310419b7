"""Cliente Python para a API WhatsApp Cloud (Meta Graph API).

Uso:
    from whatsapp_cloud_api import WhatsAppAPI, messages

    api = WhatsAppAPI(token)
    await api.send_message(phone_id, "5511999999999", messages.build_text("Olá!"))
"""

from __future__ import annotations

from whatsapp_cloud_api import messages, webhooks
from whatsapp_cloud_api import webhooks as handlers
from whatsapp_cloud_api.client import WhatsAppAPI, create_whatsapp_api
from whatsapp_cloud_api.config.settings import DEFAULT_API_VERSION
from whatsapp_cloud_api.errors import (
    ConfigurationError,
    TransportError,
    ValidationError,
    WebhookError,
    WhatsAppApiError,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_API_VERSION",
    "ConfigurationError",
    "TransportError",
    "ValidationError",
    "WebhookError",
    "WhatsAppAPI",
    "WhatsAppApiError",
    "__version__",
    "create_whatsapp_api",
    "handlers",
    "messages",
    "webhooks",
]
