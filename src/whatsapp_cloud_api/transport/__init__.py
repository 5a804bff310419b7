"""Transporte HTTP para a Graph API.

O cliente WhatsAppAPI depende apenas do protocolo Transport; a
implementação padrão é GraphApiTransport (httpx assíncrono).
"""

from whatsapp_cloud_api.transport.base import Transport
from whatsapp_cloud_api.transport.http_client import (
    GraphApiTransport,
    TransportConfig,
    create_transport,
)
from whatsapp_cloud_api.transport.payloads import build_message_body, build_read_receipt_body

__all__ = [
    "GraphApiTransport",
    "Transport",
    "TransportConfig",
    "build_message_body",
    "build_read_receipt_body",
    "create_transport",
]
