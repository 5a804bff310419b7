"""Corpos de requisição enviados ao endpoint /messages."""

from __future__ import annotations

from typing import Any

from whatsapp_cloud_api.messages.base import MessagePayload


def build_message_body(to: str, message: MessagePayload) -> dict[str, Any]:
    """Constrói o corpo completo de envio de mensagem.

    Args:
        to: Número do destinatário
        message: Payload construído por whatsapp_cloud_api.messages

    Returns:
        Corpo pronto para POST
    """
    return {
        "messaging_product": "whatsapp",
        "recipient_type": "individual",
        "to": to,
        **message.to_message_object(),
    }


def build_read_receipt_body(message_id: str) -> dict[str, Any]:
    """Constrói o corpo de confirmação de leitura."""
    return {
        "messaging_product": "whatsapp",
        "status": "read",
        "message_id": message_id,
    }
