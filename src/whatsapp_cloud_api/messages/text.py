"""Mensagens de texto."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from whatsapp_cloud_api.messages.base import MessagePayload, build_model
from whatsapp_cloud_api.messages.limits import MAX_TEXT_LENGTH


class Text(MessagePayload):
    """Mensagem de texto simples ou com links."""

    type: Literal["text"] = "text"
    body: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH)
    preview_url: bool = False


def build_text(body: str, preview_url: bool = False) -> Text:
    """Constrói payload de texto.

    Args:
        body: Texto da mensagem (1..4096 caracteres)
        preview_url: Se True, a Meta renderiza preview do primeiro link

    Returns:
        Payload de texto imutável

    Raises:
        ValidationError: Se body vazio ou acima do limite
    """
    return build_model(Text, body=body, preview_url=preview_url)
