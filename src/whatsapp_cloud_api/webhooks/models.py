"""Eventos normalizados extraídos das notificações do webhook."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _WebhookEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    phone_number_id: str | None = None
    raw: dict[str, Any] = Field(default_factory=dict, repr=False)


class InboundMessage(_WebhookEvent):
    """Mensagem recebida de um usuário.

    `raw` guarda o objeto original da Meta para tipos que não são
    normalizados aqui (mídia, interativas, etc.).
    """

    from_number: str
    message_id: str
    message_type: str
    timestamp: str | None = None
    contact_name: str | None = None

    @property
    def text(self) -> str | None:
        """Corpo da mensagem quando o tipo é texto."""
        if self.message_type != "text":
            return None
        return (self.raw.get("text") or {}).get("body")


class StatusUpdate(_WebhookEvent):
    """Atualização de status de uma mensagem enviada (sent, delivered, read, failed)."""

    recipient_id: str | None = None
    status: str
    message_id: str
    timestamp: str | None = None
    conversation: dict[str, Any] | None = None
    pricing: dict[str, Any] | None = None
