"""Interface de transporte usada pelo cliente."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from whatsapp_cloud_api.config.settings import ClientConfig
    from whatsapp_cloud_api.messages.base import MessagePayload


class Transport(Protocol):
    """Protocolo para envio de requisições à API de mensagens.

    Implementações fazem uma única chamada de rede por operação e
    levantam TransportError em falhas; não fazem retry.
    """

    async def send_message(
        self,
        config: ClientConfig,
        phone_number_id: str,
        to: str,
        message: MessagePayload,
    ) -> dict[str, Any]:
        """Envia a mensagem e retorna o JSON de resposta da API."""
        ...

    async def mark_as_read(
        self,
        config: ClientConfig,
        phone_number_id: str,
        message_id: str,
    ) -> dict[str, Any]:
        """Marca a mensagem recebida como lida."""
        ...

    async def close(self) -> None:
        """Libera recursos do transporte."""
        ...
