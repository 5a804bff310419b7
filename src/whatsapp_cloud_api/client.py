"""Fachada de envio para a API WhatsApp Cloud.

Responsabilidade:
- Guardar credenciais imutáveis (token + versão da API)
- Validar argumentos de chamada antes de qualquer I/O
- Recusar payloads sem discriminador conhecido
- Delegar a chamada de rede ao Transport
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import Any

from whatsapp_cloud_api.config.settings import (
    DEFAULT_API_VERSION,
    GRAPH_API_BASE_URL,
    ClientConfig,
    Settings,
    get_settings,
)
from whatsapp_cloud_api.errors import ConfigurationError, ValidationError
from whatsapp_cloud_api.messages.base import MessagePayload
from whatsapp_cloud_api.messages.registry import payload_class_for
from whatsapp_cloud_api.observability.logging import get_logger
from whatsapp_cloud_api.transport.base import Transport
from whatsapp_cloud_api.transport.http_client import GraphApiTransport, create_transport

logger: logging.Logger = get_logger(__name__)

UNSUPPORTED_PAYLOAD_MESSAGE = (
    "Unsupported payload shape: build messages with whatsapp_cloud_api.messages "
    "(e.g. build_text, build_image)"
)


class WhatsAppAPI:
    """Ponto de entrada para envio de mensagens e confirmações de leitura.

    Cada operação valida os argumentos de forma síncrona e retorna um
    awaitable com o resultado da única chamada de rede. O chamador decide
    se aguarda, encadeia ou executa várias chamadas em paralelo.

    Uso típico:
        async with WhatsAppAPI(token) as api:
            await api.send_message(phone_id, "5511999999999", build_text("Olá!"))
    """

    def __init__(
        self,
        token: str,
        api_version: str = DEFAULT_API_VERSION,
        *,
        base_url: str = GRAPH_API_BASE_URL,
        transport: Transport | None = None,
    ) -> None:
        """Inicializa o cliente.

        Args:
            token: Token da API (temporário ou permanente)
            api_version: Versão da Graph API, padrão DEFAULT_API_VERSION
            base_url: URL base da Graph API
            transport: Transporte customizado; padrão GraphApiTransport

        Raises:
            ConfigurationError: Se token ausente
        """
        self._config = ClientConfig(access_token=token, api_version=api_version, base_url=base_url)
        self._owns_transport = transport is None
        self._transport: Transport = transport or GraphApiTransport()

    @classmethod
    def from_config(cls, config: ClientConfig, transport: Transport | None = None) -> WhatsAppAPI:
        """Cria o cliente a partir de um ClientConfig já validado."""
        return cls(
            config.access_token,
            config.api_version,
            base_url=config.base_url,
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def api_version(self) -> str:
        return self._config.api_version

    def send_message(
        self,
        phone_number_id: str,
        to: str,
        message: MessagePayload,
    ) -> Awaitable[dict[str, Any]]:
        """Envia uma mensagem.

        Args:
            phone_number_id: ID do número do bot
            to: Número do usuário
            message: Payload construído por whatsapp_cloud_api.messages

        Returns:
            Awaitable com o JSON de resposta da API

        Raises:
            ValidationError: Se argumento ausente ou payload não suportado
        """
        if not phone_number_id:
            raise ValidationError("Phone ID must be specified")
        if not to:
            raise ValidationError("Recipient phone number must be specified")
        if message is None:
            raise ValidationError("Message must have a message object")
        _ensure_supported_payload(message)

        # Nunca registrar "to" (telefone) em logs - é PII.
        logger.debug(
            "Enviando mensagem WhatsApp",
            extra={"message_type": message.type, "api_version": self.api_version},
        )
        return self._transport.send_message(self._config, phone_number_id, to, message)

    def mark_as_read(self, phone_number_id: str, message_id: str) -> Awaitable[dict[str, Any]]:
        """Marca uma mensagem recebida como lida.

        Raises:
            ValidationError: Se phone_number_id ou message_id ausentes
        """
        if not phone_number_id:
            raise ValidationError("Phone ID must be specified")
        if not message_id:
            raise ValidationError("Message ID must be specified")

        logger.debug("Marcando mensagem como lida", extra={"api_version": self.api_version})
        return self._transport.mark_as_read(self._config, phone_number_id, message_id)

    async def close(self) -> None:
        """Fecha o transporte padrão (transportes injetados ficam com o chamador)."""
        if self._owns_transport:
            await self._transport.close()

    async def __aenter__(self) -> WhatsAppAPI:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"WhatsAppAPI(api_version={self.api_version!r})"


def _ensure_supported_payload(message: object) -> None:
    """Garante que o payload é uma variante registrada com discriminador coerente.

    Objetos soltos (dicts, formatos de versões antigas) ou cujo `type` não
    corresponde à classe registrada são recusados.
    """
    expected = None
    if isinstance(message, MessagePayload):
        expected = payload_class_for(message.type)
    if expected is None or not isinstance(message, expected):
        raise ValidationError(UNSUPPORTED_PAYLOAD_MESSAGE)


def create_whatsapp_api(
    settings: Settings | None = None,
    transport: Transport | None = None,
) -> WhatsAppAPI:
    """Factory para criar o cliente a partir das configurações de ambiente.

    Args:
        settings: Configurações da aplicação. Se None, usa get_settings()
        transport: Transporte customizado; padrão criado via create_transport

    Returns:
        WhatsAppAPI pronto para uso

    Raises:
        ConfigurationError: Se configuração mínima ausente
    """
    settings = settings or get_settings()
    errors = settings.validate_whatsapp_config()
    if errors:
        raise ConfigurationError("; ".join(errors))

    api = WhatsAppAPI.from_config(
        ClientConfig.from_settings(settings),
        transport=transport or create_transport(settings),
    )
    if transport is None:
        # Transporte criado aqui pertence ao cliente
        api._owns_transport = True

    logger.info("Cliente WhatsApp criado", extra={"api_version": api.api_version})
    return api
