"""Cliente HTTP para a Graph API Meta/WhatsApp.

Comportamentos:
- Autenticação via header Bearer (token nunca vai na URL)
- Timeout configurável por requisição
- Logging estruturado sem PII (tokens, números, etc.)
- Tratamento de erros Meta (error.type, error.code)

Sem retry, rate limiting ou fila: cada operação faz exatamente uma
chamada e falhas são propagadas como TransportError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from whatsapp_cloud_api.config.settings import DEFAULT_REQUEST_TIMEOUT_SECONDS
from whatsapp_cloud_api.errors import TransportError
from whatsapp_cloud_api.observability.logging import get_logger
from whatsapp_cloud_api.transport.payloads import build_message_body, build_read_receipt_body

if TYPE_CHECKING:
    from whatsapp_cloud_api.config.settings import ClientConfig, Settings
    from whatsapp_cloud_api.messages.base import MessagePayload

logger: logging.Logger = get_logger(__name__)

# Erros permanentes: 400, 401, 403, 404, 413
_PERMANENT_CODES = frozenset({400, 401, 403, 404, 413})
_PERMANENT_TYPES = frozenset({"OAuthException", "InvalidRequest"})


@dataclass
class TransportConfig:
    """Configuração do transporte HTTP.

    Valores padrão são seguros e conservadores.
    """

    timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


@dataclass(frozen=True)
class MetaApiError:
    """Erro retornado pela API Meta/WhatsApp."""

    error_type: str
    error_code: int
    error_message: str
    is_permanent: bool  # True se erro não é transitório


def _is_permanent_error(error_code: int, error_type: str) -> bool:
    """Classifica erro como permanente ou transitório.

    Erros permanentes: 400, 401, 403, 404, 413
    Erros transitórios: 429 (rate limit), 500+ (server errors)
    """
    if error_code in _PERMANENT_CODES:
        return True
    return error_type in _PERMANENT_TYPES


def _parse_meta_error(response_data: Any, status_code: int | None = None) -> MetaApiError | None:
    """Extrai informações de erro do response da Meta.

    O erro é permanente se o código Meta ou o status HTTP for permanente.

    Returns:
        MetaApiError se houver erro, None se sucesso
    """
    if not isinstance(response_data, dict):
        return None
    error_obj = response_data.get("error")
    if not error_obj or not isinstance(error_obj, dict):
        return None

    error_type = error_obj.get("type", "unknown")
    error_code = error_obj.get("code", 0)
    return MetaApiError(
        error_type=error_type,
        error_code=error_code,
        error_message=error_obj.get("message", "Erro desconhecido"),
        is_permanent=(
            _is_permanent_error(error_code, error_type)
            or (status_code is not None and _is_permanent_error(status_code, ""))
        ),
    )


def _log_success(operation: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "Requisição WhatsApp bem-sucedida",
        extra={"operation": operation, "status_code": status_code},
    )


def _log_meta_error(operation: str, status_code: int, meta_error: MetaApiError) -> None:
    """Loga erro da Meta sem expor dados sensíveis."""
    logger.warning(
        "Erro da API Meta/WhatsApp",
        extra={
            "operation": operation,
            "status_code": status_code,
            "error_type": meta_error.error_type,
            "error_code": meta_error.error_code,
            "is_permanent": meta_error.is_permanent,
        },
    )


def _transport_exception(exc: Exception, operation: str) -> TransportError:
    """Converte exceções do httpx em TransportError."""
    if isinstance(exc, httpx.TimeoutException):
        logger.warning("Timeout em requisição HTTP", extra={"operation": operation})
        return TransportError("Timeout")

    if isinstance(exc, httpx.ConnectError):
        logger.warning("Erro de conexão HTTP", extra={"operation": operation})
        return TransportError("Erro de conexão")

    logger.error(
        "Erro inesperado em requisição HTTP",
        extra={"operation": operation, "error_type": type(exc).__name__},
    )
    return TransportError(f"Erro inesperado: {type(exc).__name__}")


class GraphApiTransport:
    """Transporte padrão sobre httpx.AsyncClient.

    Uso típico:
        async with GraphApiTransport() as transport:
            await transport.send_message(config, phone_id, to, message)
    """

    def __init__(
        self,
        config: TransportConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Inicializa transporte.

        Args:
            config: Configuração HTTP; ignorada para timeout/headers se client for dado
            client: Cliente httpx externo (não é fechado por close())
        """
        self._config = config or TransportConfig()
        self._client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """Retorna cliente httpx (lazy loading)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._config.timeout_seconds),
                headers=self._config.default_headers,
                verify=self._config.verify_ssl,
            )
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Fecha o cliente e libera recursos."""
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> GraphApiTransport:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def send_message(
        self,
        config: ClientConfig,
        phone_number_id: str,
        to: str,
        message: MessagePayload,
    ) -> dict[str, Any]:
        """Envia mensagem via POST /{phone_number_id}/messages."""
        body = build_message_body(to, message)
        return await self._post(config, phone_number_id, body, operation="send_message")

    async def mark_as_read(
        self,
        config: ClientConfig,
        phone_number_id: str,
        message_id: str,
    ) -> dict[str, Any]:
        """Marca mensagem recebida como lida."""
        body = build_read_receipt_body(message_id)
        return await self._post(config, phone_number_id, body, operation="mark_as_read")

    async def _post(
        self,
        config: ClientConfig,
        phone_number_id: str,
        body: dict[str, Any],
        operation: str,
    ) -> dict[str, Any]:
        """Executa POST autenticado e processa a resposta."""
        client = await self._get_client()
        headers = {
            "Authorization": f"Bearer {config.access_token}",
            "Content-Type": "application/json",
        }
        try:
            response = await client.post(
                config.messages_endpoint(phone_number_id),
                json=body,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            raise _transport_exception(exc, operation) from exc

        return self._process_response(response, operation)

    def _process_response(self, response: httpx.Response, operation: str) -> dict[str, Any]:
        """Processa response: retorna JSON se sucesso, levanta TransportError se não."""
        try:
            response_data = response.json()
        except ValueError:
            response_data = None

        meta_error = _parse_meta_error(response_data, response.status_code)
        if meta_error:
            _log_meta_error(operation, response.status_code, meta_error)
            kind = "permanente" if meta_error.is_permanent else "transitório"
            raise TransportError(
                f"Erro {kind}: {meta_error.error_message}",
                status_code=response.status_code,
                error_type=meta_error.error_type,
                error_code=meta_error.error_code,
                is_permanent=meta_error.is_permanent,
            )

        if not response.is_success:
            logger.warning(
                "Requisição HTTP falhou",
                extra={"operation": operation, "status_code": response.status_code},
            )
            raise TransportError(
                f"HTTP {response.status_code}",
                status_code=response.status_code,
                is_permanent=_is_permanent_error(response.status_code, ""),
            )

        if not isinstance(response_data, dict):
            logger.error("Response JSON inválido", extra={"operation": operation})
            raise TransportError("Response JSON inválido", status_code=response.status_code)

        _log_success(operation, response.status_code)
        return response_data


def create_transport(settings: Settings | None = None) -> GraphApiTransport:
    """Factory para criar transporte configurado.

    Args:
        settings: Configurações da aplicação. Se None, usa get_settings()

    Returns:
        GraphApiTransport pronto para uso
    """
    if settings is None:
        from whatsapp_cloud_api.config.settings import get_settings

        settings = get_settings()

    config = TransportConfig(
        timeout_seconds=float(settings.whatsapp_request_timeout_seconds),
        default_headers={"User-Agent": f"{settings.service_name}/{settings.version}"},
    )

    logger.info("Transporte HTTP criado", extra={"timeout_seconds": config.timeout_seconds})

    return GraphApiTransport(config)
