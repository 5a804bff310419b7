"""Configurações do cliente via variáveis de ambiente.

Todas as configurações são carregadas de env vars.
Nunca hardcode secrets ou valores sensíveis.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from whatsapp_cloud_api.errors import ConfigurationError

# -----------------------------------------------------------------------------
# Constantes da Graph API Meta/WhatsApp
# Referência: https://developers.facebook.com/docs/graph-api/changelog
# -----------------------------------------------------------------------------
DEFAULT_API_VERSION: str = "v13.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 30.0


class Settings(BaseSettings):
    """Configurações lidas do ambiente.

    Comentários em PT-BR são obrigatórios por diretriz do projeto.
    """

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    # Aplicação
    service_name: str = "whatsapp_cloud_api"
    version: str = "0.1.0"
    log_level: str = "INFO"
    log_format: str = "json"  # json | text

    # WhatsApp / Meta API
    whatsapp_access_token: str | None = None  # Bearer token
    whatsapp_api_version: str = DEFAULT_API_VERSION
    whatsapp_api_base_url: str = GRAPH_API_BASE_URL
    whatsapp_phone_number_id: str | None = None  # ID do número registrado
    whatsapp_request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    # Webhook
    whatsapp_verify_token: str | None = None  # Para verificação de webhook
    whatsapp_webhook_secret: str | None = None  # HMAC SHA-256 secret (app secret)

    @property
    def whatsapp_api_endpoint(self) -> str:
        """Retorna a URL base completa da API WhatsApp (versão + base)."""
        return f"{self.whatsapp_api_base_url}/{self.whatsapp_api_version}"

    def validate_whatsapp_config(self) -> list[str]:
        """Valida se configurações mínimas de envio estão presentes.

        Retorna lista de erros (vazia = tudo OK).
        """
        errors: list[str] = []
        if not self.whatsapp_access_token:
            errors.append("WHATSAPP_ACCESS_TOKEN não configurado")
        if not self.whatsapp_api_version:
            errors.append("WHATSAPP_API_VERSION não pode ser vazio")
        if self.whatsapp_request_timeout_seconds <= 0:
            errors.append("WHATSAPP_REQUEST_TIMEOUT_SECONDS deve ser positivo")
        return errors

    def validate_webhook_config(self) -> list[str]:
        """Valida configurações de recebimento de webhook."""
        errors: list[str] = []
        if not self.whatsapp_verify_token:
            errors.append("WHATSAPP_VERIFY_TOKEN não configurado")
        if not self.whatsapp_webhook_secret:
            errors.append("WHATSAPP_WEBHOOK_SECRET não configurado (assinatura ignorada)")
        return errors


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Credenciais imutáveis do cliente.

    O token é obrigatório; a versão usa DEFAULT_API_VERSION quando omitida.
    """

    access_token: str
    api_version: str = DEFAULT_API_VERSION
    base_url: str = GRAPH_API_BASE_URL

    def __post_init__(self) -> None:
        if not self.access_token or not isinstance(self.access_token, str):
            raise ConfigurationError("Token must be specified")
        if not self.api_version:
            raise ConfigurationError("API version must not be empty")

    @property
    def api_endpoint(self) -> str:
        """URL base versionada, ex.: https://graph.facebook.com/v13.0."""
        return f"{self.base_url.rstrip('/')}/{self.api_version}"

    def messages_endpoint(self, phone_number_id: str) -> str:
        """Retorna URL completa para envio de mensagens.

        Formato: https://graph.facebook.com/v13.0/{phone_number_id}/messages
        """
        return f"{self.api_endpoint}/{phone_number_id}/messages"

    @classmethod
    def from_settings(cls, settings: Settings) -> ClientConfig:
        """Constrói a configuração a partir de Settings."""
        return cls(
            access_token=settings.whatsapp_access_token or "",
            api_version=settings.whatsapp_api_version,
            base_url=settings.whatsapp_api_base_url,
        )

    def __repr__(self) -> str:
        # Nunca expor o token em repr/logs
        return f"ClientConfig(api_version={self.api_version!r}, base_url={self.base_url!r})"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Retorna instância cacheada de Settings."""
    return Settings()
