"""Configurações centralizadas do whatsapp_cloud_api.

Este módulo exporta:
- Settings: classe de configuração via variáveis de ambiente
- get_settings: função cacheada para obter instância única
- ClientConfig: credenciais imutáveis usadas pelo cliente
- Constantes da Graph API Meta (DEFAULT_API_VERSION, GRAPH_API_BASE_URL)

Uso típico:
    from whatsapp_cloud_api.config import get_settings, DEFAULT_API_VERSION
"""

from whatsapp_cloud_api.config.settings import (
    DEFAULT_API_VERSION,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    GRAPH_API_BASE_URL,
    ClientConfig,
    Settings,
    get_settings,
)

__all__ = [
    "ClientConfig",
    "Settings",
    "get_settings",
    "DEFAULT_API_VERSION",
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
    "GRAPH_API_BASE_URL",
]
