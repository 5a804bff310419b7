"""Taxonomia de erros do cliente WhatsApp Cloud API.

Todos os erros herdam de WhatsAppApiError para facilitar captura ampla
pelo código chamador.
"""

from __future__ import annotations


class WhatsAppApiError(Exception):
    """Erro base da biblioteca."""


class ConfigurationError(WhatsAppApiError):
    """Credenciais ausentes ou inválidas na construção do cliente."""


class ValidationError(WhatsAppApiError):
    """Erro de validação de argumentos ou de payload de mensagem.

    Sempre levantado de forma síncrona, antes de qualquer chamada de rede.
    """


class TransportError(WhatsAppApiError):
    """Falha de transporte HTTP sem expor informações sensíveis.

    Cobre falhas de rede, respostas não-2xx e objetos `error` da Meta.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_type: str | None = None,
        error_code: int | None = None,
        is_permanent: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_type = error_type
        self.error_code = error_code
        self.is_permanent = is_permanent


class WebhookError(WhatsAppApiError):
    """Requisição de webhook inválida; status_code é o HTTP a devolver."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code
