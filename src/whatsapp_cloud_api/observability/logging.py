"""Configuração de logging estruturado (JSON) do cliente WhatsApp."""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

from whatsapp_cloud_api.observability.middleware import get_correlation_id

_JSON_FIELDS = ("asctime", "levelname", "name", "message", "correlation_id", "service")
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(correlation_id)s] %(message)s"

# Loggers de terceiros que registram URLs completas (com phone_number_id)
_NOISY_LOGGERS = ("httpx", "httpcore")


class CorrelationIdFilter(logging.Filter):
    """Completa o record com service e correlation_id da requisição corrente.

    Um correlation_id passado via `extra` tem precedência.
    """

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        if not getattr(record, "correlation_id", None):
            record.correlation_id = get_correlation_id()
        record.service = self._service_name
        return True


def _build_formatter(log_format: str, api_version: str | None) -> logging.Formatter:
    if log_format.lower() == "text":
        return logging.Formatter(_TEXT_FORMAT)
    return JsonFormatter(
        " ".join(f"%({name})s" for name in _JSON_FIELDS),
        rename_fields={"levelname": "level", "name": "logger"},
        static_fields={"api_version": api_version} if api_version else {},
    )


def configure_logging(
    level: str,
    service_name: str,
    log_format: str = "json",
    api_version: str | None = None,
) -> None:
    """Configura o logger raiz com um único handler em stdout.

    Args:
        level: Nível mínimo (ex.: "INFO")
        service_name: Valor do campo `service` em cada linha
        log_format: "json" (padrão) ou "text" para desenvolvimento local
        api_version: Versão da Graph API incluída em toda linha JSON
    """
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(_build_formatter(log_format, api_version))
    handler.addFilter(CorrelationIdFilter(service_name))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [handler]

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
