"""Testes de logging estruturado e correlation_id."""

from __future__ import annotations

import json
import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from whatsapp_cloud_api.observability.logging import CorrelationIdFilter, configure_logging


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    def test_json_formatter_by_default(self, restore_root_logger) -> None:
        configure_logging("INFO", "svc")

        [handler] = restore_root_logger.handlers
        assert isinstance(handler.formatter, JsonFormatter)

    def test_text_formatter(self, restore_root_logger) -> None:
        configure_logging("DEBUG", "svc", log_format="text")

        [handler] = restore_root_logger.handlers
        assert not isinstance(handler.formatter, JsonFormatter)
        assert restore_root_logger.level == logging.DEBUG

    def test_json_output_has_service_and_renamed_fields(self, restore_root_logger) -> None:
        configure_logging("INFO", "svc")
        [handler] = restore_root_logger.handlers
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "mensagem", None, None)
        handler.filter(record)

        output = json.loads(handler.format(record))

        assert output["service"] == "svc"
        assert output["level"] == "INFO"
        assert output["logger"] == "x"
        assert output["correlation_id"] == ""
        assert "api_version" not in output

    def test_json_output_includes_api_version(self, restore_root_logger) -> None:
        configure_logging("INFO", "svc", api_version="v13.0")
        [handler] = restore_root_logger.handlers
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "mensagem", None, None)
        handler.filter(record)

        output = json.loads(handler.format(record))

        assert output["api_version"] == "v13.0"

    def test_http_client_loggers_quieted(self, restore_root_logger) -> None:
        configure_logging("DEBUG", "svc")

        assert logging.getLogger("httpx").level == logging.WARNING


class TestCorrelationIdFilter:
    def test_keeps_existing_correlation_id(self) -> None:
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "m", None, None)
        record.correlation_id = "abc"

        CorrelationIdFilter("svc").filter(record)

        assert record.correlation_id == "abc"
        assert record.service == "svc"
