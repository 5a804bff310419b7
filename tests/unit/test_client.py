"""Testes da fachada WhatsAppAPI.

Valida:
- Validação síncrona antes de qualquer I/O
- Versão padrão da API
- Recusa de payloads sem discriminador registrado
- Delegação ao transporte
"""

from __future__ import annotations

import logging

import pytest

from whatsapp_cloud_api import WhatsAppAPI, create_whatsapp_api
from whatsapp_cloud_api.config.settings import DEFAULT_API_VERSION, Settings
from whatsapp_cloud_api.errors import ConfigurationError, ValidationError
from whatsapp_cloud_api.messages import build_text
from whatsapp_cloud_api.messages.text import Text


class TestConstruction:
    def test_default_api_version(self, transport) -> None:
        api = WhatsAppAPI("token-123", transport=transport)

        assert api.api_version == DEFAULT_API_VERSION == "v13.0"

    def test_custom_api_version(self, transport) -> None:
        api = WhatsAppAPI("token-123", "v19.0", transport=transport)

        assert api.config.messages_endpoint("111") == (
            "https://graph.facebook.com/v19.0/111/messages"
        )

    @pytest.mark.parametrize("token", ["", None])
    def test_missing_token_rejected(self, token) -> None:
        with pytest.raises(ConfigurationError, match="Token must be specified"):
            WhatsAppAPI(token)

    def test_repr_does_not_expose_token(self, transport) -> None:
        api = WhatsAppAPI("super-secret", transport=transport)

        assert "super-secret" not in repr(api)
        assert "super-secret" not in repr(api.config)


class TestSendMessage:
    @pytest.mark.asyncio
    async def test_send_delegates_to_transport(self, transport) -> None:
        api = WhatsAppAPI("token-123", transport=transport)
        message = build_text("Olá!")

        result = await api.send_message("111", "5511999999999", message)

        assert result == {"messages": [{"id": "wamid.TEST"}]}
        assert len(transport.calls) == 1
        name, (config, phone_id, to, sent) = transport.calls[0]
        assert name == "send_message"
        assert config is api.config
        assert (phone_id, to, sent) == ("111", "5511999999999", message)

    @pytest.mark.parametrize(
        ("phone_id", "to", "message", "expected"),
        [
            ("", "5511", build_text("oi"), "Phone ID must be specified"),
            ("111", "", build_text("oi"), "Recipient phone number must be specified"),
            ("111", "5511", None, "Message must have a message object"),
        ],
    )
    def test_missing_arguments_raise_synchronously(
        self, transport, phone_id, to, message, expected
    ) -> None:
        """Erros de argumento são levantados antes de criar a corrotina."""
        api = WhatsAppAPI("token-123", transport=transport)

        with pytest.raises(ValidationError, match=expected):
            api.send_message(phone_id, to, message)

        assert transport.calls == []

    @pytest.mark.parametrize(
        "message",
        [
            {"type": "text", "text": {"body": "oi"}},
            {"_": "text", "text": "oi"},
            "oi",
        ],
    )
    def test_unsupported_payload_rejected(self, transport, message) -> None:
        api = WhatsAppAPI("token-123", transport=transport)

        with pytest.raises(ValidationError, match="Unsupported payload shape"):
            api.send_message("111", "5511", message)

    def test_mismatched_discriminator_rejected(self, transport) -> None:
        """Payload cujo `type` não corresponde à classe registrada é recusado."""
        forged = Text.model_construct(type="location", body="oi")

        api = WhatsAppAPI("token-123", transport=transport)

        with pytest.raises(ValidationError, match="Unsupported payload shape"):
            api.send_message("111", "5511", forged)

    @pytest.mark.asyncio
    async def test_debug_log_has_no_phone_number(self, transport, caplog) -> None:
        api = WhatsAppAPI("token-123", transport=transport)

        with caplog.at_level(logging.DEBUG, logger="whatsapp_cloud_api.client"):
            await api.send_message("111", "5511999999999", build_text("oi"))

        assert "5511999999999" not in caplog.text
        assert caplog.records[0].message_type == "text"


class TestMarkAsRead:
    @pytest.mark.asyncio
    async def test_mark_as_read_delegates(self, transport) -> None:
        api = WhatsAppAPI("token-123", transport=transport)

        result = await api.mark_as_read("111", "wamid.ABC")

        assert result == {"success": True}
        assert len(transport.calls) == 1
        name, (config, phone_id, message_id) = transport.calls[0]
        assert name == "mark_as_read"
        assert config is api.config
        assert (phone_id, message_id) == ("111", "wamid.ABC")

    @pytest.mark.parametrize(
        ("phone_id", "message_id", "expected"),
        [
            ("111", "", "Message ID must be specified"),
            ("", "wamid.ABC", "Phone ID must be specified"),
        ],
    )
    def test_missing_arguments_rejected(self, transport, phone_id, message_id, expected) -> None:
        api = WhatsAppAPI("token-123", transport=transport)

        with pytest.raises(ValidationError, match=expected):
            api.mark_as_read(phone_id, message_id)

        assert transport.calls == []


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_injected_transport_is_not_closed(self, transport) -> None:
        async with WhatsAppAPI("token-123", transport=transport):
            pass

        assert transport.closed is False


class TestCreateWhatsAppApi:
    def test_factory_uses_settings(self, transport) -> None:
        settings = Settings(whatsapp_access_token="tok", whatsapp_api_version="v18.0")

        api = create_whatsapp_api(settings, transport=transport)

        assert api.api_version == "v18.0"
        assert api.config.access_token == "tok"

    def test_factory_requires_token(self, transport) -> None:
        with pytest.raises(ConfigurationError, match="WHATSAPP_ACCESS_TOKEN"):
            create_whatsapp_api(Settings(whatsapp_access_token=None), transport=transport)
