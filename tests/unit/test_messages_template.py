"""Testes das mensagens de template."""

from __future__ import annotations

import pytest

from whatsapp_cloud_api.errors import ValidationError
from whatsapp_cloud_api.messages import (
    build_component,
    build_template,
    currency_parameter,
    date_time_parameter,
    media_parameter,
    payload_parameter,
    text_parameter,
)


class TestTemplate:
    def test_template_without_components(self) -> None:
        """Sem componentes, a chave components é omitida."""
        payload = build_template("hello_world", "en_US")

        assert payload.to_message_object() == {
            "type": "template",
            "template": {
                "name": "hello_world",
                "language": {"policy": "deterministic", "code": "en_US"},
            },
        }

    def test_template_with_components(self) -> None:
        payload = build_template(
            "order_update",
            "pt_BR",
            build_component("header", media_parameter("image", link="https://example.com/a.png")),
            build_component(
                "body",
                text_parameter("Maria"),
                currency_parameter("R$10,00", "BRL", 10000),
                date_time_parameter("20 de maio"),
            ),
            build_component(
                "button", payload_parameter("CONFIRM"), sub_type="quick_reply", index=0
            ),
        )

        components = payload.content()["components"]

        assert components[0] == {
            "type": "header",
            "parameters": [{"type": "image", "image": {"link": "https://example.com/a.png"}}],
        }
        assert components[1]["parameters"] == [
            {"type": "text", "text": "Maria"},
            {
                "type": "currency",
                "currency": {"fallback_value": "R$10,00", "code": "BRL", "amount_1000": 10000},
            },
            {"type": "date_time", "date_time": {"fallback_value": "20 de maio"}},
        ]
        assert components[2] == {
            "type": "button",
            "sub_type": "quick_reply",
            "index": "0",
            "parameters": [{"type": "payload", "payload": "CONFIRM"}],
        }

    def test_name_required(self) -> None:
        with pytest.raises(ValidationError):
            build_template("", "pt_BR")

    def test_button_component_requires_index(self) -> None:
        with pytest.raises(ValidationError, match="sub_type"):
            build_component("button", payload_parameter("X"))

    def test_body_component_rejects_index(self) -> None:
        with pytest.raises(ValidationError):
            build_component("body", text_parameter("X"), index=1)

    def test_button_index_limit(self) -> None:
        with pytest.raises(ValidationError):
            build_component("button", sub_type="url", index=10)

    def test_media_parameter_rejects_non_media_type(self) -> None:
        with pytest.raises(ValidationError, match="not a media parameter"):
            media_parameter("text", id="1")

    def test_parameter_with_wrong_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            build_component("body", {"type": "text", "payload": "X"})
