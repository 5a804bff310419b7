"""Testes do registro de variantes de payload."""

from __future__ import annotations

import pytest

from whatsapp_cloud_api.domain.enums import MessageType
from whatsapp_cloud_api.errors import ValidationError
from whatsapp_cloud_api.messages import (
    MESSAGE_PAYLOAD_TYPES,
    Location,
    Text,
    build_text,
    parse_message,
    payload_class_for,
)


class TestRegistry:
    def test_every_message_type_is_registered(self) -> None:
        """Cada MessageType tem exatamente uma classe de payload."""
        assert set(MESSAGE_PAYLOAD_TYPES) == set(MessageType)

    @pytest.mark.parametrize("message_type", list(MessageType))
    def test_registered_class_default_type_matches_key(self, message_type: MessageType) -> None:
        cls = MESSAGE_PAYLOAD_TYPES[message_type]

        assert cls.model_fields["type"].default == message_type.value

    def test_payload_class_for_known_tag(self) -> None:
        assert payload_class_for("text") is Text

    @pytest.mark.parametrize("tag", ["reaction", "", None, 42])
    def test_payload_class_for_unknown_tag(self, tag: object) -> None:
        assert payload_class_for(tag) is None


class TestParseMessage:
    def test_parse_round_trip_text(self) -> None:
        original = build_text("oi", preview_url=True)

        assert parse_message(original.model_dump()) == original

    def test_parse_location(self) -> None:
        payload = parse_message({"type": "location", "latitude": 1.5, "longitude": 2.5})

        assert isinstance(payload, Location)

    def test_parse_unknown_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            parse_message({"type": "reaction", "emoji": "👍"})

    def test_parse_invalid_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            parse_message({"type": "text", "body": ""})
