"""Registro de variantes de payload e união discriminada por `type`."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from whatsapp_cloud_api.domain.enums import MessageType
from whatsapp_cloud_api.errors import ValidationError
from whatsapp_cloud_api.messages.base import MessagePayload, format_validation_error
from whatsapp_cloud_api.messages.contacts import Contacts
from whatsapp_cloud_api.messages.interactive import Interactive
from whatsapp_cloud_api.messages.location import Location
from whatsapp_cloud_api.messages.media import Audio, Document, Image, Sticker, Video
from whatsapp_cloud_api.messages.template import Template
from whatsapp_cloud_api.messages.text import Text

# Mapeamento de discriminador para classe de payload
MESSAGE_PAYLOAD_TYPES: dict[MessageType, type[MessagePayload]] = {
    MessageType.TEXT: Text,
    MessageType.AUDIO: Audio,
    MessageType.DOCUMENT: Document,
    MessageType.IMAGE: Image,
    MessageType.STICKER: Sticker,
    MessageType.VIDEO: Video,
    MessageType.LOCATION: Location,
    MessageType.CONTACTS: Contacts,
    MessageType.INTERACTIVE: Interactive,
    MessageType.TEMPLATE: Template,
}

MessagePayloadUnion = Annotated[
    Text
    | Audio
    | Document
    | Image
    | Sticker
    | Video
    | Location
    | Contacts
    | Interactive
    | Template,
    Field(discriminator="type"),
]

_PAYLOAD_ADAPTER: TypeAdapter[MessagePayload] = TypeAdapter(MessagePayloadUnion)


def payload_class_for(tag: object) -> type[MessagePayload] | None:
    """Retorna a classe registrada para o discriminador, ou None."""
    try:
        return MESSAGE_PAYLOAD_TYPES.get(MessageType(tag))
    except ValueError:
        return None


def parse_message(data: Mapping[str, Any]) -> MessagePayload:
    """Reconstrói um payload a partir de seus campos (ex.: JSON armazenado).

    O campo `type` escolhe a variante.

    Raises:
        ValidationError: Se `type` desconhecido ou campos inválidos
    """
    try:
        return _PAYLOAD_ADAPTER.validate_python(dict(data))
    except PydanticValidationError as exc:
        raise ValidationError(format_validation_error(MessagePayload, exc)) from exc
