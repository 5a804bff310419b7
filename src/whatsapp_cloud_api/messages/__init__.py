"""Payloads de mensagem para a API Meta/WhatsApp.

Cada tipo de mensagem tem um modelo imutável e uma função build_*.
Todos os modelos carregam o discriminador `type`; MESSAGE_PAYLOAD_TYPES
liga cada MessageType à sua classe e é usado pelo cliente para recusar
payloads desconhecidos.

Uso:
    from whatsapp_cloud_api.messages import build_text, build_location

    text = build_text("Olá!")
    location = build_location(-23.55, -46.63, name="Sé")
"""

from __future__ import annotations

from whatsapp_cloud_api.messages.base import MessagePayload, build_model
from whatsapp_cloud_api.messages.contacts import Contact, Contacts, build_contact, build_contacts
from whatsapp_cloud_api.messages.interactive import (
    ButtonAction,
    CtaUrlAction,
    FlowAction,
    Header,
    Interactive,
    ListAction,
    ListRow,
    ListSection,
    LocationRequestAction,
    ReplyButton,
    build_button_action,
    build_cta_url_action,
    build_flow_action,
    build_interactive,
    build_list_action,
    build_location_request_action,
)
from whatsapp_cloud_api.messages.location import Location, build_location
from whatsapp_cloud_api.messages.media import (
    Audio,
    Document,
    Image,
    Sticker,
    Video,
    build_audio,
    build_document,
    build_image,
    build_sticker,
    build_video,
)
from whatsapp_cloud_api.messages.registry import (
    MESSAGE_PAYLOAD_TYPES,
    MessagePayloadUnion,
    parse_message,
    payload_class_for,
)
from whatsapp_cloud_api.messages.template import (
    Template,
    TemplateComponent,
    TemplateParameter,
    build_component,
    build_template,
    currency_parameter,
    date_time_parameter,
    media_parameter,
    payload_parameter,
    text_parameter,
)
from whatsapp_cloud_api.messages.text import Text, build_text

__all__ = [
    "MESSAGE_PAYLOAD_TYPES",
    "MessagePayload",
    "MessagePayloadUnion",
    "build_model",
    "parse_message",
    "payload_class_for",
    # Texto
    "Text",
    "build_text",
    # Mídia
    "Audio",
    "Document",
    "Image",
    "Sticker",
    "Video",
    "build_audio",
    "build_document",
    "build_image",
    "build_sticker",
    "build_video",
    # Localização
    "Location",
    "build_location",
    # Contatos
    "Contact",
    "Contacts",
    "build_contact",
    "build_contacts",
    # Interativas
    "ButtonAction",
    "CtaUrlAction",
    "FlowAction",
    "Header",
    "Interactive",
    "ListAction",
    "ListRow",
    "ListSection",
    "LocationRequestAction",
    "ReplyButton",
    "build_button_action",
    "build_cta_url_action",
    "build_flow_action",
    "build_interactive",
    "build_list_action",
    "build_location_request_action",
    # Template
    "Template",
    "TemplateComponent",
    "TemplateParameter",
    "build_component",
    "build_template",
    "currency_parameter",
    "date_time_parameter",
    "media_parameter",
    "payload_parameter",
    "text_parameter",
]
