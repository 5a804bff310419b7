"""Enums de domínio para tipos de mensagens Meta/WhatsApp."""

from __future__ import annotations

from enum import StrEnum


class MessageType(StrEnum):
    """Tipos de mensagem outbound suportados (discriminadores de payload).

    Cada valor é o campo `type` enviado à API e identifica a variante:
    - text, audio, document, image, sticker, video
    - location, contacts
    - interactive (com subtipo, ver InteractiveType)
    - template
    """

    TEXT = "text"
    AUDIO = "audio"
    DOCUMENT = "document"
    IMAGE = "image"
    STICKER = "sticker"
    VIDEO = "video"
    LOCATION = "location"
    CONTACTS = "contacts"
    INTERACTIVE = "interactive"
    TEMPLATE = "template"


class InteractiveType(StrEnum):
    """Tipos de mensagens interativas suportadas.

    Conforme API Meta:
    - button: até 3 botões de resposta predefinida
    - list: lista de opções para escolha
    - cta_url: botão com URL (CTA = Call To Action)
    - location_request_message: solicitação de envio de localização
    - flow: WhatsApp Flows (formulários estruturados)
    """

    BUTTON = "button"
    LIST = "list"
    CTA_URL = "cta_url"
    LOCATION_REQUEST_MESSAGE = "location_request_message"
    FLOW = "flow"


class HeaderType(StrEnum):
    """Tipos de cabeçalho de mensagem interativa."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    DOCUMENT = "document"


class ComponentType(StrEnum):
    """Componentes de template."""

    HEADER = "header"
    BODY = "body"
    BUTTON = "button"


class ButtonSubType(StrEnum):
    """Subtipos de botão em componentes de template."""

    QUICK_REPLY = "quick_reply"
    URL = "url"


class ParameterType(StrEnum):
    """Tipos de parâmetro aceitos em componentes de template."""

    TEXT = "text"
    CURRENCY = "currency"
    DATE_TIME = "date_time"
    IMAGE = "image"
    DOCUMENT = "document"
    VIDEO = "video"
    PAYLOAD = "payload"
