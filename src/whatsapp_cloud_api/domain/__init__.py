"""Tipos de domínio compartilhados (enums de mensagens Meta/WhatsApp)."""

from whatsapp_cloud_api.domain.enums import (
    ButtonSubType,
    ComponentType,
    HeaderType,
    InteractiveType,
    MessageType,
    ParameterType,
)

__all__ = [
    "ButtonSubType",
    "ComponentType",
    "HeaderType",
    "InteractiveType",
    "MessageType",
    "ParameterType",
]
