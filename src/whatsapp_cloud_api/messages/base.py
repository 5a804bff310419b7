"""Base comum para payloads de mensagem (união discriminada por `type`)."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic import ValidationError as PydanticValidationError

from whatsapp_cloud_api.errors import ValidationError

P = TypeVar("P", bound=BaseModel)


class FrozenModel(BaseModel):
    """Modelo imutável que rejeita campos desconhecidos."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class MessagePayload(FrozenModel):
    """Payload de mensagem pronto para envio.

    Subclasses fixam `type` com um Literal igual a um MessageType; esse
    discriminador é o que o WhatsAppAPI verifica antes de enviar.
    """

    type: str

    def content(self) -> Any:
        """Objeto específico do tipo (valor da chave `<type>` no payload)."""
        return self.model_dump(exclude={"type"}, exclude_none=True, mode="json")

    def to_message_object(self) -> dict[str, Any]:
        """Renderiza o formato da API Meta: {"type": t, t: {...}}."""
        return {"type": self.type, self.type: self.content()}


class MediaRef(FrozenModel):
    """Referência a mídia: ID hospedado na Meta ou link público (exatamente um)."""

    id: str | None = None
    link: str | None = None

    @model_validator(mode="after")
    def _require_id_or_link(self) -> MediaRef:
        if bool(self.id) == bool(self.link):
            raise ValueError("media requires exactly one of 'id' or 'link'")
        return self


def format_validation_error(model: type[BaseModel], exc: PydanticValidationError) -> str:
    """Resume erros do pydantic em uma mensagem curta e legível."""
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ())) or model.__name__
        parts.append(f"{location}: {err.get('msg', 'invalid value')}")
    return f"Invalid {model.__name__}: " + "; ".join(parts)


def build_model(model: type[P], /, **fields: Any) -> P:
    """Instancia o modelo convertendo falhas em ValidationError da biblioteca.

    Args:
        model: Classe pydantic a construir
        **fields: Campos semânticos do tipo

    Returns:
        Instância imutável validada

    Raises:
        ValidationError: Se campo obrigatório ausente ou malformado
    """
    try:
        return model(**fields)
    except PydanticValidationError as exc:
        raise ValidationError(format_validation_error(model, exc)) from exc
