"""Mensagens de template (modelos pré-aprovados pela Meta).

Templates não requerem janela de 24h aberta. Os componentes preenchem
variáveis do cabeçalho, do corpo e dos botões do modelo aprovado.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, model_validator

from whatsapp_cloud_api.domain.enums import ButtonSubType, ComponentType, ParameterType
from whatsapp_cloud_api.errors import ValidationError
from whatsapp_cloud_api.messages.base import FrozenModel, MediaRef, MessagePayload, build_model
from whatsapp_cloud_api.messages.limits import MAX_TEMPLATE_BUTTON_INDEX, MAX_TEMPLATE_NAME_LENGTH


class Currency(FrozenModel):
    """Valor monetário; amount_1000 é o valor multiplicado por 1000."""

    fallback_value: str = Field(..., min_length=1)
    code: str = Field(..., min_length=3, max_length=3)  # ISO 4217
    amount_1000: int


class DateTime(FrozenModel):
    fallback_value: str = Field(..., min_length=1)


# Campo de valor esperado para cada tipo de parâmetro
_VALUE_FIELDS: dict[ParameterType, str] = {
    ParameterType.TEXT: "text",
    ParameterType.CURRENCY: "currency",
    ParameterType.DATE_TIME: "date_time",
    ParameterType.IMAGE: "image",
    ParameterType.DOCUMENT: "document",
    ParameterType.VIDEO: "video",
    ParameterType.PAYLOAD: "payload",
}


_MEDIA_PARAMETER_TYPES = frozenset(
    {ParameterType.IMAGE, ParameterType.DOCUMENT, ParameterType.VIDEO}
)


class TemplateParameter(FrozenModel):
    """Parâmetro de componente; exatamente o campo do seu tipo é preenchido."""

    type: ParameterType
    text: str | None = None
    currency: Currency | None = None
    date_time: DateTime | None = None
    image: MediaRef | None = None
    document: MediaRef | None = None
    video: MediaRef | None = None
    payload: str | None = None

    @model_validator(mode="after")
    def _check_value(self) -> TemplateParameter:
        expected = _VALUE_FIELDS[self.type]
        filled = [name for name in _VALUE_FIELDS.values() if getattr(self, name) is not None]
        if filled != [expected]:
            raise ValueError(f"{self.type.value} parameter requires only the '{expected}' field")
        return self

    def content(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True, mode="json")


class TemplateComponent(FrozenModel):
    """Componente de template (header, body ou button)."""

    type: ComponentType
    parameters: list[TemplateParameter] = Field(default_factory=list)
    sub_type: ButtonSubType | None = None
    index: int | None = Field(None, ge=0, le=MAX_TEMPLATE_BUTTON_INDEX)

    @model_validator(mode="after")
    def _check_button_fields(self) -> TemplateComponent:
        if self.type == ComponentType.BUTTON:
            if self.sub_type is None or self.index is None:
                raise ValueError("button component requires 'sub_type' and 'index'")
        elif self.sub_type is not None or self.index is not None:
            raise ValueError(f"{self.type.value} component does not accept 'sub_type'/'index'")
        return self

    def content(self) -> dict[str, Any]:
        component: dict[str, Any] = {"type": self.type.value}
        if self.type == ComponentType.BUTTON:
            component["sub_type"] = self.sub_type.value
            # A API espera o índice como string
            component["index"] = str(self.index)
        component["parameters"] = [p.content() for p in self.parameters]
        return component


class TemplateLanguage(FrozenModel):
    code: str = Field(..., min_length=2)  # ex.: pt_BR, en_US
    policy: Literal["deterministic"] = "deterministic"


class Template(MessagePayload):
    """Mensagem de template."""

    type: Literal["template"] = "template"
    name: str = Field(..., min_length=1, max_length=MAX_TEMPLATE_NAME_LENGTH)
    language: TemplateLanguage
    components: list[TemplateComponent] = Field(default_factory=list)

    def content(self) -> dict[str, Any]:
        template_obj: dict[str, Any] = {
            "name": self.name,
            "language": {"policy": self.language.policy, "code": self.language.code},
        }
        if self.components:
            template_obj["components"] = [c.content() for c in self.components]
        return template_obj


def build_template(
    name: str,
    language: str | TemplateLanguage | dict[str, Any],
    *components: TemplateComponent | dict[str, Any],
) -> Template:
    """Constrói payload de template.

    Args:
        name: Nome do template aprovado
        language: Código de idioma (ex.: "pt_BR") ou TemplateLanguage
        *components: Componentes com parâmetros

    Raises:
        ValidationError: Se nome/idioma ausentes ou componentes inválidos
    """
    if isinstance(language, str):
        language = {"code": language}
    return build_model(Template, name=name, language=language, components=list(components))


def build_component(
    type: str | ComponentType,  # noqa: A002
    *parameters: TemplateParameter | dict[str, Any],
    sub_type: str | ButtonSubType | None = None,
    index: int | None = None,
) -> TemplateComponent:
    """Constrói um componente de template."""
    return build_model(
        TemplateComponent,
        type=type,
        parameters=list(parameters),
        sub_type=sub_type,
        index=index,
    )


def text_parameter(text: str) -> TemplateParameter:
    return build_model(TemplateParameter, type=ParameterType.TEXT, text=text)


def currency_parameter(fallback_value: str, code: str, amount_1000: int) -> TemplateParameter:
    return build_model(
        TemplateParameter,
        type=ParameterType.CURRENCY,
        currency={"fallback_value": fallback_value, "code": code, "amount_1000": amount_1000},
    )


def date_time_parameter(fallback_value: str) -> TemplateParameter:
    return build_model(
        TemplateParameter,
        type=ParameterType.DATE_TIME,
        date_time={"fallback_value": fallback_value},
    )


def media_parameter(
    type: str | ParameterType,  # noqa: A002
    *,
    id: str | None = None,  # noqa: A002
    link: str | None = None,
) -> TemplateParameter:
    """Parâmetro de mídia (image, document ou video) para cabeçalhos."""
    if type not in _MEDIA_PARAMETER_TYPES:
        raise ValidationError(f"{type} is not a media parameter type")
    kind = ParameterType(type)
    return build_model(TemplateParameter, type=kind, **{kind.value: {"id": id, "link": link}})


def payload_parameter(payload: str) -> TemplateParameter:
    """Parâmetro de botão quick_reply (payload devolvido no webhook)."""
    return build_model(TemplateParameter, type=ParameterType.PAYLOAD, payload=payload)
