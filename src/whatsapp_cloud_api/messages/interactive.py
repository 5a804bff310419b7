"""Mensagens interativas (botões, lista, CTA URL, pedido de localização, flow)."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Field, model_validator

from whatsapp_cloud_api.domain.enums import HeaderType, InteractiveType
from whatsapp_cloud_api.errors import ValidationError
from whatsapp_cloud_api.messages.base import FrozenModel, MessagePayload, build_model
from whatsapp_cloud_api.messages.limits import (
    MAX_BUTTON_ID_LENGTH,
    MAX_BUTTON_TEXT_LENGTH,
    MAX_BUTTONS_PER_MESSAGE,
    MAX_FILENAME_LENGTH,
    MAX_FOOTER_LENGTH,
    MAX_HEADER_TEXT_LENGTH,
    MAX_INTERACTIVE_BODY_LENGTH,
    MAX_LIST_ROW_DESCRIPTION_LENGTH,
    MAX_LIST_ROW_ID_LENGTH,
    MAX_LIST_ROW_TITLE_LENGTH,
    MAX_LIST_ROWS,
    MAX_LIST_SECTION_TITLE_LENGTH,
    MAX_LIST_SECTIONS,
)

# -----------------------------------------------------------------------------
# Header
# -----------------------------------------------------------------------------


class Header(FrozenModel):
    """Cabeçalho opcional: texto ou mídia (imagem, vídeo, documento)."""

    type: HeaderType
    text: str | None = Field(None, max_length=MAX_HEADER_TEXT_LENGTH)
    id: str | None = None
    link: str | None = None
    filename: str | None = Field(None, max_length=MAX_FILENAME_LENGTH)

    @model_validator(mode="after")
    def _check_shape(self) -> Header:
        if self.type == HeaderType.TEXT:
            if not self.text:
                raise ValueError("text header requires 'text'")
            if self.id or self.link:
                raise ValueError("text header does not accept media")
            return self

        if self.text:
            raise ValueError(f"{self.type.value} header does not accept 'text'")
        if bool(self.id) == bool(self.link):
            raise ValueError(f"{self.type.value} header requires exactly one of 'id' or 'link'")
        if self.filename and self.type != HeaderType.DOCUMENT:
            raise ValueError("filename is only allowed in document headers")
        return self

    def content(self) -> dict[str, Any]:
        if self.type == HeaderType.TEXT:
            return {"type": "text", "text": self.text}
        media = self.model_dump(include={"id", "link", "filename"}, exclude_none=True)
        return {"type": self.type.value, self.type.value: media}


# -----------------------------------------------------------------------------
# Actions
# -----------------------------------------------------------------------------


class ReplyButton(FrozenModel):
    """Botão de resposta rápida."""

    id: str = Field(..., min_length=1, max_length=MAX_BUTTON_ID_LENGTH)
    title: str = Field(..., min_length=1, max_length=MAX_BUTTON_TEXT_LENGTH)


class ButtonAction(FrozenModel):
    """Até 3 botões de resposta predefinida."""

    kind: Literal["button"] = "button"
    buttons: list[ReplyButton] = Field(..., min_length=1, max_length=MAX_BUTTONS_PER_MESSAGE)

    @model_validator(mode="after")
    def _unique_buttons(self) -> ButtonAction:
        ids = [b.id for b in self.buttons]
        titles = [b.title for b in self.buttons]
        if len(set(ids)) != len(ids):
            raise ValueError("button ids must be unique")
        if len(set(titles)) != len(titles):
            raise ValueError("button titles must be unique")
        return self

    def content(self) -> dict[str, Any]:
        return {
            "buttons": [
                {"type": "reply", "reply": {"id": b.id, "title": b.title}}
                for b in self.buttons
            ]
        }


class ListRow(FrozenModel):
    id: str = Field(..., min_length=1, max_length=MAX_LIST_ROW_ID_LENGTH)
    title: str = Field(..., min_length=1, max_length=MAX_LIST_ROW_TITLE_LENGTH)
    description: str | None = Field(None, max_length=MAX_LIST_ROW_DESCRIPTION_LENGTH)


class ListSection(FrozenModel):
    title: str | None = Field(None, max_length=MAX_LIST_SECTION_TITLE_LENGTH)
    rows: list[ListRow] = Field(..., min_length=1)


class ListAction(FrozenModel):
    """Lista de opções agrupadas em seções."""

    kind: Literal["list"] = "list"
    button: str = Field(..., min_length=1, max_length=MAX_BUTTON_TEXT_LENGTH)
    sections: list[ListSection] = Field(..., min_length=1, max_length=MAX_LIST_SECTIONS)

    @model_validator(mode="after")
    def _check_sections(self) -> ListAction:
        rows = [row for section in self.sections for row in section.rows]
        if len(rows) > MAX_LIST_ROWS:
            raise ValueError(f"Maximum {MAX_LIST_ROWS} rows allowed across all sections")
        row_ids = [row.id for row in rows]
        if len(set(row_ids)) != len(row_ids):
            raise ValueError("row ids must be unique")
        if len(self.sections) > 1 and any(not s.title for s in self.sections):
            raise ValueError("section title is required when there is more than one section")
        return self

    def content(self) -> dict[str, Any]:
        return {
            "button": self.button,
            "sections": [s.model_dump(exclude_none=True) for s in self.sections],
        }


class CtaUrlAction(FrozenModel):
    """Botão que abre uma URL."""

    kind: Literal["cta_url"] = "cta_url"
    display_text: str = Field(..., min_length=1, max_length=MAX_BUTTON_TEXT_LENGTH)
    url: str = Field(..., min_length=1)

    def content(self) -> dict[str, Any]:
        return {
            "name": "cta_url",
            "parameters": {"display_text": self.display_text, "url": self.url},
        }


class LocationRequestAction(FrozenModel):
    """Botão de envio de localização pelo usuário."""

    kind: Literal["location_request_message"] = "location_request_message"

    def content(self) -> dict[str, Any]:
        return {"name": "send_location"}


class FlowAction(FrozenModel):
    """Abre um WhatsApp Flow (formulário estruturado)."""

    kind: Literal["flow"] = "flow"
    flow_id: str = Field(..., min_length=1)
    flow_token: str = Field(..., min_length=1)
    flow_cta: str = Field(..., min_length=1, max_length=MAX_BUTTON_TEXT_LENGTH)
    flow_message_version: str = "3"
    flow_action: Literal["navigate", "data_exchange"] = "navigate"
    screen: str | None = None
    data: dict[str, Any] | None = None

    def content(self) -> dict[str, Any]:
        parameters: dict[str, Any] = {
            "flow_message_version": self.flow_message_version,
            "flow_token": self.flow_token,
            "flow_id": self.flow_id,
            "flow_cta": self.flow_cta,
            "flow_action": self.flow_action,
        }
        if self.screen:
            action_payload: dict[str, Any] = {"screen": self.screen}
            if self.data:
                action_payload["data"] = self.data
            parameters["flow_action_payload"] = action_payload
        return {"name": "flow", "parameters": parameters}


ActionType = ButtonAction | ListAction | CtaUrlAction | LocationRequestAction | FlowAction
Action = Annotated[ActionType, Field(discriminator="kind")]

# Tipos de header aceitos por ação
_ALLOWED_HEADERS: dict[InteractiveType, frozenset[HeaderType]] = {
    InteractiveType.BUTTON: frozenset(HeaderType),
    InteractiveType.LIST: frozenset({HeaderType.TEXT}),
    InteractiveType.CTA_URL: frozenset(HeaderType),
    InteractiveType.LOCATION_REQUEST_MESSAGE: frozenset(),
    InteractiveType.FLOW: frozenset(HeaderType),
}


# -----------------------------------------------------------------------------
# Payload
# -----------------------------------------------------------------------------


class Interactive(MessagePayload):
    """Mensagem interativa; o subtipo é definido pela ação."""

    type: Literal["interactive"] = "interactive"
    action: Action
    body: str = Field(..., min_length=1, max_length=MAX_INTERACTIVE_BODY_LENGTH)
    header: Header | None = None
    footer: str | None = Field(None, min_length=1, max_length=MAX_FOOTER_LENGTH)

    @property
    def interactive_type(self) -> InteractiveType:
        return InteractiveType(self.action.kind)

    @model_validator(mode="after")
    def _check_header(self) -> Interactive:
        if self.header is None:
            return self
        allowed = _ALLOWED_HEADERS[self.interactive_type]
        if self.header.type not in allowed:
            raise ValueError(
                f"{self.header.type.value} header not allowed for "
                f"{self.interactive_type.value} messages"
            )
        return self

    def content(self) -> dict[str, Any]:
        interactive_obj: dict[str, Any] = {
            "type": self.interactive_type.value,
            "body": {"text": self.body},
            "action": self.action.content(),
        }
        if self.header:
            interactive_obj["header"] = self.header.content()
        if self.footer:
            interactive_obj["footer"] = {"text": self.footer}
        return interactive_obj


def build_interactive(
    action: ActionType | dict[str, Any],
    body: str,
    header: Header | dict[str, Any] | None = None,
    footer: str | None = None,
) -> Interactive:
    """Constrói payload de mensagem interativa.

    Args:
        action: Ação já construída ou dict com `kind`
        body: Texto do corpo (obrigatório)
        header: Cabeçalho opcional
        footer: Rodapé opcional

    Raises:
        ValidationError: Se corpo ausente, ação inválida ou header incompatível
    """
    return build_model(Interactive, action=action, body=body, header=header, footer=footer)


def build_button_action(
    *buttons: tuple[str, str] | ReplyButton | dict[str, str],
) -> ButtonAction:
    """Ação de botões a partir de pares (id, title).

    Raises:
        ValidationError: Se algum botão não for par (id, title), ReplyButton ou dict
    """
    parsed = [_parse_button(b) for b in buttons]
    return build_model(ButtonAction, buttons=parsed)


def _parse_button(button: object) -> ReplyButton | dict[str, Any]:
    if isinstance(button, ReplyButton | dict):
        return button
    if isinstance(button, tuple) and len(button) == 2:
        return {"id": button[0], "title": button[1]}
    raise ValidationError(f"Invalid ButtonAction: expected (id, title) pair, got {button!r}")


def build_list_action(
    button: str,
    *sections: ListSection | dict[str, Any],
) -> ListAction:
    """Ação de lista com texto do botão e seções."""
    return build_model(ListAction, button=button, sections=list(sections))


def build_cta_url_action(display_text: str, url: str) -> CtaUrlAction:
    """Ação de botão com URL."""
    return build_model(CtaUrlAction, display_text=display_text, url=url)


def build_location_request_action() -> LocationRequestAction:
    """Ação de pedido de localização (sem campos)."""
    return LocationRequestAction()


def build_flow_action(
    flow_id: str,
    flow_token: str,
    flow_cta: str,
    *,
    flow_message_version: str = "3",
    flow_action: str = "navigate",
    screen: str | None = None,
    data: dict[str, Any] | None = None,
) -> FlowAction:
    """Ação de WhatsApp Flow."""
    return build_model(
        FlowAction,
        flow_id=flow_id,
        flow_token=flow_token,
        flow_cta=flow_cta,
        flow_message_version=flow_message_version,
        flow_action=flow_action,
        screen=screen,
        data=data,
    )
