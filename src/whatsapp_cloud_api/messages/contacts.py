"""Mensagens de contatos (cartões vCard estruturados)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import Field

from whatsapp_cloud_api.messages.base import FrozenModel, MessagePayload, build_model
from whatsapp_cloud_api.messages.limits import BIRTHDAY_PATTERN


class ContactName(FrozenModel):
    """Nome do contato; formatted_name é obrigatório pela Meta."""

    formatted_name: str = Field(..., min_length=1)
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    suffix: str | None = None
    prefix: str | None = None


class ContactPhone(FrozenModel):
    phone: str = Field(..., min_length=1)
    type: str | None = None  # CELL, MAIN, IPHONE, HOME, WORK
    wa_id: str | None = None


class ContactEmail(FrozenModel):
    email: str = Field(..., min_length=1)
    type: str | None = None  # HOME, WORK


class ContactUrl(FrozenModel):
    url: str = Field(..., min_length=1)
    type: str | None = None  # HOME, WORK


class ContactAddress(FrozenModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    country_code: str | None = None
    type: str | None = None  # HOME, WORK


class ContactOrg(FrozenModel):
    company: str | None = None
    department: str | None = None
    title: str | None = None


class Contact(FrozenModel):
    """Um cartão de contato."""

    name: ContactName
    phones: list[ContactPhone] | None = None
    emails: list[ContactEmail] | None = None
    urls: list[ContactUrl] | None = None
    addresses: list[ContactAddress] | None = None
    org: ContactOrg | None = None
    birthday: str | None = Field(None, pattern=BIRTHDAY_PATTERN)  # YYYY-MM-DD


class Contacts(MessagePayload):
    """Mensagem com um ou mais cartões de contato.

    Diferente dos outros tipos, a API espera uma lista em `contacts`.
    """

    type: Literal["contacts"] = "contacts"
    contacts: list[Contact] = Field(..., min_length=1)

    def content(self) -> list[dict[str, Any]]:
        return [c.model_dump(exclude_none=True, mode="json") for c in self.contacts]


def build_contact(
    formatted_name: str,
    *,
    phones: list[str | Mapping[str, Any]] | None = None,
    emails: list[str | Mapping[str, Any]] | None = None,
    urls: list[str | Mapping[str, Any]] | None = None,
    addresses: list[Mapping[str, Any]] | None = None,
    org: Mapping[str, Any] | None = None,
    birthday: str | None = None,
    **name_parts: str,
) -> Contact:
    """Atalho para montar um Contact a partir de valores simples.

    Strings em phones/emails/urls viram {"phone": ...}, {"email": ...} e
    {"url": ...}; mappings são repassados como estão.
    """
    return build_model(
        Contact,
        name={"formatted_name": formatted_name, **name_parts},
        phones=_expand(phones, "phone"),
        emails=_expand(emails, "email"),
        urls=_expand(urls, "url"),
        addresses=addresses,
        org=org,
        birthday=birthday,
    )


def _expand(
    values: list[str | Mapping[str, Any]] | None,
    key: str,
) -> list[Mapping[str, Any]] | None:
    if values is None:
        return None
    return [{key: v} if isinstance(v, str) else v for v in values]


def build_contacts(*contacts: Contact | Mapping[str, Any]) -> Contacts:
    """Constrói payload de contatos.

    Args:
        *contacts: Contact já construídos ou mappings com os mesmos campos

    Raises:
        ValidationError: Se lista vazia ou algum contato inválido
    """
    return build_model(Contacts, contacts=list(contacts))
