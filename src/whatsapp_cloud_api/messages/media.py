"""Mensagens de mídia (áudio, documento, imagem, adesivo, vídeo).

Toda mídia é referenciada por ID previamente hospedado na Meta ou por
link público, nunca pelos dois.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator

from whatsapp_cloud_api.messages.base import MessagePayload, build_model
from whatsapp_cloud_api.messages.limits import MAX_CAPTION_LENGTH, MAX_FILENAME_LENGTH


class _Media(MessagePayload):
    """Campos comuns a toda mídia."""

    id: str | None = None
    link: str | None = None

    @model_validator(mode="after")
    def _require_id_or_link(self) -> _Media:
        if bool(self.id) == bool(self.link):
            raise ValueError(f"{self.type} requires exactly one of 'id' or 'link'")
        return self


class Audio(_Media):
    """Áudio ou nota de voz (AAC, MP4, AMR, OGG). Não aceita caption."""

    type: Literal["audio"] = "audio"


class Sticker(_Media):
    """Adesivo (WEBP)."""

    type: Literal["sticker"] = "sticker"


class Image(_Media):
    """Imagem (JPG, PNG)."""

    type: Literal["image"] = "image"
    caption: str | None = Field(None, max_length=MAX_CAPTION_LENGTH)


class Video(_Media):
    """Vídeo (MP4, 3GPP)."""

    type: Literal["video"] = "video"
    caption: str | None = Field(None, max_length=MAX_CAPTION_LENGTH)


class Document(_Media):
    """Documento (PDF, DOC, DOCX, XLS, XLSX, PPT, PPTX)."""

    type: Literal["document"] = "document"
    caption: str | None = Field(None, max_length=MAX_CAPTION_LENGTH)
    filename: str | None = Field(None, max_length=MAX_FILENAME_LENGTH)


def build_audio(*, id: str | None = None, link: str | None = None) -> Audio:  # noqa: A002
    """Constrói payload de áudio."""
    return build_model(Audio, id=id, link=link)


def build_sticker(*, id: str | None = None, link: str | None = None) -> Sticker:  # noqa: A002
    """Constrói payload de adesivo."""
    return build_model(Sticker, id=id, link=link)


def build_image(
    *,
    id: str | None = None,  # noqa: A002
    link: str | None = None,
    caption: str | None = None,
) -> Image:
    """Constrói payload de imagem.

    Raises:
        ValidationError: Se id/link ausentes (ou ambos) ou caption excede limite
    """
    return build_model(Image, id=id, link=link, caption=caption)


def build_video(
    *,
    id: str | None = None,  # noqa: A002
    link: str | None = None,
    caption: str | None = None,
) -> Video:
    """Constrói payload de vídeo."""
    return build_model(Video, id=id, link=link, caption=caption)


def build_document(
    *,
    id: str | None = None,  # noqa: A002
    link: str | None = None,
    caption: str | None = None,
    filename: str | None = None,
) -> Document:
    """Constrói payload de documento.

    Args:
        id: Media ID hospedado na Meta
        link: URL pública do arquivo
        caption: Legenda opcional
        filename: Nome exibido ao destinatário

    Raises:
        ValidationError: Se id/link inválidos ou campos excedem limites
    """
    return build_model(Document, id=id, link=link, caption=caption, filename=filename)
