"""Mensagens de localização."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from whatsapp_cloud_api.messages.base import MessagePayload, build_model
from whatsapp_cloud_api.messages.limits import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)


class Location(MessagePayload):
    """Localização estática (coordenadas geográficas)."""

    type: Literal["location"] = "location"
    latitude: float = Field(
        ..., ge=MIN_LATITUDE, le=MAX_LATITUDE, allow_inf_nan=False, strict=True
    )
    longitude: float = Field(
        ..., ge=MIN_LONGITUDE, le=MAX_LONGITUDE, allow_inf_nan=False, strict=True
    )
    name: str | None = None  # Nome do local
    address: str | None = None  # Endereço exibido abaixo do nome


def build_location(
    latitude: float,
    longitude: float,
    name: str | None = None,
    address: str | None = None,
) -> Location:
    """Constrói payload de localização.

    Raises:
        ValidationError: Se coordenada ausente, não numérica ou fora do intervalo
    """
    return build_model(
        Location,
        latitude=latitude,
        longitude=longitude,
        name=name,
        address=address,
    )
