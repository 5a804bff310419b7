"""Handlers de webhook independentes de framework HTTP.

- verify_subscription: handshake GET exigido pela Meta
- handle_notification: extrai mensagens e status do POST e despacha callbacks

Erros de requisição viram WebhookError com o status HTTP a devolver; o
router FastAPI apenas converte para HTTPException.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable, Iterator, Mapping
from typing import Any, TypeVar

from pydantic import ValidationError as PydanticValidationError

from whatsapp_cloud_api.errors import WebhookError
from whatsapp_cloud_api.observability.logging import get_logger
from whatsapp_cloud_api.webhooks.models import InboundMessage, StatusUpdate

logger: logging.Logger = get_logger(__name__)

E = TypeVar("E", InboundMessage, StatusUpdate)

MessageCallback = Callable[[InboundMessage], Awaitable[None] | None]
StatusCallback = Callable[[StatusUpdate], Awaitable[None] | None]


def verify_subscription(params: Mapping[str, str | None], verify_token: str | None) -> str:
    """Valida o handshake de assinatura e retorna o challenge.

    Args:
        params: Query string da requisição (hub.mode, hub.verify_token, hub.challenge)
        verify_token: Token configurado no painel da Meta

    Raises:
        WebhookError: 500 sem token configurado, 400 parâmetros ausentes,
            403 token divergente
    """
    if not verify_token:
        raise WebhookError("missing_verify_token", 500)

    mode = params.get("hub.mode")
    token = params.get("hub.verify_token")
    challenge = params.get("hub.challenge")
    if not mode or not token or challenge is None:
        raise WebhookError("missing_parameters", 400)

    if mode != "subscribe" or token != verify_token:
        logger.warning("Verificação de webhook recusada", extra={"hub_mode": mode})
        raise WebhookError("verification_failed", 403)

    logger.info("Webhook verificado")
    return challenge


def _iter_change_values(data: Mapping[str, Any]) -> Iterator[dict[str, Any]]:
    for entry in _dict_items(data.get("entry")):
        for change in _dict_items(entry.get("changes")):
            if isinstance(change.get("value"), dict):
                yield change["value"]


def _contact_names(value: dict[str, Any]) -> dict[str, str]:
    """Mapeia wa_id -> nome de perfil a partir de value.contacts."""
    names: dict[str, str] = {}
    for contact in _dict_items(value.get("contacts")):
        profile = contact.get("profile")
        wa_id = contact.get("wa_id")
        name = profile.get("name") if isinstance(profile, dict) else None
        if isinstance(wa_id, str) and isinstance(name, str) and wa_id and name:
            names[wa_id] = name
    return names


def _dict_items(items: Any) -> Iterator[dict[str, Any]]:
    """Itera apenas os itens dict de uma lista do payload; o resto é ignorado."""
    if not isinstance(items, list):
        return
    for item in items:
        if isinstance(item, dict):
            yield item


def _build_event(model: type[E], **fields: Any) -> E | None:
    """Constrói o evento ou retorna None se o item da Meta estiver malformado."""
    try:
        return model(**fields)
    except PydanticValidationError as exc:
        logger.warning(
            "Item de webhook malformado ignorado",
            extra={"event_model": model.__name__, "error_count": exc.error_count()},
        )
        return None


def extract_events(data: Mapping[str, Any]) -> list[InboundMessage | StatusUpdate]:
    """Extrai eventos normalizados de uma notificação, na ordem recebida.

    Itens que não são objetos, sem id/remetente ou com campos de tipo
    inválido são ignorados.
    """
    events: list[InboundMessage | StatusUpdate] = []
    for value in _iter_change_values(data):
        metadata = value.get("metadata")
        phone_number_id = metadata.get("phone_number_id") if isinstance(metadata, dict) else None
        names = _contact_names(value)

        for msg in _dict_items(value.get("messages")):
            if not msg.get("id") or not msg.get("from"):
                continue
            message = _build_event(
                InboundMessage,
                phone_number_id=phone_number_id,
                from_number=msg["from"],
                contact_name=names.get(msg["from"]) if isinstance(msg["from"], str) else None,
                message_id=msg["id"],
                message_type=msg.get("type", "unknown"),
                timestamp=msg.get("timestamp"),
                raw=msg,
            )
            if message is not None:
                events.append(message)

        for st in _dict_items(value.get("statuses")):
            if not st.get("id") or not st.get("status"):
                continue
            update = _build_event(
                StatusUpdate,
                phone_number_id=phone_number_id,
                recipient_id=st.get("recipient_id"),
                status=st["status"],
                message_id=st["id"],
                timestamp=st.get("timestamp"),
                conversation=st.get("conversation"),
                pricing=st.get("pricing"),
                raw=st,
            )
            if update is not None:
                events.append(update)
    return events


async def _dispatch(callback: Callable[[Any], Any], event: Any) -> None:
    result = callback(event)
    if inspect.isawaitable(result):
        await result


async def handle_notification(
    data: Mapping[str, Any],
    on_message: MessageCallback | None = None,
    on_status: StatusCallback | None = None,
) -> int:
    """Processa uma notificação POST e despacha os callbacks.

    Callbacks podem ser síncronos ou assíncronos. Exceções levantadas por
    eles são propagadas ao chamador.

    Returns:
        Quantidade de eventos despachados

    Raises:
        WebhookError: 400 se o corpo não tiver `object`
    """
    if not isinstance(data, Mapping) or not data.get("object"):
        raise WebhookError("invalid_notification", 400)

    dispatched = 0
    for event in extract_events(data):
        callback = on_message if isinstance(event, InboundMessage) else on_status
        if callback is None:
            continue
        await _dispatch(callback, event)
        dispatched += 1

    logger.info("Notificação de webhook processada", extra={"dispatched": dispatched})
    return dispatched
