"""Testes dos handlers de webhook (verificação e notificações)."""

from __future__ import annotations

from typing import Any

import pytest

from whatsapp_cloud_api.errors import WebhookError
from whatsapp_cloud_api.webhooks import (
    InboundMessage,
    StatusUpdate,
    extract_events,
    handle_notification,
    verify_subscription,
)


def _notification(**value: Any) -> dict[str, Any]:
    return {
        "object": "whatsapp_business_account",
        "entry": [
            {
                "id": "WABA_ID",
                "changes": [
                    {
                        "field": "messages",
                        "value": {
                            "messaging_product": "whatsapp",
                            "metadata": {"phone_number_id": "111"},
                            **value,
                        },
                    }
                ],
            }
        ],
    }


MESSAGE_NOTIFICATION = _notification(
    contacts=[{"wa_id": "5511999999999", "profile": {"name": "Maria"}}],
    messages=[
        {
            "from": "5511999999999",
            "id": "wamid.IN1",
            "timestamp": "1700000000",
            "type": "text",
            "text": {"body": "Oi"},
        }
    ],
)

STATUS_NOTIFICATION = _notification(
    statuses=[
        {
            "id": "wamid.OUT1",
            "status": "delivered",
            "timestamp": "1700000001",
            "recipient_id": "5511999999999",
            "conversation": {"id": "conv-1"},
            "pricing": {"billable": True, "category": "service"},
        }
    ],
)


class TestVerifySubscription:
    PARAMS = {"hub.mode": "subscribe", "hub.verify_token": "secret", "hub.challenge": "12345"}

    def test_returns_challenge(self) -> None:
        assert verify_subscription(self.PARAMS, "secret") == "12345"

    def test_missing_configured_token(self) -> None:
        with pytest.raises(WebhookError) as exc_info:
            verify_subscription(self.PARAMS, None)

        assert exc_info.value.status_code == 500

    def test_wrong_token_forbidden(self) -> None:
        with pytest.raises(WebhookError) as exc_info:
            verify_subscription(self.PARAMS, "other")

        assert exc_info.value.status_code == 403

    def test_wrong_mode_forbidden(self) -> None:
        params = {**self.PARAMS, "hub.mode": "unsubscribe"}

        with pytest.raises(WebhookError) as exc_info:
            verify_subscription(params, "secret")

        assert exc_info.value.status_code == 403

    def test_missing_parameters_bad_request(self) -> None:
        with pytest.raises(WebhookError) as exc_info:
            verify_subscription({"hub.mode": "subscribe"}, "secret")

        assert exc_info.value.status_code == 400


class TestExtractEvents:
    def test_message_event(self) -> None:
        [event] = extract_events(MESSAGE_NOTIFICATION)

        assert isinstance(event, InboundMessage)
        assert event.phone_number_id == "111"
        assert event.from_number == "5511999999999"
        assert event.contact_name == "Maria"
        assert event.message_id == "wamid.IN1"
        assert event.text == "Oi"

    def test_status_event(self) -> None:
        [event] = extract_events(STATUS_NOTIFICATION)

        assert isinstance(event, StatusUpdate)
        assert event.status == "delivered"
        assert event.recipient_id == "5511999999999"
        assert event.pricing == {"billable": True, "category": "service"}

    def test_items_without_id_are_ignored(self) -> None:
        data = _notification(messages=[{"from": "5511", "type": "text"}])

        assert extract_events(data) == []

    @pytest.mark.parametrize(
        "value",
        [
            {"messages": ["junk", 42, None]},
            {"statuses": ["junk"]},
            {"contacts": ["junk"], "messages": "not-a-list"},
            {"metadata": "junk", "statuses": [["nested"]]},
        ],
    )
    def test_non_dict_items_are_ignored(self, value: dict[str, Any]) -> None:
        """Itens que não são objetos não interrompem a extração."""
        assert extract_events(_notification(**value)) == []

    def test_malformed_item_skipped_and_valid_items_kept(self) -> None:
        data = _notification(
            messages=[
                {"id": "wamid.BAD", "from": 5511999, "type": "text"},
                {"id": "wamid.OK", "from": "5511999", "type": "text"},
            ],
            statuses=[{"id": "wamid.OUT", "status": "read", "pricing": "junk"}],
        )

        events = extract_events(data)

        assert [e.message_id for e in events] == ["wamid.OK"]

    def test_empty_entry(self) -> None:
        assert extract_events({"object": "whatsapp_business_account"}) == []


class TestHandleNotification:
    @pytest.mark.asyncio
    async def test_sync_callback(self) -> None:
        received: list[InboundMessage] = []

        count = await handle_notification(MESSAGE_NOTIFICATION, on_message=received.append)

        assert count == 1
        assert received[0].message_id == "wamid.IN1"

    @pytest.mark.asyncio
    async def test_async_callback(self) -> None:
        received: list[StatusUpdate] = []

        async def on_status(update: StatusUpdate) -> None:
            received.append(update)

        count = await handle_notification(STATUS_NOTIFICATION, on_status=on_status)

        assert count == 1
        assert received[0].message_id == "wamid.OUT1"

    @pytest.mark.asyncio
    async def test_events_without_callback_are_not_counted(self) -> None:
        count = await handle_notification(STATUS_NOTIFICATION, on_message=lambda m: None)

        assert count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("data", [{}, {"entry": []}, []])
    async def test_missing_object_rejected(self, data) -> None:
        with pytest.raises(WebhookError) as exc_info:
            await handle_notification(data)

        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_malformed_items_are_not_dispatched(self) -> None:
        received: list[InboundMessage] = []
        data = _notification(messages=["junk", {"id": "wamid.1", "from": 5511, "type": "text"}])

        count = await handle_notification(data, on_message=received.append)

        assert count == 0
        assert received == []

    @pytest.mark.asyncio
    async def test_callback_errors_propagate(self) -> None:
        def on_message(message: InboundMessage) -> None:
            raise RuntimeError("falha no callback")

        with pytest.raises(RuntimeError, match="falha no callback"):
            await handle_notification(MESSAGE_NOTIFICATION, on_message=on_message)
