from __future__ import annotations

from typing import Any

import pytest

from whatsapp_cloud_api.config.settings import get_settings


class RecordingTransport:
    """Transporte fake que registra chamadas sem acessar a rede."""

    def __init__(self, response: dict[str, Any] | None = None) -> None:
        self.response = response or {"messages": [{"id": "wamid.TEST"}]}
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.closed = False

    async def send_message(self, config, phone_number_id, to, message) -> dict[str, Any]:
        self.calls.append(("send_message", (config, phone_number_id, to, message)))
        return self.response

    async def mark_as_read(self, config, phone_number_id, message_id) -> dict[str, Any]:
        self.calls.append(("mark_as_read", (config, phone_number_id, message_id)))
        return {"success": True}

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def transport() -> RecordingTransport:
    return RecordingTransport()
