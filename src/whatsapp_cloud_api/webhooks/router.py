"""Rotas FastAPI para receber webhooks do WhatsApp."""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, FastAPI, HTTPException, Request, Response, status

from whatsapp_cloud_api.config.settings import Settings, get_settings
from whatsapp_cloud_api.errors import WebhookError
from whatsapp_cloud_api.observability.logging import configure_logging, get_logger
from whatsapp_cloud_api.observability.middleware import (
    CorrelationIdMiddleware,
    get_correlation_id,
)
from whatsapp_cloud_api.webhooks.handlers import (
    MessageCallback,
    StatusCallback,
    handle_notification,
    verify_subscription,
)
from whatsapp_cloud_api.webhooks.signature import verify_meta_signature

logger = get_logger(__name__)

DEFAULT_WEBHOOK_PATH = "/webhooks/whatsapp"


def create_webhook_router(
    verify_token: str | None,
    app_secret: str | None = None,
    on_message: MessageCallback | None = None,
    on_status: StatusCallback | None = None,
    path: str = DEFAULT_WEBHOOK_PATH,
) -> APIRouter:
    """Cria router com GET (verificação) e POST (notificações).

    Args:
        verify_token: Token do handshake de verificação
        app_secret: App secret para validar x-hub-signature-256; None ignora
        on_message: Callback para mensagens recebidas
        on_status: Callback para atualizações de status
        path: Caminho das duas rotas
    """
    router = APIRouter()

    @router.get(path)
    def whatsapp_verify(request: Request) -> Response:
        """Verificação de webhook exigida pela Meta."""
        try:
            challenge = verify_subscription(request.query_params, verify_token)
        except WebhookError as exc:
            raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
        return Response(content=challenge, media_type="text/plain")

    @router.post(path)
    async def whatsapp_webhook(request: Request) -> dict[str, Any]:
        """Recebe eventos do WhatsApp e despacha para os callbacks."""
        raw_body = await request.body()
        signature_result = verify_meta_signature(raw_body, request.headers, app_secret)
        if not signature_result.valid:
            logger.warning(
                "Assinatura de webhook inválida",
                extra={"error": signature_result.error},
            )
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="invalid_signature",
            )

        try:
            payload = json.loads(raw_body or b"{}")
        except json.JSONDecodeError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="invalid_json",
            ) from exc

        try:
            dispatched = await handle_notification(payload, on_message, on_status)
        except WebhookError as exc:
            raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc

        return {
            "ok": True,
            "dispatched": dispatched,
            "correlation_id": get_correlation_id(),
            "signature_validated": signature_result.validated,
            "signature_skipped": signature_result.skipped,
        }

    return router


def create_app(
    settings: Settings | None = None,
    on_message: MessageCallback | None = None,
    on_status: StatusCallback | None = None,
) -> FastAPI:
    """Cria aplicação FastAPI mínima com o router de webhook."""
    settings = settings or get_settings()
    configure_logging(
        settings.log_level,
        settings.service_name,
        settings.log_format,
        api_version=settings.whatsapp_api_version,
    )

    for error in settings.validate_webhook_config():
        logger.warning("Configuração de webhook incompleta", extra={"detail": error})

    app = FastAPI(title=settings.service_name, version=settings.version)
    app.add_middleware(CorrelationIdMiddleware)

    @app.get("/health")
    def health() -> dict[str, str]:
        """Healthcheck simples."""
        return {"status": "ok", "service": settings.service_name, "version": settings.version}

    app.include_router(
        create_webhook_router(
            verify_token=settings.whatsapp_verify_token,
            app_secret=settings.whatsapp_webhook_secret,
            on_message=on_message,
            on_status=on_status,
        )
    )
    return app
