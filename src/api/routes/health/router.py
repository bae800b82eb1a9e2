"""Endpoints de liveness."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from config.settings.webhook import DEFAULT_SERVICE_NAME

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/", response_class=PlainTextResponse)
async def root_check() -> PlainTextResponse:
    """Liveness mínimo: sempre 200 "OK", sem consultar nada."""
    return PlainTextResponse("OK")


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe com identificação do serviço."""
    settings = getattr(request.app.state, "settings", None)
    return HealthResponse(
        status="healthy",
        service=getattr(settings, "service_name", DEFAULT_SERVICE_NAME),
        timestamp=datetime.now(UTC).isoformat(),
    )
