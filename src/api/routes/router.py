"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router(settings.webhook_endpoint))
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.webhook.router import create_webhook_router


def create_api_router(webhook_endpoint: str) -> APIRouter:
    """Cria router principal com health e webhook.

    Health é registrado primeiro: GET / responde "OK" mesmo que o
    endpoint do webhook também seja "/".

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(create_webhook_router(webhook_endpoint), tags=["webhook"])

    return api_router
