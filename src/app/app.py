"""Entrypoint do receptor de webhook.

Uso (produção):
    python -m app.app

Uso (desenvolvimento, settings lidas do ambiente/.env):
    uvicorn app.app:create_app --factory --reload --port 8080

O processo termina com código 1, sem abrir a porta, se alguma das
variáveis WEBHOOK_ENDPOINT, APP_SECRET, TOKEN, DATA_DIRECTORY ou PORT
estiver ausente.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app
from app.infra.stores import FileDeliveryStore
from config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.protocols.delivery_store import AsyncDeliveryStoreProtocol
    from config.settings import WebhookSettings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Loga início e fim do serviço."""
    settings: WebhookSettings = app.state.settings
    logger.info(
        "app_starting",
        extra={
            "service": settings.service_name,
            "webhook_endpoint": settings.webhook_endpoint,
            "data_directory": settings.data_directory,
        },
    )
    yield
    logger.info("app_shutting_down", extra={"service": settings.service_name})


def create_app(
    settings: WebhookSettings | None = None,
    delivery_store: AsyncDeliveryStoreProtocol | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        settings: Settings já carregadas. Se None, inicializa a partir do
            ambiente (encerra o processo se faltar configuração).
        delivery_store: Store de entregas. Padrão: FileDeliveryStore no
            DATA_DIRECTORY.

    Returns:
        Aplicação FastAPI configurada.
    """
    if settings is None:
        settings = initialize_app()

    fastapi_app = FastAPI(
        title="hub-webhook-receiver",
        description="Receptor de webhooks com verificação HMAC e gravação em arquivos",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    fastapi_app.state.settings = settings
    if delivery_store is None:
        delivery_store = FileDeliveryStore(settings.data_directory)
    fastapi_app.state.delivery_store = delivery_store

    fastapi_app.include_router(create_api_router(settings.webhook_endpoint))

    return fastapi_app


def main() -> None:
    """Carrega settings, configura logging e sobe o uvicorn."""
    import uvicorn

    settings = initialize_app()
    app = create_app(settings)

    logger.info("Server running on port %s", settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
