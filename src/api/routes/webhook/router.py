"""Endpoints do webhook (path configurado em WEBHOOK_ENDPOINT).

Endpoints:
- GET <endpoint>: handshake de assinatura (hub.challenge)
- POST <endpoint>: recebimento de entregas

Fluxo do POST:
1. Corpo lido em stream; HMAC-SHA1 calculado sobre os mesmos bytes
2. JSON decodificado (400 se inválido)
3. X-Hub-Signature comparado em tempo constante (401 se não conferir)
4. Payload gravado como arquivo (500 se a escrita falhar)

Settings e store vêm de request.app.state, preenchidos por create_app().
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status

from api.connectors.hub.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    PayloadTooLargeError,
    parse_webhook_request,
    read_signed_body,
)
from api.connectors.hub.webhook.verify import (
    WebhookChallengeError,
    verify_webhook_challenge,
)
from app.observability import correlation_scope
from utils.errors import PersistenceError

if TYPE_CHECKING:
    from starlette.datastructures import QueryParams

    from app.protocols.delivery_store import AsyncDeliveryStoreProtocol
    from config.settings.webhook import WebhookSettings

logger = logging.getLogger(__name__)


def _get_settings(request: Request) -> WebhookSettings:
    return request.app.state.settings


def _get_delivery_store(request: Request) -> AsyncDeliveryStoreProtocol:
    return request.app.state.delivery_store


def _single_param(params: QueryParams, name: str) -> str | None:
    """Valor único do parâmetro; repetido conta como ausente."""
    values = params.getlist(name)
    if len(values) != 1:
        return None
    return values[0]


async def verify_webhook(request: Request) -> Response:
    """Verificação de webhook — responde ao challenge da plataforma.

    Query params esperados:
    - hub.mode: deve ser "subscribe"
    - hub.verify_token: deve corresponder ao TOKEN configurado
    - hub.challenge: valor a retornar

    Returns:
        Texto do challenge (200) ou 400 com corpo vazio.
    """
    with correlation_scope(request.headers.get("x-correlation-id")):
        settings = _get_settings(request)
        hub_mode = _single_param(request.query_params, "hub.mode")

        try:
            challenge = verify_webhook_challenge(
                hub_mode=hub_mode,
                hub_verify_token=_single_param(request.query_params, "hub.verify_token"),
                hub_challenge=_single_param(request.query_params, "hub.challenge"),
                expected_token=settings.verify_token,
            )
        except WebhookChallengeError as exc:
            logger.warning("webhook_verification_failed", extra={"error": str(exc)})
            return Response(status_code=status.HTTP_400_BAD_REQUEST)

        logger.info("webhook_verified", extra={"hub_mode": hub_mode})

        # A plataforma espera o challenge como texto puro
        return Response(
            content=challenge,
            media_type="text/plain",
            status_code=status.HTTP_200_OK,
        )


async def receive_webhook(request: Request) -> Response:
    """Recebimento de uma entrega.

    Returns:
        200 vazio se gravado; 400, 401, 413 ou 500 vazios em caso de erro.
    """
    with correlation_scope(request.headers.get("x-correlation-id")):
        settings = _get_settings(request)

        try:
            raw_body, computed_signature = await read_signed_body(
                request.stream(),
                settings.app_secret,
                settings.max_body_bytes,
            )
            payload, _signature_result = parse_webhook_request(
                raw_body=raw_body,
                headers=request.headers,
                computed_signature=computed_signature,
            )

        except PayloadTooLargeError as exc:
            logger.warning("webhook_payload_too_large", extra={"error": str(exc)})
            return Response(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE)

        except InvalidJsonError as exc:
            logger.warning(
                "webhook_json_invalid",
                extra={"error": str(exc), "payload_size": len(raw_body)},
            )
            return Response(status_code=status.HTTP_400_BAD_REQUEST)

        except InvalidSignatureError as exc:
            logger.warning("webhook_signature_invalid", extra={"error": str(exc)})
            return Response(status_code=status.HTTP_401_UNAUTHORIZED)

        try:
            filename = await _get_delivery_store(request).save(payload)
        except PersistenceError:
            logger.exception("delivery_persist_failed")
            return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info(
            "delivery_persisted",
            extra={"filename": filename, "payload_size": len(raw_body)},
        )
        return Response(status_code=status.HTTP_200_OK)


def create_webhook_router(endpoint: str) -> APIRouter:
    """Registra GET e POST no path configurado.

    Args:
        endpoint: Valor de WEBHOOK_ENDPOINT (ex: /webhook)

    Returns:
        APIRouter com os dois endpoints.
    """
    router = APIRouter()
    router.add_api_route(endpoint, verify_webhook, methods=["GET"], response_model=None)
    router.add_api_route(endpoint, receive_webhook, methods=["POST"], response_model=None)
    return router
