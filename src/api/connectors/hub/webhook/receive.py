"""Leitura, parse e validação de assinatura das entregas (sem PII)."""

from __future__ import annotations

import json
import math
from typing import TYPE_CHECKING, Any

from ..signature import (
    SIGNATURE_HEADER,
    HubSignatureBuilder,
    SignatureResult,
    verify_hub_signature,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterable, Mapping


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura inválida do webhook."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""


class PayloadTooLargeError(WebhookRequestError):
    """Corpo maior que o limite configurado."""


async def read_signed_body(
    chunks: AsyncIterable[bytes],
    secret: str,
    max_bytes: int,
) -> tuple[bytes, str]:
    """Lê o corpo bruto calculando a assinatura sobre os mesmos bytes.

    Args:
        chunks: Stream do corpo (ex: request.stream())
        secret: Secret do app
        max_bytes: Tamanho máximo aceito

    Raises:
        PayloadTooLargeError: Se o corpo exceder max_bytes

    Returns:
        (corpo bruto, assinatura `sha1=<hex>`)
    """
    builder = HubSignatureBuilder(secret)
    body = bytearray()
    async for chunk in chunks:
        if len(body) + len(chunk) > max_bytes:
            raise PayloadTooLargeError("payload_too_large")
        builder.update(chunk)
        body.extend(chunk)
    return bytes(body), builder.signature


def _reject_constant(token: str) -> Any:
    # NaN, Infinity e -Infinity não são JSON
    raise InvalidJsonError("invalid_json")


def _parse_finite_float(token: str) -> float:
    value = float(token)
    if math.isinf(value):
        raise InvalidJsonError("number_out_of_range")
    return value


def decode_json_body(raw_body: bytes) -> Any:
    """Decodifica o corpo; aceita apenas objeto ou array no topo.

    Só o corpo vazio (zero bytes) vira {}. NaN, Infinity e números que
    estouram float (ex: 1e400) são rejeitados.

    Raises:
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto/array
    """
    if not raw_body:
        return {}

    try:
        payload = json.loads(
            raw_body,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, (dict, list)):
        raise InvalidJsonError("payload_not_object")

    return payload


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    computed_signature: str,
) -> tuple[Any, SignatureResult]:
    """Parseia o JSON e então compara a assinatura do header.

    O JSON é validado primeiro: corpo malformado é rejeitado antes de
    qualquer checagem de assinatura.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (chaves em minúsculas)
        computed_signature: Assinatura calculada sobre raw_body

    Raises:
        InvalidJsonError: Se o JSON estiver inválido
        InvalidSignatureError: Se a assinatura não conferir

    Returns:
        (payload, SignatureResult)
    """
    payload = decode_json_body(raw_body)

    signature_result = verify_hub_signature(
        computed_signature,
        headers.get(SIGNATURE_HEADER),
    )
    if not signature_result.valid:
        raise InvalidSignatureError(signature_result.error or "invalid_signature")

    return payload, signature_result
