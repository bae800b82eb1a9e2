"""Assinatura HMAC-SHA1 do header X-Hub-Signature.

A plataforma assina o corpo bruto da requisição com o secret do app e envia
`sha1=<hex>`. O digest é sempre calculado sobre os bytes recebidos, nunca
sobre o JSON re-serializado.
"""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass

SIGNATURE_HEADER = "x-hub-signature"
SIGNATURE_PREFIX = "sha1="


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da comparação de assinatura."""

    valid: bool
    error: str | None = None


class HubSignatureBuilder:
    """Calcula a assinatura incrementalmente enquanto o corpo é lido.

    Uso:
        builder = HubSignatureBuilder(secret)
        async for chunk in request.stream():
            builder.update(chunk)
        builder.signature  # "sha1=..."
    """

    def __init__(self, secret: str) -> None:
        self._mac = hmac.new(secret.encode("utf-8"), digestmod=hashlib.sha1)

    def update(self, chunk: bytes) -> None:
        self._mac.update(chunk)

    @property
    def signature(self) -> str:
        return f"{SIGNATURE_PREFIX}{self._mac.hexdigest()}"


def compute_hub_signature(secret: str, raw_body: bytes) -> str:
    """Retorna `sha1=<hex>` de HMAC-SHA1(secret, raw_body)."""
    builder = HubSignatureBuilder(secret)
    builder.update(raw_body)
    return builder.signature


def verify_hub_signature(expected: str, received: str | None) -> SignatureResult:
    """Compara a assinatura recebida com a calculada em tempo constante.

    Args:
        expected: Assinatura calculada localmente (`sha1=<hex>`)
        received: Valor do header X-Hub-Signature (ou None)

    Returns:
        SignatureResult com valid=True apenas se as strings forem idênticas.
    """
    if not received:
        return SignatureResult(valid=False, error="missing_signature")

    if not hmac.compare_digest(expected.encode("utf-8"), received.encode("utf-8")):
        return SignatureResult(valid=False, error="invalid_signature")

    return SignatureResult(valid=True)
