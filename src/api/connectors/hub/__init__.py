"""Connector para webhooks no padrão hub (X-Hub-Signature, hub.challenge)."""

from .signature import (
    SIGNATURE_HEADER,
    HubSignatureBuilder,
    SignatureResult,
    compute_hub_signature,
    verify_hub_signature,
)

__all__ = [
    "SIGNATURE_HEADER",
    "HubSignatureBuilder",
    "SignatureResult",
    "compute_hub_signature",
    "verify_hub_signature",
]
