"""Webhook hub: verificação, assinatura e parsing seguro."""

from ..signature import SignatureResult, verify_hub_signature
from .receive import (
    InvalidJsonError,
    InvalidSignatureError,
    PayloadTooLargeError,
    WebhookRequestError,
    decode_json_body,
    parse_webhook_request,
    read_signed_body,
)
from .verify import WebhookChallengeError, verify_webhook_challenge

__all__ = [
    "InvalidJsonError",
    "InvalidSignatureError",
    "PayloadTooLargeError",
    "SignatureResult",
    "WebhookChallengeError",
    "WebhookRequestError",
    "decode_json_body",
    "parse_webhook_request",
    "read_signed_body",
    "verify_hub_signature",
    "verify_webhook_challenge",
]
