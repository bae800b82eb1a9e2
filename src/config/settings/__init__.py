"""Agregador de settings do receptor de webhook.

Re-exporta as settings e funções de carregamento.
"""

from __future__ import annotations

from config.settings.webhook import (
    DEFAULT_MAX_BODY_BYTES,
    REQUIRED_ENV_VARS,
    WebhookSettings,
    load_webhook_settings,
)

__all__ = [
    "DEFAULT_MAX_BODY_BYTES",
    "REQUIRED_ENV_VARS",
    "WebhookSettings",
    "load_webhook_settings",
]
