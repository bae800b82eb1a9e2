"""Formatter JSON dos logs do receptor.

Todo record sai com timestamp, nível, logger, mensagem, correlation_id e
service. Nunca registrar secret, token ou conteúdo do payload.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em todo log
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter JSON padrão.

    Exemplo de output:
        {"asctime": "2026-10-19 10:30:00,123", "level": "INFO",
         "logger": "api.routes.webhook.router", "message": "delivery_persisted",
         "correlation_id": "abc-123", "service": "hub-webhook-receiver",
         "filename": "20261019103000123.json"}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
