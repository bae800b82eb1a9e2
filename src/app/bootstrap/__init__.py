"""Bootstrap da aplicação — carga de settings e logging.

Composition root: lê o ambiente (com .env opcional), configura logging e
aborta o processo se alguma configuração obrigatória faltar, antes de
qualquer socket ser aberto.

Uso:
    from app.bootstrap import initialize_app

    settings = initialize_app()
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.logging.config import VALID_LOG_LEVELS
from config.settings import load_webhook_settings
from config.settings.webhook import DEFAULT_LOG_LEVEL, DEFAULT_SERVICE_NAME
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from config.settings import WebhookSettings

# Código de saída para configuração inválida
CONFIG_ERROR_EXIT_CODE = 1

logger = logging.getLogger(__name__)


def load_settings_or_exit(environ: Mapping[str, str] | None = None) -> WebhookSettings:
    """Carrega settings; em falha registra o motivo e encerra o processo.

    Raises:
        SystemExit: Com CONFIG_ERROR_EXIT_CODE se faltar configuração.
    """
    try:
        settings = load_webhook_settings(environ)
    except ConfigurationError as exc:
        logger.error(
            "Missing or invalid required environment variables.",
            extra={
                "component": "bootstrap",
                "result": "failed",
                "errors": exc.errors,
            },
        )
        raise SystemExit(CONFIG_ERROR_EXIT_CODE) from exc

    logger.info(
        "settings_validated",
        extra={"component": "bootstrap", "result": "ok", "port": settings.port},
    )
    return settings


def initialize_app(environ: Mapping[str, str] | None = None) -> WebhookSettings:
    """Inicializa logging e settings. Chamar uma vez no startup.

    Com environ=None, carrega `.env` do diretório atual antes de ler
    os.environ (variáveis já definidas têm precedência).
    """
    if environ is None:
        load_dotenv()
        env: Mapping[str, str] = os.environ
    else:
        env = environ

    # Logging antes das settings para que o erro de startup saia em JSON.
    # LOG_LEVEL inválido cai no padrão aqui e é reportado pelas settings.
    log_level = (env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    if log_level not in VALID_LOG_LEVELS:
        log_level = DEFAULT_LOG_LEVEL

    configure_logging(
        level=log_level,
        service_name=env.get("SERVICE_NAME") or DEFAULT_SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )

    return load_settings_or_exit(env)
