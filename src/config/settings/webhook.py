"""Settings do receptor de webhook.

Cinco valores obrigatórios (endpoint, secret, token, diretório, porta) e
alguns opcionais de runtime. Carregados uma vez no startup e passados
explicitamente para a aplicação; handlers nunca leem o ambiente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from config.logging.config import VALID_LOG_LEVELS
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

# Variáveis obrigatórias, na ordem em que são reportadas
REQUIRED_ENV_VARS: tuple[str, ...] = (
    "WEBHOOK_ENDPOINT",
    "APP_SECRET",
    "TOKEN",
    "DATA_DIRECTORY",
    "PORT",
)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_SERVICE_NAME = "hub-webhook-receiver"
DEFAULT_MAX_BODY_BYTES = 100 * 1024  # 100kb

# Paths ocupados pelo router de health, registrado antes do webhook
RESERVED_ENDPOINTS = frozenset({"/", "/health"})


@dataclass(frozen=True)
class WebhookSettings:
    """Configuração imutável do serviço.

    Attributes:
        webhook_endpoint: Path do endpoint de verificação/entrega (ex: /webhook)
        app_secret: Secret compartilhado para HMAC-SHA1
        verify_token: Valor esperado em hub.verify_token
        data_directory: Diretório onde as entregas são gravadas
        port: Porta TCP de escuta
        host: Endereço de bind
        log_level: Nível de log raiz
        service_name: Nome do serviço nos logs
        max_body_bytes: Tamanho máximo aceito para o corpo do POST
    """

    webhook_endpoint: str
    app_secret: str
    verify_token: str
    data_directory: str
    port: int
    host: str = DEFAULT_HOST
    log_level: str = DEFAULT_LOG_LEVEL
    service_name: str = DEFAULT_SERVICE_NAME
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES

    def validate(self) -> list[str]:
        """Valida os valores já convertidos.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.webhook_endpoint.startswith("/"):
            errors.append("WEBHOOK_ENDPOINT deve começar com '/'")
        elif self.webhook_endpoint in RESERVED_ENDPOINTS:
            errors.append(
                f"WEBHOOK_ENDPOINT não pode ser {self.webhook_endpoint!r} (reservado para health)"
            )

        if not 0 < self.port < 65536:
            errors.append(f"PORT fora do intervalo 1-65535: {self.port}")

        if self.max_body_bytes <= 0:
            errors.append("WEBHOOK_MAX_BODY_BYTES deve ser > 0")

        if self.log_level not in VALID_LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL inválido: {self.log_level}. "
                f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
            )

        return errors


def _parse_int(name: str, raw: str, errors: list[str]) -> int:
    try:
        return int(raw)
    except ValueError:
        errors.append(f"{name} não é um inteiro: {raw!r}")
        return 0


def load_webhook_settings(environ: Mapping[str, str] | None = None) -> WebhookSettings:
    """Carrega WebhookSettings das variáveis de ambiente.

    Args:
        environ: Mapping de origem. Usa os.environ se None.

    Raises:
        ConfigurationError: Se alguma variável obrigatória estiver ausente,
            vazia ou inválida. Todos os problemas são reportados juntos.

    Returns:
        Settings validadas.
    """
    env = os.environ if environ is None else environ

    missing = [name for name in REQUIRED_ENV_VARS if not env.get(name)]
    if missing:
        raise ConfigurationError(
            [f"{name} não configurado" for name in missing]
        )

    errors: list[str] = []
    port = _parse_int("PORT", env["PORT"], errors)
    max_body_bytes = _parse_int(
        "WEBHOOK_MAX_BODY_BYTES",
        env.get("WEBHOOK_MAX_BODY_BYTES") or str(DEFAULT_MAX_BODY_BYTES),
        errors,
    )
    if errors:
        raise ConfigurationError(errors)

    settings = WebhookSettings(
        webhook_endpoint=env["WEBHOOK_ENDPOINT"],
        app_secret=env["APP_SECRET"],
        verify_token=env["TOKEN"],
        data_directory=env["DATA_DIRECTORY"],
        port=port,
        host=env.get("HOST") or DEFAULT_HOST,
        log_level=(env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        service_name=env.get("SERVICE_NAME") or DEFAULT_SERVICE_NAME,
        max_body_bytes=max_body_bytes,
    )

    errors = settings.validate()
    if errors:
        raise ConfigurationError(errors)

    return settings
