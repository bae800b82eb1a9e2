"""Exceções compartilhadas de configuração e infraestrutura."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Configuração obrigatória ausente ou inválida no startup.

    Args:
        errors: Lista de problemas encontrados (um por variável).
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        details = "\n".join(f"- {error}" for error in self.errors)
        super().__init__(f"Configuração inválida:\n{details}")


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura."""


class PersistenceError(InfrastructureError):
    """Falha ao gravar uma entrega no diretório de saída."""
