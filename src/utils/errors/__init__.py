"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    InfrastructureError,
    PersistenceError,
)

__all__ = [
    "ConfigurationError",
    "InfrastructureError",
    "PersistenceError",
]
