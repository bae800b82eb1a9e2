"""Stores — implementações concretas de persistência.

Módulos disponíveis:
    - file_delivery_store: entregas gravadas como arquivos JSON
"""

from __future__ import annotations

from app.infra.stores.file_delivery_store import (
    FileDeliveryStore,
    format_delivery_filename,
)

__all__ = [
    "FileDeliveryStore",
    "format_delivery_filename",
]
