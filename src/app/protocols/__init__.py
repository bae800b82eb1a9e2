"""Protocolos e contratos do core da aplicação."""

from .delivery_store import AsyncDeliveryStoreProtocol

__all__ = [
    "AsyncDeliveryStoreProtocol",
]
