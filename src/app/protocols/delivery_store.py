"""Protocolo de persistência das entregas recebidas."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class AsyncDeliveryStoreProtocol(ABC):
    """Contrato assíncrono para gravar uma entrega verificada.

    Método canônico:
    - save(payload) -> str
      Grava o payload e retorna o nome do artefato criado.
    """

    @abstractmethod
    async def save(self, payload: Any) -> str:
        """Persiste o payload JSON decodificado.

        Args:
            payload: Objeto ou array JSON já validado

        Raises:
            PersistenceError: Se a gravação falhar

        Returns:
            Nome do artefato (ex.: 20240305070809004.json)
        """
