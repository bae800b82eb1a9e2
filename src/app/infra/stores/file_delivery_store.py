"""Store de entregas em arquivos JSON, um arquivo por requisição.

Nome do arquivo: timestamp local de largura fixa `YYYYMMDDHHmmssSSS.json`.
Conteúdo: JSON indentado com 2 espaços. Arquivos nunca são lidos,
alterados ou removidos depois de criados.
"""

from __future__ import annotations

import asyncio
import contextlib
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from app.protocols.delivery_store import AsyncDeliveryStoreProtocol
from utils.errors import PersistenceError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

DELIVERY_SUFFIX = ".json"
JSON_INDENT = 2

# Tentativas de sufixo (-1, -2, ...) quando o timestamp já existe
MAX_COLLISION_ATTEMPTS = 1000


def format_delivery_timestamp(moment: datetime) -> str:
    """Formata `YYYYMMDDHHmmssSSS` com todos os campos zero-padded."""
    return (
        f"{moment.year:04d}{moment.month:02d}{moment.day:02d}"
        f"{moment.hour:02d}{moment.minute:02d}{moment.second:02d}"
        f"{moment.microsecond // 1000:03d}"
    )


def format_delivery_filename(moment: datetime) -> str:
    """Retorna o nome do arquivo da entrega para o instante dado.

    Exemplo:
        >>> format_delivery_filename(datetime(2024, 3, 5, 7, 8, 9, 4000))
        '20240305070809004.json'
    """
    return f"{format_delivery_timestamp(moment)}{DELIVERY_SUFFIX}"


def serialize_payload(payload: Any) -> str:
    """JSON indentado com 2 espaços, sem escapar não-ASCII.

    Raises:
        ValueError: Se o payload contiver NaN ou Infinity.
    """
    return json.dumps(payload, indent=JSON_INDENT, ensure_ascii=False, allow_nan=False)


class FileDeliveryStore(AsyncDeliveryStoreProtocol):
    """Grava entregas em `<directory>/<timestamp>.json`.

    O diretório precisa existir; não é criado pelo store. A escrita roda em
    thread (asyncio.to_thread) para não bloquear o event loop.

    Dois POSTs no mesmo milissegundo não se sobrescrevem: o arquivo é criado
    em modo exclusivo e, se o nome já existir, recebe sufixo `-1`, `-2`, ...

    Args:
        directory: Diretório de saída
        clock: Fonte do instante atual (hora local). Injetável para testes.
    """

    def __init__(
        self,
        directory: str | Path,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._directory = Path(directory)
        self._clock = clock

    @property
    def directory(self) -> Path:
        return self._directory

    async def save(self, payload: Any) -> str:
        try:
            content = serialize_payload(payload)
        except ValueError as exc:
            raise PersistenceError(f"payload is not serializable: {exc}") from exc
        moment = self._clock()
        try:
            path = await asyncio.to_thread(self._write_exclusive, moment, content)
        except OSError as exc:
            raise PersistenceError(f"failed to write delivery: {exc}") from exc
        return path.name

    def _write_exclusive(self, moment: datetime, content: str) -> Path:
        stem = format_delivery_timestamp(moment)
        data = content.encode("utf-8")

        for attempt in range(MAX_COLLISION_ATTEMPTS):
            suffix = f"-{attempt}" if attempt else ""
            path = self._directory / f"{stem}{suffix}{DELIVERY_SUFFIX}"
            try:
                with path.open("xb") as fh:
                    fh.write(data)
            except FileExistsError:
                continue
            except OSError:
                # Não deixar arquivo parcial para trás
                with contextlib.suppress(OSError):
                    path.unlink()
                raise
            if attempt:
                logger.info(
                    "delivery_filename_collision",
                    extra={"component": "file_delivery_store", "attempts": attempt + 1},
                )
            return path

        raise FileExistsError(f"no free filename for timestamp {stem}")
