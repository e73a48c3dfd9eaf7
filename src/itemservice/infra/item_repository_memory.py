"""Repositório de itens em memória, seguro para acesso concorrente."""

from __future__ import annotations

import itertools
import logging
import threading
from typing import TYPE_CHECKING

from itemservice.domain.protocols.item_repository import ItemRepositoryProtocol
from itemservice.observability.logging import get_logger

if TYPE_CHECKING:
    from itemservice.domain.models import Item

logger: logging.Logger = get_logger(__name__)


class InMemoryItemRepository(ItemRepositoryProtocol):
    """Armazena itens por id durante a vida do processo.

    Um único lock protege o mapa e a sequência, então cada `save` recebe
    um id distinto mesmo sob rajada de chamadas simultâneas. Os ids nunca
    são reutilizados, nem depois de `clear_store`.

    O repositório guarda a cópia canônica; leituras devolvem cópias e
    mutações passam por `update`.
    """

    def __init__(self) -> None:
        self._store: dict[int, Item] = {}
        self._sequence = itertools.count(1)
        self._lock = threading.Lock()

    def save(self, item: Item) -> Item:
        with self._lock:
            item.id = next(self._sequence)
            self._store[item.id] = item.model_copy()
        logger.debug("Item saved (in-memory)", extra={"item_id": item.id})
        return item

    def find_by_id(self, item_id: int) -> Item | None:
        with self._lock:
            stored = self._store.get(item_id)
            return stored.model_copy() if stored is not None else None

    def find_all(self) -> list[Item]:
        with self._lock:
            return [item.model_copy() for item in self._store.values()]

    def update(self, item_id: int, patch: Item) -> None:
        with self._lock:
            stored = self._store.get(item_id)
            if stored is None:
                logger.debug("Item update skipped, not found", extra={"item_id": item_id})
                return
            stored.item_name = patch.item_name
            stored.price = patch.price
            stored.quantity = patch.quantity
        logger.debug("Item updated (in-memory)", extra={"item_id": item_id})

    def clear_store(self) -> None:
        with self._lock:
            removed = len(self._store)
            self._store.clear()
        logger.debug("Item store cleared", extra={"removed": removed})
