"""Protocolo de domínio para persistência de itens."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from itemservice.domain.models import Item


class ItemRepositoryProtocol(ABC):
    """Contrato mínimo para armazenamento de Item.

    Ausência é dado, não falha: `find_by_id` retorna None e `update` de id
    inexistente não faz nada.
    """

    @abstractmethod
    def save(self, item: Item) -> Item:
        """Atribui novo id ao item, armazena e retorna o item salvo."""
        ...

    @abstractmethod
    def find_by_id(self, item_id: int) -> Item | None:
        """Retorna o item armazenado ou None."""
        ...

    @abstractmethod
    def find_all(self) -> list[Item]:
        """Retorna snapshot de todos os itens (ordem não garantida)."""
        ...

    @abstractmethod
    def update(self, item_id: int, patch: Item) -> None:
        """Sobrescreve nome/preço/quantidade; no-op se o id não existir."""
        ...

    @abstractmethod
    def clear_store(self) -> None:
        """Remove todos os itens sem reiniciar a sequência de ids."""
        ...
