"""Contrato de persistência de sessão (SessionStore).

Separado para manter SRP e permitir reuso entre implementações.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from itemservice.domain.protocols.session_store import SessionStoreProtocol


class SessionStoreError(Exception):
    """Erro ao persistir ou recuperar sessão."""

    pass


class SessionStore(SessionStoreProtocol):
    """Contrato abstrato para armazenamento de valores de sessão."""

    @abstractmethod
    def save(self, token: str, value: Any, ttl_seconds: int | None = None) -> None:
        """Persiste o valor sob o token (TTL opcional)."""
        ...

    @abstractmethod
    def load(self, token: str) -> Any | None:
        """Carrega valor por token; None se ausente ou expirado."""
        ...

    @abstractmethod
    def delete(self, token: str) -> bool:
        """Remove token do armazenamento; False se não existia."""
        ...

    @abstractmethod
    def exists(self, token: str) -> bool:
        """Verifica se token existe e não expirou."""
        ...
