"""Protocolo de domínio para persistência de sessão."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class SessionStoreProtocol(ABC):
    """Contrato mínimo para mapear token de sessão -> valor arbitrário."""

    @abstractmethod
    def save(self, token: str, value: Any, ttl_seconds: int | None = None) -> None: ...

    @abstractmethod
    def load(self, token: str) -> Any | None: ...

    @abstractmethod
    def delete(self, token: str) -> bool: ...

    @abstractmethod
    def exists(self, token: str) -> bool: ...
