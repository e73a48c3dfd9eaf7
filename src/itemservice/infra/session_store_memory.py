"""Implementação de SessionStore em memória."""

from __future__ import annotations

import logging
import threading
from datetime import UTC, datetime
from typing import Any

from itemservice.infra.session_contract import SessionStore
from itemservice.observability.logging import get_logger, mask_token

logger: logging.Logger = get_logger(__name__)


class InMemorySessionStore(SessionStore):
    """Mapa token -> (valor, expire_at) protegido por lock.

    `expire_at` None significa que a sessão só termina via `delete`.
    Entradas vencidas são removidas em cada `save`, então tokens que nunca
    voltam não ficam no mapa indefinidamente.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, tuple[Any, float | None]] = {}
        self._lock = threading.Lock()

    def save(self, token: str, value: Any, ttl_seconds: int | None = None) -> None:
        expire_at = None
        if ttl_seconds is not None:
            expire_at = datetime.now(tz=UTC).timestamp() + ttl_seconds
        with self._lock:
            self._cleanup_expired()
            self._sessions[token] = (value, expire_at)
        logger.debug(
            "Session saved (in-memory)",
            extra={"session_token": mask_token(token), "ttl_seconds": ttl_seconds},
        )

    def load(self, token: str) -> Any | None:
        with self._lock:
            entry = self._sessions.get(token)
            if entry is None:
                logger.debug(
                    "Session not found (in-memory)",
                    extra={"session_token": mask_token(token)},
                )
                return None

            value, expire_at = entry
            if expire_at is not None and datetime.now(tz=UTC).timestamp() > expire_at:
                del self._sessions[token]
                logger.debug(
                    "Session expired (in-memory)",
                    extra={"session_token": mask_token(token)},
                )
                return None

        return value

    def delete(self, token: str) -> bool:
        with self._lock:
            removed = self._sessions.pop(token, None) is not None
        if removed:
            logger.debug(
                "Session deleted (in-memory)",
                extra={"session_token": mask_token(token)},
            )
        return removed

    def exists(self, token: str) -> bool:
        return self.load(token) is not None

    def _cleanup_expired(self) -> None:
        """Remove entradas vencidas (chamar com o lock adquirido)."""
        now = datetime.now(tz=UTC).timestamp()
        expired = [t for t, (_, exp) in self._sessions.items() if exp is not None and exp < now]
        for t in expired:
            del self._sessions[t]
        if expired:
            logger.debug("Expired sessions purged (in-memory)", extra={"removed": len(expired)})

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
