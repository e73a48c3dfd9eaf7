"""Repositório de membros em memória (apenas dev/testes)."""

from __future__ import annotations

import itertools
import logging
import threading
from typing import TYPE_CHECKING

from itemservice.domain.protocols.member_repository import MemberRepositoryProtocol
from itemservice.observability.logging import get_logger

if TYPE_CHECKING:
    from itemservice.domain.models import Member

logger: logging.Logger = get_logger(__name__)


class InMemoryMemberRepository(MemberRepositoryProtocol):
    """Armazenamento em memória (senhas em texto plano, não usar em produção)."""

    def __init__(self) -> None:
        self._store: dict[int, Member] = {}
        self._sequence = itertools.count(1)
        self._lock = threading.Lock()

    def save(self, member: Member) -> Member:
        with self._lock:
            member.id = next(self._sequence)
            self._store[member.id] = member.model_copy()
        logger.debug("Member saved (in-memory)", extra={"member_id": member.id})
        return member

    def save_if_absent(self, member: Member) -> Member | None:
        with self._lock:
            if any(m.login_id == member.login_id for m in self._store.values()):
                return None
            member.id = next(self._sequence)
            self._store[member.id] = member.model_copy()
        logger.debug("Member saved (in-memory)", extra={"member_id": member.id})
        return member

    def find_by_id(self, member_id: int) -> Member | None:
        with self._lock:
            stored = self._store.get(member_id)
            return stored.model_copy() if stored is not None else None

    def find_by_login_id(self, login_id: str) -> Member | None:
        with self._lock:
            for member in self._store.values():
                if member.login_id == login_id:
                    return member.model_copy()
        return None

    def find_all(self) -> list[Member]:
        with self._lock:
            return [member.model_copy() for member in self._store.values()]

    def clear_store(self) -> None:
        with self._lock:
            self._store.clear()
