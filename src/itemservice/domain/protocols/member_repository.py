"""Protocolo de domínio para persistência de membros."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from itemservice.domain.models import Member


class MemberRepositoryProtocol(ABC):
    """Contrato mínimo para armazenamento de Member."""

    @abstractmethod
    def save(self, member: Member) -> Member: ...

    @abstractmethod
    def save_if_absent(self, member: Member) -> Member | None:
        """Salva só se o login_id estiver livre (checagem e escrita atômicas).

        Retorna None quando o login_id já existe.
        """
        ...

    @abstractmethod
    def find_by_id(self, member_id: int) -> Member | None: ...

    @abstractmethod
    def find_by_login_id(self, login_id: str) -> Member | None: ...

    @abstractmethod
    def find_all(self) -> list[Member]: ...

    @abstractmethod
    def clear_store(self) -> None: ...
