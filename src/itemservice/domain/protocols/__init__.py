"""Re-exports dos Protocolos de domínio para uso por Application."""

from __future__ import annotations

from itemservice.domain.protocols.item_repository import ItemRepositoryProtocol
from itemservice.domain.protocols.member_repository import MemberRepositoryProtocol
from itemservice.domain.protocols.session_store import SessionStoreProtocol

__all__ = [
    "ItemRepositoryProtocol",
    "MemberRepositoryProtocol",
    "SessionStoreProtocol",
]
