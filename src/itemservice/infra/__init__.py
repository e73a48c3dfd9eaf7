"""Camada de infraestrutura: stores em memória.

Este módulo exporta:

- Itens: InMemoryItemRepository
- Membros: InMemoryMemberRepository
- Sessão: SessionStore, SessionStoreError, InMemorySessionStore

Uso típico:
    from itemservice.infra import InMemoryItemRepository, InMemorySessionStore

Infraestrutura não decide regra de negócio (validação fica na aplicação).
"""

from itemservice.infra.item_repository_memory import InMemoryItemRepository
from itemservice.infra.member_repository_memory import InMemoryMemberRepository
from itemservice.infra.session_contract import SessionStore, SessionStoreError
from itemservice.infra.session_store_memory import InMemorySessionStore

__all__ = [
    # Itens
    "InMemoryItemRepository",
    # Membros
    "InMemoryMemberRepository",
    # Sessão
    "SessionStore",
    "SessionStoreError",
    "InMemorySessionStore",
]
