"""Testes para o repositório de membros em memória."""

from __future__ import annotations

from itemservice.domain.models import Member
from itemservice.infra.member_repository_memory import InMemoryMemberRepository


def test_save_and_find_by_login_id():
    repo = InMemoryMemberRepository()
    saved = repo.save(Member(login_id="admin", password="admin", name="admin"))

    found = repo.find_by_login_id("admin")

    assert found == saved
    assert repo.find_by_id(saved.id) == saved


def test_find_by_login_id_unknown_returns_none():
    repo = InMemoryMemberRepository()

    assert repo.find_by_login_id("ghost") is None
    assert repo.find_by_id(1) is None


def test_clear_store_keeps_sequence():
    repo = InMemoryMemberRepository()
    first = repo.save(Member(login_id="a", password="p", name="A"))
    repo.clear_store()

    second = repo.save(Member(login_id="b", password="p", name="B"))

    assert repo.find_all() == [second]
    assert second.id > first.id


def test_save_if_absent_rejects_taken_login_id():
    repo = InMemoryMemberRepository()
    first = repo.save_if_absent(Member(login_id="admin", password="a", name="A"))

    second = repo.save_if_absent(Member(login_id="admin", password="b", name="B"))

    assert first is not None and first.id == 1
    assert second is None
    assert repo.find_all() == [first]
