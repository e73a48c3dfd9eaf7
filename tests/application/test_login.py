"""Testes de cadastro de membro e login."""

from __future__ import annotations

import threading

import pytest

from itemservice.application.login import LoginService, MemberForm
from itemservice.infra.member_repository_memory import InMemoryMemberRepository


@pytest.fixture()
def service() -> LoginService:
    return LoginService(InMemoryMemberRepository())


def _join(service: LoginService, login_id: str = "admin", password: str = "admin"):
    return service.join(MemberForm(login_id=login_id, password=password, name="Admin"))


def test_login_with_correct_credentials(service):
    member = _join(service)

    assert service.login("admin", "admin") == member


@pytest.mark.parametrize(
    ("login_id", "password"),
    [("admin", "wrong"), ("ghost", "admin"), ("", "admin"), ("admin", None)],
)
def test_login_failures_return_none(service, login_id, password):
    _join(service)

    assert service.login(login_id, password) is None


def test_member_form_requires_all_fields(service):
    errors = service.validate_member_form(MemberForm())

    assert set(errors) == {"loginId", "password", "name"}


def test_member_form_rejects_duplicate_login_id(service):
    _join(service)

    errors = service.validate_member_form(
        MemberForm(login_id="admin", password="x", name="Other")
    )

    assert set(errors) == {"loginId"}


class _LockstepMemberRepository(InMemoryMemberRepository):
    """Segura cada consulta por loginId até as duas threads validarem."""

    def __init__(self) -> None:
        super().__init__()
        self._barrier = threading.Barrier(2)

    def find_by_login_id(self, login_id: str):
        found = super().find_by_login_id(login_id)
        self._barrier.wait(timeout=5)
        return found


def test_concurrent_join_same_login_id_keeps_one_member():
    """Dois cadastros simultâneos do mesmo loginId: apenas um é salvo."""
    repository = _LockstepMemberRepository()
    service = LoginService(repository)
    results = []
    results_lock = threading.Lock()

    def register(name: str) -> None:
        form = MemberForm(login_id="admin", password="admin", name=name)
        assert service.validate_member_form(form) == {}
        member = service.join(form)
        with results_lock:
            results.append(member)

    threads = [threading.Thread(target=register, args=(n,)) for n in ("A", "B")]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    joined = [m for m in results if m is not None]
    assert len(results) == 2
    assert len(joined) == 1
    assert repository.find_all() == joined
