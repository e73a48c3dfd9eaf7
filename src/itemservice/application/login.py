"""Cadastro de membros e login."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from itemservice.domain.models import Member
from itemservice.domain.protocols.member_repository import MemberRepositoryProtocol
from itemservice.observability.logging import get_logger


class MemberForm(BaseModel):
    """Formulário de cadastro de membro."""

    model_config = ConfigDict(populate_by_name=True)

    login_id: str | None = Field(default=None, alias="loginId")
    password: str | None = None
    name: str | None = None


class LoginForm(BaseModel):
    """Formulário de login."""

    model_config = ConfigDict(populate_by_name=True)

    login_id: str | None = Field(default=None, alias="loginId")
    password: str | None = None


DUPLICATE_LOGIN_ID = "Login já cadastrado."


def _blank(value: str | None) -> bool:
    return not value or not value.strip()


class LoginService:
    """Regras de cadastro e autenticação sobre o repositório de membros."""

    def __init__(
        self,
        member_repository: MemberRepositoryProtocol,
        logger: logging.Logger | None = None,
    ) -> None:
        self._members = member_repository
        self._logger = logger or get_logger(__name__)

    def validate_member_form(self, form: MemberForm) -> dict[str, str]:
        """Campos obrigatórios e loginId único. Retorna erros por campo."""
        errors: dict[str, str] = {}
        if _blank(form.login_id):
            errors["loginId"] = "Login é obrigatório."
        elif self._members.find_by_login_id(form.login_id) is not None:
            errors["loginId"] = DUPLICATE_LOGIN_ID
        if _blank(form.password):
            errors["password"] = "Senha é obrigatória."
        if _blank(form.name):
            errors["name"] = "Nome é obrigatório."
        return errors

    def join(self, form: MemberForm) -> Member | None:
        """Cadastra membro (usar apenas depois de validar).

        Retorna None se outro cadastro concorrente levou o mesmo loginId
        entre a validação e a escrita.
        """
        member = self._members.save_if_absent(
            Member(login_id=form.login_id, password=form.password, name=form.name)
        )
        if member is None:
            self._logger.info("Member join rejected, login_id taken")
            return None
        self._logger.info("Member joined", extra={"member_id": member.id})
        return member

    def login(self, login_id: str | None, password: str | None) -> Member | None:
        """Retorna o membro se login e senha conferem, senão None."""
        if _blank(login_id) or password is None:
            return None
        member = self._members.find_by_login_id(login_id)
        if member is None or member.password != password:
            self._logger.info("Login rejected", extra={"member_found": member is not None})
            return None
        return member
