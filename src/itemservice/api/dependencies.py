"""Dependências injetadas nas rotas."""

from __future__ import annotations

from typing import Any

from fastapi import Depends, Request

from itemservice.application.login import LoginService
from itemservice.application.session_manager import SessionManager
from itemservice.config.settings import Settings
from itemservice.domain.protocols.item_repository import ItemRepositoryProtocol
from itemservice.domain.protocols.member_repository import MemberRepositoryProtocol


def get_settings(request: Request) -> Settings:
    """Retorna settings da aplicação."""

    return request.app.state.settings


def get_item_repository(request: Request) -> ItemRepositoryProtocol:
    """Retorna o repositório de itens ativo."""

    return request.app.state.item_repository


def get_member_repository(request: Request) -> MemberRepositoryProtocol:
    """Retorna o repositório de membros ativo."""

    return request.app.state.member_repository


def get_session_manager(request: Request) -> SessionManager:
    """Retorna o gerenciador de sessão (cookie)."""

    return request.app.state.session_manager


def get_login_service(
    members: MemberRepositoryProtocol = Depends(get_member_repository),
) -> LoginService:
    """Monta LoginService sobre o repositório de membros."""
    return LoginService(members)


def get_current_member(
    request: Request,
    session_manager: SessionManager = Depends(get_session_manager),
) -> Any | None:
    """Membro logado na sessão do cookie, ou None."""
    return session_manager.get_session(request)
