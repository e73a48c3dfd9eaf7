"""Rotas HTTP principais (health, home, cadastro de membro, login/logout)."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from itemservice.api.dependencies import (
    get_current_member,
    get_login_service,
    get_session_manager,
    get_settings,
)
from itemservice.application.item_validation import GLOBAL_ERROR
from itemservice.application.login import (
    DUPLICATE_LOGIN_ID,
    LoginForm,
    LoginService,
    MemberForm,
)
from itemservice.application.session_manager import SessionManager
from itemservice.config.settings import Settings
from itemservice.domain.models import MemberView
from itemservice.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("/health")
def health(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    """Healthcheck simples."""
    return {"status": "ok", "service": settings.service_name, "version": settings.version}


@router.get("/")
def home(member: Any | None = Depends(get_current_member)) -> dict[str, Any]:
    """Home: indica se há membro logado na sessão do cookie."""
    if member is None:
        return {"logged_in": False}
    return {
        "logged_in": True,
        "member": MemberView.from_member(member).model_dump(by_alias=True),
    }


@router.post("/members/add", response_model=None)
def add_member(
    form: MemberForm,
    login_service: LoginService = Depends(get_login_service),
) -> JSONResponse:
    """Cadastra membro; campos obrigatórios e loginId único."""
    errors = login_service.validate_member_form(form)
    if errors:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})

    member = login_service.join(form)
    if member is None:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": {"loginId": DUPLICATE_LOGIN_ID}},
        )
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={"member": MemberView.from_member(member).model_dump(by_alias=True)},
    )


@router.post("/login", response_model=None)
def login(
    form: LoginForm,
    login_service: LoginService = Depends(get_login_service),
    session_manager: SessionManager = Depends(get_session_manager),
) -> JSONResponse:
    """Autentica e emite cookie de sessão."""
    member = login_service.login(form.login_id, form.password)
    if member is None:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": {GLOBAL_ERROR: "Login ou senha incorretos."}},
        )

    response = JSONResponse(
        content={"member": MemberView.from_member(member).model_dump(by_alias=True)}
    )
    session_manager.create_session(member, response)
    logger.info("login_succeeded", extra={"member_id": member.id})
    return response


@router.post("/logout", response_model=None)
def logout(
    request: Request,
    session_manager: SessionManager = Depends(get_session_manager),
) -> JSONResponse:
    """Expira a sessão do cookie (no-op se não houver) e apaga o cookie."""
    response = JSONResponse(content={"ok": True})
    session_manager.expire(request, response)
    return response
