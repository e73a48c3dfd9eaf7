"""SessionManager: correlaciona cookie do cliente com valor no servidor.

O token vai para o cliente como valor de um único cookie (nome fixo por
processo). Ausência de cookie ou de token conhecido nunca é erro: o
resultado é simplesmente None.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from starlette.requests import Request
from starlette.responses import Response

from itemservice.config.settings import SESSION_COOKIE_NAME
from itemservice.infra.session_contract import SessionStore, SessionStoreError
from itemservice.observability.logging import get_logger, mask_token
from itemservice.utils.ids import new_session_token

_MAX_TOKEN_ATTEMPTS = 5


class SessionManager:
    """Cria, consulta e expira sessões apoiadas em cookie."""

    def __init__(
        self,
        session_store: SessionStore,
        cookie_name: str = SESSION_COOKIE_NAME,
        ttl_seconds: int | None = None,
        secure_cookie: bool = False,
        token_factory: Callable[[], str] = new_session_token,
        logger: logging.Logger | None = None,
    ) -> None:
        self._sessions = session_store
        self._cookie_name = cookie_name
        self._ttl_seconds = ttl_seconds
        self._secure_cookie = secure_cookie
        self._token_factory = token_factory
        self._logger = logger or get_logger(__name__)

    @property
    def cookie_name(self) -> str:
        return self._cookie_name

    def create_session(self, value: Any, response: Response) -> str:
        """Gera token novo, armazena `value` e emite o cookie na resposta.

        Returns:
            O token emitido.

        Raises:
            SessionStoreError: se não for possível gerar token livre.
        """
        token = self._new_token()
        self._sessions.save(token, value, ttl_seconds=self._ttl_seconds)
        response.set_cookie(
            key=self._cookie_name,
            value=token,
            max_age=self._ttl_seconds,
            path="/",
            httponly=True,
            secure=self._secure_cookie,
            samesite="lax",
        )
        self._logger.info("Session created", extra={"session_token": mask_token(token)})
        return token

    def get_session(self, request: Request) -> Any | None:
        """Retorna o valor associado ao cookie da request, ou None."""
        token = self.find_cookie_value(request)
        if token is None:
            return None
        return self._sessions.load(token)

    def expire(self, request: Request, response: Response | None = None) -> None:
        """Remove a sessão do cookie da request (no-op se não houver).

        Se `response` for informada, o cookie também é apagado no cliente.
        """
        token = self.find_cookie_value(request)
        if token is not None and self._sessions.delete(token):
            self._logger.info("Session expired", extra={"session_token": mask_token(token)})
        if response is not None:
            response.delete_cookie(key=self._cookie_name, path="/")

    def find_cookie_value(self, request: Request) -> str | None:
        """Extrai o token do cookie de sessão (None se ausente ou vazio)."""
        return request.cookies.get(self._cookie_name) or None

    def _new_token(self) -> str:
        for _ in range(_MAX_TOKEN_ATTEMPTS):
            token = self._token_factory()
            if not self._sessions.exists(token):
                return token
        raise SessionStoreError("Não foi possível gerar token de sessão único")
