"""Fábrica da aplicação FastAPI."""

from __future__ import annotations

from fastapi import FastAPI

from itemservice.api.item_routes import router as item_router
from itemservice.api.routes import router
from itemservice.application.session_manager import SessionManager
from itemservice.config.settings import Settings, get_settings
from itemservice.infra import (
    InMemoryItemRepository,
    InMemoryMemberRepository,
    InMemorySessionStore,
)
from itemservice.observability.logging import configure_logging, get_logger
from itemservice.observability.middleware import CorrelationIdMiddleware

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Cria a aplicação FastAPI.

    Cada store é criado uma única vez aqui e compartilhado via `app.state`;
    testes constroem apps isoladas chamando esta função novamente.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.service_name)

    validation_errors: list[str] = []
    validation_errors.extend(settings.validate_item_limits())
    validation_errors.extend(settings.validate_session_config())

    if validation_errors:
        error_msg = "; ".join(validation_errors)
        raise ValueError(f"Configuração inválida: {error_msg}")

    app = FastAPI(title=settings.service_name, version=settings.version)
    app.add_middleware(CorrelationIdMiddleware, header_name=settings.correlation_id_header)
    app.include_router(router)
    app.include_router(item_router)

    app.state.settings = settings
    app.state.item_repository = InMemoryItemRepository()
    app.state.member_repository = InMemoryMemberRepository()
    app.state.session_store = InMemorySessionStore()
    app.state.session_manager = SessionManager(
        app.state.session_store,
        cookie_name=settings.session_cookie_name,
        ttl_seconds=settings.session_ttl_seconds,
        secure_cookie=settings.session_cookie_secure,
    )

    logger.info(
        "Application created",
        extra={"environment": settings.environment, "version": settings.version},
    )
    return app


app = create_app()
