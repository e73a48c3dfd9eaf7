"""Configurações da aplicação via variáveis de ambiente.

Todas as configurações são carregadas de env vars (ou .env local).
Os limites de validação de item ficam aqui para que formulários e testes
compartilhem a mesma fonte.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

# -----------------------------------------------------------------------------
# Constantes de sessão
# -----------------------------------------------------------------------------
SESSION_COOKIE_NAME: str = "mySessionId"


class Settings(BaseSettings):
    """Configurações lidas do ambiente."""

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Aplicação
    service_name: str = "itemservice"
    version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "INFO"

    # Sessão (cookie + store em memória)
    session_cookie_name: str = SESSION_COOKIE_NAME
    session_cookie_secure: bool = False  # Exigir HTTPS para o cookie
    session_ttl_seconds: int | None = None  # None = expira apenas via logout

    # Validação de itens (formulário de cadastro/edição)
    item_price_min: int = 1_000
    item_price_max: int = 1_000_000
    item_quantity_max: int = 9_999
    item_min_total_price: int = 10_000  # price * quantity mínimo

    # Observabilidade
    correlation_id_header: str = "X-Correlation-ID"

    def validate_item_limits(self) -> list[str]:
        """Valida coerência dos limites de item.

        Retorna lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if self.item_price_min <= 0:
            errors.append("ITEM_PRICE_MIN deve ser positivo")
        if self.item_price_min > self.item_price_max:
            errors.append("ITEM_PRICE_MIN não pode ser maior que ITEM_PRICE_MAX")
        if self.item_quantity_max < 0:
            errors.append("ITEM_QUANTITY_MAX não pode ser negativo")
        if self.item_min_total_price < 0:
            errors.append("ITEM_MIN_TOTAL_PRICE não pode ser negativo")
        return errors

    def validate_session_config(self) -> list[str]:
        """Valida configuração do cookie de sessão.

        Em produção o cookie deve ser marcado como secure.
        Retorna lista de erros (vazia = tudo OK).
        """
        errors: list[str] = []
        if not self.session_cookie_name.strip():
            errors.append("SESSION_COOKIE_NAME não pode ser vazio")
        if self.session_ttl_seconds is not None and self.session_ttl_seconds <= 0:
            errors.append("SESSION_TTL_SECONDS deve ser positivo quando definido")
        if self.is_production and not self.session_cookie_secure:
            errors.append("SESSION_COOKIE_SECURE=true é obrigatório em produção")
        return errors

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment.lower() in ("production", "prod")

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment.lower() in ("development", "dev", "local")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Retorna uma instância cacheada de Settings.

    A cache garante que mesmo múltiplas injeções não criam novos objetos.
    """
    return Settings()
