"""Configurações centralizadas do itemservice.

Este módulo exporta:
- Settings: classe de configuração via variáveis de ambiente
- get_settings: função cacheada para obter instância única
- SESSION_COOKIE_NAME: nome padrão do cookie de sessão

Uso típico:
    from itemservice.config import get_settings
"""

from itemservice.config.settings import (
    SESSION_COOKIE_NAME,
    Settings,
    get_settings,
)

__all__ = [
    "Settings",
    "get_settings",
    "SESSION_COOKIE_NAME",
]
