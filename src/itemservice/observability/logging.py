"""Logging estruturado do itemservice.

Cada linha sai como um objeto JSON com nível, logger, mensagem, serviço e o
correlation_id da request corrente (vazio fora de uma request HTTP).
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

from itemservice.observability.middleware import get_correlation_id

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(correlation_id)s %(service)s"


class CorrelationIdFilter(logging.Filter):
    """Completa o record com `service` e, se faltar, `correlation_id`.

    Um correlation_id passado em `extra` tem precedência sobre o da request.
    Senhas e tokens de sessão completos não entram em `extra`; use `mask_token`.
    """

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        if not getattr(record, "correlation_id", None):
            record.correlation_id = get_correlation_id()
        record.service = self._service_name
        return True


def configure_logging(level: str, service_name: str) -> None:
    """Substitui os handlers do root por um único handler JSON em stderr.

    Chamado por `create_app`; chamadas repetidas não duplicam saída.
    """
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(
        JsonFormatter(_LOG_FORMAT, rename_fields={"levelname": "level", "name": "logger"})
    )
    handler.addFilter(CorrelationIdFilter(service_name))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Logger por módulo; service/correlation_id vêm do filtro do handler."""
    return logging.getLogger(name)


def mask_token(token: str | None) -> str | None:
    """Trunca token de sessão para log (nunca logar o valor completo)."""
    if not token:
        return None
    return token[:8] + "..."
