"""Geradores de identificadores."""

from __future__ import annotations

import uuid


def new_session_token() -> str:
    """Gera um token de sessão opaco e único."""

    return str(uuid.uuid4())
