from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from itemservice.api.app import create_app
from itemservice.config.settings import get_settings


@pytest.fixture()
def client(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ENVIRONMENT", "development")
    get_settings.cache_clear()
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
    get_settings.cache_clear()
