from __future__ import annotations


def test_health_endpoint(client):
    response = client.get("/health")
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["service"] == "itemservice"


def test_correlation_id_is_propagated(client):
    response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["x-correlation-id"] == "abc-123"


def test_correlation_id_is_generated(client):
    response = client.get("/health")
    assert response.headers["x-correlation-id"]
