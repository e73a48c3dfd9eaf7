"""Testes de logging estruturado e correlation-id."""

from __future__ import annotations

import logging

from itemservice.infra.session_store_memory import InMemorySessionStore
from itemservice.observability.logging import CorrelationIdFilter, mask_token
from itemservice.observability.middleware import _correlation_id, get_correlation_id


class TestCorrelationIdFilter:
    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_filter_injects_service_and_correlation_id(self):
        token = _correlation_id.set("req-42")
        try:
            record = self._record()
            assert CorrelationIdFilter("itemservice").filter(record) is True
        finally:
            _correlation_id.reset(token)

        assert record.service == "itemservice"  # type: ignore[attr-defined]
        assert record.correlation_id == "req-42"  # type: ignore[attr-defined]

    def test_filter_preserves_explicit_correlation_id(self):
        record = self._record(correlation_id="explicit")

        CorrelationIdFilter("itemservice").filter(record)

        assert record.correlation_id == "explicit"  # type: ignore[attr-defined]


class TestCorrelationIdContextVar:
    def test_correlation_id_default_empty(self):
        assert get_correlation_id() == ""


class TestTokenMasking:
    def test_mask_token_truncates(self):
        assert mask_token("0123456789abcdef") == "01234567..."

    def test_mask_token_empty(self):
        assert mask_token(None) is None
        assert mask_token("") is None

    def test_session_store_never_logs_full_token(self, caplog):
        store = InMemorySessionStore()
        token = "0123456789abcdef-secret"

        with caplog.at_level(logging.DEBUG, logger="itemservice.infra.session_store_memory"):
            store.save(token, "value")
            store.load(token)
            store.delete(token)

        assert caplog.records
        assert all(token not in r.getMessage() for r in caplog.records)
        assert all(getattr(r, "session_token", "") == "01234567..." for r in caplog.records)
