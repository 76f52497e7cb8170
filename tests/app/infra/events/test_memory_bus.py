"""Testes do barramento de eventos em memória."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from app.infra.events.memory_bus import InMemoryEventBus


class TestInMemoryEventBus:
    """Entrega síncrona e isolamento de falhas."""

    def test_delivers_in_subscription_order(self) -> None:
        bus = InMemoryEventBus()
        received: list[tuple[str, Any]] = []
        bus.subscribe("evento", lambda name, payload: received.append(("first", payload)))
        bus.subscribe("evento", lambda name, payload: received.append(("second", payload)))

        bus.publish("evento", 42)

        assert received == [("first", 42), ("second", 42)]
        assert bus.handler_count("evento") == 2

    def test_publish_without_handlers_is_noop(self) -> None:
        bus = InMemoryEventBus()

        bus.publish("ninguem_ouve", {"x": 1})

        assert bus.handler_count("ninguem_ouve") == 0

    def test_failing_handler_is_logged_and_others_still_run(
        self,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        bus = InMemoryEventBus()
        received: list[Any] = []

        def broken(name: str, payload: Any) -> None:
            raise RuntimeError("boom")

        bus.subscribe("evento", broken)
        bus.subscribe("evento", lambda name, payload: received.append(payload))

        with caplog.at_level(logging.ERROR, logger="app.infra.events.memory_bus"):
            bus.publish("evento", "payload")

        assert received == ["payload"]
        assert any(r.message == "event_handler_failed" for r in caplog.records)
