"""Barramento de eventos em processo.

Entrega síncrona, na ordem de inscrição. Falha de um consumidor é
registrada em log e não interrompe os demais nem quem publicou.
"""

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from typing import Any

from app.protocols.event_publisher import (
    EventHandler,
    EventPublisherProtocol,
    EventSubscriberProtocol,
)

logger = logging.getLogger(__name__)


class InMemoryEventBus(EventPublisherProtocol, EventSubscriberProtocol):
    """Barramento simples para integração entre módulos no mesmo processo."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        with self._lock:
            self._handlers[event_name].append(handler)
        logger.info("event_handler_subscribed", extra={"event_name": event_name})

    def publish(self, event_name: str, payload: Any) -> None:
        with self._lock:
            handlers = list(self._handlers.get(event_name, ()))

        if not handlers:
            logger.debug("event_without_handlers", extra={"event_name": event_name})
            return

        for handler in handlers:
            try:
                handler(event_name, payload)
            except Exception as exc:
                logger.error(
                    "event_handler_failed",
                    extra={
                        "event_name": event_name,
                        "handler": getattr(handler, "__qualname__", repr(handler)),
                        "error_type": type(exc).__name__,
                    },
                )

    def handler_count(self, event_name: str) -> int:
        with self._lock:
            return len(self._handlers.get(event_name, ()))
