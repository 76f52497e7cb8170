"""Protocolo do barramento de eventos entre módulos.

Publicação é fire-and-forget do ponto de vista de quem publica: garantias
de entrega ficam com a implementação.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

EventHandler = Callable[[str, Any], None]


class EventPublisherProtocol(ABC):
    """Canal de publicação de eventos de domínio."""

    @abstractmethod
    def publish(self, event_name: str, payload: Any) -> None:
        """Publica o evento. Nunca propaga falhas dos consumidores."""


class EventSubscriberProtocol(ABC):
    """Registro de consumidores por nome de evento."""

    @abstractmethod
    def subscribe(self, event_name: str, handler: EventHandler) -> None: ...
