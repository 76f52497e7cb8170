"""Barramentos de eventos concretos."""

from app.infra.events.memory_bus import InMemoryEventBus

__all__ = ["InMemoryEventBus"]
