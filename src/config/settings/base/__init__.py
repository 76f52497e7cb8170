"""Agregador de settings base."""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.base.store import (
    StoreSettings,
    TimesheetStoreBackend,
    get_store_settings,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "StoreSettings",
    "TimesheetStoreBackend",
    "get_base_settings",
    "get_store_settings",
]
