"""Agregador de settings do serviço.

Re-exporta as settings de cada módulo. Todas são lidas de variáveis de
ambiente uma única vez (lru_cache); testes usam ``clear_settings_cache``.
"""

from __future__ import annotations

from config.settings.authz import AuthzSettings, get_authz_settings
from config.settings.base import (
    BaseSettings,
    Environment,
    StoreSettings,
    TimesheetStoreBackend,
    get_base_settings,
    get_store_settings,
)
from config.settings.pagination import PaginationSettings, get_pagination_settings

_GETTERS = (
    get_base_settings,
    get_store_settings,
    get_authz_settings,
    get_pagination_settings,
)


def validate_all() -> list[str]:
    """Valida todas as settings carregadas.

    Returns:
        Lista agregada de erros (vazia = OK).
    """
    errors: list[str] = []
    for getter in _GETTERS:
        errors.extend(getter().validate())
    return errors


def clear_settings_cache() -> None:
    """Descarta as instâncias cacheadas (próxima leitura relê o ambiente)."""
    for getter in _GETTERS:
        getter.cache_clear()


__all__ = [
    "AuthzSettings",
    "BaseSettings",
    "Environment",
    "PaginationSettings",
    "StoreSettings",
    "TimesheetStoreBackend",
    "clear_settings_cache",
    "get_authz_settings",
    "get_base_settings",
    "get_pagination_settings",
    "get_store_settings",
    "validate_all",
]
