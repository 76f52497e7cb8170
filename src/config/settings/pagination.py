"""Settings de paginação das listagens."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class PaginationSettings:
    """Limites de paginação.

    Attributes:
        default_page_size: Tamanho usado quando o cliente não informa
        max_page_size: Teto aplicado a qualquer pedido
    """

    default_page_size: int = 20
    max_page_size: int = 100

    def validate(self) -> list[str]:
        errors: list[str] = []

        if self.default_page_size < 1:
            errors.append("DEFAULT_PAGE_SIZE deve ser >= 1")

        if self.max_page_size < self.default_page_size:
            errors.append("MAX_PAGE_SIZE deve ser >= DEFAULT_PAGE_SIZE")

        return errors


def _load_pagination_from_env() -> PaginationSettings:
    return PaginationSettings(
        default_page_size=int(os.getenv("DEFAULT_PAGE_SIZE", "20")),
        max_page_size=int(os.getenv("MAX_PAGE_SIZE", "100")),
    )


@lru_cache(maxsize=1)
def get_pagination_settings() -> PaginationSettings:
    """Retorna instância cacheada de PaginationSettings."""
    return _load_pagination_from_env()
