"""Filtros e metadados de listagem paginada."""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


@dataclass(frozen=True, slots=True)
class ListFilters:
    """Filtros aceitos pelas listagens.

    Attributes:
        status: Status do apontamento (None = todos)
        page: Página solicitada (base 1)
        page_size: Itens por página
        params: Parâmetros livres repassados ao repositório (ex: obraId)
    """

    status: str | None = None
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE
    params: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def normalized(
        cls,
        *,
        status: str | None = None,
        page: int | None = None,
        page_size: int | None = None,
        params: Mapping[str, str] | None = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> ListFilters:
        """Aplica defaults e limites: página < 1 vira 1, tamanho vai ao teto."""
        resolved_page = page if page is not None and page >= 1 else DEFAULT_PAGE
        resolved_size = (
            page_size if page_size is not None and page_size >= 1 else default_page_size
        )
        resolved_size = min(resolved_size, max_page_size)
        return cls(
            status=status or None,
            page=resolved_page,
            page_size=resolved_size,
            params=dict(params or {}),
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass(frozen=True, slots=True)
class PaginationInfo:
    """Metadados de uma resposta paginada."""

    total_items: int
    total_pages: int
    page: int
    page_size: int

    @classmethod
    def build(cls, total_items: int, page: int, page_size: int) -> PaginationInfo:
        size = page_size if page_size > 0 else 1
        return cls(
            total_items=total_items,
            total_pages=math.ceil(total_items / size),
            page=page,
            page_size=size,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalItens": self.total_items,
            "totalPages": self.total_pages,
            "currentPage": self.page,
            "pageSize": self.page_size,
        }


@dataclass(frozen=True)
class Page(Generic[T]):
    """Página de resultados com seus metadados."""

    items: list[T]
    pagination: PaginationInfo

    def to_response(self, serialize: Callable[[T], Any]) -> dict[str, Any]:
        """Serializa no envelope público {dados, paginacao}."""
        return {
            "dados": [serialize(item) for item in self.items],
            "paginacao": self.pagination.to_dict(),
        }
