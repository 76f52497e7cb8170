"""Dependências FastAPI das rotas de apontamentos."""

from __future__ import annotations

import logging
from collections.abc import Callable

from fastapi import Query, Request

from app.bootstrap.dependencies import ServiceContainer
from app.domain.pagination import ListFilters
from config.settings import get_authz_settings
from utils.errors import PermissionDeniedError

logger = logging.getLogger(__name__)


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.container


def current_role(request: Request) -> str:
    """Papel do usuário autenticado, definido pelo gateway de autenticação."""
    return request.headers.get(get_authz_settings().role_header, "")


def require_any_permission(*permissions: str) -> Callable[[Request], str]:
    """Exige ao menos uma das permissões; devolve o papel do usuário."""

    def dependency(request: Request) -> str:
        role = current_role(request)
        resolver = get_container(request).resolver
        granted = resolver.resolve(role)
        if not any(p in granted for p in permissions):
            raise PermissionDeniedError(role, " | ".join(permissions))
        return role

    return dependency


def require_all_permissions(*permissions: str) -> Callable[[Request], str]:
    """Exige todas as permissões; devolve o papel do usuário."""

    def dependency(request: Request) -> str:
        role = current_role(request)
        resolver = get_container(request).resolver
        for permission in permissions:
            resolver.require(role, permission)
        return role

    return dependency


def list_filters(
    request: Request,
    status: str | None = Query(default=None),
    page: int | None = Query(default=None),
    page_size: int | None = Query(default=None, alias="pageSize"),
    work_id: str | None = Query(default=None, alias="obraId"),
) -> ListFilters:
    """Filtros de listagem com defaults e teto de página das settings."""
    pagination = get_container(request).pagination
    params = {"obraId": work_id} if work_id else {}
    return ListFilters.normalized(
        status=status,
        page=page,
        page_size=page_size,
        params=params,
        default_page_size=pagination.default_page_size,
        max_page_size=pagination.max_page_size,
    )
