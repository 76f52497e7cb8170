"""Resolução de papel → conjunto de permissões."""

from __future__ import annotations

from app.authz.role_table import RoleTable
from utils.errors import PermissionDeniedError


class PermissionResolver:
    """Consulta pura sobre uma RoleTable injetada.

    - papel privilegiado: união de todas as permissões, recalculada a cada chamada
    - papel conhecido: exatamente as permissões da tabela
    - papel desconhecido: conjunto vazio (nunca falha)
    """

    __slots__ = ("_table",)

    def __init__(self, table: RoleTable) -> None:
        self._table = table

    @property
    def table(self) -> RoleTable:
        return self._table

    def resolve(self, role: str | None) -> frozenset[str]:
        if not role:
            return frozenset()
        if role == self._table.privileged_role:
            union: set[str] = set()
            for permissions in self._table.roles.values():
                union.update(permissions)
            return frozenset(union)
        return self._table.roles.get(role, frozenset())

    def has_permission(self, role: str | None, permission: str) -> bool:
        return permission in self.resolve(role)

    def require(self, role: str | None, permission: str) -> None:
        """Levanta PermissionDeniedError se o papel não concede a permissão."""
        if not self.has_permission(role, permission):
            raise PermissionDeniedError(role or "", permission)
