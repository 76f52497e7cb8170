"""Tabela imutável papel → permissões.

Construída uma vez na inicialização (YAML ou mapeamento explícito) e
injetada no PermissionResolver. Nenhum estado global mutável.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

import yaml

from app.authz.permissions import BUILTIN_ROLE_PERMISSIONS, PRIVILEGED_ROLE

logger = logging.getLogger(__name__)

DEFAULT_ROLE_TABLE_PATH = Path(__file__).resolve().parent / "roles.yaml"


class RoleTableError(Exception):
    """Arquivo ou mapeamento de papéis inválido."""


def _validate_permission(role: str, permission: object) -> str:
    if not isinstance(permission, str) or ":" not in permission:
        raise RoleTableError(
            f"Permissão inválida para o papel {role}: {permission!r} "
            "(esperado '<domínio>:<ação>')"
        )
    domain, _, action = permission.partition(":")
    if not domain or not action:
        raise RoleTableError(f"Permissão incompleta para o papel {role}: {permission!r}")
    return permission


@dataclass(frozen=True)
class RoleTable:
    """Mapeamento somente leitura de papéis para permissões.

    Attributes:
        roles: papel → permissões (sem o papel privilegiado)
        privileged_role: papel que recebe a união de todas as permissões
    """

    roles: Mapping[str, frozenset[str]] = field(default_factory=dict)
    privileged_role: str = PRIVILEGED_ROLE

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Iterable[str]],
        privileged_role: str = PRIVILEGED_ROLE,
    ) -> RoleTable:
        """Valida e congela um mapeamento papel → permissões."""
        if not privileged_role:
            raise RoleTableError("privileged_role não pode ser vazio")

        frozen: dict[str, frozenset[str]] = {}
        for role, permissions in mapping.items():
            if not isinstance(role, str) or not role:
                raise RoleTableError(f"Nome de papel inválido: {role!r}")
            if role == privileged_role:
                raise RoleTableError(
                    f"O papel privilegiado {role} não deve ter lista própria"
                )
            if isinstance(permissions, str) or not isinstance(permissions, Iterable):
                raise RoleTableError(f"Permissões do papel {role} devem ser uma lista")
            frozen[role] = frozenset(_validate_permission(role, p) for p in permissions)

        return cls(roles=MappingProxyType(frozen), privileged_role=privileged_role)

    @property
    def role_names(self) -> frozenset[str]:
        return frozenset(self.roles) | {self.privileged_role}

    def with_role(self, role: str, permissions: Iterable[str]) -> RoleTable:
        """Nova tabela com o papel adicionado (ou substituído)."""
        merged: dict[str, Iterable[str]] = dict(self.roles)
        merged[role] = tuple(permissions)
        return RoleTable.from_mapping(merged, self.privileged_role)


def builtin_role_table() -> RoleTable:
    """Tabela padrão embutida no código."""
    return RoleTable.from_mapping(BUILTIN_ROLE_PERMISSIONS, PRIVILEGED_ROLE)


def load_role_table(path: Path | str | None = None) -> RoleTable:
    """Carrega a tabela de papéis de um arquivo YAML.

    Formato:
        privileged_role: ADMIN
        roles:
          GERENTE_OBRAS: [obras:ler, ...]

    Args:
        path: Caminho do YAML (usa o arquivo padrão se None)

    Returns:
        RoleTable validada

    Raises:
        RoleTableError: YAML inválido, estrutura inesperada ou arquivo
            explícito inexistente
    """
    resolved = Path(path) if path is not None else DEFAULT_ROLE_TABLE_PATH

    if not resolved.exists():
        if path is not None:
            raise RoleTableError(f"Arquivo de papéis não encontrado: {resolved}")
        logger.warning(
            "role_table_file_missing",
            extra={"path": str(resolved), "fallback": "builtin"},
        )
        return builtin_role_table()

    try:
        with resolved.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise RoleTableError(f"YAML de papéis inválido: {exc}") from exc

    if not isinstance(data, dict):
        raise RoleTableError("YAML de papéis deve ser um dicionário")

    roles = data.get("roles")
    if not isinstance(roles, dict):
        raise RoleTableError("Chave 'roles' ausente ou não é um dicionário")

    table = RoleTable.from_mapping(
        roles,
        privileged_role=str(data.get("privileged_role", PRIVILEGED_ROLE)),
    )
    logger.info(
        "role_table_loaded",
        extra={"path": str(resolved), "roles": sorted(table.role_names)},
    )
    return table
