"""Autorização por papel: tabela de papéis e resolução de permissões.

Uso:
    from app.authz import PermissionResolver, load_role_table

    resolver = PermissionResolver(load_role_table())
    resolver.resolve("VISUALIZADOR")
"""

from app.authz.permissions import (
    PERMISSION_TIMESHEET_APPROVE,
    PERMISSION_TIMESHEET_PAY,
    PERMISSION_TIMESHEET_READ,
    PERMISSION_TIMESHEET_WRITE,
    PRIVILEGED_ROLE,
    Role,
)
from app.authz.resolver import PermissionResolver
from app.authz.role_table import (
    DEFAULT_ROLE_TABLE_PATH,
    RoleTable,
    RoleTableError,
    builtin_role_table,
    load_role_table,
)

__all__ = [
    "DEFAULT_ROLE_TABLE_PATH",
    "PERMISSION_TIMESHEET_APPROVE",
    "PERMISSION_TIMESHEET_PAY",
    "PERMISSION_TIMESHEET_READ",
    "PERMISSION_TIMESHEET_WRITE",
    "PRIVILEGED_ROLE",
    "PermissionResolver",
    "Role",
    "RoleTable",
    "RoleTableError",
    "builtin_role_table",
    "load_role_table",
]
