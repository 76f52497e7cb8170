"""Permissões granulares e papéis conhecidos do sistema."""

from __future__ import annotations

from enum import StrEnum

PERMISSION_WORKS_READ = "obras:ler"
PERMISSION_WORKS_WRITE = "obras:escrever"
PERMISSION_PEOPLE_READ = "pessoal:ler"
PERMISSION_PEOPLE_WRITE = "pessoal:escrever"
PERMISSION_SUPPLIES_READ = "suprimentos:ler"
PERMISSION_SUPPLIES_WRITE = "suprimentos:escrever"
PERMISSION_FINANCE_READ = "financeiro:ler"
PERMISSION_FINANCE_WRITE = "financeiro:escrever"
PERMISSION_TIMESHEET_READ = "pessoal:apontamento:ler"
PERMISSION_TIMESHEET_WRITE = "pessoal:apontamento:escrever"
PERMISSION_TIMESHEET_APPROVE = "pessoal:apontamento:aprovar"
PERMISSION_TIMESHEET_PAY = "pessoal:apontamento:pagar"


class Role(StrEnum):
    """Papéis padrão."""

    ADMIN = "ADMIN"
    WORKS_MANAGER = "GERENTE_OBRAS"
    VIEWER = "VISUALIZADOR"


PRIVILEGED_ROLE = Role.ADMIN.value

# Tabela embutida, usada quando o arquivo padrão não está disponível
BUILTIN_ROLE_PERMISSIONS: dict[str, tuple[str, ...]] = {
    Role.WORKS_MANAGER.value: (
        PERMISSION_WORKS_READ,
        PERMISSION_WORKS_WRITE,
        PERMISSION_PEOPLE_WRITE,
        PERMISSION_PEOPLE_READ,
        PERMISSION_SUPPLIES_READ,
        PERMISSION_SUPPLIES_WRITE,
        PERMISSION_FINANCE_READ,
        PERMISSION_FINANCE_WRITE,
        PERMISSION_TIMESHEET_WRITE,
        PERMISSION_TIMESHEET_APPROVE,
        PERMISSION_TIMESHEET_PAY,
    ),
    Role.VIEWER.value: (
        PERMISSION_WORKS_READ,
        PERMISSION_PEOPLE_READ,
        PERMISSION_SUPPLIES_READ,
        PERMISSION_FINANCE_READ,
        PERMISSION_TIMESHEET_READ,
    ),
}
