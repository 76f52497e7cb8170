"""Settings de autorização (tabela de papéis)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


@dataclass(frozen=True)
class AuthzSettings:
    """Configurações da tabela de papéis.

    Attributes:
        role_table_path: YAML com papéis e permissões (vazio = arquivo padrão)
        privileged_role: Papel que recebe todas as permissões
        role_header: Header HTTP que carrega o papel do usuário autenticado
    """

    role_table_path: str = ""
    privileged_role: str = "ADMIN"
    role_header: str = "X-User-Role"

    @property
    def resolved_path(self) -> Path | None:
        return Path(self.role_table_path) if self.role_table_path else None

    def validate(self) -> list[str]:
        errors: list[str] = []

        if self.role_table_path and not Path(self.role_table_path).is_file():
            errors.append(f"ROLE_TABLE_PATH não encontrado: {self.role_table_path}")

        if not self.privileged_role:
            errors.append("PRIVILEGED_ROLE não pode ser vazio")

        if not self.role_header:
            errors.append("ROLE_HEADER não pode ser vazio")

        return errors


def _load_authz_from_env() -> AuthzSettings:
    return AuthzSettings(
        role_table_path=os.getenv("ROLE_TABLE_PATH", ""),
        privileged_role=os.getenv("PRIVILEGED_ROLE", "ADMIN"),
        role_header=os.getenv("ROLE_HEADER", "X-User-Role"),
    )


@lru_cache(maxsize=1)
def get_authz_settings() -> AuthzSettings:
    """Retorna instância cacheada de AuthzSettings."""
    return _load_authz_from_env()
