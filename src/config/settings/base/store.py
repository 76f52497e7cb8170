"""Settings de armazenamento de apontamentos."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Literal

TimesheetStoreBackend = Literal["memory"]

SUPPORTED_STORE_BACKENDS = frozenset({"memory"})


@dataclass(frozen=True)
class StoreSettings:
    """Configurações do repositório de apontamentos.

    Attributes:
        timesheet_backend: Backend do repositório (apenas "memory")
        payment_records_limit: Máximo de registros no livro de pagamentos em memória
        directory_seed_path: YAML com funcionários e obras (vazio = carga de
            exemplo, apenas em development)
    """

    timesheet_backend: str = "memory"
    payment_records_limit: int = 10000
    directory_seed_path: str = ""

    @property
    def resolved_seed_path(self) -> Path | None:
        return Path(self.directory_seed_path) if self.directory_seed_path else None

    def validate(self) -> list[str]:
        errors: list[str] = []

        if self.timesheet_backend not in SUPPORTED_STORE_BACKENDS:
            errors.append(f"TIMESHEET_STORE_BACKEND inválido: {self.timesheet_backend}")

        if self.payment_records_limit < 1:
            errors.append("PAYMENT_RECORDS_LIMIT deve ser >= 1")

        if self.directory_seed_path and not Path(self.directory_seed_path).is_file():
            errors.append(f"DIRECTORY_SEED_PATH não encontrado: {self.directory_seed_path}")

        return errors


def _load_store_from_env() -> StoreSettings:
    return StoreSettings(
        timesheet_backend=os.getenv("TIMESHEET_STORE_BACKEND", "memory").lower(),
        payment_records_limit=int(os.getenv("PAYMENT_RECORDS_LIMIT", "10000")),
        directory_seed_path=os.getenv("DIRECTORY_SEED_PATH", ""),
    )


@lru_cache(maxsize=1)
def get_store_settings() -> StoreSettings:
    """Retorna instância cacheada de StoreSettings."""
    return _load_store_from_env()
