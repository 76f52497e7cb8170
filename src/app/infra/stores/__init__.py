"""Stores: implementações concretas de persistência.

Módulos disponíveis:
    - memory_stores: apontamentos, cadastros e livro de pagamentos em memória
    - directory_seed: carga inicial dos cadastros a partir de YAML
"""

from __future__ import annotations

from app.infra.stores.directory_seed import (
    DEFAULT_DIRECTORY_SEED_PATH,
    DirectorySeed,
    DirectorySeedError,
    load_directory_seed,
)
from app.infra.stores.memory_stores import (
    MemoryEmployeeDirectory,
    MemoryPaymentRecordStore,
    MemoryTimesheetRepository,
    MemoryWorkDirectory,
)

__all__ = [
    "DEFAULT_DIRECTORY_SEED_PATH",
    "DirectorySeed",
    "DirectorySeedError",
    "MemoryEmployeeDirectory",
    "MemoryPaymentRecordStore",
    "MemoryTimesheetRepository",
    "MemoryWorkDirectory",
    "load_directory_seed",
]
