"""Factories de stores baseadas em configuração de ambiente."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.stores import (
    DirectorySeed,
    MemoryEmployeeDirectory,
    MemoryPaymentRecordStore,
    MemoryTimesheetRepository,
    MemoryWorkDirectory,
    load_directory_seed,
)
from config.settings import get_base_settings, get_store_settings

if TYPE_CHECKING:
    from config.settings import StoreSettings

logger = logging.getLogger(__name__)


def create_timesheet_repository(
    settings: StoreSettings | None = None,
) -> MemoryTimesheetRepository:
    """Cria o repositório de apontamentos conforme TIMESHEET_STORE_BACKEND.

    Raises:
        ValueError: backend não suportado.
    """
    store_settings = settings or get_store_settings()
    backend = store_settings.timesheet_backend

    if backend == "memory":
        environment = get_base_settings().environment
        if environment != "development":
            logger.warning(
                "memory_store_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        repository = MemoryTimesheetRepository()
        logger.info("timesheet_repository_created", extra={"backend": "memory"})
        return repository

    msg = f"TIMESHEET_STORE_BACKEND inválido: {backend}"
    raise ValueError(msg)


def create_directory_seed(settings: StoreSettings | None = None) -> DirectorySeed:
    """Carga inicial dos cadastros conforme DIRECTORY_SEED_PATH.

    - caminho informado: carregado em qualquer ambiente
    - sem caminho em development: carga de exemplo empacotada
    - sem caminho nos demais ambientes: cadastros vazios

    Raises:
        DirectorySeedError: arquivo inexistente ou inválido.
    """
    store_settings = settings or get_store_settings()
    path = store_settings.resolved_seed_path
    if path is not None:
        return load_directory_seed(path)

    environment = get_base_settings().environment
    if environment == "development":
        return load_directory_seed()

    logger.warning(
        "directory_seed_not_configured",
        extra={"environment": environment, "setting": "DIRECTORY_SEED_PATH"},
    )
    return DirectorySeed()


def create_employee_directory(seed: DirectorySeed | None = None) -> MemoryEmployeeDirectory:
    """Cadastro de funcionários consultado pelo serviço."""
    return MemoryEmployeeDirectory(seed.employees if seed is not None else ())


def create_work_directory(seed: DirectorySeed | None = None) -> MemoryWorkDirectory:
    """Cadastro de obras consultado pelo serviço."""
    return MemoryWorkDirectory(seed.works if seed is not None else ())


def create_payment_record_store(
    settings: StoreSettings | None = None,
) -> MemoryPaymentRecordStore:
    """Livro de pagamentos do financeiro."""
    store_settings = settings or get_store_settings()
    return MemoryPaymentRecordStore(max_records=store_settings.payment_records_limit)
