"""Container de dependências: conecta implementações concretas aos protocolos.

Um container por processo (ou por teste). Sem singletons de módulo
mutáveis: quem precisa de estado isolado cria o seu via ``build_container``.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.authz import PermissionResolver
from app.bootstrap.dependencies_services import (
    create_event_bus,
    create_payment_ledger,
    create_permission_resolver,
    create_replicate_use_case,
    create_timesheet_service,
)
from app.bootstrap.dependencies_stores import (
    create_directory_seed,
    create_employee_directory,
    create_payment_record_store,
    create_timesheet_repository,
    create_work_directory,
)
from app.infra.events import InMemoryEventBus
from app.infra.stores import (
    MemoryEmployeeDirectory,
    MemoryPaymentRecordStore,
    MemoryTimesheetRepository,
    MemoryWorkDirectory,
)
from app.services import PaymentLedger, TimesheetService
from app.use_cases.timesheets import ReplicateTimesheetsUseCase
from config.settings import PaginationSettings, get_pagination_settings


@dataclass(frozen=True)
class ServiceContainer:
    """Dependências prontas para a camada HTTP."""

    repository: MemoryTimesheetRepository
    employees: MemoryEmployeeDirectory
    works: MemoryWorkDirectory
    payment_records: MemoryPaymentRecordStore
    event_bus: InMemoryEventBus
    resolver: PermissionResolver
    timesheets: TimesheetService
    replicate: ReplicateTimesheetsUseCase
    ledger: PaymentLedger
    pagination: PaginationSettings


def build_container(resolver: PermissionResolver | None = None) -> ServiceContainer:
    """Monta o grafo de dependências a partir das settings atuais."""
    repository = create_timesheet_repository()
    seed = create_directory_seed()
    employees = create_employee_directory(seed)
    works = create_work_directory(seed)
    payment_records = create_payment_record_store()
    event_bus = create_event_bus()

    return ServiceContainer(
        repository=repository,
        employees=employees,
        works=works,
        payment_records=payment_records,
        event_bus=event_bus,
        resolver=resolver or create_permission_resolver(),
        timesheets=create_timesheet_service(repository, employees, works, event_bus),
        replicate=create_replicate_use_case(repository),
        ledger=create_payment_ledger(payment_records, event_bus),
        pagination=get_pagination_settings(),
    )
