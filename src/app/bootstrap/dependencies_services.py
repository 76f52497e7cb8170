"""Factories de serviços, autorização e barramento de eventos."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.authz import PermissionResolver, load_role_table
from app.infra.events import InMemoryEventBus
from app.services import PaymentLedger, TimesheetService
from app.use_cases.timesheets import ReplicateTimesheetsUseCase
from config.settings import get_authz_settings

if TYPE_CHECKING:
    from app.protocols import (
        EmployeeLookupProtocol,
        EventPublisherProtocol,
        EventSubscriberProtocol,
        PaymentRecordStoreProtocol,
        TimesheetRepositoryProtocol,
        WorkLookupProtocol,
    )
    from config.settings import AuthzSettings

logger = logging.getLogger(__name__)


def create_event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


def create_permission_resolver(settings: AuthzSettings | None = None) -> PermissionResolver:
    """Carrega a tabela de papéis e cria o resolvedor.

    Raises:
        RoleTableError: arquivo de papéis inválido (falha de startup).
        ValueError: papel privilegiado configurado difere do arquivo.
    """
    authz = settings or get_authz_settings()
    table = load_role_table(authz.resolved_path)
    if table.privileged_role != authz.privileged_role:
        msg = (
            f"PRIVILEGED_ROLE={authz.privileged_role} difere do arquivo de papéis "
            f"({table.privileged_role})"
        )
        raise ValueError(msg)
    logger.info(
        "permission_resolver_created",
        extra={"role_count": len(table.role_names)},
    )
    return PermissionResolver(table)


def create_timesheet_service(
    repository: TimesheetRepositoryProtocol,
    employees: EmployeeLookupProtocol,
    works: WorkLookupProtocol,
    publisher: EventPublisherProtocol,
) -> TimesheetService:
    return TimesheetService(
        repository=repository,
        employees=employees,
        works=works,
        publisher=publisher,
    )


def create_replicate_use_case(
    repository: TimesheetRepositoryProtocol,
) -> ReplicateTimesheetsUseCase:
    return ReplicateTimesheetsUseCase(repository=repository)


def create_payment_ledger(
    store: PaymentRecordStoreProtocol,
    subscriber: EventSubscriberProtocol,
) -> PaymentLedger:
    """Cria o livro de pagamentos já inscrito no evento de pagamento."""
    ledger = PaymentLedger(store)
    ledger.subscribe_to(subscriber)
    return ledger
