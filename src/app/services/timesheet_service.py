"""Serviço de aplicação de apontamentos.

Orquestra validação de referências, conversão de datas, transições do
agregado, persistência e publicação do evento de pagamento.

Regras de ordem:
- validações e consultas antes de qualquer escrita
- checagem de status no agregado antes de persistir
- publicação somente após ``update`` bem-sucedido
"""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Callable
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from app.domain.events import PAYMENT_COMPLETED_EVENT, TimesheetPaymentCompleted
from app.domain.pagination import ListFilters, Page
from app.domain.timesheet import Timesheet
from app.observability import get_correlation_id, record_latency, record_status_transition
from utils.errors import (
    InvalidDateFormatError,
    ReferenceNotFoundError,
    TimesheetNotFoundError,
)

if TYPE_CHECKING:
    from app.domain.timesheet_commands import CreateTimesheetInput, UpdateTimesheetInput
    from app.protocols.event_publisher import EventPublisherProtocol
    from app.protocols.lookups import EmployeeLookupProtocol, WorkLookupProtocol
    from app.protocols.timesheet_repository import TimesheetRepositoryProtocol

logger = logging.getLogger(__name__)

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
COMPONENT = "timesheet_service"

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(UTC)


def parse_date(field: str, value: str) -> date:
    """Converte 'YYYY-MM-DD' em date (dia e mês com dois dígitos).

    Raises:
        InvalidDateFormatError: com o nome do campo ofensor.
    """
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        raise InvalidDateFormatError(field, str(value))
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise InvalidDateFormatError(field, value) from exc


class TimesheetService:
    """Casos de uso unitários sobre o agregado Apontamento."""

    def __init__(
        self,
        repository: TimesheetRepositoryProtocol,
        employees: EmployeeLookupProtocol,
        works: WorkLookupProtocol,
        publisher: EventPublisherProtocol,
        clock: Clock | None = None,
    ) -> None:
        self._repository = repository
        self._employees = employees
        self._works = works
        self._publisher = publisher
        self._clock = clock or _utc_now

    # ------------------------------------------------------------------
    # Escrita
    # ------------------------------------------------------------------

    def create(self, data: CreateTimesheetInput) -> Timesheet:
        """Abre um novo apontamento em aberto.

        Raises:
            ReferenceNotFoundError: funcionário ou obra inexistente
            InvalidDateFormatError: data fora do formato
            InvalidPeriodError: início não anterior ao fim
            PersistenceError: falha ao gravar
        """
        start = time.perf_counter()

        if not self._employees.exists(data.employee_id):
            raise ReferenceNotFoundError("Funcionário", data.employee_id)
        if not self._works.exists(data.work_id):
            raise ReferenceNotFoundError("Obra", data.work_id)

        period_start = parse_date("periodoInicio", data.period_start)
        period_end = parse_date("periodoFim", data.period_end)

        timesheet = Timesheet.open_new(
            employee_id=data.employee_id,
            work_id=data.work_id,
            period_start=period_start,
            period_end=period_end,
            daily_rate=data.daily_rate,
            days_worked=data.days_worked,
            additions=data.additions,
            deductions=data.deductions,
            advances=data.advances,
            now=self._clock(),
        )
        self._repository.save(timesheet)

        logger.info(
            "timesheet_created",
            extra={
                "timesheet_id": timesheet.id,
                "employee_id": timesheet.employee_id,
                "work_id": timesheet.work_id,
            },
        )
        self._record_latency("create", start)
        return timesheet

    def approve(self, timesheet_id: str) -> Timesheet:
        """Aprova um apontamento em aberto para pagamento."""
        start = time.perf_counter()
        current = self.get(timesheet_id)
        updated = current.approve(now=self._clock())
        self._persist_transition(current, updated)
        self._record_latency("approve", start)
        return updated

    def register_payment(self, timesheet_id: str, payment_account_id: str) -> Timesheet:
        """Registra o pagamento e publica o evento para o financeiro."""
        start = time.perf_counter()
        current = self.get(timesheet_id)
        updated = current.register_payment(now=self._clock())
        self._persist_transition(current, updated)
        self._publish_payment(updated, payment_account_id)
        self._record_latency("register_payment", start)
        return updated

    def approve_and_pay(self, timesheet_id: str, payment_account_id: str) -> Timesheet:
        """Atalho OPEN → PAID, com o mesmo evento de pagamento."""
        start = time.perf_counter()
        current = self.get(timesheet_id)
        updated = current.approve_and_pay(now=self._clock())
        self._persist_transition(current, updated)
        self._publish_payment(updated, payment_account_id)
        self._record_latency("approve_and_pay", start)
        return updated

    def edit(self, timesheet_id: str, data: UpdateTimesheetInput) -> Timesheet:
        """Sobrescreve obra, período e valores de um apontamento em aberto.

        A obra só é validada quando muda.
        """
        start = time.perf_counter()
        current = self.get(timesheet_id)

        period_start = parse_date("periodoInicio", data.period_start)
        period_end = parse_date("periodoFim", data.period_end)

        if data.work_id != current.work_id and not self._works.exists(data.work_id):
            raise ReferenceNotFoundError("Obra", data.work_id)

        updated = current.edit(
            work_id=data.work_id,
            period_start=period_start,
            period_end=period_end,
            daily_rate=data.daily_rate,
            days_worked=data.days_worked,
            additions=data.additions,
            deductions=data.deductions,
            advances=data.advances,
            now=self._clock(),
        )
        self._repository.update(updated)

        logger.info(
            "timesheet_edited",
            extra={"timesheet_id": updated.id, "version": updated.version},
        )
        self._record_latency("edit", start)
        return updated

    # ------------------------------------------------------------------
    # Leitura
    # ------------------------------------------------------------------

    def get(self, timesheet_id: str) -> Timesheet:
        """Retorna o apontamento ou levanta TimesheetNotFoundError."""
        timesheet = self._repository.get_by_id(timesheet_id)
        if timesheet is None:
            raise TimesheetNotFoundError(timesheet_id)
        return timesheet

    def list(self, filters: ListFilters) -> Page[Timesheet]:
        return self._repository.list(filters)

    def list_by_employee(self, employee_id: str, filters: ListFilters) -> Page[Timesheet]:
        return self._repository.list_by_employee(employee_id, filters)

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------

    def _persist_transition(self, current: Timesheet, updated: Timesheet) -> None:
        self._repository.update(updated)
        logger.info(
            "timesheet_status_changed",
            extra={
                "timesheet_id": updated.id,
                "from_status": current.status.value,
                "to_status": updated.status.value,
                "version": updated.version,
            },
        )
        record_status_transition(
            current.status.value,
            updated.status.value,
            get_correlation_id() or None,
        )

    def _publish_payment(self, timesheet: Timesheet, payment_account_id: str) -> None:
        event = TimesheetPaymentCompleted(
            timesheet_id=timesheet.id,
            employee_id=timesheet.employee_id,
            work_id=timesheet.work_id,
            period_label=timesheet.period_label,
            amount=timesheet.total,
            paid_at=timesheet.updated_at,
            payment_account_id=payment_account_id,
        )
        self._publisher.publish(PAYMENT_COMPLETED_EVENT, event)
        logger.info("timesheet_payment_published", extra=event.to_log_dict())

    @staticmethod
    def _record_latency(operation: str, started: float) -> None:
        latency_ms = (time.perf_counter() - started) * 1000
        record_latency(COMPONENT, operation, latency_ms, get_correlation_id() or None)
