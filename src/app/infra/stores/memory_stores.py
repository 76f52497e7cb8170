"""Stores em memória: desenvolvimento e testes.

ATENÇÃO: sem persistência entre reinícios. Cada chamada segura o lock
apenas durante a própria operação; nenhuma transação abrange mais de uma
chamada.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from app.domain.pagination import ListFilters, Page, PaginationInfo
from app.protocols.lookups import EmployeeLookupProtocol, WorkLookupProtocol
from app.protocols.payment_record_store import PaymentRecordStoreProtocol
from app.protocols.timesheet_repository import TimesheetRepositoryProtocol
from fsm import TimesheetStatus
from utils.errors import ConcurrentModificationError, PersistenceError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from app.domain.payment_record import PaymentRecord
    from app.domain.people import Employee, Work
    from app.domain.timesheet import Timesheet

# Parâmetros livres de listagem → atributo do apontamento
_PARAM_FIELDS = {
    "obraId": "work_id",
    "funcionarioId": "employee_id",
}


class MemoryTimesheetRepository(TimesheetRepositoryProtocol):
    """Repositório de apontamentos em memória."""

    def __init__(self, initial: Iterable[Timesheet] = ()) -> None:
        self._lock = threading.Lock()
        self._rows: dict[str, Timesheet] = {t.id: t for t in initial}

    def save(self, timesheet: Timesheet) -> None:
        with self._lock:
            if timesheet.id in self._rows:
                msg = f"apontamento [{timesheet.id}] já existe"
                raise PersistenceError(msg)
            self._rows[timesheet.id] = timesheet

    def get_by_id(self, timesheet_id: str) -> Timesheet | None:
        with self._lock:
            return self._rows.get(timesheet_id)

    def update(self, timesheet: Timesheet) -> None:
        with self._lock:
            stored = self._rows.get(timesheet.id)
            if stored is None:
                msg = f"apontamento [{timesheet.id}] não existe para atualização"
                raise PersistenceError(msg)
            if stored.version != timesheet.version - 1:
                raise ConcurrentModificationError(
                    timesheet.id,
                    expected=timesheet.version - 1,
                    found=stored.version,
                )
            self._rows[timesheet.id] = timesheet

    def list(self, filters: ListFilters) -> Page[Timesheet]:
        return self._paginate(lambda _t: True, filters)

    def list_by_employee(self, employee_id: str, filters: ListFilters) -> Page[Timesheet]:
        return self._paginate(lambda t: t.employee_id == employee_id, filters)

    def exists_open_for_employee(self, employee_id: str) -> bool:
        with self._lock:
            return any(
                t.employee_id == employee_id and t.status == TimesheetStatus.OPEN
                for t in self._rows.values()
            )

    def get_latest_by_employee(self, employee_id: str) -> Timesheet | None:
        with self._lock:
            candidates = [t for t in self._rows.values() if t.employee_id == employee_id]
        if not candidates:
            return None
        return max(candidates, key=lambda t: (t.period_end, t.created_at))

    def _paginate(
        self,
        predicate: Callable[[Timesheet], bool],
        filters: ListFilters,
    ) -> Page[Timesheet]:
        with self._lock:
            rows = [t for t in self._rows.values() if predicate(t)]

        if filters.status:
            rows = [t for t in rows if t.status.value == filters.status]
        for param, value in filters.params.items():
            attribute = _PARAM_FIELDS.get(param)
            if attribute and value:
                rows = [t for t in rows if getattr(t, attribute) == value]

        rows.sort(key=lambda t: (t.period_start, t.created_at), reverse=True)
        window = rows[filters.offset : filters.offset + filters.page_size]
        return Page(
            items=window,
            pagination=PaginationInfo.build(len(rows), filters.page, filters.page_size),
        )

    def count(self) -> int:
        """Total de apontamentos gravados."""
        with self._lock:
            return len(self._rows)


class MemoryEmployeeDirectory(EmployeeLookupProtocol):
    """Cadastro de funcionários em memória."""

    def __init__(self, employees: Iterable[Employee] = ()) -> None:
        self._employees: dict[str, Employee] = {e.id: e for e in employees}

    def add(self, employee: Employee) -> None:
        self._employees[employee.id] = employee

    def get(self, employee_id: str) -> Employee | None:
        return self._employees.get(employee_id)

    def exists(self, employee_id: str) -> bool:
        employee = self._employees.get(employee_id)
        return employee is not None and not employee.is_deleted


class MemoryWorkDirectory(WorkLookupProtocol):
    """Cadastro de obras em memória."""

    def __init__(self, works: Iterable[Work] = ()) -> None:
        self._works: dict[str, Work] = {w.id: w for w in works}

    def add(self, work: Work) -> None:
        self._works[work.id] = work

    def exists(self, work_id: str) -> bool:
        work = self._works.get(work_id)
        return work is not None and work.deleted_at is None


class MemoryPaymentRecordStore(PaymentRecordStoreProtocol):
    """Livro de pagamentos em memória."""

    def __init__(self, max_records: int = 10000) -> None:
        self._lock = threading.Lock()
        self._records: list[PaymentRecord] = []
        self._max_records = max_records

    def append(self, record: PaymentRecord) -> None:
        with self._lock:
            self._records.append(record)
            # Limita tamanho para evitar memory leak em dev
            if len(self._records) > self._max_records:
                self._records = self._records[-self._max_records :]

    def list_by_employee(self, employee_id: str) -> list[PaymentRecord]:
        with self._lock:
            return [r for r in self._records if r.employee_id == employee_id]

    def get_records(self) -> list[PaymentRecord]:
        """Retorna todos os registros (apenas para testes)."""
        with self._lock:
            return list(self._records)
