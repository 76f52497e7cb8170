"""Testes do serviço de aplicação de apontamentos."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from app.domain.events import PAYMENT_COMPLETED_EVENT, TimesheetPaymentCompleted
from app.domain.pagination import ListFilters
from app.domain.timesheet_commands import CreateTimesheetInput, UpdateTimesheetInput
from app.infra.stores.memory_stores import MemoryTimesheetRepository
from app.services.timesheet_service import TimesheetService, parse_date
from fsm import TimesheetStatus
from tests.fakes.fake_timesheet_infra import (
    FIXED_NOW,
    FailingTimesheetRepository,
    FixedClock,
    RecordingPublisher,
    StaticLookup,
    make_timesheet,
)
from utils.errors import (
    ConcurrentModificationError,
    InvalidDateFormatError,
    InvalidPeriodError,
    InvalidStateTransitionError,
    PersistenceError,
    ReferenceNotFoundError,
    TimesheetNotFoundError,
)


def _create_input(**overrides: object) -> CreateTimesheetInput:
    payload: dict[str, object] = {
        "funcionarioId": "emp-1",
        "obraId": "work-1",
        "periodoInicio": "2025-01-01",
        "periodoFim": "2025-01-15",
        "diaria": "100",
        "diasTrabalhados": 10,
        "valorAdicional": "50",
        "descontos": "20",
        "adiantamento": "0",
    }
    payload.update(overrides)
    return CreateTimesheetInput.model_validate(payload)


def _update_input(**overrides: object) -> UpdateTimesheetInput:
    payload: dict[str, object] = {
        "obraId": "work-1",
        "periodoInicio": "2025-01-01",
        "periodoFim": "2025-01-15",
        "diaria": "100",
        "diasTrabalhados": 12,
        "valorAdicional": "0",
        "descontos": "0",
        "adiantamento": "200",
    }
    payload.update(overrides)
    return UpdateTimesheetInput.model_validate(payload)


class _Env:
    def __init__(self, repository: MemoryTimesheetRepository | None = None) -> None:
        self.repository = repository or MemoryTimesheetRepository()
        self.employees = StaticLookup("emp-1", "emp-2")
        self.works = StaticLookup("work-1", "work-2")
        self.publisher = RecordingPublisher()
        self.service = TimesheetService(
            repository=self.repository,
            employees=self.employees,
            works=self.works,
            publisher=self.publisher,
            clock=FixedClock(),
        )


@pytest.fixture
def env() -> _Env:
    return _Env()


class TestParseDate:
    """Conversão de datas."""

    def test_valid_date(self) -> None:
        assert parse_date("periodoInicio", "2025-01-16") == date(2025, 1, 16)

    @pytest.mark.parametrize(
        "value",
        [
            "16/01/2025",
            "2025-13-01",
            "",
            "2025-1-1x",
            "2025-1-5",
            "2025-01-5",
            "2025-1-05",
            "2025-02-30",
            " 2025-01-05",
        ],
    )
    def test_invalid_date_names_the_field(self, value: str) -> None:
        with pytest.raises(InvalidDateFormatError) as exc_info:
            parse_date("periodoFim", value)
        assert exc_info.value.field == "periodoFim"


class TestCreate:
    """Criação."""

    def test_create_persists_open_timesheet_with_total(self, env: _Env) -> None:
        timesheet = env.service.create(_create_input())

        assert timesheet.status == TimesheetStatus.OPEN
        assert timesheet.total == Decimal("1030")
        assert timesheet.created_at == FIXED_NOW
        assert env.repository.get_by_id(timesheet.id) == timesheet

    def test_unknown_employee_is_reference_not_found(self, env: _Env) -> None:
        with pytest.raises(ReferenceNotFoundError) as exc_info:
            env.service.create(_create_input(funcionarioId="emp-x"))

        assert exc_info.value.reference_id == "emp-x"
        assert env.repository.count() == 0

    def test_unknown_work_is_reference_not_found(self, env: _Env) -> None:
        with pytest.raises(ReferenceNotFoundError) as exc_info:
            env.service.create(_create_input(obraId="work-x"))

        assert exc_info.value.reference_id == "work-x"

    def test_bad_date_format(self, env: _Env) -> None:
        with pytest.raises(InvalidDateFormatError) as exc_info:
            env.service.create(_create_input(periodoFim="15/01/2025"))

        assert exc_info.value.field == "periodoFim"
        assert env.repository.count() == 0

    def test_inverted_period(self, env: _Env) -> None:
        with pytest.raises(InvalidPeriodError):
            env.service.create(_create_input(periodoInicio="2025-01-20"))

    def test_persistence_failure_propagates(self) -> None:
        env = _Env(FailingTimesheetRepository(fail_save_for={"emp-1"}))

        with pytest.raises(PersistenceError):
            env.service.create(_create_input())


class TestStatusOperations:
    """Aprovação e pagamento."""

    def test_approve(self, env: _Env) -> None:
        created = env.service.create(_create_input())

        approved = env.service.approve(created.id)

        assert approved.status == TimesheetStatus.APPROVED_FOR_PAYMENT
        assert env.service.get(created.id).status == TimesheetStatus.APPROVED_FOR_PAYMENT
        assert env.publisher.events == []

    def test_approve_missing_is_not_found(self, env: _Env) -> None:
        with pytest.raises(TimesheetNotFoundError):
            env.service.approve("nao-existe")

    def test_approve_twice_conflicts_and_keeps_state(self, env: _Env) -> None:
        created = env.service.create(_create_input())
        env.service.approve(created.id)

        with pytest.raises(InvalidStateTransitionError):
            env.service.approve(created.id)

        assert env.service.get(created.id).version == 2

    def test_register_payment_publishes_event(self, env: _Env) -> None:
        created = env.service.create(_create_input())

        paid = env.service.register_payment(created.id, "conta-1")

        assert paid.status == TimesheetStatus.PAID
        assert len(env.publisher.events) == 1
        name, event = env.publisher.events[0]
        assert name == PAYMENT_COMPLETED_EVENT
        assert isinstance(event, TimesheetPaymentCompleted)
        assert event.amount == Decimal("1030")
        assert event.timesheet_id == created.id
        assert event.employee_id == "emp-1"
        assert event.work_id == "work-1"
        assert event.payment_account_id == "conta-1"
        assert event.period_label == "01/01 a 15/01/2025"

    def test_register_payment_on_paid_publishes_nothing(self, env: _Env) -> None:
        created = env.service.create(_create_input())
        env.service.register_payment(created.id, "conta-1")

        with pytest.raises(InvalidStateTransitionError):
            env.service.register_payment(created.id, "conta-1")

        assert len(env.publisher.events) == 1

    def test_no_event_when_update_fails(self) -> None:
        repository = FailingTimesheetRepository(fail_update=True)
        repository.seed(make_timesheet())
        env = _Env(repository)

        with pytest.raises(PersistenceError):
            env.service.register_payment("ts-1", "conta-1")

        assert env.publisher.events == []
        assert repository.get_by_id("ts-1").status == TimesheetStatus.OPEN

    def test_approve_and_pay(self, env: _Env) -> None:
        created = env.service.create(_create_input())

        paid = env.service.approve_and_pay(created.id, "conta-9")

        assert paid.status == TimesheetStatus.PAID
        assert env.publisher.events[0][1].payment_account_id == "conta-9"

    def test_approve_and_pay_rejected_after_approval(self, env: _Env) -> None:
        created = env.service.create(_create_input())
        env.service.approve(created.id)

        with pytest.raises(InvalidStateTransitionError):
            env.service.approve_and_pay(created.id, "conta-9")

        assert env.publisher.events == []


class TestEdit:
    """Edição."""

    def test_edit_recomputes_total(self, env: _Env) -> None:
        created = env.service.create(_create_input())

        edited = env.service.edit(created.id, _update_input())

        assert edited.total == Decimal("1000")
        assert edited.version == 2
        assert env.works.calls == ["work-1"]

    def test_changed_work_is_validated(self, env: _Env) -> None:
        created = env.service.create(_create_input())

        with pytest.raises(ReferenceNotFoundError):
            env.service.edit(created.id, _update_input(obraId="work-x"))

        edited = env.service.edit(created.id, _update_input(obraId="work-2"))
        assert edited.work_id == "work-2"

    def test_edit_rejected_after_approval(self, env: _Env) -> None:
        created = env.service.create(_create_input())
        env.service.approve(created.id)

        with pytest.raises(InvalidStateTransitionError):
            env.service.edit(created.id, _update_input())

    def test_edit_bad_date(self, env: _Env) -> None:
        created = env.service.create(_create_input())

        with pytest.raises(InvalidDateFormatError) as exc_info:
            env.service.edit(created.id, _update_input(periodoInicio="ontem"))

        assert exc_info.value.field == "periodoInicio"

    def test_stale_write_is_concurrent_modification(self, env: _Env) -> None:
        created = env.service.create(_create_input())
        stale = env.repository.get_by_id(created.id)
        env.service.approve(created.id)

        with pytest.raises(ConcurrentModificationError):
            env.repository.update(stale.approve())


class TestListing:
    """Listagens delegadas ao repositório."""

    def test_list_and_list_by_employee(self, env: _Env) -> None:
        env.service.create(_create_input())
        env.service.create(_create_input(funcionarioId="emp-2"))

        everything = env.service.list(ListFilters.normalized())
        only_emp2 = env.service.list_by_employee("emp-2", ListFilters.normalized())

        assert everything.pagination.total_items == 2
        assert [t.employee_id for t in only_emp2.items] == ["emp-2"]

    def test_list_filters_by_status(self, env: _Env) -> None:
        first = env.service.create(_create_input())
        env.service.create(_create_input(funcionarioId="emp-2"))
        env.service.approve(first.id)

        page = env.service.list(ListFilters.normalized(status="APPROVED_FOR_PAYMENT"))

        assert [t.id for t in page.items] == [first.id]
