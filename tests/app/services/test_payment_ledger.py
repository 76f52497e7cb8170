"""Testes do livro de pagamentos."""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal

from app.domain.events import PAYMENT_COMPLETED_EVENT, TimesheetPaymentCompleted
from app.infra.events.memory_bus import InMemoryEventBus
from app.infra.stores.memory_stores import MemoryPaymentRecordStore
from app.services.payment_ledger import PaymentLedger


def _event() -> TimesheetPaymentCompleted:
    return TimesheetPaymentCompleted(
        timesheet_id="ts-1",
        employee_id="emp-1",
        work_id="work-1",
        period_label="01/01 a 15/01/2025",
        amount=Decimal("1030"),
        paid_at=datetime(2025, 1, 16, tzinfo=UTC),
        payment_account_id="conta-1",
    )


def test_ledger_records_payment_from_event() -> None:
    bus = InMemoryEventBus()
    ledger = PaymentLedger(MemoryPaymentRecordStore())
    ledger.subscribe_to(bus)

    bus.publish(PAYMENT_COMPLETED_EVENT, _event())

    records = ledger.records_for("emp-1")
    assert len(records) == 1
    assert records[0].timesheet_id == "ts-1"
    assert records[0].amount == Decimal("1030")
    assert records[0].payment_account_id == "conta-1"


def test_ledger_ignores_unexpected_payload() -> None:
    store = MemoryPaymentRecordStore()
    ledger = PaymentLedger(store)

    ledger.handle(PAYMENT_COMPLETED_EVENT, {"timesheet_id": "ts-1"})

    assert store.get_records() == []
