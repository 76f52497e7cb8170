"""Consumidor do evento de pagamento de apontamento.

Registra a saída de caixa correspondente no armazenamento do financeiro.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.domain.events import PAYMENT_COMPLETED_EVENT, TimesheetPaymentCompleted
from app.domain.payment_record import PaymentRecord

if TYPE_CHECKING:
    from app.protocols.event_publisher import EventSubscriberProtocol
    from app.protocols.payment_record_store import PaymentRecordStoreProtocol

logger = logging.getLogger(__name__)


class PaymentLedger:
    """Livro de pagamentos alimentado por eventos."""

    def __init__(self, store: PaymentRecordStoreProtocol) -> None:
        self._store = store

    def subscribe_to(self, subscriber: EventSubscriberProtocol) -> None:
        subscriber.subscribe(PAYMENT_COMPLETED_EVENT, self.handle)

    def handle(self, event_name: str, payload: Any) -> None:
        if not isinstance(payload, TimesheetPaymentCompleted):
            logger.warning(
                "payment_ledger_unexpected_payload",
                extra={"event_name": event_name, "payload_type": type(payload).__name__},
            )
            return

        record = PaymentRecord.from_event(payload)
        self._store.append(record)
        logger.info(
            "payment_record_created",
            extra={
                "record_id": record.id,
                "timesheet_id": record.timesheet_id,
                "amount": str(record.amount),
            },
        )

    def records_for(self, employee_id: str) -> list[PaymentRecord]:
        return self._store.list_by_employee(employee_id)
