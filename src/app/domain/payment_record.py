"""Registro de pagamento mantido pelo financeiro."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.events import TimesheetPaymentCompleted


@dataclass(frozen=True, slots=True)
class PaymentRecord:
    """Saída de caixa referente a um apontamento pago."""

    id: str
    timesheet_id: str
    employee_id: str
    work_id: str
    period_label: str
    amount: Decimal
    paid_at: datetime
    payment_account_id: str

    @classmethod
    def from_event(cls, event: TimesheetPaymentCompleted) -> PaymentRecord:
        return cls(
            id=str(uuid.uuid4()),
            timesheet_id=event.timesheet_id,
            employee_id=event.employee_id,
            work_id=event.work_id,
            period_label=event.period_label,
            amount=event.amount,
            paid_at=event.paid_at,
            payment_account_id=event.payment_account_id,
        )
