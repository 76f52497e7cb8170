"""Eventos de domínio publicados pelo módulo de pessoal."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any

PAYMENT_COMPLETED_EVENT = "pessoal:pagamento_apontamento_realizado"


@dataclass(frozen=True, slots=True)
class TimesheetPaymentCompleted:
    """Payload do evento de pagamento de apontamento realizado.

    Consumido pelo financeiro para registrar a saída de caixa.
    """

    timesheet_id: str
    employee_id: str
    work_id: str
    period_label: str
    amount: Decimal
    paid_at: datetime
    payment_account_id: str

    def to_log_dict(self) -> dict[str, Any]:
        """Campos seguros para log (sem conta bancária)."""
        return {
            "timesheet_id": self.timesheet_id,
            "employee_id": self.employee_id,
            "work_id": self.work_id,
            "amount": str(self.amount),
        }
