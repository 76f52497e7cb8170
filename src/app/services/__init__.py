"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.payment_ledger import PaymentLedger
from app.services.timesheet_service import TimesheetService, parse_date

__all__ = [
    "PaymentLedger",
    "TimesheetService",
    "parse_date",
]
