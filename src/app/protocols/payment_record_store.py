"""Protocolo de persistência dos registros de pagamento do financeiro."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.payment_record import PaymentRecord


class PaymentRecordStoreProtocol(ABC):
    """Contrato mínimo do livro de pagamentos."""

    @abstractmethod
    def append(self, record: PaymentRecord) -> None: ...

    @abstractmethod
    def list_by_employee(self, employee_id: str) -> list[PaymentRecord]: ...
