"""Protocolos e contratos do core da aplicação."""

from .event_publisher import EventHandler, EventPublisherProtocol, EventSubscriberProtocol
from .lookups import EmployeeLookupProtocol, WorkLookupProtocol
from .payment_record_store import PaymentRecordStoreProtocol
from .timesheet_repository import TimesheetRepositoryProtocol

__all__ = [
    "EmployeeLookupProtocol",
    "EventHandler",
    "EventPublisherProtocol",
    "EventSubscriberProtocol",
    "PaymentRecordStoreProtocol",
    "TimesheetRepositoryProtocol",
    "WorkLookupProtocol",
]
