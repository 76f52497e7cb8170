"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConcurrentModificationError,
    DomainError,
    ErrorKind,
    InfrastructureError,
    InvalidDateFormatError,
    InvalidPeriodError,
    InvalidStateTransitionError,
    PermissionDeniedError,
    PersistenceError,
    ReferenceNotFoundError,
    TimesheetNotFoundError,
)

__all__ = [
    "ConcurrentModificationError",
    "DomainError",
    "ErrorKind",
    "InfrastructureError",
    "InvalidDateFormatError",
    "InvalidPeriodError",
    "InvalidStateTransitionError",
    "PermissionDeniedError",
    "PersistenceError",
    "ReferenceNotFoundError",
    "TimesheetNotFoundError",
]
