"""Protocolo de persistência do agregado Apontamento.

Falhas de armazenamento devem ser levantadas como ``PersistenceError``.
``update`` aplica controle otimista: a versão gravada precisa ser
exatamente ``timesheet.version - 1``, senão ``ConcurrentModificationError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.pagination import ListFilters, Page
    from app.domain.timesheet import Timesheet


class TimesheetRepositoryProtocol(ABC):
    """Contrato síncrono do repositório de apontamentos."""

    @abstractmethod
    def save(self, timesheet: Timesheet) -> None:
        """Grava um apontamento novo."""

    @abstractmethod
    def get_by_id(self, timesheet_id: str) -> Timesheet | None:
        """Retorna o apontamento ou None se não existir."""

    @abstractmethod
    def update(self, timesheet: Timesheet) -> None:
        """Substitui o apontamento gravado pela nova versão."""

    @abstractmethod
    def list(self, filters: ListFilters) -> Page[Timesheet]:
        """Lista apontamentos com filtros e paginação."""

    @abstractmethod
    def list_by_employee(self, employee_id: str, filters: ListFilters) -> Page[Timesheet]:
        """Lista apontamentos de um funcionário com filtros e paginação."""

    @abstractmethod
    def exists_open_for_employee(self, employee_id: str) -> bool:
        """True se o funcionário tem apontamento com status OPEN."""

    @abstractmethod
    def get_latest_by_employee(self, employee_id: str) -> Timesheet | None:
        """Apontamento com maior fim de período do funcionário, ou None."""
