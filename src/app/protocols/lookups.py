"""Consultas de existência em cadastros de outros módulos."""

from __future__ import annotations

from abc import ABC, abstractmethod


class EmployeeLookupProtocol(ABC):
    """Contrato mínimo do cadastro de funcionários."""

    @abstractmethod
    def exists(self, employee_id: str) -> bool: ...


class WorkLookupProtocol(ABC):
    """Contrato mínimo do cadastro de obras."""

    @abstractmethod
    def exists(self, work_id: str) -> bool: ...
