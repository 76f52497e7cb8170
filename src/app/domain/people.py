"""Cadastros consultados pelo núcleo de apontamentos.

Funcionário e obra pertencem a outros módulos; aqui ficam apenas os
campos que os diretórios em memória precisam para responder às
consultas de existência.
"""

from __future__ import annotations

from datetime import date, datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class EmployeeStatus(StrEnum):
    ACTIVE = "Ativo"
    INACTIVE = "Inativo"


class Employee(BaseModel):
    """Funcionário da construtora."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(..., description="Identificador do funcionário.")
    name: str = Field(..., description="Nome completo.")
    document_id: str = Field(default="", description="CPF.")
    position: str = Field(default="", description="Cargo/função.")
    hire_date: date | None = Field(default=None, description="Data de contratação.")
    base_salary: Decimal = Field(default=Decimal("0"), ge=0)
    daily_rate: Decimal = Field(default=Decimal("0"), ge=0, description="Diária contratual.")
    status: EmployeeStatus = Field(default=EmployeeStatus.ACTIVE)
    deleted_at: datetime | None = Field(default=None, description="Marcador de exclusão lógica.")

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class Work(BaseModel):
    """Obra (canteiro) referenciada pelos apontamentos."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(..., description="Identificador da obra.")
    name: str = Field(default="", description="Nome da obra.")
    status: str = Field(default="Em Andamento")
    deleted_at: datetime | None = None


__all__ = ["Employee", "EmployeeStatus", "Work"]
