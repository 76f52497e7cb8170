"""Comandos de entrada do serviço de apontamentos.

As chaves públicas seguem o contrato JSON existente (camelCase em
português). Datas chegam como string YYYY-MM-DD e são validadas pelo
serviço, que devolve ``InvalidDateFormatError`` com o campo ofensor.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class _Command(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class CreateTimesheetInput(_Command):
    """Dados para abrir um apontamento."""

    employee_id: str = Field(..., min_length=1, alias="funcionarioId")
    work_id: str = Field(..., min_length=1, alias="obraId")
    period_start: str = Field(..., alias="periodoInicio", description="YYYY-MM-DD")
    period_end: str = Field(..., alias="periodoFim", description="YYYY-MM-DD")
    daily_rate: Decimal = Field(..., ge=0, alias="diaria")
    days_worked: int = Field(default=0, ge=0, alias="diasTrabalhados")
    additions: Decimal = Field(default=Decimal("0"), ge=0, alias="valorAdicional")
    deductions: Decimal = Field(default=Decimal("0"), ge=0, alias="descontos")
    advances: Decimal = Field(default=Decimal("0"), ge=0, alias="adiantamento")


class UpdateTimesheetInput(_Command):
    """Novos valores de um apontamento em aberto."""

    work_id: str = Field(..., min_length=1, alias="obraId")
    period_start: str = Field(..., alias="periodoInicio", description="YYYY-MM-DD")
    period_end: str = Field(..., alias="periodoFim", description="YYYY-MM-DD")
    daily_rate: Decimal = Field(..., ge=0, alias="diaria")
    days_worked: int = Field(default=0, ge=0, alias="diasTrabalhados")
    additions: Decimal = Field(default=Decimal("0"), ge=0, alias="valorAdicional")
    deductions: Decimal = Field(default=Decimal("0"), ge=0, alias="descontos")
    advances: Decimal = Field(default=Decimal("0"), ge=0, alias="adiantamento")


class RegisterPaymentInput(_Command):
    """Conta bancária da empresa usada no pagamento."""

    payment_account_id: str = Field(..., min_length=1, alias="contaBancariaId")


class ReplicateTimesheetsInput(_Command):
    """Lote de funcionários a replicar para a próxima quinzena."""

    employee_ids: list[str] = Field(default_factory=list, alias="funcionarioIds")


__all__ = [
    "CreateTimesheetInput",
    "RegisterPaymentInput",
    "ReplicateTimesheetsInput",
    "UpdateTimesheetInput",
]
