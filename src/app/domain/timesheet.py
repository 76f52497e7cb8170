"""Agregado Apontamento Quinzenal.

Registro de remuneração de um funcionário em uma obra durante um período
fixo (quinzena). Transições retornam uma nova instância; a instância
original nunca é alterada, então uma operação recusada não deixa rastro.

Regras:
- total = diária × dias trabalhados + adicionais − descontos − adiantamentos
  (propriedade derivada, nunca armazenada)
- PAID é terminal
- ``version`` incrementa a cada transição ou edição (controle otimista)
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime, timedelta
from decimal import Decimal
from typing import Any

from fsm import TimesheetOperation, TimesheetStatus, create_fsm
from utils.errors import InvalidPeriodError, InvalidStateTransitionError

ZERO = Decimal("0")


def compute_total(
    daily_rate: Decimal,
    days_worked: int,
    additions: Decimal,
    deductions: Decimal,
    advances: Decimal,
) -> Decimal:
    """Fórmula única do valor total, usada na criação, edição e replicação."""
    return (daily_rate * days_worked) + additions - deductions - advances


def ensure_valid_period(period_start: date, period_end: date) -> None:
    """Exige início estritamente anterior ao fim.

    Raises:
        InvalidPeriodError: se início >= fim.
    """
    if period_start >= period_end:
        raise InvalidPeriodError(
            f"Início do período ({period_start.isoformat()}) deve ser anterior "
            f"ao fim ({period_end.isoformat()})"
        )


def _now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class Timesheet:
    """Apontamento quinzenal de um funcionário em uma obra.

    Attributes:
        id: Identificador (uuid4), imutável
        employee_id: Funcionário apontado
        work_id: Obra do apontamento
        period_start: Primeiro dia do período (inclusivo)
        period_end: Último dia do período (inclusivo)
        daily_rate: Valor da diária
        days_worked: Dias trabalhados no período
        additions: Valores adicionais
        deductions: Descontos
        advances: Adiantamentos já pagos
        status: Status do ciclo de vida
        created_at: Criação (definido uma vez)
        updated_at: Última alteração
        version: Versão para controle de concorrência otimista
    """

    id: str
    employee_id: str
    work_id: str
    period_start: date
    period_end: date
    daily_rate: Decimal = ZERO
    days_worked: int = 0
    additions: Decimal = ZERO
    deductions: Decimal = ZERO
    advances: Decimal = ZERO
    status: TimesheetStatus = TimesheetStatus.OPEN
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    version: int = 1

    def __post_init__(self) -> None:
        if self.days_worked < 0:
            raise ValueError("days_worked não pode ser negativo")
        for name in ("daily_rate", "additions", "deductions", "advances"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} não pode ser negativo")

    # ------------------------------------------------------------------
    # Derivados
    # ------------------------------------------------------------------

    @property
    def total(self) -> Decimal:
        """Valor total calculado a partir dos valores atuais."""
        return compute_total(
            self.daily_rate,
            self.days_worked,
            self.additions,
            self.deductions,
            self.advances,
        )

    @property
    def period_length(self) -> timedelta:
        """Distância entre início e fim do período."""
        return self.period_end - self.period_start

    @property
    def period_label(self) -> str:
        """Rótulo legível do período, ex: '01/01 a 15/01/2025'."""
        return (
            f"{self.period_start.strftime('%d/%m')} a "
            f"{self.period_end.strftime('%d/%m/%Y')}"
        )

    @property
    def is_open(self) -> bool:
        return self.status == TimesheetStatus.OPEN

    # ------------------------------------------------------------------
    # Criação
    # ------------------------------------------------------------------

    @classmethod
    def open_new(
        cls,
        *,
        employee_id: str,
        work_id: str,
        period_start: date,
        period_end: date,
        daily_rate: Decimal,
        days_worked: int,
        additions: Decimal = ZERO,
        deductions: Decimal = ZERO,
        advances: Decimal = ZERO,
        now: datetime | None = None,
    ) -> Timesheet:
        """Cria um novo apontamento em aberto."""
        ensure_valid_period(period_start, period_end)
        moment = now or _now()
        return cls(
            id=str(uuid.uuid4()),
            employee_id=employee_id,
            work_id=work_id,
            period_start=period_start,
            period_end=period_end,
            daily_rate=daily_rate,
            days_worked=days_worked,
            additions=additions,
            deductions=deductions,
            advances=advances,
            status=TimesheetStatus.OPEN,
            created_at=moment,
            updated_at=moment,
        )

    def next_from_template(self, now: datetime | None = None) -> Timesheet:
        """Gera o apontamento do período seguinte usando este como template.

        Copia funcionário, obra e diária; o novo período começa no dia
        seguinte ao fim deste e tem a mesma duração. Campos transacionais
        voltam a zero.
        """
        moment = now or _now()
        new_start = self.period_end + timedelta(days=1)
        return Timesheet(
            id=str(uuid.uuid4()),
            employee_id=self.employee_id,
            work_id=self.work_id,
            period_start=new_start,
            period_end=new_start + self.period_length,
            daily_rate=self.daily_rate,
            status=TimesheetStatus.OPEN,
            created_at=moment,
            updated_at=moment,
        )

    # ------------------------------------------------------------------
    # Transições
    # ------------------------------------------------------------------

    def approve(self, now: datetime | None = None) -> Timesheet:
        """OPEN → APPROVED_FOR_PAYMENT."""
        return self._apply(TimesheetOperation.APPROVE, now)

    def register_payment(self, now: datetime | None = None) -> Timesheet:
        """OPEN ou APPROVED_FOR_PAYMENT → PAID."""
        return self._apply(TimesheetOperation.REGISTER_PAYMENT, now)

    def approve_and_pay(self, now: datetime | None = None) -> Timesheet:
        """OPEN → PAID diretamente (atalho)."""
        return self._apply(TimesheetOperation.APPROVE_AND_PAY, now)

    def edit(
        self,
        *,
        work_id: str,
        period_start: date,
        period_end: date,
        daily_rate: Decimal,
        days_worked: int,
        additions: Decimal,
        deductions: Decimal,
        advances: Decimal,
        now: datetime | None = None,
    ) -> Timesheet:
        """Sobrescreve obra, período e valores de um apontamento em aberto.

        O status é checado antes do período.
        """
        edited = self._apply(
            TimesheetOperation.EDIT,
            now,
            work_id=work_id,
            period_start=period_start,
            period_end=period_end,
            daily_rate=daily_rate,
            days_worked=days_worked,
            additions=additions,
            deductions=deductions,
            advances=advances,
        )
        ensure_valid_period(period_start, period_end)
        return edited

    def _apply(
        self,
        operation: TimesheetOperation,
        now: datetime | None,
        **changes: Any,
    ) -> Timesheet:
        machine = create_fsm(self.id, self.status)
        result = machine.apply(operation)
        if not result.success:
            raise InvalidStateTransitionError(
                operation=operation.value,
                current_status=self.status.value,
                reason=result.error_reason or "transição recusada",
            )
        return replace(
            self,
            status=machine.current_state,
            updated_at=now or _now(),
            version=self.version + 1,
            **changes,
        )

    # ------------------------------------------------------------------
    # Serialização
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Serializa para a borda HTTP (chaves do contrato público)."""
        return {
            "id": self.id,
            "funcionarioId": self.employee_id,
            "obraId": self.work_id,
            "periodoInicio": self.period_start.isoformat(),
            "periodoFim": self.period_end.isoformat(),
            "diaria": str(self.daily_rate),
            "diasTrabalhados": self.days_worked,
            "adicionais": str(self.additions),
            "descontos": str(self.deductions),
            "adiantamentos": str(self.advances),
            "valorTotalCalculado": str(self.total),
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
            "versao": self.version,
        }
