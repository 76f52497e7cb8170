"""Resultado da replicação de apontamentos para a próxima quinzena.

Estrutura pensada para resposta 207 Multi-Status: resumo com totais e
detalhes de sucesso e falha por funcionário, na ordem de entrada.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

REASON_OPEN_TIMESHEET_EXISTS = "employee already has an open timesheet"
REASON_NO_TEMPLATE = "no prior timesheet to use as template"
REASON_INTERNAL_ERROR = "internal error while replicating timesheet"


class ReplicationSummary(BaseModel):
    """Totais da operação."""

    model_config = ConfigDict(populate_by_name=True)

    requested: int = Field(default=0, ge=0, serialization_alias="totalSolicitado")
    succeeded: int = Field(default=0, ge=0, serialization_alias="totalSucesso")
    failed: int = Field(default=0, ge=0, serialization_alias="totalFalha")


class ReplicationSuccess(BaseModel):
    """Funcionário replicado com sucesso."""

    model_config = ConfigDict(frozen=True)

    employee_id: str = Field(..., serialization_alias="funcionarioId")
    new_timesheet_id: str = Field(..., serialization_alias="novoApontamentoId")


class ReplicationFailure(BaseModel):
    """Funcionário que não pôde ser replicado e o motivo."""

    model_config = ConfigDict(frozen=True)

    employee_id: str = Field(..., serialization_alias="funcionarioId")
    reason: str = Field(..., serialization_alias="motivo")


class ReplicationResult(BaseModel):
    """Resultado agregado do lote."""

    summary: ReplicationSummary = Field(
        default_factory=ReplicationSummary, serialization_alias="resumo"
    )
    successes: list[ReplicationSuccess] = Field(
        default_factory=list, serialization_alias="sucessos"
    )
    failures: list[ReplicationFailure] = Field(
        default_factory=list, serialization_alias="falhas"
    )

    @classmethod
    def for_batch(cls, requested: int) -> ReplicationResult:
        return cls(summary=ReplicationSummary(requested=requested))

    def add_success(self, employee_id: str, new_timesheet_id: str) -> None:
        self.successes.append(
            ReplicationSuccess(employee_id=employee_id, new_timesheet_id=new_timesheet_id)
        )
        self.summary.succeeded += 1

    def add_failure(self, employee_id: str, reason: str) -> None:
        self.failures.append(ReplicationFailure(employee_id=employee_id, reason=reason))
        self.summary.failed += 1

    @property
    def has_failures(self) -> bool:
        return self.summary.failed > 0

    def to_response(self) -> dict[str, object]:
        """Serializa com as chaves do contrato HTTP."""
        return self.model_dump(by_alias=True)
