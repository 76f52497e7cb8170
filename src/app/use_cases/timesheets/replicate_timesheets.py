"""Replicação em lote de apontamentos para a próxima quinzena.

Para cada funcionário, na ordem recebida:
1. já existe apontamento em aberto → falha, nada é gravado
2. não há apontamento anterior → falha (sem template)
3. gera o próximo período a partir do mais recente e grava
4. falha de persistência → falha genérica, o lote continua

O lote nunca é interrompido por um item; o resultado lista sucessos e
falhas na ordem de entrada.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.domain.replication import (
    REASON_INTERNAL_ERROR,
    REASON_NO_TEMPLATE,
    REASON_OPEN_TIMESHEET_EXISTS,
    ReplicationResult,
)
from app.observability import get_correlation_id, record_replication_batch
from utils.errors import InfrastructureError

if TYPE_CHECKING:
    from app.protocols.timesheet_repository import TimesheetRepositoryProtocol

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class ReplicateTimesheetsUseCase:
    """Gera, para um lote de funcionários, o apontamento do período seguinte."""

    def __init__(
        self,
        repository: TimesheetRepositoryProtocol,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._repository = repository
        self._clock = clock or _utc_now

    def execute(self, employee_ids: Sequence[str]) -> ReplicationResult:
        result = ReplicationResult.for_batch(len(employee_ids))

        for employee_id in employee_ids:
            try:
                self._replicate_one(employee_id, result)
            except InfrastructureError as exc:
                logger.error(
                    "timesheet_replication_item_failed",
                    extra={
                        "employee_id": employee_id,
                        "error_type": type(exc).__name__,
                    },
                )
                result.add_failure(employee_id, REASON_INTERNAL_ERROR)

        logger.info(
            "timesheet_replication_completed",
            extra={
                "requested": result.summary.requested,
                "succeeded": result.summary.succeeded,
                "failed": result.summary.failed,
            },
        )
        record_replication_batch(
            result.summary.requested,
            result.summary.succeeded,
            result.summary.failed,
            get_correlation_id() or None,
        )
        return result

    def _replicate_one(self, employee_id: str, result: ReplicationResult) -> None:
        if self._repository.exists_open_for_employee(employee_id):
            result.add_failure(employee_id, REASON_OPEN_TIMESHEET_EXISTS)
            return

        template = self._repository.get_latest_by_employee(employee_id)
        if template is None:
            result.add_failure(employee_id, REASON_NO_TEMPLATE)
            return

        replica = template.next_from_template(now=self._clock())
        self._repository.save(replica)

        logger.debug(
            "timesheet_replicated",
            extra={
                "employee_id": employee_id,
                "template_id": template.id,
                "timesheet_id": replica.id,
            },
        )
        result.add_success(employee_id, replica.id)
