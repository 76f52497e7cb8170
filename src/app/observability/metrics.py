"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente (BigQuery, CloudWatch Insights, etc.).

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Replicação: contadores por lote (solicitados, sucessos, falhas)
- Transição: counter de mudanças de status de apontamento

Uso:
    from app.observability.metrics import record_latency, record_replication_batch

    start = time.perf_counter()
    # ... operação ...
    latency_ms = (time.perf_counter() - start) * 1000
    record_latency("timesheet_service", "approve", latency_ms, correlation_id)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "timesheet_service")
        operation: Nome da operação (ex: "create", "approve")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_replication_batch(
    requested: int,
    succeeded: int,
    failed: int,
    correlation_id: str | None = None,
) -> None:
    """Registra contadores de um lote de replicação."""
    logger.info(
        "metric_replication_batch",
        extra={
            "metric_type": "replication_batch",
            "component": "replicate_timesheets",
            "requested": requested,
            "succeeded": succeeded,
            "failed": failed,
            "correlation_id": correlation_id,
        },
    )


def record_status_transition(
    from_status: str,
    to_status: str,
    correlation_id: str | None = None,
) -> None:
    """Registra uma mudança de status efetivada."""
    logger.info(
        "metric_status_transition",
        extra={
            "metric_type": "status_transition",
            "component": "timesheet",
            "from_status": from_status,
            "to_status": to_status,
            "correlation_id": correlation_id,
        },
    )
