"""Configuração centralizada de logging.

Logging estruturado JSON com:
- Campos obrigatórios (correlation_id, service, level, logger, message)
- Nível configurável por ambiente (LOG_LEVEL)
- Helper para registrar recusas de regra de negócio sem PII

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do serviço (app/bootstrap/)
    configure_logging(level="INFO", service_name="master_construtora")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("timesheet_created", extra={"timesheet_id": "..."})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "master_construtora"

# Loggers de terceiros que poluem o nível INFO
_QUIET_LOGGERS = ("uvicorn.access", "httpx")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização (app/bootstrap/). Chamadas
    repetidas substituem o handler anterior em vez de duplicá-lo.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id do
            contexto atual (ex: app.observability.get_correlation_id).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]

    if level_upper != "DEBUG":
        for name in _QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo (service e correlation_id vêm do filter)."""
    return logging.getLogger(name)


def log_rejection(
    logger: logging.Logger,
    operation: str,
    code: str,
    status_code: int,
    **identifiers: str,
) -> None:
    """Log de operação recusada por regra de negócio ou validação.

    Args:
        logger: Logger instance.
        operation: Operação recusada (ex: "PATCH /apontamentos/{id}/aprovar").
        code: Código estável do erro (ex: "REGRA_NEGOCIO_VIOLADA").
        status_code: Status HTTP devolvido.
        identifiers: IDs técnicos úteis ao rastreio (nunca dados pessoais).

    Exemplo:
        log_rejection(logger, "approve", "REGRA_NEGOCIO_VIOLADA", 409, timesheet_id="t-1")
    """
    extra: dict[str, object] = {
        "rejected": True,
        "operation": operation,
        "error_code": code,
        "status_code": status_code,
    }
    extra.update(identifiers)
    logger.warning("operation_rejected", extra=extra)
