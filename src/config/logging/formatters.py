"""Formatter de logs JSON.

Todo log estruturado carrega: timestamp, level, logger, message,
correlation_id e service. Campos passados em ``extra`` são anexados.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {"timestamp": "2025-01-16T10:30:00", "level": "INFO",
         "logger": "app.services.timesheet_service",
         "message": "timesheet_created", "correlation_id": "abc-123",
         "service": "master_construtora", "timesheet_id": "..."}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
