"""Testes de config.logging.

Cobre: configure_logging, get_logger, log_rejection,
CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_rejection,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "msg", level: int = logging.INFO, name: str = "test") -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_default_level_is_info(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("ERROR", logging.ERROR)],
    )
    def test_level_is_case_insensitive(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_replaces_handlers(self) -> None:
        """Chamadas repetidas não duplicam handlers."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        configure_logging()
        assert len(root.handlers) == 1

    def test_handler_carries_correlation_filter(self) -> None:
        configure_logging(correlation_id_getter=lambda: "corr-1")
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)

    def test_quiets_third_party_loggers(self) -> None:
        configure_logging(level="INFO")
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "master_construtora"


class TestGetLogger:
    """Testes para get_logger."""

    def test_returns_named_logger(self) -> None:
        logger = get_logger("app.services.timesheet_service")
        assert logger.name == "app.services.timesheet_service"
        assert logger is get_logger("app.services.timesheet_service")


class TestLogRejection:
    """Testes para log_rejection."""

    def test_logs_warning_with_code_and_status(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_rejection(logger, "approve", "REGRA_NEGOCIO_VIOLADA", 409, timesheet_id="ts-1")

        logger.warning.assert_called_once()
        assert logger.warning.call_args[0][0] == "operation_rejected"
        extra = logger.warning.call_args[1]["extra"]
        assert extra == {
            "rejected": True,
            "operation": "approve",
            "error_code": "REGRA_NEGOCIO_VIOLADA",
            "status_code": 409,
            "timesheet_id": "ts-1",
        }

    def test_without_identifiers(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_rejection(logger, "create", "PAYLOAD_INVALIDO", 422)

        extra = logger.warning.call_args[1]["extra"]
        assert "timesheet_id" not in extra
        assert extra["status_code"] == 422


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_adds_correlation_id_and_service(self) -> None:
        filter_ = CorrelationIdFilter("master_construtora", lambda: "corr-123")
        record = _record()

        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "master_construtora"

    def test_explicit_correlation_id_wins(self) -> None:
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"

        filter_.filter(record)

        assert record.correlation_id == "explicit-id"

    def test_empty_without_getter(self) -> None:
        filter_ = CorrelationIdFilter("svc")
        record = _record(level=logging.ERROR)

        assert filter_.filter(record) is True
        assert record.correlation_id == ""


class TestCreateJsonFormatter:
    """Testes para create_json_formatter."""

    def test_constants(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
        }

    def test_formats_renamed_fields_and_extras(self) -> None:
        formatter = create_json_formatter()
        record = _record(msg="timesheet_approved", name="app.services")
        record.correlation_id = "abc-123"
        record.service = "master_construtora"
        record.timesheet_id = "ts-1"

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "timesheet_approved"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "app.services"
        assert payload["correlation_id"] == "abc-123"
        assert payload["timesheet_id"] == "ts-1"
        assert "timestamp" in payload

    def test_keeps_non_ascii_text(self) -> None:
        formatter = create_json_formatter()
        record = _record(msg="apontamento não encontrado")
        record.correlation_id = ""
        record.service = "svc"

        assert "não" in formatter.format(record)
