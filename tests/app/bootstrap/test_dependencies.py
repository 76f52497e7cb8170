"""Testes das factories do bootstrap."""

from __future__ import annotations

import logging
from decimal import Decimal
from pathlib import Path

import pytest

from app.authz import RoleTableError
from app.bootstrap import build_container, initialize_test_app
from app.bootstrap.dependencies_services import create_permission_resolver
from app.bootstrap.dependencies_stores import (
    create_directory_seed,
    create_payment_record_store,
    create_timesheet_repository,
)
from app.domain.events import PAYMENT_COMPLETED_EVENT, TimesheetPaymentCompleted
from app.infra.stores import DirectorySeed, DirectorySeedError
from config.settings import AuthzSettings, StoreSettings
from tests.fakes.fake_timesheet_infra import FIXED_NOW


def test_memory_backend_is_default() -> None:
    assert create_timesheet_repository().count() == 0


def test_unknown_backend_raises() -> None:
    with pytest.raises(ValueError, match="TIMESHEET_STORE_BACKEND inválido"):
        create_timesheet_repository(StoreSettings(timesheet_backend="postgres"))


def test_payment_store_respects_limit() -> None:
    store = create_payment_record_store(StoreSettings(payment_records_limit=3))

    assert store.get_records() == []


def test_resolver_loads_packaged_roles() -> None:
    resolver = create_permission_resolver()

    assert "GERENTE_OBRAS" in resolver.table.role_names
    assert resolver.resolve("ADMIN") >= resolver.resolve("GERENTE_OBRAS")


def test_resolver_rejects_privileged_role_mismatch() -> None:
    with pytest.raises(ValueError, match="PRIVILEGED_ROLE=DIRETOR"):
        create_permission_resolver(AuthzSettings(privileged_role="DIRETOR"))


def test_resolver_fails_on_broken_role_file(tmp_path: Path) -> None:
    broken = tmp_path / "roles.yaml"
    broken.write_text("roles: [nao, e, mapa]\n", encoding="utf-8")

    with pytest.raises(RoleTableError):
        create_permission_resolver(AuthzSettings(role_table_path=str(broken)))


def test_container_wires_ledger_to_event_bus() -> None:
    container = build_container()
    event = TimesheetPaymentCompleted(
        timesheet_id="ts-1",
        employee_id="emp-1",
        work_id="work-1",
        period_label="01/01 a 15/01/2025",
        amount=Decimal("1030"),
        paid_at=FIXED_NOW,
        payment_account_id="conta-1",
    )

    container.event_bus.publish(PAYMENT_COMPLETED_EVENT, event)

    [record] = container.ledger.records_for("emp-1")
    assert record.timesheet_id == "ts-1"
    assert container.event_bus.handler_count(PAYMENT_COMPLETED_EVENT) == 1


def test_development_loads_packaged_seed() -> None:
    seed = create_directory_seed()

    assert len(seed.employees) == 4
    assert len(seed.works) == 2


def test_production_without_seed_path_is_empty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")

    assert create_directory_seed() == DirectorySeed()


def test_configured_seed_path_wins(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    seed_file = tmp_path / "cadastros.yaml"
    seed_file.write_text("employees:\n  - id: emp-5\n    name: Ana\n", encoding="utf-8")
    monkeypatch.setenv("ENVIRONMENT", "production")

    seed = create_directory_seed(StoreSettings(directory_seed_path=str(seed_file)))

    assert [e.id for e in seed.employees] == ["emp-5"]
    assert seed.works == ()


def test_missing_seed_path_fails(tmp_path: Path) -> None:
    with pytest.raises(DirectorySeedError):
        create_directory_seed(StoreSettings(directory_seed_path=str(tmp_path / "x.yaml")))


def test_container_directories_come_from_seed() -> None:
    container = build_container()

    assert container.employees.get("func-001") is not None
    assert container.works.exists("obra-002")


def test_initialize_test_app_logs_at_debug() -> None:
    initialize_test_app()

    root = logging.getLogger()
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    for handler in root.handlers:
        for filter_ in handler.filters:
            filter_.filter(record)

    assert root.level == logging.DEBUG
    assert record.service.endswith("_test")
