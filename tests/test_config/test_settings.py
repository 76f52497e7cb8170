"""Testes das settings lidas do ambiente."""

from __future__ import annotations

from pathlib import Path

import pytest

from app.bootstrap import validate_runtime_settings
from config.settings import (
    AuthzSettings,
    BaseSettings,
    PaginationSettings,
    StoreSettings,
    clear_settings_cache,
    get_authz_settings,
    get_base_settings,
    get_pagination_settings,
    get_store_settings,
    validate_all,
)


class TestBaseSettings:
    def test_defaults(self) -> None:
        settings = get_base_settings()

        assert settings.environment == "development"
        assert settings.service_name == "master_construtora"
        assert settings.validate() == []

    def test_reads_environment_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        clear_settings_cache()

        assert get_base_settings().is_production

    def test_debug_forbidden_in_production(self) -> None:
        settings = BaseSettings(environment="production", debug=True)

        assert "DEBUG=true proibido em production" in settings.validate()

    def test_invalid_log_level(self) -> None:
        errors = BaseSettings(log_level="VERBOSE").validate()

        assert errors == ["LOG_LEVEL inválido: VERBOSE"]


class TestStoreSettings:
    def test_only_memory_backend(self) -> None:
        assert StoreSettings().validate() == []
        assert StoreSettings(timesheet_backend="postgres").validate() == [
            "TIMESHEET_STORE_BACKEND inválido: postgres",
        ]

    def test_reads_limit_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAYMENT_RECORDS_LIMIT", "5")
        clear_settings_cache()

        assert get_store_settings().payment_records_limit == 5

    def test_missing_directory_seed_file(self, tmp_path: Path) -> None:
        missing = tmp_path / "cadastros.yaml"

        assert StoreSettings(directory_seed_path=str(missing)).validate() == [
            f"DIRECTORY_SEED_PATH não encontrado: {missing}",
        ]

    def test_reads_seed_path_from_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        seed = tmp_path / "cadastros.yaml"
        seed.write_text("employees: []\n", encoding="utf-8")
        monkeypatch.setenv("DIRECTORY_SEED_PATH", str(seed))
        clear_settings_cache()

        settings = get_store_settings()

        assert settings.resolved_seed_path == seed
        assert settings.validate() == []


class TestAuthzSettings:
    def test_defaults(self) -> None:
        settings = get_authz_settings()

        assert settings.role_header == "X-User-Role"
        assert settings.privileged_role == "ADMIN"
        assert settings.resolved_path is None

    def test_missing_role_table_file(self, tmp_path: Path) -> None:
        missing = tmp_path / "roles.yaml"

        errors = AuthzSettings(role_table_path=str(missing)).validate()

        assert errors == [f"ROLE_TABLE_PATH não encontrado: {missing}"]

    def test_reads_path_from_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        table = tmp_path / "roles.yaml"
        table.write_text("privileged_role: ADMIN\nroles: {}\n", encoding="utf-8")
        monkeypatch.setenv("ROLE_TABLE_PATH", str(table))
        clear_settings_cache()

        assert get_authz_settings().resolved_path == table


class TestPaginationSettings:
    def test_defaults(self) -> None:
        settings = get_pagination_settings()

        assert (settings.default_page_size, settings.max_page_size) == (20, 100)

    def test_max_below_default(self) -> None:
        errors = PaginationSettings(default_page_size=50, max_page_size=10).validate()

        assert errors == ["MAX_PAGE_SIZE deve ser >= DEFAULT_PAGE_SIZE"]


class TestRuntimeValidation:
    def test_validate_all_ok_by_default(self) -> None:
        assert validate_all() == []

    def test_development_only_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIMESHEET_STORE_BACKEND", "postgres")
        clear_settings_cache()

        validate_runtime_settings()

    def test_production_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("TIMESHEET_STORE_BACKEND", "postgres")
        clear_settings_cache()

        with pytest.raises(RuntimeError, match="Configuração inválida para production"):
            validate_runtime_settings()
