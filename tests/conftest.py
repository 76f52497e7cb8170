"""Configuração do pytest para o núcleo de apontamentos."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


_SETTINGS_ENV_VARS = (
    "ENVIRONMENT",
    "SERVICE_NAME",
    "DEBUG",
    "LOG_LEVEL",
    "TIMESHEET_STORE_BACKEND",
    "PAYMENT_RECORDS_LIMIT",
    "DIRECTORY_SEED_PATH",
    "ROLE_TABLE_PATH",
    "PRIVILEGED_ROLE",
    "ROLE_HEADER",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
)


@pytest.fixture(scope="session", autouse=True)
def _test_logging() -> None:
    """Logging JSON em DEBUG durante toda a sessão de testes."""
    from app.bootstrap import initialize_test_app

    initialize_test_app()


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Settings relidas a cada teste; variáveis do ambiente local não vazam."""
    from config.settings import clear_settings_cache

    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()
