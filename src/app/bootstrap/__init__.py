"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e monta o container
de dependências.

Uso:
    from app.bootstrap import initialize_app, get_container

    initialize_app()
    container = get_container()
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.bootstrap.dependencies import ServiceContainer, build_container
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, validate_all

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa logging para testes (DEBUG)."""
    settings = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{settings.service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` apenas registra alerta.
    """
    environment = get_base_settings().environment
    errors = validate_all()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


@lru_cache(maxsize=1)
def get_container() -> ServiceContainer:
    """Container do processo (singleton)."""
    return build_container()


__all__ = [
    "ServiceContainer",
    "build_container",
    "get_container",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
