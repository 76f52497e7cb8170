"""Tradução de erros tipados do núcleo para respostas HTTP.

Corpo de erro: {"error": {"code": ..., "message": ...}}
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from config.logging import log_rejection
from utils.errors import DomainError, ErrorKind, InfrastructureError

logger = logging.getLogger(__name__)

# Constante do starlette mudou de nome entre versões
HTTP_422 = 422

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.REFERENCE_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_DATE_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_PERIOD: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_STATE_TRANSITION: status.HTTP_409_CONFLICT,
    ErrorKind.CONCURRENT_MODIFICATION: status.HTTP_409_CONFLICT,
    ErrorKind.PERSISTENCE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
}


def error_body(code: str, message: str) -> dict[str, dict[str, str]]:
    return {"error": {"code": code, "message": message}}


async def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = STATUS_BY_KIND.get(exc.kind, status.HTTP_400_BAD_REQUEST)
    log_rejection(
        logger,
        f"{request.method} {request.url.path}",
        exc.code,
        status_code,
        error_kind=exc.kind.value,
    )
    return JSONResponse(status_code=status_code, content=error_body(exc.code, str(exc)))


async def _infrastructure_error_handler(request: Request, exc: InfrastructureError) -> JSONResponse:
    logger.error(
        "infrastructure_error",
        extra={
            "operation": f"{request.method} {request.url.path}",
            "error_type": type(exc).__name__,
        },
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(InfrastructureError.code, "Erro interno ao processar a requisição"),
    )


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    fields = [".".join(str(part) for part in err.get("loc", ())) for err in exc.errors()]
    log_rejection(
        logger,
        f"{request.method} {request.url.path}",
        "PAYLOAD_INVALIDO",
        HTTP_422,
        fields=",".join(fields),
    )
    return JSONResponse(
        status_code=HTTP_422,
        content=error_body("PAYLOAD_INVALIDO", f"Payload inválido: {', '.join(fields)}"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registra os handlers de erro do núcleo no app."""
    app.add_exception_handler(DomainError, _domain_error_handler)
    app.add_exception_handler(InfrastructureError, _infrastructure_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
