"""Middleware de correlation_id.

Lê ``x-correlation-id`` do request (ou gera um novo), disponibiliza no
contexto para logs e devolve o mesmo valor no header da resposta.
"""

from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.observability import correlation_scope, record_latency

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "x-correlation-id"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Propaga correlation_id e registra latência por request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
            started_at = time.perf_counter()
            response = await call_next(request)
            response.headers[CORRELATION_HEADER] = correlation_id
            record_latency(
                "http",
                f"{request.method} {request.url.path}",
                (time.perf_counter() - started_at) * 1000,
                correlation_id,
            )
            logger.info(
                "http_request_completed",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                },
            )
            return response
