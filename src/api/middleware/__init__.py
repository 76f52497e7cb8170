"""Middlewares HTTP."""

from api.middleware.correlation import CORRELATION_HEADER, CorrelationIdMiddleware

__all__ = ["CORRELATION_HEADER", "CorrelationIdMiddleware"]
