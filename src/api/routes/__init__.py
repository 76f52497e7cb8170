"""Rotas HTTP da API.

Estrutura por recurso:
- routes/timesheets/: apontamentos quinzenais
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
- errors.py: handlers de exceção do núcleo
"""

from __future__ import annotations

from api.routes.errors import register_exception_handlers
from api.routes.router import create_api_router

__all__ = ["create_api_router", "register_exception_handlers"]
