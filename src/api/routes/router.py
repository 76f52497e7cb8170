"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.timesheets.router import employee_router, router as timesheets_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(
        timesheets_router,
        prefix="/apontamentos",
        tags=["apontamentos"],
    )
    api_router.include_router(
        employee_router,
        prefix="/funcionarios",
        tags=["apontamentos"],
    )

    return api_router
