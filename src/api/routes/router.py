"""Agregador de rotas — registra os routers da API.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.bans.router import router as bans_router
from api.routes.health.router import router as health_router
from api.routes.triggers.router import router as triggers_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(triggers_router, prefix="/triggers", tags=["triggers"])
    api_router.include_router(bans_router, prefix="/bans", tags=["bans"])

    return api_router
