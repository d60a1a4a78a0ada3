"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.channels.router import router as channels_router
from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    """Cria router principal com health e recebimento por canal."""
    api_router = APIRouter()

    # Health checks (sem prefixo para /health na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Webhooks de todos os canais: /c/{channel_type}/{channel_uuid}/receive
    api_router.include_router(channels_router, prefix="/c", tags=["channels"])

    return api_router
