"""Rotas HTTP da API: adapters de entrada.

Estrutura:
- routes/channels/: recebimento de webhooks de todos os tipos de canal
- routes/health/: liveness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
