"""Rotas HTTP da API.

- routes/health/: liveness (GET / e GET /health)
- routes/webhook/: handshake e recebimento de entregas
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
