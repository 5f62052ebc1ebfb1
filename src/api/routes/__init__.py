"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (inscrição, health)
- Leitura inicial do request (método, corpo JSON)
- Delegação para use_cases
- Respostas HTTP apropriadas

Estrutura:
- routes/subscribe/: POST /api/subscribe
- routes/health/: health checks e readiness
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
