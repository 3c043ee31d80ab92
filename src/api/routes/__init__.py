"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (triggers da plataforma, health, leitura)
- Validação inicial de request (corpo JSON, query params)
- Delegação para use cases
- Respostas HTTP apropriadas

Estrutura:
- routes/triggers/: AppInstall, ModAction, AppUpgrade
- routes/bans/: leitura dos bans gravados
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
