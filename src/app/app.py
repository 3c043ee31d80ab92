"""Entrypoint da aplicação Ban Bunny.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.clients import create_async_redis_client
from config.logging import get_logger
from config.settings import get_log_store_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Inicializa o cliente Redis (quando é o backend do log)

    Shutdown:
    - Fecha a conexão Redis
    """
    logger.info("app_starting", extra={"service": "ban-bunny"})
    validate_runtime_settings()
    app.state.redis_client = None
    app.state.redis_required = get_log_store_settings().backend == "redis"

    if app.state.redis_required:
        try:
            app.state.redis_client = create_async_redis_client()
        except Exception as exc:
            logger.warning("redis_client_not_ready", extra={"error_type": type(exc).__name__})

    yield

    logger.info("app_shutting_down", extra={"service": "ban-bunny"})
    redis_client = getattr(app.state, "redis_client", None)
    if redis_client is not None:
        close_async = getattr(redis_client, "aclose", None)
        close_sync = getattr(redis_client, "close", None)
        if callable(close_async):
            await close_async()
        elif callable(close_sync):
            await close_sync()


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="Ban Bunny",
        description="Relay de eventos de moderação: log em Redis e avisos no Discord",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "ban-bunny"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting Ban Bunny in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
