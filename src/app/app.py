"""Entrypoint do serviço de inscrição na newsletter.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import create_api_router
from api.routes.subscribe.router import method_not_allowed_exception_handler
from app.bootstrap import initialize_app, validate_runtime_settings
from app.observability import CORRELATION_ID_HEADER, CorrelationIdMiddleware
from config.logging import get_logger
from config.settings import get_base_settings

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
    - Abre o AsyncClient usado nas chamadas à API de contatos

    Shutdown:
    - Fecha o AsyncClient
    """
    service_name = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service_name})
    validate_runtime_settings()
    app.state.http_client = httpx.AsyncClient()

    yield

    logger.info("app_shutting_down", extra={"service": service_name})
    http_client = getattr(app.state, "http_client", None)
    if http_client is not None:
        await http_client.aclose()
    app.state.http_client = None


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    base = get_base_settings()
    fastapi_app = FastAPI(
        title="Newsletter Subscribe",
        description="Inscrição de emails na newsletter via API Systeme.io",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None if base.is_production else "/docs",
        redoc_url=None,
        openapi_url=None if base.is_production else "/openapi.json",
    )

    # CORS: o formulário do site chama o endpoint direto do navegador
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(base.cors_allowed_origins),
        allow_methods=["POST"],
        allow_headers=["Content-Type", CORRELATION_ID_HEADER],
        expose_headers=[CORRELATION_ID_HEADER],
    )
    fastapi_app.add_middleware(CorrelationIdMiddleware)

    fastapi_app.include_router(create_api_router())
    fastapi_app.add_exception_handler(
        StarletteHTTPException, method_not_allowed_exception_handler
    )

    logger.info("app_configured", extra={"service": base.service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting newsletter-subscribe in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
