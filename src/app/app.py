"""Entrypoint do relay de pedidos Shopify ↔ WhatsApp.

Este módulo é o ponto de entrada principal do serviço.
Carrega settings uma única vez, monta os componentes e expõe a
aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:create_app --factory --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:create_app --factory --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.dependencies import create_relay_components
from config.logging import get_logger
from config.settings import (
    BaseSettings,
    ShopifySettings,
    WhatsAppSettings,
    get_base_settings,
    get_shopify_settings,
    get_whatsapp_settings,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Loga início e fim do ciclo de vida (não há conexões persistentes)."""
    logger.info("app_starting", extra={"service": app.title})
    yield
    logger.info("app_shutting_down", extra={"service": app.title})


def create_app(
    base: BaseSettings | None = None,
    whatsapp: WhatsAppSettings | None = None,
    shopify: ShopifySettings | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Settings omitidas são carregadas do ambiente aqui, uma única vez.

    Raises:
        RuntimeError: Se settings inválidas em staging/production
    """
    base = base or get_base_settings()
    whatsapp = whatsapp or get_whatsapp_settings()
    shopify = shopify or get_shopify_settings()

    initialize_app(base)
    settings_errors = validate_runtime_settings(base, whatsapp, shopify)

    fastapi_app = FastAPI(
        title=base.service_name,
        description="Relay de webhooks de pedidos Shopify para WhatsApp",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.state.relay = create_relay_components(whatsapp, shopify)
    fastapi_app.state.settings_errors = settings_errors

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"environment": base.environment})

    return fastapi_app


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting order-relay in development mode")
    uvicorn.run(
        "app.app:create_app",
        factory=True,
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
