"""Storefront API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly: API reference first, then the catch-all
      dispatch route that hands every request to the ShopRouter
    - Global error handlers cover failures outside the dispatcher
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan

Design Decisions:
    - create_app() factory: tests inject a ShopRouter built on a fake client;
      the module-level app loads the client factory from settings lazily
    - FastAPI's generated docs disabled: its schema only sees the catch-all
      route, the registry-derived reference replaces it
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront_api.api.error_handlers import register_error_handlers
from storefront_api.api.routes import dispatch
from storefront_api.api.routes.reference import build_reference_router
from storefront_api.config import Settings, get_settings
from storefront_api.core.domain_types import ShopClientOptions
from storefront_api.infrastructure.client_loader import lazy_client_factory
from storefront_api.infrastructure.observability import setup_logging
from storefront_api.services.request_dispatch import ShopRouter
from storefront_api.services.shop_service import better_shop

logger = logging.getLogger(__name__)


def build_default_router(settings: Settings) -> ShopRouter:
    """Router backed by the client factory named in settings."""
    return better_shop(
        lazy_client_factory(settings.shop_client_factory),
        ShopClientOptions(cache_ttl_ms=settings.cache_ttl_ms),
        header_name=settings.shop_domain_header,
        not_found_status=settings.not_found_status,
    )


def create_app(
    shop_router: ShopRouter | None = None, settings: Settings | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    shop_router = shop_router or build_default_router(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        if not settings.shop_client_factory:
            logger.warning("SHOP_CLIENT_FACTORY is not set; requests will fail")
        logger.info(
            f"Storefront API started with {len(shop_router.operations)} operations",
        )
        yield
        logger.info("Storefront API shutting down")

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
    )
    app.state.shop_router = shop_router

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(build_reference_router(shop_router, settings))
    app.include_router(dispatch.router)

    register_error_handlers(app)
    return app


app = create_app()
