"""Application factory.

Serve with::

    uvicorn storefront_api.main:create_app --factory
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from storefront_api.catalog import CatalogBackend, InMemoryCatalog
from storefront_api.config import Settings, load_settings
from storefront_api.exceptions import RouteAbort
from storefront_api.logging_config import setup_logging
from storefront_api.responses import (
    http_exception_handler,
    route_abort_handler,
    validation_exception_handler,
)
from storefront_api.routers import build_api_router
from storefront_api.tokens import TokenVerifier

logger = structlog.get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    catalog: CatalogBackend | None = None,
) -> FastAPI:
    """Build the storefront API for ``settings`` (loaded from the environment if omitted)."""
    settings = settings or load_settings()
    setup_logging(settings)

    if catalog is None:
        catalog = InMemoryCatalog()
    verifier = TokenVerifier.from_settings(settings)

    app = FastAPI(title="Storefront API", debug=settings.is_development)
    app.state.settings = settings

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session.secret_key,
        session_cookie=settings.session.cookie_name,
        max_age=settings.session.max_age,
        https_only=settings.session.https_only,
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RouteAbort, route_abort_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(build_api_router(settings, catalog=catalog, verify=verifier))

    logger.info("storefront_api_configured", server_mode=settings.server_mode)
    return app
