"""API router composition: ACME responder, route pipeline, feature routers."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from storefront_api._types import VerifyCallback
from storefront_api.catalog import CatalogBackend, InMemoryCatalog
from storefront_api.config import Settings
from storefront_api.dependency import pipeline_dependency
from storefront_api.hooks import StageLogHook
from storefront_api.pipeline import Pipeline
from storefront_api.routers.accounts import build_accounts_router
from storefront_api.routers.acme import build_acme_router
from storefront_api.routers.auth import build_auth_router
from storefront_api.routers.cart import build_cart_router
from storefront_api.routers.dashboard import build_dashboard_router
from storefront_api.routers.products import build_products_router
from storefront_api.routers.vendors import build_vendors_router
from storefront_api.stages import (
    ApiTokenExtractor,
    CartInitializer,
    MultipartPreprocessor,
    RouteStateInitializer,
)
from storefront_api.tokens import TokenVerifier

FEATURE_PREFIXES = ("/auth", "/accounts", "/vendors", "/products", "/cart")


def build_route_pipeline(settings: Settings, verify: VerifyCallback) -> Pipeline:
    """Multipart preprocessing, route state, token extraction, cart loading."""
    pipeline = Pipeline(
        MultipartPreprocessor(data_field=settings.multipart.data_field),
        RouteStateInitializer(),
        ApiTokenExtractor(
            verify,
            session_key=settings.auth.session_token_key,
            strict_scheme=settings.auth.strict_scheme,
        ),
        CartInitializer(),
    )
    if settings.is_development:
        pipeline.add_hook(StageLogHook())
    return pipeline


def build_api_router(
    settings: Settings,
    *,
    catalog: CatalogBackend | None = None,
    verify: VerifyCallback | None = None,
    pipeline: Pipeline | None = None,
) -> APIRouter:
    """Compose the API router.

    The ACME challenge route is registered first and runs no pipeline.
    Every other route depends on the route pipeline, so the per-request
    context exists before any feature handler runs.
    """
    if catalog is None:
        catalog = InMemoryCatalog()
    verify = verify or TokenVerifier.from_settings(settings)
    if pipeline is None:
        pipeline = build_route_pipeline(settings, verify)

    api = APIRouter()
    api.include_router(build_acme_router(settings))

    scoped = APIRouter(dependencies=[Depends(pipeline_dependency(pipeline))])
    auth, accounts, vendors, products, cart = FEATURE_PREFIXES
    scoped.include_router(build_auth_router(settings, verify), prefix=auth, tags=["auth"])
    scoped.include_router(build_accounts_router(), prefix=accounts, tags=["accounts"])
    scoped.include_router(build_vendors_router(catalog), prefix=vendors, tags=["vendors"])
    scoped.include_router(build_products_router(catalog), prefix=products, tags=["products"])
    scoped.include_router(build_cart_router(settings, catalog), prefix=cart, tags=["cart"])
    scoped.include_router(build_dashboard_router(settings), tags=["dashboard"])

    api.include_router(scoped)
    return api
