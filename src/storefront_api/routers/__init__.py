"""Routers: the composed API router and its feature sub-routers."""

from storefront_api.routers.api import (
    FEATURE_PREFIXES,
    build_api_router,
    build_route_pipeline,
)

__all__ = ["FEATURE_PREFIXES", "build_api_router", "build_route_pipeline"]
