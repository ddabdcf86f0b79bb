"""Storefront API - request pipeline and router composition for a storefront web API."""

from storefront_api.bodies import parsed_body
from storefront_api.catalog import CatalogBackend, InMemoryCatalog
from storefront_api.config import Settings, load_settings
from storefront_api.context import RouteContext
from storefront_api.dependency import get_route_context, pipeline_dependency
from storefront_api.exceptions import (
    AuthenticationRequired,
    MalformedRequest,
    PipelineInternalError,
    ResourceNotFound,
    RouteAbort,
    RouteException,
    TokenVerificationError,
)
from storefront_api.guards import require_api_token
from storefront_api.hooks import StageHook, StageLogHook
from storefront_api.main import create_app
from storefront_api.models import CartData, CartItem, Product, Vendor
from storefront_api.pipeline import Pipeline
from storefront_api.responses import ApiResponse, api_response
from storefront_api.routers import build_api_router, build_route_pipeline
from storefront_api.stage import RouteStage, StageOrder
from storefront_api.stages import (
    ApiTokenExtractor,
    CartInitializer,
    MultipartPreprocessor,
    RouteStateInitializer,
    save_cart,
)
from storefront_api.tokens import TokenVerifier

__all__ = [
    "ApiResponse",
    "ApiTokenExtractor",
    "AuthenticationRequired",
    "CartData",
    "CartInitializer",
    "CartItem",
    "CatalogBackend",
    "InMemoryCatalog",
    "MalformedRequest",
    "MultipartPreprocessor",
    "Pipeline",
    "PipelineInternalError",
    "Product",
    "ResourceNotFound",
    "RouteAbort",
    "RouteContext",
    "RouteException",
    "RouteStage",
    "RouteStateInitializer",
    "Settings",
    "StageHook",
    "StageLogHook",
    "StageOrder",
    "TokenVerificationError",
    "TokenVerifier",
    "Vendor",
    "api_response",
    "build_api_router",
    "build_route_pipeline",
    "create_app",
    "get_route_context",
    "load_settings",
    "parsed_body",
    "pipeline_dependency",
    "require_api_token",
    "save_cart",
]
