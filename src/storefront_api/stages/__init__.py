"""Built-in pipeline stages."""

from storefront_api.stages.cart import CartInitializer, save_cart
from storefront_api.stages.multipart import MultipartPreprocessor
from storefront_api.stages.route_state import RouteStateInitializer
from storefront_api.stages.token import ApiTokenExtractor

__all__ = [
    "ApiTokenExtractor",
    "CartInitializer",
    "MultipartPreprocessor",
    "RouteStateInitializer",
    "save_cart",
]
