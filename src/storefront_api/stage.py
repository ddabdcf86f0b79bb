"""RouteStage abstract base class and StageOrder enum."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar

from storefront_api.context import RouteContext


class StageOrder(Enum):
    """Pipeline stage slots, defining strict execution order."""

    PREPROCESSING = "preprocessing"
    ROUTE_STATE = "route_state"
    AUTHENTICATION = "authentication"
    CART = "cart"
    CUSTOM = "custom"

    @property
    def rank(self) -> int:
        _RANK = {
            "preprocessing": 1,
            "route_state": 2,
            "authentication": 3,
            "cart": 4,
            "custom": 5,
        }
        return _RANK[self.value]


class RouteStage(ABC):
    """Base abstraction for every unit of per-request work."""

    order: ClassVar[StageOrder]

    @abstractmethod
    async def resolve(self, ctx: RouteContext) -> None: ...
