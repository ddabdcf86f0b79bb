"""CartInitializer — hydrates the cart from the session, and save_cart()."""

from __future__ import annotations

import structlog

from storefront_api.context import RouteContext
from storefront_api.models import CartData
from storefront_api.stage import RouteStage, StageOrder

logger = structlog.get_logger(__name__)

CART_SESSION_KEY = "cartData"


class CartInitializer(RouteStage):
    """Loads the cart stored in the session into ``ctx.cart``."""

    order = StageOrder.CART

    def __init__(self, *, session_key: str = CART_SESSION_KEY) -> None:
        self._session_key = session_key

    async def resolve(self, ctx: RouteContext) -> None:
        session = ctx.session
        if not session:
            return
        raw = session.get(self._session_key)
        if raw is None:
            return
        if not isinstance(raw, dict):
            logger.warning("cart_session_data_discarded", reason="not an object")
            session.pop(self._session_key, None)
            return
        try:
            ctx.cart = CartData.from_dict(raw)
        except ValueError as exc:
            logger.warning("cart_session_data_discarded", reason=str(exc))
            session.pop(self._session_key, None)


def save_cart(ctx: RouteContext, *, session_key: str = CART_SESSION_KEY) -> bool:
    """Write ``ctx.cart`` back to the session. Returns False without a session."""
    session = ctx.session
    if session is None:
        return False
    if ctx.cart.is_empty:
        session.pop(session_key, None)
    else:
        session[session_key] = ctx.cart.to_dict()
    return True
