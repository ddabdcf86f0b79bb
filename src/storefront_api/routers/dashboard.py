"""Dashboard endpoint exposing checkout pricing constants."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from storefront_api.config import Settings
from storefront_api.responses import api_response


def build_dashboard_router(settings: Settings) -> APIRouter:
    router = APIRouter()
    checkout = settings.dashboard.checkout

    @router.get("/dashboardData")
    async def get_dashboard_data() -> dict[str, Any]:
        return api_response(
            "Dashboard data collected successfully",
            dashboardData={
                "tax": checkout.tax_rate,
                "deliveryCharge": checkout.delivery_charge,
            },
        )

    return router
