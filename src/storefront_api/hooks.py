"""StageHook base and the StageLogHook diagnostics hook."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import structlog

from storefront_api.context import RouteContext
from storefront_api.exceptions import RouteException

if TYPE_CHECKING:
    from storefront_api.stage import RouteStage

logger = structlog.get_logger(__name__)


class StageHook:
    """Base abstraction for lifecycle hooks. All methods are no-op by default."""

    async def on_pipeline_start(self, ctx: RouteContext) -> None:
        pass

    async def on_pipeline_end(self, ctx: RouteContext) -> None:
        pass

    async def on_stage(
        self,
        ctx: RouteContext,
        stage: RouteStage,
        error: RouteException | None,
    ) -> None:
        pass


class StageLogHook(StageHook):
    """Logs every stage outcome with its duration. Installed in development mode."""

    _STARTED_KEY = "_stage_log_started"

    async def on_pipeline_start(self, ctx: RouteContext) -> None:
        ctx.state[self._STARTED_KEY] = time.perf_counter()
        logger.debug(
            "route_pipeline_started",
            method=ctx.request.method,
            path=ctx.request.url.path,
        )

    async def on_stage(
        self,
        ctx: RouteContext,
        stage: RouteStage,
        error: RouteException | None,
    ) -> None:
        logger.debug(
            "route_stage_finished",
            stage=type(stage).__name__,
            order=stage.order.value,
            outcome="FAILED" if error is not None else "OK",
            reason=str(error) if error is not None else None,
        )

    async def on_pipeline_end(self, ctx: RouteContext) -> None:
        started = ctx.state.pop(self._STARTED_KEY, None)
        elapsed = (time.perf_counter() - started) * 1000 if started is not None else None
        logger.debug(
            "route_pipeline_finished",
            path=ctx.request.url.path,
            authenticated=ctx.is_authenticated,
            duration_ms=elapsed,
        )
