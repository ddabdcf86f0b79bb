"""pipeline_dependency() — factory producing FastAPI-compatible dependency callables."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

import structlog
from fastapi import HTTPException
from starlette.requests import Request

from storefront_api.context import RouteContext
from storefront_api.exceptions import (
    PipelineInternalError,
    RouteAbort,
    RouteException,
)
from storefront_api.pipeline import Pipeline, ResolvedPipeline

logger = structlog.get_logger(__name__)

ROUTE_CONTEXT_ATTR = "route_context"


def pipeline_dependency(pipeline: Pipeline) -> Callable[..., Awaitable[RouteContext]]:
    """Return a FastAPI-compatible dependency that runs the pipeline.

    The resulting context is also stored on ``request.state`` so that
    handlers can fetch it with ``get_route_context``.
    """
    resolved = pipeline.resolve()
    dep = _make_dependency(resolved)
    dep._pipeline_resolved = resolved  # type: ignore[attr-defined]
    return dep


def _make_dependency(
    resolved: ResolvedPipeline,
) -> Callable[..., Awaitable[RouteContext]]:
    async def dependency(request: Request) -> RouteContext:
        ctx = RouteContext(request=request)
        setattr(request.state, ROUTE_CONTEXT_ATTR, ctx)

        for hook in resolved.hooks:
            await hook.on_pipeline_start(ctx)

        try:
            for stage in resolved.stages:
                try:
                    await stage.resolve(ctx)
                except RouteException as exc:
                    for hook in resolved.hooks:
                        await hook.on_stage(ctx, stage, exc)
                    raise
                else:
                    for hook in resolved.hooks:
                        await hook.on_stage(ctx, stage, None)
        except RouteAbort as exc:
            for hook in resolved.hooks:
                await hook.on_pipeline_end(ctx)
            raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
        except Exception as exc:
            # Non-abort RouteExceptions land here too and surface as 500
            for hook in resolved.hooks:
                await hook.on_pipeline_end(ctx)
            logger.exception("route_pipeline_error", path=request.url.path)
            wrapped = PipelineInternalError("Internal pipeline error", cause=exc)
            raise HTTPException(status_code=500, detail=wrapped.detail) from wrapped

        for hook in resolved.hooks:
            await hook.on_pipeline_end(ctx)

        return ctx

    return dependency


def get_route_context(request: Request) -> RouteContext:
    """Dependency returning the context built by the route pipeline."""
    ctx: RouteContext | None = getattr(request.state, ROUTE_CONTEXT_ATTR, None)
    if ctx is None:
        raise HTTPException(status_code=500, detail="Route pipeline did not run")
    return ctx
