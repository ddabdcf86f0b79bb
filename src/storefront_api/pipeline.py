"""Pipeline class — ordered container for RouteStages."""

from __future__ import annotations

from dataclasses import dataclass

from storefront_api.hooks import StageHook
from storefront_api.stage import RouteStage


@dataclass(frozen=True)
class ResolvedPipeline:
    """Immutable, pre-computed execution plan."""

    stages: tuple[RouteStage, ...]
    hooks: tuple[StageHook, ...] = ()


class Pipeline:
    """Ordered container of RouteStage instances.

    Stages run by ``StageOrder`` rank whatever order they were added in;
    stages sharing a rank keep their insertion order.
    """

    def __init__(self, *stages: RouteStage) -> None:
        self._stages: list[RouteStage] = list(stages)
        self._hooks: list[StageHook] = []
        self._resolved: ResolvedPipeline | None = None

    def add(self, *stages: RouteStage) -> Pipeline:
        self._stages.extend(stages)
        self._resolved = None
        return self

    def add_hook(self, hook: StageHook) -> Pipeline:
        self._hooks.append(hook)
        self._resolved = None
        return self

    def resolve(self) -> ResolvedPipeline:
        if self._resolved is None:
            self._resolved = ResolvedPipeline(
                stages=tuple(sorted(self._stages, key=lambda s: s.order.rank)),
                hooks=tuple(self._hooks),
            )
        return self._resolved
