"""structlog setup, applied by the application factory."""

from __future__ import annotations

import logging

import structlog

from storefront_api.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure structlog for the given settings.

    Development mode renders human-readable console lines and always
    logs at DEBUG so the token extractor's diagnostics are visible.
    Production renders one JSON object per line at ``settings.log_level``.
    """
    if settings.is_development:
        level = logging.DEBUG
        renderer: structlog.typing.Processor = structlog.dev.ConsoleRenderer()
    else:
        level = logging.getLevelName(settings.log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
