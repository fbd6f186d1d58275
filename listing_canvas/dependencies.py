"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from listing_canvas.config import settings
from listing_canvas.engine.config import RenderConfig
from listing_canvas.engine.coordinator import RenderCoordinator


def get_settings():
    return settings


@lru_cache(maxsize=1)
def get_coordinator() -> RenderCoordinator:
    return RenderCoordinator(RenderConfig.from_settings(settings))
