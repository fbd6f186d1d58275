"""Listing Canvas composition engine."""

from listing_canvas.engine.registry import draw_step, get_registry, register_template
from listing_canvas.engine.context import RenderContext
from listing_canvas.engine.compositor import Compositor
from listing_canvas.engine.coordinator import RenderCoordinator, RenderedAsset

__all__ = [
    "draw_step",
    "get_registry",
    "register_template",
    "RenderContext",
    "Compositor",
    "RenderCoordinator",
    "RenderedAsset",
]
