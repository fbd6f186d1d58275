"""Background fill."""

from __future__ import annotations

from listing_canvas.engine.compositor import fill_rect
from listing_canvas.engine.context import RenderContext
from listing_canvas.engine.registry import Rect, draw_step


@draw_step("background", description="Solid template background")
def background(ctx: RenderContext) -> None:
    t = ctx.template
    fill_rect(ctx, Rect(0, 0, t.width, t.height), t.background)
