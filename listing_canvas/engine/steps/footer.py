"""Decorative footer bar."""

from __future__ import annotations

from listing_canvas.engine.compositor import fill_region
from listing_canvas.engine.context import RenderContext
from listing_canvas.engine.registry import draw_step


@draw_step("footer", description="Footer bar")
def footer(ctx: RenderContext) -> None:
    fill_region(ctx, "footer")
