"""Headline and description."""

from __future__ import annotations

from listing_canvas.engine.compositor import draw_lines
from listing_canvas.engine.context import RenderContext
from listing_canvas.engine.registry import draw_step


@draw_step("copy", description="Upper-cased headline then wrapped description lines")
def copy_text(ctx: RenderContext) -> None:
    for name in ("headline", "description"):
        block = ctx.text_blocks.get(name)
        if block is not None:
            draw_lines(ctx, name, block.lines)
