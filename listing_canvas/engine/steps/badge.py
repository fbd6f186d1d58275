"""Status badge: fixed-size box, status label line, price line."""

from __future__ import annotations

from listing_canvas.engine.compositor import draw_text, fill_region
from listing_canvas.engine.context import RenderContext
from listing_canvas.engine.registry import draw_step
from listing_canvas.utils.formatting import format_price


def status_text(ctx: RenderContext) -> str:
    return f"{ctx.descriptor.status_label.upper()}{ctx.template.status_label_suffix}"


@draw_step("badge", description="Status badge and price")
def badge(ctx: RenderContext) -> None:
    # The box never grows with its label
    fill_region(ctx, "badge")
    draw_text(ctx, "status_label", status_text(ctx))
    draw_text(ctx, "price", format_price(ctx.descriptor.price))
