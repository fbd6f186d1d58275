"""Street and locality lines."""

from __future__ import annotations

from listing_canvas.engine.compositor import draw_text, fill_region
from listing_canvas.engine.context import RenderContext
from listing_canvas.engine.registry import draw_step
from listing_canvas.utils.formatting import format_street


@draw_step("address", description="Street line (styled per template) and city/state/zip")
def address(ctx: RenderContext) -> None:
    fill_region(ctx, "address_bar")
    street = ctx.descriptor.street_line
    if street:
        draw_text(ctx, "street", format_street(street, ctx.template.address_style))
    draw_text(ctx, "locality", ctx.descriptor.locality_line)
