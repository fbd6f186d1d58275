"""Brand panels, logos and tagline."""

from __future__ import annotations

from listing_canvas.engine.compositor import draw_text, fill_region, paste_logo
from listing_canvas.engine.context import RenderContext
from listing_canvas.engine.registry import draw_step

# Drawn back to front
_PANELS = ("header_bar", "banner", "info_bar", "logo_panel")


@draw_step("header", description="Header/banner bars, company logo, secondary logo, tagline")
def header(ctx: RenderContext) -> None:
    for name in _PANELS:
        fill_region(ctx, name)

    paste_logo(ctx, "logo", ctx.logo_ref)
    paste_logo(ctx, "secondary_logo", ctx.secondary_logo_ref)

    for name in ("tagline", "tagline_sub"):
        region = ctx.region(name)
        if region is not None:
            draw_text(ctx, name, region.text)
