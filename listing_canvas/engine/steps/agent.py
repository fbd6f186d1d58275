"""Agent block: circular photo (or silhouette), name, title, phone, brand mark."""

from __future__ import annotations

import logging

from PIL import Image, ImageChops, ImageDraw

from listing_canvas.engine.compositor import draw_text, paste_logo, resolve_color
from listing_canvas.engine.context import RenderContext
from listing_canvas.engine.registry import Region, draw_step
from listing_canvas.utils.formatting import format_phone, title_case_name
from listing_canvas.utils.imaging import circle_mask, circular_crop

logger = logging.getLogger(__name__)


def _silhouette(ctx: RenderContext, diameter: int) -> Image.Image:
    """Grey disc with a head-and-shoulders figure."""
    ss = max(ctx.config.mask_supersample, 1)
    big = diameter * ss
    tile = Image.new("RGBA", (big, big), (0, 0, 0, 0))
    draw = ImageDraw.Draw(tile)
    draw.ellipse((0, 0, big - 1, big - 1), fill=resolve_color(ctx, ctx.config.silhouette_fill))
    figure = resolve_color(ctx, ctx.config.silhouette_figure)
    head = big * 0.18
    cx, cy = big / 2, big * 0.38
    draw.ellipse((cx - head, cy - head, cx + head, cy + head), fill=figure)
    draw.ellipse((big * 0.2, big * 0.62, big * 0.8, big * 1.15), fill=figure)
    tile = tile.resize((diameter, diameter), Image.Resampling.LANCZOS)
    # Clip the shoulders to the disc
    tile.putalpha(ImageChops.multiply(tile.getchannel("A"), circle_mask(diameter, ss)))
    return tile


def _photo(ctx: RenderContext, region: Region, ref: str | None) -> None:
    diameter = region.w
    if diameter <= 0:
        return
    image = ctx.image(ref)
    if image is not None:
        disc = circular_crop(image, diameter, ctx.config.mask_supersample)
    else:
        logger.debug("Agent photo unavailable; drawing silhouette")
        disc = _silhouette(ctx, diameter)
    ctx.canvas.alpha_composite(disc, (region.x, region.y))

    if region.stroke:
        ImageDraw.Draw(ctx.canvas).ellipse(
            (region.x, region.y, region.x + diameter - 1, region.y + diameter - 1),
            outline=resolve_color(ctx, region.color),
            width=region.stroke,
        )
    ctx.cursors["agent_photo"] = region.y + diameter


@draw_step("agent", description="Agent photo, name, title, phone and secondary logo")
def agent(ctx: RenderContext) -> None:
    info = ctx.descriptor.agent
    if info is None or not (info.name or info.phone or info.photo_ref):
        return

    region = ctx.region("agent_photo")
    if region is not None:
        _photo(ctx, region, info.photo_ref)

    draw_text(ctx, "agent_name", title_case_name(info.name))
    draw_text(ctx, "agent_title", info.title or ctx.config.default_agent_title)
    draw_text(ctx, "agent_phone", format_phone(info.phone))
    paste_logo(ctx, "agent_logo", ctx.secondary_logo_ref)
