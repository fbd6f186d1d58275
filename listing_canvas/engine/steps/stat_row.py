"""Bedrooms / bathrooms / square footage with drawn glyphs.

Glyphs are built from line, arc and rectangle primitives so no icon font is
needed. Each glyph fits an ``s``x``s`` box whose top-left is ``(x, y)``.
"""

from __future__ import annotations

from collections.abc import Callable

from PIL import ImageDraw

from listing_canvas.engine.compositor import draw_text, resolve_color
from listing_canvas.engine.context import RenderContext
from listing_canvas.engine.registry import draw_step
from listing_canvas.utils.formatting import stat_value

Glyph = Callable[[ImageDraw.ImageDraw, int, int, int, tuple, int], None]

_GAP = 40


def _bed(draw: ImageDraw.ImageDraw, x: int, y: int, s: int, color: tuple, width: int) -> None:
    # Headboard, mattress, legs
    draw.line((x, y + s * 0.2, x, y + s), fill=color, width=width)
    draw.rectangle((x, y + s * 0.55, x + s, y + s * 0.8), outline=color, width=width)
    draw.rectangle((x + s * 0.12, y + s * 0.35, x + s * 0.42, y + s * 0.55), outline=color, width=width)
    draw.line((x + s, y + s * 0.8, x + s, y + s), fill=color, width=width)


def _bath(draw: ImageDraw.ImageDraw, x: int, y: int, s: int, color: tuple, width: int) -> None:
    # Tub bowl, rim, tap
    draw.arc((x, y + s * 0.2, x + s, y + s), start=0, end=180, fill=color, width=width)
    draw.line((x, y + s * 0.6, x + s, y + s * 0.6), fill=color, width=width)
    draw.line((x + s * 0.2, y + s * 0.6, x + s * 0.2, y + s * 0.1), fill=color, width=width)
    draw.arc((x + s * 0.2, y, x + s * 0.45, y + s * 0.25), start=180, end=360, fill=color, width=width)


def _area(draw: ImageDraw.ImageDraw, x: int, y: int, s: int, color: tuple, width: int) -> None:
    # Square with corner ticks
    draw.rectangle((x + s * 0.15, y + s * 0.15, x + s * 0.85, y + s * 0.85), outline=color, width=width)
    for cx, cy in ((x, y), (x + s, y), (x, y + s), (x + s, y + s)):
        dx = s * 0.15 if cx == x else -s * 0.15
        dy = s * 0.15 if cy == y else -s * 0.15
        draw.line((cx, cy, cx + dx, cy + dy), fill=color, width=width)


def stat_items(ctx: RenderContext) -> list[tuple[Glyph, str]]:
    d = ctx.descriptor
    return [
        (_bed, f"{stat_value(d.bedrooms)} Beds"),
        (_bath, f"{stat_value(d.bathrooms)} Baths"),
        (_area, f"{stat_value(d.square_feet, thousands=True)} Sq Ft"),
    ]


@draw_step("stat_row", description="Beds, baths and area")
def stat_row(ctx: RenderContext) -> None:
    region = ctx.region("stats")
    if region is None:
        return

    draw = ImageDraw.Draw(ctx.canvas)
    color = resolve_color(ctx, region.color)
    icon = region.icon
    line_width = max(2, icon // 12)
    font = ctx.fonts.get(region.size, region.weight)
    baseline = ctx.region_y("stats")
    x = region.x
    step = region.line_height or round(region.size * 1.6)

    last = baseline
    for i, (glyph, label) in enumerate(stat_items(ctx)):
        y = baseline + i * step if region.direction == "column" else baseline
        text_x = x
        if icon:
            glyph(draw, x, y - icon + icon // 8, icon, color, line_width)
            text_x = x + icon + icon // 2
        draw_text(ctx, "stats", label, x=text_x, y=y)
        last = y
        if region.direction != "column":
            x = text_x + round(font.getlength(label)) + _GAP
    ctx.cursors["stats"] = last
