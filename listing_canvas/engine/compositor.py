"""Compositor — runs a template's draw steps in order over one canvas.

Composition is a pure function of the context: same descriptor, template
and decoded images in, same pixels out.
"""

from __future__ import annotations

import io
import logging
import time
from dataclasses import replace

from PIL import Image, ImageDraw

from listing_canvas.engine.context import RenderContext
from listing_canvas.engine.errors import RenderError
from listing_canvas.engine.registry import Rect, Region, StepRegistry, get_step_registry
from listing_canvas.engine.text_layout import layout
from listing_canvas.utils.imaging import fit_height, rgba, vertical_gradient

logger = logging.getLogger(__name__)

STATUS_COLOR = "status"

_H_ANCHOR = {"left": "l", "center": "m", "right": "r"}
_V_ANCHOR = {"baseline": "s", "middle": "m", "top": "a"}


class Compositor:
    """Draws a RenderContext onto a fresh canvas."""

    def __init__(self, steps: StepRegistry | None = None) -> None:
        self.steps = steps or get_step_registry()

    def compose(self, ctx: RenderContext) -> Image.Image:
        start = time.perf_counter()
        template = ctx.template
        ctx.canvas = Image.new("RGBA", template.size, rgba(template.background))
        prepare_text(ctx)

        for name in template.draw_order:
            spec = self.steps.get(name)
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
                ctx.completed_steps.append(name)
                logger.debug("  %s drawn in %.1fms", name, (time.perf_counter() - t0) * 1000)
            except RenderError:
                raise
            except Exception as e:
                ctx.errors[name] = str(e)
                logger.warning("  %s FAILED: %s", name, e)

        logger.debug(
            "Composed %s: %d/%d steps in %.0fms",
            template.id,
            len(ctx.completed_steps),
            len(template.draw_order),
            (time.perf_counter() - start) * 1000,
        )
        return ctx.canvas


def prepare_text(ctx: RenderContext) -> None:
    """Truncate and wrap the free-text fields against their regions' fonts."""
    descriptor = ctx.descriptor
    template = ctx.template

    headline = ctx.region("headline")
    if headline is not None and descriptor.headline:
        ctx.text_blocks["headline"] = layout(
            descriptor.headline.upper(),
            max_width=headline.w,
            measure=ctx.fonts.measure(headline.size, headline.weight),
            max_lines=headline.max_lines,
        )

    description = ctx.region("description")
    if description is not None and descriptor.description:
        ctx.text_blocks["description"] = layout(
            descriptor.description,
            max_width=description.w,
            measure=ctx.fonts.measure(description.size, description.weight),
            max_chars=template.description_chars,
            mode=template.truncation,
            max_lines=description.max_lines,
        )


def encode_png(image: Image.Image, compress_level: int = 6) -> bytes:
    buf = io.BytesIO()
    image.convert("RGB").save(buf, format="PNG", compress_level=compress_level)
    return buf.getvalue()


# --- Drawing helpers shared by the steps ---


def resolve_color(ctx: RenderContext, color: str) -> tuple[int, int, int, int]:
    if color == STATUS_COLOR:
        return rgba(ctx.descriptor.status.color)
    return rgba(color)


def fill_rect(ctx: RenderContext, rect: Rect, color: str) -> None:
    """Alpha-blend a filled rectangle onto the canvas."""
    fill = resolve_color(ctx, color)
    if fill[3] == 255:
        ImageDraw.Draw(ctx.canvas).rectangle(
            (rect.x, rect.y, rect.x + rect.w - 1, rect.y + rect.h - 1), fill=fill,
        )
        return
    overlay = Image.new("RGBA", (rect.w, rect.h), fill)
    ctx.canvas.alpha_composite(overlay, (rect.x, rect.y))


def fill_region(ctx: RenderContext, name: str) -> bool:
    region = ctx.region(name)
    if region is None or not region.fill:
        return False
    fill_rect(ctx, region.rect, region.fill)
    return True


def draw_text(
    ctx: RenderContext,
    name: str,
    text: str,
    *,
    x: int | None = None,
    y: int | None = None,
) -> int | None:
    """Draw one line of text in a region; records and returns the baseline used."""
    region = ctx.region(name)
    if region is None or not text:
        return None
    y = ctx.region_y(name) if y is None else y
    x = region.x if x is None else x
    _text(ctx, region, text, x, y)
    ctx.cursors[name] = y
    return y


def draw_lines(ctx: RenderContext, name: str, lines: tuple[str, ...] | list[str]) -> int | None:
    """Draw pre-wrapped lines one line-height apart; returns the last baseline."""
    region = ctx.region(name)
    if region is None or not lines:
        return None
    y = ctx.region_y(name)
    step = region.line_height or round(region.size * 1.4)
    for i, line in enumerate(lines):
        _text(ctx, region, line, region.x, y + i * step)
    last = y + (len(lines) - 1) * step
    ctx.cursors[name] = last
    return last


def draw_text_in_box(ctx: RenderContext, name: str, text: str) -> None:
    """Fill a box region and centre one line of text inside it."""
    region = ctx.region(name)
    if region is None:
        return
    if region.fill:
        fill_rect(ctx, region.rect, region.fill)
    if text:
        centred = replace(region, align="center", valign="middle")
        _text(ctx, centred, text, region.x + region.w // 2, region.y + region.h // 2)
    ctx.cursors[name] = region.y + region.h


def _text(ctx: RenderContext, region: Region, text: str, x: int, y: int) -> None:
    font = ctx.fonts.get(region.size, region.weight)
    anchor = _H_ANCHOR.get(region.align, "l") + _V_ANCHOR.get(region.valign, "s")
    ImageDraw.Draw(ctx.canvas).text(
        (x, y), text, font=font, fill=resolve_color(ctx, region.color), anchor=anchor,
    )


def paste_logo(ctx: RenderContext, name: str, ref: str | None) -> bool:
    """Scale an image to the region height and place it by the region's alignment."""
    region = ctx.region(name)
    image = ctx.image(ref)
    if region is None or image is None or region.h <= 0:
        return False
    logo = fit_height(image, region.h)
    if region.align == "right":
        x = region.x - logo.width
    elif region.align == "center":
        x = region.x - logo.width // 2
    else:
        x = region.x
    ctx.canvas.alpha_composite(logo, (x, region.y))
    return True


def overlay_gradient(ctx: RenderContext, rect: Rect, color: str, top: float, bottom: float) -> None:
    tile = vertical_gradient((rect.w, rect.h), color, top, bottom)
    ctx.canvas.alpha_composite(tile, (rect.x, rect.y))
