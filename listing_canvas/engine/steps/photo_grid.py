"""Photo slots: cover-fit crops or labelled placeholders, plus the hero fade."""

from __future__ import annotations

from PIL import ImageDraw

from listing_canvas.engine.compositor import fill_rect, overlay_gradient, resolve_color
from listing_canvas.engine.context import RenderContext
from listing_canvas.engine.registry import Rect, draw_step
from listing_canvas.utils.imaging import cover_fit


def slot_label(index: int) -> str:
    return "Main Photo" if index == 0 else f"Photo {index + 1}"


def _placeholder(ctx: RenderContext, rect: Rect, index: int) -> None:
    fill_rect(ctx, rect, ctx.config.placeholder_fill)
    size = max(16, min(rect.h // 12, 48))
    ImageDraw.Draw(ctx.canvas).text(
        (rect.x + rect.w // 2, rect.y + rect.h // 2),
        slot_label(index),
        font=ctx.fonts.get(size),
        fill=resolve_color(ctx, ctx.config.placeholder_text),
        anchor="mm",
    )


@draw_step("photo_grid", description="Hero and secondary photos")
def photo_grid(ctx: RenderContext) -> None:
    for index, rect in enumerate(ctx.template.photo_slots):
        ref = ctx.slots.slots[index] if index < len(ctx.slots.slots) else None
        image = ctx.image(ref)
        if image is None:
            _placeholder(ctx, rect, index)
            continue
        ctx.canvas.alpha_composite(cover_fit(image, (rect.w, rect.h)), (rect.x, rect.y))

    fade = ctx.template.hero_gradient
    if fade is not None:
        hero = ctx.template.photo_slots[0]
        height = min(fade.height, hero.h)
        band = Rect(hero.x, hero.y + hero.h - height, hero.w, height)
        overlay_gradient(ctx, band, fade.color, fade.alpha_top, fade.alpha_bottom)
