"""Tests for composition: cover-fit, placeholders, gradients, step isolation."""

from __future__ import annotations

from PIL import Image

from listing_canvas.engine.compositor import Compositor, encode_png
from listing_canvas.engine.context import RenderContext
from listing_canvas.engine.loader import ResolvedImage
from listing_canvas.engine.registry import StepRegistry, StepSpec, get_registry, get_step_registry
from listing_canvas.engine.slots import assign_slots
from listing_canvas.utils.imaging import cover_fit_crop
from tests.conftest import make_descriptor


def _resolved(ref: str, size: tuple[int, int], color: str) -> ResolvedImage:
    image = Image.new("RGBA", size, color)
    return ResolvedImage(ref=ref, image=image, width=size[0], height=size[1])


def _context(format_id: str = "social-portrait", images: dict | None = None, **overrides) -> RenderContext:
    descriptor = make_descriptor(format=format_id, **overrides)
    template = get_registry().resolve(format_id)
    return RenderContext(
        descriptor=descriptor,
        template=template,
        slots=assign_slots(descriptor.photo_refs, (), template.capacity),
        images=images or {},
    )


def _close(pixel, expected, tolerance: int = 2) -> bool:
    return all(abs(a - b) <= tolerance for a, b in zip(pixel[:3], expected))


def test_cover_fit_narrow_source_crops_top_and_bottom():
    crop = cover_fit_crop(300, 400, 1080, 900)
    assert crop.x == 0
    assert crop.w == 300
    assert crop.h < 400
    assert crop.y == (400 - crop.h) / 2


def test_cover_fit_wide_source_crops_left_and_right():
    crop = cover_fit_crop(1600, 400, 1080, 900)
    assert crop.y == 0
    assert crop.h == 400
    assert crop.w == 400 * 1080 / 900
    assert crop.x == (1600 - crop.w) / 2


def test_compose_matches_template_dimensions():
    for template in get_registry().all():
        ctx = _context(template.id)
        image = Compositor().compose(ctx)
        assert image.size == (template.width, template.height)
        assert not ctx.errors, ctx.errors


def test_missing_hero_draws_placeholder():
    ctx = _context()
    image = Compositor().compose(ctx)
    assert _close(image.getpixel((900, 300)), (0xF0, 0xF0, 0xF0))


def test_hero_is_cover_fitted_with_bottom_fade():
    ref = "hero"
    ctx = _context(photo_refs=(ref,), images={ref: _resolved(ref, (300, 400), "#ff0000")})
    image = Compositor().compose(ctx)
    assert _close(image.getpixel((900, 300)), (255, 0, 0))
    # The last row of the hero is fully faded into the background
    assert _close(image.getpixel((900, 899)), (0x1A, 0x1A, 0x2E))


def test_zero_dimension_image_treated_as_absent():
    ref = "hero"
    broken = ResolvedImage(ref=ref, image=Image.new("RGBA", (1, 1)), width=0, height=0)
    ctx = _context(photo_refs=(ref,), images={ref: broken})
    image = Compositor().compose(ctx)
    assert _close(image.getpixel((900, 300)), (0xF0, 0xF0, 0xF0))


def test_flowing_regions_record_cursors():
    ctx = _context()
    Compositor().compose(ctx)
    assert ctx.cursors["street"] == 1100
    assert ctx.cursors["locality"] == 1145
    assert ctx.cursors["stats"] == 1200
    assert ctx.cursors["description"] >= 1270


def test_description_truncated_to_template_budget():
    ctx = _context("print-letter")
    Compositor().compose(ctx)
    block = ctx.text_blocks["description"]
    assert block.truncated
    assert block.text == (
        "Sun-filled colonial on a quiet cul-de-sac. "
        "Chef's kitchen with quartz counters opens to a vaulted family room."
    )


def test_failing_step_does_not_abort_composition():
    steps = StepRegistry()
    for spec in get_step_registry().all():
        if spec.name == "stat_row":
            def boom(ctx):
                raise ValueError("glyph exploded")
            steps.register(StepSpec(name="stat_row", fn=boom))
        else:
            steps.register(spec)

    ctx = _context()
    image = Compositor(steps=steps).compose(ctx)

    assert image.size == (1080, 1920)
    assert "glyph exploded" in ctx.errors["stat_row"]
    assert "copy" in ctx.completed_steps


def test_composition_is_deterministic():
    ref = "hero"
    images = {ref: _resolved(ref, (640, 480), "#336699")}
    first = encode_png(Compositor().compose(_context(photo_refs=(ref,), images=images)))
    second = encode_png(Compositor().compose(_context(photo_refs=(ref,), images=images)))
    assert first == second


def test_open_house_ribbon_only_for_open_house_status():
    schedule = {"day": "Saturday", "date": "6/14", "hours": "1-3PM"}
    listed = Compositor().compose(_context(open_house=schedule))
    open_house = Compositor().compose(_context(status="open_house", open_house=schedule))
    # Ribbon fill (#d97706) at its left edge
    assert _close(open_house.getpixel((5, 65)), (0xD9, 0x77, 0x06))
    assert not _close(listed.getpixel((5, 65)), (0xD9, 0x77, 0x06))
