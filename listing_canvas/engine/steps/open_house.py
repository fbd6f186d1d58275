"""Open-house ribbon."""

from __future__ import annotations

from listing_canvas.engine.compositor import draw_text_in_box
from listing_canvas.engine.context import RenderContext
from listing_canvas.engine.registry import draw_step
from listing_canvas.models.status import ListingStatus


@draw_step("open_house", description="Open-house ribbon with day/date/hours")
def open_house(ctx: RenderContext) -> None:
    descriptor = ctx.descriptor
    schedule = descriptor.open_house
    if descriptor.status is not ListingStatus.OPEN_HOUSE or schedule is None:
        return
    if not schedule.is_scheduled:
        return
    draw_text_in_box(ctx, "open_house", f"OPEN HOUSE  {schedule.display_text()}")
