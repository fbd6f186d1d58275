"""RenderContext — the single mutable state object flowing through all draw steps.

Built by the coordinator after loading, discarded after encoding. Nothing in
here survives a render.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from PIL import Image

from listing_canvas.engine.config import RenderConfig
from listing_canvas.engine.fonts import FontBook
from listing_canvas.engine.loader import ResolvedImage
from listing_canvas.engine.registry import Region, TemplateSpec
from listing_canvas.engine.slots import PhotoSlotAssignment
from listing_canvas.engine.text_layout import WrappedTextBlock

if TYPE_CHECKING:
    from listing_canvas.models.descriptor import AssetDescriptor


@dataclass
class RenderContext:
    """Shared state for one composition."""

    descriptor: AssetDescriptor
    template: TemplateSpec
    slots: PhotoSlotAssignment
    config: RenderConfig = field(default_factory=RenderConfig)
    fonts: FontBook = field(default_factory=FontBook)
    # Decoded images keyed by reference; absent refs failed or were never given
    images: dict[str, ResolvedImage] = field(default_factory=dict)
    logo_ref: str | None = None
    secondary_logo_ref: str | None = None

    # --- Populated during composition ---
    canvas: Image.Image | None = None
    # Pre-wrapped text keyed by region name
    text_blocks: dict[str, WrappedTextBlock] = field(default_factory=dict)
    # Baseline each region finished on, for regions that flow after it
    cursors: dict[str, int] = field(default_factory=dict)

    # --- Bookkeeping ---
    completed_steps: list[str] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    def region(self, name: str) -> Region | None:
        return self.template.regions.get(name)

    def image(self, ref: str | None) -> Image.Image | None:
        if not ref:
            return None
        resolved = self.images.get(ref)
        if resolved is None or resolved.width == 0 or resolved.height == 0:
            return None
        return resolved.image

    def region_y(self, name: str) -> int:
        """Resolve a region's y, following its flow anchor if it has one."""
        region = self.template.regions[name]
        anchor = region.flow_after
        if not anchor:
            return region.y
        if anchor in self.cursors:
            return self.cursors[anchor] + region.y
        return self.region_y(anchor) + region.y if anchor in self.template.regions else region.y
