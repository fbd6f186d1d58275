"""Render Coordinator — the single entry point for preview and download.

validate → assign slots → load (concurrent) → compose (worker thread) → PNG.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Iterator
from dataclasses import dataclass, field

import httpx

from listing_canvas.engine.compositor import Compositor, encode_png
from listing_canvas.engine.config import RenderConfig
from listing_canvas.engine.context import RenderContext
from listing_canvas.engine.errors import DescriptorValidationError, MissingRequiredPhoto
from listing_canvas.engine.fonts import FontBook
from listing_canvas.engine.loader import ResourceLoader
from listing_canvas.engine.registry import TemplateRegistry, TemplateSpec, get_registry
from listing_canvas.engine.slots import PhotoSlotAssignment, assign_slots
from listing_canvas.models.descriptor import AssetDescriptor

logger = logging.getLogger(__name__)

PNG_CONTENT_TYPE = "image/png"


@dataclass(frozen=True)
class RenderedAsset:
    data: bytes
    format: str
    status_label: str
    width: int
    height: int
    content_type: str = PNG_CONTENT_TYPE
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def filename(self) -> str:
        status = self.status_label.lower().replace(" ", "-")
        return f"{self.format}-{status}.png"


class RenderCoordinator:
    """Stateless between calls; safe to share across requests."""

    def __init__(
        self,
        config: RenderConfig | None = None,
        registry: TemplateRegistry | None = None,
        compositor: Compositor | None = None,
        client: httpx.AsyncClient | None = None,
        fonts: FontBook | None = None,
    ) -> None:
        self.config = config or RenderConfig()
        self.registry = registry or get_registry()
        self.compositor = compositor or Compositor()
        self.loader = ResourceLoader(self.config, client=client)
        self.fonts = fonts or FontBook(self.config.font_regular_path, self.config.font_bold_path)

    def validate(self, descriptor: AssetDescriptor) -> TemplateSpec:
        """Resolve the template and reject descriptors it cannot render."""
        template = self.registry.resolve(descriptor.format)

        if not descriptor.price.strip():
            raise DescriptorValidationError("Price is required")
        if len(descriptor.headline) > template.headline_max_chars:
            raise DescriptorValidationError(
                f"Headline exceeds {template.headline_max_chars} characters for {template.id}"
            )
        if template.requires_agent:
            agent = descriptor.agent
            if agent is None or not agent.name.strip() or not agent.phone.strip():
                raise DescriptorValidationError(f"{template.id} requires agent name and phone")
        return template

    async def render(
        self,
        descriptor: AssetDescriptor,
        slots: PhotoSlotAssignment | None = None,
    ) -> RenderedAsset:
        start = time.perf_counter()
        template = self.validate(descriptor)
        if slots is None:
            slots = assign_slots(descriptor.photo_refs, (), template.capacity)
        elif slots.capacity != template.capacity:
            slots = assign_slots(slots.filled, (), template.capacity)
        if slots.is_empty:
            raise MissingRequiredPhoto()

        logo = descriptor.logo_ref or self.config.default_logo_ref or None
        secondary = descriptor.secondary_logo_ref or self.config.default_secondary_logo_ref or None
        agent_photo = descriptor.agent.photo_ref if descriptor.agent else None

        optional = [*slots.slots[1:], logo, secondary, agent_photo]
        images = await self.loader.load_all(optional, hero=slots.hero)
        warnings = tuple(
            f"Could not load {kind}"
            for kind, ref in _labelled(slots, logo, secondary, agent_photo)
            if ref and ref not in images
        )

        ctx = RenderContext(
            descriptor=descriptor,
            template=template,
            slots=slots,
            config=self.config,
            fonts=self.fonts,
            images=images,
            logo_ref=logo,
            secondary_logo_ref=secondary,
        )
        image = await asyncio.to_thread(self.compositor.compose, ctx)
        data = await asyncio.to_thread(encode_png, image, self.config.png_compress_level)

        warnings += tuple(f"Step {name} failed: {err}" for name, err in ctx.errors.items())
        logger.info(
            "Rendered %s (%s) %dx%d, %d bytes, %d warnings in %.0fms",
            template.id,
            descriptor.status.value,
            template.width,
            template.height,
            len(data),
            len(warnings),
            (time.perf_counter() - start) * 1000,
        )
        return RenderedAsset(
            data=data,
            format=template.id,
            status_label=descriptor.status_label,
            width=template.width,
            height=template.height,
            warnings=warnings,
        )

    async def render_png(self, descriptor: AssetDescriptor) -> bytes:
        return (await self.render(descriptor)).data

    def render_sync(self, descriptor: AssetDescriptor) -> RenderedAsset:
        """Blocking variant for scripts and workers without an event loop."""
        return asyncio.run(self.render(descriptor))


def _labelled(
    slots: PhotoSlotAssignment,
    logo: str | None,
    secondary: str | None,
    agent_photo: str | None,
) -> Iterator[tuple[str, str | None]]:
    for index, ref in enumerate(slots.slots[1:], start=2):
        yield f"photo {index}", ref
    yield "logo", logo
    yield "secondary logo", secondary
    yield "agent photo", agent_photo


async def render_png(descriptor: AssetDescriptor, coordinator: RenderCoordinator | None = None) -> bytes:
    return await (coordinator or RenderCoordinator()).render_png(descriptor)


def render_sync(descriptor: AssetDescriptor, coordinator: RenderCoordinator | None = None) -> RenderedAsset:
    return (coordinator or RenderCoordinator()).render_sync(descriptor)
