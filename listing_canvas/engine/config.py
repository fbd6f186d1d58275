"""Render configuration — engine knobs independent of the HTTP layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from listing_canvas.config import Settings


@dataclass(frozen=True)
class RenderConfig:
    """Controls loading limits and drawing details."""

    # Resource loading
    resource_timeout_s: float = 8.0
    hero_timeout_s: float = 20.0
    max_image_bytes: int = 20 * 1024 * 1024
    image_proxy_url: str = ""

    # Circle masks are drawn at this multiple and downsampled for smooth edges
    mask_supersample: int = 4

    # Placeholders
    placeholder_fill: str = "#f0f0f0"
    placeholder_text: str = "#999999"
    silhouette_fill: str = "#e0e0e0"
    silhouette_figure: str = "#999999"

    # PNG output; compression level does not change pixels
    png_compress_level: int = 6

    # Fonts
    font_regular_path: str = ""
    font_bold_path: str = ""

    # Branding fallbacks
    default_logo_ref: str = ""
    default_secondary_logo_ref: str = ""
    default_agent_title: str = "REALTOR®"

    @classmethod
    def from_settings(cls, settings: Settings) -> RenderConfig:
        return cls(
            resource_timeout_s=settings.resource_timeout_s,
            hero_timeout_s=settings.hero_timeout_s,
            max_image_bytes=settings.max_image_bytes,
            image_proxy_url=settings.image_proxy_url,
            font_regular_path=settings.font_regular_path,
            font_bold_path=settings.font_bold_path,
            default_logo_ref=settings.default_logo_ref,
            default_secondary_logo_ref=settings.default_secondary_logo_ref,
            default_agent_title=settings.default_agent_title,
        )
