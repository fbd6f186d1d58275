"""Imaging utilities — cover-fit cropping, gradients and circular masks.

Pure helpers over Pillow images and numpy arrays; no drawing state.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from PIL import Image, ImageColor, ImageDraw


@dataclass(frozen=True)
class SourceRect:
    """Source-image crop box in natural pixels (may be fractional)."""

    x: float
    y: float
    w: float
    h: float

    @property
    def box(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.x + self.w, self.y + self.h)


def cover_fit_crop(src_w: float, src_h: float, dst_w: float, dst_h: float) -> SourceRect:
    """Crop box that makes the source cover the destination without distortion.

    Wider-than-target sources lose their left/right overflow; narrower ones
    lose top/bottom. The crop is always centred.
    """
    if src_w <= 0 or src_h <= 0 or dst_w <= 0 or dst_h <= 0:
        raise ValueError("cover_fit_crop needs positive dimensions")

    src_ratio = src_w / src_h
    dst_ratio = dst_w / dst_h
    if src_ratio > dst_ratio:
        sw = src_h * dst_ratio
        return SourceRect((src_w - sw) / 2, 0.0, sw, float(src_h))
    sh = src_w / dst_ratio
    return SourceRect(0.0, (src_h - sh) / 2, float(src_w), sh)


def cover_fit(image: Image.Image, size: tuple[int, int]) -> Image.Image:
    """Scale + centre-crop ``image`` to exactly ``size``."""
    crop = cover_fit_crop(image.width, image.height, size[0], size[1])
    return image.resize(size, Image.Resampling.LANCZOS, box=crop.box)


def fit_height(image: Image.Image, height: int) -> Image.Image:
    """Resize to ``height`` preserving aspect ratio (logos)."""
    width = max(1, round(image.width / image.height * height))
    return image.resize((width, height), Image.Resampling.LANCZOS)


def rgba(color: str, alpha: int | None = None) -> tuple[int, int, int, int]:
    """Parse a CSS colour; ``alpha`` (0-255) overrides any alpha in the string."""
    parsed = ImageColor.getrgb(color)
    r, g, b = parsed[:3]
    a = parsed[3] if len(parsed) == 4 else 255
    return (r, g, b, a if alpha is None else alpha)


def vertical_gradient(
    size: tuple[int, int],
    color: str,
    alpha_top: float,
    alpha_bottom: float,
) -> Image.Image:
    """RGBA tile whose alpha ramps linearly from top to bottom."""
    w, h = size
    r, g, b, _ = rgba(color)
    ramp = np.linspace(alpha_top, alpha_bottom, num=max(h, 1), dtype=np.float64)
    alpha = np.clip(np.round(ramp * 255), 0, 255).astype(np.uint8)

    arr = np.empty((h, w, 4), dtype=np.uint8)
    arr[..., 0] = r
    arr[..., 1] = g
    arr[..., 2] = b
    arr[..., 3] = alpha[:, np.newaxis]
    return Image.fromarray(arr, mode="RGBA")


def circle_mask(diameter: int, supersample: int = 4) -> Image.Image:
    """Anti-aliased circular "L" mask."""
    big = diameter * max(supersample, 1)
    mask = Image.new("L", (big, big), 0)
    ImageDraw.Draw(mask).ellipse((0, 0, big - 1, big - 1), fill=255)
    return mask.resize((diameter, diameter), Image.Resampling.LANCZOS)


def circular_crop(image: Image.Image, diameter: int, supersample: int = 4) -> Image.Image:
    """Cover-fit ``image`` into a square and cut it to a circle (RGBA)."""
    square = cover_fit(image.convert("RGBA"), (diameter, diameter))
    mask = circle_mask(diameter, supersample)
    alpha = np.asarray(square.getchannel("A"), dtype=np.uint16)
    combined = (alpha * np.asarray(mask, dtype=np.uint16) // 255).astype(np.uint8)
    square.putalpha(Image.fromarray(combined, mode="L"))
    return square
