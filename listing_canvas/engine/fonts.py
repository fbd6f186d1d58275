"""FontBook — resolves (size, weight) to Pillow fonts and exposes text measurement."""

from __future__ import annotations

import logging

from PIL import ImageFont

from listing_canvas.engine.text_layout import Measure

logger = logging.getLogger(__name__)

FontType = ImageFont.FreeTypeFont | ImageFont.ImageFont

BOLD_WEIGHTS = frozenset({"bold", "semibold", "600", "700", "800", "900"})


class FontBook:
    """Caches loaded fonts. Fonts are immutable, so one book can serve many renders."""

    def __init__(self, regular_path: str = "", bold_path: str = "") -> None:
        self.regular_path = regular_path
        self.bold_path = bold_path
        self._cache: dict[tuple[int, bool], FontType] = {}

    def get(self, size: int, weight: str = "regular") -> FontType:
        bold = weight.lower() in BOLD_WEIGHTS
        key = (int(size), bold)
        font = self._cache.get(key)
        if font is None:
            font = self._load(*key)
            self._cache[key] = font
        return font

    def measure(self, size: int, weight: str = "regular") -> Measure:
        font = self.get(size, weight)

        def _measure(text: str) -> float:
            return float(font.getlength(text))

        return _measure

    def _load(self, size: int, bold: bool) -> FontType:
        path = (self.bold_path if bold else "") or self.regular_path
        if path:
            try:
                return ImageFont.truetype(path, size)
            except OSError as e:
                logger.warning("Font %s unusable (%s); falling back to default", path, e)
        return ImageFont.load_default(size=size)
