from __future__ import annotations

from ..codec.types import BLACK, WHITE, Color, Raster
from .base import channel_average, map_pixels

HIGH_CONTRAST_THRESHOLD = 255 // 2
QUANTIZE_WHITE_MIN = 550
QUANTIZE_BLACK_MAX = 150


def grayscale(raster: Raster) -> Raster:
    """Replace every channel with the pixel's channel average."""

    def apply(color: Color) -> Color:
        gray = channel_average(color)
        return Color(gray, gray, gray)

    return map_pixels(raster, apply)


def high_contrast(raster: Raster) -> Raster:
    """Map each pixel to pure black or white by its channel average."""
    return map_pixels(
        raster, lambda color: WHITE if channel_average(color) >= HIGH_CONTRAST_THRESHOLD else BLACK
    )


def _dominant(color: Color) -> Color:
    # Ties go to the first of red, green, blue.
    strongest = max(color.red, color.green, color.blue)
    if color.red == strongest:
        return Color(255, 0, 0)
    if color.green == strongest:
        return Color(0, 255, 0)
    return Color(0, 0, 255)


def quantize(raster: Raster) -> Raster:
    """Reduce each pixel to black, white, red, green or blue."""

    def apply(color: Color) -> Color:
        total = color.total()
        if total >= QUANTIZE_WHITE_MIN:
            return WHITE
        if total <= QUANTIZE_BLACK_MAX:
            return BLACK
        return _dominant(color)

    return map_pixels(raster, apply)
