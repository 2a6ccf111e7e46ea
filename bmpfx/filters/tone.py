"""Scaling transforms.

Results are truncated toward zero and, unless ``clamp`` is set, left
outside 0..255 when the factor pushes them there.
"""

from __future__ import annotations

import math

from ..codec.types import Color, Raster
from .base import channel_average, map_pixels

CLARENDON_BRIGHT = 170
CLARENDON_DARK = 90


def _scale(color: Color, factor: float) -> Color:
    return Color(int(color.red * factor), int(color.green * factor), int(color.blue * factor))


def _scale_toward_white(color: Color, factor: float) -> Color:
    # The scaled distance from white is truncated, then subtracted: 200 at 0.5 gives 228.
    return Color(
        255 - int((255 - color.red) * factor),
        255 - int((255 - color.green) * factor),
        255 - int((255 - color.blue) * factor),
    )


def _finish(color: Color, clamp: bool) -> Color:
    return color.clamped() if clamp else color


def vignette(raster: Raster, clamp: bool = False) -> Raster:
    """Darken pixels in proportion to their distance from the image center."""
    width, height = raster.size
    center_row = height // 2
    center_col = width // 2
    pixels = []
    for index, color in enumerate(raster.pixels):
        row, col = divmod(index, width)
        distance = math.sqrt((col - center_col) ** 2 + (row - center_row) ** 2)
        factor = (height - distance) / height
        pixels.append(_finish(_scale(color, factor), clamp))
    return Raster(tuple(pixels), width)


def clarendon(raster: Raster, scaling_factor: float, clamp: bool = False) -> Raster:
    """Push bright pixels toward white and dark pixels toward black."""

    def apply(color: Color) -> Color:
        average = channel_average(color)
        if average >= CLARENDON_BRIGHT:
            return _finish(_scale_toward_white(color, scaling_factor), clamp)
        if average < CLARENDON_DARK:
            return _finish(_scale(color, scaling_factor), clamp)
        return color

    return map_pixels(raster, apply)


def lighten(raster: Raster, scaling_factor: float, clamp: bool = False) -> Raster:
    """Scale each channel's distance from white by ``scaling_factor``."""
    return map_pixels(raster, lambda color: _finish(_scale_toward_white(color, scaling_factor), clamp))


def darken(raster: Raster, scaling_factor: float, clamp: bool = False) -> Raster:
    """Scale each channel by ``scaling_factor``."""
    return map_pixels(raster, lambda color: _finish(_scale(color, scaling_factor), clamp))
