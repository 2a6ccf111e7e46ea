from __future__ import annotations

from typing import Callable

from ..codec.types import Color, Raster


def map_pixels(raster: Raster, func: Callable[[Color], Color]) -> Raster:
    """Apply ``func`` to every pixel and return a new raster of the same shape."""
    raster.validate()
    return Raster(tuple(func(color) for color in raster.pixels), raster.width)


def trunc_div(value: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def channel_average(color: Color) -> int:
    return trunc_div(color.total(), 3)
