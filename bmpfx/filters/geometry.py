from __future__ import annotations

from ..codec.types import Raster


def rotate_90(raster: Raster) -> Raster:
    """Rotate 90 degrees clockwise; width and height swap."""
    width, height = raster.size
    # Output row r is source column r read from the bottom row upward.
    pixels = []
    for col in range(width):
        for row in range(height - 1, -1, -1):
            pixels.append(raster.pixels[row * width + col])
    return Raster(tuple(pixels), height)


def rotate(raster: Raster, turns: int) -> Raster:
    """Rotate clockwise by ``turns`` quarter turns; negative turns count backward."""
    raster.validate()
    result = raster
    for _ in range(turns % 4):
        result = rotate_90(result)
    return result


def enlarge(raster: Raster, x_scale: int, y_scale: int) -> Raster:
    """Nearest-neighbour upscale by integer factors."""
    if x_scale < 1 or y_scale < 1:
        raise ValueError("Scale factors must be at least 1")
    width, height = raster.size
    new_width = width * x_scale
    pixels = []
    for row in range(height * y_scale):
        source = raster.row(row // y_scale)
        pixels.extend(source[col // x_scale] for col in range(new_width))
    return Raster(tuple(pixels), new_width)
