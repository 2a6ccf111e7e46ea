from __future__ import annotations

from PIL import Image

from ..codec.types import Color, Raster


def raster_from_image(img: Image.Image) -> Raster:
    """Convert a Pillow image to a raster, dropping any alpha channel."""
    if img.mode != "RGB":
        img = img.convert("RGB")
    data = img.getdata()
    return Raster(tuple(Color(r, g, b) for r, g, b in data), img.width)


def raster_to_image(raster: Raster) -> Image.Image:
    """Convert a raster to an RGB Pillow image, clamping out-of-range channels."""
    width, height = raster.size
    img = Image.new("RGB", (width, height))
    clamped = (color.clamped() for color in raster.pixels)
    img.putdata([(color.red, color.green, color.blue) for color in clamped])
    return img
