from __future__ import annotations

from ...codec.types import Raster
from ...files import read_image
from .base import RasterConverter


class BitmapConverter(RasterConverter):
    """Loads bitmaps through the codec so size validation applies."""

    def load(self, path: str) -> Raster:
        return read_image(path)
