from __future__ import annotations

from ...codec.types import Raster
from ..renderer import raster_from_image
from .base import RasterConverter


class ImageConverter(RasterConverter):
    def load(self, path: str) -> Raster:
        img = self._normalize_image(self._load_image(path))
        return raster_from_image(img)
