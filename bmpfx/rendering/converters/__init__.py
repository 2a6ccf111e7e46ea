from __future__ import annotations

import os
from typing import Dict, Optional, Set

from ...codec.types import Raster
from .base import RasterConverter
from .bitmap import BitmapConverter
from .image import ImageConverter

SUPPORTED_EXTENSIONS: Set[str] = {".bmp", ".png", ".jpg", ".jpeg", ".gif"}


class RasterLoader:
    def __init__(self, converters: Optional[Dict[str, RasterConverter]] = None) -> None:
        if converters is None:
            converters = {".bmp": BitmapConverter()}
            image_converter = ImageConverter()
            for ext in (".png", ".jpg", ".jpeg", ".gif"):
                converters[ext] = image_converter
        self._converters = converters

    @property
    def supported_extensions(self) -> Set[str]:
        return set(self._converters.keys())

    def load(self, path: str) -> Raster:
        ext = os.path.splitext(path)[1].lower()
        converter = self._converters.get(ext)
        if not converter:
            raise ValueError(f"Unsupported file extension: {ext}")
        return converter.load(path)


def load_raster(path: str) -> Raster:
    return RasterLoader().load(path)


__all__ = ["BitmapConverter", "ImageConverter", "RasterConverter", "RasterLoader", "SUPPORTED_EXTENSIONS", "load_raster"]
