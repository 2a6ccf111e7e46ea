from .converters import SUPPORTED_EXTENSIONS, RasterLoader, load_raster
from .renderer import raster_from_image, raster_to_image

__all__ = ["load_raster", "raster_from_image", "raster_to_image", "RasterLoader", "SUPPORTED_EXTENSIONS"]
