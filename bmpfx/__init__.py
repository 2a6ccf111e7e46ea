from .catalog import FilterRegistry, FilterSpec
from .codec import Color, Raster, decode, encode
from .errors import BmpfxError, MalformedContainerError, OutputUnavailableError, UnknownFilterError
from .files import read_image, write_image

__all__ = [
    "BmpfxError",
    "Color",
    "decode",
    "encode",
    "FilterRegistry",
    "FilterSpec",
    "MalformedContainerError",
    "OutputUnavailableError",
    "Raster",
    "read_image",
    "UnknownFilterError",
    "write_image",
]
