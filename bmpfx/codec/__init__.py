from .bitmap import decode, encode
from .header import (
    BitmapHeader,
    HeaderField,
    HEADER_SIZE,
    build_header,
    pixel_array_size,
    read_int,
    row_padding,
    write_int,
)
from .types import BLACK, WHITE, Color, Raster, clamp_channel

__all__ = [
    "BLACK",
    "BitmapHeader",
    "build_header",
    "clamp_channel",
    "Color",
    "decode",
    "encode",
    "HEADER_SIZE",
    "HeaderField",
    "pixel_array_size",
    "Raster",
    "read_int",
    "row_padding",
    "WHITE",
    "write_int",
]
