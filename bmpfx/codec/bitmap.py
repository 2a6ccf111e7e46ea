from __future__ import annotations

import logging
from typing import List, Optional

from .header import BitmapHeader, build_header, row_padding
from .types import Color, Raster

logger = logging.getLogger(__name__)


def decode(data: bytes) -> Optional[Raster]:
    """Decode an uncompressed bitmap file into a raster.

    Returns None when the declared file size does not match the size
    computed from the header, or when the buffer length differs from it.
    """
    header = BitmapHeader.parse(data)
    if header is None:
        logger.debug("Buffer too short for a bitmap header (%d bytes)", len(data))
        return None
    expected = header.expected_file_size
    if header.file_size != expected or len(data) != expected:
        logger.debug(
            "Bitmap size mismatch: declared %d, computed %d, actual %d",
            header.file_size,
            expected,
            len(data),
        )
        return None
    if header.width <= 0 or header.height <= 0 or header.bytes_per_pixel < 3:
        logger.debug(
            "Unsupported bitmap geometry: %dx%d at %d bpp",
            header.width,
            header.height,
            header.bits_per_pixel,
        )
        return None

    width = header.width
    height = header.height
    step = header.bytes_per_pixel
    rows: List[List[Color]] = [[] for _ in range(height)]
    pos = header.start
    # Stored bottom row first; pixels as blue, green, red (+ ignored extra bytes).
    for row in range(height - 1, -1, -1):
        line = rows[row]
        for _ in range(width):
            line.append(Color(red=data[pos + 2], green=data[pos + 1], blue=data[pos]))
            pos += step
        pos += header.padding
    return Raster.from_rows(rows)


def encode(raster: Raster) -> bytes:
    """Encode a raster as a 24 bpp uncompressed bitmap file.

    Channels are stored as their low eight bits.
    """
    raster.validate()
    width, height = raster.size
    padding = bytes(row_padding(width))
    out = bytearray(build_header(width, height))
    for line in reversed(list(raster.rows())):
        for color in line:
            out += bytes([color.blue & 0xFF, color.green & 0xFF, color.red & 0xFF])
        out += padding
    return bytes(out)
