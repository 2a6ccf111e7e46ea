from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
HEADER_SIZE = FILE_HEADER_SIZE + INFO_HEADER_SIZE
MAGIC = b"BM"
BITS_PER_PIXEL = 24
COLOR_PLANES = 1
COMPRESSION_NONE = 0
RESOLUTION_PPM = 2835


@dataclass(frozen=True)
class HeaderField:
    name: str
    offset: int
    size: int
    signed: bool = False


# Fields the decoder needs, at their absolute file offsets.
DECODE_FIELDS: Tuple[HeaderField, ...] = (
    HeaderField("file_size", 2, 4),
    HeaderField("start", 10, 4),
    HeaderField("width", 18, 4, signed=True),
    HeaderField("height", 22, 4, signed=True),
    HeaderField("bits_per_pixel", 28, 2),
)

# Full 54-byte layout written by the encoder (magic is written separately).
ENCODE_FIELDS: Tuple[HeaderField, ...] = (
    HeaderField("file_size", 2, 4),
    HeaderField("reserved1", 6, 2),
    HeaderField("reserved2", 8, 2),
    HeaderField("start", 10, 4),
    HeaderField("info_size", 14, 4),
    HeaderField("width", 18, 4, signed=True),
    HeaderField("height", 22, 4, signed=True),
    HeaderField("planes", 26, 2),
    HeaderField("bits_per_pixel", 28, 2),
    HeaderField("compression", 30, 4),
    HeaderField("image_size", 34, 4),
    HeaderField("x_resolution", 38, 4),
    HeaderField("y_resolution", 42, 4),
    HeaderField("palette_colors", 46, 4),
    HeaderField("important_colors", 50, 4),
)


def read_int(data: bytes, offset: int, size: int, signed: bool = False) -> int:
    """Read a little-endian integer of ``size`` bytes at ``offset``."""
    value = 0
    base = 1
    for i in range(size):
        value += data[offset + i] * base
        base *= 256
    if signed and value >= 1 << (8 * size - 1):
        value -= 1 << (8 * size)
    return value


def write_int(buffer: bytearray, offset: int, size: int, value: int, signed: bool = False) -> None:
    """Store ``value`` little-endian into ``buffer`` at ``offset``."""
    buffer[offset : offset + size] = value.to_bytes(size, "little", signed=signed)


@dataclass(frozen=True)
class BitmapHeader:
    """Header values used while transcoding; never stored on a raster."""

    file_size: int
    start: int
    width: int
    height: int
    bits_per_pixel: int

    @classmethod
    def parse(cls, data: bytes) -> Optional["BitmapHeader"]:
        """Parse the decode fields, or return None if the buffer is too short."""
        if len(data) < HEADER_SIZE:
            return None
        values: Dict[str, int] = {}
        for field in DECODE_FIELDS:
            values[field.name] = read_int(data, field.offset, field.size, field.signed)
        return cls(**values)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def scanline_size(self) -> int:
        return self.width * self.bytes_per_pixel

    @property
    def padding(self) -> int:
        return row_padding(self.width, self.bytes_per_pixel)

    @property
    def expected_file_size(self) -> int:
        return self.start + (self.scanline_size + self.padding) * self.height


def row_padding(width: int, bytes_per_pixel: int = 3) -> int:
    """Return the zero bytes needed to align a row to four bytes."""
    return (4 - (width * bytes_per_pixel) % 4) % 4


def pixel_array_size(width: int, height: int) -> int:
    """Return the 24 bpp pixel array size in bytes, padding included."""
    return (width * 3 + row_padding(width)) * height


def build_header(width: int, height: int) -> bytes:
    """Build the 54-byte file and info header for a 24 bpp image."""
    image_size = pixel_array_size(width, height)
    values = {
        "file_size": HEADER_SIZE + image_size,
        "reserved1": 0,
        "reserved2": 0,
        "start": HEADER_SIZE,
        "info_size": INFO_HEADER_SIZE,
        "width": width,
        "height": height,
        "planes": COLOR_PLANES,
        "bits_per_pixel": BITS_PER_PIXEL,
        "compression": COMPRESSION_NONE,
        "image_size": image_size,
        "x_resolution": RESOLUTION_PPM,
        "y_resolution": RESOLUTION_PPM,
        "palette_colors": 0,
        "important_colors": 0,
    }
    header = bytearray(HEADER_SIZE)
    header[0:2] = MAGIC
    for field in ENCODE_FIELDS:
        write_int(header, field.offset, field.size, values[field.name], field.signed)
    return bytes(header)
