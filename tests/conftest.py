import os
import sys

import pytest

# Project root on path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from bmpfx.codec import Color, Raster


def make_bitmap(rows, bits_per_pixel=24, file_size=None, extra=b""):
    """Build bitmap bytes by hand. ``rows`` is top row first, each pixel a tuple of stored bytes."""
    width = len(rows[0])
    height = len(rows)
    step = bits_per_pixel // 8
    padding = (4 - (width * step) % 4) % 4
    body = bytearray()
    for row in reversed(rows):
        for pixel in row:
            body += bytes(pixel)
        body += bytes(padding)
    header = bytearray(54)
    header[0:2] = b"BM"
    size = 54 + len(body) if file_size is None else file_size
    header[2:6] = size.to_bytes(4, "little")
    header[10:14] = (54).to_bytes(4, "little")
    header[14:18] = (40).to_bytes(4, "little")
    header[18:22] = width.to_bytes(4, "little", signed=True)
    header[22:26] = height.to_bytes(4, "little", signed=True)
    header[26:28] = (1).to_bytes(2, "little")
    header[28:30] = bits_per_pixel.to_bytes(2, "little")
    return bytes(header) + bytes(body) + extra


@pytest.fixture
def sample_raster() -> Raster:
    """3x2 raster with distinct colors (odd width forces row padding)."""
    return Raster.from_rows(
        [
            [Color(255, 0, 0), Color(0, 255, 0), Color(0, 0, 255)],
            [Color(10, 20, 30), Color(200, 100, 50), Color(255, 255, 255)],
        ]
    )


@pytest.fixture
def gradient_raster() -> Raster:
    """5x4 raster with every channel different per position."""
    rows = []
    for row in range(4):
        rows.append([Color(row * 60, col * 50, (row * 5 + col) * 12) for col in range(5)])
    return Raster.from_rows(rows)
