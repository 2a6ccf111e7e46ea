from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

CHANNEL_MIN = 0
CHANNEL_MAX = 255


def clamp_channel(value: int) -> int:
    return max(CHANNEL_MIN, min(CHANNEL_MAX, value))


@dataclass(frozen=True)
class Color:
    """One RGB sample. Channels are not clamped on construction."""

    red: int
    green: int
    blue: int

    def clamped(self) -> "Color":
        """Return a copy with every channel clamped into 0..255."""
        return Color(clamp_channel(self.red), clamp_channel(self.green), clamp_channel(self.blue))

    def total(self) -> int:
        return self.red + self.green + self.blue


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


@dataclass(frozen=True)
class Raster:
    """Row-major RGB pixel buffer, row 0 at the visual top."""

    pixels: Tuple[Color, ...]
    width: int

    def validate(self) -> None:
        """Validate dimensions for encoding and transforms."""
        if self.width <= 0:
            raise ValueError("Width must be greater than zero")
        if not self.pixels:
            raise ValueError("Raster must contain at least one pixel")
        if len(self.pixels) % self.width != 0:
            raise ValueError("Pixels length must be a multiple of width")

    @property
    def height(self) -> int:
        """Return raster height computed from width and pixel count."""
        self.validate()
        return len(self.pixels) // self.width

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def pixel(self, row: int, col: int) -> Color:
        if not 0 <= col < self.width:
            raise IndexError(f"Column {col} out of range")
        if not 0 <= row < self.height:
            raise IndexError(f"Row {row} out of range")
        return self.pixels[row * self.width + col]

    def row(self, index: int) -> Tuple[Color, ...]:
        if not 0 <= index < self.height:
            raise IndexError(f"Row {index} out of range")
        start = index * self.width
        return self.pixels[start : start + self.width]

    def rows(self) -> Iterator[Tuple[Color, ...]]:
        for index in range(self.height):
            yield self.row(index)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Color]]) -> "Raster":
        """Build a raster from equal-length rows, top row first."""
        if not rows or not rows[0]:
            raise ValueError("Raster must contain at least one pixel")
        width = len(rows[0])
        pixels = []
        for row in rows:
            if len(row) != width:
                raise ValueError("All rows must have the same length")
            pixels.extend(row)
        return cls(tuple(pixels), width)

    @classmethod
    def filled(cls, width: int, height: int, color: Color) -> "Raster":
        if width <= 0 or height <= 0:
            raise ValueError("Width and height must be greater than zero")
        return cls((color,) * (width * height), width)
