from __future__ import annotations

import numbers
from dataclasses import dataclass

import numpy as np
from PIL import Image

from glyphart.charsets import DEFAULT_CHARSET

RGB = tuple[int, int, int]


class PixelBuffer:
    """Read-only RGB pixel grid backed by a (height, width, 3) uint8 array."""

    __slots__ = ("_pixels",)

    def __init__(self, pixels):
        arr = np.asarray(pixels)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ValueError(f"Expected pixels of shape (height, width, 3), got {arr.shape}")
        if arr.shape[0] == 0 or arr.shape[1] == 0:
            raise ValueError(f"Pixel buffer must be at least 1x1, got {arr.shape[1]}x{arr.shape[0]}")
        if not np.issubdtype(arr.dtype, np.integer):
            raise ValueError(f"Channel values must be integers, got dtype {arr.dtype}")
        if arr.dtype != np.uint8:
            if arr.min() < 0 or arr.max() > 255:
                raise ValueError("Channel values must be in the range 0-255")
            arr = arr.astype(np.uint8)
        else:
            arr = arr.copy()
        arr.setflags(write=False)
        self._pixels = arr

    @classmethod
    def from_image(cls, image: Image.Image) -> PixelBuffer:
        """Build a buffer from a decoded Pillow image. Any alpha channel is dropped."""
        return cls(np.asarray(image.convert("RGB")))

    @classmethod
    def solid(cls, width: int, height: int, color: RGB) -> PixelBuffer:
        return cls(np.full((height, width, 3), color, dtype=np.uint8))

    @property
    def pixels(self) -> np.ndarray:
        return self._pixels

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    def pixel(self, x: int, y: int) -> RGB:
        r, g, b = self._pixels[y, x]
        return int(r), int(g), int(b)

    def __repr__(self):
        return f"PixelBuffer({self.width}x{self.height})"


@dataclass(frozen=True)
class ConversionConfig:
    target_columns: int
    charset_id: str = DEFAULT_CHARSET
    color_mode: bool = False
    invert_brightness: bool = False

    def __post_init__(self):
        if isinstance(self.target_columns, bool) or not isinstance(self.target_columns, numbers.Integral):
            raise ValueError(f"target_columns must be an integer, got {self.target_columns!r}")
        object.__setattr__(self, "target_columns", int(self.target_columns))
        if self.target_columns <= 0:
            raise ValueError(f"target_columns must be positive, got {self.target_columns}")


@dataclass(frozen=True)
class Cell:
    glyph: str
    color: RGB | None = None  # averaged source colour, colour mode only


@dataclass(frozen=True)
class ConversionResult:
    rows: tuple[tuple[Cell, ...], ...]
    color_mode: bool

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def lines(self) -> list[str]:
        return ["".join(cell.glyph for cell in row) for row in self.rows]
