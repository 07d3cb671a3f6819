"""
In-memory RGB pixel buffer.

Pixels live in a numpy array of shape (H, W, 3), dtype uint8, RGB order.
Coordinates are (x, y) with x along the width and y along the height, so
pixel (x, y) is ``pixels[y, x]``.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

import numpy as np

from .errors import OutOfRangeError


class RGB(NamedTuple):
    red: int
    green: int
    blue: int


def clamp_u8(values) -> np.ndarray:
    """Clamp arbitrary numeric values to [0, 255] and return uint8 (truncating floats)."""
    arr = np.asarray(values)
    if arr.dtype.kind == "f":
        arr = np.trunc(arr)
    return np.clip(arr, 0, 255).astype(np.uint8)


class PixelBuffer:
    """
    Rectangular width x height grid of RGB pixels.

    Every write clamps each channel to [0, 255]. Operators never mutate their
    input buffer; they build a new one from ``pixels``.
    """

    __slots__ = ("_pixels",)

    def __init__(self, pixels) -> None:
        arr = np.asarray(pixels)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ValueError(f"Expected (H, W, 3) RGB array, got shape {arr.shape}")
        if arr.shape[0] == 0 or arr.shape[1] == 0:
            raise ValueError(f"Buffer must have positive width and height, got {arr.shape[1]}x{arr.shape[0]}")

        if arr.dtype == np.uint8:
            self._pixels = arr.copy()
        else:
            self._pixels = clamp_u8(arr)

    @classmethod
    def blank(cls, width: int, height: int, fill: Sequence[int] = (0, 0, 0)) -> "PixelBuffer":
        """Allocate a buffer of the given size filled with one colour."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Buffer must have positive width and height, got {width}x{height}")
        arr = np.empty((height, width, 3), dtype=np.uint8)
        arr[...] = clamp_u8(fill)
        return cls(arr)

    # ---------- Accessors ----------

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def size(self) -> tuple[int, int]:
        """(width, height)"""
        return self.width, self.height

    @property
    def pixels(self) -> np.ndarray:
        """Read-only view of the underlying (H, W, 3) uint8 array."""
        view = self._pixels.view()
        view.flags.writeable = False
        return view

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfRangeError(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer"
            )

    def get(self, x: int, y: int) -> RGB:
        self._check(x, y)
        r, g, b = self._pixels[y, x]
        return RGB(int(r), int(g), int(b))

    def set(self, x: int, y: int, value: Sequence[float]) -> None:
        """Store ``value`` at (x, y), clamping every channel to [0, 255]."""
        self._check(x, y)
        if len(value) != 3:
            raise ValueError(f"Expected 3 channels, got {len(value)}")
        self._pixels[y, x] = clamp_u8(value)

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self._pixels)

    def to_array(self) -> np.ndarray:
        """Writable copy of the pixel data."""
        return self._pixels.copy()

    # ---------- Dunder ----------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return np.array_equal(self._pixels, other._pixels)

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height})"
