"""Dense grayscale raster shared by every pipeline stage."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

LUMA_WEIGHTS = (0.299, 0.587, 0.114)


class ShapeError(ValueError):
    pass


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """Row-major float64 pixels of a ``width`` x ``height`` image.

    ``values`` is stored read-only; stages that transform a buffer build a new
    one instead of writing into it.
    """

    width: int
    height: int
    values: np.ndarray

    def __post_init__(self) -> None:
        # own a flat float64 copy; the caller's array is never locked or aliased
        object.__setattr__(self, "values", np.array(self.values, dtype=np.float64).ravel())
        if self.values.size != self.width * self.height:
            raise ShapeError(
                f"Expected {self.width * self.height} values for a "
                f"{self.width}x{self.height} buffer, got {self.values.size}"
            )
        self.values.flags.writeable = False

    def pixel(self, x: int, y: int) -> float:
        cx = min(max(x, 0), self.width - 1)
        cy = min(max(y, 0), self.height - 1)
        return float(self.values[cy * self.width + cx])

    def as_array(self) -> np.ndarray:
        return self.values.reshape(self.height, self.width)

    def with_pixel(self, x: int, y: int, value: float) -> PixelBuffer:
        values = self.values.copy()
        if 0 <= x < self.width and 0 <= y < self.height:
            values[y * self.width + x] = value
        return PixelBuffer(self.width, self.height, values)


def _new_buffer(values: np.ndarray, width: int, height: int) -> PixelBuffer:
    return PixelBuffer(width=int(width), height=int(height), values=values)


def from_array(values: Sequence[float] | np.ndarray, width: int, height: int) -> PixelBuffer:
    flat = np.array(values, dtype=np.float64).ravel()
    if flat.size != width * height:
        raise ShapeError(
            f"Array length mismatch: {flat.size} values for {width}x{height}"
        )
    return _new_buffer(flat, width, height)


def from_image(array: np.ndarray) -> PixelBuffer:
    array = np.asarray(array)
    if array.ndim != 2:
        raise ShapeError(f"Expected a 2-D grayscale array, got shape {array.shape}")
    height, width = array.shape
    return _new_buffer(array.astype(np.float64).ravel(), width, height)


def create_buffer(width: int, height: int, fill: float = 0.0) -> PixelBuffer:
    return _new_buffer(np.full(width * height, fill, dtype=np.float64), width, height)


def rgba_to_gray(rgba: Sequence[int] | np.ndarray, width: int, height: int) -> PixelBuffer:
    """Collapse interleaved RGBA bytes to luminance; alpha is ignored."""
    data = np.asarray(rgba, dtype=np.float64).ravel()
    if data.size != 4 * width * height:
        raise ShapeError(
            f"Expected {4 * width * height} RGBA bytes for {width}x{height}, got {data.size}"
        )
    pixels = data.reshape(-1, 4)
    gray = pixels[:, 0] * LUMA_WEIGHTS[0] + pixels[:, 1] * LUMA_WEIGHTS[1] + pixels[:, 2] * LUMA_WEIGHTS[2]
    return _new_buffer(gray, width, height)
