"""Pixel buffer model and background correction."""

from blotquant.preprocessing.background import (
    ball_kernel,
    estimate_background,
    subtract_background,
)
from blotquant.preprocessing.pixel_buffer import (
    PixelBuffer,
    ShapeError,
    create_buffer,
    from_array,
    from_image,
    rgba_to_gray,
)

__all__ = [
    "PixelBuffer",
    "ShapeError",
    "ball_kernel",
    "create_buffer",
    "estimate_background",
    "from_array",
    "from_image",
    "rgba_to_gray",
    "subtract_background",
]
