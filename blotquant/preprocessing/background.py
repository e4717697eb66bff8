"""Rolling-ball background estimation by grey-scale morphological opening."""
from __future__ import annotations

import logging

import numpy as np
from scipy import ndimage

from blotquant.preprocessing.pixel_buffer import PixelBuffer, from_image

logger = logging.getLogger(__name__)


def _check_radius(radius: int) -> int:
    radius = int(radius)
    if radius < 0:
        raise ValueError(f"Ball radius must be non-negative, got {radius}")
    return radius


def ball_kernel(radius: int) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(heights, footprint)`` of a ball over a (2r+1) square window.

    Offsets with ``dx**2 + dy**2 > r**2`` are left out of the footprint; the
    rim inside the radius keeps its zero height and stays in.
    """
    radius = _check_radius(radius)
    offsets = np.arange(-radius, radius + 1, dtype=np.float64)
    dy, dx = np.meshgrid(offsets, offsets, indexing="ij")
    d2 = dx * dx + dy * dy
    footprint = d2 <= radius * radius
    heights = np.zeros_like(d2)
    heights[footprint] = np.sqrt(radius * radius - d2[footprint])
    return heights, footprint


def _erode(image: np.ndarray, heights: np.ndarray, footprint: np.ndarray) -> np.ndarray:
    # min over the footprint of pixel(p + o) - h(o), border pixels repeated
    return ndimage.grey_erosion(image, footprint=footprint, structure=heights, mode="nearest")


def _dilate(image: np.ndarray, heights: np.ndarray, footprint: np.ndarray) -> np.ndarray:
    # max over the footprint of pixel(p + o) + h(o); the ball is symmetric so
    # scipy's reflection of the structuring element is a no-op
    return ndimage.grey_dilation(image, footprint=footprint, structure=heights, mode="nearest")


def estimate_background(buffer: PixelBuffer, radius: int) -> PixelBuffer:
    heights, footprint = ball_kernel(radius)
    image = buffer.as_array().astype(np.float64)
    eroded = _erode(image, heights, footprint)
    background = _dilate(eroded, heights, footprint)
    logger.debug(
        "Estimated background for %dx%d buffer with radius %d",
        buffer.width,
        buffer.height,
        radius,
    )
    return from_image(background)


def subtract_background(buffer: PixelBuffer, radius: int) -> PixelBuffer:
    background = estimate_background(buffer, radius)
    corrected = np.maximum(buffer.as_array() - background.as_array(), 0.0)
    return from_image(corrected)
