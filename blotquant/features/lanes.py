"""Lane segmentation from the vertical intensity projection."""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

import numpy as np

from blotquant.features.runs import runs_above, smooth_1d
from blotquant.preprocessing.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

DEFAULT_LANE_COUNT = 4


@dataclass(frozen=True)
class Lane:
    x0: int
    x1: int

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def vertical_projection(buffer: PixelBuffer) -> np.ndarray:
    return buffer.as_array().sum(axis=0)


def split_into_equal_lanes(width: int, count: int) -> list[Lane]:
    if count < 0:
        raise ValueError(f"Lane count must be non-negative, got {count}")
    if count == 0:
        return []
    lane_width = width // count
    lanes = [Lane(i * lane_width, (i + 1) * lane_width) for i in range(count - 1)]
    lanes.append(Lane((count - 1) * lane_width, width))
    return lanes


def detect_lanes(
    buffer: PixelBuffer,
    expected_count: int | None = None,
    half_window: int = 2,
) -> list[Lane]:
    """Find bright column runs; fall back to equal-width lanes.

    Detected lanes are discarded whenever ``expected_count`` is given and
    does not match. With no expected count, an empty detection yields
    ``DEFAULT_LANE_COUNT`` equal lanes.
    """
    smoothed = smooth_1d(vertical_projection(buffer), half_window)
    threshold = float(np.mean(smoothed)) if smoothed.size else 0.0
    lanes = [Lane(x0, x1) for x0, x1 in runs_above(smoothed, threshold)]

    if expected_count and len(lanes) != expected_count:
        logger.warning(
            "Detected %d lanes but %d were expected; using equal-width lanes",
            len(lanes),
            expected_count,
        )
        return split_into_equal_lanes(buffer.width, expected_count)
    if not lanes:
        count = expected_count or DEFAULT_LANE_COUNT
        logger.warning("No lanes detected; using %d equal-width lanes", count)
        return split_into_equal_lanes(buffer.width, count)
    logger.debug("Detected %d lanes", len(lanes))
    return lanes
