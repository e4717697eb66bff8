"""Band segmentation within lanes from horizontal intensity profiles."""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Sequence

import numpy as np

from blotquant.features.lanes import Lane
from blotquant.features.runs import runs_above
from blotquant.preprocessing.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BandROI:
    lane: int
    y0: int
    y1: int
    x0: int
    x1: int

    @property
    def area(self) -> int:
        return (self.x1 - self.x0) * (self.y1 - self.y0)

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def horizontal_profile(buffer: PixelBuffer, lane: Lane) -> np.ndarray:
    return buffer.as_array()[:, lane.x0 : lane.x1].sum(axis=1)


def profile_threshold(profile: np.ndarray, peak_fraction: float = 0.5) -> float:
    mean = float(np.mean(profile))
    return mean + peak_fraction * (float(np.max(profile)) - mean)


def detect_bands(
    buffer: PixelBuffer,
    lanes: Sequence[Lane],
    min_band_height: int = 5,
    peak_fraction: float = 0.5,
) -> list[BandROI]:
    if min_band_height < 1:
        raise ValueError(f"min_band_height must be at least 1, got {min_band_height}")
    bands: list[BandROI] = []
    for lane_idx, lane in enumerate(lanes):
        profile = horizontal_profile(buffer, lane)
        if profile.size == 0:
            continue
        threshold = profile_threshold(profile, peak_fraction)
        for y0, y1 in runs_above(profile, threshold, min_length=min_band_height):
            bands.append(BandROI(lane=lane_idx, y0=y0, y1=y1, x0=lane.x0, x1=lane.x1))
    logger.debug("Detected %d bands across %d lanes", len(bands), len(lanes))
    return bands
