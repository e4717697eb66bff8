"""Integrated band intensity with local border-background correction."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Sequence

from blotquant.features.bands import BandROI
from blotquant.preprocessing.pixel_buffer import PixelBuffer


@dataclass(frozen=True)
class BandIntensity:
    lane: int
    band_index: int
    raw_intensity: float
    background_per_pixel: float
    corrected_intensity: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def integrated_intensity(buffer: PixelBuffer, roi: BandROI) -> float:
    return float(buffer.as_array()[roi.y0 : roi.y1, roi.x0 : roi.x1].sum())


def border_background(buffer: PixelBuffer, roi: BandROI) -> float:
    """Mean of the ROI's border pixels, each corner counted once."""
    image = buffer.as_array()
    total = 0.0
    count = 0

    top = image[roi.y0, roi.x0 : roi.x1]
    total += float(top.sum())
    count += top.size
    if roi.y1 - 1 > roi.y0:
        bottom = image[roi.y1 - 1, roi.x0 : roi.x1]
        total += float(bottom.sum())
        count += bottom.size

    # Side columns only over the rows between top and bottom.
    left = image[roi.y0 + 1 : roi.y1 - 1, roi.x0]
    total += float(left.sum())
    count += left.size
    if roi.x1 - 1 > roi.x0:
        right = image[roi.y0 + 1 : roi.y1 - 1, roi.x1 - 1]
        total += float(right.sum())
        count += right.size

    return total / count if count > 0 else 0.0


def measure_bands(buffer: PixelBuffer, rois: Sequence[BandROI]) -> list[BandIntensity]:
    lane_band_count: dict[int, int] = {}
    measurements: list[BandIntensity] = []
    for roi in rois:
        band_index = lane_band_count.get(roi.lane, 0)
        lane_band_count[roi.lane] = band_index + 1

        raw = integrated_intensity(buffer, roi)
        background = border_background(buffer, roi)
        corrected = max(0.0, raw - background * roi.area)
        measurements.append(
            BandIntensity(
                lane=roi.lane,
                band_index=band_index,
                raw_intensity=raw,
                background_per_pixel=background,
                corrected_intensity=corrected,
            )
        )
    return measurements
