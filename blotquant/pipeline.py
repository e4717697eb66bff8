"""End-to-end blot quantification: background, lanes, bands, measure, normalize."""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, replace
from typing import Any

from blotquant.features.bands import BandROI, detect_bands
from blotquant.features.lanes import Lane, detect_lanes
from blotquant.preprocessing.background import subtract_background
from blotquant.preprocessing.pixel_buffer import PixelBuffer
from blotquant.quantification.densitometry import BandIntensity, measure_bands
from blotquant.quantification.normalization import NormalizedResult, normalize
from blotquant.reporting.export import ExportRow, to_csv, to_export_rows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineConfig:
    ball_radius: int = 50
    expected_lanes: int | None = None
    lane_half_window: int = 2
    min_band_height: int = 5
    band_peak_fraction: float = 0.5
    control_band_index: int = 0
    control_lane: int = 0
    subtract_background: bool = True

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PipelineResult:
    config: PipelineConfig
    corrected: PixelBuffer
    lanes: list[Lane]
    bands: list[BandROI]
    intensities: list[BandIntensity]
    results: list[NormalizedResult]

    def export_rows(self) -> list[ExportRow]:
        return to_export_rows(self.results)

    def to_csv(self) -> str:
        return to_csv(self.export_rows())

    def to_dict(self) -> dict[str, Any]:
        return {
            "config": self.config.to_dict(),
            "width": self.corrected.width,
            "height": self.corrected.height,
            "lanes": [lane.to_dict() for lane in self.lanes],
            "bands": [band.to_dict() for band in self.bands],
            "intensities": [item.to_dict() for item in self.intensities],
            "results": [item.to_dict() for item in self.results],
        }


def run_pipeline(buffer: PixelBuffer, config: PipelineConfig | None = None) -> PipelineResult:
    config = config or PipelineConfig()
    if config.subtract_background:
        corrected = subtract_background(buffer, config.ball_radius)
    else:
        corrected = buffer

    lanes = detect_lanes(corrected, config.expected_lanes, half_window=config.lane_half_window)
    bands = detect_bands(
        corrected,
        lanes,
        min_band_height=config.min_band_height,
        peak_fraction=config.band_peak_fraction,
    )
    intensities = measure_bands(corrected, bands)
    results = normalize(intensities, config.control_band_index, config.control_lane)
    logger.debug(
        "Quantified %d bands in %d lanes (%dx%d image)",
        len(bands),
        len(lanes),
        buffer.width,
        buffer.height,
    )
    return PipelineResult(
        config=config,
        corrected=corrected,
        lanes=lanes,
        bands=bands,
        intensities=intensities,
        results=results,
    )


def renormalize(
    result: PipelineResult, control_band_index: int, control_lane: int = 0
) -> PipelineResult:
    """Re-run only the normalization stage against another control band or lane."""
    config = replace(result.config, control_band_index=control_band_index, control_lane=control_lane)
    return replace(
        result,
        config=config,
        results=normalize(result.intensities, control_band_index, control_lane),
    )
