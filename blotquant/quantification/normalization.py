"""Loading-control normalization and fold change across lanes."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Sequence

from blotquant.quantification.densitometry import BandIntensity


@dataclass(frozen=True)
class NormalizedResult:
    lane: int
    band_index: int
    raw_intensity: float
    corrected_intensity: float
    normalized_intensity: float
    fold_change: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _safe_ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator > 0 else 0.0


def normalize(
    intensities: Sequence[BandIntensity],
    control_band_index: int,
    control_lane: int = 0,
) -> list[NormalizedResult]:
    """Divide each band by its lane's control band, then by the reference lane.

    A lane without a control band divides by 1; a control of zero or less
    yields 0. The same substitutions apply to the reference lane.
    """
    control: dict[int, float] = {}
    for band in intensities:
        if band.band_index == control_band_index:
            control[band.lane] = band.corrected_intensity

    normalized = [
        (band, _safe_ratio(band.corrected_intensity, control.get(band.lane, 1.0)))
        for band in intensities
    ]

    reference: dict[int, float] = {}
    for band, value in normalized:
        if band.lane == control_lane:
            reference[band.band_index] = value

    results = [
        NormalizedResult(
            lane=band.lane,
            band_index=band.band_index,
            raw_intensity=band.raw_intensity,
            corrected_intensity=band.corrected_intensity,
            normalized_intensity=value,
            fold_change=_safe_ratio(value, reference.get(band.band_index, 1.0)),
        )
        for band, value in normalized
    ]
    results.sort(key=lambda r: (r.lane, r.band_index))
    return results
