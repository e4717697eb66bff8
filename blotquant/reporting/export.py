"""Rounded export rows, CSV text and chart data for normalized results."""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Sequence

import pandas as pd

from blotquant.quantification.normalization import NormalizedResult

CSV_COLUMNS = (
    "Lane",
    "Band",
    "RawIntensity",
    "CorrectedIntensity",
    "NormalizedIntensity",
    "FoldChange",
)
INTENSITY_DECIMALS = 2
RATIO_DECIMALS = 4


@dataclass(frozen=True)
class ExportRow:
    lane: int
    band: int
    raw_intensity: float
    corrected_intensity: float
    normalized_intensity: float
    fold_change: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def values(self) -> tuple[Any, ...]:
        return (
            self.lane,
            self.band,
            self.raw_intensity,
            self.corrected_intensity,
            self.normalized_intensity,
            self.fold_change,
        )


def round_half_up(value: float, decimals: int) -> float:
    scale = 10**decimals
    return math.floor(value * scale + 0.5) / scale


def to_export_rows(results: Sequence[NormalizedResult]) -> list[ExportRow]:
    return [
        ExportRow(
            lane=r.lane,
            band=r.band_index,
            raw_intensity=round_half_up(r.raw_intensity, INTENSITY_DECIMALS),
            corrected_intensity=round_half_up(r.corrected_intensity, INTENSITY_DECIMALS),
            normalized_intensity=round_half_up(r.normalized_intensity, RATIO_DECIMALS),
            fold_change=round_half_up(r.fold_change, RATIO_DECIMALS),
        )
        for r in results
    ]


def format_number(value: float | int) -> str:
    """Integral values print without a fractional part (``1000``, not ``1000.0``)."""
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)


def to_csv(rows: Sequence[ExportRow]) -> str:
    lines = [",".join(CSV_COLUMNS)]
    lines.extend(",".join(format_number(v) for v in row.values()) for row in rows)
    return "\n".join(lines)


def to_chart_data(results: Sequence[NormalizedResult], band_index: int) -> list[dict[str, Any]]:
    return [
        {"lane": r.lane, "value": r.normalized_intensity}
        for r in results
        if r.band_index == band_index
    ]


def to_frame(rows: Sequence[ExportRow]) -> pd.DataFrame:
    return pd.DataFrame.from_records([row.values() for row in rows], columns=list(CSV_COLUMNS))
