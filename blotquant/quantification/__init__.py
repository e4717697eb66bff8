"""Band measurement and normalization."""

from blotquant.quantification.densitometry import (
    BandIntensity,
    border_background,
    integrated_intensity,
    measure_bands,
)
from blotquant.quantification.normalization import NormalizedResult, normalize

__all__ = [
    "BandIntensity",
    "NormalizedResult",
    "border_background",
    "integrated_intensity",
    "measure_bands",
    "normalize",
]
