"""Quantification of electrophoretic blot band intensities."""

from blotquant.features import (
    BandROI,
    Lane,
    detect_bands,
    detect_lanes,
    horizontal_profile,
    split_into_equal_lanes,
    vertical_projection,
)
from blotquant.pipeline import PipelineConfig, PipelineResult, renormalize, run_pipeline
from blotquant.preprocessing import (
    PixelBuffer,
    ShapeError,
    create_buffer,
    estimate_background,
    from_array,
    from_image,
    rgba_to_gray,
    subtract_background,
)
from blotquant.quantification import (
    BandIntensity,
    NormalizedResult,
    border_background,
    integrated_intensity,
    measure_bands,
    normalize,
)
from blotquant.reporting import ExportRow, to_chart_data, to_csv, to_export_rows, to_frame

__all__ = [
    # Pixel buffer
    "PixelBuffer",
    "ShapeError",
    "create_buffer",
    "from_array",
    "from_image",
    "rgba_to_gray",
    # Background
    "estimate_background",
    "subtract_background",
    # Segmentation
    "Lane",
    "BandROI",
    "detect_lanes",
    "detect_bands",
    "horizontal_profile",
    "split_into_equal_lanes",
    "vertical_projection",
    # Quantification
    "BandIntensity",
    "NormalizedResult",
    "border_background",
    "integrated_intensity",
    "measure_bands",
    "normalize",
    # Export
    "ExportRow",
    "to_chart_data",
    "to_csv",
    "to_export_rows",
    "to_frame",
    # Pipeline
    "PipelineConfig",
    "PipelineResult",
    "renormalize",
    "run_pipeline",
]
