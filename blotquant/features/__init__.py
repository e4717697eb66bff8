"""Lane and band segmentation."""

from blotquant.features.bands import (
    BandROI,
    detect_bands,
    horizontal_profile,
    profile_threshold,
)
from blotquant.features.lanes import (
    DEFAULT_LANE_COUNT,
    Lane,
    detect_lanes,
    split_into_equal_lanes,
    vertical_projection,
)
from blotquant.features.runs import runs_above, smooth_1d

__all__ = [
    # Lanes
    "DEFAULT_LANE_COUNT",
    "Lane",
    "detect_lanes",
    "split_into_equal_lanes",
    "vertical_projection",
    # Bands
    "BandROI",
    "detect_bands",
    "horizontal_profile",
    "profile_threshold",
    # Profiles
    "runs_above",
    "smooth_1d",
]
