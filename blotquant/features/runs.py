"""1D profile helpers shared by lane and band segmentation."""
from __future__ import annotations

import numpy as np


def smooth_1d(values: np.ndarray, half_window: int = 2) -> np.ndarray:
    """Moving average that only averages in-range neighbours near the edges."""
    values = np.asarray(values, dtype=np.float64)
    smoothed = np.empty_like(values)
    for i in range(len(values)):
        start = max(0, i - half_window)
        end = min(len(values), i + half_window + 1)
        smoothed[i] = values[start:end].sum() / (end - start)
    return smoothed


def runs_above(values: np.ndarray, threshold: float, min_length: int = 1) -> list[tuple[int, int]]:
    """Half-open ``(start, end)`` runs of samples strictly above ``threshold``.

    A run still open at the last sample closes at ``len(values)``.
    """
    runs: list[tuple[int, int]] = []
    in_run = False
    start = 0
    for idx, value in enumerate(values):
        if not in_run and value > threshold:
            in_run = True
            start = idx
        elif in_run and value <= threshold:
            in_run = False
            if idx - start >= min_length:
                runs.append((start, idx))
    if in_run and len(values) - start >= min_length:
        runs.append((start, len(values)))
    return runs
