from __future__ import annotations

import json
import logging

import numpy as np
import pytest

from blotquant import (
    PipelineConfig,
    from_image,
    renormalize,
    run_pipeline,
    split_into_equal_lanes,
)

BAND_SHAPE = np.array([1, 2, 3, 4, 5, 4, 3, 2, 1], dtype=np.float64)
TARGET_SCALES = (10.0, 11.0, 12.0)
CONTROL_SCALE = 10.0


def _synthetic_blot() -> np.ndarray:
    """Three 10-px lanes, a target band on top and a loading control below."""
    image = np.zeros((40, 30))
    for lane, scale in enumerate(TARGET_SCALES):
        cols = slice(lane * 10, lane * 10 + 10)
        image[5:14, cols] = (BAND_SHAPE * scale)[:, None]
        image[25:34, cols] = (BAND_SHAPE * CONTROL_SCALE)[:, None]
    return image


@pytest.fixture
def config() -> PipelineConfig:
    return PipelineConfig(
        expected_lanes=3,
        min_band_height=3,
        control_band_index=1,
        subtract_background=False,
    )


def test_pipeline_geometry(config: PipelineConfig) -> None:
    result = run_pipeline(from_image(_synthetic_blot()), config)
    assert result.lanes == split_into_equal_lanes(30, 3)
    assert [(b.lane, b.y0, b.y1) for b in result.bands] == [
        (0, 8, 11), (0, 28, 31),
        (1, 8, 11), (1, 28, 31),
        (2, 8, 11), (2, 28, 31),
    ]


def test_pipeline_normalization(config: PipelineConfig) -> None:
    result = run_pipeline(from_image(_synthetic_blot()), config)
    assert [(r.lane, r.band_index) for r in result.results] == [
        (0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1),
    ]
    targets = [r for r in result.results if r.band_index == 0]
    controls = [r for r in result.results if r.band_index == 1]
    assert [r.fold_change for r in targets] == pytest.approx([1.0, 1.1, 1.2])
    assert [r.normalized_intensity for r in controls] == pytest.approx([1.0, 1.0, 1.0])
    # 130k raw minus border mean (90k / 22) over a 3x10 ROI
    assert targets[0].corrected_intensity == pytest.approx(10 * (130 - 90 * 30 / 22))


def test_renormalize_to_other_band(config: PipelineConfig) -> None:
    result = run_pipeline(from_image(_synthetic_blot()), config)
    updated = renormalize(result, control_band_index=0)
    assert updated.config.control_band_index == 0
    assert updated.intensities == result.intensities
    targets = [r for r in updated.results if r.band_index == 0]
    assert [r.normalized_intensity for r in targets] == pytest.approx([1.0, 1.0, 1.0])
    assert result.config.control_band_index == 1


def test_pipeline_csv_and_report(config: PipelineConfig) -> None:
    result = run_pipeline(from_image(_synthetic_blot()), config)
    lines = result.to_csv().split("\n")
    assert len(lines) == len(result.results) + 1
    report = json.loads(json.dumps(result.to_dict()))
    assert report["config"]["expected_lanes"] == 3
    assert len(report["bands"]) == 6


def test_pipeline_with_background_subtraction() -> None:
    buffer = from_image(_synthetic_blot() + 20.0)
    result = run_pipeline(buffer, PipelineConfig(ball_radius=3, min_band_height=3))
    assert np.all(result.corrected.values >= 0)
    assert len(result.intensities) == len(result.bands) == len(result.results)
    assert buffer.as_array().min() == 20.0


def test_pipeline_is_quiet_at_info(config: PipelineConfig, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="blotquant"):
        run_pipeline(from_image(_synthetic_blot()), config)
    assert not [r for r in caplog.records if r.name == "blotquant.pipeline"]
