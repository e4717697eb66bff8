#!/usr/bin/env python
"""Quantify band intensities of a blot image and write CSV/JSON results."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

import cv2
import numpy as np

from blotquant import PipelineConfig, from_image, run_pipeline, to_frame


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Blot band quantification.")
    parser.add_argument("--image", type=Path, required=True)
    parser.add_argument("--output", type=Path, default=Path("runs/blot_results.csv"))
    parser.add_argument("--report", type=Path, default=None)
    parser.add_argument("--ball-radius", type=int, default=50)
    parser.add_argument("--expected-lanes", type=int, default=None)
    parser.add_argument("--lane-half-window", type=int, default=2)
    parser.add_argument("--min-band-height", type=int, default=5)
    parser.add_argument("--band-peak-fraction", type=float, default=0.5)
    parser.add_argument("--control-band", type=int, default=0)
    parser.add_argument("--control-lane", type=int, default=0)
    parser.add_argument("--subtract-background", action=argparse.BooleanOptionalAction, default=True)
    parser.add_argument("--invert", action="store_true", help="Use for dark bands on a light background.")
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser.parse_args()


def _load_gray(path: Path, invert: bool) -> np.ndarray:
    image = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if image is None:
        raise FileNotFoundError(path)
    if image.ndim == 3:
        code = cv2.COLOR_BGRA2GRAY if image.shape[2] == 4 else cv2.COLOR_BGR2GRAY
        image = cv2.cvtColor(image, code)
    gray = image.astype(np.float64)
    if invert:
        gray = 255.0 - gray
    return gray


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    config = PipelineConfig(
        ball_radius=args.ball_radius,
        expected_lanes=args.expected_lanes,
        lane_half_window=args.lane_half_window,
        min_band_height=args.min_band_height,
        band_peak_fraction=args.band_peak_fraction,
        control_band_index=args.control_band,
        control_lane=args.control_lane,
        subtract_background=args.subtract_background,
    )
    buffer = from_image(_load_gray(args.image, args.invert))
    result = run_pipeline(buffer, config)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(result.to_csv(), encoding="utf-8")

    if args.report is not None:
        report = {"image": str(args.image), "invert": args.invert, **result.to_dict()}
        args.report.parent.mkdir(parents=True, exist_ok=True)
        args.report.write_text(json.dumps(report, indent=2), encoding="utf-8")

    print(f"Lanes: {len(result.lanes)} | bands: {len(result.bands)}")
    print(to_frame(result.export_rows()).to_string(index=False))


if __name__ == "__main__":
    main()
