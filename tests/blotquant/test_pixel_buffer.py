from __future__ import annotations

import numpy as np
import pytest

from blotquant.preprocessing import (
    PixelBuffer,
    ShapeError,
    create_buffer,
    from_array,
    from_image,
    rgba_to_gray,
)


def test_create_buffer_dimensions_and_fill() -> None:
    buffer = create_buffer(10, 5, 128)
    assert buffer.width == 10
    assert buffer.height == 5
    assert buffer.values.size == 50
    assert buffer.values[0] == 128


def test_pixel_clamps_to_border() -> None:
    buffer = from_array([1, 2, 3, 4], 2, 2)
    assert buffer.pixel(0, 0) == 1
    assert buffer.pixel(1, 0) == 2
    assert buffer.pixel(-1, 0) == 1
    assert buffer.pixel(5, 1) == 4
    assert buffer.pixel(1, -3) == 2


def test_from_array_is_row_major() -> None:
    buffer = from_array([10, 20, 30, 40, 50, 60], 3, 2)
    assert buffer.pixel(2, 1) == 60
    assert buffer.as_array().shape == (2, 3)


def test_from_array_length_mismatch() -> None:
    with pytest.raises(ShapeError, match="Array length mismatch"):
        from_array([1, 2, 3], 2, 2)


def test_from_image_rejects_non_2d() -> None:
    with pytest.raises(ShapeError):
        from_image(np.zeros((2, 2, 3)))


def test_values_are_read_only() -> None:
    buffer = from_array([1, 2, 3, 4], 2, 2)
    with pytest.raises(ValueError):
        buffer.values[0] = 9


def test_with_pixel_returns_new_buffer() -> None:
    buffer = create_buffer(3, 3)
    updated = buffer.with_pixel(1, 1, 200)
    assert updated.values[4] == 200
    assert buffer.values[4] == 0
    outside = buffer.with_pixel(7, 1, 200)
    assert np.array_equal(outside.values, buffer.values)


def test_rgba_to_gray_luminance() -> None:
    gray = rgba_to_gray([255, 255, 255, 255, 0, 0, 0, 255], 2, 1)
    assert gray.values[0] == pytest.approx(255.0)
    assert gray.values[1] == pytest.approx(0.0)
    red = rgba_to_gray([255, 0, 0, 255], 1, 1)
    assert red.values[0] == pytest.approx(76.245)


def test_rgba_to_gray_length_mismatch() -> None:
    with pytest.raises(ShapeError):
        rgba_to_gray([255, 0, 0], 1, 1)


def test_constructor_copies_caller_array() -> None:
    source = np.zeros(4)
    buffer = PixelBuffer(2, 2, source)
    assert source.flags.writeable
    source[0] = 7.0
    assert buffer.values[0] == 0.0
    assert not buffer.values.flags.writeable


def test_constructor_rejects_mismatched_list() -> None:
    with pytest.raises(ShapeError):
        PixelBuffer(2, 2, [1, 2, 3])


def test_constructor_accepts_plain_list() -> None:
    buffer = PixelBuffer(2, 2, [1, 2, 3, 4])
    assert buffer.values.dtype == np.float64
    assert buffer.pixel(1, 1) == 4.0
