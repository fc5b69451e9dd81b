"""Tests for the linear levels stretch."""

import numpy as np
import pytest

from src.photo_inverter.core.image import Image
from src.photo_inverter.core.levels import LevelsMapper
from src.photo_inverter.errors import InvalidImageError


def test_identity_mapping_keeps_bytes(backend, random_rgba):
    result = LevelsMapper(backend).apply(random_rgba, 0.0, 1.0)
    np.testing.assert_array_equal(result.pixels, random_rgba.pixels)


def test_identity_mapping_keeps_floats(backend, random_rgba_float):
    result = LevelsMapper(backend).apply(random_rgba_float, 0.0, 1.0)
    np.testing.assert_allclose(result.pixels, random_rgba_float.pixels, atol=1e-6)


@pytest.mark.parametrize("black, white", [(0.5, 0.5), (0.8, 0.2), (1.0, 0.0), (0.3, float("nan"))])
def test_empty_or_inverted_interval_is_passthrough(backend, random_rgba, black, white):
    result = LevelsMapper(backend).apply(random_rgba, black, white)
    assert result is random_rgba


def test_stretch_uses_shared_slope_and_bias(backend):
    pixels = np.array([[[51, 153, 204, 10], [0, 255, 127, 250]]], dtype=np.uint8)
    result = LevelsMapper(backend).apply(Image(pixels), 0.1, 0.9)
    # slope 1.25, bias -0.125, clamped and rounded to bytes
    np.testing.assert_array_equal(
        result.pixels,
        np.array([[[32, 159, 223, 10], [0, 255, 127, 250]]], dtype=np.uint8),
    )


def test_stretch_clamps_float_output_by_default(backend):
    pixels = np.array([[[0.05, 0.5, 0.95, 0.3]]], dtype=np.float32)
    result = LevelsMapper(backend).apply(Image(pixels), 0.1, 0.9)
    np.testing.assert_allclose(result.pixels[0, 0], [0.0, 0.5, 1.0, 0.3], atol=1e-6)


def test_unclamped_float_output_leaves_range(backend):
    pixels = np.array([[[0.05, 0.5, 0.95, 0.3]]], dtype=np.float32)
    mapper = LevelsMapper(backend, clamp=False)
    assert not mapper.clamps_output
    result = mapper.apply(Image(pixels), 0.1, 0.9)
    np.testing.assert_allclose(result.pixels[0, 0], [-0.0625, 0.5, 1.0625, 0.3], atol=1e-6)


def test_unclamped_byte_output_still_saturates(backend):
    pixels = np.array([[[0, 255, 128, 255]]], dtype=np.uint8)
    result = LevelsMapper(backend, clamp=False).apply(Image(pixels), 0.25, 0.75)
    assert result.pixels[0, 0, 0] == 0
    assert result.pixels[0, 0, 1] == 255


def test_stretch_preserves_alpha(backend, random_rgba):
    result = LevelsMapper(backend).apply(random_rgba, 0.2, 0.7)
    np.testing.assert_array_equal(result.alpha, random_rgba.alpha)


def test_apply_rejects_missing_image(numpy_backend):
    with pytest.raises(InvalidImageError):
        LevelsMapper(numpy_backend).apply(None, 0.0, 1.0)
