"""Tests for the global luminance extrema scan."""

import numpy as np
import pytest

from src.photo_inverter.core.image import Image
from src.photo_inverter.core.inversion import ColorInverter
from src.photo_inverter.core.luminance import LuminanceExtremaScanner
from src.photo_inverter.errors import InvalidImageError


def test_uniform_image_has_equal_extremes(backend):
    colour = (40, 120, 200)
    pixels = np.empty((6, 4, 4), dtype=np.uint8)
    pixels[..., :3] = colour
    pixels[..., 3] = 255
    extremes = LuminanceExtremaScanner(backend).scan(Image(pixels))

    expected = (0.2126 * 40 + 0.7152 * 120 + 0.0722 * 200) / 255.0
    assert extremes.is_uniform
    assert extremes.minimum == pytest.approx(expected, abs=1e-12)
    assert extremes.maximum == pytest.approx(expected, abs=1e-12)


def test_scan_finds_single_outlier_pixels(backend):
    pixels = np.full((32, 32, 4), 128, dtype=np.uint8)
    pixels[31, 0, :3] = 0
    pixels[0, 31, :3] = 255
    extremes = LuminanceExtremaScanner(backend).scan(Image(pixels))
    assert extremes.minimum == pytest.approx(0.0)
    assert extremes.maximum == pytest.approx(1.0)


def test_scan_ignores_alpha(backend):
    pixels = np.array([[[255, 255, 255, 0], [0, 0, 0, 255]]], dtype=np.uint8)
    extremes = LuminanceExtremaScanner(backend).scan(Image(pixels))
    assert extremes.minimum == pytest.approx(0.0)
    assert extremes.maximum == pytest.approx(1.0)


def test_inversion_reflects_extremes(backend, random_rgba):
    scanner = LuminanceExtremaScanner(backend)
    original = scanner.scan(random_rgba)
    inverted = scanner.scan(ColorInverter(backend).invert(random_rgba))
    assert inverted.minimum == pytest.approx(1.0 - original.maximum, abs=1e-9)
    assert inverted.maximum == pytest.approx(1.0 - original.minimum, abs=1e-9)


def test_scan_matches_brute_force_on_floats(backend, random_rgba_float):
    extremes = LuminanceExtremaScanner(backend).scan(random_rgba_float)
    rgb = random_rgba_float.pixels[..., :3].astype(np.float64)
    luma = rgb[..., 0] * 0.2126 + rgb[..., 1] * 0.7152 + rgb[..., 2] * 0.0722
    assert extremes.minimum == pytest.approx(float(luma.min()), abs=1e-9)
    assert extremes.maximum == pytest.approx(float(luma.max()), abs=1e-9)


def test_scan_rejects_missing_image(numpy_backend):
    with pytest.raises(InvalidImageError):
        LuminanceExtremaScanner(numpy_backend).scan(None)
