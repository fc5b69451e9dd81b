"""JIT-accelerated executor using Numba.

The kernels walk the pixel grid row by row, mirroring the vectorised executor
exactly: luminance extrema are reduced over every pixel and the levels
stretch uses the same per-channel slope and bias.
"""

from __future__ import annotations

import numpy as np
from numba import jit

from .algorithms import _clamp01, _float_to_uint8, _levels_channel, _luma


def invert_pixels(pixels: np.ndarray) -> np.ndarray:
    """Return a copy of *pixels* with the colour channels inverted."""

    out = np.empty_like(pixels)
    if pixels.dtype == np.uint8:
        _invert_uint8(pixels, out)
    else:
        _invert_float(pixels, out)
    return out


def luminance_extrema(pixels: np.ndarray) -> tuple[float, float]:
    """Return the minimum and maximum BT.709 luminance found in *pixels*."""

    scale = 255.0 if pixels.dtype == np.uint8 else 1.0
    minimum, maximum = _luminance_extrema(pixels, scale)
    return float(minimum), float(maximum)


def apply_levels(
    pixels: np.ndarray,
    slope: float,
    bias: float,
    clamp: bool = True,
) -> np.ndarray:
    """Apply ``value * slope + bias`` to the colour channels of *pixels*."""

    out = np.empty_like(pixels)
    if pixels.dtype == np.uint8:
        _levels_uint8(pixels, out, float(slope), float(bias))
    else:
        _levels_float(pixels, out, float(slope), float(bias), bool(clamp))
    return out


@jit(nopython=True, cache=True)
def _invert_uint8(pixels: np.ndarray, out: np.ndarray) -> None:
    height, width = pixels.shape[0], pixels.shape[1]
    for y in range(height):
        for x in range(width):
            for c in range(3):
                out[y, x, c] = 255 - pixels[y, x, c]
            out[y, x, 3] = pixels[y, x, 3]


@jit(nopython=True, cache=True)
def _invert_float(pixels: np.ndarray, out: np.ndarray) -> None:
    height, width = pixels.shape[0], pixels.shape[1]
    for y in range(height):
        for x in range(width):
            for c in range(3):
                out[y, x, c] = 1.0 - pixels[y, x, c]
            out[y, x, 3] = pixels[y, x, 3]


@jit(nopython=True, cache=True)
def _luminance_extrema(pixels: np.ndarray, scale: float) -> tuple[float, float]:
    height, width = pixels.shape[0], pixels.shape[1]
    minimum = np.inf
    maximum = -np.inf
    for y in range(height):
        for x in range(width):
            luma = _luma(
                pixels[y, x, 0] / scale,
                pixels[y, x, 1] / scale,
                pixels[y, x, 2] / scale,
            )
            if luma < minimum:
                minimum = luma
            if luma > maximum:
                maximum = luma
    return minimum, maximum


@jit(nopython=True, cache=True)
def _levels_uint8(pixels: np.ndarray, out: np.ndarray, slope: float, bias: float) -> None:
    height, width = pixels.shape[0], pixels.shape[1]
    for y in range(height):
        for x in range(width):
            for c in range(3):
                value = _levels_channel(pixels[y, x, c] / 255.0, slope, bias)
                out[y, x, c] = _float_to_uint8(_clamp01(value))
            out[y, x, 3] = pixels[y, x, 3]


@jit(nopython=True, cache=True)
def _levels_float(
    pixels: np.ndarray,
    out: np.ndarray,
    slope: float,
    bias: float,
    clamp: bool,
) -> None:
    height, width = pixels.shape[0], pixels.shape[1]
    for y in range(height):
        for x in range(width):
            for c in range(3):
                value = _levels_channel(float(pixels[y, x, c]), slope, bias)
                if clamp:
                    value = _clamp01(value)
                out[y, x, c] = value
            out[y, x, 3] = pixels[y, x, 3]


__all__ = ["apply_levels", "invert_pixels", "luminance_extrema"]
