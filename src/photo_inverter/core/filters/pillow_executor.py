"""Pillow-based executor using 8-bit lookup tables (LUT).

Inversion and the levels stretch are pure per-channel curves on 8-bit data,
so they can be pre-computed for all 256 input values and applied by
Pillow's C-optimised ``Image.point``.  The alpha band always receives an
identity table.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from PIL import Image as PILImage

from .algorithms import _clamp01, _float_to_uint8, _levels_channel

_IDENTITY_TABLE = list(range(256))
_INVERT_TABLE = [255 - value for value in range(256)]


def build_levels_lut(slope: float, bias: float) -> list[int]:
    """Pre-compute the levels curve for every possible 8-bit channel value."""

    lut: list[int] = []
    for channel_value in range(256):
        adjusted = _levels_channel(channel_value / 255.0, slope, bias)
        lut.append(_float_to_uint8(_clamp01(adjusted)))
    return lut


def apply_rgb_lut(pixels: np.ndarray, lut: Sequence[int]) -> np.ndarray:
    """Apply *lut* to the R, G and B bands of an 8-bit RGBA array."""

    if pixels.dtype != np.uint8:
        raise TypeError("Lookup tables only apply to 8-bit pixel data")

    pil_image = PILImage.fromarray(np.ascontiguousarray(pixels))
    if pil_image.mode != "RGBA":
        raise TypeError(f"Expected an RGBA buffer, Pillow reported {pil_image.mode}")
    table: list[int] = list(lut) * 3 + _IDENTITY_TABLE
    return np.array(pil_image.point(table), dtype=np.uint8)


def invert_pixels(pixels: np.ndarray) -> np.ndarray:
    """Return a copy of 8-bit *pixels* with the colour channels inverted."""

    return apply_rgb_lut(pixels, _INVERT_TABLE)


def apply_levels(pixels: np.ndarray, slope: float, bias: float) -> np.ndarray:
    """Apply the levels stretch to 8-bit *pixels* through a lookup table."""

    return apply_rgb_lut(pixels, build_levels_lut(slope, bias))


__all__ = ["apply_levels", "apply_rgb_lut", "build_levels_lut", "invert_pixels"]
