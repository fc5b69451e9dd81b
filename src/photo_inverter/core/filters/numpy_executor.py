"""NumPy vectorised executor for the inversion and levels transforms.

Every function takes and returns a ``(height, width, 4)`` RGBA array and never
writes to its input.  Luminance is reduced in double precision so the extrema
are exact for both storage kinds.
"""

from __future__ import annotations

import numpy as np

from ..image import luminance_of, normalised_rgb


def invert_pixels(pixels: np.ndarray) -> np.ndarray:
    """Return a copy of *pixels* with the colour channels inverted."""

    out = pixels.copy()
    if pixels.dtype == np.uint8:
        out[..., :3] = np.uint8(255) - pixels[..., :3]
    else:
        out[..., :3] = np.float32(1.0) - pixels[..., :3]
    return out


def luminance_extrema(pixels: np.ndarray) -> tuple[float, float]:
    """Return the minimum and maximum BT.709 luminance found in *pixels*."""

    luma = luminance_of(normalised_rgb(pixels))
    return float(np.min(luma)), float(np.max(luma))


def apply_levels(
    pixels: np.ndarray,
    slope: float,
    bias: float,
    clamp: bool = True,
) -> np.ndarray:
    """Apply ``value * slope + bias`` to the colour channels of *pixels*."""

    mapped = normalised_rgb(pixels) * slope + bias
    out = np.empty_like(pixels)
    out[..., 3] = pixels[..., 3]

    if pixels.dtype == np.uint8:
        np.clip(mapped, 0.0, 1.0, out=mapped)
        out[..., :3] = np.rint(mapped * 255.0).astype(np.uint8)
        return out

    if clamp:
        np.clip(mapped, 0.0, 1.0, out=mapped)
    out[..., :3] = mapped.astype(np.float32)
    return out


__all__ = ["apply_levels", "invert_pixels", "luminance_extrema"]
