"""Immutable RGBA pixel buffer used throughout the transform pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from ..config import LUMA_WEIGHTS
from ..errors import InvalidImageError

SUPPORTED_DTYPES = (np.dtype(np.uint8), np.dtype(np.float32))
"""Storage kinds accepted by :class:`Image`."""


@dataclass(frozen=True, eq=False)
class Image:
    """A rectangular ``(height, width, 4)`` RGBA buffer.

    ``uint8`` buffers store channels in ``0..255`` while ``float32`` buffers
    store normalised ``[0, 1]`` values.  The constructor keeps a private,
    read-only copy of the array, so neither transforms nor the caller can
    change the pixels afterwards.
    """

    pixels: np.ndarray

    def __post_init__(self) -> None:
        pixels = self.pixels
        if not isinstance(pixels, np.ndarray):
            raise InvalidImageError("Image pixels must be a NumPy array")
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise InvalidImageError(f"Expected an RGBA buffer (H, W, 4), got shape {pixels.shape}")
        if pixels.shape[0] <= 0 or pixels.shape[1] <= 0:
            raise InvalidImageError("Image has zero area")
        if pixels.dtype not in SUPPORTED_DTYPES:
            raise InvalidImageError(f"Unsupported pixel dtype {pixels.dtype}")
        frozen = np.array(pixels, copy=True)
        frozen.flags.writeable = False
        object.__setattr__(self, "pixels", frozen)

    # ------------------------------------------------------------------
    @classmethod
    def from_array(cls, array: Any) -> "Image":
        """Return an :class:`Image` copied from *array*.

        RGB input gains an opaque alpha channel.  Integer input is treated as
        8-bit, any other numeric input as normalised floats.
        """

        try:
            data = np.asarray(array)
        except (TypeError, ValueError) as exc:
            raise InvalidImageError("Pixel data could not be read") from exc
        if data.size == 0:
            raise InvalidImageError("Image has no pixel data")
        if data.ndim != 3 or data.shape[2] not in (3, 4):
            raise InvalidImageError(f"Expected an RGB or RGBA buffer, got shape {data.shape}")

        if np.issubdtype(data.dtype, np.integer):
            converted = np.clip(data, 0, 255).astype(np.uint8)
            opaque = 255
        elif np.issubdtype(data.dtype, np.floating):
            converted = data.astype(np.float32)
            opaque = 1.0
        else:
            raise InvalidImageError(f"Unsupported pixel dtype {data.dtype}")

        if converted.shape[2] == 3:
            alpha = np.full(converted.shape[:2] + (1,), opaque, dtype=converted.dtype)
            converted = np.concatenate([converted, alpha], axis=2)
        return cls(converted)

    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def is_float(self) -> bool:
        return self.pixels.dtype == np.float32

    @property
    def max_channel_value(self) -> float:
        """Largest representable channel value in the native range."""

        return 1.0 if self.is_float else 255.0

    @property
    def alpha(self) -> np.ndarray:
        return self.pixels[..., 3]

    def luminance(self) -> np.ndarray:
        """Return the per-pixel BT.709 luminance as a ``float64`` array."""

        return luminance_of(normalised_rgb(self.pixels))


def normalised_rgb(pixels: np.ndarray) -> np.ndarray:
    """Return the colour channels of *pixels* as ``float64`` values in ``[0, 1]``."""

    rgb = pixels[..., :3].astype(np.float64)
    if pixels.dtype == np.uint8:
        rgb /= 255.0
    return rgb


def luminance_of(rgb: np.ndarray) -> np.ndarray:
    """Weighted BT.709 sum over the last axis of normalised *rgb*."""

    r_weight, g_weight, b_weight = LUMA_WEIGHTS
    return rgb[..., 0] * r_weight + rgb[..., 1] * g_weight + rgb[..., 2] * b_weight


def ensure_image(image: object) -> Image:
    """Return *image* if it is a usable :class:`Image`, else raise."""

    if not isinstance(image, Image):
        raise InvalidImageError("No pixel data supplied")
    return image


__all__ = ["Image", "SUPPORTED_DTYPES", "ensure_image", "luminance_of", "normalised_rgb"]
