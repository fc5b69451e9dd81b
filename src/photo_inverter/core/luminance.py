"""Global luminance extrema used to derive the automatic black/white point."""

from __future__ import annotations

from dataclasses import dataclass

from .backends import TransformBackend, select_backend
from .image import Image, ensure_image


@dataclass(frozen=True)
class LuminanceExtremes:
    """Darkest and brightest BT.709 luminance of an image, in ``[0, 1]``."""

    minimum: float
    maximum: float

    @property
    def is_uniform(self) -> bool:
        """``True`` when every pixel shares the same luminance."""

        return self.minimum == self.maximum


class LuminanceExtremaScanner:
    """Scan every pixel and report the exact luminance range.

    The reduction is global rather than windowed: a single stray highlight
    moves the maximum.  A uniform image yields ``minimum == maximum``, which
    is a valid result that the levels stage treats as a passthrough.
    """

    def __init__(self, backend: TransformBackend | None = None) -> None:
        self._backend = backend if backend is not None else select_backend()

    def scan(self, image: Image) -> LuminanceExtremes:
        source = ensure_image(image)
        minimum, maximum = self._backend.luminance_extrema(source.pixels)
        return LuminanceExtremes(_clamp01(minimum), _clamp01(maximum))


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


__all__ = ["LuminanceExtremaScanner", "LuminanceExtremes"]
