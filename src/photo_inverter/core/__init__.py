"""Pixel-level transform pipeline: inversion, luminance scanning and levels."""

from __future__ import annotations

from .contrast_controller import ColorPoint, ContrastController, Mode
from .image import Image
from .inversion import ColorInverter
from .levels import LevelsMapper
from .luminance import LuminanceExtremaScanner, LuminanceExtremes

__all__ = [
    "ColorInverter",
    "ColorPoint",
    "ContrastController",
    "Image",
    "LevelsMapper",
    "LuminanceExtremaScanner",
    "LuminanceExtremes",
    "Mode",
]
