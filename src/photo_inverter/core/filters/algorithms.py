"""Scalar image maths shared by the compiled and lookup-table executors.

The helpers operate on normalised float channel values and plain numbers so
they can be inlined into Numba kernels or called from Python when building
lookup tables.
"""

from __future__ import annotations

from numba import jit

from ...config import LUMA_WEIGHTS

_R_WEIGHT, _G_WEIGHT, _B_WEIGHT = LUMA_WEIGHTS


@jit(nopython=True, inline="always")
def _luma(r: float, g: float, b: float) -> float:
    """BT.709 luminance of normalised ``r``, ``g``, ``b``."""

    return _R_WEIGHT * r + _G_WEIGHT * g + _B_WEIGHT * b


@jit(nopython=True, inline="always")
def _levels_channel(value: float, slope: float, bias: float) -> float:
    return value * slope + bias


@jit(nopython=True, inline="always")
def _clamp01(value: float) -> float:
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


@jit(nopython=True, inline="always")
def _float_to_uint8(value: float) -> int:
    """Convert *value* from ``[0.0, 1.0]`` to an 8-bit channel value."""

    scaled = round(value * 255.0)
    if scaled < 0:
        return 0
    if scaled > 255:
        return 255
    return int(scaled)
