"""Hardware aware transform backends for the inversion pipeline."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import numpy as np

from ..config import resolve_backend_name
from ..errors import FilterUnavailableError
from .filters import numpy_executor

_LOGGER = logging.getLogger(__name__)


class TransformBackend(ABC):
    """Strategy executing the three pixel primitives on RGBA arrays.

    Backends are resolved once when a pipeline component is built.  Every
    method receives a read-only ``(height, width, 4)`` array and returns a new
    one (or plain floats for the luminance scan), leaving alpha untouched.
    """

    name: str = "unknown"
    """Identifier used by configuration and the command line."""

    @classmethod
    def is_available(cls) -> bool:
        """Return ``True`` when the runtime provides what the backend needs."""

        return True

    @abstractmethod
    def invert(self, pixels: np.ndarray) -> np.ndarray:
        """Return *pixels* with every colour channel inverted."""

    @abstractmethod
    def luminance_extrema(self, pixels: np.ndarray) -> tuple[float, float]:
        """Return the global minimum and maximum luminance of *pixels*."""

    @abstractmethod
    def apply_levels(
        self,
        pixels: np.ndarray,
        slope: float,
        bias: float,
        clamp: bool = True,
    ) -> np.ndarray:
        """Return *pixels* with ``value * slope + bias`` applied to R, G and B."""


class _NumpyBackend(TransformBackend):
    """Vectorised CPU implementation; always available."""

    name = "numpy"

    def invert(self, pixels: np.ndarray) -> np.ndarray:
        return numpy_executor.invert_pixels(pixels)

    def luminance_extrema(self, pixels: np.ndarray) -> tuple[float, float]:
        return numpy_executor.luminance_extrema(pixels)

    def apply_levels(self, pixels, slope, bias, clamp=True):
        return numpy_executor.apply_levels(pixels, slope, bias, clamp)


class _NumbaBackend(TransformBackend):
    """Per-pixel kernels compiled with Numba."""

    name = "numba"

    def __init__(self) -> None:
        # Imported lazily so environments without a working LLVM toolchain can
        # still import this module and fall back to another backend.
        from .filters import jit_executor

        self._executor = jit_executor

    @classmethod
    def is_available(cls) -> bool:
        try:
            import numba  # noqa: F401
        except ImportError:
            return False
        return True

    def invert(self, pixels: np.ndarray) -> np.ndarray:
        return self._executor.invert_pixels(pixels)

    def luminance_extrema(self, pixels: np.ndarray) -> tuple[float, float]:
        return self._executor.luminance_extrema(pixels)

    def apply_levels(self, pixels, slope, bias, clamp=True):
        return self._executor.apply_levels(pixels, slope, bias, clamp)


class _PillowBackend(TransformBackend):
    """Lookup-table implementation for 8-bit images.

    Float buffers and the luminance scan have no LUT equivalent, so they are
    delegated to the vectorised executor.
    """

    name = "pillow"

    def __init__(self) -> None:
        from .filters import pillow_executor

        self._executor = pillow_executor

    @classmethod
    def is_available(cls) -> bool:
        try:
            import PIL  # noqa: F401
            import numba  # noqa: F401
        except ImportError:
            return False
        return True

    def invert(self, pixels: np.ndarray) -> np.ndarray:
        if pixels.dtype != np.uint8:
            return numpy_executor.invert_pixels(pixels)
        return self._executor.invert_pixels(pixels)

    def luminance_extrema(self, pixels: np.ndarray) -> tuple[float, float]:
        return numpy_executor.luminance_extrema(pixels)

    def apply_levels(self, pixels, slope, bias, clamp=True):
        if pixels.dtype != np.uint8:
            return numpy_executor.apply_levels(pixels, slope, bias, clamp)
        return self._executor.apply_levels(pixels, slope, bias)


_BACKENDS: dict[str, type[TransformBackend]] = {
    backend.name: backend for backend in (_NumpyBackend, _NumbaBackend, _PillowBackend)
}


def available_backends() -> list[str]:
    """Return the names of the backends usable in this environment."""

    return [name for name, backend in _BACKENDS.items() if backend.is_available()]


def select_backend(name: str | None = None) -> TransformBackend:
    """Construct the backend called *name* (or the configured default).

    Raises :class:`FilterUnavailableError` when the name is unknown or the
    backend cannot be constructed here.
    """

    resolved = resolve_backend_name(name)
    backend_type = _BACKENDS.get(resolved)
    if backend_type is None:
        known = ", ".join(sorted(_BACKENDS))
        raise FilterUnavailableError(f"Unknown transform backend {resolved!r} (known: {known})")
    if not backend_type.is_available():
        raise FilterUnavailableError(f"Transform backend {resolved!r} is not available")
    try:
        backend = backend_type()
    except (ImportError, RuntimeError) as exc:
        raise FilterUnavailableError(f"Failed to initialise transform backend {resolved!r}") from exc
    _LOGGER.debug("Using %s transform backend", backend.name)
    return backend


__all__ = ["TransformBackend", "available_backends", "select_backend"]
