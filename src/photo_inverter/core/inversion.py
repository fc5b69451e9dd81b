"""Colour inversion of every RGB channel."""

from __future__ import annotations

from .backends import TransformBackend, select_backend
from .image import Image, ensure_image


class ColorInverter:
    """Replace each colour channel by ``max - value``; alpha is copied."""

    def __init__(self, backend: TransformBackend | None = None) -> None:
        self._backend = backend if backend is not None else select_backend()

    def invert(self, image: Image) -> Image:
        source = ensure_image(image)
        return Image(self._backend.invert(source.pixels))


__all__ = ["ColorInverter"]
