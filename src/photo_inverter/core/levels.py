"""Linear black/white point stretch."""

from __future__ import annotations

from .backends import TransformBackend, select_backend
from .image import Image, ensure_image


class LevelsMapper:
    """Remap colour channels from ``[black, white]`` onto ``[0, 1]``.

    R, G and B share one slope and bias so the stretch never shifts colour
    balance.  Results are clamped to ``[0, 1]`` unless *clamp* is disabled;
    8-bit images saturate regardless because their storage cannot hold
    out-of-range values.
    """

    def __init__(self, backend: TransformBackend | None = None, *, clamp: bool = True) -> None:
        self._backend = backend if backend is not None else select_backend()
        self._clamp = bool(clamp)

    @property
    def clamps_output(self) -> bool:
        return self._clamp

    def apply(self, image: Image, black: float, white: float) -> Image:
        """Return *image* stretched between *black* and *white*.

        An empty or inverted interval (``white <= black``, or a NaN bound)
        returns *image* itself unchanged.
        """

        source = ensure_image(image)
        black = float(black)
        white = float(white)
        if not white > black:
            return source

        slope = 1.0 / (white - black)
        bias = -black * slope
        return Image(self._backend.apply_levels(source.pixels, slope, bias, self._clamp))


__all__ = ["LevelsMapper"]
