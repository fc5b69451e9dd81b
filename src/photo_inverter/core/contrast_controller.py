"""Session state machine driving the invert-then-stretch pipeline."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from ..config import SLIDER_SCALE
from .backends import TransformBackend, select_backend
from .image import Image
from .inversion import ColorInverter
from .levels import LevelsMapper
from .luminance import LuminanceExtremaScanner


class Mode(str, Enum):
    """How the black/white point is chosen."""

    AUTO = "auto"
    MANUAL = "manual"


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


@dataclass(frozen=True)
class ColorPoint:
    """Black and white point in normalised ``[0, 1]`` units."""

    black: float = 0.0
    white: float = 1.0

    @classmethod
    def from_slider(cls, black: float, white: float, scale: float = SLIDER_SCALE) -> "ColorPoint":
        """Build a point from slider positions in ``[0, scale]``."""

        return cls(_clamp01(float(black) / scale), _clamp01(float(white) / scale))

    def to_slider(self, scale: float = SLIDER_SCALE) -> tuple[float, float]:
        return self.black * scale, self.white * scale


PointListener = Callable[[ColorPoint], None]


class ContrastController:
    """Own the Auto/Manual mode and the black/white point of one edit.

    ``set_black``/``set_white`` are the single place where the ordering rule
    is enforced: a slider pushed past its partner stops at the partner's
    position.  In Auto mode the point is derived from the image on every
    :meth:`process` call and manual updates are ignored.

    All public methods share one re-entrant lock so a host may drive the
    controller from several threads.
    """

    def __init__(
        self,
        *,
        mode: Mode | str = Mode.AUTO,
        point: Optional[ColorPoint] = None,
        backend: Optional[TransformBackend] = None,
        clamp_output: bool = True,
    ) -> None:
        backend = backend if backend is not None else select_backend()
        self._inverter = ColorInverter(backend)
        self._scanner = LuminanceExtremaScanner(backend)
        self._mapper = LevelsMapper(backend, clamp=clamp_output)
        self._mode = Mode(mode)
        initial = point if point is not None else ColorPoint()
        black = _clamp01(initial.black)
        self._point = ColorPoint(black, max(black, _clamp01(initial.white)))
        self._listeners: list[PointListener] = []
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def mode(self) -> Mode:
        with self._lock:
            return self._mode

    @property
    def point(self) -> ColorPoint:
        with self._lock:
            return self._point

    def add_listener(self, listener: PointListener) -> None:
        """Call *listener* with the new point whenever it changes."""

        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: PointListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def set_mode(self, mode: Mode | str) -> Mode:
        """Switch between Auto and Manual without recomputing anything."""

        with self._lock:
            self._mode = Mode(mode)
            return self._mode

    def set_black(self, value: float) -> bool:
        """Move the black point, stopping at the white point.

        Returns ``False`` (and leaves the point untouched) in Auto mode.
        """

        with self._lock:
            if self._mode is not Mode.MANUAL:
                return False
            black = min(_clamp01(value), self._point.white)
            self._commit(ColorPoint(black, self._point.white))
            return True

    def set_white(self, value: float) -> bool:
        """Move the white point, stopping at the black point."""

        with self._lock:
            if self._mode is not Mode.MANUAL:
                return False
            white = max(_clamp01(value), self._point.black)
            self._commit(ColorPoint(self._point.black, white))
            return True

    def set_point(self, black: float, white: float) -> bool:
        """Set both values at once; *white* stops at *black* if they cross."""

        with self._lock:
            if self._mode is not Mode.MANUAL:
                return False
            new_black = _clamp01(black)
            self._commit(ColorPoint(new_black, max(_clamp01(white), new_black)))
            return True

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------
    def process(self, original: Image) -> Image:
        """Invert *original* and stretch it between the active points.

        In Auto mode the point is replaced by the luminance extremes of the
        inverted image, but only once every stage has succeeded.
        """

        with self._lock:
            inverted = self._inverter.invert(original)
            if self._mode is Mode.AUTO:
                extremes = self._scanner.scan(inverted)
                candidate = ColorPoint(extremes.minimum, extremes.maximum)
            else:
                candidate = self._point
            result = self._mapper.apply(inverted, candidate.black, candidate.white)
            self._commit(candidate)
            return result

    # ------------------------------------------------------------------
    def _commit(self, point: ColorPoint) -> None:
        if point == self._point:
            return
        self._point = point
        for listener in list(self._listeners):
            listener(point)


__all__ = ["ColorPoint", "ContrastController", "Mode", "PointListener"]
