"""Controller that binds the black/white sliders to :class:`ContrastController`."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, Signal

from ...config import SLIDER_SCALE
from ...core.contrast_controller import ColorPoint, ContrastController, Mode


class LevelsController(QObject):
    """Forward slider and toggle input to the contrast controller.

    Widgets never hold authoritative state: every change is routed through
    :class:`ContrastController` and the resulting point is broadcast back via
    :attr:`pointChanged`, so a slider dragged past its partner snaps to the
    clamped position.
    """

    pointChanged = Signal(int, int)
    """Emitted with the black and white slider positions."""

    modeChanged = Signal(str)

    def __init__(
        self,
        controller: ContrastController,
        *,
        scale: int = SLIDER_SCALE,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._scale = int(scale)
        self._controller.add_listener(self._handle_point_changed)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def slider_values(self) -> tuple[int, int]:
        return self._to_slider(self._controller.point)

    def is_auto(self) -> bool:
        return self._controller.mode is Mode.AUTO

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------
    def set_auto(self, enabled: bool) -> None:
        mode = Mode.AUTO if enabled else Mode.MANUAL
        if self._controller.mode is mode:
            return
        self._controller.set_mode(mode)
        self.modeChanged.emit(mode.value)

    def set_black_slider(self, value: int) -> None:
        before = self._controller.point
        self._controller.set_black(value / self._scale)
        self._resync_if_unchanged(before)

    def set_white_slider(self, value: int) -> None:
        before = self._controller.point
        self._controller.set_white(value / self._scale)
        self._resync_if_unchanged(before)

    def dispose(self) -> None:
        """Detach from the contrast controller."""

        self._controller.remove_listener(self._handle_point_changed)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _handle_point_changed(self, point: ColorPoint) -> None:
        black, white = self._to_slider(point)
        self.pointChanged.emit(black, white)

    def _resync_if_unchanged(self, before: ColorPoint) -> None:
        # Auto mode, or a slider already parked on its partner, leaves the
        # point untouched; re-broadcast so the widget snaps back.
        if self._controller.point == before:
            black, white = self.slider_values()
            self.pointChanged.emit(black, white)

    def _to_slider(self, point: ColorPoint) -> tuple[int, int]:
        black, white = point.to_slider(self._scale)
        return int(round(black)), int(round(white))


__all__ = ["LevelsController"]
