"""Worker that runs one inversion pass on a background thread."""

from __future__ import annotations

import logging
from typing import Union

from PySide6.QtCore import QObject, QRunnable, Signal
from PySide6.QtGui import QImage

from ...core.contrast_controller import ContrastController
from ...core.filters.utils import image_from_qimage, qimage_from_image
from ...core.image import Image
from ...errors import PhotoInverterError

_LOGGER = logging.getLogger(__name__)


class InvertRenderSignals(QObject):
    """Signals emitted by :class:`InvertRenderWorker`."""

    finished = Signal(QImage, int)
    """Emitted with the rendered frame and the job identifier."""

    failed = Signal(int, str)
    """Emitted with the job identifier and a message when rendering fails."""


class InvertRenderWorker(QRunnable):
    """Call ``ContrastController.process`` once and report the outcome.

    The source may be a ``QImage`` straight from the viewer or an
    :class:`Image`; the result is always delivered as a detached ``QImage``.
    Exactly one of :attr:`InvertRenderSignals.finished` or
    :attr:`InvertRenderSignals.failed` fires per run, so the caller never
    sees partial output.
    """

    def __init__(
        self,
        controller: ContrastController,
        source: Union[QImage, Image],
        job_id: int,
    ) -> None:
        super().__init__()
        self._controller = controller
        # ``QImage`` shares data implicitly; copying keeps the caller's frame
        # detached while the worker reads it on another thread.
        self._source = QImage(source) if isinstance(source, QImage) else source
        self._job_id = int(job_id)
        self.signals = InvertRenderSignals()

    @property
    def job_id(self) -> int:
        return self._job_id

    def run(self) -> None:  # type: ignore[override]
        """Render the adjusted frame and notify listeners when done."""

        try:
            source = self._source
            if isinstance(source, QImage):
                source = image_from_qimage(source)
            result = qimage_from_image(self._controller.process(source))
        except PhotoInverterError as exc:
            _LOGGER.warning("Inversion job %d failed: %s", self._job_id, exc)
            self.signals.failed.emit(self._job_id, str(exc))
            return
        self.signals.finished.emit(result, self._job_id)


__all__ = ["InvertRenderSignals", "InvertRenderWorker"]
