"""Host-facing lifecycle of a single inversion edit."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config import DEFAULT_JPEG_QUALITY
from ..errors import InvalidImageError
from ..io.image_io import save_image
from .adjustment_data import AdjustmentData, build_adjustment_data, can_handle
from .contrast_controller import ContrastController
from .image import Image, ensure_image

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditOutput:
    """Everything a host needs to commit a finished edit."""

    image: Image
    adjustment_data: AdjustmentData
    destination: Optional[Path] = None


class EditingSession:
    """Receive an image from the host, preview the adjustment and commit it.

    The session never resumes from earlier adjustment data; each start works
    on the freshly supplied original.
    """

    should_show_cancel_confirmation = False

    def __init__(self, controller: Optional[ContrastController] = None) -> None:
        self._controller = controller if controller is not None else ContrastController()
        self._input: Optional[Image] = None

    @property
    def controller(self) -> ContrastController:
        return self._controller

    @property
    def is_active(self) -> bool:
        return self._input is not None

    def can_handle(self, adjustment_data: Optional[AdjustmentData]) -> bool:
        return can_handle(adjustment_data)

    def start(self, image: Image) -> None:
        """Hold *image* as the original for this edit."""

        self._input = ensure_image(image)
        _LOGGER.debug("Started edit on %dx%d image", self._input.width, self._input.height)

    def preview(self) -> Image:
        """Render the adjustment with the controller's current state."""

        return self._controller.process(self._require_input())

    def finish(
        self,
        destination: Optional[Path] = None,
        *,
        quality: int = DEFAULT_JPEG_QUALITY,
    ) -> EditOutput:
        """Render the final image and, when *destination* is given, encode it.

        Raises ``EncodingFailedError`` if the image cannot be written; no
        adjustment data is produced in that case.
        """

        rendered = self._controller.process(self._require_input())
        written: Optional[Path] = None
        if destination is not None:
            written = save_image(rendered, Path(destination), quality=quality)
            _LOGGER.info("Wrote inverted image to %s", written)
        point = self._controller.point
        _LOGGER.debug(
            "Finished edit in %s mode with black=%.4f white=%.4f",
            self._controller.mode.value,
            point.black,
            point.white,
        )
        return EditOutput(rendered, build_adjustment_data(), written)

    def cancel(self) -> None:
        """Discard the original supplied by the host."""

        self._input = None

    def _require_input(self) -> Image:
        if self._input is None:
            raise InvalidImageError("No image has been supplied to the editing session")
        return self._input


__all__ = ["EditOutput", "EditingSession"]
