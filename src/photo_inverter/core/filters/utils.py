"""Conversion helpers between Qt ``QImage`` buffers and :class:`Image`.

Qt offers subtly different behaviours across bindings when exposing the raw
pixel buffer, so the helpers normalise access through a single
:func:`_resolve_pixel_buffer` routine before handing the bytes to NumPy.
"""

from __future__ import annotations

import numpy as np
from PySide6.QtGui import QImage

from ...errors import InvalidImageError
from ..image import Image


def _resolve_pixel_buffer(image: QImage) -> tuple[memoryview, object]:
    """Return a 1-D :class:`memoryview` over *image*'s pixels.

    The tuple's second element is the binding's own buffer wrapper; callers
    keep it referenced for as long as the view is in use so Qt does not
    reclaim the memory underneath NumPy.
    """

    bytes_per_line = image.bytesPerLine()
    height = image.height()
    buffer = image.constBits()
    expected_size = bytes_per_line * height

    guard: object = buffer

    if isinstance(buffer, memoryview):
        view = buffer
    else:
        # PyQt exposes a ``sip.voidptr`` that must be sized before viewing.
        try:
            view = memoryview(buffer)
        except TypeError:
            if hasattr(buffer, "setsize"):
                buffer.setsize(expected_size)
                view = memoryview(buffer)
            else:
                raise RuntimeError("Unsupported QImage.constBits() buffer wrapper") from None

    try:
        view = view.cast("B")
    except TypeError:
        view = view.cast("B", (view.nbytes,))

    if len(view) < expected_size:
        raise BufferError("QImage pixel buffer is smaller than expected")
    return view[:expected_size], guard


def image_from_qimage(qimage: QImage) -> Image:
    """Copy *qimage* into an 8-bit RGBA :class:`Image`."""

    if qimage is None or qimage.isNull():
        raise InvalidImageError("QImage has no pixel data")

    converted = qimage.convertToFormat(QImage.Format.Format_RGBA8888)
    width = converted.width()
    height = converted.height()
    if width <= 0 or height <= 0:
        raise InvalidImageError("QImage has zero area")

    bytes_per_line = converted.bytesPerLine()
    try:
        view, guard = _resolve_pixel_buffer(converted)
    except (BufferError, RuntimeError, TypeError) as exc:
        raise InvalidImageError("QImage pixel buffer could not be read") from exc
    _ = guard

    surface = np.frombuffer(view, dtype=np.uint8, count=bytes_per_line * height)
    surface = surface.reshape((height, bytes_per_line))
    pixels = surface[:, : width * 4].reshape((height, width, 4)).copy()
    return Image(pixels)


def qimage_from_image(image: Image) -> QImage:
    """Return a detached ``Format_RGBA8888`` :class:`QImage` for *image*."""

    if image.is_float:
        pixels = np.rint(np.clip(image.pixels, 0.0, 1.0) * 255.0).astype(np.uint8)
    else:
        pixels = image.pixels
    data = np.ascontiguousarray(pixels).tobytes()
    wrapped = QImage(
        data,
        image.width,
        image.height,
        image.width * 4,
        QImage.Format.Format_RGBA8888,
    )
    # ``copy`` detaches the QImage from the temporary Python bytes object.
    return wrapped.copy()


__all__ = ["image_from_qimage", "qimage_from_image"]
