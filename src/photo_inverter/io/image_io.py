"""Pillow-backed loading and saving of :class:`Image` buffers."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from ..config import DEFAULT_JPEG_QUALITY
from ..core.image import Image
from ..errors import EncodingFailedError, InvalidImageError

_JPEG_SUFFIXES = {".jpg", ".jpeg"}


def load_image(path: Path) -> Image:
    """Decode *path* into an 8-bit RGBA :class:`Image`."""

    try:
        with PILImage.open(path) as handle:
            rgba = handle.convert("RGBA")
    except (FileNotFoundError, UnidentifiedImageError, OSError) as exc:
        raise InvalidImageError(f"Unable to read image {path}") from exc
    return Image(np.array(rgba, dtype=np.uint8))


def to_pil(image: Image) -> PILImage.Image:
    """Return *image* as an RGBA Pillow image, quantising float data to 8 bits."""

    if image.is_float:
        pixels = np.rint(np.clip(image.pixels, 0.0, 1.0) * 255.0).astype(np.uint8)
    else:
        pixels = np.ascontiguousarray(image.pixels)
    return PILImage.fromarray(pixels)


def save_image(image: Image, path: Path, *, quality: int = DEFAULT_JPEG_QUALITY) -> Path:
    """Encode *image* to *path*, creating parent directories as needed.

    JPEG output drops alpha because the format cannot carry it.
    """

    path = Path(path)
    pil_image = to_pil(image)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.suffix.lower() in _JPEG_SUFFIXES:
            pil_image.convert("RGB").save(path, format="JPEG", quality=int(quality))
        else:
            pil_image.save(path)
    except (OSError, ValueError, KeyError) as exc:
        raise EncodingFailedError(f"Unable to write image {path}") from exc
    return path


__all__ = ["load_image", "save_image", "to_pil"]
