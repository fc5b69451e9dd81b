"""Exception hierarchy shared across the inverter pipeline and its hosts."""

from __future__ import annotations


class PhotoInverterError(Exception):
    """Base class for every error raised by the package."""


class InvalidImageError(PhotoInverterError):
    """The supplied image has no pixel data, zero area or cannot be read."""


class FilterUnavailableError(PhotoInverterError):
    """A transform backend could not be constructed in this environment."""


class EncodingFailedError(PhotoInverterError):
    """The rendered image could not be encoded or written to its destination."""


class AdjustmentDataError(PhotoInverterError):
    """An adjustment metadata payload is malformed."""


__all__ = [
    "AdjustmentDataError",
    "EncodingFailedError",
    "FilterUnavailableError",
    "InvalidImageError",
    "PhotoInverterError",
]
