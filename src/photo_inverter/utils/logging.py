"""Logging helpers for the inverter."""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(*, verbose: bool = False) -> logging.Logger:
    """Return the package logger, attaching a console handler on first use.

    *verbose* lowers the level to ``DEBUG`` so backend selection and session
    details are shown.
    """

    global _LOGGER
    if _LOGGER is None:
        _LOGGER = logging.getLogger("photo_inverter")
        if not _LOGGER.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(_FORMAT))
            _LOGGER.addHandler(handler)
    _LOGGER.setLevel(logging.DEBUG if verbose else logging.INFO)
    return _LOGGER
