"""Static configuration values for the inverter."""

from __future__ import annotations

import os

ADJUSTMENT_FORMAT_IDENTIFIER = "se.lenborje.inverter"
ADJUSTMENT_FORMAT_VERSION = "1.0"

# ITU-R BT.709 luma coefficients, shared by every backend.
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)

SLIDER_SCALE = 100
"""Upper bound of the black/white point sliders exposed to the UI."""

DEFAULT_JPEG_QUALITY = 90

DEFAULT_BACKEND = "numpy"
BACKEND_ENV_VAR = "PHOTO_INVERTER_BACKEND"


def resolve_backend_name(name: str | None = None) -> str:
    """Return the backend to use, honouring an explicit *name* first."""

    if name:
        return name.strip().lower()
    configured = os.environ.get(BACKEND_ENV_VAR, "").strip().lower()
    return configured or DEFAULT_BACKEND
