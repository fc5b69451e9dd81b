import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Ensure the project sources are importable as ``src.photo_inverter``.
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from src.photo_inverter.core.backends import select_backend  # noqa: E402
from src.photo_inverter.core.image import Image  # noqa: E402

BACKEND_NAMES = ("numpy", "numba", "pillow")


@pytest.fixture(params=BACKEND_NAMES)
def backend(request):
    """Every transform backend, so behavioural tests run against each."""

    return select_backend(request.param)


@pytest.fixture
def numpy_backend():
    return select_backend("numpy")


@pytest.fixture
def random_rgba():
    """A deterministic 8-bit RGBA image with varied alpha."""

    rng = np.random.default_rng(1234)
    pixels = rng.integers(0, 256, size=(17, 23, 4), dtype=np.uint8)
    return Image(pixels)


@pytest.fixture
def random_rgba_float():
    rng = np.random.default_rng(4321)
    pixels = rng.random(size=(11, 13, 4), dtype=np.float32)
    return Image(pixels)
