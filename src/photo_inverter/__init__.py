"""Photo Inverter: colour inversion with automatic or manual levels stretch."""

from __future__ import annotations

__version__ = "1.0.0"
