"""Pixel executors backing the inversion and levels transforms.

The package separates the maths from the strategy that runs it:
- algorithms: scalar Numba kernels shared by the JIT and lookup-table paths
- numpy_executor: vectorised default implementation
- jit_executor: per-pixel loops compiled with Numba
- pillow_executor: 8-bit lookup tables applied by Pillow
- utils: QImage buffer helpers for the Qt host
"""

from __future__ import annotations

from . import numpy_executor

__all__ = ["numpy_executor"]
