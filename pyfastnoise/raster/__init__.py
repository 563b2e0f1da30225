"""Raster module for PyFastNoise.

Evaluates noise configurations on regular pixel grids and maps the resulting
scalar fields to displayable grayscale buffers and PNG files. The numpy
backend is always available; the Taichi backend is imported only when
requested.

Author: B.G.
"""

from .rasterizer import BACKENDS, rasterize, rasterize_rows
from .display import normalize, to_grayscale, to_rgba, save_png

__all__ = [
    "BACKENDS",
    "rasterize",
    "rasterize_rows",
    "normalize",
    "to_grayscale",
    "to_rgba",
    "save_png",
]
