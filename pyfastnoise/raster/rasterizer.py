"""
Grid rasterization of noise fields for PyFastNoise.

Walks a regular 2D sample grid and evaluates fractal noise at each pixel,
producing a dense row-major (height, width) array. The array is what
renderers consume: ravel() gives the width*height scalar sequence, and
display.to_rgba() turns it into a grayscale pixel buffer.

Backends:
    - "numpy": vectorised float64 evaluation, bit-identical to the scalar
      fractal_sample at every pixel
    - "taichi": the same algorithm in a parallel Taichi kernel, float32

Partitioning:
    Pixels are independent. rasterize_rows() evaluates a band of rows with the
    exact coordinates the full raster would use, so bands computed separately
    (on different workers, in any order) concatenate to the full raster.
    Abandoning a rasterization is just not computing the remaining bands.

Author: B.G.
"""

import logging
import numbers

import numpy as np

from ..config import NoiseConfig
from ..errors import BackendUnavailableError, InvalidParameterError
from ..noise.fractal import fractal_sample_array

logger = logging.getLogger(__name__)

BACKENDS = ("numpy", "taichi")


def _check_dim(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        raise InvalidParameterError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


def _check_step(step):
    step = float(step)
    if not np.isfinite(step) or step <= 0.0:
        raise InvalidParameterError(f"step must be > 0 and finite, got {step}")
    return step


def _as_config(config):
    if isinstance(config, NoiseConfig):
        return config
    if isinstance(config, dict):
        return NoiseConfig.from_dict(config)
    raise TypeError("config must be a NoiseConfig or a dict of noise parameters")


def rasterize_rows(config, width, row_start, row_stop, origin=(0.0, 0.0), step=1.0):
    """
    Evaluate rows [row_start, row_stop) of a noise raster with numpy.

    Args:
        config: NoiseConfig or dict of its fields
        width: Number of pixels per row
        row_start, row_stop: Half-open row range (row_stop may equal row_start)
        origin: Sample-space coordinates (x0, y0) of pixel (0, 0)
        step: Sample-space distance between neighbouring pixels (default: 1.0)

    Returns:
        numpy.ndarray of float64, shape (row_stop - row_start, width)
    """
    config = _as_config(config)
    width = _check_dim("width", width)
    step = _check_step(step)
    if row_start < 0 or row_stop < row_start:
        raise InvalidParameterError(f"invalid row range [{row_start}, {row_stop})")

    xs = origin[0] + np.arange(width, dtype=np.float64) * step
    ys = origin[1] + np.arange(row_start, row_stop, dtype=np.float64) * step
    X, Y = np.meshgrid(xs, ys)

    return fractal_sample_array(config.seed, X, Y, scale=config.scale,
                                octaves=config.octaves, persistence=config.persistence,
                                lacunarity=config.lacunarity)


def rasterize(config, width, height, origin=(0.0, 0.0), step=1.0, backend="numpy"):
    """
    Rasterize fractal noise on a width x height pixel grid.

    Creates the scalar field a renderer maps to pixels. Pixel (j, i), row j and
    column i, samples the point (origin[0] + i*step, origin[1] + j*step).

    Args:
        config: NoiseConfig or dict with seed, scale, octaves, persistence, lacunarity
        width: Number of columns
        height: Number of rows
        origin: Sample-space coordinates of pixel (0, 0) (default: (0, 0))
        step: Sample-space distance between pixels (default: 1.0)
        backend: "numpy" (float64, exact) or "taichi" (parallel kernel, float32)

    Returns:
        numpy.ndarray of shape (height, width), row-major

    Raises:
        InvalidParameterError: on invalid dimensions, step or backend name
        BackendUnavailableError: if backend="taichi" and Taichi cannot be imported

    Example:
        cfg = NoiseConfig(seed=20, scale=53.0, octaves=3, persistence=0.5)
        field = rasterize(cfg, 256, 128)
        flat = field.ravel()   # width*height values, row after row
    """
    config = _as_config(config)
    width = _check_dim("width", width)
    height = _check_dim("height", height)
    step = _check_step(step)
    if backend not in BACKENDS:
        raise InvalidParameterError(f"backend must be one of {BACKENDS}, got '{backend}'")

    logger.debug("rasterize %dx%d with %s backend (%s)", width, height, backend, config)

    if backend == "taichi":
        try:
            from .taichi_backend import rasterize_taichi
        except ImportError as e:
            raise BackendUnavailableError(
                "Taichi backend requested but taichi is not installed "
                "(pip install pyfastnoise[taichi])"
            ) from e
        return rasterize_taichi(config, width, height, origin=origin, step=step)

    return rasterize_rows(config, width, 0, height, origin=origin, step=step)


__all__ = ["BACKENDS", "rasterize", "rasterize_rows"]
