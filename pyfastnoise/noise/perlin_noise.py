"""
Perlin noise sampling for PyFastNoise.

Single-octave 2D gradient noise on the unit integer lattice. A sample point is
located in its lattice cell, each of the four cell corners contributes the dot
product of its gradient with the corner-to-point offset, and the four
contributions are blended bilinearly with quintic-faded weights.

Output range:
    With unit gradients on a unit cell the result lies in
    [-PERLIN_BOUND, PERLIN_BOUND] = [-sqrt(2)/2, sqrt(2)/2]. Values are NOT
    clamped or normalised here; use to_unit_range() to map them to [0, 1] for
    display.

Properties:
    - Pure: same (seed, x, y) always gives the same float.
    - Exactly 0.0 at every integer lattice point (zero offset to that corner,
      zero fade weight towards the others). No special branch is involved.
    - C2 continuous across cell boundaries thanks to the quintic fade
      6t^5 - 15t^4 + 10t^3; plain linear weights would leave derivative seams
      along the grid.

Author: B.G.
"""

import math

import numpy as np

from .. import constants as cte
from ..errors import InvalidParameterError
from .gradients import gradient_at, gradients_at_array


def fade(t):
    """Perlin fade function: 6t^5 - 15t^4 + 10t^3"""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def lerp(t, a, b):
    """Linear interpolation between a and b by factor t"""
    return a + t * (b - a)


def perlin_sample(seed: int, x: float, y: float) -> float:
    """
    Perlin noise value at continuous coordinates.

    Args:
        seed: Integer seed
        x, y: Sample coordinates in lattice units (one unit = one cell)

    Returns:
        float in [-sqrt(2)/2, sqrt(2)/2]

    Raises:
        InvalidParameterError: if x or y is not finite
    """
    x = float(x)
    y = float(y)
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidParameterError(f"sample coordinates must be finite, got ({x}, {y})")

    # Enclosing lattice cell and position inside it
    cx = math.floor(x)
    cy = math.floor(y)
    xf = x - cx
    yf = y - cy

    # Corner gradients
    g00x, g00y = gradient_at(seed, cx, cy)
    g10x, g10y = gradient_at(seed, cx + 1, cy)
    g01x, g01y = gradient_at(seed, cx, cy + 1)
    g11x, g11y = gradient_at(seed, cx + 1, cy + 1)

    # Dot products with the corner-to-point offsets
    d00 = g00x * xf + g00y * yf
    d10 = g10x * (xf - 1.0) + g10y * yf
    d01 = g01x * xf + g01y * (yf - 1.0)
    d11 = g11x * (xf - 1.0) + g11y * (yf - 1.0)

    u = fade(xf)
    v = fade(yf)

    return lerp(v, lerp(u, d00, d10), lerp(u, d01, d11))


def perlin_sample_array(seed: int, x, y) -> np.ndarray:
    """
    Vectorised perlin_sample over broadcastable coordinate arrays.

    Performs the same floating point operations in the same order as the
    scalar version, so both agree exactly.

    Returns:
        numpy.ndarray of float64 with the broadcast shape of x and y
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
        raise InvalidParameterError("sample coordinates must be finite")
    x, y = np.broadcast_arrays(x, y)

    fx = np.floor(x)
    fy = np.floor(y)
    xf = x - fx
    yf = y - fy
    # The hash only sees cell indices modulo 2**32; reducing first keeps the
    # int64 cast in range for any finite coordinate. fmod is exact.
    cx = np.fmod(fx, cte.HASH_MASK + 1.0).astype(np.int64)
    cy = np.fmod(fy, cte.HASH_MASK + 1.0).astype(np.int64)

    g00x, g00y = gradients_at_array(seed, cx, cy)
    g10x, g10y = gradients_at_array(seed, cx + 1, cy)
    g01x, g01y = gradients_at_array(seed, cx, cy + 1)
    g11x, g11y = gradients_at_array(seed, cx + 1, cy + 1)

    d00 = g00x * xf + g00y * yf
    d10 = g10x * (xf - 1.0) + g10y * yf
    d01 = g01x * xf + g01y * (yf - 1.0)
    d11 = g11x * (xf - 1.0) + g11y * (yf - 1.0)

    u = fade(xf)
    v = fade(yf)

    return lerp(v, lerp(u, d00, d10), lerp(u, d01, d11))


def to_unit_range(value, bound: float = cte.PERLIN_BOUND, clip: bool = False):
    """
    Linearly map noise from [-bound, bound] to [0, 1].

    The mapping is exact for values inside the bound. Values outside it (for
    instance multi-octave sums rescaled with a too small bound) map outside
    [0, 1] unless clip is True.

    Args:
        value: float or numpy array of noise values
        bound: Symmetric range of the input (default: single-octave Perlin bound)
        clip: Clamp the result to [0, 1]

    Returns:
        float for scalar input, numpy.ndarray otherwise
    """
    if not bound > 0.0:
        raise InvalidParameterError(f"bound must be > 0, got {bound}")
    out = (np.asarray(value, dtype=np.float64) / bound + 1.0) * 0.5
    if clip:
        out = np.clip(out, 0.0, 1.0)
    if out.ndim == 0:
        return float(out)
    return out


__all__ = [
    "fade",
    "lerp",
    "perlin_sample",
    "perlin_sample_array",
    "to_unit_range",
]
