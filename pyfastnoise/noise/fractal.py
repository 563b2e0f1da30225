"""
Fractal (octave) noise for PyFastNoise.

Sums Perlin samples at geometrically increasing frequencies and decreasing
amplitudes:

    total = sum_{n=0}^{octaves-1} persistence**n * perlin(seed, x/scale * L**n, y/scale * L**n)

with lacunarity L = 2 by default. All octaves share the same seed.

Range:
    The sum is not normalised. Its magnitude is bounded by
    fractal_bound(octaves, persistence, ...) = PERLIN_BOUND * sum persistence**n,
    which grows with the octave count. Callers that need [0, 1] output pass that
    bound to to_unit_range().

Cost:
    One Perlin evaluation (four gradient hashes) per octave, i.e. O(octaves)
    per sample. Large octave counts over large rasters slow down
    proportionally; this is the only performance-sensitive parameter.

High octaves:
    With lacunarity >= 1, a scaled coordinate that is 0 or whose magnitude has
    reached FLOAT64_INT_LIMIT (2**52) is integer-valued and stays so for every
    later octave. Once both coordinates are in that state the sample sits on a
    lattice point and each remaining octave adds exactly 0, so the loop stops
    there. Any octave count is therefore valid: frequencies never overflow into
    inf, and no coordinate reaches the int64 range.

Degenerate inputs:
    octaves = 0 returns 0.0. persistence = 0 keeps the first octave only
    (every later amplitude is 0).

Author: B.G.
"""

import math

import numpy as np

from .. import constants as cte
from ..config import (
    validate_lacunarity,
    validate_octaves,
    validate_persistence,
    validate_scale,
)
from ..errors import InvalidParameterError
from .perlin_noise import perlin_sample, perlin_sample_array


def _settled(c):
    """True where a scaled coordinate is integer-valued for all later octaves."""
    return (c == 0.0) | (np.abs(c) >= cte.FLOAT64_INT_LIMIT)


def fractal_sample(seed: int, x: float, y: float, scale: float = cte.DEFAULT_SCALE,
                   octaves: int = cte.DEFAULT_OCTAVES,
                   persistence: float = cte.DEFAULT_PERSISTENCE,
                   lacunarity: float = cte.DEFAULT_LACUNARITY) -> float:
    """
    Multi-octave Perlin noise at one point.

    Args:
        seed: Integer seed shared by all octaves
        x, y: Sample coordinates in sample space (e.g. pixels)
        scale: Cell size of the first octave in sample-space units
        octaves: Number of octaves, >= 0
        persistence: Amplitude ratio between octaves, in [0, 1]
        lacunarity: Frequency ratio between octaves (default: 2.0)

    Returns:
        float, bounded by fractal_bound(octaves, persistence)

    Raises:
        InvalidParameterError: on negative octaves, persistence outside [0, 1],
                               or non-positive scale/lacunarity

    Example:
        # Three octaves at the origin are three lattice points, hence 0.0
        fractal_sample(20, 0.0, 0.0, scale=53.0, octaves=3, persistence=0.5)
    """
    scale = validate_scale(scale)
    octaves = validate_octaves(octaves)
    persistence = validate_persistence(persistence)
    lacunarity = validate_lacunarity(lacunarity)

    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidParameterError(f"sample coordinates must be finite, got ({x}, {y})")

    sx = x / scale
    sy = y / scale
    grows = lacunarity >= 1.0

    total = 0.0
    amplitude = 1.0
    frequency = 1.0
    for _ in range(octaves):
        cx = sx * frequency if sx != 0.0 else 0.0
        cy = sy * frequency if sy != 0.0 else 0.0
        if grows and _settled(cx) and _settled(cy):
            break
        total += perlin_sample(seed, cx, cy) * amplitude
        amplitude *= persistence
        frequency *= lacunarity
    return total


def fractal_sample_array(seed: int, x, y, scale: float = cte.DEFAULT_SCALE,
                         octaves: int = cte.DEFAULT_OCTAVES,
                         persistence: float = cte.DEFAULT_PERSISTENCE,
                         lacunarity: float = cte.DEFAULT_LACUNARITY) -> np.ndarray:
    """
    Vectorised fractal_sample over broadcastable coordinate arrays.

    Returns:
        numpy.ndarray of float64, equal element-wise to fractal_sample
    """
    scale = validate_scale(scale)
    octaves = validate_octaves(octaves)
    persistence = validate_persistence(persistence)
    lacunarity = validate_lacunarity(lacunarity)

    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
        raise InvalidParameterError("sample coordinates must be finite")
    x, y = np.broadcast_arrays(x, y)
    sx = x / scale
    sy = y / scale
    grows = lacunarity >= 1.0

    total = np.zeros(sx.shape, dtype=np.float64)
    amplitude = 1.0
    frequency = 1.0
    for _ in range(octaves):
        # 0 * inf is nan; zero coordinates stay zero
        with np.errstate(over="ignore", invalid="ignore"):
            cx = np.where(sx == 0.0, 0.0, sx * frequency)
            cy = np.where(sy == 0.0, 0.0, sy * frequency)

        if grows:
            live = ~(_settled(cx) & _settled(cy))
            if not live.any():
                break
            if live.all():
                total += perlin_sample_array(seed, cx, cy) * amplitude
            else:
                total[live] += perlin_sample_array(seed, cx[live], cy[live]) * amplitude
        else:
            total += perlin_sample_array(seed, cx, cy) * amplitude

        amplitude *= persistence
        frequency *= lacunarity
    return total


def fractal_bound(octaves: int, persistence: float) -> float:
    """
    Upper bound of |fractal_sample| for the given octave parameters.

    PERLIN_BOUND times the geometric amplitude series 1 + p + p**2 + ...
    Returns 0.0 for zero octaves.
    """
    octaves = validate_octaves(octaves)
    persistence = validate_persistence(persistence)
    return cte.PERLIN_BOUND * sum(persistence ** n for n in range(octaves))


__all__ = [
    "fractal_sample",
    "fractal_sample_array",
    "fractal_bound",
]
