"""
Noise configuration for PyFastNoise.

A NoiseConfig bundles the seed with the octave parameters into one immutable
value that is threaded through every call. There is no global seed: two
configurations with the same fields always produce the same field.

Parameter validation lives here as well so that the sampling functions and the
rasterizer reject the same inputs with the same messages.

Author: B.G.
"""

import math
import numbers
from dataclasses import asdict, dataclass

from . import constants as cte
from .errors import InvalidParameterError


def validate_octaves(octaves):
    """Return octaves as an int, raising InvalidParameterError if negative or fractional."""
    if isinstance(octaves, bool) or not isinstance(octaves, numbers.Integral):
        raise InvalidParameterError(f"octaves must be an integer, got {octaves!r}")
    if octaves < 0:
        raise InvalidParameterError(f"octaves must be >= 0, got {octaves}")
    return int(octaves)


def validate_persistence(persistence):
    """Return persistence as a float in [0, 1]. NaN is rejected."""
    try:
        persistence = float(persistence)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"persistence must be a real number, got {persistence!r}")
    if not 0.0 <= persistence <= 1.0:
        raise InvalidParameterError(f"persistence must be in [0, 1], got {persistence}")
    return persistence


def validate_scale(scale):
    """Return scale as a strictly positive finite float."""
    try:
        scale = float(scale)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"scale must be a real number, got {scale!r}")
    if not math.isfinite(scale) or scale <= 0.0:
        raise InvalidParameterError(f"scale must be > 0 and finite, got {scale}")
    return scale


def validate_lacunarity(lacunarity):
    """Return lacunarity as a strictly positive finite float."""
    try:
        lacunarity = float(lacunarity)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"lacunarity must be a real number, got {lacunarity!r}")
    if not math.isfinite(lacunarity) or lacunarity <= 0.0:
        raise InvalidParameterError(f"lacunarity must be > 0 and finite, got {lacunarity}")
    return lacunarity


def validate_seed(seed):
    if isinstance(seed, bool) or not isinstance(seed, numbers.Integral):
        raise InvalidParameterError(f"seed must be an integer, got {seed!r}")
    return int(seed)


@dataclass(frozen=True)
class NoiseConfig:
    """
    Immutable noise configuration.

    Attributes:
        seed: Signed integer seed. Only its low 32 bits reach the hash.
        scale: Lattice cell size in sample-space units (sample coordinates are
               divided by it before the first octave).
        octaves: Number of octaves to sum (0 yields a zero field).
        persistence: Amplitude ratio between successive octaves, in [0, 1].
        lacunarity: Frequency ratio between successive octaves (default 2.0).

    Example:
        cfg = NoiseConfig(seed=20, scale=53.0, octaves=3, persistence=0.5)
        field = pyfastnoise.raster.rasterize(cfg, 256, 256)
    """

    seed: int = cte.DEFAULT_SEED
    scale: float = cte.DEFAULT_SCALE
    octaves: int = cte.DEFAULT_OCTAVES
    persistence: float = cte.DEFAULT_PERSISTENCE
    lacunarity: float = cte.DEFAULT_LACUNARITY

    def __post_init__(self):
        # frozen dataclass: normalised values are written through object.__setattr__
        object.__setattr__(self, "seed", validate_seed(self.seed))
        object.__setattr__(self, "scale", validate_scale(self.scale))
        object.__setattr__(self, "octaves", validate_octaves(self.octaves))
        object.__setattr__(self, "persistence", validate_persistence(self.persistence))
        object.__setattr__(self, "lacunarity", validate_lacunarity(self.lacunarity))

    @classmethod
    def from_dict(cls, params):
        """Build a configuration from a mapping, ignoring unknown keys."""
        known = {k: params[k] for k in ("seed", "scale", "octaves", "persistence", "lacunarity") if k in params}
        return cls(**known)

    def to_dict(self):
        return asdict(self)

    def with_seed(self, seed):
        """Return a copy of this configuration with another seed."""
        return NoiseConfig(seed, self.scale, self.octaves, self.persistence, self.lacunarity)


__all__ = [
    "NoiseConfig",
    "validate_octaves",
    "validate_persistence",
    "validate_scale",
    "validate_lacunarity",
    "validate_seed",
]
