"""
Noise generation module for PyFastNoise.

Deterministic coherent noise built from four layers, each a pure function of
its seed and coordinates:

- Hashing: 32-bit coordinate hash with modular wraparound, values in [0, 1]
- Gradients: one of 8 unit vectors per integer lattice point
- Perlin: single-octave gradient noise with quintic fade, |value| <= sqrt(2)/2
- Fractal: persistence-weighted octave sum of Perlin samples

Every function has a scalar form and a vectorised numpy form (suffix _array)
that agree exactly.

Usage:
    import pyfastnoise as pn

    # One value
    v = pn.noise.perlin_sample(20, 3.7, 1.2)

    # Three octaves of fractal noise on a pixel grid
    ys, xs = np.mgrid[0:128, 0:128]
    field = pn.noise.fractal_sample_array(20, xs, ys, scale=53.0,
                                          octaves=3, persistence=0.5)

Author: B.G.
"""

from .hashing import hash_u32, hash_coords, hash_u32_array, hash_coords_array
from .gradients import (
    GRADIENTS_2D,
    gradient_index,
    gradient_at,
    gradient_index_array,
    gradients_at_array,
)
from .perlin_noise import fade, lerp, perlin_sample, perlin_sample_array, to_unit_range
from .fractal import fractal_sample, fractal_sample_array, fractal_bound

# Export all noise generation functions
__all__ = [
    "hash_u32", "hash_coords", "hash_u32_array", "hash_coords_array",
    "GRADIENTS_2D", "gradient_index", "gradient_at",
    "gradient_index_array", "gradients_at_array",
    "fade", "lerp", "perlin_sample", "perlin_sample_array", "to_unit_range",
    "fractal_sample", "fractal_sample_array", "fractal_bound",
]
