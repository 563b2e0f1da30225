"""
Global constants for PyFastNoise.

Hash primes, fixed-width integer masks, gradient table size and the default
noise parameters used when a configuration value is not given explicitly.

Author: B.G.
"""

import math

# Fixed integer width of the coordinate hash. Every multiplication and addition
# in the hash wraps modulo 2**32.
HASH_BITS = 32
HASH_MASK = 0xFFFFFFFF
HASH_MAX = float(HASH_MASK)

# Large odd multipliers combining seed and coordinates into one word.
# Coordinate and mixing multipliers stay below 2**31 so that Taichi kernels can
# use them as plain integer literals.
PRIME_SEED = 3266489917
PRIME_X = 374761393
PRIME_Y = 668265263

# Bit mixing (xor-shift, multiply, xor-shift)
MIX_SHIFT_1 = 15
MIX_MULT = 0x7FEB352D
MIX_SHIFT_2 = 13

# Gradient lattice
N_GRADIENTS = 8

# Analytic bound of single-octave 2D Perlin noise with unit gradients
PERLIN_BOUND = math.sqrt(2.0) / 2.0

# Defaults
DEFAULT_SEED = 20
DEFAULT_SCALE = 30.0
DEFAULT_OCTAVES = 1
DEFAULT_PERSISTENCE = 0.5
DEFAULT_LACUNARITY = 2.0

# Index bits of the gradient table taken from the top of the hash word
GRADIENT_INDEX_SHIFT = HASH_BITS - 3

# Magnitudes from which every float64 / float32 value is an integer
FLOAT64_INT_LIMIT = 2.0 ** 52
FLOAT32_INT_LIMIT = 2.0 ** 23
