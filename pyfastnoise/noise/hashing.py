"""
Coordinate hashing for PyFastNoise.

Stateless pseudo-random numbers addressed by integer lattice coordinates. The
same (seed, x, y) triple always hashes to the same value, in any call order and
in any process, which is what makes every noise field in the package
reproducible from its seed alone.

Fixed-width arithmetic:
    The hash is defined on 32-bit unsigned words. Seed and coordinates are
    first reduced to their 32-bit two's-complement representation, then every
    multiplication and addition wraps modulo 2**32. The wraparound is part of
    the definition: ports to languages with native uint32 arithmetic reproduce
    the values bit for bit, and arbitrary-precision implementations (Python
    ints here) mask with 0xFFFFFFFF after each step.

Algorithm:
    h = seed * PRIME_SEED + x * PRIME_X + y * PRIME_Y     (mod 2**32)
    h ^= h >> 15
    h  = h * MIX_MULT                                      (mod 2**32)
    h ^= h >> 13
    value = h / 0xFFFFFFFF                                 in [0, 1]

Author: B.G.
"""

import numpy as np

from .. import constants as cte

_M = cte.HASH_MASK

_U64_MASK = np.uint64(cte.HASH_MASK)
_U64_PRIME_X = np.uint64(cte.PRIME_X)
_U64_PRIME_Y = np.uint64(cte.PRIME_Y)
_U64_MIX_MULT = np.uint64(cte.MIX_MULT)
_U64_SHIFT_1 = np.uint64(cte.MIX_SHIFT_1)
_U64_SHIFT_2 = np.uint64(cte.MIX_SHIFT_2)


def seed_word(seed: int) -> int:
    """Seed contribution to the hash, seed * PRIME_SEED mod 2**32."""
    return ((int(seed) & _M) * cte.PRIME_SEED) & _M


def hash_u32(seed: int, x: int, y: int) -> int:
    """
    Mix (seed, x, y) into a 32-bit unsigned integer.

    Args:
        seed: Signed integer seed
        x, y: Signed integer coordinates (negative values are fine)

    Returns:
        int in [0, 2**32 - 1]
    """
    h = (seed_word(seed) + ((int(x) & _M) * cte.PRIME_X) + ((int(y) & _M) * cte.PRIME_Y)) & _M
    h ^= h >> cte.MIX_SHIFT_1
    h = (h * cte.MIX_MULT) & _M
    h ^= h >> cte.MIX_SHIFT_2
    return h


def hash_coords(seed: int, x: int, y: int) -> float:
    """
    Pseudo-random value in [0, 1] for an integer coordinate pair.

    Pure function of its arguments. Adjacent coordinates are decorrelated by
    the xor-shift/multiply mixing, so hashing neighbouring cells shows no
    visible structure.

    Example:
        >>> hash_coords(20, 0, 0) == hash_coords(20, 0, 0)
        True
    """
    return hash_u32(seed, x, y) / cte.HASH_MAX


def _to_word_array(a):
    # int64 & mask keeps the low 32 bits of the two's-complement value
    return (np.asarray(a, dtype=np.int64) & cte.HASH_MASK).astype(np.uint64)


def hash_u32_array(seed: int, x, y) -> np.ndarray:
    """
    Vectorised hash_u32 over broadcastable integer arrays.

    The words are held in uint64 and masked after every product, so no step
    can overflow the container and numpy never warns; the results equal the
    scalar hash_u32 exactly.

    Returns:
        numpy.ndarray of uint64 holding 32-bit values, broadcast shape of x and y
    """
    xw = _to_word_array(x)
    yw = _to_word_array(y)

    h = ((xw * _U64_PRIME_X) & _U64_MASK) + ((yw * _U64_PRIME_Y) & _U64_MASK)
    h = (h + np.uint64(seed_word(seed))) & _U64_MASK
    h ^= h >> _U64_SHIFT_1
    h = (h * _U64_MIX_MULT) & _U64_MASK
    h ^= h >> _U64_SHIFT_2
    return h


def hash_coords_array(seed: int, x, y) -> np.ndarray:
    """Vectorised hash_coords. Returns float64 values in [0, 1]."""
    return hash_u32_array(seed, x, y).astype(np.float64) / cte.HASH_MAX


__all__ = [
    "seed_word",
    "hash_u32",
    "hash_coords",
    "hash_u32_array",
    "hash_coords_array",
]
