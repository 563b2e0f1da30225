"""
Gradient lattice for PyFastNoise.

Every integer lattice point carries one unit gradient chosen from a constant
table of 8 directions at 45 degree increments. The choice is a pure function of
(seed, cell_x, cell_y).

The hash is taken half a cell away from the lattice point, on the doubled
integer lattice (2*cell + 1), so gradient selection does not share hash inputs
with a plain per-cell hash of the same seed.

Author: B.G.
"""

import math

import numpy as np

from .. import constants as cte
from .hashing import hash_coords, hash_coords_array

_D = math.sqrt(0.5)

# 8-direction unit gradients, counter-clockwise from +x
GRADIENTS_2D = np.array([
    [1.0, 0.0], [_D, _D], [0.0, 1.0], [-_D, _D],
    [-1.0, 0.0], [-_D, -_D], [0.0, -1.0], [_D, -_D],
], dtype=np.float64)

# Read-only so that no caller can mutate the shared table
GRADIENTS_2D.setflags(write=False)


def gradient_index(seed: int, cell_x: int, cell_y: int) -> int:
    """
    Table index in [0, N_GRADIENTS) of the gradient at a lattice point.

    floor(hash * 8) reaches 8 when the hash is exactly 1.0; that case is
    clamped to the last entry.
    """
    h = hash_coords(seed, 2 * int(cell_x) + 1, 2 * int(cell_y) + 1)
    return min(int(h * cte.N_GRADIENTS), cte.N_GRADIENTS - 1)


def gradient_at(seed: int, cell_x: int, cell_y: int):
    """
    Unit gradient vector at a lattice point.

    Returns:
        tuple (gx, gy) of floats
    """
    g = GRADIENTS_2D[gradient_index(seed, cell_x, cell_y)]
    return float(g[0]), float(g[1])


def gradient_index_array(seed: int, cell_x, cell_y) -> np.ndarray:
    """Vectorised gradient_index over integer arrays. Returns int64 indices."""
    cx = np.asarray(cell_x, dtype=np.int64)
    cy = np.asarray(cell_y, dtype=np.int64)
    h = hash_coords_array(seed, 2 * cx + 1, 2 * cy + 1)
    idx = np.floor(h * cte.N_GRADIENTS).astype(np.int64)
    return np.minimum(idx, cte.N_GRADIENTS - 1)


def gradients_at_array(seed: int, cell_x, cell_y):
    """
    Vectorised gradient_at.

    Returns:
        tuple (gx, gy) of float64 arrays with the broadcast shape of the inputs
    """
    idx = gradient_index_array(seed, cell_x, cell_y)
    return GRADIENTS_2D[idx, 0], GRADIENTS_2D[idx, 1]


__all__ = [
    "GRADIENTS_2D",
    "gradient_index",
    "gradient_at",
    "gradient_index_array",
    "gradients_at_array",
]
