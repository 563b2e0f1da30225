"""
Taichi rasterization backend for PyFastNoise.

Runs the full noise stack (hash, gradient lookup, Perlin blend, octave sum)
inside one Taichi kernel, parallel over all pixels. The outer struct-for loop
has no cross-pixel dependency, so Taichi may schedule pixels in any order on
CPU threads or GPU lanes.

Precision:
    Hashing uses native ti.u32 arithmetic and is bit-identical to
    pyfastnoise.noise.hashing. Gradient indices are the top three bits of the
    hash word, which equals min(floor(hash * 8), 7) exactly. Coordinates and
    blending are FLOAT_TYPE_TI (float32), so values agree with the float64
    numpy backend to float32 tolerance rather than bit for bit.

Octave limits:
    Cell indices are ti.i32. An octave whose scaled coordinates are both 0 or
    beyond FLOAT32_INT_LIMIT (2**23) sits on a lattice point and contributes
    exactly 0; the kernel skips it, as the numpy backend does at its own
    float64 limit. An octave with either scaled coordinate at or beyond
    I32_CELL_LIMIT (2**31) in magnitude is skipped as well, since its cell
    index would not fit in i32. That happens only after about 31 + log2(scale)
    octaves at lacunarity 2; from there on the kernel no longer follows the
    numpy reference, which keeps summing those octaves. With persistence
    below 1 their amplitudes are under persistence**31 and the difference stays
    within float32 noise; with persistence 1 use the numpy backend for
    such octave counts.

Taichi must be initialised by the caller (ti.init) before use, as everywhere
in the package.

Author: B.G.
"""

import logging

import numpy as np
import taichi as ti

from .. import constants as cte
from ..noise.gradients import GRADIENTS_2D
from ..noise.hashing import seed_word

logger = logging.getLogger(__name__)

FLOAT_TYPE_TI = ti.f32
FLOAT_TYPE_NP = np.float32

# Largest magnitude whose floor still fits a ti.i32 cell index
I32_CELL_LIMIT = 2.0 ** 31


@ti.func
def hash_u32_ti(seed_w: ti.u32, x: ti.i32, y: ti.i32) -> ti.u32:
    """32-bit coordinate hash, wrapping natively in u32."""
    h = seed_w + ti.cast(x, ti.u32) * ti.u32(cte.PRIME_X) + ti.cast(y, ti.u32) * ti.u32(cte.PRIME_Y)
    h = h ^ (h >> cte.MIX_SHIFT_1)
    h = h * ti.u32(cte.MIX_MULT)
    h = h ^ (h >> cte.MIX_SHIFT_2)
    return h


@ti.func
def grad(seed_w: ti.u32, cx: ti.i32, cy: ti.i32, dx: FLOAT_TYPE_TI, dy: FLOAT_TYPE_TI,
         gradients: ti.template()) -> FLOAT_TYPE_TI:
    """Dot product of the lattice gradient at (cx, cy) with the offset (dx, dy)"""
    h = hash_u32_ti(seed_w, 2 * cx + 1, 2 * cy + 1)
    idx = ti.cast(h >> cte.GRADIENT_INDEX_SHIFT, ti.i32)
    return gradients[idx, 0] * dx + gradients[idx, 1] * dy


@ti.func
def fade(t: FLOAT_TYPE_TI) -> FLOAT_TYPE_TI:
    """Perlin fade function: 6t^5 - 15t^4 + 10t^3"""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


@ti.func
def lerp(t: FLOAT_TYPE_TI, a: FLOAT_TYPE_TI, b: FLOAT_TYPE_TI) -> FLOAT_TYPE_TI:
    """Linear interpolation between a and b by factor t"""
    return a + t * (b - a)


@ti.func
def perlin_noise_at(seed_w: ti.u32, x: FLOAT_TYPE_TI, y: FLOAT_TYPE_TI,
                    gradients: ti.template()) -> FLOAT_TYPE_TI:
    """Single-octave Perlin value at (x, y), same algorithm as perlin_sample."""
    fx = ti.floor(x)
    fy = ti.floor(y)
    cx = ti.cast(fx, ti.i32)
    cy = ti.cast(fy, ti.i32)
    xf = x - fx
    yf = y - fy

    d00 = grad(seed_w, cx, cy, xf, yf, gradients)
    d10 = grad(seed_w, cx + 1, cy, xf - 1.0, yf, gradients)
    d01 = grad(seed_w, cx, cy + 1, xf, yf - 1.0, gradients)
    d11 = grad(seed_w, cx + 1, cy + 1, xf - 1.0, yf - 1.0, gradients)

    u = fade(xf)
    v = fade(yf)
    return lerp(v, lerp(u, d00, d10), lerp(u, d01, d11))


@ti.kernel
def fractal_noise_kernel(noise_field: ti.template(), seed_w: ti.u32,
                         x0: FLOAT_TYPE_TI, y0: FLOAT_TYPE_TI, step: FLOAT_TYPE_TI,
                         scale: FLOAT_TYPE_TI, octaves: ti.i32,
                         persistence: FLOAT_TYPE_TI, lacunarity: FLOAT_TYPE_TI,
                         gradients: ti.template()):
    """
    Fill a (ny, nx) field with fractal Perlin noise.

    Pixel (j, i) samples sample-space point (x0 + i*step, y0 + j*step).

    Args:
        noise_field: Taichi field to fill, shape (ny, nx)
        seed_w: Seed word, seed * PRIME_SEED mod 2**32
        x0, y0: Sample-space coordinates of pixel (0, 0)
        step: Sample-space distance between neighbouring pixels
        scale: Cell size of the first octave
        octaves: Number of octaves to sum
        persistence: Amplitude ratio between octaves
        lacunarity: Frequency ratio between octaves
        gradients: 8x2 gradient vector table (read-only Taichi field)
    """
    for j, i in noise_field:
        x = (x0 + ti.cast(i, FLOAT_TYPE_TI) * step) / scale
        y = (y0 + ti.cast(j, FLOAT_TYPE_TI) * step) / scale

        total = ti.cast(0.0, FLOAT_TYPE_TI)
        amplitude = ti.cast(1.0, FLOAT_TYPE_TI)
        frequency = ti.cast(1.0, FLOAT_TYPE_TI)
        for _ in range(octaves):
            # 0 * inf is nan once frequency overflows; zero stays zero
            cx = ti.select(x == 0.0, 0.0, x * frequency)
            cy = ti.select(y == 0.0, 0.0, y * frequency)
            on_lattice = (cx == 0.0 or ti.abs(cx) >= cte.FLOAT32_INT_LIMIT) and \
                         (cy == 0.0 or ti.abs(cy) >= cte.FLOAT32_INT_LIMIT)
            in_range = ti.abs(cx) < I32_CELL_LIMIT and ti.abs(cy) < I32_CELL_LIMIT
            if in_range and not on_lattice:
                total += perlin_noise_at(seed_w, cx, cy, gradients) * amplitude
            amplitude *= persistence
            frequency *= lacunarity

        noise_field[j, i] = total


def gradient_table_field():
    """Copy the gradient table into a (8, 2) Taichi field."""
    gradients_field = ti.field(FLOAT_TYPE_TI, shape=GRADIENTS_2D.shape)
    gradients_field.from_numpy(GRADIENTS_2D.astype(FLOAT_TYPE_NP))
    return gradients_field


def rasterize_taichi(config, width, height, origin=(0.0, 0.0), step=1.0, return_field=False):
    """
    Rasterize a NoiseConfig on a width x height grid with the Taichi kernel.

    Args:
        config: NoiseConfig (already validated)
        width, height: Raster dimensions in pixels
        origin: Sample-space coordinates of pixel (0, 0)
        step: Sample-space distance between pixels
        return_field: If True, return the Taichi field; otherwise a numpy array

    Returns:
        numpy.ndarray (float32, shape (height, width)) or taichi.Field
    """
    logger.debug("taichi rasterization %dx%d, octaves=%d", width, height, config.octaves)

    noise_field = ti.field(FLOAT_TYPE_TI, shape=(height, width))
    gradients_field = gradient_table_field()

    fractal_noise_kernel(noise_field, seed_word(config.seed),
                         float(origin[0]), float(origin[1]), float(step),
                         config.scale, config.octaves,
                         config.persistence, config.lacunarity, gradients_field)

    if return_field:
        return noise_field
    return noise_field.to_numpy()


__all__ = [
    "FLOAT_TYPE_TI",
    "hash_u32_ti",
    "perlin_noise_at",
    "fractal_noise_kernel",
    "gradient_table_field",
    "rasterize_taichi",
]
