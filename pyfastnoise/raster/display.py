"""
Display mapping for noise rasters.

Converts scalar noise fields to displayable intensities: 8/16-bit grayscale
arrays, RGBA pixel buffers with an opaque alpha channel, and PNG files.

Two normalisations are available:
    - bound=None: min-max stretch of the field itself (constant fields map to 0)
    - bound=b: fixed linear map of [-b, b] to the full intensity range, e.g.
      PERLIN_BOUND for one octave or fractal_bound(octaves, persistence) for a
      fractal sum, so that rasters of the same configuration share one scale

Author: B.G.
"""

import numpy as np
from PIL import Image

from ..noise.perlin_noise import to_unit_range


def normalize(field, bound=None):
    """
    Map a noise field to [0, 1].

    Args:
        field: 2D array of noise values
        bound: Symmetric bound of the values, or None for a min-max stretch

    Returns:
        numpy.ndarray of float64 in [0, 1]
    """
    field = np.asarray(field, dtype=np.float64)
    if bound is not None:
        return to_unit_range(field, bound=bound, clip=True)

    fmin = np.nanmin(field)
    fmax = np.nanmax(field)
    if fmin == fmax:
        normalized = np.zeros_like(field)
    else:
        normalized = (field - fmin) / (fmax - fmin)
    return np.nan_to_num(normalized, nan=0.0)


def to_grayscale(field, bound=None, depth=8):
    """
    Convert a noise field to unsigned grayscale intensities.

    Args:
        field: 2D array of noise values
        bound: See normalize()
        depth: 8 (uint8, 0-255) or 16 (uint16, 0-65535)

    Returns:
        numpy.ndarray of uint8 or uint16 with the shape of field
    """
    normalized = normalize(field, bound)
    if depth == 8:
        return (normalized * 255).astype(np.uint8)
    if depth == 16:
        return (normalized * 65535).astype(np.uint16)
    raise ValueError(f"depth must be 8 or 16, got {depth}")


def to_rgba(field, bound=None):
    """
    Convert a noise field to an opaque grayscale RGBA pixel buffer.

    Returns:
        numpy.ndarray of uint8, shape (H, W, 4), alpha channel 255
    """
    gray = to_grayscale(field, bound, depth=8)
    rgba = np.empty(gray.shape + (4,), dtype=np.uint8)
    rgba[..., 0] = gray
    rgba[..., 1] = gray
    rgba[..., 2] = gray
    rgba[..., 3] = 255
    return rgba


def save_png(field, path, bound=None, depth=8):
    """
    Save a noise field as a single-band grayscale PNG.

    Args:
        field: 2D array of noise values
        path: Output filename
        bound: See normalize()
        depth: 8 ("L" image) or 16 ("I;16" image)

    Returns:
        str mode of the written image
    """
    img = Image.fromarray(to_grayscale(field, bound, depth=depth))
    img.save(path)
    return img.mode


__all__ = ["normalize", "to_grayscale", "to_rgba", "save_png"]
