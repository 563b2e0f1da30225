"""
PyFastNoise: deterministic coherent noise.

Coordinate hashing, gradient lattices, 2D Perlin noise and persistence-weighted
octave compositing, all pure functions of an explicit seed, plus grid
rasterization (numpy or Taichi) and grayscale export.

Submodules:
- noise: hashing, gradients, Perlin sampling, fractal compositing
- raster: grid rasterization and display mapping
- config: immutable NoiseConfig and parameter validation
- constants: hash primes and defaults
- errors: InvalidParameterError, BackendUnavailableError
- cli: command line tools (lazy)

Usage:
    import pyfastnoise as pn

    cfg = pn.NoiseConfig(seed=20, scale=53.0, octaves=3, persistence=0.5)
    field = pn.raster.rasterize(cfg, 256, 256)
    pn.raster.save_png(field, "noise.png",
                       bound=pn.noise.fractal_bound(cfg.octaves, cfg.persistence))

Author: B.G.
"""

__version__ = "0.0.1"

from . import constants
from . import errors
from . import config
from . import noise
from . import raster
from .config import NoiseConfig
from .errors import InvalidParameterError, BackendUnavailableError


def __getattr__(name):
    if name == "cli":
        import importlib
        return importlib.import_module(".cli", __name__)
    raise AttributeError(name)


__all__ = [
    "__version__",
    "constants",
    "errors",
    "config",
    "noise",
    "raster",
    "cli",
    "NoiseConfig",
    "InvalidParameterError",
    "BackendUnavailableError",
]
