"""
Command Line Interface for PyFastNoise

Command line utilities for rendering noise fields from the terminal without
writing Python scripts.

Available Commands:
- noise: Rasterize fractal Perlin noise to PNG or .npy

Author: B.G.
"""

_CLI_SUBMODULES = {
    "noise": (".noise_commands", "noise"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
