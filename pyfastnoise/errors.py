"""
Exceptions raised by PyFastNoise.

Author: B.G.
"""


class InvalidParameterError(ValueError):
    """A noise or raster parameter lies outside its documented domain."""


class BackendUnavailableError(RuntimeError):
    """The requested compute backend cannot be imported or initialised."""


__all__ = ["InvalidParameterError", "BackendUnavailableError"]
