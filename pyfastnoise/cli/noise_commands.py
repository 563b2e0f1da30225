"""
Noise rasterization CLI commands for PyFastNoise

Command line interface for rendering fractal Perlin noise to PNG or .npy files.

Author: B.G.
"""

import logging
import sys

import click
import numpy as np

from ..config import NoiseConfig
from ..errors import BackendUnavailableError, InvalidParameterError
from ..noise.fractal import fractal_bound
from ..raster import BACKENDS, rasterize, save_png


@click.command()
@click.option("--width", "-W", default=256, show_default=True, type=int, help="Raster width in pixels")
@click.option("--height", "-H", default=256, show_default=True, type=int, help="Raster height in pixels")
@click.option("--seed", "-s", default=20, show_default=True, type=int, help="Noise seed")
@click.option("--scale", default=30.0, show_default=True, type=float,
              help="Cell size of the first octave in pixels")
@click.option("--octaves", "-o", "octaves", default=1, show_default=True, type=int,
              help="Number of octaves")
@click.option("--persistence", "-p", default=0.5, show_default=True, type=float,
              help="Amplitude ratio between octaves, in [0, 1]")
@click.option("--lacunarity", default=2.0, show_default=True, type=float,
              help="Frequency ratio between octaves")
@click.option("--backend", "-b", type=click.Choice(list(BACKENDS)), default="numpy",
              show_default=True, help="Compute backend")
@click.option("--stretch", is_flag=True, default=False,
              help="Min-max stretch the image instead of using the analytic noise bound")
@click.option("--uint16", is_flag=True, default=False, help="Save a 16-bit PNG instead of 8-bit")
@click.option("--output", "-O", type=click.Path(), default=None,
              help="Output filename, .png or .npy (default: noise_<seed>.png)")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def noise(width, height, seed, scale, octaves, persistence, lacunarity, backend,
          stretch, uint16, output, verbose):
    """
    Render fractal Perlin noise to an image or numpy array.

    Samples WIDTH x HEIGHT pixels of persistence-weighted octave noise. PNG
    output is grayscale; by default the analytic bound of the octave sum maps
    to black/white so images of the same configuration share one scale.

    Examples:

        # Single octave, default seed, 256x256 PNG
        pfn-noise

        # Three octaves with persistence 0.5
        pfn-noise -s 20 --scale 53 -o 3 -p 0.5 -O terrain.png

        # Raw float values
        pfn-noise -W 512 -H 512 -O field.npy

        # Parallel Taichi kernel, verbose
        pfn-noise -b taichi -v
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        config = NoiseConfig(seed=seed, scale=scale, octaves=octaves,
                             persistence=persistence, lacunarity=lacunarity)

        if output is None:
            output = f"noise_{seed}.png"
        if not output.lower().endswith((".png", ".npy")):
            raise InvalidParameterError(f"output must end in .png or .npy, got '{output}'")

        if backend == "taichi":
            try:
                import taichi as ti
            except ImportError as e:
                raise BackendUnavailableError(f"Missing dependency - {e}") from e
            ti.init(arch=ti.gpu)

        if verbose:
            click.echo(f"Rasterizing {width}x{height} pixels ({backend} backend)...")
            click.echo(f"Configuration: {config.to_dict()}")

        field = rasterize(config, width, height, backend=backend)

        if output.lower().endswith(".npy"):
            np.save(output, field)
            mode = "npy"
        else:
            bound = None if stretch else fractal_bound(config.octaves, config.persistence)
            if bound == 0.0:
                bound = None
            mode = save_png(field, output, bound=bound, depth=16 if uint16 else 8)

        if verbose:
            click.echo(f"Value range: [{field.min():.4f}, {field.max():.4f}]")
            click.echo(f"Saved '{output}' (mode: {mode})")
        else:
            click.echo(f"Noise written to '{output}'")

    except (InvalidParameterError, BackendUnavailableError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    except OSError as e:
        click.echo(f"Error: cannot write '{output}' - {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    noise()
