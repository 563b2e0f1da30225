"""
Pytest configuration and fixtures for PyFastNoise test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import os
import sys
import pytest
import numpy as np


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker in ("importtest", "unit", "integration", "slow", "gpu"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers and ordering."""
    for item in items:
        # Mark Taichi tests
        if "gpu" in item.keywords or "taichi" in item.name.lower():
            item.add_marker("slow")

        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture(scope="session")
def sample_points():
    """Random continuous sample points spanning negative and positive cells."""
    rng = np.random.default_rng(42)  # For reproducible tests
    xs = rng.uniform(-50.0, 50.0, size=2000)
    ys = rng.uniform(-50.0, 50.0, size=2000)
    return xs, ys


@pytest.fixture(scope="session")
def lattice_grid():
    """Integer lattice coordinates from -8 to 8 on both axes."""
    cy, cx = np.mgrid[-8:9, -8:9]
    return cx, cy


@pytest.fixture
def default_config():
    """Three-octave configuration used across raster tests."""
    from pyfastnoise import NoiseConfig
    return NoiseConfig(seed=20, scale=53.0, octaves=3, persistence=0.5)


@pytest.fixture
def skip_if_no_taichi():
    """Skip test if Taichi is not available or fails to initialize."""
    ti = pytest.importorskip("taichi")
    try:
        ti.init(arch=ti.cpu, offline_cache=False)
    except Exception:
        pytest.skip("Taichi not available or initialization failed")
    return ti
