"""
Test suite for PyFastNoise package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for hashing, gradients, Perlin and fractal noise, configuration,
  rasterization, display mapping and the CLI
- Integration tests for complete render workflows
- Taichi backend tests (skipped when Taichi cannot initialise)

Run with: pytest
"""
