"""Shared helpers for building synthetic Bayer frames."""

import numpy as np
import pytest

from bayer2tga import FrameGeometry, SensorFrame


def mosaic(r, gr, gb, b):
    """Interleave four (h, w) RGGB planes into a (2h, 2w) sensor grid."""
    r = np.asarray(r)
    h, w = r.shape
    grid = np.zeros((2 * h, 2 * w), dtype=np.uint16)
    grid[0::2, 0::2] = r
    grid[0::2, 1::2] = gr
    grid[1::2, 0::2] = gb
    grid[1::2, 1::2] = b
    return grid


def write_raw(path, grid):
    np.asarray(grid, dtype="<u2").tofile(path)
    return path


@pytest.fixture
def small_geometry():
    return FrameGeometry(width=4, height=3)


@pytest.fixture
def random_frame(small_geometry):
    rng = np.random.default_rng(42)
    data = rng.integers(0, 1024, size=small_geometry.sensor_shape, dtype=np.uint16)
    return SensorFrame(data, small_geometry)
