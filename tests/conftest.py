"""Shared fixtures for raster tests."""

import numpy as np
import pytest

from raster import PixelBuffer, EngineConfig, set_config


@pytest.fixture(autouse=True)
def reset_config():
    """Every test starts from a fresh process-wide config."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def four_workers():
    return EngineConfig(max_workers=4)


@pytest.fixture
def gradient():
    """5x4 opaque buffer where pixel (x, y) = (10x, 10y, x+y, 255)."""
    h, w = 4, 5
    arr = np.zeros((h, w, 4), dtype=np.uint8)
    ys, xs = np.mgrid[0:h, 0:w]
    arr[..., 0] = xs * 10
    arr[..., 1] = ys * 10
    arr[..., 2] = xs + ys
    arr[..., 3] = 255
    return PixelBuffer.from_array(arr)


@pytest.fixture
def solid():
    """Factory for single-color buffers."""
    def make(width, height, color):
        arr = np.zeros((height, width, 4), dtype=np.uint8)
        arr[...] = color
        return PixelBuffer.from_array(arr)
    return make
