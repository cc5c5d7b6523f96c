"""Input validation utilities."""

from __future__ import annotations
import numpy as np


def validate_threshold(threshold) -> int:
    """
    Validate an alpha threshold.
    
    Args:
        threshold: Alpha threshold, pixels with alpha strictly above it count
    
    Returns:
        Threshold as int
    
    Raises:
        ValueError: If threshold is not an integer in [0, 255]
    """
    if isinstance(threshold, bool) or not isinstance(threshold, (int, np.integer)):
        raise ValueError(f"threshold must be an int, got {type(threshold).__name__}")
    if not 0 <= threshold <= 255:
        raise ValueError(f"threshold must be in [0, 255], got {threshold}")
    return int(threshold)


def validate_pixel_array(arr: np.ndarray):
    """
    Validate a numpy image array used as a pixel source.
    
    Args:
        arr: Image array (H, W), (H, W, C) with C in 1..4
    
    Raises:
        ValueError: If shape or dtype is unsupported
    """
    if arr.ndim == 3:
        if arr.shape[2] not in (1, 2, 3, 4):
            raise ValueError(f"image array must have 1-4 channels, got {arr.shape}")
    elif arr.ndim != 2:
        raise ValueError(f"image array must be (H, W) or (H, W, C), got {arr.shape}")
    
    if arr.dtype not in (np.uint8, np.uint16) and not np.issubdtype(arr.dtype, np.floating):
        raise ValueError(f"image array dtype must be uint8, uint16 or float, got {arr.dtype}")


def validate_polygon_samples(n) -> int:
    """
    Validate the number of horizontal samples of a bounding polygon.
    
    Raises:
        ValueError: If n is not an integer or n < 2
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"polygon samples must be an int, got {type(n).__name__}")
    if n < 2:
        raise ValueError(f"polygon needs at least 2 samples, got {n}")
    return int(n)
