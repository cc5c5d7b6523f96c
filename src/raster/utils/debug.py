"""Debug utilities."""

from __future__ import annotations
from typing import Tuple
import os

DEBUG_ENV_VAR = "RASTER_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable or engine config."""
    if os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false"):
        return True
    from ..core.config import get_config
    return get_config().debug


def debug_print(*args, **kwargs):
    """Print debug message if debug mode is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


def get_buffer_stats(buf) -> Tuple[float, float, float]:
    """
    Get min, max, mean statistics of the alpha channel of a buffer.
    
    Args:
        buf: PixelBuffer
    
    Returns:
        (min, max, mean) as floats
    """
    alpha = buf.to_array()[..., 3]
    return (
        float(alpha.min()),
        float(alpha.max()),
        float(alpha.mean())
    )


def debug_buffer_info(name: str, buf):
    """Print debug information about a pixel buffer."""
    if is_debug_enabled():
        if buf.empty():
            print(f"[{name}] empty buffer")
            return
        mn, mx, mean = get_buffer_stats(buf)
        print(f"[{name}] size={buf.width}x{buf.height} stride={buf.stride} "
              f"alpha min={mn:.0f} max={mx:.0f} mean={mean:.2f}")
