"""Core types: geometry, pixel buffers, configuration and row parallelism."""

from .geometry import Point, Rectangle, rect, ZERO_POINT, ZERO_RECT
from .buffer import PixelBuffer, new, parse_color, BYTES_PER_PIXEL
from .config import EngineConfig, get_config, set_config, load_config
from .parallel import parallel, parallel_rows, num_workers

__all__ = [
    "Point",
    "Rectangle",
    "rect",
    "ZERO_POINT",
    "ZERO_RECT",
    "PixelBuffer",
    "new",
    "parse_color",
    "BYTES_PER_PIXEL",
    "EngineConfig",
    "get_config",
    "set_config",
    "load_config",
    "parallel",
    "parallel_rows",
    "num_workers",
]
