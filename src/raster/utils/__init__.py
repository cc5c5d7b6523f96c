"""Common utilities."""

from .validation import (
    validate_threshold,
    validate_pixel_array,
    validate_polygon_samples,
)
from .debug import (
    is_debug_enabled,
    debug_print,
    debug_buffer_info,
    get_buffer_stats,
)

__all__ = [
    # Validation
    "validate_threshold",
    "validate_pixel_array",
    "validate_polygon_samples",
    
    # Debug
    "is_debug_enabled",
    "debug_print",
    "debug_buffer_info",
    "get_buffer_stats",
]
