"""
raster - In-memory RGBA compositing engine

Reads pixels from any image source as straight-alpha RGBA8 rows and
composites them with row-level parallelism.

Components:
    - Core: Geometry, pixel buffers, engine config, row executor
    - Scan: Scanline readers for buffers, numpy arrays and Pillow images
    - Composite: Crop, paste, overlay and blend operators
    - Region: Opaque bounds, area and bounding polygon
    - Utils: Debug output and validation

Example:
    >>> from raster import new, overlay, opaque_bounds, Point
    >>>
    >>> # Red canvas with a half-transparent sprite on top
    >>> canvas = new(64, 64, (255, 0, 0, 255))
    >>> out = overlay(canvas, sprite, Point(8, 8), 0.5)
    >>>
    >>> # Where is the sprite opaque?
    >>> box = opaque_bounds(sprite, threshold=10)
"""

__version__ = "1.0.0"

# Core
from .core import (
    Point,
    Rectangle,
    rect,
    PixelBuffer,
    new,
    parse_color,
    EngineConfig,
    get_config,
    set_config,
    load_config,
    parallel,
    parallel_rows,
)

# Scan
from .scanline import Scanner, ImageSource, scan, image_bounds

# Composite
from .composite import (
    BlendOp,
    op_blend,
    op_plus,
    op_max,
    op_lighten,
    op_replace,
    op_replace_alpha,
    op_min_alpha,
    op_max_alpha,
    op_ignore,
    get_operator,
    blend,
    Anchor,
    anchor_point,
    clone,
    crop,
    crop_anchor,
    crop_center,
    paste,
    paste_center,
    overlay,
    overlay_center,
    overlay_with_op,
    overlay_on_canvas,
)

# Region
from .region import opaque_bounds, opaque_area, opaque_polygon

# Utils
from .utils import debug_print, is_debug_enabled

__all__ = [
    "__version__",

    # Core
    "Point",
    "Rectangle",
    "rect",
    "PixelBuffer",
    "new",
    "parse_color",
    "EngineConfig",
    "get_config",
    "set_config",
    "load_config",
    "parallel",
    "parallel_rows",

    # Scan
    "Scanner",
    "ImageSource",
    "scan",
    "image_bounds",

    # Composite
    "BlendOp",
    "op_blend",
    "op_plus",
    "op_max",
    "op_lighten",
    "op_replace",
    "op_replace_alpha",
    "op_min_alpha",
    "op_max_alpha",
    "op_ignore",
    "get_operator",
    "blend",
    "Anchor",
    "anchor_point",
    "clone",
    "crop",
    "crop_anchor",
    "crop_center",
    "paste",
    "paste_center",
    "overlay",
    "overlay_center",
    "overlay_with_op",
    "overlay_on_canvas",

    # Region
    "opaque_bounds",
    "opaque_area",
    "opaque_polygon",

    # Utils
    "debug_print",
    "is_debug_enabled",
]
