"""Compositing system: crop, paste and blended overlay."""

from .ops import (
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
    OPERATORS,
    get_operator,
    blend,
)
from .anchor import Anchor, anchor_point, anchor_offset
from .transform import (
    clone,
    crop,
    crop_anchor,
    crop_center,
    paste,
    paste_center,
)
from .overlay import (
    overlay,
    overlay_center,
    overlay_with_op,
    overlay_on_canvas,
)

__all__ = [
    # Operators
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
    "OPERATORS",
    "get_operator",
    "blend",

    # Anchors
    "Anchor",
    "anchor_point",
    "anchor_offset",

    # Copy
    "clone",
    "crop",
    "crop_anchor",
    "crop_center",
    "paste",
    "paste_center",

    # Overlay
    "overlay",
    "overlay_center",
    "overlay_with_op",
    "overlay_on_canvas",
]
