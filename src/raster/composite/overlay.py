"""Blended overlay of one image onto another."""

from __future__ import annotations
from typing import Iterable, Optional, Tuple
import numpy as np

from ..core.buffer import PixelBuffer, Color, BYTES_PER_PIXEL, new
from ..core.config import EngineConfig
from ..core.geometry import Point, Rectangle
from ..core.parallel import parallel
from ..scanline import Scanner
from ..utils.debug import debug_print, debug_buffer_info
from .anchor import center_position
from .ops import BlendOp, op_blend, apply_op
from .transform import clone, paste_region


def _blend_rows(
    dst: PixelBuffer,
    img,
    paste_rect: Rectangle,
    inter_rect: Rectangle,
    op: BlendOp,
    config: Optional[EngineConfig]
):
    """Combine img into the inter_rect part of dst in place, row-parallel."""
    src = Scanner(img)
    x1 = inter_rect.min.x - paste_rect.min.x
    x2 = inter_rect.max.x - paste_rect.min.x
    row_size = inter_rect.dx * BYTES_PER_PIXEL

    def blend_rows(ys):
        scan_line = np.zeros(row_size, dtype=np.uint8)
        for y in ys:
            y1 = y - paste_rect.min.y
            src.scan(x1, y1, x2, y1 + 1, scan_line)
            i = y * dst.stride + inter_rect.min.x * BYTES_PER_PIXEL
            row = dst.pix[i:i + row_size]
            apply_op(op, row, scan_line, row)

    parallel(inter_rect.min.y, inter_rect.max.y, blend_rows, config)


def overlay_with_op(
    background,
    img,
    pos: Point,
    op: BlendOp,
    config: Optional[EngineConfig] = None
) -> PixelBuffer:
    """
    Draw img over background at pos, combining pixels with a blend operator.

    Args:
        background: Pixel source
        img: Foreground pixel source
        pos: Top-left position of img in background coordinates
        op: Blend operator, see raster.composite.ops
        config: Engine configuration

    Returns:
        New PixelBuffer the size of background
    """
    dst = clone(background, config)
    paste_rect, inter_rect = paste_region(dst, background, img, pos)
    if inter_rect.empty():
        return dst
    _blend_rows(dst, img, paste_rect, inter_rect, op, config)
    return dst


def overlay(
    background,
    img,
    pos: Point,
    opacity: float,
    config: Optional[EngineConfig] = None
) -> PixelBuffer:
    """
    Draw img over background at pos with alpha-over compositing.

    Opacity is the opacity of the img layer, clamped into [0, 1].

    Examples:
        >>> # Draw a sprite over a background at (50, 50)
        >>> out = overlay(background, sprite, Point(50, 50), 1.0)

        >>> # Blend two opaque images of the same size
        >>> out = overlay(image_one, image_two, Point(0, 0), 0.5)
    """
    opacity = min(max(opacity, 0.0), 1.0)
    return overlay_with_op(background, img, pos, op_blend(opacity), config)


def overlay_center(background, img, opacity: float, config: Optional[EngineConfig] = None) -> PixelBuffer:
    """Overlay img at the center of background."""
    return overlay(background, img, center_position(background, img), opacity, config)


def overlay_on_canvas(
    width: int,
    height: int,
    bg_color: Color,
    layers: Iterable[Tuple[object, Point]],
    config: Optional[EngineConfig] = None
) -> PixelBuffer:
    """
    Composite layers onto a new canvas filled with bg_color.

    Layers are applied in order with full-opacity alpha-over, so later
    layers end up on top.

    Args:
        width, height: Canvas size
        bg_color: Canvas fill color
        layers: (image, position) pairs in canvas coordinates

    Returns:
        New PixelBuffer of width x height
    """
    dst = new(width, height, bg_color)
    op = op_blend(1.0)
    for index, (img, pos) in enumerate(layers):
        paste_rect, inter_rect = paste_region(dst, dst, img, pos)
        if inter_rect.empty():
            debug_print(f"[overlay] layer {index} at {tuple(pos)} is off canvas, skipped")
            continue
        _blend_rows(dst, img, paste_rect, inter_rect, op, config)
    debug_buffer_info("overlay_on_canvas", dst)
    return dst
