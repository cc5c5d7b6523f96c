"""Copy-based operations: clone, crop and paste."""

from __future__ import annotations
from typing import Optional, Tuple

from ..core.buffer import PixelBuffer, BYTES_PER_PIXEL
from ..core.config import EngineConfig
from ..core.geometry import Point, Rectangle
from ..core.parallel import parallel
from ..scanline import Scanner, image_bounds
from .anchor import Anchor, anchor_offset, center_position


def clone(img, config: Optional[EngineConfig] = None) -> PixelBuffer:
    """
    Copy any pixel source into a new RGBA8 buffer at the origin.

    Args:
        img: PixelBuffer, numpy array, Pillow image or ImageSource
        config: Engine configuration

    Returns:
        New PixelBuffer of the same size
    """
    src = Scanner(img)
    dst = PixelBuffer.allocate(src.w, src.h)
    if dst.empty():
        return dst

    size = src.w * BYTES_PER_PIXEL

    def copy_rows(ys):
        for y in ys:
            i = y * dst.stride
            src.scan(0, y, src.w, y + 1, dst.pix[i:i + size])

    parallel(0, src.h, copy_rows, config)
    return dst


def crop(img, r: Rectangle, config: Optional[EngineConfig] = None) -> PixelBuffer:
    """
    Cut out a rectangular region of an image.

    Args:
        img: Pixel source
        r: Region in image coordinates, clipped to the image bounds

    Returns:
        New PixelBuffer at the origin, the empty buffer if r misses the image
    """
    bounds = image_bounds(img)
    r = r.intersect(bounds).sub(bounds.min)
    if r.empty():
        return PixelBuffer()

    src = Scanner(img)
    dst = PixelBuffer.allocate(r.dx, r.dy)
    row_size = r.dx * BYTES_PER_PIXEL

    def copy_rows(ys):
        for y in ys:
            i = (y - r.min.y) * dst.stride
            src.scan(r.min.x, y, r.max.x, y + 1, dst.pix[i:i + row_size])

    parallel(r.min.y, r.max.y, copy_rows, config)
    return dst


def crop_anchor(
    img,
    width: int,
    height: int,
    anchor: Anchor,
    config: Optional[EngineConfig] = None
) -> PixelBuffer:
    """Cut out a width x height region placed at an anchor of the image."""
    bounds = image_bounds(img)
    pt = anchor_offset(bounds, width, height, anchor)
    r = Rectangle(Point(0, 0), Point(width, height)).add(pt)
    return crop(img, bounds.intersect(r), config)


def crop_center(img, width: int, height: int, config: Optional[EngineConfig] = None) -> PixelBuffer:
    """Cut out a width x height region from the center of the image."""
    return crop_anchor(img, width, height, Anchor.CENTER, config)


def paste_region(dst: PixelBuffer, background, img, pos: Point) -> Tuple[Rectangle, Rectangle]:
    """
    Where img lands on dst when placed at pos in background coordinates.

    Returns:
        (paste_rect, inter_rect): the full placement of img and its part
        inside dst, both origin-relative to dst
    """
    pos = Point(*pos).sub(image_bounds(background).min)
    paste_rect = Rectangle(pos, pos.add(image_bounds(img).size))
    return paste_rect, paste_rect.intersect(dst.bounds())


def paste(background, img, pos: Point, config: Optional[EngineConfig] = None) -> PixelBuffer:
    """
    Copy img over a clone of background at pos, overwriting pixels.

    Args:
        background: Pixel source
        img: Pixel source to paste
        pos: Top-left position of img in background coordinates

    Returns:
        New PixelBuffer the size of background
    """
    dst = clone(background, config)
    paste_rect, inter_rect = paste_region(dst, background, img, pos)
    if inter_rect.empty():
        return dst

    src = Scanner(img)
    x1 = inter_rect.min.x - paste_rect.min.x
    x2 = inter_rect.max.x - paste_rect.min.x

    def copy_rows(ys):
        for y in ys:
            y1 = y - paste_rect.min.y
            i1 = y * dst.stride + inter_rect.min.x * BYTES_PER_PIXEL
            i2 = i1 + inter_rect.dx * BYTES_PER_PIXEL
            src.scan(x1, y1, x2, y1 + 1, dst.pix[i1:i2])

    parallel(inter_rect.min.y, inter_rect.max.y, copy_rows, config)
    return dst


def paste_center(background, img, config: Optional[EngineConfig] = None) -> PixelBuffer:
    """Paste img at the center of background."""
    return paste(background, img, center_position(background, img), config)
