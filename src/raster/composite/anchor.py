"""Anchor points for aligning a region inside a container."""

from __future__ import annotations
from enum import IntEnum

from ..core.geometry import Point, Rectangle
from ..scanline import image_bounds


def _half(v: int) -> int:
    return v // 2 if v >= 0 else -(-v // 2)


class Anchor(IntEnum):
    """Reference point of a container."""
    CENTER = 0
    TOP_LEFT = 1
    TOP = 2
    TOP_RIGHT = 3
    LEFT = 4
    RIGHT = 5
    BOTTOM_LEFT = 6
    BOTTOM = 7
    BOTTOM_RIGHT = 8


def anchor_offset(b: Rectangle, w: int, h: int, anchor: Anchor) -> Point:
    """
    Top-left corner of a w x h region placed at an anchor of b.

    Centering halves the leftover space rounding toward zero, so odd
    leftovers go to the right/bottom and oversized regions overhang evenly.
    """
    if anchor in (Anchor.TOP_LEFT, Anchor.LEFT, Anchor.BOTTOM_LEFT):
        x = b.min.x
    elif anchor in (Anchor.TOP_RIGHT, Anchor.RIGHT, Anchor.BOTTOM_RIGHT):
        x = b.max.x - w
    else:
        x = b.min.x + _half(b.dx - w)

    if anchor in (Anchor.TOP_LEFT, Anchor.TOP, Anchor.TOP_RIGHT):
        y = b.min.y
    elif anchor in (Anchor.BOTTOM_LEFT, Anchor.BOTTOM, Anchor.BOTTOM_RIGHT):
        y = b.max.y - h
    else:
        y = b.min.y + _half(b.dy - h)

    return Point(x, y)


def anchor_point(img, anchor: Anchor) -> Point:
    """Anchor point of an image's own bounds."""
    return anchor_offset(image_bounds(img), 0, 0, anchor)


def center_position(background, img) -> Point:
    """Position that centers img over background."""
    b = image_bounds(background)
    size = image_bounds(img).size
    return Point(b.min.x + b.dx // 2 - size.x // 2,
                 b.min.y + b.dy // 2 - size.y // 2)
