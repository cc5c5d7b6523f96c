"""Integer points and axis-aligned rectangles."""

from __future__ import annotations
from typing import NamedTuple
from dataclasses import dataclass


class Point(NamedTuple):
    """Integer pixel coordinate."""
    x: int = 0
    y: int = 0

    def add(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def sub(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


ZERO_POINT = Point(0, 0)


@dataclass(frozen=True)
class Rectangle:
    """
    Axis-aligned rectangle.

    Attributes:
        min: Top-left corner (inclusive)
        max: Bottom-right corner (exclusive)

    Notes:
        - A rectangle with min.x >= max.x or min.y >= max.y is empty
        - Empty rectangles carry no pixels; intersections that come out
          empty collapse to the zero rectangle
    """
    min: Point = ZERO_POINT
    max: Point = ZERO_POINT

    @property
    def dx(self) -> int:
        return self.max.x - self.min.x

    @property
    def dy(self) -> int:
        return self.max.y - self.min.y

    @property
    def size(self) -> Point:
        return Point(self.dx, self.dy)

    def empty(self) -> bool:
        return self.min.x >= self.max.x or self.min.y >= self.max.y

    def add(self, p: Point) -> Rectangle:
        """Translate the rectangle by p."""
        return Rectangle(self.min.add(p), self.max.add(p))

    def sub(self, p: Point) -> Rectangle:
        """Translate the rectangle by -p."""
        return Rectangle(self.min.sub(p), self.max.sub(p))

    def intersect(self, other: Rectangle) -> Rectangle:
        """Largest rectangle contained by both, or the zero rectangle."""
        x0 = max(self.min.x, other.min.x)
        y0 = max(self.min.y, other.min.y)
        x1 = min(self.max.x, other.max.x)
        y1 = min(self.max.y, other.max.y)
        if x0 >= x1 or y0 >= y1:
            return ZERO_RECT
        return Rectangle(Point(x0, y0), Point(x1, y1))

    def contains(self, p: Point) -> bool:
        return self.min.x <= p.x < self.max.x and self.min.y <= p.y < self.max.y


ZERO_RECT = Rectangle()


def rect(x0: int, y0: int, x1: int, y1: int) -> Rectangle:
    """Build a well-formed rectangle, swapping coordinates if needed."""
    if x0 > x1:
        x0, x1 = x1, x0
    if y0 > y1:
        y0, y1 = y1, y0
    return Rectangle(Point(x0, y0), Point(x1, y1))
