"""Opaque-region extraction."""

from .opaque import opaque_bounds, opaque_area, opaque_polygon, opaque_extent

__all__ = [
    "opaque_bounds",
    "opaque_area",
    "opaque_polygon",
    "opaque_extent",
]
