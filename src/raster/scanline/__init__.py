"""Scanline access to heterogeneous pixel sources."""

from .scanner import Scanner, ImageSource, scan, image_bounds

__all__ = [
    "Scanner",
    "ImageSource",
    "scan",
    "image_bounds",
]
