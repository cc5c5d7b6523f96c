"""Geometry of the opaque part of an image."""

from __future__ import annotations
from typing import List, Optional
import math
import numpy as np

from ..core.buffer import BYTES_PER_PIXEL
from ..core.config import EngineConfig
from ..core.geometry import Point, Rectangle, ZERO_RECT
from ..core.parallel import parallel
from ..scanline import Scanner
from ..utils.validation import validate_threshold, validate_polygon_samples


def _opaque_columns(src: Scanner, y: int, x0: int, x1: int, scan_line: np.ndarray, threshold: int) -> np.ndarray:
    """Offsets (from x0) of the pixels of row y whose alpha exceeds threshold."""
    src.scan(x0, y, x1, y + 1, scan_line)
    return np.flatnonzero(scan_line[3::BYTES_PER_PIXEL] > threshold)


def opaque_extent(img, threshold: int, config: Optional[EngineConfig] = None) -> Optional[Rectangle]:
    """
    Tightest rectangle holding every pixel with alpha > threshold.

    Returns:
        Rectangle with exclusive max, or None if no pixel qualifies
    """
    threshold = validate_threshold(threshold)
    src = Scanner(img)

    def scan_rows(ys):
        scan_line = np.zeros(src.w * BYTES_PER_PIXEL, dtype=np.uint8)
        box = None
        for y in ys:
            cols = _opaque_columns(src, y, 0, src.w, scan_line, threshold)
            if cols.size == 0:
                continue
            x_min, x_max = int(cols[0]), int(cols[-1])
            if box is None:
                box = [x_min, y, x_max, y]
            else:
                box = [min(box[0], x_min), min(box[1], y), max(box[2], x_max), max(box[3], y)]
        return box

    partials = [b for b in parallel(0, src.h, scan_rows, config) if b is not None]
    if not partials:
        return None

    x0 = min(b[0] for b in partials)
    y0 = min(b[1] for b in partials)
    x1 = max(b[2] for b in partials)
    y1 = max(b[3] for b in partials)
    return Rectangle(Point(x0, y0), Point(x1 + 1, y1 + 1))


def opaque_bounds(img, threshold: int, config: Optional[EngineConfig] = None) -> Rectangle:
    """
    Bounding box of the pixels with alpha > threshold.

    Args:
        img: Pixel source
        threshold: Alpha threshold in [0, 255]
        config: Engine configuration

    Returns:
        Rectangle whose min and max are the coordinates of the outermost
        qualifying pixels (max is inclusive here). The zero rectangle if no
        pixel qualifies.
    """
    extent = opaque_extent(img, threshold, config)
    if extent is None:
        return ZERO_RECT
    return Rectangle(extent.min, extent.max.sub(Point(1, 1)))


def opaque_area(img, threshold: int, config: Optional[EngineConfig] = None) -> int:
    """Number of pixels with alpha > threshold."""
    threshold = validate_threshold(threshold)
    src = Scanner(img)

    def count_rows(ys):
        scan_line = np.zeros(src.w * BYTES_PER_PIXEL, dtype=np.uint8)
        count = 0
        for y in ys:
            count += int(_opaque_columns(src, y, 0, src.w, scan_line, threshold).size)
        return count

    return sum(parallel(0, src.h, count_rows, config))


def opaque_polygon(img, n: int, threshold: int, config: Optional[EngineConfig] = None) -> List[Point]:
    """
    Approximate the silhouette of the opaque region with 2n points.

    n rows evenly spaced over the opaque extent are sampled; on each the
    first and last pixel with alpha > threshold give a left and a right
    point. Connected in index order the points trace a closed polygon.

    Args:
        img: Pixel source
        n: Number of sampled rows, at least 2
        threshold: Alpha threshold in [0, 255]
        config: Engine configuration

    Returns:
        2n points: [0, n) left points from the bottom sample up,
        [n, 2n) right points from the top sample down. Samples without
        a qualifying pixel stay Point(0, 0).

    Raises:
        ValueError: If n < 2
    """
    n = validate_polygon_samples(n)
    out = [Point(0, 0)] * (2 * n)
    bounds = opaque_extent(img, threshold, config)
    if bounds is None:
        return out

    src = Scanner(img)
    y_step = (bounds.dy - 1) / (n - 1)
    w = bounds.dx

    def sample_rows(ks):
        scan_line = np.zeros(w * BYTES_PER_PIXEL, dtype=np.uint8)
        found = []
        for k in ks:
            y = int(math.floor(bounds.min.y + k * y_step))
            cols = _opaque_columns(src, y, bounds.min.x, bounds.max.x, scan_line, threshold)
            if cols.size:
                found.append((k, y, bounds.min.x + int(cols[0]), bounds.min.x + int(cols[-1])))
        return found

    for found in parallel(0, n, sample_rows, config):
        for k, y, left, right in found:
            out[n - 1 - k] = Point(left, y)
            out[n + k] = Point(right, y)
    return out
