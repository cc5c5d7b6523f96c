"""RGBA8 pixel buffer."""

from __future__ import annotations
from typing import Tuple, Union, Sequence
from dataclasses import dataclass, field
import numpy as np

from .geometry import Rectangle, ZERO_RECT, rect


BYTES_PER_PIXEL = 4
TRANSPARENT = (0, 0, 0, 0)

Color = Union[str, Sequence[int]]


@dataclass(eq=False)
class PixelBuffer:
    """
    Row-major straight-alpha RGBA8 pixels.

    Attributes:
        pix: Flat uint8 array, row y starts at y * stride
        stride: Bytes per row (>= width * 4)
        rect: Image bounds
    """
    pix: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.uint8))
    stride: int = 0
    rect: Rectangle = ZERO_RECT

    def __post_init__(self):
        if not self.rect.empty() and self.stride < self.rect.dx * BYTES_PER_PIXEL:
            raise ValueError(
                f"stride {self.stride} is smaller than width*4={self.rect.dx * BYTES_PER_PIXEL}")
        if self.stride * self.rect.dy > self.pix.size:
            raise ValueError(
                f"pix holds {self.pix.size} bytes, need stride*height={self.stride * self.rect.dy}")

    @classmethod
    def allocate(cls, width: int, height: int) -> PixelBuffer:
        """Zeroed (fully transparent) buffer, or the empty buffer for non-positive sizes."""
        if width <= 0 or height <= 0:
            return cls()
        return cls(
            pix=np.zeros(width * height * BYTES_PER_PIXEL, dtype=np.uint8),
            stride=width * BYTES_PER_PIXEL,
            rect=rect(0, 0, width, height),
        )

    @classmethod
    def from_array(cls, arr: np.ndarray) -> PixelBuffer:
        """Copy an (H, W, 4) uint8 RGBA array into a new buffer."""
        arr = np.asarray(arr)
        if arr.ndim != 3 or arr.shape[2] != BYTES_PER_PIXEL or arr.dtype != np.uint8:
            raise ValueError(f"expected (H, W, 4) uint8 array, got {arr.shape} {arr.dtype}")
        h, w, _ = arr.shape
        buf = cls.allocate(w, h)
        if not buf.empty():
            buf.pix[:] = np.ascontiguousarray(arr).reshape(-1)
        return buf

    @property
    def width(self) -> int:
        return self.rect.dx

    @property
    def height(self) -> int:
        return self.rect.dy

    def bounds(self) -> Rectangle:
        return self.rect

    def empty(self) -> bool:
        return self.rect.empty()

    def offset(self, x: int, y: int) -> int:
        """Index of the first byte of pixel (x, y) in image coordinates."""
        return (y - self.rect.min.y) * self.stride + (x - self.rect.min.x) * BYTES_PER_PIXEL

    def to_array(self) -> np.ndarray:
        """(H, W, 4) view of the pixels, padding excluded."""
        if self.empty():
            return np.zeros((0, 0, BYTES_PER_PIXEL), dtype=np.uint8)
        rows = self.pix[:self.stride * self.height].reshape(self.height, self.stride)
        return rows[:, :self.width * BYTES_PER_PIXEL].reshape(self.height, self.width, BYTES_PER_PIXEL)

    def pixel_at(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """RGBA of pixel (x, y) in image coordinates."""
        i = self.offset(x, y)
        r, g, b, a = self.pix[i:i + BYTES_PER_PIXEL]
        return int(r), int(g), int(b), int(a)

    def set_pixel(self, x: int, y: int, color: Color):
        i = self.offset(x, y)
        self.pix[i:i + BYTES_PER_PIXEL] = parse_color(color)

    def to_image(self):
        """Convert to a Pillow RGBA image."""
        from PIL import Image
        return Image.fromarray(np.ascontiguousarray(self.to_array()))


def parse_color(color: Color) -> Tuple[int, int, int, int]:
    """
    Normalize a color to a straight-alpha RGBA tuple.

    Args:
        color: (r, g, b), (r, g, b, a) or any color string Pillow understands
            ('red', '#ff000080', 'rgb(0, 0, 255)')

    Returns:
        (r, g, b, a) ints in [0, 255]

    Raises:
        ValueError: If the color cannot be parsed
    """
    if isinstance(color, str):
        from PIL import ImageColor
        return tuple(ImageColor.getcolor(color, "RGBA"))

    values = tuple(int(c) for c in color)
    if len(values) == 3:
        values = values + (255,)
    if len(values) != 4:
        raise ValueError(f"color must have 3 or 4 components, got {len(values)}")
    if any(c < 0 or c > 255 for c in values):
        raise ValueError(f"color components must be in [0, 255], got {values}")
    return values


def new(width: int, height: int, fill: Color = TRANSPARENT) -> PixelBuffer:
    """
    Create a buffer of the given size filled with a color.

    Args:
        width: Canvas width
        height: Canvas height
        fill: Fill color (see parse_color)

    Returns:
        New PixelBuffer, the empty buffer if width or height <= 0
    """
    if width <= 0 or height <= 0:
        return PixelBuffer()

    c = parse_color(fill)
    buf = PixelBuffer.allocate(width, height)
    if c != TRANSPARENT:
        buf.pix[:] = np.tile(np.array(c, dtype=np.uint8), width * height)
    return buf
