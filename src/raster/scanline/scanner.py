"""Scanline reader normalizing any pixel source to straight RGBA8."""

from __future__ import annotations
from typing import Protocol, runtime_checkable
import numpy as np
from PIL import Image as PILImage

from ..core.buffer import PixelBuffer, BYTES_PER_PIXEL
from ..core.geometry import Rectangle, rect
from ..utils.validation import validate_pixel_array


@runtime_checkable
class ImageSource(Protocol):
    """Pluggable pixel source: anything that can report bounds and read RGBA8."""

    def bounds(self) -> Rectangle:
        ...

    def read_rgba(self, x0: int, y0: int, x1: int, y1: int, out: np.ndarray):
        """Fill out with straight RGBA8 for [x0, x1) x [y0, y1), origin-relative."""
        ...


def image_bounds(img) -> Rectangle:
    """
    Bounds of a pixel source.

    Args:
        img: PixelBuffer, numpy array, Pillow image or ImageSource

    Returns:
        Rectangle (origin-based for arrays and Pillow images)

    Raises:
        TypeError: If the source type is unsupported
    """
    if isinstance(img, PixelBuffer):
        return img.rect
    if isinstance(img, np.ndarray):
        return rect(0, 0, img.shape[1], img.shape[0])
    if isinstance(img, PILImage.Image):
        return rect(0, 0, img.size[0], img.size[1])
    if isinstance(img, ImageSource):
        return img.bounds()
    raise TypeError(f"unsupported image source: {type(img).__name__}")


def _to_uint8(arr: np.ndarray) -> np.ndarray:
    if arr.dtype == np.uint8:
        return arr
    if arr.dtype == np.uint16:
        return (arr >> 8).astype(np.uint8)
    return (np.clip(arr, 0.0, 1.0) * 255).astype(np.uint8)


def _unpremultiply(px: np.ndarray) -> np.ndarray:
    """Convert premultiplied (N, 4) uint8 pixels to straight alpha."""
    a = px[:, 3].astype(np.uint16)
    rgb = px[:, :3].astype(np.uint16)
    safe_a = np.where(a == 0, 1, a)[:, None]
    straight = np.where(a[:, None] == 0, 0, np.minimum(rgb * 255 // safe_a, 255))
    straight = np.where(a[:, None] == 255, rgb, straight)
    out = np.empty_like(px)
    out[:, :3] = straight
    out[:, 3] = px[:, 3]
    return out


class Scanner:
    """
    Read-only RGBA8 view over an image source.

    Coordinates passed to scan() are relative to the source origin, so
    (0, 0) is always the top-left pixel regardless of the source bounds.

    Args:
        img: PixelBuffer, numpy array, Pillow image or ImageSource
        premultiplied: Treat 4-channel numpy sources as premultiplied alpha

    Notes:
        - Holds no pixel cache; every call reads from the source
        - Concurrent scans of disjoint rows are safe
    """

    def __init__(self, img, premultiplied: bool = False):
        self.img = img
        bounds = image_bounds(img)
        self.w = bounds.dx
        self.h = bounds.dy
        self.premultiplied = premultiplied

        if isinstance(img, PixelBuffer):
            self._read = self._scan_buffer
        elif isinstance(img, np.ndarray):
            validate_pixel_array(img)
            self._read = self._scan_array
        elif isinstance(img, PILImage.Image):
            # Force decoding now so concurrent crops don't race on lazy loading
            img.load()
            self._read = self._scan_pil
        else:
            self._read = self._scan_source

    def scan(self, x0: int, y0: int, x1: int, y1: int, out: np.ndarray):
        """
        Fill out with RGBA8 pixels of [x0, x1) x [y0, y1).

        Args:
            x0, y0: Top-left (inclusive)
            x1, y1: Bottom-right (exclusive)
            out: uint8 array of (x1-x0)*(y1-y0)*4 bytes, rows packed contiguously
        """
        if x1 <= x0 or y1 <= y0:
            return
        self._read(x0, y0, x1, y1, out)

    def _scan_buffer(self, x0, y0, x1, y1, out):
        img = self.img
        size = (x1 - x0) * BYTES_PER_PIXEL
        j = 0
        for y in range(y0, y1):
            i = y * img.stride + x0 * BYTES_PER_PIXEL
            out[j:j + size] = img.pix[i:i + size]
            j += size

    def _scan_array(self, x0, y0, x1, y1, out):
        region = _to_uint8(self.img[y0:y1, x0:x1])
        if region.ndim == 2:
            region = region[..., None]
        channels = region.shape[2]
        px = out[:(x1 - x0) * (y1 - y0) * BYTES_PER_PIXEL].reshape(-1, BYTES_PER_PIXEL)
        flat = region.reshape(-1, channels)

        if channels == 1:
            px[:, :3] = flat
            px[:, 3] = 255
        elif channels == 2:
            px[:, :3] = flat[:, :1]
            px[:, 3] = flat[:, 1]
        elif channels == 3:
            px[:, :3] = flat
            px[:, 3] = 255
        elif self.premultiplied:
            px[:] = _unpremultiply(flat)
        else:
            px[:] = flat

    def _scan_pil(self, x0, y0, x1, y1, out):
        region = self.img.crop((x0, y0, x1, y1))
        if region.mode != "RGBA":
            region = region.convert("RGBA")
        size = (x1 - x0) * (y1 - y0) * BYTES_PER_PIXEL
        out[:size] = np.frombuffer(region.tobytes(), dtype=np.uint8)

    def _scan_source(self, x0, y0, x1, y1, out):
        self.img.read_rgba(x0, y0, x1, y1, out)


def scan(img, x0: int, y0: int, x1: int, y1: int) -> bytes:
    """Read [x0, x1) x [y0, y1) of img as straight RGBA8 bytes."""
    if x1 <= x0 or y1 <= y0:
        return b""
    out = np.zeros((x1 - x0) * (y1 - y0) * BYTES_PER_PIXEL, dtype=np.uint8)
    Scanner(img).scan(x0, y0, x1, y1, out)
    return out.tobytes()
