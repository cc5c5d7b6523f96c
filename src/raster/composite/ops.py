"""Blend operators.

Every operator maps a background pixel (r1, g1, b1, a1) and a foreground
pixel (r2, g2, b2, a2) to an output pixel. Channels are floats in the
0-255 domain: python floats for a single pixel, or float64 arrays holding
a whole scanline. Results are clamped and truncated by the caller.
"""

from __future__ import annotations
from typing import Callable, Dict, Sequence, Tuple
import numpy as np


BlendOp = Callable[..., Tuple]


def _plus_alpha(a1, a2):
    return np.minimum(a1 + a2 * ((255 - a1) / 255), 255)


def op_blend(opacity: float) -> BlendOp:
    """
    Alpha-over with foreground opacity in [0, 1].

    Where neither pixel contributes (coefficient sum is zero) the
    background color is kept rather than dividing 0 by 0.
    """
    def blend_op(r1, g1, b1, a1, r2, g2, b2, a2):
        coef2 = opacity * a2 / 255
        coef1 = (1 - coef2) * a1 / 255
        coef_sum = coef1 + coef2
        none = coef_sum == 0
        safe_sum = np.where(none, 1.0, coef_sum)
        coef1 = np.where(none, 1.0, coef1 / safe_sum)
        coef2 = np.where(none, 0.0, coef2 / safe_sum)

        r = r1 * coef1 + r2 * coef2
        g = g1 * coef1 + g2 * coef2
        b = b1 * coef1 + b2 * coef2
        a = np.minimum(a1 + a2 * opacity * (255 - a1) / 255, 255)
        return r, g, b, a

    return blend_op


def op_plus(r1, g1, b1, a1, r2, g2, b2, a2):
    r = np.minimum(r1 + r2, 255)
    g = np.minimum(g1 + g2, 255)
    b = np.minimum(b1 + b2, 255)
    return r, g, b, _plus_alpha(a1, a2)


def op_max(r1, g1, b1, a1, r2, g2, b2, a2):
    r = np.maximum(r1, r2)
    g = np.maximum(g1, g2)
    b = np.maximum(b1, b2)
    return r, g, b, _plus_alpha(a1, a2)


def op_lighten(r1, g1, b1, a1, r2, g2, b2, a2):
    """Keep the RGB of whichever pixel has the higher HSL lightness (foreground on ties)."""
    l1 = (np.maximum(r1, np.maximum(g1, b1)) + np.minimum(r1, np.minimum(g1, b1))) / 2
    l2 = (np.maximum(r2, np.maximum(g2, b2)) + np.minimum(r2, np.minimum(g2, b2))) / 2
    darker = l2 < l1
    r = np.where(darker, r1, r2)
    g = np.where(darker, g1, g2)
    b = np.where(darker, b1, b2)
    return r, g, b, _plus_alpha(a1, a2)


def op_replace(r1, g1, b1, a1, r2, g2, b2, a2):
    return r2, g2, b2, a2


def op_replace_alpha(r1, g1, b1, a1, r2, g2, b2, a2):
    return r1, g1, b1, a2


def op_min_alpha(r1, g1, b1, a1, r2, g2, b2, a2):
    return r1, g1, b1, np.minimum(a1, a2)


def op_max_alpha(r1, g1, b1, a1, r2, g2, b2, a2):
    # RGB is forced to white
    return 255.0, 255.0, 255.0, np.maximum(a1, a2)


def op_ignore(r1, g1, b1, a1, r2, g2, b2, a2):
    return r1, g1, b1, a1


OPERATORS: Dict[str, BlendOp] = {
    "blend": op_blend(1.0),
    "plus": op_plus,
    "max": op_max,
    "lighten": op_lighten,
    "replace": op_replace,
    "replace_alpha": op_replace_alpha,
    "min_alpha": op_min_alpha,
    "max_alpha": op_max_alpha,
    "ignore": op_ignore,
}


def get_operator(name: str) -> BlendOp:
    """
    Look up a blend operator by name.

    Raises:
        ValueError: If name is not a registered operator
    """
    try:
        return OPERATORS[name]
    except KeyError:
        raise ValueError(
            f"unknown blend operator {name!r}, expected one of {sorted(OPERATORS)}") from None


def to_uint8(channel) -> np.ndarray:
    """Clamp to [0, 255] and truncate toward zero."""
    return np.clip(channel, 0, 255).astype(np.uint8)


def apply_op(op: BlendOp, bg: np.ndarray, fg: np.ndarray, out: np.ndarray):
    """
    Combine two scanlines of packed RGBA8 pixels into out.

    Args:
        op: Blend operator
        bg: Background bytes (N*4,) uint8
        fg: Foreground bytes (N*4,) uint8
        out: Destination bytes (N*4,) uint8, may alias bg
    """
    p1 = bg.reshape(-1, 4).astype(np.float64)
    p2 = fg.reshape(-1, 4).astype(np.float64)
    result = op(p1[:, 0], p1[:, 1], p1[:, 2], p1[:, 3],
                p2[:, 0], p2[:, 1], p2[:, 2], p2[:, 3])
    dst = out.reshape(-1, 4)
    for c, channel in enumerate(result):
        dst[:, c] = to_uint8(channel)


def blend(op: BlendOp, bg: Sequence[float], fg: Sequence[float]) -> Tuple[int, int, int, int]:
    """
    Apply a blend operator to a single pair of pixels.

    Args:
        op: Blend operator
        bg: Background (r, g, b, a)
        fg: Foreground (r, g, b, a)

    Returns:
        Output (r, g, b, a) clamped and truncated to ints
    """
    r1, g1, b1, a1 = (float(c) for c in bg)
    r2, g2, b2, a2 = (float(c) for c in fg)
    result = op(r1, g1, b1, a1, r2, g2, b2, a2)
    return tuple(int(to_uint8(c)) for c in result)
