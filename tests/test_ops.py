"""Tests for blend operators."""

import numpy as np
import pytest

from raster import (
    blend,
    get_operator,
    op_blend,
    op_plus,
    op_max,
    op_lighten,
    op_replace,
    op_replace_alpha,
    op_min_alpha,
    op_max_alpha,
    op_ignore,
)
from raster.composite.ops import apply_op, OPERATORS


BG = (1, 2, 3, 4)
FG = (5, 6, 7, 8)


def test_blend_opaque_foreground_wins():
    assert blend(op_blend(1.0), (0, 0, 0, 255), (200, 100, 50, 255)) == (200, 100, 50, 255)


def test_blend_half_opacity_truncates():
    # 127.5 truncates to 127, not 128
    assert blend(op_blend(0.5), (0, 0, 0, 255), (255, 255, 255, 255)) == (127, 127, 127, 255)


def test_blend_over_transparent_background():
    assert blend(op_blend(1.0), (9, 9, 9, 0), (10, 20, 30, 128)) == (10, 20, 30, 128)


def test_blend_both_transparent_keeps_background():
    assert blend(op_blend(1.0), (10, 20, 30, 0), (1, 2, 3, 0)) == (10, 20, 30, 0)


def test_blend_zero_opacity_is_identity():
    assert blend(op_blend(0.0), (10, 20, 30, 77), (255, 255, 255, 255)) == (10, 20, 30, 77)


def test_plus_clamps():
    assert blend(op_plus, (200, 10, 0, 255), (100, 20, 5, 100)) == (255, 30, 5, 255)


def test_plus_adds_rgb_of_transparent_foreground():
    assert blend(op_plus, (10, 20, 30, 40), (5, 5, 5, 0)) == (15, 25, 35, 40)
    assert blend(op_plus, (10, 20, 30, 40), (0, 0, 0, 0)) == (10, 20, 30, 40)


def test_max_is_per_channel_and_ignores_alpha():
    assert blend(op_max, (10, 200, 30, 40), (50, 50, 50, 0)) == (50, 200, 50, 40)


def test_lighten_picks_whole_pixel():
    bg = (100, 100, 100, 255)
    assert blend(op_lighten, bg, (0, 0, 250, 255)) == (0, 0, 250, 255)
    assert blend(op_lighten, bg, (0, 0, 150, 255)) == (100, 100, 100, 255)
    # equal lightness goes to the foreground
    assert blend(op_lighten, bg, (0, 0, 200, 255)) == (0, 0, 200, 255)


def test_replace():
    assert blend(op_replace, BG, FG) == FG
    assert blend(op_replace, BG, (5, 6, 7, 0)) == (5, 6, 7, 0)


def test_alpha_operators():
    assert blend(op_replace_alpha, BG, FG) == (1, 2, 3, 8)
    assert blend(op_min_alpha, BG, FG) == (1, 2, 3, 4)
    assert blend(op_max_alpha, BG, FG) == (255, 255, 255, 8)
    assert blend(op_ignore, BG, FG) == BG


def test_get_operator():
    assert get_operator("plus") is op_plus
    assert set(OPERATORS) >= {"plus", "max", "lighten", "replace", "ignore"}
    with pytest.raises(ValueError, match="unknown blend operator"):
        get_operator("multiply")


@pytest.mark.parametrize("op", [op_blend(0.7), op_plus, op_max, op_lighten, op_max_alpha])
def test_scanline_matches_single_pixel(op):
    rng = np.random.default_rng(7)
    bg = rng.integers(0, 256, 32 * 4, dtype=np.uint8)
    fg = rng.integers(0, 256, 32 * 4, dtype=np.uint8)
    out = np.zeros_like(bg)
    apply_op(op, bg, fg, out)

    expected = [blend(op, bg[i:i + 4], fg[i:i + 4]) for i in range(0, bg.size, 4)]
    assert out.reshape(-1, 4).tolist() == [list(p) for p in expected]


def test_apply_op_in_place():
    row = np.array([0, 0, 0, 255, 9, 9, 9, 255], dtype=np.uint8)
    fg = np.array([255, 0, 0, 255, 0, 0, 0, 0], dtype=np.uint8)
    apply_op(op_blend(1.0), row, fg, row)
    assert row.tolist() == [255, 0, 0, 255, 9, 9, 9, 255]
