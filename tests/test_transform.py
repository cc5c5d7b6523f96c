"""Tests for clone, crop and paste."""

import numpy as np
from PIL import Image

from raster import (
    Anchor,
    Point,
    anchor_point,
    clone,
    crop,
    crop_anchor,
    crop_center,
    paste,
    paste_center,
    rect,
)


def test_clone_equals_full_crop(gradient, four_workers):
    a = clone(gradient, four_workers)
    b = crop(gradient, gradient.bounds(), four_workers)
    assert a.rect == b.rect == rect(0, 0, 5, 4)
    np.testing.assert_array_equal(a.to_array(), gradient.to_array())
    np.testing.assert_array_equal(a.to_array(), b.to_array())


def test_clone_is_independent(gradient):
    c = clone(gradient)
    c.set_pixel(0, 0, (1, 1, 1, 1))
    assert gradient.pixel_at(0, 0) == (0, 0, 0, 255)


def test_clone_pil_image():
    img = Image.new("RGB", (3, 2), (10, 20, 30))
    out = clone(img)
    assert out.rect == rect(0, 0, 3, 2)
    assert out.pixel_at(2, 1) == (10, 20, 30, 255)


def test_crop(gradient):
    out = crop(gradient, rect(1, 2, 4, 4))
    assert out.rect == rect(0, 0, 3, 2)
    assert out.pixel_at(0, 0) == gradient.pixel_at(1, 2)
    assert out.pixel_at(2, 1) == gradient.pixel_at(3, 3)


def test_crop_clips_to_bounds(gradient):
    out = crop(gradient, rect(-3, -3, 2, 1))
    assert out.rect == rect(0, 0, 2, 1)
    assert out.pixel_at(1, 0) == gradient.pixel_at(1, 0)


def test_crop_outside_is_empty(gradient):
    out = crop(gradient, rect(10, 10, 20, 20))
    assert out.empty()
    assert out.stride == 0


def test_anchor_point(gradient):
    assert anchor_point(gradient, Anchor.CENTER) == Point(2, 2)
    assert anchor_point(gradient, Anchor.BOTTOM_RIGHT) == Point(5, 4)
    assert anchor_point(gradient, Anchor.TOP) == Point(2, 0)


def test_crop_anchor(gradient):
    out = crop_anchor(gradient, 2, 2, Anchor.BOTTOM_RIGHT)
    assert out.rect == rect(0, 0, 2, 2)
    assert out.pixel_at(0, 0) == gradient.pixel_at(3, 2)

    out = crop_anchor(gradient, 3, 1, Anchor.LEFT)
    assert out.pixel_at(0, 0) == gradient.pixel_at(0, 1)


def test_crop_center(gradient):
    out = crop_center(gradient, 3, 2)
    assert out.rect == rect(0, 0, 3, 2)
    assert out.pixel_at(0, 0) == gradient.pixel_at(1, 1)


def test_crop_center_larger_than_image(gradient):
    out = crop_center(gradient, 50, 50)
    np.testing.assert_array_equal(out.to_array(), gradient.to_array())


def test_paste_overwrites(solid, four_workers):
    bg = solid(4, 4, (0, 0, 255, 255))
    fg = solid(2, 2, (255, 0, 0, 10))
    out = paste(bg, fg, Point(1, 1), four_workers)
    arr = out.to_array()
    assert arr[1:3, 1:3].reshape(-1, 4).tolist() == [[255, 0, 0, 10]] * 4
    assert arr[0].reshape(-1, 4).tolist() == [[0, 0, 255, 255]] * 4
    # background left untouched
    assert bg.pixel_at(1, 1) == (0, 0, 255, 255)


def test_paste_partially_outside(solid, gradient):
    bg = solid(3, 3, (0, 0, 0, 255))
    out = paste(bg, gradient, Point(-3, 1))
    assert out.pixel_at(0, 1) == gradient.pixel_at(3, 0)
    assert out.pixel_at(1, 2) == gradient.pixel_at(4, 1)
    assert out.pixel_at(2, 1) == (0, 0, 0, 255)


def test_paste_outside_keeps_background(gradient, solid):
    fg = solid(2, 2, (255, 255, 255, 255))
    out = paste(gradient, fg, Point(5, 0))
    np.testing.assert_array_equal(out.to_array(), gradient.to_array())


def test_paste_leaves_rest_of_background(gradient, solid):
    out = paste(gradient, solid(2, 2, (1, 1, 1, 1)), Point(0, 0))
    np.testing.assert_array_equal(crop(out, rect(2, 0, 5, 4)).to_array(),
                                  crop(gradient, rect(2, 0, 5, 4)).to_array())
    np.testing.assert_array_equal(crop(out, rect(0, 2, 2, 4)).to_array(),
                                  crop(gradient, rect(0, 2, 2, 4)).to_array())


def test_paste_center(solid):
    bg = solid(5, 5, (0, 0, 0, 255))
    out = paste_center(bg, solid(1, 1, (9, 9, 9, 9)))
    assert out.pixel_at(2, 2) == (9, 9, 9, 9)
    assert int(out.to_array()[..., 3].sum()) == 24 * 255 + 9


def test_paste_numpy_rgb(solid):
    bg = solid(2, 1, (0, 0, 0, 0))
    fg = np.array([[[7, 8, 9]]], dtype=np.uint8)
    out = paste(bg, fg, (1, 0))
    assert out.pixel_at(1, 0) == (7, 8, 9, 255)
