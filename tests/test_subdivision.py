"""Tests for worklist rectangle subdivision."""

import pytest

from growth.errors import ConfigurationError
from growth.shapes import Bounds
from growth.subdivision import split_rectangle, subdivide
from growth.vector import Point


def test_horizontal_split_side_by_side():
    left, right = split_rectangle(Bounds(0, 0, 100, 50), Point(30, 20), 'horizontal')
    assert (left.x, left.width, left.height) == (0, 30, 50)
    assert (right.x, right.width) == (30, 70)


def test_vertical_split_with_padding():
    top, bottom = split_rectangle(Bounds(0, 0, 100, 50), Point(30, 20), 'vertical', padding=2)
    assert (top.y, top.height) == (0, 18)
    assert (bottom.y, bottom.height) == (22, 28)


def test_unknown_direction():
    with pytest.raises(ConfigurationError):
        split_rectangle(Bounds(0, 0, 1, 1), Point(0.5, 0.5), 'diagonal')


def test_full_split_doubles_each_round(rng):
    rects = subdivide(Bounds(0, 0, 1000, 1000), rng, rounds=4)
    assert len(rects) == 16
    assert sum(r.area for r in rects) == pytest.approx(1000 * 1000)


def test_no_rounds_returns_root(rng):
    root = Bounds(0, 0, 10, 10, '#ffffff')
    assert subdivide(root, rng, rounds=0) == [root]


def test_min_area_stops_splitting(rng):
    rects = subdivide(Bounds(0, 0, 100, 100), rng, rounds=12, min_area=2000)
    assert all(r.area > 0 for r in rects)
    assert len(rects) < 2 ** 12


def test_split_points_stay_inside_inset(rng):
    root = Bounds(0, 0, 100, 100)
    rects = subdivide(root, rng, rounds=1, inset=0.5)
    cut = rects[0].width if rects[0].height == 100 else rects[0].height
    assert 25 <= cut <= 75


def test_deep_subdivision_does_not_recurse(rng):
    rects = subdivide(Bounds(0, 0, 1e6, 1e6), rng, rounds=2000, split_chance=0.002)
    assert len(rects) >= 1


def test_parts_get_picked_colors(rng):
    rects = subdivide(Bounds(0, 0, 100, 100), rng, rounds=3,
                      color_picker=lambda r: '#ff0000')
    assert {r.color for r in rects} == {'#ff0000'}


def test_padding_trims_area(rng):
    rects = subdivide(Bounds(0, 0, 100, 100), rng, rounds=3, padding=2)
    assert sum(r.area for r in rects) < 100 * 100


def test_negative_rounds(rng):
    with pytest.raises(ConfigurationError):
        subdivide(Bounds(0, 0, 10, 10), rng, rounds=-1)
