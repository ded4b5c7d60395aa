import math

import numpy as np
import pytest

from wireview.camera import Camera, Projection
from wireview.mapfile import HeightMap
from wireview.projection import (
    Point,
    isometric,
    project,
    rotate_x,
    rotate_y,
    rotate_z,
)


def _map(heights):
    arr = np.array(heights, dtype=np.int64)
    return HeightMap(heights=arr, colors=np.zeros_like(arr), name="t.fdf")


@pytest.mark.parametrize("fn", [rotate_x, rotate_y, rotate_z])
def test_zero_rotation_is_identity(fn):
    assert fn(3.0, -7.0, 0.0) == pytest.approx((3.0, -7.0))


@pytest.mark.parametrize("fn", [rotate_x, rotate_y, rotate_z])
def test_rotation_preserves_length(fn):
    a, b = fn(3.0, 4.0, 1.234)
    assert math.hypot(a, b) == pytest.approx(5.0)


@pytest.mark.parametrize("fn", [rotate_x, rotate_y, rotate_z])
def test_rotation_round_trip(fn):
    a, b = fn(2.5, -1.5, 0.7)
    assert fn(a, b, -0.7) == pytest.approx((2.5, -1.5))


def test_rotate_z_quarter_turn():
    assert rotate_z(1.0, 0.0, math.pi / 2) == pytest.approx((0.0, 1.0), abs=1e-12)


def test_isometric_origin_and_diagonal():
    assert isometric(0, 0, 0) == pytest.approx((0.0, 0.0))
    x, _ = isometric(4, 4, 9)
    assert x == pytest.approx(0.0)


def test_isometric_height_raises_point():
    _, low = isometric(1, 1, 0)
    _, high = isometric(1, 1, 10)
    assert high < low


def test_top_projection_center_lands_on_offset():
    cam = Camera(zoom=10)
    cam.set_projection(Projection.TOP)
    cam.alpha = cam.beta = cam.gamma = 0.0
    hm = _map([[0, 0, 0], [0, 0, 0]])
    # row 1 of 2 and column 1.5 of 3 are the centre; use the row centre only.
    point = project(hm, cam, 0, 1, 0)
    assert point.x == pytest.approx(cam.offset_x)
    assert isinstance(point, Point)


def test_top_projection_flips_y():
    cam = Camera(zoom=10)
    cam.set_projection(Projection.TOP)
    cam.alpha = cam.beta = cam.gamma = 0.0
    hm = _map([[0, 0, 0, 0]])
    first = project(hm, cam, 0, 0, 0)
    last = project(hm, cam, 0, 0, 3)
    assert first.y > last.y


def test_side_projection_flat_map_on_offset_line():
    cam = Camera(zoom=5)
    cam.set_projection(Projection.SIDE)
    cam.alpha = cam.beta = cam.gamma = 0.0
    hm = _map([[7, 7], [7, 7]])
    for x in range(2):
        for y in range(2):
            assert project(hm, cam, 7, x, y).y == pytest.approx(cam.offset_y)


def test_depth_follows_height_above_ground():
    cam = Camera(zoom=4)
    cam.set_projection(Projection.SIDE)
    cam.alpha = cam.beta = cam.gamma = 0.0
    hm = _map([[0, 10]])
    flat = project(hm, cam, 0, 0, 0)
    raised = project(hm, cam, 0, 0, 1)
    assert flat.z == 0
    assert raised.z > 0
    assert raised.y < flat.y


def test_offset_shifts_projection():
    cam = Camera(zoom=3)
    hm = _map([[1, 2], [3, 4]])
    before = project(hm, cam, 0, 1, 1)
    cam.translate(10, -20)
    after = project(hm, cam, 0, 1, 1)
    assert after.x - before.x == pytest.approx(10)
    assert after.y - before.y == pytest.approx(-20)