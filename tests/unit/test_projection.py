"""Tests for the 4D -> 3D -> 2D projection."""
import math

import pytest

from geometry.hypercube import VERTEX_RADIUS, VERTICES
from geometry.projection import (
    check_focal_margin, max_projected_radius, project_to_2d, project_to_3d, to_screen
)
from geometry.rotation import rotate_vertex


def test_project_to_3d_with_zero_w_is_unscaled():
    assert project_to_3d((1.5, -2.0, 0.5, 0.0), 4.0) == pytest.approx((1.5, -2.0, 0.5))


def test_project_to_3d_scale():
    # scale = 4 / (4 - 2) = 2
    assert project_to_3d((1.0, 1.0, -1.0, 2.0), 4.0) == pytest.approx((2.0, 2.0, -2.0))


def test_project_to_3d_grows_as_w_approaches_focal():
    xs = [project_to_3d((1.0, 0.0, 0.0, w), 4.0)[0] for w in (0.0, 1.0, 2.0, 3.0, 3.9, 3.99, 3.999)]
    assert all(a < b for a, b in zip(xs, xs[1:]))
    assert xs[-1] > 1000


def test_project_to_2d_with_zero_z_is_unscaled():
    assert project_to_2d((0.7, -0.3, 0.0), 4.0) == pytest.approx((0.7, -0.3, 0.0))


def test_project_to_2d_keeps_unscaled_depth():
    assert project_to_2d((1.0, 1.0, 2.0), 4.0) == pytest.approx((2.0, 2.0, 2.0))
    assert project_to_2d((1.0, 1.0, -4.0), 4.0) == pytest.approx((0.5, 0.5, -4.0))


def test_project_to_2d_grows_as_z_approaches_focal():
    ys = [project_to_2d((0.0, 1.0, z), 4.0)[1] for z in (-1.0, 0.0, 2.0, 3.5, 3.99)]
    assert all(a < b for a, b in zip(ys, ys[1:]))


def test_to_screen_centers_origin():
    assert to_screen(0.0, 0.0, 400, 300, 0.22) == pytest.approx((200.0, 150.0))


def test_to_screen_inverts_y():
    # scale2D = 0.22 * min(400, 300) = 66
    assert to_screen(1.0, 1.0, 400, 300, 0.22) == pytest.approx((266.0, 84.0))


def test_max_projected_radius():
    assert max_projected_radius(2.0, 4.0) == pytest.approx(8.0 / math.sqrt(12.0))
    assert max_projected_radius(2.0, 2.0) == math.inf


@pytest.mark.parametrize("phase", [i * 0.37 for i in range(60)])
def test_rotated_geometry_stays_within_bounds(phase):
    limit = max_projected_radius(VERTEX_RADIUS, 4.0)
    for vertex in VERTICES:
        v4 = rotate_vertex(vertex, phase)
        assert abs(v4[3]) <= VERTEX_RADIUS + 1e-9
        v3 = project_to_3d(v4, 4.0)
        assert math.sqrt(sum(c * c for c in v3)) <= limit + 1e-9


def test_default_focal_distances_pass_margin_check():
    check_focal_margin(4.0, 4.0, VERTEX_RADIUS, 0.5)


def test_focal_w_too_small_raises():
    with pytest.raises(ValueError, match="focal_w"):
        check_focal_margin(2.2, 4.0, VERTEX_RADIUS, 0.5)


def test_focal_z_too_small_raises():
    with pytest.raises(ValueError, match="focal_z"):
        check_focal_margin(4.0, 2.5, VERTEX_RADIUS, 0.5)


def test_negative_margin_raises():
    with pytest.raises(ValueError, match="focal_margin"):
        check_focal_margin(4.0, 4.0, VERTEX_RADIUS, -1.0)
