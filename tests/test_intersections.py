import numpy as np
import pytest
from sphere_renders.intersections import intersect_sphere
from sphere_renders.rays import Ray
from sphere_renders.rendering import Surface, Light


def test_head_on_hit_returns_near_root(axis_ray):
    """Ray from (-5,0,0) along +X hits a unit sphere at the origin at t = 4 (entry point)."""
    sphere = Surface((0.0, 0.0, 0.0), 1.0, (1.0, 1.0, 1.0))
    assert sphere.intersect(axis_ray) == pytest.approx(4.0)
    np.testing.assert_allclose(axis_ray.point_at(sphere.intersect(axis_ray)), [-1.0, 0.0, 0.0])


def test_off_axis_hit():
    """Perpendicular offset 0.6 from a unit sphere: v = 5, d = 0.8, t = 4.2."""
    sphere = Surface((5.0, 0.6, 0.0), 1.0)
    ray = Ray((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
    assert sphere.intersect(ray) == pytest.approx(4.2)


def test_tangent_ray_hits_at_projection():
    """Perpendicular distance equal to the radius still counts as a hit, at t = v."""
    t = intersect_sphere(np.zeros(3), np.array([1.0, 0.0, 0.0]), np.array([5.0, 1.0, 0.0]), 1.0)
    assert t == pytest.approx(5.0)


def test_miss_outside_radius():
    """Perpendicular distance greater than the radius is a miss."""
    sphere = Surface((5.0, 1.5, 0.0), 1.0)
    ray = Ray((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
    assert sphere.intersect(ray) is None


def test_sphere_behind_origin_is_missed(standard_rays):
    sphere = Surface((0.0, 0.0, 0.0), 1.0)
    assert sphere.intersect(standard_rays['backward']) is None


def test_origin_at_center_returns_negative_radius():
    """
    With the origin at the center, v = 0 passes the v < 0 check and the
    result is v - min(d, v + d) = -radius for every direction.
    """
    sphere = Surface((1.0, 2.0, 3.0), 2.5)
    for direction in [(1.0, 0.0, 0.0), (0.0, -1.0, 0.0), (1.0, 1.0, 1.0)]:
        ray = Ray((1.0, 2.0, 3.0), direction)
        assert sphere.intersect(ray) == pytest.approx(-2.5)


def test_origin_inside_past_center_is_missed():
    """An origin inside the sphere but past its center along the ray is rejected (v < 0)."""
    sphere = Surface((0.0, 0.0, 0.0), 2.0)
    ray = Ray((0.5, 0.0, 0.0), (1.0, 0.0, 0.0))
    assert sphere.intersect(ray) is None


def test_origin_inside_before_center_returns_negative_near_root():
    """Origin inside and before the center: v = 0.5, d2 = 0, d = 2, t = 0.5 - 2 = -1.5."""
    sphere = Surface((0.0, 0.0, 0.0), 2.0)
    ray = Ray((-0.5, 0.0, 0.0), (1.0, 0.0, 0.0))
    assert sphere.intersect(ray) == pytest.approx(-1.5)


def test_light_uses_same_intersection(axis_ray):
    light = Light((0.0, 0.0, 0.0), 1.0, (1.0, 1.0, 1.0))
    assert light.intersect(axis_ray) == pytest.approx(4.0)


if __name__ == "__main__":
    pytest.main([__file__])
