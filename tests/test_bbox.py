import pytest

from vitrace.bbox import BoundingBox, machine_gamma
from vitrace.ray import Ray
from vitrace.vector import Point, Vector


def unit_box():
    box = BoundingBox(Point(-1.0, -1.0, -1.0), Point(-1.0, -1.0, -1.0))
    box.update(Point(1.0, 1.0, 1.0))
    return box


def test_machine_gamma_one_is_about_half_float_epsilon():
    assert machine_gamma(1) == pytest.approx(2.0 ** -24, rel=1e-6)


def test_machine_gamma_properties():
    assert machine_gamma(0) == 0.0
    assert 0.0 < machine_gamma(3) < 1e-6
    assert machine_gamma(3) > machine_gamma(1)


def test_update_grows_box():
    box = unit_box()
    assert box.min == Point(-1.0, -1.0, -1.0)
    assert box.max == Point(1.0, 1.0, 1.0)
    box.update(Point(0.0, 5.0, -4.0))
    assert box.max.y == 5.0
    assert box.min.z == -4.0
    assert box.max.x == 1.0


def test_update_inside_point_keeps_box():
    box = unit_box()
    box.update(Point(0.0, 0.0, 0.0))
    assert box.min == Point(-1.0, -1.0, -1.0)
    assert box.max == Point(1.0, 1.0, 1.0)


def test_ray_hits_box():
    ray = Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0))
    assert unit_box().intersect(ray)


def test_ray_pointing_away_misses():
    ray = Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, -1.0))
    assert not unit_box().intersect(ray)


def test_offset_ray_misses():
    ray = Ray(Point(3.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0))
    assert not unit_box().intersect(ray)


def test_origin_inside_hits():
    ray = Ray(Point(0.0, 0.0, 0.0), Vector(0.3, -0.4, 0.5).normalized())
    assert unit_box().intersect(ray)


@pytest.mark.parametrize("direction", [Vector(1.0, 1.0, 1.0), Vector(-1.0, 0.5, 0.2)])
def test_diagonal_rays_from_centre(direction):
    ray = Ray(Point(0.0, 0.0, 0.0), direction.normalized())
    assert unit_box().intersect(ray)