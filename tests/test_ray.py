import pytest

from vitrace.ray import Intersection, Ray, RayType
from vitrace.rgb import RGB
from vitrace.vector import EPSILON, Point, Vector


def test_ray_defaults():
    r = Ray(Point(), Vector(0.0, 0.0, 1.0))
    assert r.rtype is RayType.PRIMARY
    assert r.face_id == -1
    assert r.propagating_eta == 1.0
    assert r.throughput == RGB(1.0, 1.0, 1.0)


def test_inverted_dir_reciprocal():
    d = Vector(0.5, -0.25, 4.0)
    inv = Ray(Point(), d).inverted_dir()
    assert inv.x * d.x == pytest.approx(1.0)
    assert inv.y * d.y == pytest.approx(1.0)
    assert inv.z * d.z == pytest.approx(1.0)


def test_inverted_dir_zero_component():
    inv = Ray(Point(), Vector(0.0, 1.0, 0.0)).inverted_dir()
    assert inv.x == 1.0e5
    assert inv.z == 1.0e5


def test_adjust_origin_along_normal():
    r = Ray(Point(1.0, 2.0, 3.0), Vector(0.0, 0.0, 1.0))
    r.adjust_origin(Vector(0.0, 0.0, 1.0))
    assert r.origin.z == pytest.approx(3.0 + EPSILON)
    assert r.origin.x == 1.0


def test_adjust_origin_against_normal():
    r = Ray(Point(1.0, 2.0, 3.0), Vector(0.0, 0.0, -1.0))
    r.adjust_origin(Vector(0.0, 0.0, 1.0))
    assert r.origin.z == pytest.approx(3.0 - EPSILON)


def test_intersection_defaults():
    isect = Intersection()
    assert not isect.is_light
    assert isect.f is None
    assert isect.le.is_zero()
    assert isect.face_id == -1


def test_intersection_instances_are_independent():
    a, b = Intersection(), Intersection()
    a.depth = 5.0
    a.pix_x = 7
    assert b.depth == 0.0
    assert b.pix_x == 0