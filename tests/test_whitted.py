import pytest

from vitrace.brdf import BRDF
from vitrace.geometry import Primitive, Triangle
from vitrace.lights import AreaLight, PointLight
from vitrace.ray import Intersection
from vitrace.rgb import RGB
from vitrace.scene import Scene
from vitrace.vector import Point, Vector
from vitrace.whitted import WhittedShader

BACKGROUND = RGB(0.1, 0.1, 0.8)
UP = Vector(0.0, 1.0, 0.0)


def _isect(brdf):
    return Intersection(p=Point(0.0, 0.0, 0.0), gn=UP, sn=UP, wo=UP, f=brdf, incident_eta=1.0)


def _area_light():
    return AreaLight(
        RGB(4.0, 4.0, 4.0),
        Point(-5.0, 5.0, -5.0),
        Point(5.0, 5.0, -5.0),
        Point(0.0, 5.0, 5.0),
        Vector(0.0, -1.0, 0.0),
    )


def test_miss_returns_background():
    assert WhittedShader(Scene(), BACKGROUND).shade(None, 0) == BACKGROUND


def test_light_hit_returns_emission():
    isect = Intersection(is_light=True, le=RGB(1.0, 2.0, 3.0))
    assert WhittedShader(Scene(), BACKGROUND).shade(isect, 0) == RGB(1.0, 2.0, 3.0)


def test_diffuse_point_light():
    scene = Scene()
    scene.add_light(PointLight(RGB(100.0, 100.0, 100.0), Point(0.0, 10.0, 0.0)))
    brdf = BRDF(kd=RGB(0.5, 0.5, 0.5))
    color = WhittedShader(scene, BACKGROUND).shade(_isect(brdf), 0)
    assert tuple(color) == pytest.approx((0.5, 0.5, 0.5))


def test_area_lights_do_not_light_directly():
    scene = Scene()
    scene.add_light(_area_light())
    brdf = BRDF(kd=RGB(0.5, 0.5, 0.5))
    assert WhittedShader(scene, BACKGROUND).shade(_isect(brdf), 0) == RGB()


def test_mirror_reflects_background():
    brdf = BRDF(ks=RGB(1.0, 1.0, 1.0))
    color = WhittedShader(Scene(), BACKGROUND).shade(_isect(brdf), 0)
    assert tuple(color) == pytest.approx(tuple(BACKGROUND))


def test_mirror_stops_at_max_depth():
    brdf = BRDF(ks=RGB(1.0, 1.0, 1.0))
    assert WhittedShader(Scene(), BACKGROUND).shade(_isect(brdf), 3) == RGB()


def test_transmission_passes_background_through():
    brdf = BRDF(kt=RGB(1.0, 1.0, 1.0), eta=1.0)
    color = WhittedShader(Scene(), BACKGROUND).shade(_isect(brdf), 0)
    assert tuple(color) == pytest.approx(tuple(BACKGROUND))


def test_mirror_sees_area_light():
    scene = Scene()
    floor_mat = scene.add_material(BRDF(kd=RGB(0.5, 0.5, 0.5)))
    floor = Triangle(Point(-5.0, -1.0, -5.0), Point(5.0, -1.0, -5.0), Point(0.0, -1.0, 5.0))
    scene.add_primitive(Primitive(floor, floor_mat))
    scene.add_light(_area_light())
    brdf = BRDF(ks=RGB(0.5, 0.5, 0.5))
    color = WhittedShader(scene, BACKGROUND).shade(_isect(brdf), 0)
    assert tuple(color) == pytest.approx((2.0, 2.0, 2.0))