import random

import pytest

from vitrace.brdf import BRDF
from vitrace.distributed import DistributedShader
from vitrace.geometry import Primitive, Triangle
from vitrace.lights import AmbientLight
from vitrace.ray import Intersection
from vitrace.rgb import RGB
from vitrace.scene import Scene
from vitrace.vector import Point, Vector

BG = RGB(0.1, 0.2, 0.3)


def surface(brdf, eta=1.0):
    n = Vector(0.0, 0.0, -1.0)
    return Intersection(
        p=Point(0.0, 0.0, 0.0), gn=n, sn=n, wo=n, depth=1.0, f=brdf, incident_eta=eta
    )


def shader_for(scene):
    return DistributedShader(scene, BG, rng=random.Random(7))


def test_miss_returns_background():
    assert shader_for(Scene()).shade(None, 0) == BG


def test_light_hit_returns_emission():
    le = RGB(3.0, 4.0, 5.0)
    isect = Intersection(is_light=True, le=le)
    assert shader_for(Scene()).shade(isect, 0) == le


def test_ambient_only_surface():
    scene = Scene()
    amb = RGB(0.2, 0.4, 0.6)
    scene.add_light(AmbientLight(amb))
    brdf = BRDF(ka=RGB(0.5, 0.5, 0.5), kd=RGB(0.5, 0.5, 0.5))
    result = shader_for(scene).shade(surface(brdf), 0)
    assert tuple(result) == pytest.approx(tuple(brdf.ka * amb))


def test_mirror_reflecting_into_nothing_gives_background():
    brdf = BRDF(ks=RGB(0.9, 0.8, 0.7))
    result = shader_for(Scene()).shade(surface(brdf), 0)
    assert tuple(result) == pytest.approx(tuple(brdf.ks * BG))


def test_mirror_beyond_max_depth_is_black():
    brdf = BRDF(ks=RGB(0.9, 0.8, 0.7))
    assert shader_for(Scene()).shade(surface(brdf), 3) == RGB()


def test_transmission_with_matching_index_passes_straight_through():
    brdf = BRDF(kt=RGB(0.5, 0.6, 0.7), eta=1.0)
    result = shader_for(Scene()).shade(surface(brdf), 0)
    assert tuple(result) == pytest.approx(tuple(brdf.kt * BG))


def test_mirror_sees_ambient_lit_wall():
    scene = Scene()
    amb = RGB(0.2, 0.2, 0.2)
    scene.add_light(AmbientLight(amb))
    wall = BRDF(ka=RGB(0.5, 0.25, 1.0))
    wall_index = scene.add_material(wall)
    tri = Triangle(Point(-1.0, -1.0, -5.0), Point(1.0, -1.0, -5.0), Point(0.0, 1.0, -5.0))
    scene.add_primitive(Primitive(tri, wall_index))
    mirror = BRDF(ks=RGB(0.9, 0.9, 0.9))
    result = shader_for(scene).shade(surface(mirror), 0)
    assert tuple(result) == pytest.approx(tuple(mirror.ks * (wall.ka * amb)))