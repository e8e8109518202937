import math
import random

import pytest

from vitrace.brdf import BRDF
from vitrace.lights import AmbientLight
from vitrace.pathtracing import CONTINUE_PROB, PathTracingShader
from vitrace.ray import Intersection, RayType
from vitrace.rgb import RGB
from vitrace.scene import Scene
from vitrace.vector import Point, Vector

BG = RGB(0.1, 0.2, 0.3)


def surface(brdf, r_type=RayType.PRIMARY):
    n = Vector(0.0, 0.0, -1.0)
    return Intersection(
        p=Point(0.0, 0.0, 0.0), gn=n, sn=n, wo=n, depth=1.0, f=brdf, r_type=r_type
    )


def shader_for(scene, background=BG, seed=3):
    return PathTracingShader(scene, background, rng=random.Random(seed))


def test_miss_returns_background():
    assert shader_for(Scene()).shade(None, 0) == BG


def test_light_hit_returns_emission():
    le = RGB(7.0, 8.0, 9.0)
    assert shader_for(Scene()).shade(Intersection(is_light=True, le=le), 0) == le


def test_black_material_is_black_even_with_ambient_light():
    scene = Scene()
    scene.add_light(AmbientLight(RGB(1.0, 1.0, 1.0)))
    brdf = BRDF(ka=RGB(0.5, 0.5, 0.5))
    assert shader_for(scene).shade(surface(brdf), 0) == RGB()


def test_diffuse_with_black_background_gets_only_direct_light():
    scene = Scene()
    amb = RGB(0.2, 0.4, 0.6)
    scene.add_light(AmbientLight(amb))
    brdf = BRDF(ka=RGB(0.5, 0.5, 0.5), kd=RGB(0.5, 0.5, 0.5))
    result = shader_for(scene, background=RGB()).shade(surface(brdf), 0)
    assert tuple(result) == pytest.approx(tuple(brdf.ka * amb))


def test_cosine_sampled_bounce_into_constant_background():
    brdf = BRDF(kd=RGB(0.5, 0.25, 0.75))
    for seed in range(5):
        result = shader_for(Scene(), seed=seed).shade(surface(brdf), 0)
        assert tuple(result) == pytest.approx(tuple(brdf.kd * BG * math.pi))


def test_diffuse_ray_does_not_bounce_diffusely_again():
    brdf = BRDF(kd=RGB(0.5, 0.5, 0.5))
    result = shader_for(Scene()).shade(surface(brdf, RayType.DIFF_REFL), 0)
    assert result == RGB()


def test_mirror_at_first_bounce():
    brdf = BRDF(ks=RGB(0.9, 0.8, 0.7))
    result = shader_for(Scene()).shade(surface(brdf), 0)
    assert tuple(result) == pytest.approx(tuple(brdf.ks * BG))


def test_transmission_at_first_bounce():
    brdf = BRDF(kt=RGB(0.9, 0.8, 0.7), eta=1.5)
    result = shader_for(Scene()).shade(surface(brdf), 0)
    assert tuple(result) == pytest.approx(tuple(brdf.kt * BG))


def test_russian_roulette_kills_or_reweights():
    brdf = BRDF(ks=RGB(0.9, 0.8, 0.7))
    shader = shader_for(Scene(), seed=11)
    boosted = tuple(brdf.ks * BG / CONTINUE_PROB)
    zeros = survivors = 0
    for _ in range(300):
        result = shader.shade(surface(brdf), 1)
        if result == RGB():
            zeros += 1
        else:
            assert tuple(result) == pytest.approx(boosted)
            survivors += 1
    assert zeros > 0
    assert survivors > 0
    assert zeros > survivors