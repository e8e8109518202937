import io
import math
import random

import pytest

from vitrace.brdf import BRDF
from vitrace.camera import Perspective
from vitrace.geometry import Primitive, Sphere
from vitrace.image import Image
from vitrace.lights import AmbientLight
from vitrace.renderer import DummyRenderer, Renderer, StandardRenderer
from vitrace.rgb import RGB
from vitrace.scene import Scene
from vitrace.shader import AmbientShader, DummyShader
from vitrace.vector import Point, Vector

BG = RGB(0.1, 0.2, 0.3)


def camera(width, height):
    return Perspective(
        Point(0.0, 0.0, 0.0),
        Point(0.0, 0.0, 1.0),
        Vector(0.0, 1.0, 0.0),
        width,
        height,
        math.radians(60.0),
    )


def test_base_renderer_leaves_image_black():
    image = Image(3, 2)
    scene = Scene()
    Renderer(camera(3, 2), scene, image, AmbientShader(scene, BG)).render()
    assert image.pixels == [RGB()] * 6


def test_dummy_renderer_colours_by_position():
    width, height = 4, 3
    scene = Scene()
    image = Image(width, height)
    DummyRenderer(camera(width, height), scene, image, DummyShader(scene, width, height)).render()
    for y in range(height):
        for x in range(width):
            assert image.get(x, y) == RGB(x / width, y / height, 0.0)


def test_dummy_renderer_progress_spinner():
    scene = Scene()
    out = io.StringIO()
    image = Image(2, 3)
    DummyRenderer(camera(2, 3), scene, image, DummyShader(scene, 2, 3), progress=out).render()
    assert out.getvalue() == "\\\r/\r\\\r"


def test_standard_renderer_empty_scene_is_background():
    scene = Scene()
    image = Image(3, 3)
    StandardRenderer(camera(3, 3), scene, image, AmbientShader(scene, BG), spp=4).render()
    for pixel in image.pixels:
        assert tuple(pixel) == pytest.approx(tuple(BG))


def test_standard_renderer_jittered_empty_scene_is_background():
    scene = Scene()
    image = Image(2, 2)
    StandardRenderer(
        camera(2, 2), scene, image, AmbientShader(scene, BG), spp=3, jitter=True,
        rng=random.Random(5),
    ).render()
    for pixel in image.pixels:
        assert tuple(pixel) == pytest.approx(tuple(BG))


def test_standard_renderer_reports_rows():
    scene = Scene()
    out = io.StringIO()
    StandardRenderer(
        camera(2, 2), scene, Image(2, 2), AmbientShader(scene, BG), spp=1, progress=out
    ).render()
    assert out.getvalue() == "0\r1\r"


def test_standard_renderer_sees_sphere_in_centre_only():
    scene = Scene()
    amb = RGB(0.2, 0.2, 0.2)
    scene.add_light(AmbientLight(amb))
    material = BRDF(ka=RGB(0.5, 0.5, 0.5), kd=RGB(0.5, 0.5, 0.5))
    index = scene.add_material(material)
    scene.add_primitive(Primitive(Sphere(Point(0.0, 0.0, 3.0), 0.8), index))
    image = Image(9, 9)
    StandardRenderer(camera(9, 9), scene, image, AmbientShader(scene, BG), spp=1).render()
    assert tuple(image.get(4, 4)) == pytest.approx(tuple(material.ka * amb))
    assert tuple(image.get(0, 0)) == pytest.approx(tuple(BG))
    assert tuple(image.get(8, 8)) == pytest.approx(tuple(BG))


def test_standard_renderer_rejects_zero_samples():
    scene = Scene()
    with pytest.raises(ValueError):
        StandardRenderer(camera(2, 2), scene, Image(2, 2), AmbientShader(scene, BG), spp=0)