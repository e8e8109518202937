"""Helpers for populating a scene, and a few small test scenes."""

from __future__ import annotations

import os

from .brdf import BRDF, DiffuseTexture
from .geometry import Primitive, Sphere, Triangle
from .lights import AmbientLight, PointLight
from .rgb import RGB
from .scene import Scene
from .vector import Point, Vec2

_BLACK = RGB(0.0, 0.0, 0.0)


def add_diffuse_material(scene: Scene, color: RGB) -> int:
    """Register a purely diffuse material whose ambient and diffuse colours are ``color``."""
    return scene.add_material(BRDF(ka=color, kd=color, ks=_BLACK, kt=_BLACK))


def add_material(
    scene: Scene, ka: RGB, kd: RGB, ks: RGB, kt: RGB, eta: float = 1.0
) -> int:
    """Register a material with the given colours and index of refraction."""
    return scene.add_material(BRDF(ka=ka, kd=kd, ks=ks, kt=kt, eta=eta))


def add_textured_material(
    scene: Scene,
    filename: str | os.PathLike[str],
    ka: RGB,
    kd: RGB,
    ks: RGB,
    kt: RGB,
    eta: float = 1.0,
) -> int:
    """Register a material whose diffuse colour is modulated by a PPM texture."""
    brdf = DiffuseTexture.from_file(filename, ka=ka, kd=kd, ks=ks, kt=kt, eta=eta)
    return scene.add_material(brdf)


def add_sphere(scene: Scene, center: Point, radius: float, material: int) -> Primitive:
    """Add a sphere using material index ``material``."""
    prim = Primitive(Sphere(center, radius), material)
    scene.add_primitive(prim)
    return prim


def add_triangle(scene: Scene, v1: Point, v2: Point, v3: Point, material: int) -> Primitive:
    """Add a two-sided triangle using material index ``material``."""
    prim = Primitive(Triangle(v1, v2, v3), material)
    scene.add_primitive(prim)
    return prim


def add_triangle_uv(
    scene: Scene,
    v1: Point,
    v2: Point,
    v3: Point,
    uv1: Vec2,
    uv2: Vec2,
    uv3: Vec2,
    material: int,
) -> Primitive:
    """Add a two-sided triangle with texture coordinates at its vertices."""
    tri = Triangle(v1, v2, v3)
    tri.set_uv(uv1, uv2, uv3)
    prim = Primitive(tri, material)
    scene.add_primitive(prim)
    return prim


def single_tri_scene(scene: Scene) -> None:
    """One white triangle lit by an ambient and a point light."""
    mat = add_diffuse_material(scene, RGB(0.99, 0.99, 0.99))
    add_triangle(scene, Point(-5.0, 5.0, 0.0), Point(0.0, -5.0, 0.0), Point(5.0, 5.0, 0.0), mat)
    scene.add_light(AmbientLight(RGB(0.1, 0.1, 0.1)))
    scene.add_light(PointLight(RGB(0.7, 0.7, 0.7), Point(0.0, 0.0, -10.0)))


def spheres_scene(scene: Scene, n_spheres: int = 1) -> None:
    """A single red sphere with ambient and point lighting.

    ``n_spheres`` is accepted for compatibility; one sphere is always built.
    """
    red = add_diffuse_material(scene, RGB(0.9, 0.1, 0.1))
    add_sphere(scene, Point(0.0, 0.0, 3.0), 0.8, red)
    scene.add_light(AmbientLight(RGB(0.5, 0.5, 0.5)))
    scene.add_light(PointLight(RGB(0.7, 0.7, 0.7), Point(0.0, 2.0, 0.0)))


def spheres_tri_scene(scene: Scene) -> None:
    """A red sphere in front of four green triangles."""
    red = add_diffuse_material(scene, RGB(0.9, 0.1, 0.1))
    green = add_diffuse_material(scene, RGB(0.1, 0.9, 0.1))
    add_sphere(scene, Point(0.0, 0.0, 3.0), 0.8, red)
    apex = Point(0.0, 0.0, 7.0)
    for b, c in (
        (Point(-2.0, 1.5, 4.0), Point(-0.5, 1.5, 5.0)),
        (Point(0.5, 1.5, 5.0), Point(2.0, 1.5, 4.0)),
        (Point(-0.5, -1.5, 5.0), Point(-2.0, -1.5, 4.0)),
        (Point(0.5, -1.5, 5.0), Point(2.0, -1.5, 4.0)),
    ):
        add_triangle(scene, apex, b, c, green)
    scene.add_light(AmbientLight(RGB(0.5, 0.5, 0.5)))
    scene.add_light(PointLight(RGB(0.7, 0.7, 0.7), Point(0.0, 2.0, 0.0)))


def defocus_tri_scene(scene: Scene) -> None:
    """A floor and five staggered triangles for depth-of-field tests."""
    red = add_diffuse_material(scene, RGB(0.9, 0.1, 0.1))
    green = add_diffuse_material(scene, RGB(0.1, 0.9, 0.1))
    brown = add_diffuse_material(scene, RGB(210.0 / 256.0, 105.0 / 256.0, 30.0 / 256.0))

    add_triangle(scene, Point(-20.0, -0.1, -20.0), Point(-20.0, -0.1, 20.0),
                 Point(20.0, -0.1, 20.0), brown)
    add_triangle(scene, Point(-20.0, -0.1, -20.0), Point(20.0, -0.1, -20.0),
                 Point(20.0, -0.1, 20.0), brown)

    x0, z0 = 0.0, 10.0
    for left, dz, mat in (
        (-0.5, 0.0, green),
        (0.5, 1.0, red),
        (1.5, 2.0, green),
        (-1.0, -1.0, red),
        (-1.5, -2.0, green),
    ):
        z = z0 + dz
        add_triangle(
            scene,
            Point(x0 + left, 1.0, z),
            Point(x0 + left + 1.0, 1.0, z),
            Point(x0 + left + 0.5, 0.1, z),
            mat,
        )

    scene.add_light(AmbientLight(RGB(0.5, 0.5, 0.5)))