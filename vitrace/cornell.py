"""Cornell-box style scenes lit by triangular area lights."""

from __future__ import annotations

from .lights import AreaLight
from .rgb import RGB
from .scene import Scene
from .scenes import add_material, add_sphere, add_textured_material, add_triangle, add_triangle_uv
from .vector import Point, Vec2, Vector

_BLACK = RGB(0.0, 0.0, 0.0)
_DOWN = Vector(0.0, -1.0, 0.0)

BACKWALL_TEXTURE = "Dog.ppm"
BLOCK_TEXTURE = "UMinho.ppm"


def _quad(scene: Scene, a: Point, b: Point, c: Point, d: Point, material: int) -> None:
    """Two triangles (a, b, c) and (a, d, c) sharing the diagonal a-c."""
    add_triangle(scene, a, b, c, material)
    add_triangle(scene, a, d, c, material)


def _light_quad(
    scene: Scene, power: RGB, a: Point, b: Point, c: Point, d: Point, normal: Vector
) -> None:
    """Two area lights (a, b, c) and (a, d, c) covering a quadrilateral."""
    scene.add_light(AreaLight(power, a, b, c, normal))
    scene.add_light(AreaLight(power, a, d, c, normal))


def _short_block(scene: Scene, top_material: int, material: int) -> None:
    top = ((130.0, 65.0), (82.0, 225.0), (240.0, 272.0), (290.0, 114.0))
    (ax, az), (bx, bz), (cx, cz), (dx, dz) = top
    add_triangle_uv(
        scene, Point(ax, 165.0, az), Point(bx, 165.0, bz), Point(cx, 165.0, cz),
        Vec2(0.0, 0.0), Vec2(0.0, 1.0), Vec2(1.0, 1.0), top_material,
    )
    add_triangle_uv(
        scene, Point(ax, 165.0, az), Point(dx, 165.0, dz), Point(cx, 165.0, cz),
        Vec2(0.0, 0.0), Vec2(1.0, 0.0), Vec2(1.0, 1.0), top_material,
    )
    # bottom
    _quad(scene, Point(ax, 0.01, az), Point(bx, 0.01, bz), Point(cx, 0.01, cz),
          Point(dx, 0.01, dz), material)
    # left, back, right, front
    _quad(scene, Point(290.0, 0.0, 114.0), Point(290.0, 165.0, 114.0),
          Point(240.0, 165.0, 272.0), Point(240.0, 0.0, 272.0), material)
    _quad(scene, Point(240.0, 0.0, 272.0), Point(240.0, 165.0, 272.0),
          Point(82.0, 165.0, 225.0), Point(82.0, 0.0, 225.0), material)
    _quad(scene, Point(82.0, 0.0, 225.0), Point(82.0, 165.0, 225.0),
          Point(130.0, 165.0, 65.0), Point(130.0, 0.0, 65.0), material)
    _quad(scene, Point(130.0, 0.0, 65.0), Point(130.0, 165.0, 65.0),
          Point(290.0, 165.0, 114.0), Point(290.0, 0.0, 114.0), material)


def _tall_block(scene: Scene, material: int) -> None:
    # top and bottom
    _quad(scene, Point(423.0, 330.0, 247.0), Point(265.0, 330.0, 296.0),
          Point(314.0, 330.0, 456.0), Point(472.0, 330.0, 406.0), material)
    _quad(scene, Point(423.0, 0.1, 247.0), Point(265.0, 0.1, 296.0),
          Point(314.0, 0.1, 456.0), Point(472.0, 0.1, 406.0), material)
    # left, back, right, front
    _quad(scene, Point(423.0, 0.0, 247.0), Point(423.0, 330.0, 247.0),
          Point(472.0, 330.0, 406.0), Point(472.0, 0.0, 406.0), material)
    _quad(scene, Point(472.0, 0.0, 406.0), Point(472.0, 330.0, 406.0),
          Point(314.0, 330.0, 456.0), Point(314.0, 0.0, 406.0), material)
    _quad(scene, Point(314.0, 0.0, 456.0), Point(314.0, 330.0, 456.0),
          Point(265.0, 330.0, 296.0), Point(265.0, 0.0, 296.0), material)
    _quad(scene, Point(265.0, 0.0, 296.0), Point(265.0, 330.0, 296.0),
          Point(423.0, 330.0, 247.0), Point(423.0, 0.0, 247.0), material)


def _back_wall(scene: Scene, left_x: float, z: float, material: int) -> None:
    add_triangle_uv(
        scene, Point(left_x, 0.0, z), Point(549.6, 0.0, z), Point(556.0, 548.8, z),
        Vec2(1.0, 1.0), Vec2(0.0, 1.0), Vec2(0.0, 0.0), material,
    )
    add_triangle_uv(
        scene, Point(left_x, 0.0, z), Point(left_x, 548.8, z), Point(556.0, 548.8, z),
        Vec2(1.0, 1.0), Vec2(1.0, 0.0), Vec2(0.0, 0.0), material,
    )


def _box_shell(scene: Scene, backwall: int, white: int, green: int, red: int) -> None:
    # floor
    add_triangle(scene, Point(552.8, 0.0, 0.0), Point(0.0, 0.0, 0.0), Point(0.0, 0.0, 559.2), white)
    add_triangle(scene, Point(549.6, 0.0, 559.2), Point(552.8, 0.0, 0.0),
                 Point(0.0, 0.0, 559.2), white)
    # ceiling
    add_triangle(scene, Point(556.0, 548.8, 0.0), Point(0.0, 548.8, 0.0),
                 Point(0.0, 548.8, 559.2), white)
    add_triangle(scene, Point(556.0, 548.8, 559.2), Point(556.0, 548.8, 0.0),
                 Point(0.0, 548.8, 559.2), white)
    _back_wall(scene, 0.0, 559.2, backwall)
    # left wall
    _quad(scene, Point(0.0, 0.0, 0.0), Point(0.0, 0.0, 559.2), Point(0.0, 548.8, 559.2),
          Point(0.0, 548.8, 0.0), green)
    # right wall
    _quad(scene, Point(552.8, 0.0, 0.0), Point(549.6, 0.0, 559.2), Point(549.6, 548.8, 559.2),
          Point(552.8, 548.8, 0.0), red)


def _ceiling_lights(scene: Scene, power: RGB, y: float) -> None:
    for k in (-1, 0, 1):
        off = k * 150.0
        _light_quad(
            scene, power,
            Point(250.0 + off, y, 250.0 + off), Point(300.0 + off, y, 250.0 + off),
            Point(300.0 + off, y, 300.0 + off), Point(250.0 + off, y, 300.0 + off),
            _DOWN,
        )


def cornell_box(scene: Scene) -> None:
    """The classic box with a mirror on the right wall, a glass sphere and six lights.

    Textures are read from ``Dog.ppm`` and ``UMinho.ppm`` in the working directory.
    """
    backwall = add_textured_material(scene, BACKWALL_TEXTURE, RGB(0.3, 0.3, 0.3),
                                     RGB(0.9, 0.9, 0.9), _BLACK, _BLACK)
    block_top = add_textured_material(scene, BLOCK_TEXTURE, RGB(0.3, 0.3, 0.3),
                                      RGB(0.9, 0.9, 0.9), _BLACK, _BLACK)
    white = add_material(scene, RGB(0.2, 0.2, 0.2), RGB(0.4, 0.4, 0.4), _BLACK, _BLACK)
    red = add_material(scene, RGB(0.9, 0.0, 0.0), RGB(0.4, 0.0, 0.0), _BLACK, _BLACK)
    green = add_material(scene, RGB(0.0, 0.9, 0.0), RGB(0.0, 0.2, 0.0), _BLACK, _BLACK)
    blue = add_material(scene, RGB(0.0, 0.0, 0.9), RGB(0.0, 0.0, 0.4), _BLACK, _BLACK)
    orange = add_material(scene, RGB(0.99, 0.65, 0.0), RGB(0.37, 0.24, 0.0), _BLACK, _BLACK)
    mirror = add_material(scene, _BLACK, _BLACK, RGB(0.9, 0.9, 0.9), _BLACK)
    glass = add_material(scene, _BLACK, _BLACK, RGB(0.2, 0.2, 0.2), RGB(0.9, 0.9, 0.9), 1.2)

    _box_shell(scene, backwall, white, green, red)
    _quad(scene, Point(552.0, 50.0, 50.0), Point(549.0, 50.0, 509.2), Point(549.0, 488.8, 509.2),
          Point(552.0, 488.8, 50.0), mirror)
    _short_block(scene, block_top, orange)
    _tall_block(scene, blue)
    add_sphere(scene, Point(160.0, 320.0, 225.0), 90.0, glass)

    _ceiling_lights(scene, RGB(250000.0, 250000.0, 250000.0), 548.75)


def diffuse_cornell_box(scene: Scene) -> None:
    """The box with diffuse surfaces only and six ceiling lights."""
    backwall = add_textured_material(scene, BACKWALL_TEXTURE, RGB(0.3, 0.3, 0.3),
                                     RGB(0.8, 0.8, 0.8), _BLACK, _BLACK)
    block_top = add_textured_material(scene, BLOCK_TEXTURE, RGB(0.3, 0.3, 0.3),
                                      RGB(0.6, 0.6, 0.6), _BLACK, _BLACK)
    white = add_material(scene, RGB(0.1, 0.1, 0.1), RGB(0.6, 0.6, 0.6), _BLACK, _BLACK)
    red = add_material(scene, RGB(0.1, 0.0, 0.0), RGB(0.6, 0.0, 0.0), _BLACK, _BLACK)
    green = add_material(scene, RGB(0.0, 0.1, 0.0), RGB(0.0, 0.6, 0.0), _BLACK, _BLACK)
    blue = add_material(scene, RGB(0.0, 0.0, 0.1), RGB(0.0, 0.0, 0.6), _BLACK, _BLACK)
    orange = add_material(scene, RGB(0.37, 0.24, 0.0), RGB(0.66, 0.44, 0.0), _BLACK, _BLACK)

    _box_shell(scene, backwall, white, green, red)
    _short_block(scene, block_top, orange)
    _tall_block(scene, blue)

    _ceiling_lights(scene, RGB(25000.0, 25000.0, 25000.0), 548.0)


def dlight_challenge(scene: Scene) -> None:
    """An enlarged L-shaped box lit by many small area lights of varying power."""
    backwall = add_textured_material(scene, BACKWALL_TEXTURE, RGB(0.3, 0.3, 0.3),
                                     RGB(0.8, 0.8, 0.8), _BLACK, _BLACK)
    block_top = add_textured_material(scene, BLOCK_TEXTURE, RGB(0.3, 0.3, 0.3),
                                      RGB(0.6, 0.6, 0.6), _BLACK, _BLACK)
    white = add_material(scene, RGB(0.1, 0.1, 0.1), RGB(0.6, 0.6, 0.6), _BLACK, _BLACK)
    red = add_material(scene, RGB(0.1, 0.0, 0.0), RGB(0.5, 0.1, 0.1), _BLACK, _BLACK)
    green = add_material(scene, RGB(0.0, 0.1, 0.0), RGB(0.0, 0.6, 0.0), _BLACK, _BLACK)
    blue = add_material(scene, RGB(0.0, 0.0, 0.1), RGB(0.0, 0.0, 0.6), _BLACK, _BLACK)
    orange = add_material(scene, RGB(0.37, 0.24, 0.0), RGB(0.66, 0.44, 0.0), _BLACK, _BLACK)

    # floor
    add_triangle(scene, Point(552.8, 0.0, 0.0), Point(-100.0, 0.0, 0.0),
                 Point(-100.0, 0.0, 859.2), white)
    add_triangle(scene, Point(549.6, 0.0, 859.2), Point(552.8, 0.0, 0.0),
                 Point(-100.0, 0.0, 859.2), white)
    # ceiling
    add_triangle(scene, Point(556.0, 548.8, 0.0), Point(-100.0, 548.8, 0.0),
                 Point(-100.0, 548.8, 859.2), white)
    add_triangle(scene, Point(556.0, 548.8, 859.2), Point(556.0, 548.8, 0.0),
                 Point(-100.0, 548.8, 859.2), white)
    _back_wall(scene, -100.0, 859.2, backwall)
    # left wall
    _quad(scene, Point(0.0, 0.0, 0.0), Point(0.0, 0.0, 459.2), Point(0.0, 548.8, 459.2),
          Point(0.0, 548.8, 0.0), green)
    # walls of the L-shaped recess
    _quad(scene, Point(-100.0, 0.0, 459.2), Point(-100.0, 0.0, 859.2),
          Point(-100.0, 548.8, 859.2), Point(-100.0, 548.8, 459.2), white)
    _quad(scene, Point(-100.0, 0.0, 459.2), Point(0.0, 0.0, 459.2),
          Point(0.0, 548.8, 459.2), Point(-100.0, 548.8, 459.2), white)
    # right wall
    _quad(scene, Point(552.8, 0.0, 0.0), Point(549.6, 0.0, 859.2), Point(549.6, 548.8, 859.2),
          Point(552.8, 548.8, 0.0), red)

    _short_block(scene, block_top, orange)
    _tall_block(scene, blue)

    for llz in (-1, 0, 1):
        for llx in (-1, 0, 1):
            p = 5000.0 - (llx + llz) * 2000.0
            x, z = llx * 150.0, llz * 150.0
            _light_quad(
                scene, RGB(p, p, p),
                Point(250.0 + x, 545.0, 250.0 + z), Point(300.0 + x, 545.0, 250.0 + z),
                Point(300.0 + x, 545.0, 300.0 + z), Point(250.0 + x, 545.0, 300.0 + z),
                _DOWN,
            )
    for k in range(2):
        p = 15000.0 + k * 4000.0
        y = 250.0 * k
        _light_quad(
            scene, RGB(p, p, p),
            Point(-10.0, 20.0 + y, 459.3), Point(-10.0, 90.0 + y, 459.3),
            Point(-90.0, 90.0 + y, 459.3), Point(-90.0, 20.0 + y, 459.3),
            Vector(0.0, 0.0, 1.0),
        )
    for k in range(2):
        z = k * 200.0
        _light_quad(
            scene, RGB(2000.0 - k * 500.0, 2000.0 - k * 500.0, 1000.0 - k * 500.0),
            Point(0.01, 20.0, 20.0 + z), Point(0.01, 20.0, 100.0 + z),
            Point(0.01, 30.0, 100.0 + z), Point(0.01, 30.0, 20.0 + z),
            Vector(1.0, 0.0, 0.0),
        )
    for k in range(4):
        z = k * 200.0
        _light_quad(
            scene, RGB(2000.0 - k * 450.0, 2000.0 - k * 450.0, 1000.0 - k * 300.0),
            Point(549.59, 20.0, 20.0 + z), Point(549.59, 20.0, 100.0 + z),
            Point(549.59, 30.0, 100.0 + z), Point(549.59, 30.0, 20.0 + z),
            Vector(-1.0, 0.0, 0.0),
        )
    block_light = RGB(4000.0, 4000.0, 10000.0)
    up = Vector(0.0, 1.0, 0.0)
    # on the floor near the blue block
    _light_quad(scene, block_light, Point(340.0, 0.01, 220.0), Point(340.0, 0.01, 230.0),
                Point(350.0, 0.01, 230.0), Point(350.0, 0.01, 220.0), up)
    # on the floor near the orange block
    _light_quad(scene, block_light, Point(210.0, 0.01, 60.0), Point(210.0, 0.01, 70.0),
                Point(220.0, 0.01, 70.0), Point(220.0, 0.01, 60.0), up)