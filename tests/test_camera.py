import math
import random

import pytest

from vitrace.camera import Camera, Perspective
from vitrace.ray import RayType
from vitrace.vector import Point, Vector


def _camera(**kwargs):
    params = dict(
        eye=Point(0.0, 0.0, 0.0),
        at=Point(0.0, 0.0, 1.0),
        up=Vector(0.0, 1.0, 0.0),
        width=4,
        height=4,
        fov_h=math.radians(60.0),
    )
    params.update(kwargs)
    return Perspective(**params)


def test_base_camera_produces_nothing():
    cam = Camera()
    assert cam.generate_ray(0, 0) is None
    assert cam.resolution() == (0, 0)


def test_resolution():
    assert _camera(width=8, height=6).resolution() == (8, 6)


def test_center_ray_points_forward():
    ray = _camera().generate_ray(1, 1, (0.5, 0.5))
    assert ray.direction.x == pytest.approx(0.0, abs=1e-9)
    assert ray.direction.y == pytest.approx(0.0, abs=1e-9)
    assert ray.direction.z == pytest.approx(1.0)
    assert ray.origin == Point(0.0, 0.0, 0.0)
    assert ray.rtype is RayType.PRIMARY
    assert (ray.pix_x, ray.pix_y) == (1, 1)
    assert ray.propagating_eta == 1.0
    assert ray.face_id == -1


def test_default_jitter_is_half_pixel():
    cam = _camera()
    assert cam.generate_ray(2, 3) == cam.generate_ray(2, 3, (0.5, 0.5))


@pytest.mark.parametrize("x,y", [(0, 0), (3, 0), (1, 2), (3, 3)])
def test_directions_are_unit_length(x, y):
    ray = _camera().generate_ray(x, y, (0.25, 0.75))
    assert ray.direction.norm() == pytest.approx(1.0)


def test_screen_axes_orientation():
    cam = _camera()
    centre = cam.generate_ray(1, 1, (0.5, 0.5)).direction
    right = cam.generate_ray(3, 1, (0.5, 0.5)).direction
    below = cam.generate_ray(1, 3, (0.5, 0.5)).direction
    # right = forward x up, which for this camera is the -X axis
    assert right.x < centre.x
    assert below.y < centre.y


def test_mirror_symmetric_columns():
    cam = _camera()
    left = cam.generate_ray(0, 1, (0.5, 0.5)).direction
    mirrored = cam.generate_ray(2, 1, (0.5, 0.5)).direction
    assert left.x == pytest.approx(-mirrored.x)
    assert left.z == pytest.approx(mirrored.z)


def _plane_hit(ray, z):
    t = (z - ray.origin.z) / ray.direction.z
    return (ray.origin.x + t * ray.direction.x, ray.origin.y + t * ray.direction.y)


def test_defocus_rays_converge_on_focal_plane():
    focus = 5.0
    pinhole = _camera(focus_dist=focus)
    lens = _camera(defocus_angle=math.radians(10.0), focus_dist=focus, rng=random.Random(1))
    reference = _plane_hit(pinhole.generate_ray(2, 1, (0.3, 0.6)), focus)
    origins = set()
    for _ in range(5):
        ray = lens.generate_ray(2, 1, (0.3, 0.6))
        origins.add(ray.origin)
        hx, hy = _plane_hit(ray, focus)
        assert hx == pytest.approx(reference[0], abs=1e-6)
        assert hy == pytest.approx(reference[1], abs=1e-6)
    assert len(origins) > 1


def test_defocus_origins_lie_within_lens_disk():
    focus = 5.0
    angle = math.radians(10.0)
    lens = _camera(defocus_angle=angle, focus_dist=focus, rng=random.Random(3))
    radius = focus * math.tan(angle / 2.0)
    for _ in range(20):
        origin = lens.generate_ray(0, 0).origin
        assert math.hypot(origin.x, origin.y) < radius
        assert origin.z == pytest.approx(0.0)