"""Cameras that turn pixel coordinates into primary rays."""

from __future__ import annotations

import math
import random
from typing import Sequence

from .ray import Ray, RayType
from .vector import Point, Vector


class Camera:
    """A camera that produces no rays and has no resolution."""

    def generate_ray(self, x: int, y: int, jitter: Sequence[float] | None = None) -> Ray | None:
        """The primary ray through pixel (x, y), or None if there is none."""
        return None

    def resolution(self) -> tuple[int, int]:
        return (0, 0)


class Perspective(Camera):
    """A pinhole camera, or a thin-lens one when ``defocus_angle`` is positive.

    ``fov_h`` and ``defocus_angle`` are in radians.  ``jitter`` passed to
    :meth:`generate_ray` holds two offsets in [0, 1) within the pixel.
    """

    def __init__(
        self,
        eye: Point,
        at: Point,
        up: Vector,
        width: int,
        height: int,
        fov_h: float,
        defocus_angle: float = 0.0,
        focus_dist: float = 1.0,
        rng: random.Random | None = None,
    ) -> None:
        self.eye = eye
        self.at = at
        self.width = width
        self.height = height
        self.defocus_angle = defocus_angle
        self._rng = rng if rng is not None else random.Random()

        forward = eye.vec_to(at).normalized()
        right = forward.cross(up).normalized()
        self.up = right.cross(forward).normalized()

        self.tan_half_h = math.tan(fov_h / 2.0)
        viewport_height = 2.0 * self.tan_half_h * focus_dist
        viewport_width = viewport_height * width / height

        viewport_u = viewport_width * right
        viewport_v = -viewport_height * self.up

        self.pixel_delta_u = viewport_u / width
        self.pixel_delta_v = viewport_v / height

        upper_left = eye + focus_dist * forward - (viewport_u / 2 + viewport_v / 2)
        self.pixel00 = upper_left + 0.5 * (self.pixel_delta_u + self.pixel_delta_v)

        defocus_radius = focus_dist * math.tan(defocus_angle / 2.0)
        self.defocus_disk_right = right * defocus_radius
        self.defocus_disk_up = self.up * defocus_radius

    def _random_in_unit_disk(self) -> tuple[float, float]:
        while True:
            px = self._rng.uniform(-1.0, 1.0)
            py = self._rng.uniform(-1.0, 1.0)
            if px * px + py * py < 1.0:
                return px, py

    def generate_ray(self, x: int, y: int, jitter: Sequence[float] | None = None) -> Ray:
        jx, jy = (0.5, 0.5) if jitter is None else jitter
        sample = self.pixel00 + (x + jx) * self.pixel_delta_u + (y + jy) * self.pixel_delta_v
        if self.defocus_angle > 0.0:
            px, py = self._random_in_unit_disk()
            origin = self.eye + px * self.defocus_disk_right + py * self.defocus_disk_up
        else:
            origin = self.eye
        direction = origin.vec_to(sample).normalized()
        return Ray(
            origin,
            direction,
            RayType.PRIMARY,
            face_id=-1,
            pix_x=x,
            pix_y=y,
            propagating_eta=1.0,
        )

    def resolution(self) -> tuple[int, int]:
        return (self.width, self.height)