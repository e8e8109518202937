"""Axis-aligned bounding boxes with a conservative slab test."""

from __future__ import annotations

from dataclasses import dataclass, field

from .ray import Ray
from .vector import Point

FLT_EPSILON = 2.0 ** -23
MACHINE_EPSILON = FLT_EPSILON * 0.5
FLT_MAX = 3.4028234663852886e38
_INVERSE_OF_ZERO = 1.0e5


def machine_gamma(n: int) -> float:
    """Bound on the relative error of ``n`` single-precision operations."""
    return (n * MACHINE_EPSILON) / (1.0 - n * MACHINE_EPSILON)


@dataclass
class BoundingBox:
    """An axis-aligned box given by its minimum and maximum corners."""

    min: Point = field(default_factory=Point)
    max: Point = field(default_factory=Point)

    def update(self, point: Point) -> None:
        """Grow the box so it includes ``point``."""
        lo, hi = list(self.min), list(self.max)
        for axis, coord in enumerate(point):
            if coord < lo[axis]:
                lo[axis] = coord
            elif coord > hi[axis]:
                hi[axis] = coord
        self.min, self.max = Point(*lo), Point(*hi)

    def intersect(self, ray: Ray) -> bool:
        """Whether ``ray`` may hit the box (for t >= 0)."""
        t0, t1 = 0.0, FLT_MAX
        widen = 1.0 + 2.0 * machine_gamma(3)
        for lo, hi, origin, direction in zip(self.min, self.max, ray.origin, ray.direction):
            inv = 1.0 / direction if direction != 0.0 else _INVERSE_OF_ZERO
            t_near = (lo - origin) * inv
            t_far = (hi - origin) * inv
            if t_near > t_far:
                t_near, t_far = t_far, t_near
            t_far *= widen
            t0 = max(t_near, t0)
            t1 = min(t_far, t1)
            if t0 > t1:
                return False
        return True