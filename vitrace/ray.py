"""Rays and ray/surface intersection records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from .rgb import RGB
from .vector import EPSILON, Point, Vec2, Vector

_INVERSE_OF_ZERO = 1.0e5


class RayType(Enum):
    PRIMARY = auto()
    SHADOW = auto()
    SPEC_REFL = auto()
    SPEC_TRANS = auto()
    DIFF_REFL = auto()


@dataclass
class Ray:
    """A ray with an origin, a direction and bookkeeping for shading."""

    origin: Point
    direction: Vector
    rtype: RayType = RayType.PRIMARY
    throughput: RGB = field(default_factory=lambda: RGB(1.0, 1.0, 1.0))
    face_id: int = -1
    pix_x: int = 0
    pix_y: int = 0
    propagating_eta: float = 1.0

    def inverted_dir(self) -> Vector:
        """Component-wise reciprocal of the direction; zeros map to a large value."""
        return Vector(*(1.0 / c if c != 0.0 else _INVERSE_OF_ZERO for c in self.direction))

    def adjust_origin(self, normal: Vector) -> None:
        """Nudge the origin off the surface along ``normal``, toward the ray's side."""
        offset = EPSILON * normal
        if self.direction.dot(normal) < 0.0:
            offset = -offset
        self.origin = self.origin + offset


@dataclass
class Intersection:
    """Everything a shader needs to know about a ray hit."""

    p: Point = Point()
    gn: Vector = Vector()
    sn: Vector = Vector()
    wo: Vector = Vector()
    depth: float = 0.0
    f: Any = None
    pix_x: int = 0
    pix_y: int = 0
    face_id: int = -1
    is_light: bool = False
    le: RGB = RGB()
    incident_eta: float = 1.0
    tex_coord: Vec2 = Vec2()
    r_type: RayType = RayType.PRIMARY