"""Light sources: ambient, point and triangular area lights."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import NamedTuple, Sequence

from .geometry import Triangle
from .rgb import RGB
from .vector import Point, Vector


class LightType(Enum):
    NO_LIGHT = auto()
    AMBIENT = auto()
    POINT = auto()
    AREA = auto()


class LightSample(NamedTuple):
    """A sampled position on a light, its radiance and the sampling density."""

    radiance: RGB
    point: Point | None
    pdf: float


class Light:
    """A light that emits nothing."""

    kind = LightType.NO_LIGHT

    def radiance(self, point: Point | None = None) -> RGB:
        return RGB()

    def sample(self, rnd: Sequence[float]) -> LightSample:
        return LightSample(RGB(), None, 0.0)

    def pdf(self, point: Point | None) -> float:
        return 0.0


class AmbientLight(Light):
    """Constant light arriving from everywhere."""

    kind = LightType.AMBIENT

    def __init__(self, color: RGB) -> None:
        self.color = color

    def radiance(self, point: Point | None = None) -> RGB:
        return self.color

    def sample(self, rnd: Sequence[float]) -> LightSample:
        return LightSample(self.color, None, 1.0)


class PointLight(Light):
    """Light emitted from a single position."""

    kind = LightType.POINT

    def __init__(self, color: RGB, pos: Point) -> None:
        self.color = color
        self.pos = pos

    def radiance(self, point: Point | None = None) -> RGB:
        return self.color

    def sample(self, rnd: Sequence[float]) -> LightSample:
        return LightSample(self.color, self.pos, 1.0)


class AreaLight(Light):
    """A one-sided emitting triangle, sampled uniformly over its area."""

    kind = LightType.AREA

    def __init__(self, power: RGB, v1: Point, v2: Point, v3: Point, normal: Vector) -> None:
        self.power = power
        self.geometry = Triangle(v1, v2, v3, normal)
        self.uniform_pdf = 1.0 / self.geometry.area()
        self.intensity = power * self.uniform_pdf

    def radiance(self, point: Point | None = None) -> RGB:
        return self.power

    def pdf(self, point: Point | None) -> float:
        return self.uniform_pdf

    def sample(self, rnd: Sequence[float]) -> LightSample:
        """A uniformly distributed point on the triangle for two numbers in [0, 1)."""
        r0, r1 = rnd
        sqrt_r0 = math.sqrt(r0)
        alpha = 1.0 - sqrt_r0
        beta = (1.0 - r1) * sqrt_r0
        gamma = r1 * sqrt_r0
        g = self.geometry
        point = Point(
            alpha * g.v1.x + beta * g.v2.x + gamma * g.v3.x,
            alpha * g.v1.y + beta * g.v2.y + gamma * g.v3.y,
            alpha * g.v1.z + beta * g.v2.z + gamma * g.v3.z,
        )
        return LightSample(self.intensity, point, self.uniform_pdf)