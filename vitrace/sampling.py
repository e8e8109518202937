"""Reflection, refraction and hemisphere sampling helpers."""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence

from .vector import Vector


class HemisphereSample(NamedTuple):
    """A direction around +Z and the density it was drawn with."""

    direction: Vector
    pdf: float


def refract(v: Vector, n: Vector, ior: float) -> Vector:
    """Refract incident direction ``v`` through a surface with normal ``n``."""
    cos_theta = min(n.dot(-v), 1.0)
    r_out_perp = ior * (v + cos_theta * n)
    r_out_parallel = -math.sqrt(abs(1.0 - r_out_perp.norm_sq())) * n
    return (r_out_perp + r_out_parallel).normalized()


def reflect(v: Vector, n: Vector) -> Vector:
    """Mirror ``v`` about the normal ``n``: 2 (N.V) N - V."""
    return 2.0 * n.dot(v) * n - v


def uniform_hemisphere_sample(rnd: Sequence[float]) -> HemisphereSample:
    """Uniformly distributed direction on the +Z hemisphere."""
    r0, r1 = rnd
    sin_theta = math.sqrt(1.0 - r1 * r1)
    phi = 2.0 * math.pi * r0
    direction = Vector(math.cos(phi) * sin_theta, math.sin(phi) * sin_theta, r1)
    return HemisphereSample(direction, 1.0 / (2.0 * math.pi))


def cosine_hemisphere_sample(rnd: Sequence[float]) -> HemisphereSample:
    """Cosine-weighted direction on the +Z hemisphere."""
    r0, r1 = rnd
    cos_theta = math.sqrt(r1)
    sin_theta = math.sqrt(1.0 - r1)
    phi = 2.0 * math.pi * r0
    direction = Vector(math.cos(phi) * sin_theta, math.sin(phi) * sin_theta, cos_theta)
    return HemisphereSample(direction, cos_theta / math.pi)