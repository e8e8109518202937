"""Intersectable shapes: spheres and triangles, and scene primitives."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .bbox import BoundingBox
from .ray import Intersection, Ray
from .vector import EPSILON, Point, Vec2, Vector


def _heron(len1: float, len2: float, len3: float) -> float:
    hp = (len1 + len2 + len3) / 2.0
    sq = hp * (hp - len1) * (hp - len2) * (hp - len3)
    return math.sqrt(sq) if sq >= 0.0 else math.nan


def points_area(a: Point, b: Point, c: Point) -> float:
    """Area of the triangle with the given corners (Heron's formula)."""
    return _heron(a.vec_to(b).norm(), b.vec_to(c).norm(), c.vec_to(a).norm())


def _hit(ray: Ray, point: Point, normal: Vector, t: float) -> Intersection:
    wo = -ray.direction
    facing = normal.faceforward(wo)
    return Intersection(
        p=point,
        gn=facing,
        sn=facing,
        wo=wo,
        depth=t,
        face_id=-1,
        pix_x=ray.pix_x,
        pix_y=ray.pix_y,
        incident_eta=ray.propagating_eta,
    )


class Geometry:
    """A shape that a ray can hit."""

    def __init__(self) -> None:
        self.bb = BoundingBox()

    def intersect(self, ray: Ray) -> Intersection | None:
        """The nearest hit along ``ray``, or None; a bare shape is never hit."""
        return None


class Sphere(Geometry):
    """A sphere given by its centre and radius."""

    def __init__(self, center: Point, radius: float) -> None:
        self.center = center
        self.radius = radius
        self.radius_sq = radius * radius
        self.bb = BoundingBox(
            Point(center.x - radius, center.y - radius, center.z - radius),
            Point(center.x + radius, center.y + radius, center.z + radius),
        )

    def intersect(self, ray: Ray) -> Intersection | None:
        if not self.bb.intersect(ray):
            return None
        oc = ray.origin.vec_to(self.center)
        h = ray.direction.dot(oc)
        c = oc.norm_sq() - self.radius_sq
        discriminant = h * h - c
        if discriminant < EPSILON:
            return None
        t = h - math.sqrt(discriminant)
        if t <= EPSILON:
            return None
        p_hit = ray.origin + t * ray.direction
        normal = self.center.vec_to(p_hit).normalized()
        return _hit(ray, p_hit, normal, t)


class Triangle(Geometry):
    """A triangle, optionally textured and optionally back-face culled.

    Without an explicit normal, the normal is edge1 x edge2 and culling is off
    by default; with one, culling is on by default.
    """

    def __init__(
        self,
        v1: Point,
        v2: Point,
        v3: Point,
        normal: Vector | None = None,
        backface_culling: bool | None = None,
    ) -> None:
        self.v1, self.v2, self.v3 = v1, v2, v3
        self.edge1 = v1.vec_to(v2)
        self.edge2 = v1.vec_to(v3)
        self.edge3 = v2.vec_to(v3)
        if normal is None:
            self.normal = self.edge1.cross(self.edge2).normalized()
            default_culling = False
        else:
            self.normal = normal
            default_culling = True
        self.backface_culling = default_culling if backface_culling is None else backface_culling
        self.uv1 = self.uv2 = self.uv3 = Vec2()
        self.bb = BoundingBox(v1, v1)
        self.bb.update(v2)
        self.bb.update(v3)

    def set_uv(self, uv1: Vec2, uv2: Vec2, uv3: Vec2) -> None:
        self.uv1, self.uv2, self.uv3 = uv1, uv2, uv3

    def area(self) -> float:
        return _heron(self.edge1.norm(), self.edge2.norm(), self.edge3.norm())

    def barycentrics(self, point: Point) -> Vector:
        """Barycentric weights of ``point`` for v1, v2 and v3."""
        area_abc = self.area()
        area_pbc = self.edge3.cross(self.v2.vec_to(point)).norm() / 2.0
        area_pca = (-self.edge2).cross(self.v3.vec_to(point)).norm() / 2.0
        l1 = area_pbc / area_abc
        l2 = area_pca / area_abc
        return Vector(l1, l2, 1.0 - l1 - l2)

    def interpolate_texture(self, bary: Vector) -> Vec2:
        return Vec2(
            bary.x * self.uv1.u + bary.y * self.uv2.u + bary.z * self.uv3.u,
            bary.x * self.uv1.v + bary.y * self.uv2.v + bary.z * self.uv3.v,
        )

    def intersect(self, ray: Ray) -> Intersection | None:
        """Moller-Trumbore ray/triangle test."""
        if not self.bb.intersect(ray):
            return None
        d = ray.direction
        par = self.normal.dot(d)
        if self.backface_culling:
            if par > -EPSILON:
                return None
        elif abs(par) < EPSILON:
            return None

        h = d.cross(self.edge2)
        a = self.edge1.dot(h)
        if a == 0.0:
            return None
        ff = 1.0 / a
        s = self.v1.vec_to(ray.origin)
        u = ff * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None
        q = s.cross(self.edge1)
        v = ff * d.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None
        t = ff * self.edge2.dot(q)
        if t <= EPSILON:
            return None

        p_hit = ray.origin + t * d
        hit = _hit(ray, p_hit, self.normal, t)
        hit.tex_coord = self.interpolate_texture(self.barycentrics(p_hit))
        return hit

    def is_inside(self, point: Point) -> bool:
        """Whether the sub-triangle areas around ``point`` add up to the whole."""
        return self.area() == (
            points_area(point, self.v1, self.v2)
            + points_area(point, self.v2, self.v3)
            + points_area(point, self.v3, self.v1)
        )


@dataclass
class Primitive:
    """A shape paired with the index of its material in the scene."""

    geometry: Geometry
    material: int