"""Whitted-style ray tracing: perfect mirrors, refraction and point lights."""

from __future__ import annotations

import math

from .brdf import BRDF
from .lights import AmbientLight, LightType, PointLight
from .ray import Intersection, Ray, RayType
from .rgb import RGB
from .sampling import reflect, refract
from .scene import Scene
from .shader import Shader
from .vector import EPSILON

MAX_DEPTH = 3


def _direct_ambient(light: AmbientLight, brdf: BRDF) -> RGB:
    if brdf.ka.is_zero():
        return RGB()
    return brdf.ka * light.radiance()


def _direct_point(light: PointLight, scene: Scene, isect: Intersection, brdf: BRDF) -> RGB:
    if brdf.kd.is_zero():
        return RGB()
    sample = light.sample(())
    to_light = isect.p.vec_to(sample.point)
    distance = to_light.norm()
    l_dir = to_light.normalized()
    cos_l = l_dir.dot(isect.sn)
    if cos_l <= 0.0:
        return RGB()
    shadow = Ray(isect.p, l_dir, RayType.SHADOW, pix_x=isect.pix_x, pix_y=isect.pix_y)
    shadow.adjust_origin(isect.gn)
    if not scene.visibility(shadow, distance - EPSILON):
        return RGB()
    color = sample.radiance * brdf.kd * cos_l
    if distance > 0.0:
        color = color / (distance * distance)
    return color


def _direct_lighting(scene: Scene, isect: Intersection, brdf: BRDF) -> RGB:
    color = RGB()
    for light in scene.lights:
        if light.kind is LightType.AMBIENT:
            color = color + _direct_ambient(light, brdf)
        elif light.kind is LightType.POINT:
            color = color + _direct_point(light, scene, isect, brdf)
    return color


class WhittedShader(Shader):
    """Recursive specular reflection and transmission plus direct lighting."""

    def __init__(self, scene: Scene, background: RGB) -> None:
        super().__init__(scene)
        self.background = background

    def _specular_reflection(self, isect: Intersection, brdf: BRDF, depth: int) -> RGB:
        ray = Ray(
            isect.p,
            reflect(isect.wo, isect.sn),
            RayType.SPEC_REFL,
            face_id=isect.face_id,
            pix_x=isect.pix_x,
            pix_y=isect.pix_y,
            propagating_eta=isect.incident_eta,
        )
        ray.adjust_origin(isect.gn)
        return brdf.ks * self.shade(self.scene.trace(ray), depth + 1)

    def _specular_transmission(self, isect: Intersection, brdf: BRDF, depth: int) -> RGB:
        ior = isect.incident_eta / isect.f.eta
        v = -isect.wo
        n = isect.sn
        cos_theta = min(n.dot(-v), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))
        cannot_refract = ior * sin_theta > 1.0

        ray = Ray(
            isect.p,
            reflect(v, n) if cannot_refract else refract(v, n, ior),
            RayType.SPEC_REFL if cannot_refract else RayType.SPEC_TRANS,
            face_id=isect.face_id,
            pix_x=isect.pix_x,
            pix_y=isect.pix_y,
            propagating_eta=isect.incident_eta if cannot_refract else isect.f.eta,
        )
        ray.adjust_origin(-isect.gn)
        return brdf.kt * self.shade(self.scene.trace(ray), depth + 1)

    def shade(self, isect: Intersection | None, depth: int = 0) -> RGB:
        if isect is None:
            return self.background
        if isect.is_light:
            return isect.le
        brdf = isect.f
        color = RGB()
        if not brdf.ks.is_zero() and depth < MAX_DEPTH:
            color = color + self._specular_reflection(isect, brdf, depth)
        if not brdf.kt.is_zero() and depth < MAX_DEPTH:
            color = color + self._specular_transmission(isect, brdf, depth)
        return color + _direct_lighting(self.scene, isect, brdf)