"""Distributed ray tracing: specular recursion plus sampled area lighting."""

from __future__ import annotations

import math
import random

from .brdf import BRDF
from .direct import DirectSampleMode, direct_lighting
from .ray import Intersection, Ray, RayType
from .rgb import RGB
from .sampling import reflect, refract
from .scene import Scene
from .shader import Shader

MAX_DEPTH = 3


class DistributedShader(Shader):
    """Mirror and refraction rays up to a fixed depth, with one light sampled per hit."""

    def __init__(self, scene: Scene, background: RGB, rng: random.Random | None = None) -> None:
        super().__init__(scene)
        self.background = background
        self.rng = rng if rng is not None else random.Random()

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
            color = color + self._specular_reflection(isect, brdf, depth + 1)
        if not brdf.kt.is_zero() and depth < MAX_DEPTH:
            color = color + self._specular_transmission(isect, brdf, depth + 1)
        return color + direct_lighting(
            self.scene, isect, brdf, self.rng, DirectSampleMode.UNIFORM_ONE
        )