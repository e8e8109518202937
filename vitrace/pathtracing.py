"""Path tracing with Russian roulette and one-sample direct lighting."""

from __future__ import annotations

import math
import random
from itertools import accumulate

from .brdf import BRDF
from .direct import DirectSampleMode, direct_lighting
from .ray import Intersection, Ray, RayType
from .rgb import RGB
from .sampling import cosine_hemisphere_sample, reflect, refract
from .scene import Scene
from .shader import Shader

MIN_DEPTH = 1
CONTINUE_PROB = 0.2
_MIN_LOBE_PDF = 1.0e-4
_MIN_DIRECTION_PDF = 1.0e-5


class PathTracingShader(Shader):
    """Picks one scattering lobe per bounce in proportion to its luminance."""

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
        # A ray in air enters the object; any other ray leaves it for air.
        new_eta = isect.f.eta if isect.incident_eta == 1.0 else 1.0
        ior = isect.incident_eta / new_eta
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
            propagating_eta=isect.incident_eta if cannot_refract else new_eta,
        )
        ray.adjust_origin(-isect.gn)
        return brdf.kt * self.shade(self.scene.trace(ray), depth + 1)

    def _diffuse_reflection(self, isect: Intersection, brdf: BRDF, depth: int) -> RGB:
        sample = cosine_hemisphere_sample((self.rng.random(), self.rng.random()))
        if sample.pdf < _MIN_DIRECTION_PDF:
            return RGB()
        cos_theta = sample.direction.z
        rx, ry = isect.gn.coordinate_system()
        direction = sample.direction.rotate(rx, ry, isect.sn)

        ray = Ray(
            isect.p,
            direction,
            RayType.DIFF_REFL,
            face_id=isect.face_id,
            pix_x=isect.pix_x,
            pix_y=isect.pix_y,
            propagating_eta=isect.incident_eta,
        )
        ray.adjust_origin(isect.sn)
        hit = self.scene.trace(ray)
        if hit is not None and hit.is_light:
            # emitters are accounted for by direct lighting
            return RGB()
        return brdf.kd * cos_theta * self.shade(hit, depth + 1) / sample.pdf

    def shade(self, isect: Intersection | None, depth: int = 0) -> RGB:
        if isect is None:
            return self.background
        if isect.is_light:
            return isect.le
        brdf = isect.f
        color = RGB()

        survive = self.rng.random()
        if depth < MIN_DEPTH or survive <= CONTINUE_PROB:
            weights = [brdf.ks.luminance(), brdf.kt.luminance(), brdf.kd.luminance()]
            total = sum(weights)
            if total == 0.0:
                return color
            pdf = [w / total for w in weights]
            cdf = list(accumulate(pdf))
            which = self.rng.random()

            if which <= cdf[0]:
                if pdf[0] > _MIN_LOBE_PDF:
                    color = color + self._specular_reflection(isect, brdf, depth) / pdf[0]
            elif which <= cdf[1]:
                if pdf[1] > _MIN_LOBE_PDF:
                    color = color + self._specular_transmission(isect, brdf, depth) / pdf[1]
            elif pdf[2] > _MIN_LOBE_PDF and isect.r_type is not RayType.DIFF_REFL:
                color = color + self._diffuse_reflection(isect, brdf, depth) / pdf[2]

            if depth >= MIN_DEPTH:
                color = color / CONTINUE_PROB

        if not brdf.kd.is_zero():
            color = color + direct_lighting(
                self.scene, isect, brdf, self.rng, DirectSampleMode.UNIFORM_ONE
            )
        return color