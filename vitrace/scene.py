"""A scene: primitives, materials and lights, with ray queries."""

from __future__ import annotations

from .brdf import BRDF
from .geometry import Primitive
from .lights import Light, LightType
from .ray import Intersection, Ray


class Scene:
    """Holds everything that can be hit or can emit light."""

    def __init__(self) -> None:
        self.primitives: list[Primitive] = []
        self.materials: list[BRDF] = []
        self.lights: list[Light] = []

    def add_material(self, brdf: BRDF) -> int:
        """Register a material and return the index primitives refer to it by."""
        self.materials.append(brdf)
        return len(self.materials) - 1

    def add_primitive(self, primitive: Primitive) -> None:
        self.primitives.append(primitive)

    def add_light(self, light: Light) -> None:
        self.lights.append(light)

    def trace(self, ray: Ray) -> Intersection | None:
        """The nearest hit on a primitive or an area light, or None.

        A scene without primitives is never hit, even if it has area lights.
        """
        if not self.primitives:
            return None
        best: Intersection | None = None
        for prim in self.primitives:
            hit = prim.geometry.intersect(ray)
            if hit is not None and (best is None or hit.depth < best.depth):
                hit.f = self.materials[prim.material]
                best = hit
        for light in self.lights:
            if light.kind is not LightType.AREA:
                continue
            hit = light.geometry.intersect(ray)
            if hit is not None and (best is None or hit.depth < best.depth):
                hit.is_light = True
                hit.le = light.radiance()
                best = hit
        if best is not None:
            best.r_type = ray.rtype
        return best

    def visibility(self, ray: Ray, max_distance: float) -> bool:
        """Whether no primitive lies along ``ray`` closer than ``max_distance``."""
        for prim in self.primitives:
            hit = prim.geometry.intersect(ray)
            if hit is not None and hit.depth < max_distance:
                return False
        return True

    def summary(self) -> str:
        return (
            f"#primitives = {len(self.primitives)} ; "
            f"#lights = {len(self.lights)} ; "
            f"#materials = {len(self.materials)} ;"
        )