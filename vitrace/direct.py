"""Direct illumination from the scene's light sources."""

from __future__ import annotations

import random
from enum import Enum, auto

from .brdf import BRDF
from .lights import AmbientLight, AreaLight, LightType, PointLight
from .ray import Intersection, Ray, RayType
from .rgb import RGB
from .scene import Scene
from .vector import EPSILON


class DirectSampleMode(Enum):
    """Whether to sum every light or estimate with one chosen at random."""

    ALL_LIGHTS = auto()
    UNIFORM_ONE = auto()


def _diffuse_colour(isect: Intersection, brdf: BRDF) -> RGB:
    if brdf.textured:
        return brdf.get_kd(isect.tex_coord)
    return brdf.kd


def _shadow_ray(isect: Intersection, direction) -> Ray:
    shadow = Ray(isect.p, direction, RayType.SHADOW, pix_x=isect.pix_x, pix_y=isect.pix_y)
    shadow.adjust_origin(isect.gn)
    return shadow


def _ambient(light: AmbientLight, brdf: BRDF) -> RGB:
    if brdf.ka.is_zero():
        return RGB()
    return brdf.ka * light.radiance()


def _point(light: PointLight, scene: Scene, isect: Intersection, brdf: BRDF) -> RGB:
    kd = _diffuse_colour(isect, brdf)
    if kd.is_zero():
        return RGB()
    sample = light.sample(())
    to_light = isect.p.vec_to(sample.point)
    distance = to_light.norm()
    l_dir = to_light.normalized()
    cos_l = l_dir.dot(isect.sn)
    if cos_l <= 0.0:
        return RGB()
    if not scene.visibility(_shadow_ray(isect, l_dir), distance - EPSILON):
        return RGB()
    color = sample.radiance * kd * cos_l
    if distance > 0.0:
        color = color / (distance * distance)
    return color


def _area(
    light: AreaLight, scene: Scene, isect: Intersection, brdf: BRDF, rnd: tuple[float, float]
) -> RGB:
    kd = _diffuse_colour(isect, brdf)
    if kd.is_zero():
        return RGB()
    sample = light.sample(rnd)
    to_light = isect.p.vec_to(sample.point)
    distance = to_light.norm()
    l_dir = to_light.normalized()
    cos_l = l_dir.dot(isect.sn)
    # l_dir points into the light, so flip it to measure against the light's normal
    cos_light_normal = -l_dir.dot(light.geometry.normal)
    if cos_l <= 1.0e-4 or cos_light_normal <= 1.0e-4:
        return RGB()
    if not scene.visibility(_shadow_ray(isect, l_dir), distance - EPSILON):
        return RGB()
    color = sample.radiance * kd * cos_l
    if sample.pdf > 0.0:
        color = color / sample.pdf
    if distance > 0.0:
        color = color / (distance * distance)
    return color * cos_light_normal


def direct_lighting(
    scene: Scene,
    isect: Intersection,
    brdf: BRDF,
    rng: random.Random,
    mode: DirectSampleMode = DirectSampleMode.ALL_LIGHTS,
) -> RGB:
    """Light arriving at ``isect`` straight from the scene's lights.

    In UNIFORM_ONE mode each step picks a light at random; an area light
    ends the estimate, scaled by the number of lights.
    """
    color = RGB()
    lights = scene.lights
    n_lights = len(lights)
    for light in lights:
        if mode is DirectSampleMode.UNIFORM_ONE:
            index = min(int(rng.random() * n_lights), n_lights - 1)
            light = lights[index]

        if light.kind is LightType.AMBIENT:
            color = color + _ambient(light, brdf)
            continue
        if light.kind is LightType.POINT:
            color = color + _point(light, scene, isect, brdf)
            continue
        if light.kind is LightType.AREA:
            rnd = (rng.random(), rng.random())
            color = color + _area(light, scene, isect, brdf, rnd)

        if mode is DirectSampleMode.UNIFORM_ONE:
            color = color * n_lights
            break
    return color