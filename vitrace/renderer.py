"""Renderers that drive a camera, a scene, a shader and an image."""

from __future__ import annotations

import random
from typing import TextIO

from .camera import Camera
from .image import Image
from .ray import Intersection
from .rgb import RGB
from .scene import Scene
from .shader import Shader


class Renderer:
    """Holds the parts of a render; the base renderer draws nothing.

    ``progress``, when given, receives a short line per image row.
    """

    def __init__(
        self,
        camera: Camera,
        scene: Scene,
        image: Image,
        shader: Shader,
        progress: TextIO | None = None,
    ) -> None:
        self.camera = camera
        self.scene = scene
        self.image = image
        self.shader = shader
        self.progress = progress

    def _report(self, text: str) -> None:
        if self.progress is not None:
            self.progress.write(text)
            self.progress.flush()

    def render(self) -> None:
        """Draw nothing."""


class DummyRenderer(Renderer):
    """Shades every pixel without tracing: only the pixel position reaches the shader."""

    def render(self) -> None:
        width, height = self.camera.resolution()
        for y in range(height):
            self._report(("/" if y & 1 else "\\") + "\r")
            for x in range(width):
                self.camera.generate_ray(x, y)
                isect = Intersection(pix_x=x, pix_y=y)
                self.image.set(x, y, self.shader.shade(isect, 0))


class StandardRenderer(Renderer):
    """Traces ``spp`` primary rays per pixel and averages their shaded colours."""

    def __init__(
        self,
        camera: Camera,
        scene: Scene,
        image: Image,
        shader: Shader,
        spp: int,
        jitter: bool = False,
        rng: random.Random | None = None,
        progress: TextIO | None = None,
    ) -> None:
        if spp < 1:
            raise ValueError("samples per pixel must be at least 1")
        super().__init__(camera, scene, image, shader, progress)
        self.spp = spp
        self.jitter = jitter
        self.rng = rng if rng is not None else random.Random()

    def render(self) -> None:
        width, height = self.camera.resolution()
        inv_spp = 1.0 / self.spp
        for y in range(height):
            self._report(f"{y}\r")
            for x in range(width):
                color = RGB()
                for _ in range(self.spp):
                    if self.jitter:
                        offsets = (self.rng.random(), self.rng.random())
                        ray = self.camera.generate_ray(x, y, offsets)
                    else:
                        ray = self.camera.generate_ray(x, y)
                    color = color + self.shader.shade(self.scene.trace(ray), 0)
                self.image.set(x, y, color * inv_spp)