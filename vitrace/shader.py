"""Base shader and the simple ambient and debugging shaders."""

from __future__ import annotations

from .lights import LightType
from .ray import Intersection
from .rgb import RGB
from .scene import Scene


class Shader:
    """Turns a traced hit (or a miss, given as None) into a colour."""

    def __init__(self, scene: Scene) -> None:
        self.scene = scene

    def shade(self, isect: Intersection | None, depth: int = 0) -> RGB:
        return RGB()


class AmbientShader(Shader):
    """Shades surfaces with their ambient colour under the scene's ambient lights."""

    def __init__(self, scene: Scene, background: RGB) -> None:
        super().__init__(scene)
        self.background = background

    def shade(self, isect: Intersection | None, depth: int = 0) -> RGB:
        if isect is None:
            return self.background
        if isect.is_light:
            return isect.le
        ka = isect.f.ka
        color = RGB()
        if ka.is_zero():
            return color
        for light in self.scene.lights:
            if light.kind is LightType.AMBIENT:
                color = color + ka * light.radiance()
        return color


class DummyShader(Shader):
    """Colours each pixel by its position: red grows with x, green with y."""

    def __init__(self, scene: Scene, width: int, height: int) -> None:
        super().__init__(scene)
        self.width = float(width)
        self.height = float(height)

    def shade(self, isect: Intersection | None, depth: int = 0) -> RGB:
        return RGB(isect.pix_x / self.width, isect.pix_y / self.height, 0.0)