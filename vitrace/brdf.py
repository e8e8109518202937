"""Surface reflectance models: a plain material and a diffuse texture."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from enum import IntFlag
from typing import Any, Sequence

from .image import Image, ImagePPM
from .rgb import RGB
from .vector import Vec2, Vector


class BRDFType(IntFlag):
    """Scattering lobes a material may be asked about."""

    SPECULAR_REF = 1
    DIFFUSE_REF = 2
    SPECULAR_TRANS = 4
    GLOSSY_REF = 8
    ALL = SPECULAR_REF | DIFFUSE_REF | SPECULAR_TRANS | GLOSSY_REF


@dataclass(eq=False)
class BRDF:
    """A material given by ambient, diffuse, specular and transmission colours."""

    ka: RGB = RGB()
    kd: RGB = RGB()
    ks: RGB = RGB()
    kt: RGB = RGB()
    eta: float = 1.0
    textured: bool = False

    def f(self, wi: Vector, wo: Vector, kind: BRDFType = BRDFType.ALL) -> RGB:
        """Reflectance for the direction pair; the plain material has no analytic lobe."""
        return RGB()

    def sample_f(
        self, wi: Vector, rnd: Sequence[float], kind: BRDFType = BRDFType.ALL
    ) -> tuple[RGB, Vector]:
        """Sample an outgoing direction; the plain material yields nothing."""
        return RGB(), Vector()

    def pdf(self, wi: Vector, wo: Vector, kind: BRDFType = BRDFType.ALL) -> float:
        """Probability density of sampling ``wo`` given ``wi``."""
        return 0.0


@dataclass(eq=False)
class DiffuseTexture(BRDF):
    """A material whose diffuse colour is modulated by an image."""

    textured: bool = True
    texture: Image = field(default_factory=Image)

    @classmethod
    def from_file(cls, filename: str | os.PathLike[str], **kwargs: Any) -> DiffuseTexture:
        """Build a textured material from a binary PPM file."""
        return cls(texture=ImagePPM.load(filename), **kwargs)

    def get_kd(self, tex_coord: Vec2) -> RGB:
        """Diffuse colour at the given texture coordinates."""
        x = math.floor(tex_coord.u * self.texture.width)
        y = math.floor(tex_coord.v * self.texture.height)
        return self.kd * self.texture.get(x, y)