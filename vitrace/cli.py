"""Command-line entry point: render a scene to a PPM file."""

from __future__ import annotations

import argparse
import math
import random
import sys
import time
from typing import Callable, Sequence

from .camera import Perspective
from .cornell import cornell_box, diffuse_cornell_box, dlight_challenge
from .image import ImagePPM
from .pathtracing import PathTracingShader
from .renderer import StandardRenderer
from .rgb import RGB
from .scene import Scene
from .vector import Point, Vector

_SCENES: dict[str, Callable[[Scene], None]] = {
    "cornell": cornell_box,
    "diffuse-cornell": diffuse_cornell_box,
    "dlight": dlight_challenge,
}

EYE = Point(280.0, 265.0, -500.0)
AT = Point(280.0, 260.0, 0.0)
UP = Vector(0.0, 1.0, 0.0)
FOV_H_DEGREES = 60.0
FOCUS_DIST = 1.0
BACKGROUND = RGB(0.0, 0.0, 0.2)


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Path-trace a scene into a binary PPM image.")
    parser.add_argument("--scene", choices=sorted(_SCENES), default="dlight")
    parser.add_argument("--width", type=_positive_int, default=640)
    parser.add_argument("--height", type=_positive_int, default=640)
    parser.add_argument("--spp", type=_positive_int, default=1024, help="samples per pixel")
    parser.add_argument("--no-jitter", action="store_true", help="sample pixel centres only")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", default="MyImage.ppm")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    rng = random.Random(args.seed)

    scene = Scene()
    try:
        _SCENES[args.scene](scene)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    image = ImagePPM(args.width, args.height)
    # angles in radians, with the same pi approximation as the scene setup expects
    fov_h = FOV_H_DEGREES * 3.14 / 180.0
    camera = Perspective(EYE, AT, UP, args.width, args.height, fov_h, 0.0, FOCUS_DIST, rng=rng)
    shader = PathTracingShader(scene, BACKGROUND, rng=rng)
    renderer = StandardRenderer(
        camera, scene, image, shader, args.spp, not args.no_jitter, rng=rng, progress=sys.stderr
    )

    start = time.process_time()
    renderer.render()
    elapsed = time.process_time() - start

    try:
        image.save(args.output)
    except OSError as exc:
        print(f"error: can't write {args.output}: {exc}", file=sys.stderr)
        return 1

    print(f"Rendering time = {elapsed:.3f} secs\n")
    print("That's all, folks!")
    return 0 if math.isfinite(elapsed) else 1


if __name__ == "__main__":
    sys.exit(main())