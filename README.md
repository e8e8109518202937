# vitrace

vitrace is a small ray tracer written in pure Python, with no dependencies outside
the standard library. It renders scenes built from triangles and spheres, lit by
ambient, point and triangular area lights, and writes the result as a binary PPM (P6)
image.

## Contents

- `vitrace.vector`: `Vector`, `Point` and `Vec2` (texture coordinates). All three are immutable.
- `vitrace.rgb`: `RGB`, a colour with floating-point channels, plus `luminance()` and `is_zero()`.
- `vitrace.ray`: `Ray`, `RayType` and `Intersection`, the record of a hit.
- `vitrace.bbox`: `BoundingBox`, an axis-aligned box tested with a conservative slab test.
- `vitrace.geometry`: `Sphere`, `Triangle` (Möller–Trumbore intersection, barycentric texture
  coordinates, optional back-face culling) and `Primitive`, which pairs a shape with a material index.
- `vitrace.brdf`: `BRDF`, a material described by its `ka`, `kd`, `ks` and `kt` colours and `eta`.
  Also `DiffuseTexture`, whose diffuse colour is looked up in a PPM texture
  (`DiffuseTexture.from_file`).
- `vitrace.lights`: `AmbientLight`, `PointLight` and `AreaLight`. An area light is a one-sided
  triangle that is sampled uniformly over its area.
- `vitrace.scene`: `Scene`, which holds the materials, primitives and lights.
  - `trace(ray)` returns the nearest `Intersection`, or `None` when nothing is hit.
  - `visibility(ray, max_distance)` runs shadow tests.
  - `summary()` returns a one-line description of the scene.
- `vitrace.camera`: `Perspective`, a pinhole camera. With a positive `defocus_angle` it
  becomes a thin-lens camera. Angles are given in radians.
- `vitrace.sampling`: `reflect`, `refract`, and uniform and cosine-weighted hemisphere sampling.
- `vitrace.direct`: `direct_lighting`, which either sums every light or estimates from one
  light chosen at random (`DirectSampleMode`).
- Shaders. Each provides `shade(isect, depth)`, where a miss is passed as `None`.
  - `vitrace.shader`: `AmbientShader`, and `DummyShader`, which colours each pixel by its position.
  - `vitrace.whitted`: `WhittedShader`. It traces mirror and refraction rays up to depth 3 and
    takes direct light from ambient and point lights.
  - `vitrace.distributed`: `DistributedShader`. It also traces specular rays, and samples one
    light at random per hit, including area lights.
  - `vitrace.pathtracing`: `PathTracingShader`. At each bounce it picks one lobe in proportion
    to its luminance. It uses Russian roulette and cosine-weighted diffuse bounces, with
    one-sample direct lighting.
- `vitrace.renderer`:
  - `StandardRenderer` averages `spp` samples per pixel, with optional jitter within each pixel.
  - `DummyRenderer` shades pixel positions without tracing any rays.
- `vitrace.image`: `Image`, a frame buffer. Also `ImagePPM`, which saves with Reinhard tone
  mapping and clamping (`save`, `to_bytes`) and reads P6 files (`ImagePPM.load`).
- `vitrace.postprocess`: `reinhard_tone_map`, `box_filter` (3×3) and `median_filter` (5×5).
- Scene builders:
  - `vitrace.scenes` has helpers such as `add_material`, `add_triangle` and `add_sphere`, and
    the small scenes `single_tri_scene`, `spheres_scene`, `spheres_tri_scene` and
    `defocus_tri_scene`.
  - `vitrace.cornell` has `cornell_box`, `diffuse_cornell_box` and `dlight_challenge`.

## Installation

```
pip install .
```

## Command line

```
vitrace [--scene {cornell,diffuse-cornell,dlight}] [--width N] [--height N]
        [--spp N] [--no-jitter] [--seed N] [--output FILE]
```

This command builds one of the box scenes and renders it with `PathTracingShader`. It then
writes the image, by default to `MyImage.ppm`, and prints the CPU time the render took.

| Option | Default |
| --- | --- |
| `--scene` | `dlight` |
| `--width` | 640 |
| `--height` | 640 |
| `--spp` | 1024 |
| `--output` | `MyImage.ppm` |

- The viewpoint is fixed, and the field of view is 60°.
- `--no-jitter` samples only the centre of each pixel.
- `--seed` makes a render repeatable.
- Progress, as the current row number, is written to standard error.

Every box scene needs the textures `Dog.ppm` and `UMinho.ppm` in the working directory.
If a texture is missing or unreadable, the command prints an error and exits with status 1.

Pure Python is slow: for a quick preview, try something like
`vitrace --width 64 --height 64 --spp 4`.

## Library use

```python
from vitrace.scene import Scene
from vitrace.scenes import spheres_tri_scene
from vitrace.camera import Perspective
from vitrace.vector import Point, Vector
from vitrace.image import ImagePPM
from vitrace.rgb import RGB
from vitrace.whitted import WhittedShader
from vitrace.renderer import StandardRenderer

scene = Scene()
spheres_tri_scene(scene)

width, height = 160, 160
camera = Perspective(Point(0, 0, 0), Point(0, 0, 1), Vector(0, 1, 0),
                     width, height, 60 * 3.14 / 180)
image = ImagePPM(width, height)
shader = WhittedShader(scene, RGB(0.1, 0.1, 0.8))

StandardRenderer(camera, scene, image, shader, spp=4, jitter=True).render()
image.save("spheres.ppm")
```

To make a render repeatable, pass a `random.Random` as `rng`. `Perspective`,
`StandardRenderer`, `DistributedShader` and `PathTracingShader` all accept one.

## Limitations

- Output is written only to PPM files. There is no window or live preview of a render in progress.
- Every ray is tested against every primitive. There is no acceleration structure.
- Rendering runs in a single process.
- The only file format read is binary PPM, and only for textures. There is no loader for
  scene or mesh files: scenes are built in Python.

## Tests

```
pip install .[test]
pytest
```