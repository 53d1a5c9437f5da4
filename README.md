# pathtracer

A small Monte Carlo path tracer. It renders a Cornell box to a PNG image. The box has:

- a white back wall, floor and ceiling
- a red left wall and a green right wall
- a square area light in the ceiling
- a blue diffuse sphere

## Installation

```
pip install .
```

## Rendering from the command line

```
pathtracer
```

With no options, the command renders the Cornell box at 600×600 pixels with 100 samples
per pixel. It writes the result to `output.png` in the current directory. These options
change that:

| Option | Default | Meaning |
| --- | --- | --- |
| `--width N` | 600 | image width in pixels |
| `--height N` | 600 | image height in pixels |
| `--samples N` | 100 | jittered samples per pixel |
| `--output PATH` | `output.png` | file to write; Pillow picks the format from the extension |

Width, height and samples must be positive integers. The camera's aspect ratio follows
the width and height. For example, a quick preview:

```
pathtracer --width 64 --height 64 --samples 8 --output preview.png
```

Rendering is CPU-bound, single-threaded pure Python, so full-size renders take a long
time.

## Using it as a library

Each module can also be used on its own.

- `pathtracer.vec3.Vec3`
  - An immutable 3-component vector (`x`, `y`, `z`).
  - Operators: `+`, `-`, unary `-`, `abs()`, `*` (component-wise with another vector,
    or scaling by a number on either side) and `/` by a number.
  - Methods: `dot`, `cross`, `norm`, `norm_sq`, `normalize`, `min`, `max` and
    `extend_to_onb`. The last returns a tangent and bitangent that complete an
    orthonormal basis.
  - Class methods: `zeros` and `lerp`, plus the random sampling helpers. `random`
    gives a uniform unit vector. `rand_disk` samples the unit disk with a concentric
    mapping. `rand_hemisphere` samples the hemisphere uniformly, and
    `rand_hemisphere_cosine` samples it with cosine weighting.
- `pathtracer.ray.Ray`
  - A ray with an `origin`, a `direction` and a `[t_min, t_max]` interval. By default
    `t_min` is `0.01` and `t_max` is infinity.
  - `Ray.at(t)` returns the point at parameter `t`.
- `pathtracer.geometry`
  - `Sphere(center, radius, material)` and `Plane(center, normal, size, material)`
    both derive from `SceneObject`.
  - A `Plane` is a square patch. A point counts as on it when its largest coordinate
    offset from `center` is at most `size`.
  - `ray_intersection(ray)` returns a `HitRecord` (`t`, `point`, `normal`, `material`)
    or `None`. For a plane, the hit normal faces the incoming ray.
- `pathtracer.material`
  - `Lambertian(albedo)` is a diffuse surface with cosine-weighted scattering.
  - `Emissive(emitted_color)` is a light that emits a fixed colour and scatters
    nothing.
  - Both derive from the abstract `Material`, which has `scatter(ray, hit)` and
    `emitted(ray, hit)`.
- `pathtracer.camera.Camera(position, look_at, fov, focal_length, aspect_ratio)`
  - A pinhole camera. `fov` is the vertical field of view in degrees.
  - `get_ray(s, t)` returns the ray through the image-plane point at fractions
    `(s, t)`. The point `(0, 0)` is the top-left corner of the image.
- `pathtracer.render`
  - `trace_ray(ray, objects, depth)`
  - `render_scene(objects, camera, width, height, samples_per_pixel)` returns a
    row-major list of `Vec3` colours.
  - `render_to_image(framebuffer, width, height)` returns a Pillow image. It raises
    `ValueError` if the framebuffer size does not match.
  - `vec3_to_rgb(color)`
  - `cornell_box()` returns the ready-made scene.
  - `main(argv=None)` is the command-line entry point.

A small render of the built-in scene:

```python
from pathtracer.camera import Camera
from pathtracer.render import cornell_box, render_scene, render_to_image
from pathtracer.vec3 import Vec3

width, height = 64, 64
camera = Camera(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, 1.0), 60.0, 1.0, width / height)
framebuffer = render_scene(cornell_box(), camera, width, height, 8)
render_to_image(framebuffer, width, height).save("preview.png")
```

## How colours are handled

- Colours are linear.
- `vec3_to_rgb` clamps each channel to `[0, 1]` and applies a 1/2.2 gamma before it
  converts to 8-bit RGB. NaN channels become 0.
- Rays that leave the scene pick up a constant grey background of 0.2.
- `render_scene` follows each path for at most 20 bounces.

## What it does not do

- The command renders only the built-in Cornell box. There is no scene file format, so
  other scenes must be built in Python.
- There are no reflective or refractive materials, no textures and no parallel
  rendering.

## Running the tests

```
pip install ".[test]"
pytest
```