"""Path tracing of a scene into an image, and the command that renders a Cornell box."""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Sequence

from PIL import Image

from pathtracer.camera import Camera
from pathtracer.geometry import HitRecord, Plane, SceneObject, Sphere
from pathtracer.material import Emissive, Lambertian
from pathtracer.ray import Ray
from pathtracer.vec3 import Vec3

WIDTH = 600
HEIGHT = 600
SAMPLES_PER_PIXEL = 100
MAX_DEPTH = 20
BACKGROUND = Vec3(0.2, 0.2, 0.2)
_GAMMA = 1.0 / 2.2


def _channel(value: float) -> int:
    if math.isnan(value):
        return 0
    clamped = min(max(value, 0.0), 1.0)
    return int(clamped**_GAMMA * 255.0)


def vec3_to_rgb(color: Vec3) -> tuple[int, int, int]:
    """Convert a linear colour to gamma-corrected 8-bit RGB."""
    return _channel(color.x), _channel(color.y), _channel(color.z)


def render_to_image(framebuffer: Sequence[Vec3], width: int, height: int) -> Image.Image:
    """Build an RGB image from a row-major framebuffer."""
    if len(framebuffer) != width * height:
        raise ValueError(
            f"framebuffer holds {len(framebuffer)} pixels, expected {width * height}"
        )
    img = Image.new("RGB", (width, height))
    img.putdata([vec3_to_rgb(color) for color in framebuffer])
    return img


def trace_ray(ray: Ray, objects: Sequence[SceneObject], depth: int) -> Vec3:
    """Return the radiance arriving along ``ray``, following up to ``depth`` bounces."""
    if depth == 0:
        return Vec3.zeros()

    closest: HitRecord | None = None
    for obj in objects:
        hit = obj.ray_intersection(ray)
        if hit is not None and (closest is None or hit.t < closest.t):
            closest = hit

    if closest is None:
        return BACKGROUND

    emitted = closest.material.emitted(ray, closest)
    scattered = closest.material.scatter(ray, closest)
    if scattered is None:
        return emitted
    out_ray, attenuation = scattered
    return emitted + attenuation * trace_ray(out_ray, objects, depth - 1)


def render_scene(
    objects: Sequence[SceneObject],
    camera: Camera,
    width: int,
    height: int,
    samples_per_pixel: int,
) -> list[Vec3]:
    """Render the scene into a row-major list of averaged pixel colours."""
    framebuffer = []
    for y in range(height):
        for x in range(width):
            color = Vec3.zeros()
            for _ in range(samples_per_pixel):
                jitter_x = random.uniform(-0.5, 0.5)
                jitter_y = random.uniform(-0.5, 0.5)
                ray = camera.get_ray((x + jitter_x) / width, (y + jitter_y) / height)
                color = color + trace_ray(ray, objects, MAX_DEPTH)
            framebuffer.append(color / samples_per_pixel)
    return framebuffer


def cornell_box() -> list[SceneObject]:
    """Return the objects of a Cornell box with a ceiling light and a blue ball."""
    white = Lambertian(Vec3(1.0, 1.0, 1.0))
    return [
        Plane(Vec3(0.0, 0.999, 2.0), Vec3(0.0, -1.0, 0.0), 0.2,
              Emissive(Vec3(1.0, 1.0, 1.0))),
        Plane(Vec3(0.0, 0.0, 3.0), Vec3(0.0, 0.0, -1.0), 1.0, white),
        Plane(Vec3(0.0, -1.0, 2.0), Vec3(0.0, 1.0, 0.0), 1.0, white),
        Plane(Vec3(0.0, 1.0, 2.0), Vec3(0.0, -1.0, 0.0), 1.0, white),
        Plane(Vec3(1.0, 0.0, 2.0), Vec3(-1.0, 0.0, 0.0), 1.0,
              Lambertian(Vec3(0.0, 1.0, 0.0))),
        Plane(Vec3(-1.0, 0.0, 2.0), Vec3(1.0, 0.0, 0.0), 1.0,
              Lambertian(Vec3(1.0, 0.0, 0.0))),
        Sphere(Vec3(-0.2, -0.7, 2.0), 0.3, Lambertian(Vec3(0.0, 0.0, 1.0))),
    ]


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Render the Cornell box and save it as an image file."""
    parser = argparse.ArgumentParser(description="Render a Cornell box by path tracing.")
    parser.add_argument("--width", type=_positive_int, default=WIDTH)
    parser.add_argument("--height", type=_positive_int, default=HEIGHT)
    parser.add_argument("--samples", type=_positive_int, default=SAMPLES_PER_PIXEL)
    parser.add_argument("--output", default="output.png")
    args = parser.parse_args(argv)

    camera = Camera(
        Vec3(0.0, 0.0, 0.0),
        Vec3(0.0, 0.0, 1.0),
        60.0,
        1.0,
        args.width / args.height,
    )
    framebuffer = render_scene(cornell_box(), camera, args.width, args.height, args.samples)
    render_to_image(framebuffer, args.width, args.height).save(args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())