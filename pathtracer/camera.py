"""Pinhole camera generating primary rays."""

from __future__ import annotations

import math

from pathtracer.ray import Ray
from pathtracer.vec3 import Vec3

_WORLD_UP = Vec3(0.0, 1.0, 0.0)


class Camera:
    """A pinhole camera; image coordinates (0, 0) map to the top left."""

    def __init__(
        self,
        position: Vec3,
        look_at: Vec3,
        fov: float,
        focal_length: float,
        aspect_ratio: float,
    ) -> None:
        forward = (look_at - position).normalize()
        # negated so the image is not mirrored
        right = -(forward.cross(_WORLD_UP).normalize())
        up = right.cross(forward)

        half_height = math.tan(math.radians(fov) / 2.0)
        viewport_height = 2.0 * half_height
        viewport_width = viewport_height * aspect_ratio

        self.position = position
        self.forward = forward
        self.fov = fov
        self.focal_length = focal_length
        self.horizontal = right * viewport_width * focal_length
        self.vertical = up * viewport_height * focal_length
        self.lower_left_corner = (
            position
            + forward * focal_length
            - self.horizontal * 0.5
            - self.vertical * 0.5
        )

    def get_ray(self, s: float, t: float) -> Ray:
        """Return the ray through the image-plane point at fractions (s, t)."""
        direction = (
            self.lower_left_corner
            + self.horizontal * s
            + self.vertical * t
            - self.position
        )
        return Ray(self.position, direction)