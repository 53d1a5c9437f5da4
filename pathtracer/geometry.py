"""Scene objects that rays can intersect."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from pathtracer.material import Material
from pathtracer.ray import Ray
from pathtracer.vec3 import Vec3


@dataclass(frozen=True)
class HitRecord:
    """Where and how a ray struck a surface."""

    t: float
    point: Vec3
    normal: Vec3
    material: Material


class SceneObject(ABC):
    """Something in the scene with a material that a ray may hit."""

    material: Material

    @abstractmethod
    def ray_intersection(self, ray: Ray) -> HitRecord | None:
        """Return the nearest hit within the ray's interval, or None."""


@dataclass(frozen=True)
class Sphere(SceneObject):
    center: Vec3
    radius: float
    material: Material

    def ray_intersection(self, ray: Ray) -> HitRecord | None:
        oc = ray.origin - self.center
        a = ray.direction.norm_sq()
        b = 2.0 * ray.direction.dot(oc)
        c = oc.norm_sq() - self.radius * self.radius

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        t1 = (-b - sqrt_disc) / (2.0 * a)
        t2 = (-b + sqrt_disc) / (2.0 * a)
        if ray.t_min <= t1 <= ray.t_max:
            t = t1
        elif ray.t_min <= t2 <= ray.t_max:
            t = t2
        else:
            return None

        point = ray.at(t)
        normal = (point - self.center).normalize()
        return HitRecord(t, point, normal, self.material)


@dataclass(frozen=True)
class Plane(SceneObject):
    """An axis-aligned square patch of half-width ``size`` around ``center``.

    A point counts as inside when its largest coordinate offset from the
    centre is at most ``size``, so a negative size never hits.
    """

    center: Vec3
    normal: Vec3
    size: float
    material: Material

    def ray_intersection(self, ray: Ray) -> HitRecord | None:
        normal = self.normal.normalize()
        d_dot_n = ray.direction.dot(normal)
        c_minus_o_dot_n = (self.center - ray.origin).dot(normal)

        if abs(d_dot_n) < 0.001:
            return None

        t = c_minus_o_dot_n / d_dot_n
        if t < ray.t_min or t > ray.t_max:
            return None

        hit_point = ray.at(t)
        if abs(hit_point - self.center).max() > self.size:
            return None

        facing = normal if d_dot_n < 0.0 else -normal
        return HitRecord(t, hit_point, facing, self.material)