"""Surface materials deciding how light scatters off and leaves a hit point."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pathtracer.ray import Ray
from pathtracer.vec3 import Vec3

if TYPE_CHECKING:
    from pathtracer.geometry import HitRecord


class Material(ABC):
    """Base class for materials."""

    @abstractmethod
    def scatter(self, ray: Ray, hit: HitRecord) -> tuple[Ray, Vec3] | None:
        """Return the scattered ray and its attenuation, or None if absorbed."""

    def emitted(self, ray: Ray, hit: HitRecord) -> Vec3:
        """Return the light emitted at the hit point; black by default."""
        return Vec3.zeros()


@dataclass(frozen=True)
class Lambertian(Material):
    """An ideal diffuse surface with cosine-weighted scattering."""

    albedo: Vec3

    def scatter(self, ray: Ray, hit: HitRecord) -> tuple[Ray, Vec3] | None:
        local_dir = Vec3.rand_hemisphere_cosine()
        tangent, bitangent = hit.normal.extend_to_onb()
        world_dir = (
            tangent * local_dir.x + bitangent * local_dir.y + hit.normal * local_dir.z
        )
        scatter_dir = hit.normal + world_dir
        return Ray(hit.point, scatter_dir), self.albedo


@dataclass(frozen=True)
class Emissive(Material):
    """A light source that emits a fixed colour and scatters nothing."""

    emitted_color: Vec3

    def scatter(self, ray: Ray, hit: HitRecord) -> tuple[Ray, Vec3] | None:
        return None

    def emitted(self, ray: Ray, hit: HitRecord) -> Vec3:
        return self.emitted_color