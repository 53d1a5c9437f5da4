"""Three-component vector used for points, directions and colours."""

from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass
from typing import Union

Scalar = Union[int, float]


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector with the usual arithmetic."""

    x: float
    y: float
    z: float

    @classmethod
    def random(cls) -> Vec3:
        """Return a uniformly distributed unit vector."""
        return cls(
            _random.gauss(0.0, 1.0),
            _random.gauss(0.0, 1.0),
            _random.gauss(0.0, 1.0),
        ).normalize()

    @classmethod
    def rand_disk(cls) -> Vec3:
        """Sample the unit disk in the xy-plane with the concentric mapping."""
        u_offset = 2.0 * _random.random() - 1.0
        v_offset = 2.0 * _random.random() - 1.0
        if u_offset == 0.0 and v_offset == 0.0:
            return cls.zeros()

        if abs(u_offset) > abs(v_offset):
            theta = math.pi / 4.0 * (v_offset / u_offset)
            r = u_offset
        else:
            theta = math.pi / 2.0 - math.pi / 4.0 * (u_offset / v_offset)
            r = v_offset

        return r * cls(math.cos(theta), math.sin(theta), 0.0)

    @classmethod
    def rand_hemisphere(cls) -> Vec3:
        """Sample the upper (z >= 0) unit hemisphere uniformly."""
        z = _random.random()
        r = math.sqrt(1.0 - z * z)
        phi = 2.0 * math.pi * _random.random()
        return cls(r * math.cos(phi), r * math.sin(phi), z)

    @classmethod
    def rand_hemisphere_cosine(cls) -> Vec3:
        """Sample the upper unit hemisphere with a cosine-weighted density."""
        d = cls.rand_disk()
        z = math.sqrt(max(0.0, 1.0 - d.x * d.x - d.y * d.y))
        return cls(d.x, d.y, z)

    @classmethod
    def zeros(cls) -> Vec3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def lerp(cls, a: Vec3, b: Vec3, t: float) -> Vec3:
        """Linearly interpolate between ``a`` (t=0) and ``b`` (t=1)."""
        return a * (1.0 - t) + b * t

    def extend_to_onb(self) -> tuple[Vec3, Vec3]:
        """Return a tangent and bitangent completing an orthonormal basis."""
        helper = Vec3(0.0, 1.0, 0.0) if abs(self.x) > 0.99 else Vec3(1.0, 0.0, 0.0)
        tangent = self.cross(helper).normalize()
        bitangent = tangent.cross(self)
        return tangent, bitangent

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def norm_sq(self) -> float:
        return self.dot(self)

    def norm(self) -> float:
        return math.sqrt(self.norm_sq())

    def normalize(self) -> Vec3:
        return self / self.norm()

    def min(self) -> float:
        return min(self.x, self.y, self.z)

    def max(self) -> float:
        return max(self.x, self.y, self.z)

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def __abs__(self) -> Vec3:
        return Vec3(abs(self.x), abs(self.y), abs(self.z))

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, other: Vec3 | Scalar) -> Vec3:
        """Component-wise product with a vector, or scaling by a number."""
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __rmul__(self, other: Scalar) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, other: Scalar) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(self.x / other, self.y / other, self.z / other)
        return NotImplemented