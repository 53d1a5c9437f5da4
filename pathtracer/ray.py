"""Rays with a valid parameter interval."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pathtracer.vec3 import Vec3

EPSILON = 1e-2


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line ``origin + t * direction`` valid for ``t_min <= t <= t_max``."""

    origin: Vec3
    direction: Vec3
    t_min: float = EPSILON
    t_max: float = math.inf

    def at(self, t: float) -> Vec3:
        """Return the point at parameter ``t`` along the ray."""
        return self.origin + self.direction * t