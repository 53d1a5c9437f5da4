import math

import pytest

from pathtracer.geometry import HitRecord
from pathtracer.material import Emissive, Lambertian, Material
from pathtracer.ray import Ray
from pathtracer.vec3 import Vec3


def _hit(material, normal=Vec3(0.0, 1.0, 0.0), point=Vec3(1.0, 2.0, 3.0)):
    return HitRecord(t=1.0, point=point, normal=normal, material=material)


def _ray():
    return Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, -1.0, 0.0))


def test_material_is_abstract():
    with pytest.raises(TypeError):
        Material()


def test_emissive_does_not_scatter():
    mat = Emissive(Vec3(1.0, 0.5, 0.25))
    assert mat.scatter(_ray(), _hit(mat)) is None


def test_emissive_emits_its_colour():
    colour = Vec3(1.0, 0.5, 0.25)
    mat = Emissive(colour)
    assert mat.emitted(_ray(), _hit(mat)) == colour


def test_lambertian_emits_nothing():
    mat = Lambertian(Vec3(1.0, 1.0, 1.0))
    assert mat.emitted(_ray(), _hit(mat)) == Vec3.zeros()


def test_lambertian_scatter_returns_albedo_and_starts_at_hit_point():
    albedo = Vec3(0.2, 0.4, 0.6)
    mat = Lambertian(albedo)
    hit = _hit(mat)
    result = mat.scatter(_ray(), hit)
    assert result is not None
    out_ray, attenuation = result
    assert attenuation == albedo
    assert out_ray.origin == hit.point


@pytest.mark.parametrize(
    "normal",
    [
        Vec3(0.0, 1.0, 0.0),
        Vec3(1.0, 0.0, 0.0),
        Vec3(0.0, 0.0, -1.0),
        Vec3(1.0, 1.0, 1.0).normalize(),
    ],
)
def test_lambertian_scatters_into_normal_hemisphere(normal):
    mat = Lambertian(Vec3(1.0, 1.0, 1.0))
    hit = _hit(mat, normal=normal)
    for _ in range(200):
        out_ray, _ = mat.scatter(_ray(), hit)
        # direction = normal + unit vector in the normal's hemisphere
        assert out_ray.direction.dot(normal) >= 1.0 - 1e-9
        assert out_ray.direction.norm() <= 2.0 + 1e-9
        assert not math.isnan(out_ray.direction.norm())