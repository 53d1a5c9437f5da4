import math

import pytest

from pathtracer.camera import Camera
from pathtracer.vec3 import Vec3


def _close(a, b, tol=1e-9):
    return (a - b).norm() < tol


@pytest.fixture
def camera():
    return Camera(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, 1.0), 60.0, 1.0, 1.0)


def test_forward_is_unit_towards_target():
    cam = Camera(Vec3(1.0, 2.0, 3.0), Vec3(1.0, 2.0, 8.0), 45.0, 2.0, 1.5)
    assert _close(cam.forward, Vec3(0.0, 0.0, 1.0))
    assert cam.fov == 45.0
    assert cam.focal_length == 2.0


def test_centre_ray_points_forward(camera):
    ray = camera.get_ray(0.5, 0.5)
    assert ray.origin == camera.position
    assert _close(ray.direction.normalize(), camera.forward)


def test_corner_ray(camera):
    ray = camera.get_ray(0.0, 0.0)
    half = math.tan(math.radians(30.0))
    assert ray.origin == camera.position
    assert ray.direction.x == pytest.approx(-half)
    assert ray.direction.y == pytest.approx(half)
    assert ray.direction.z == pytest.approx(1.0)


def test_axes_are_orthogonal(camera):
    assert math.isclose(camera.horizontal.dot(camera.vertical), 0.0, abs_tol=1e-12)
    assert math.isclose(camera.horizontal.dot(camera.forward), 0.0, abs_tol=1e-12)
    assert math.isclose(camera.vertical.dot(camera.forward), 0.0, abs_tol=1e-12)


def test_aspect_ratio_scales_width():
    cam = Camera(Vec3.zeros(), Vec3(0.0, 0.0, 1.0), 60.0, 1.0, 2.0)
    assert math.isclose(cam.horizontal.norm() / cam.vertical.norm(), 2.0)


def test_focal_length_scales_viewport():
    near = Camera(Vec3.zeros(), Vec3(0.0, 0.0, 1.0), 60.0, 1.0, 1.0)
    far = Camera(Vec3.zeros(), Vec3(0.0, 0.0, 1.0), 60.0, 3.0, 1.0)
    assert math.isclose(far.vertical.norm(), 3.0 * near.vertical.norm())


def test_image_orientation(camera):
    # s grows to the right (+x) and t grows downwards (-y) for this setup
    assert camera.get_ray(1.0, 0.5).direction.x > 0.0
    assert camera.get_ray(0.5, 1.0).direction.y < 0.0


def test_wider_fov_gives_larger_viewport():
    narrow = Camera(Vec3.zeros(), Vec3(0.0, 0.0, 1.0), 30.0, 1.0, 1.0)
    wide = Camera(Vec3.zeros(), Vec3(0.0, 0.0, 1.0), 90.0, 1.0, 1.0)
    assert wide.vertical.norm() > narrow.vertical.norm()