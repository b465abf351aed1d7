"""Unit tests for camera ray generation."""

import math

import pytest

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Point3, Vector3


def make_camera(**kwargs):
    params = dict(image_width=8, image_height=4, vfov=90.0,
                  look_from=Point3(0, 0, 5), look_at=Point3(0, 0, 0))
    params.update(kwargs)
    camera = Camera(**params)
    camera.initialize()
    return camera


class TestCameraBasis:
    def test_orthonormal_basis(self):
        camera = make_camera()
        assert camera.w == Vector3(0, 0, 1)
        assert camera.u == Vector3(1, 0, 0)
        assert camera.v == Vector3(0, 1, 0)

    def test_viewport_matches_fov_and_aspect(self):
        camera = make_camera(vfov=60.0, focus_dist=2.0)
        assert camera.viewport_height == pytest.approx(2.0 * math.tan(math.radians(30)) * 2.0)
        assert camera.viewport_width == pytest.approx(camera.viewport_height * 2.0)

    def test_get_ray_before_initialize_raises(self, rng):
        camera = Camera(8, 4)
        with pytest.raises(RuntimeError):
            camera.get_ray(0, 0, rng)


class TestCameraRays:
    def test_top_left_pixel_points_up_and_left(self, sequence_rng):
        camera = make_camera()
        ray = camera.get_ray(0, 0, sequence_rng(random=[0.5, 0.5]))
        assert ray.origin == Point3(0, 0, 5)
        assert ray.direction.x < 0
        assert ray.direction.y > 0
        assert ray.direction.z < 0

    def test_bottom_right_pixel_points_down_and_right(self, sequence_rng):
        camera = make_camera()
        ray = camera.get_ray(7, 3, sequence_rng(random=[0.5, 0.5]))
        assert ray.direction.x > 0
        assert ray.direction.y < 0

    def test_rays_stay_inside_their_pixel(self, rng):
        camera = make_camera(focus_dist=1.0)
        for _ in range(100):
            ray = camera.get_ray(3, 1, rng)
            # Target on the focus plane, one unit in front of the eye
            target = ray.origin + ray.direction
            col = (target.x + camera.viewport_width / 2) / camera.pixel_delta_u.x
            row = (camera.viewport_height / 2 - target.y) / -camera.pixel_delta_v.y
            assert 3 <= col <= 4
            assert 1 <= row <= 2

    def test_without_defocus_rays_start_at_eye(self, rng):
        camera = make_camera()
        for _ in range(20):
            assert camera.get_ray(2, 2, rng).origin == Point3(0, 0, 5)

    def test_defocus_origins_lie_on_lens(self, rng):
        camera = make_camera(defocus_angle=10.0, focus_dist=5.0)
        radius = 5.0 * math.tan(math.radians(5.0))
        origins = [camera.get_ray(4, 2, rng).origin for _ in range(200)]

        for origin in origins:
            offset = origin - Point3(0, 0, 5)
            assert offset.z == pytest.approx(0.0)
            assert offset.length() < radius
        assert len({(o.x, o.y) for o in origins}) > 1
