"""Tests for the look-at camera."""

import pytest

from camera.camera import VIEW_SCALE, Camera
from core.vector import Vector3


class TestCamera:
    def test_basis(self):
        camera = Camera(Vector3(3.0, 2.0, 4.0), Vector3(-1.0, 0.5, 0.0))
        assert camera.forward.length() == pytest.approx(1.0)
        assert camera.right.length() == pytest.approx(VIEW_SCALE)
        assert camera.up.length() == pytest.approx(VIEW_SCALE)
        assert camera.forward.dot(camera.right) == pytest.approx(0.0, abs=1e-12)
        assert camera.forward.dot(camera.up) == pytest.approx(0.0, abs=1e-12)
        assert camera.right.dot(camera.up) == pytest.approx(0.0, abs=1e-12)

    def test_basis_orientation(self):
        camera = Camera(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, 0.0))
        assert camera.up.y > 0
        # right is built from forward x (0, -1, 0)
        assert camera.right.x == pytest.approx(-VIEW_SCALE)

    def test_center_pixel_looks_forward(self):
        camera = Camera(Vector3(0.0, 1.0, 5.0), Vector3(0.0, 0.0, 0.0))
        ray = camera.get_ray(50, 25, 100, 50)
        assert ray.origin == camera.position
        assert ray.direction.x == pytest.approx(camera.forward.x)
        assert ray.direction.y == pytest.approx(camera.forward.y)
        assert ray.direction.z == pytest.approx(camera.forward.z)

    def test_pixel_directions(self):
        camera = Camera(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, 0.0))
        top_left = camera.get_direction(0, 0, 100, 100)
        bottom_right = camera.get_direction(99, 99, 100, 100)
        assert top_left.length() == pytest.approx(1.0)
        assert top_left.x > 0 > bottom_right.x
        assert top_left.y > 0 > bottom_right.y
