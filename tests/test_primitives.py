"""Tests for sphere and plane intersection and normals."""

import math

import pytest

from core.ray import Ray
from core.transform import Transform
from core.vector import Vector3
from geometry.hittable import EPSILON
from geometry.plane import Plane
from geometry.sphere import Sphere
from materials.presets import CHECKERBOARD, SHINY


def assert_vec(actual, expected, tol=1e-9):
    assert actual.x == pytest.approx(expected.x, abs=tol)
    assert actual.y == pytest.approx(expected.y, abs=tol)
    assert actual.z == pytest.approx(expected.z, abs=tol)


class TestWorldSphere:
    """Spheres given directly in world space."""

    def test_hit_toward_center(self):
        sphere = Sphere(Vector3(0, 0, -5), 1.0, SHINY)
        isect = sphere.intersect(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)))
        assert isect is not None
        assert isect.dist == pytest.approx(4.0)
        assert isect.thing is sphere

    def test_aimed_away_misses(self):
        sphere = Sphere(Vector3(0, 0, -5), 1.0, SHINY)
        assert sphere.intersect(Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))) is None

    def test_passing_beside_misses(self):
        sphere = Sphere(Vector3(0, 0, -5), 1.0, SHINY)
        assert sphere.intersect(Ray(Vector3(2, 0, 0), Vector3(0, 0, -1))) is None

    def test_origin_inside_is_rejected(self):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, SHINY)
        assert sphere.intersect(Ray(Vector3(0, 0, 0.5), Vector3(0, 0, -1))) is None

    def test_normal(self):
        sphere = Sphere(Vector3(1, 1, 1), 2.0, SHINY)
        assert_vec(sphere.get_normal(Vector3(1, 3, 1)), Vector3(0, 1, 0))


class TestTransformedSphere:
    """Unit spheres placed by a transform."""

    def test_scaled_and_translated_hit_distance_is_world_distance(self):
        xform = Transform.compose(Transform.scale(2, 2, 2), Transform.translate(0, 0, -5))
        sphere = Sphere.transformed(SHINY, xform)
        isect = sphere.intersect(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)))
        assert isect is not None
        assert isect.dist == pytest.approx(3.0)

    def test_matches_world_sphere(self):
        world = Sphere(Vector3(1, 0.5, -4), 1.5, SHINY)
        xform = Transform.scale(1.5, 1.5, 1.5).then(Transform.translate(1, 0.5, -4))
        transformed = Sphere.transformed(SHINY, xform)
        ray = Ray(Vector3(0, 0, 0), Vector3(0.2, 0.1, -1).normalize())
        assert transformed.intersect(ray).dist == pytest.approx(world.intersect(ray).dist)

    def test_origin_inside_hits_far_side(self):
        sphere = Sphere.transformed(SHINY, Transform.scale(3, 3, 3))
        isect = sphere.intersect(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)))
        assert isect.dist == pytest.approx(3.0)

    def test_behind_ray_misses(self):
        sphere = Sphere.transformed(SHINY, Transform.translate(0, 0, 5))
        assert sphere.intersect(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))) is None

    def test_roots_within_epsilon_are_rejected(self):
        # Leaving the surface outward: the only roots are ~0 and negative.
        sphere = Sphere.transformed(SHINY, Transform.identity())
        isect = sphere.intersect(Ray(Vector3(1, 0, 0), Vector3(1, 0, 0)))
        assert isect is None
        assert EPSILON == 1e-6

    def test_normal_of_ellipsoid(self):
        sphere = Sphere.transformed(SHINY, Transform.scale(2, 1, 1))
        point = Vector3(math.sqrt(2), 1 / math.sqrt(2), 0)
        assert_vec(sphere.get_normal(point), Vector3(1, 2, 0).normalize())

    def test_normal_of_translated_sphere(self):
        sphere = Sphere.transformed(SHINY, Transform.translate(0, 0, -5))
        assert_vec(sphere.get_normal(Vector3(0, 0, -4)), Vector3(0, 0, 1))


class TestWorldPlane:
    """Front-facing world-space planes."""

    def test_hit_from_above(self):
        plane = Plane(Vector3(0, 1, 0), 0.0, CHECKERBOARD)
        isect = plane.intersect(Ray(Vector3(0, 2, 0), Vector3(0, -1, 0)))
        assert isect.dist == pytest.approx(2.0)

    def test_offset(self):
        # n . p + offset == 0 is the plane y = 1 here.
        plane = Plane(Vector3(0, 1, 0), -1.0, CHECKERBOARD)
        isect = plane.intersect(Ray(Vector3(0, 3, 0), Vector3(0, -1, 0)))
        assert isect.dist == pytest.approx(2.0)

    def test_parallel_ray_misses(self):
        plane = Plane(Vector3(0, 1, 0), 0.0, CHECKERBOARD)
        assert plane.intersect(Ray(Vector3(0, 1, 0), Vector3(1, 0, 0))) is None

    def test_ray_moving_away_misses(self):
        plane = Plane(Vector3(0, 1, 0), 0.0, CHECKERBOARD)
        assert plane.intersect(Ray(Vector3(0, 1, 0), Vector3(0, 1, 0))) is None

    def test_normal_is_stored_normal(self):
        plane = Plane(Vector3(0, 1, 0), 0.0, CHECKERBOARD)
        assert plane.get_normal(Vector3(5, 0, 5)) == Vector3(0, 1, 0)


class TestTransformedPlane:
    """The xz plane placed by a transform."""

    def test_translated_plane(self):
        plane = Plane.transformed(CHECKERBOARD, Transform.translate(0, -1, 0))
        isect = plane.intersect(Ray(Vector3(0, 0, 0), Vector3(0, -1, 0)))
        assert isect.dist == pytest.approx(1.0)

    def test_hit_from_below(self):
        plane = Plane.transformed(CHECKERBOARD, Transform.identity())
        isect = plane.intersect(Ray(Vector3(0, -2, 0), Vector3(0, 1, 0)))
        assert isect.dist == pytest.approx(2.0)

    def test_scaled_plane_distance_is_world_distance(self):
        xform = Transform.scale(1, 4, 1).then(Transform.translate(0, 1, 0))
        plane = Plane.transformed(CHECKERBOARD, xform)
        isect = plane.intersect(Ray(Vector3(0, 3, 0), Vector3(0, -1, 0)))
        assert isect.dist == pytest.approx(2.0)

    def test_parallel_ray_misses(self):
        plane = Plane.transformed(CHECKERBOARD, Transform.translate(0, -1, 0))
        assert plane.intersect(Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))) is None

    def test_plane_behind_ray_misses(self):
        plane = Plane.transformed(CHECKERBOARD, Transform.translate(0, -1, 0))
        assert plane.intersect(Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))) is None

    def test_rotated_normal(self):
        plane = Plane.transformed(CHECKERBOARD, Transform.rotate_z(math.pi / 2))
        assert_vec(plane.get_normal(Vector3(0, 0, 0)), Vector3(-1, 0, 0))
