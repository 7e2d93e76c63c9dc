# geometry/sphere.py
import math
from typing import Optional
from core.scalar import sqrt
from core.vector import Vector3
from core.ray import Ray
from core.transform import Transform
from geometry.hittable import EPSILON, Hittable, Intersection
from materials.surface import Surface

class Sphere(Hittable):
    """
    A sphere defined by its center, radius and surface.

    Without a transform the center and radius are world-space values. With a
    transform they describe the sphere in object space (the unit sphere at the
    origin for Sphere.transformed) and the transform places it in the world.
    """
    __slots__ = ("center", "radius", "surface", "transform")

    def __init__(self, center: Vector3, radius: float, surface: Surface,
                 transform: Optional[Transform] = None):
        self.center = center
        self.radius = radius
        self.surface = surface
        self.transform = transform

    @classmethod
    def transformed(cls, surface: Surface, transform: Transform) -> "Sphere":
        return cls(Vector3(0, 0, 0), 1.0, surface, transform)

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        if self.transform is not None:
            return self._intersect_transformed(ray)
        return self._intersect_world(ray)

    def _intersect_world(self, ray: Ray) -> Optional[Intersection]:
        # Geometric solution: project the center onto the ray and reject as
        # soon as the sphere lies behind the origin. A ray starting inside
        # the sphere is rejected (dist < 0).
        eo = self.center - ray.origin
        v = eo.dot(ray.direction)
        if v < 0:
            return None
        disc = self.radius * self.radius - (eo.dot(eo) - v * v)
        if disc < 0:
            return None
        dist = v - sqrt(disc)
        if dist < 0:
            return None
        return Intersection(self, ray, dist)

    def _intersect_transformed(self, ray: Ray) -> Optional[Intersection]:
        origin = self.transform.inverse_point(ray.origin)
        direction = self.transform.inverse_vector(ray.direction)
        # The object-space direction's length is how much the transform
        # shrank the world direction; t is rescaled by it below.
        scale_factor = direction.length()
        if scale_factor == 0:
            return None
        direction = direction / scale_factor

        oc = origin - self.center
        a = direction.dot(direction)
        b = 2.0 * oc.dot(direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return None

        sqrt_d = math.sqrt(discriminant)
        t1 = (-b - sqrt_d) / (2 * a)
        t2 = (-b + sqrt_d) / (2 * a)
        if t1 > EPSILON:
            t = t1
        elif t2 > EPSILON:
            t = t2
        else:
            return None
        return Intersection(self, ray, t / scale_factor)

    def get_normal(self, pos: Vector3) -> Vector3:
        if self.transform is not None:
            obj_pos = self.transform.inverse_point(pos)
            return self.transform.normal((obj_pos - self.center).normalize())
        return (pos - self.center).normalize()

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, transformed={self.transform is not None})"
