# geometry/plane.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.transform import Transform
from geometry.hittable import EPSILON, Hittable, Intersection
from materials.surface import Surface

class Plane(Hittable):
    """
    The plane of points p with normal . p + offset == 0.

    Without a transform the plane is in world space and only its front face
    (the side the normal points to) can be hit. With a transform the normal
    and offset are object-space values (the xz plane through the origin for
    Plane.transformed) and both faces can be hit.
    """
    __slots__ = ("normal", "offset", "surface", "transform")

    def __init__(self, normal: Vector3, offset: float, surface: Surface,
                 transform: Optional[Transform] = None):
        self.normal = normal
        self.offset = offset
        self.surface = surface
        self.transform = transform

    @classmethod
    def transformed(cls, surface: Surface, transform: Transform) -> "Plane":
        return cls(Vector3(0, 1, 0), 0.0, surface, transform)

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        if self.transform is not None:
            return self._intersect_transformed(ray)
        return self._intersect_world(ray)

    def _intersect_world(self, ray: Ray) -> Optional[Intersection]:
        # Rays parallel to the plane or travelling along the normal never hit
        # the front face.
        denom = self.normal.dot(ray.direction)
        if denom >= 0:
            return None
        dist = (self.normal.dot(ray.origin) + self.offset) / (-denom)
        return Intersection(self, ray, dist)

    def _intersect_transformed(self, ray: Ray) -> Optional[Intersection]:
        origin = self.transform.inverse_point(ray.origin)
        direction = self.transform.inverse_vector(ray.direction)
        scale_factor = direction.length()
        if scale_factor == 0:
            return None
        direction = direction / scale_factor

        denom = self.normal.dot(direction)
        if abs(denom) < EPSILON:
            return None
        t = -(self.normal.dot(origin) + self.offset) / denom
        if t <= EPSILON:
            return None
        return Intersection(self, ray, t / scale_factor)

    def get_normal(self, pos: Vector3) -> Vector3:
        if self.transform is not None:
            return self.transform.normal(self.normal)
        return self.normal

    def __repr__(self) -> str:
        return f"Plane({self.normal!r}, {self.offset}, transformed={self.transform is not None})"
