# geometry/hittable.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray

# Tolerance for every transformed (object-space) intersection: roots at or
# below it are rejected to avoid self-intersection at the ray origin, and
# object-space directions with a smaller component along the plane normal
# count as parallel.
EPSILON = 1e-6

class Intersection:
    """
    Result of a hit test: the primitive that was hit, the ray that hit it,
    and the distance along that ray.
    """
    __slots__ = ("thing", "ray", "dist")

    def __init__(self, thing: "Hittable", ray: Ray, dist: float):
        self.thing = thing
        self.ray = ray
        self.dist = dist

    def position(self) -> Vector3:
        return self.ray.at(self.dist)

    def __repr__(self) -> str:
        return f"Intersection({type(self.thing).__name__}, dist={self.dist})"

class Hittable:
    """
    Base class for the primitives a ray can hit. The set of shapes is closed:
    Sphere and Plane are the only implementations.
    """
    __slots__ = ()

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        raise NotImplementedError("intersect() must be implemented by subclasses.")

    def get_normal(self, pos: Vector3) -> Vector3:
        raise NotImplementedError("get_normal() must be implemented by subclasses.")
