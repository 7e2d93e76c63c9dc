# materials/surface.py
from typing import Callable
from core.color import Color
from core.vector import Vector3

ColorFunc = Callable[[Vector3], Color]
ReflectFunc = Callable[[Vector3], float]

class Surface:
    """
    Describes how a primitive responds to light at a given world position.

    A surface is three pure functions of the shade point plus a Phong
    exponent. It holds no state, so one instance is shared by every primitive
    that uses it.
    """
    __slots__ = ("diffuse", "specular", "reflect", "roughness")

    def __init__(self, diffuse: ColorFunc, specular: ColorFunc,
                 reflect: ReflectFunc, roughness: int):
        self.diffuse = diffuse        # Lambertian color at a point
        self.specular = specular      # Phong highlight color at a point
        self.reflect = reflect        # Mirror reflection coefficient at a point
        self.roughness = roughness    # Phong exponent

    def __repr__(self) -> str:
        return (f"Surface(diffuse={getattr(self.diffuse, '__name__', self.diffuse)}, "
                f"roughness={self.roughness})")
