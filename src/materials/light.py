# materials/light.py
from core.color import Color
from core.vector import Vector3

class Light:
    """
    A point light. Its color is also its intensity; there is no falloff.
    """
    __slots__ = ("pos", "color")

    def __init__(self, pos: Vector3, color: Color):
        self.pos = pos
        self.color = color

    def __repr__(self) -> str:
        return f"Light({self.pos!r}, {self.color!r})"
