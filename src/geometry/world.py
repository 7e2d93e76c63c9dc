# geometry/world.py
from typing import Iterable, Optional, Tuple
from camera.camera import Camera
from core.color import Color
from geometry.hittable import Hittable
from materials.light import Light

class Scene:
    """
    Everything a render pass reads: the primitives, the point lights, the
    camera and the color returned by rays that hit nothing.

    Things and lights are frozen into tuples at construction. Their order is
    significant: among primitives hit at the same distance the earlier one
    wins, and light contributions are summed in list order.
    """
    def __init__(self, things: Iterable[Hittable], lights: Iterable[Light],
                 camera: Camera, background: Optional[Color] = None):
        self.things: Tuple[Hittable, ...] = tuple(things)
        self.lights: Tuple[Light, ...] = tuple(lights)
        self.camera = camera
        self.background = background if background is not None else Color.background()

    def __repr__(self) -> str:
        return (f"Scene({len(self.things)} things, {len(self.lights)} lights, "
                f"camera={self.camera!r})")
