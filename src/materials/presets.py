# materials/presets.py
from core.color import Color
from core.scalar import floor
from core.vector import Vector3
from materials.surface import Surface

def shiny_diffuse(pos: Vector3) -> Color:
    return Color.white()

def shiny_specular(pos: Vector3) -> Color:
    return Color.grey()

def shiny_reflect(pos: Vector3) -> float:
    return 0.7

def _odd_square(pos: Vector3) -> bool:
    return (floor(pos.z) + floor(pos.x)) % 2 != 0

def checkerboard_diffuse(pos: Vector3) -> Color:
    """White on odd unit squares of the xz grid, black on even ones."""
    return Color.white() if _odd_square(pos) else Color.black()

def checkerboard_specular(pos: Vector3) -> Color:
    return Color.white()

def checkerboard_reflect(pos: Vector3) -> float:
    return 0.1 if _odd_square(pos) else 0.7

SHINY = Surface(shiny_diffuse, shiny_specular, shiny_reflect, 100)
CHECKERBOARD = Surface(checkerboard_diffuse, checkerboard_specular, checkerboard_reflect, 1)


def uniform(diffuse: Color, specular: Color = None, reflect: float = 0.0,
            roughness: int = 1) -> Surface:
    """
    Create a surface whose properties do not vary with position.
    The specular color defaults to the diffuse color.
    """
    if specular is None:
        specular = diffuse

    def _diffuse(pos: Vector3) -> Color:
        return diffuse

    def _specular(pos: Vector3) -> Color:
        return specular

    def _reflect(pos: Vector3) -> float:
        return reflect

    return Surface(_diffuse, _specular, _reflect, roughness)


class SurfacePresets:
    """Predefined surfaces built on uniform()."""

    @staticmethod
    def matte(color: Color) -> Surface:
        return uniform(color, Color.black(), 0.0, 1)

    @staticmethod
    def mirror(reflect: float = 1.0) -> Surface:
        return uniform(Color.black(), Color.black(), reflect, 1)

    @staticmethod
    def glossy(color: Color, reflect: float = 0.3, roughness: int = 50) -> Surface:
        return uniform(color, Color.grey(), reflect, roughness)
