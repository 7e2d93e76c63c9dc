# geometry/scenes.py
"""
Demonstration scenes for the application.
"""
import math
from camera.camera import Camera
from core.color import Color
from core.transform import Transform
from core.vector import Vector3
from geometry.plane import Plane
from geometry.sphere import Sphere
from geometry.world import Scene
from materials.light import Light
from materials.presets import CHECKERBOARD, SHINY, SurfacePresets

def _classic_lights():
    return [
        Light(Vector3(-2.0, 2.5, 0.0), Color(0.49, 0.07, 0.07)),
        Light(Vector3(1.5, 2.5, 1.5), Color(0.07, 0.07, 0.49)),
        Light(Vector3(1.5, 2.5, -1.5), Color(0.07, 0.49, 0.071)),
        Light(Vector3(0.0, 3.5, 0.0), Color(0.21, 0.21, 0.35)),
    ]

def classic_scene() -> Scene:
    """A checkerboard floor, two shiny spheres and four colored lights."""
    things = [
        Plane(Vector3(0.0, 1.0, 0.0), 0.0, CHECKERBOARD),
        Sphere(Vector3(0.0, 1.0, -0.25), 1.0, SHINY),
        Sphere(Vector3(-1.0, 0.5, 1.5), 0.5, SHINY),
    ]
    camera = Camera(Vector3(3.0, 2.0, 4.0), Vector3(-1.0, 0.5, 0.0))
    return Scene(things, _classic_lights(), camera)

def transformed_scene() -> Scene:
    """
    The classic layout built from object-space primitives: a squashed,
    rotated ellipsoid, a glossy sphere and a floor placed by transforms.
    """
    ellipsoid = Transform.scale(1.2, 0.6, 0.8) \
        .then(Transform.rotate_y(math.radians(30))) \
        .then(Transform.translate(0.0, 0.6, -0.25))
    small = Transform.scale(0.5, 0.5, 0.5).then(Transform.translate(-1.0, 0.5, 1.5))
    things = [
        Plane.transformed(CHECKERBOARD, Transform.identity()),
        Sphere.transformed(SHINY, ellipsoid),
        Sphere.transformed(SurfacePresets.glossy(Color(0.9, 0.6, 0.1)), small),
    ]
    camera = Camera(Vector3(3.0, 2.0, 4.0), Vector3(-1.0, 0.5, 0.0))
    return Scene(things, _classic_lights(), camera)

SCENES = {
    "classic": classic_scene,
    "transformed": transformed_scene,
}
