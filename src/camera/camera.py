# camera/camera.py
from core.vector import Vector3
from core.ray import Ray

# The image plane spans 1.5 units of the right/up basis per unit of forward.
VIEW_SCALE = 1.5

class Camera:
    def __init__(self, position: Vector3, look_at: Vector3):
        self.position = position
        self.look_at = look_at

        # The basis is fixed at construction
        down = Vector3(0.0, -1.0, 0.0)
        self.forward = (look_at - position).normalize()
        self.right = self.forward.cross(down).normalize() * VIEW_SCALE
        self.up = self.forward.cross(self.right).normalize() * VIEW_SCALE

    def get_direction(self, x: float, y: float, width: int, height: int) -> Vector3:
        """Unit direction through pixel (x, y) of a width x height image."""
        recenter_x = (x - (width / 2.0)) / 2.0 / width
        recenter_y = -(y - (height / 2.0)) / 2.0 / height
        return (self.forward + (self.right * recenter_x + self.up * recenter_y)).normalize()

    def get_ray(self, x: float, y: float, width: int, height: int) -> Ray:
        """Generates the primary ray through pixel (x, y)."""
        return Ray(self.position, self.get_direction(x, y, width, height))

    def __repr__(self) -> str:
        return f"Camera({self.position!r}, look_at={self.look_at!r})"
