# renderer/canvas.py
import numpy as np
from PIL import Image
from core.color import Color

def to_byte(channel: float) -> int:
    """
    Clamps a linear channel value to [0, 1] and scales it to 0-255.
    NaN is stored as 0.
    """
    if not channel > 0.0:
        return 0
    if channel >= 1.0:
        return 255
    return int(channel * 255.0)

class Canvas:
    """
    An 8-bit RGB pixel buffer the ray tracer writes into.

    Pixels are stored row-major in a (height, width, 3) uint8 array. Writes to
    distinct pixels touch distinct cells, so several render threads may fill
    one canvas at once.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)

    def set_pixel(self, x: int, y: int, color: Color):
        # Writes outside the image are ignored.
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y, x] = (to_byte(color.r), to_byte(color.g), to_byte(color.b))

    def get_pixel(self, x: int, y: int) -> tuple:
        r, g, b = self.pixels[y, x]
        return int(r), int(g), int(b)

    def clear(self):
        self.pixels.fill(0)

    def to_rgb_array(self) -> np.ndarray:
        """A copy of the buffer as a (height, width, 3) uint8 array."""
        return self.pixels.copy()

    def to_rgba8888(self) -> np.ndarray:
        """The buffer packed as one uint32 per pixel: r<<24 | g<<16 | b<<8 | 0xFF."""
        rgb = self.pixels.astype(np.uint32)
        return (rgb[..., 0] << 24) | (rgb[..., 1] << 16) | (rgb[..., 2] << 8) | np.uint32(0xFF)

    def save(self, path: str):
        """Writes the canvas to an image file; the format follows the extension."""
        Image.fromarray(self.to_rgb_array()).save(path)
