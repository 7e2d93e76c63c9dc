# core/color.py

class Color:
    """
    An RGB triple used to accumulate light. Channels are not clamped here;
    clamping happens when a pixel is written to a canvas.
    """
    __slots__ = ("r", "g", "b")

    def __init__(self, r: float = 0.0, g: float = 0.0, b: float = 0.0):
        self.r = r
        self.g = g
        self.b = b

    @staticmethod
    def white() -> "Color":
        return Color(1.0, 1.0, 1.0)

    @staticmethod
    def grey() -> "Color":
        return Color(0.5, 0.5, 0.5)

    @staticmethod
    def black() -> "Color":
        return Color(0.0, 0.0, 0.0)

    @staticmethod
    def background() -> "Color":
        return Color.black()

    @staticmethod
    def default_color() -> "Color":
        return Color.black()

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other):
        # Scalar multiplication adjusts intensity, color multiplication filters.
        if isinstance(other, (int, float)):
            return self.scale(other)
        return Color(self.r * other.r, self.g * other.g, self.b * other.b)

    def __rmul__(self, k: float) -> "Color":
        return self.scale(k)

    def scale(self, k: float) -> "Color":
        return Color(k * self.r, k * self.g, k * self.b)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"
