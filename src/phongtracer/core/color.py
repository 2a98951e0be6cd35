# core/color.py
from phongtracer.core.utils import equal


class Color:
    """
    An RGB color. Channels are unbounded while shading and only get
    clamped when a canvas is encoded.
    """
    __slots__ = ('red', 'green', 'blue')

    def __init__(self, red: float, green: float, blue: float):
        object.__setattr__(self, "red", float(red))
        object.__setattr__(self, "green", float(green))
        object.__setattr__(self, "blue", float(blue))

    def __setattr__(self, name, value):
        raise AttributeError(f"Color is immutable, can't set {name!r}.")

    def __delattr__(self, name):
        raise AttributeError(f"Color is immutable, can't delete {name!r}.")

    def __iter__(self):
        yield self.red
        yield self.green
        yield self.blue

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (equal(self.red, other.red) and equal(self.green, other.green) and
                equal(self.blue, other.blue))

    __hash__ = None

    def __add__(self, other: "Color") -> "Color":
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: "Color") -> "Color":
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other):
        # Scalar multiplication scales the intensity.
        if isinstance(other, (int, float)):
            return Color(self.red * other, self.green * other, self.blue * other)
        # Hadamard product blends two colors.
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return NotImplemented

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(1, 1, 1)
Color.RED = Color(1, 0, 0)
Color.GREEN = Color(0, 1, 0)
Color.BLUE = Color(0, 0, 1)
