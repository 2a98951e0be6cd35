# core/tuple.py
import math
from phongtracer.core.errors import (
    DegenerateVectorError, InvalidTupleCombinationError, WrongOperandKindError
)
from phongtracer.core.utils import equal


class Tuple:
    """
    A homogeneous 4-component tuple. Points have w == 1, vectors w == 0.

    Both share the same type; whether an operation is valid depends on the
    combination of w values (e.g. adding two points is rejected).
    """
    __slots__ = ('x', 'y', 'z', 'w')

    def __init__(self, x: float, y: float, z: float, w: float):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))
        object.__setattr__(self, "w", float(w))

    def __setattr__(self, name, value):
        raise AttributeError(f"Tuple is immutable, can't set {name!r}.")

    def __delattr__(self, name):
        raise AttributeError(f"Tuple is immutable, can't delete {name!r}.")

    @property
    def is_point(self) -> bool:
        return self.w == 1.0

    @property
    def is_vector(self) -> bool:
        return self.w == 0.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (equal(self.x, other.x) and equal(self.y, other.y) and
                equal(self.z, other.z) and equal(self.w, other.w))

    __hash__ = None

    def __add__(self, other: "Tuple") -> "Tuple":
        if self.w + other.w == 2:
            raise InvalidTupleCombinationError("Adding two points is an invalid operation.")
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Tuple") -> "Tuple":
        if self.w - other.w < 0:
            raise InvalidTupleCombinationError("Subtracting a point from a vector is an invalid operation.")
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> "Tuple":
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, s: float) -> "Tuple":
        if not isinstance(s, (int, float)):
            return NotImplemented
        return Tuple(self.x * s, self.y * s, self.z * s, self.w * s)

    def __rmul__(self, s: float) -> "Tuple":
        return self.__mul__(s)

    def __truediv__(self, s: float) -> "Tuple":
        return Tuple(self.x / s, self.y / s, self.z / s, self.w / s)

    def magnitude(self) -> float:
        return math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2 + self.w ** 2)

    def normalize(self) -> "Tuple":
        m = self.magnitude()
        if m == 0:
            raise DegenerateVectorError("Normalizing a vector with a magnitude of 0 is an invalid operation.")
        return Tuple(self.x / m, self.y / m, self.z / m, self.w / m)

    def dot(self, other: "Tuple") -> float:
        return dot(self, other)

    def cross(self, other: "Tuple") -> "Tuple":
        return cross(self, other)

    def reflect(self, normal: "Tuple") -> "Tuple":
        return reflect(self, normal)

    def __repr__(self) -> str:
        if self.is_point:
            return f"point({self.x}, {self.y}, {self.z})"
        if self.is_vector:
            return f"vector({self.x}, {self.y}, {self.z})"
        return f"Tuple({self.x}, {self.y}, {self.z}, {self.w})"


Tuple.ZERO = Tuple(0.0, 0.0, 0.0, 0.0)


def point(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 0.0)


def dot(a: Tuple, b: Tuple) -> float:
    """Dot product over all four components."""
    return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w


def cross(a: Tuple, b: Tuple) -> Tuple:
    """
    3D cross product. Only defined for two vectors; the result is a vector.
    """
    if not (a.is_vector and b.is_vector):
        raise WrongOperandKindError("The cross product is only implemented for vectors.")
    return vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x
    )


def reflect(v: Tuple, n: Tuple) -> Tuple:
    """
    Reflects vector v about the normal n.
    """
    if not v.is_vector:
        raise WrongOperandKindError("Only vectors can be reflected.")
    if not n.is_vector:
        raise WrongOperandKindError("The normal of a reflection must be a vector.")
    return v - n * 2 * dot(v, n)
