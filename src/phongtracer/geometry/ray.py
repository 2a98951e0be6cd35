# geometry/ray.py
from phongtracer.core.errors import MalformedRayError
from phongtracer.core.matrix import Matrix4x4
from phongtracer.core.tuple import Tuple


class Ray:
    """
    Represents a ray in 3D space with an origin (a point) and a direction (a vector).
    """
    def __init__(self, origin: Tuple, direction: Tuple):
        if not origin.is_point:
            raise MalformedRayError(f"The origin of a ray must be a point, got {origin!r}.")
        if not direction.is_vector:
            raise MalformedRayError(f"The direction of a ray must be a vector, got {direction!r}.")
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Tuple:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def transformed(self, m: Matrix4x4) -> "Ray":
        return Ray(m * self.origin, m * self.direction)

    def intersect(self, obj) -> list:
        """Shorthand for obj.intersect(ray)."""
        return obj.intersect(self)

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
