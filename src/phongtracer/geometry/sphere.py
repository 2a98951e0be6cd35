# geometry/sphere.py
import math
from typing import List, Optional
from phongtracer.core.errors import GeometryError
from phongtracer.core.matrix import Matrix4x4
from phongtracer.core.tuple import Tuple, dot, point
from phongtracer.geometry.hittable import Hittable
from phongtracer.geometry.ray import Ray
from phongtracer.materials.material import Material


class Sphere(Hittable):
    """
    A unit sphere around its origin, placed and sized in the world by its
    transform. The radius is recorded but the intersection always solves
    for radius 1: use scaling() for larger spheres.
    """
    def __init__(self, origin: Optional[Tuple] = None, radius: float = 1.0,
                 transform: Optional[Matrix4x4] = None, material: Optional[Material] = None):
        super().__init__(transform, material)
        origin = origin if origin is not None else point(0, 0, 0)
        if not origin.is_point:
            raise GeometryError(f"The origin of a sphere must be a point, got {origin!r}.")
        self._origin = origin
        self._radius = float(radius)

    @classmethod
    def unit(cls) -> "Sphere":
        """The sphere of radius 1 centered at the world origin."""
        return cls(point(0, 0, 0), 1.0)

    @property
    def origin(self) -> Tuple:
        return self._origin

    @property
    def radius(self) -> float:
        return self._radius

    def local_intersect(self, local_ray: Ray) -> List[float]:
        sphere_to_ray = local_ray.origin - self.origin
        a = dot(local_ray.direction, local_ray.direction)
        b = 2 * dot(local_ray.direction, sphere_to_ray)
        c = dot(sphere_to_ray, sphere_to_ray) - 1
        discriminant = b * b - 4 * a * c

        if a == 0 or discriminant < 0:
            return []

        # A tangent ray yields the same t twice.
        sqrt_disc = math.sqrt(discriminant)
        t1 = (-b - sqrt_disc) / (2 * a)
        t2 = (-b + sqrt_disc) / (2 * a)
        return [t1, t2]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return local_point - self.origin

    def __repr__(self) -> str:
        return f"Sphere({self.origin!r}, {self.radius})"
