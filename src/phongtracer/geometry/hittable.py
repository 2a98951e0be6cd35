# geometry/hittable.py
from typing import List, Optional
from phongtracer.core.errors import WrongOperandKindError
from phongtracer.core.matrix import Matrix4x4
from phongtracer.core.tuple import Tuple, vector
from phongtracer.geometry.intersection import Intersection
from phongtracer.geometry.ray import Ray
from phongtracer.materials.material import Material


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.

    Geometry is defined in object space and placed into world space by the
    transform. Subclasses only implement the object space math in
    local_intersect() and local_normal_at().
    """
    def __init__(self, transform: Optional[Matrix4x4] = None, material: Optional[Material] = None):
        self.transform = transform if transform is not None else Matrix4x4.IDENTITY.copy()
        self.material = material if material is not None else Material()
        self._inverse_key = None
        self._inverse = None

    @property
    def inverse_transform(self) -> Matrix4x4:
        # Recomputed whenever the transform was reassigned or edited in place.
        key = self.transform.elements.tobytes()
        if key != self._inverse_key:
            self._inverse = self.transform.inverse
            self._inverse_key = key
        return self._inverse

    def intersect(self, ray: Ray) -> List[Intersection]:
        local_ray = ray.transformed(self.inverse_transform)
        return [Intersection(t, self) for t in self.local_intersect(local_ray)]

    def normal_at(self, world_point: Tuple) -> Tuple:
        """
        Returns the world space surface normal at the given point.
        """
        if not world_point.is_point:
            raise WrongOperandKindError(f"Normals are computed at points, got {world_point!r}.")
        inverse = self.inverse_transform
        object_normal = self.local_normal_at(inverse * world_point)
        # Normals transform with the inverse transpose. The translation part
        # leaks into w, which is reset so the result stays a vector.
        world_normal = inverse.transposed() * object_normal
        return vector(world_normal.x, world_normal.y, world_normal.z).normalize()

    def local_intersect(self, local_ray: Ray) -> List[float]:
        raise NotImplementedError("local_intersect() must be implemented by subclasses.")

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        raise NotImplementedError("local_normal_at() must be implemented by subclasses.")
