# lighting/point_light.py
from phongtracer.core.color import Color
from phongtracer.core.errors import MalformedPointLightError
from phongtracer.core.tuple import Tuple


class PointLight:
    """
    A light source with no size, emitting from a single point in space.
    """
    def __init__(self, position: Tuple, intensity: Color):
        if not position.is_point:
            raise MalformedPointLightError(f"A point light must be positioned at a point, got {position!r}.")
        self.position = position
        self.intensity = intensity

    def __repr__(self) -> str:
        return f"PointLight({self.position!r}, {self.intensity!r})"
