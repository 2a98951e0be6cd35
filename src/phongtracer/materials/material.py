# materials/material.py
from typing import Optional
from phongtracer.core.color import Color
from phongtracer.core.utils import clamp


class Clamped:
    """
    Descriptor for a float attribute bounded to [low, high].
    Out of range values are clamped on assignment instead of rejected.
    """
    def __init__(self, low: float, high: float):
        self.low = low
        self.high = high

    def __set_name__(self, owner, name):
        self.name = '_' + name

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return getattr(instance, self.name)

    def __set__(self, instance, value: float):
        setattr(instance, self.name, clamp(float(value), self.low, self.high))


class Material:
    """
    Surface material of the Phong reflection model.
    """
    ambient = Clamped(0.0, 1.0)
    diffuse = Clamped(0.0, 1.0)
    specular = Clamped(0.0, 1.0)
    # Sharpness of the highlight: 10 is very large, 200 very small.
    shininess = Clamped(10.0, 200.0)

    def __init__(self, color: Optional[Color] = None, ambient: float = 0.1,
                 diffuse: float = 0.9, specular: float = 0.9, shininess: float = 200.0):
        self.color = color if color is not None else Color.WHITE
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess

    def __eq__(self, other) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return (self.color == other.color and self.ambient == other.ambient and
                self.diffuse == other.diffuse and self.specular == other.specular and
                self.shininess == other.shininess)

    __hash__ = None

    def __repr__(self) -> str:
        return (f"Material(color={self.color!r}, ambient={self.ambient}, diffuse={self.diffuse}, "
                f"specular={self.specular}, shininess={self.shininess})")
