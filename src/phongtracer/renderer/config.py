# renderer/config.py
import math
from dataclasses import dataclass
from typing import Tuple
from phongtracer.core.color import Color
from phongtracer.core.transformations import rotation_z, scaling, shearing, translation
from phongtracer.core.tuple import point
from phongtracer.geometry.sphere import Sphere
from phongtracer.lighting.point_light import PointLight

# Reference scenes: a unit sphere pushed away from the camera and then
# squashed, rotated or skewed, each with its own surface color.
SCENES = {
    "translated": {
        "transform": translation(0, 0, 1.5),
        "color": Color(136 / 255, 176 / 255, 75 / 255),   # greenery
    },
    "scaled": {
        "transform": scaling(1, 0.5, 1) * translation(0, 0, 1.5),
        "color": Color(255 / 255, 111 / 255, 97 / 255),   # living coral
    },
    "rotated": {
        "transform": rotation_z(math.pi / 4) * scaling(1, 0.5, 1) * translation(0, 0, 1.5),
        "color": Color(52 / 255, 86 / 255, 139 / 255),    # classic blue
    },
    "skewed": {
        "transform": shearing(1, 0, 0, 0, 0, 0) * scaling(0.5, 1, 1) * translation(0, 0, 2),
        "color": Color(107 / 255, 91 / 255, 149 / 255),   # ultra violet
    },
}


@dataclass
class RenderConfig:
    """Configuration of a single sphere render."""
    size: int = 100
    scene: str = "translated"
    light_position: Tuple[float, float, float] = (-10.0, 10.0, -10.0)
    light_intensity: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    output: str = "sphere.ppm"
    show: bool = False

    def __post_init__(self):
        # The camera divides by (size - 1) // 2, which must not be zero.
        if self.size < 3:
            raise ValueError(f"The canvas size must be at least 3 pixels, got {self.size}.")
        if self.scene not in SCENES:
            raise ValueError(f"Unknown scene {self.scene!r}, expected one of {', '.join(SCENES)}.")

    def build_sphere(self) -> Sphere:
        preset = SCENES[self.scene]
        sphere = Sphere.unit()
        sphere.transform = preset["transform"].copy()
        sphere.material.color = preset["color"]
        return sphere

    def build_light(self) -> PointLight:
        return PointLight(point(*self.light_position), Color(*self.light_intensity))
