"""
phongtracer: the mathematical core of a ray tracer.

Homogeneous tuples, fixed-size matrices, transformations, ray-sphere
intersection and Phong shading, plus a small canvas with a PPM codec.
"""
from phongtracer.core.tuple import Tuple, point, vector, dot, cross, reflect
from phongtracer.core.color import Color
from phongtracer.core.matrix import Matrix2x2, Matrix3x3, Matrix4x4
from phongtracer.core.transformations import (
    translation, scaling, rotation_x, rotation_y, rotation_z, shearing
)
from phongtracer.geometry.ray import Ray
from phongtracer.geometry.sphere import Sphere
from phongtracer.geometry.intersection import Intersection, intersections, hit
from phongtracer.materials.material import Material
from phongtracer.lighting.point_light import PointLight
from phongtracer.lighting.phong import lighting
from phongtracer.renderer.canvas import Canvas

__version__ = "0.1.0"
