# core/transformations.py
"""
Builders for the 4x4 matrices that move, resize, rotate and skew geometry.

Transformations compose by multiplication and apply right to left:
``translation(10, 5, 7) * scaling(5, 5, 5) * rotation_x(math.pi / 2)``
rotates first, then scales, then translates.
"""
import math
from phongtracer.core.matrix import Matrix4x4


def radians(degrees: float) -> float:
    return (degrees / 180) * math.pi


def translation(x: float, y: float, z: float) -> Matrix4x4:
    return Matrix4x4([
        [1, 0, 0, x],
        [0, 1, 0, y],
        [0, 0, 1, z],
        [0, 0, 0, 1],
    ])


def scaling(x: float, y: float, z: float) -> Matrix4x4:
    return Matrix4x4([
        [x, 0, 0, 0],
        [0, y, 0, 0],
        [0, 0, z, 0],
        [0, 0, 0, 1],
    ])


def rotation_x(angle: float, degrees: bool = False) -> Matrix4x4:
    """
    Rotation around the x axis.
    The angle is given in radians unless degrees is set.
    """
    r = radians(angle) if degrees else angle
    return Matrix4x4([
        [1, 0,           0,            0],
        [0, math.cos(r), -math.sin(r), 0],
        [0, math.sin(r), math.cos(r),  0],
        [0, 0,           0,            1],
    ])


def rotation_y(angle: float, degrees: bool = False) -> Matrix4x4:
    r = radians(angle) if degrees else angle
    return Matrix4x4([
        [math.cos(r),  0, math.sin(r), 0],
        [0,            1, 0,           0],
        [-math.sin(r), 0, math.cos(r), 0],
        [0,            0, 0,           1],
    ])


def rotation_z(angle: float, degrees: bool = False) -> Matrix4x4:
    r = radians(angle) if degrees else angle
    return Matrix4x4([
        [math.cos(r), -math.sin(r), 0, 0],
        [math.sin(r), math.cos(r),  0, 0],
        [0,           0,            1, 0],
        [0,           0,            0, 1],
    ])


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix4x4:
    """
    Moves each component in proportion to the other two, e.g. xy moves x
    in proportion to y.
    """
    return Matrix4x4([
        [1,  xy, xz, 0],
        [yx, 1,  yz, 0],
        [zx, zy, 1,  0],
        [0,  0,  0,  1],
    ])
