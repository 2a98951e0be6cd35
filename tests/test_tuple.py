from __future__ import annotations

import math

import pytest

from phongtracer.core.errors import (
    DegenerateVectorError,
    InvalidTupleCombinationError,
    WrongOperandKindError,
)
from phongtracer.core.tuple import Tuple, cross, dot, point, reflect, vector


def test_tuple_with_w_one_is_a_point_and_w_zero_is_a_vector() -> None:
    p = Tuple(4.3, -4.2, 3.1, 1.0)
    v = Tuple(4.3, -4.2, 3.1, 0.0)
    assert p.is_point and not p.is_vector
    assert v.is_vector and not v.is_point
    assert (p.x, p.y, p.z, p.w) == (4.3, -4.2, 3.1, 1.0)


def test_factories_set_w() -> None:
    assert point(4, -4, 3) == Tuple(4, -4, 3, 1)
    assert vector(4, -4, 3) == Tuple(4, -4, 3, 0)
    assert point(1, 2, 3).is_point
    assert vector(1, 2, 3).is_vector


def test_equality_tolerates_rounding_errors() -> None:
    assert point(1, 2, 3) == point(1.000001, 2, 2.999999)
    assert point(1, 2, 3) != point(1.0001, 2, 3)
    assert point(1, 2, 3) != vector(1, 2, 3)


def test_adding_tuples() -> None:
    assert Tuple(3, -2, 5, 1) + Tuple(-2, 3, 1, 0) == Tuple(1, 1, 6, 1)
    assert vector(5, 6, 7) + point(3, 2, 1) == point(8, 8, 8)
    assert point(3, 2, 1) + vector(5, 6, 7) == point(8, 8, 8)
    assert vector(3, 2, 1) + vector(5, 6, 7) == vector(8, 8, 8)


def test_adding_two_points_fails() -> None:
    with pytest.raises(InvalidTupleCombinationError):
        point(1, 2, 3) + point(4, 5, 6)


def test_subtracting_tuples() -> None:
    assert point(3, 2, 1) - point(5, 6, 7) == vector(-2, -4, -6)
    assert point(3, 2, 1) - vector(5, 6, 7) == point(-2, -4, -6)
    assert vector(3, 2, 1) - vector(5, 6, 7) == vector(-2, -4, -6)
    assert Tuple.ZERO - vector(1, -2, 3) == vector(-1, 2, -3)


def test_subtracting_a_point_from_a_vector_fails() -> None:
    with pytest.raises(InvalidTupleCombinationError):
        vector(1, 2, 3) - point(1, 2, 3)


def test_negating_and_scaling() -> None:
    a = Tuple(1, -2, 3, -4)
    assert -a == Tuple(-1, 2, -3, 4)
    assert a * 3.5 == Tuple(3.5, -7, 10.5, -14)
    assert 0.5 * a == Tuple(0.5, -1, 1.5, -2)
    assert a / 2 == Tuple(0.5, -1, 1.5, -2)


@pytest.mark.parametrize(
    ("v", "expected"),
    [
        (vector(1, 0, 0), 1.0),
        (vector(0, 1, 0), 1.0),
        (vector(0, 0, 1), 1.0),
        (vector(1, 2, 3), math.sqrt(14)),
        (vector(-1, -2, -3), math.sqrt(14)),
    ],
)
def test_magnitude(v: Tuple, expected: float) -> None:
    assert v.magnitude() == pytest.approx(expected)


def test_normalizing() -> None:
    assert vector(4, 0, 0).normalize() == vector(1, 0, 0)
    assert vector(1, 2, 3).normalize() == vector(0.26726, 0.53452, 0.80178)


@pytest.mark.parametrize("v", [vector(1, 2, 3), vector(-7, 0.5, 12), vector(0, 0, 1e-3)])
def test_normalized_vector_has_unit_length_and_same_direction(v: Tuple) -> None:
    n = v.normalize()
    assert n.magnitude() == pytest.approx(1.0, abs=1e-5)
    assert n * v.magnitude() == v


def test_normalizing_the_zero_vector_fails() -> None:
    with pytest.raises(DegenerateVectorError):
        vector(0, 0, 0).normalize()


def test_dot_product() -> None:
    assert dot(vector(1, 2, 3), vector(2, 3, 4)) == 20
    assert vector(1, 2, 3).dot(vector(2, 3, 4)) == 20


def test_cross_product() -> None:
    a = vector(1, 2, 3)
    b = vector(2, 3, 4)
    assert cross(a, b) == vector(-1, 2, -1)
    assert b.cross(a) == vector(1, -2, 1)


def test_cross_product_requires_vectors() -> None:
    with pytest.raises(WrongOperandKindError):
        cross(point(1, 2, 3), vector(2, 3, 4))


def test_reflecting_a_vector_approaching_at_45_degrees() -> None:
    assert reflect(vector(1, -1, 0), vector(0, 1, 0)) == vector(1, 1, 0)


def test_reflecting_a_vector_off_a_slanted_surface() -> None:
    n = vector(math.sqrt(2) / 2, math.sqrt(2) / 2, 0)
    assert vector(0, -1, 0).reflect(n) == vector(1, 0, 0)


def test_reflect_requires_vectors() -> None:
    with pytest.raises(WrongOperandKindError):
        reflect(point(1, -1, 0), vector(0, 1, 0))
    with pytest.raises(WrongOperandKindError):
        reflect(vector(1, -1, 0), point(0, 1, 0))


def test_tuples_are_immutable() -> None:
    p = point(1, 2, 3)
    with pytest.raises(AttributeError):
        p.w = 0.5
    with pytest.raises(AttributeError):
        p.x = 0
    assert p.is_point
    assert p == point(1, 2, 3)


def test_the_zero_tuple_can_not_be_edited() -> None:
    with pytest.raises(AttributeError):
        Tuple.ZERO.x = 1
    assert Tuple.ZERO == Tuple(0, 0, 0, 0)
