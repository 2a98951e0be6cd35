from __future__ import annotations

import pytest

from phongtracer.core.color import Color


def test_colors_are_red_green_blue_tuples() -> None:
    c = Color(-0.5, 0.4, 1.7)
    assert (c.red, c.green, c.blue) == (-0.5, 0.4, 1.7)
    assert tuple(c) == (-0.5, 0.4, 1.7)


def test_adding_and_subtracting_colors() -> None:
    assert Color(0.9, 0.6, 0.75) + Color(0.7, 0.1, 0.25) == Color(1.6, 0.7, 1.0)
    assert Color(0.9, 0.6, 0.75) - Color(0.7, 0.1, 0.25) == Color(0.2, 0.5, 0.5)


def test_multiplying_a_color_by_a_scalar() -> None:
    assert Color(0.2, 0.3, 0.4) * 2 == Color(0.4, 0.6, 0.8)
    assert 2 * Color(0.2, 0.3, 0.4) == Color(0.4, 0.6, 0.8)


def test_multiplying_colors_is_the_hadamard_product() -> None:
    assert Color(1, 0.2, 0.4) * Color(0.9, 1, 0.1) == Color(0.9, 0.2, 0.04)


def test_named_colors() -> None:
    assert Color.BLACK == Color(0, 0, 0)
    assert Color.WHITE == Color(1, 1, 1)
    assert Color.RED == Color(1, 0, 0)
    assert Color.GREEN == Color(0, 1, 0)
    assert Color.BLUE == Color(0, 0, 1)


def test_colors_are_immutable() -> None:
    c = Color(0.2, 0.3, 0.4)
    with pytest.raises(AttributeError):
        c.red = 0
    with pytest.raises(AttributeError):
        del c.blue
    assert c == Color(0.2, 0.3, 0.4)


def test_named_colors_can_not_be_edited() -> None:
    with pytest.raises(AttributeError):
        Color.WHITE.green = 0
    assert Color.WHITE == Color(1, 1, 1)
