from __future__ import annotations

import pytest

from phongtracer.core.color import Color
from phongtracer.materials.material import Clamped, Material


def test_the_default_material() -> None:
    m = Material()
    assert m.color == Color(1, 1, 1)
    assert m.ambient == 0.1
    assert m.diffuse == 0.9
    assert m.specular == 0.9
    assert m.shininess == 200


@pytest.mark.parametrize("name", ["ambient", "diffuse", "specular"])
def test_reflection_coefficients_are_clamped_to_the_unit_interval(name: str) -> None:
    m = Material()
    setattr(m, name, 1.5)
    assert getattr(m, name) == 1.0
    setattr(m, name, -0.2)
    assert getattr(m, name) == 0.0
    setattr(m, name, 0.42)
    assert getattr(m, name) == 0.42


def test_shininess_is_clamped_between_10_and_200() -> None:
    m = Material()
    m.shininess = 5
    assert m.shininess == 10
    m.shininess = 1000
    assert m.shininess == 200
    m.shininess = 50
    assert m.shininess == 50


def test_constructor_arguments_are_clamped_as_well() -> None:
    m = Material(color=Color(1, 0.2, 1), ambient=2, shininess=0)
    assert m.color == Color(1, 0.2, 1)
    assert m.ambient == 1.0
    assert m.shininess == 10


def test_materials_compare_by_value() -> None:
    assert Material() == Material()
    assert Material(ambient=0.5) != Material()
    assert Material(color=Color.RED) != Material()


def test_clamped_descriptor_is_visible_on_the_class() -> None:
    assert isinstance(Material.ambient, Clamped)
    assert (Material.shininess.low, Material.shininess.high) == (10.0, 200.0)


def test_materials_share_no_state_through_the_default_color() -> None:
    m = Material()
    m.color = Color(0, 1, 1)
    with pytest.raises(AttributeError):
        m.color.red = 0
    assert Material().color == Color(1, 1, 1)
    assert Color.WHITE == Color(1, 1, 1)
