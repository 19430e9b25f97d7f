import pytest

from sceneforge.colors import Color
from sceneforge.material import Material


def test_default_material_is_white():
    assert Material().color == Color.white()


def test_from_rgb_matches_colour():
    assert Material.from_rgb(0.2, 0.4, 0.6).color == Color.from_rgb(0.2, 0.4, 0.6)


def test_from_rgb_clamps():
    assert Material.from_rgb(2.0, -1.0, 0.5).color.rgba() == pytest.approx(
        (1.0, 0.0, 0.5, 1.0)
    )


def test_material_copies_its_colour():
    colour = Color(0.1, 0.2, 0.3)
    material = Material(colour)
    colour.lighten(0.3)
    assert material.color.rgba() == pytest.approx((0.1, 0.2, 0.3, 1.0))