import dataclasses

import pytest

from roguekit import colors
from roguekit.colors import Color


def test_named_colours_hold_their_values():
    assert colors.AliceBlue == Color(240, 248, 255)
    assert colors.WHITE == Color(255, 255, 255)
    assert colors.BLACK == Color(0, 0, 0)
    assert colors.SEPIA == Color(127, 101, 63)


def test_palette_quirks_are_kept():
    assert colors.Cyan == Color(0, 0, 255)
    assert colors.Blue == Color(0, 0, 255)
    assert colors.Yellow == Color(255, 0, 0)
    assert colors.Red == Color(255, 0, 0)
    assert colors.CYAN == Color(0, 255, 255)


def test_default_colour_is_black():
    assert Color() == colors.BLACK


@pytest.mark.parametrize("args", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_out_of_range_channel_rejected(args):
    with pytest.raises(ValueError):
        Color(*args)


def test_non_integer_channel_rejected():
    with pytest.raises(ValueError):
        Color(1.5, 0, 0)


def test_colours_are_immutable_and_hashable():
    c = Color(10, 20, 30)
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.r = 5
    assert {c: "x"}[Color(10, 20, 30)] == "x"