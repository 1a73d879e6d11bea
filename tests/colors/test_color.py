import math
import numpy as np
import pytest

from colourado.colors import Color

samples_hex = {
    (0.0, 0.0, 1.0): "#FFFFFF",
    (0.0, 0.0, 0.0): "#000000",
    (0.0, 1.0, 1.0): "#FF0000",
    (0.482 * 360.0, 0.714, 0.878): "#40E0CF",
    (0.051 * 360.0, 0.718, 0.627): "#A0502D",
}


def test_to_hex():
    for (h, s, v), hex_expected in samples_hex.items():
        assert Color.from_hsv(h, s, v).to_hex() == hex_expected


def test_to_hex_rounds_half_up():
    assert Color((0.5, 0.5, 0.5)).to_hex() == "#808080"
    assert str(Color((1.0, 0.0, 0.0))) == "#FF0000"


def test_round_trip_through_color():
    colors = [
        (20.85, 0.51, 0.7051166),
        (130.67574, 0.85, 0.51),
        (7.302415, 0.85, 0.7659915),
        (0.43018022, 0.11269033, 0.85),
    ]
    for hue, saturation, value in colors:
        h, s, v = Color.from_hsv(hue, saturation, value).to_hsv()
        assert abs(hue - h) < 3e-5
        assert abs(saturation - s) < 3e-5
        assert abs(value - v) < 3e-5


def test_gray_has_undefined_hue():
    h, s, v = Color((0.4, 0.4, 0.4)).to_hsv()
    assert math.isnan(h)
    assert s == 0.0
    assert v == pytest.approx(0.4)


def test_accessors():
    color = Color((0.25, 0.5, 0.75))
    assert color.to_tuple() == (0.25, 0.5, 0.75)
    assert (color.red, color.green, color.blue) == (0.25, 0.5, 0.75)
    assert tuple(color) == (0.25, 0.5, 0.75)

    arr = color.to_array()
    assert arr.dtype == np.float32
    assert arr.shape == (3,)
    assert np.allclose(arr, [0.25, 0.5, 0.75])

    rgba = color.to_rgba_array()
    assert rgba.dtype == np.float32
    assert rgba.shape == (4,)
    assert np.allclose(rgba, [0.25, 0.5, 0.75, 1.0])


def test_construction_from_array_and_color():
    color = Color(np.array([0.1, 0.2, 0.3], dtype=np.float32))
    assert all(isinstance(c, float) for c in color.value)
    assert Color(color) == color


def test_values_are_clamped():
    assert Color((1.5, -0.2, 0.5)).value == (1.0, 0.0, 0.5)


@pytest.mark.parametrize("value", [(0.1, 0.2), (0.1, 0.2, 0.3, 0.4)])
def test_wrong_channel_count_raises(value):
    with pytest.raises(ValueError):
        Color(value)


def test_immutable():
    color = Color((0.1, 0.2, 0.3))
    with pytest.raises(AttributeError):
        color._value = (0.0, 0.0, 0.0)
    with pytest.raises(AttributeError):
        color.red = 1.0
    with pytest.raises(AttributeError):
        color.extra = 1


def test_equality_and_hash():
    a = Color.from_hsv(200.0, 0.5, 0.5)
    b = Color.from_hsv(200.0, 0.5, 0.5)
    c = Color.from_hsv(201.0, 0.5, 0.5)
    assert a == b
    assert a != c
    assert len({a, b, c}) == 2
    assert a != (a.red, a.green, a.blue)


@pytest.mark.parametrize("hue", [math.inf, -math.inf, math.nan])
def test_from_hsv_accepts_non_finite_hue(hue):
    assert Color.from_hsv(hue, 0.6, 1.0).to_hex() == "#666666"
