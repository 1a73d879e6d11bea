import math
import pytest

from colourado.palette.schemes import (
    SCHEMES,
    effective_divergence,
    palette_dark,
    palette_pastel,
    palette_random,
)
from colourado.types import PaletteType, MIN_DIVERGENCE


def test_every_palette_type_has_a_scheme():
    assert set(SCHEMES) == set(PaletteType)


def test_first_step_values():
    assert palette_random(0, 0.0, 80.0) == pytest.approx((80.0, 0.4, 0.85))
    # cos(0) == 1 feeds the hue perturbation of the cosine schemes
    assert palette_dark(0, 10.0, 80.0) == pytest.approx((91.0, 0.32, 0.1 + 1.0 / 6.0))
    assert palette_pastel(0, 10.0, 80.0) == pytest.approx((91.0, 0.2, 1.0))


def test_closed_form_at_iteration_seven():
    i = 7.0
    h, s, v = palette_dark(7, 100.0, 25.0)
    assert h == pytest.approx(100.0 + 25.0 + abs(math.cos(43.0 * i)))
    assert s == pytest.approx(0.32 + abs(math.sin(0.75 * i) / 2.0))
    assert v == pytest.approx(0.1 + abs(math.cos(i) / 6.0))

    h, s, v = palette_pastel(7, 100.0, 25.0)
    assert h == pytest.approx(100.0 + 25.0 + abs(math.cos(25.0 * i)))
    assert s == pytest.approx(abs(math.cos(0.35 * i) / 5.0))
    assert v == pytest.approx(0.5 + abs(math.cos(i) / 2.0))

    h, s, v = palette_random(7, 100.0, 25.0)
    assert h == pytest.approx((100.0 + 25.0 + abs(math.tan(55.0 * i))) % 360.0)
    assert s == pytest.approx(max(abs(math.sin(0.35 * i)), 0.4))
    assert v == pytest.approx(min(max(abs(math.cos(6.33 * i * 0.5)), 0.2), 0.85))


@pytest.mark.parametrize("base, expected", [(0.0, 15.0), (5.0, 15.0), (15.0, 15.0), (25.0, 25.0), (80.0, 80.0)])
def test_effective_divergence_floor(base, expected):
    assert effective_divergence(base) == expected


@pytest.mark.parametrize("scheme", [palette_random, palette_pastel, palette_dark])
def test_divergence_never_below_floor(scheme):
    for base in (-10.0, 0.0, 3.0, 14.9):
        h, _, _ = scheme(0, 0.0, base)
        assert h >= MIN_DIVERGENCE


@pytest.mark.parametrize("scheme", [palette_random, palette_pastel, palette_dark])
def test_hue_wraps(scheme):
    for i in range(200):
        h, _, _ = scheme(i, 350.0, 80.0)
        assert 0.0 <= h < 360.0


def test_saturation_value_ranges():
    for i in range(500):
        _, s, v = palette_random(i, 0.0, 80.0)
        assert 0.4 <= s <= 1.0
        assert 0.2 <= v <= 0.85

        _, s, v = palette_dark(i, 0.0, 80.0)
        assert 0.32 <= s <= 0.82 + 1e-12
        assert 0.1 <= v <= 0.1 + 1.0 / 6.0 + 1e-12

        _, s, v = palette_pastel(i, 0.0, 80.0)
        assert 0.0 <= s <= 0.2 + 1e-12
        assert 0.5 <= v <= 1.0 + 1e-12
