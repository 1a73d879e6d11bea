"""
Per-scheme HSV step functions.

Each scheme is a pure function of ``(iteration, hue, base_divergence)`` that
returns the next ``(hue, saturation, value)``. The constants are aesthetic
tuning and are reproduced exactly so that a given starting hue always yields
the same palette.
"""
import math
from typing import Callable, Dict

from boundednumbers import clamp

from ..types.color_types import Hsv
from ..types.palette_type import PaletteType, MIN_DIVERGENCE, HUE_360

SchemeFunction = Callable[[int, float, float], Hsv]


def effective_divergence(base_divergence: float) -> float:
    if base_divergence < MIN_DIVERGENCE:
        return MIN_DIVERGENCE
    return base_divergence


def next_hue(hue: float, base_divergence: float, perturbation: float) -> float:
    return abs(hue + effective_divergence(base_divergence) + perturbation) % HUE_360


def palette_dark(iteration: int, hue: float, base_divergence: float) -> Hsv:
    i = float(iteration)
    f = abs(math.cos(i * 43.0))

    h = next_hue(hue, base_divergence, f)
    s = 0.32 + abs(math.sin(i * 0.75) / 2.0)
    v = 0.1 + abs(math.cos(i) / 6.0)
    return h, s, v


def palette_pastel(iteration: int, hue: float, base_divergence: float) -> Hsv:
    i = float(iteration)
    f = abs(math.cos(i * 25.0))

    h = next_hue(hue, base_divergence, f)
    s = abs(math.cos(i * 0.35) / 5.0)
    v = 0.5 + abs(math.cos(i) / 2.0)
    return h, s, v


def palette_random(iteration: int, hue: float, base_divergence: float) -> Hsv:
    i = float(iteration)
    f = abs(math.tan(i * 55.0))

    h = next_hue(hue, base_divergence, f)
    s = float(clamp(abs(math.sin(i * 0.35)), 0.4, 1.0))
    v = float(clamp(abs(math.cos((6.33 * i) * 0.5)), 0.2, 0.85))
    return h, s, v


SCHEMES: Dict[PaletteType, SchemeFunction] = {
    PaletteType.RANDOM: palette_random,
    PaletteType.PASTEL: palette_pastel,
    PaletteType.DARK: palette_dark,
}
