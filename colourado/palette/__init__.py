"""
colourado Palettes
==================

Infinite, deterministic palette generators.

>>> from colourado.palette import ColorPalette
>>> from colourado.types import PaletteType
>>> palette = ColorPalette(PaletteType.PASTEL, adjacent_colors=True, rng=7)
>>> colors = palette.take(5)        # list of Color
>>> hexes = palette.take_hex(3)     # the next three, as '#RRGGBB'

``HsvPalette`` emits the raw ``(hue, saturation, value)`` triples instead.

Neither generator ever raises StopIteration: always bound the number of
colors with ``take`` or ``itertools.islice``.
"""

from .schemes import SCHEMES, palette_dark, palette_pastel, palette_random, effective_divergence
from .hsv_palette import HsvPalette
from .color_palette import ColorPalette
from .random_source import resolve_random_source, starting_hue

__all__ = [
    'HsvPalette',
    'ColorPalette',
    'SCHEMES',
    'palette_dark',
    'palette_pastel',
    'palette_random',
    'effective_divergence',
    'resolve_random_source',
    'starting_hue',
]
