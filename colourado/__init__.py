"""
colourado - Iterative Color Palette Generation
==============================================

A small library that generates an endless, deterministic sequence of colors
forming a coherent palette. A random starting hue is walked around the hue
circle, with saturation and value shaped by one of three schemes.

Key Features
------------
- Three schemes: random, pastel and dark
- Adjacent (clustered) or spread palettes
- Immutable RGB colors with HSV, hex and numpy exports
- Scalar and vectorized HSV ↔ RGB conversions
- Injectable random source for reproducible palettes

Quick Start
-----------
>>> from colourado import ColorPalette, PaletteType, Color
>>>
>>> palette = ColorPalette(PaletteType.RANDOM, adjacent_colors=False)
>>> first = next(palette)
>>> rgb = first.to_array()
>>> many = palette.take(20)
>>>
>>> Color.from_hsv(315.0, 0.5, 0.3).to_hex()
'#4D2643'

``adjacent_colors=True`` keeps consecutive hues close together, ``False``
spreads them around the hue circle.

WARNING: palettes are infinite iterators. Never call ``list()`` on one or
loop over it without a bound; use ``take(n)``.

Modules
-------
- colors: the Color value type
- conversions: HSV ↔ RGB conversion functions
- palette: HsvPalette and ColorPalette generators
- types: PaletteType and shared constants
"""

from .colors import Color
from .conversions import (
    hsv_to_unit_rgb, np_hsv_to_unit_rgb,
    unit_rgb_to_hsv, np_unit_rgb_to_hsv,
)
from .palette import HsvPalette, ColorPalette
from .types import PaletteType, Hsv, UniformSource

__version__ = "1.0.0"

__all__ = [
    # Colors
    "Color",

    # Palettes
    "HsvPalette", "ColorPalette",

    # Conversions
    "hsv_to_unit_rgb", "np_hsv_to_unit_rgb",
    "unit_rgb_to_hsv", "np_unit_rgb_to_hsv",

    # Types
    "PaletteType", "Hsv", "UniformSource",

    # Version
    "__version__",
]
