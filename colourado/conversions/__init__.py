"""
colourado Color Space Conversions
=================================

HSV ↔ unit RGB conversion, as scalar functions and as vectorized numpy
functions working on broadcastable arrays.

HSV → RGB:
    hsv_to_unit_rgb(h, s, v)
        Scalar conversion, returns (r, g, b)
    np_hsv_to_unit_rgb(h, s, v)
        Vectorized conversion, returns (..., 3)

RGB → HSV:
    unit_rgb_to_hsv(r, g, b)
        Scalar conversion, returns (h, s, v)
    np_unit_rgb_to_hsv(r, g, b)
        Vectorized conversion, returns (..., 3)

Hue is in degrees; every other channel is in [0, 1]. Achromatic colors
(max == min) have no hue and come back with ``h = nan``.
"""

from .to_rgb import hsv_to_unit_rgb, np_hsv_to_unit_rgb
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv

__all__ = [
    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
]
