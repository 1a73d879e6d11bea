"""
colourado Color Class
=====================

``Color`` is an immutable RGB value with channels in [0.0, 1.0].

>>> from colourado.colors import Color
>>> teal = Color.from_hsv(0.482 * 360.0, 0.714, 0.878)
>>> teal.to_hex()
'#40E0CF'
>>> rgba = teal.to_rgba_array()  # float32, alpha fixed at 1.0

Notes
-----
- Channels are clamped to [0, 1] during initialization
- Assigning to any attribute after initialization raises AttributeError
- ``to_hsv`` returns NaN as the hue of achromatic colors
"""

from .color import Color

__all__ = ['Color']
