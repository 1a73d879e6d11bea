from .palette_type import (
    PaletteType,
    ADJACENT_DIVERGENCE,
    SPREAD_DIVERGENCE,
    MIN_DIVERGENCE,
    HUE_360,
)
from .color_types import Hue, Saturation, Value, Hsv, Rgb, UniformSource

__all__ = [
    'PaletteType',
    'ADJACENT_DIVERGENCE',
    'SPREAD_DIVERGENCE',
    'MIN_DIVERGENCE',
    'HUE_360',
    'Hue', 'Saturation', 'Value', 'Hsv', 'Rgb',
    'UniformSource',
]
