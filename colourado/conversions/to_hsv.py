import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Hsv


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Hsv:
    """
    Convert unit RGB (0..1) to HSV.

    Output:
        h in [0, 360), NaN when the color is achromatic (max == min)
        s in [0, 1], forced to 0 for black
        v in [0, 1]

    Callers must ignore the hue whenever the saturation is 0.
    """
    # Pairwise comparisons, not max()/min(): ties keep the earlier channel.
    cmax = r
    cmin = r
    if g > cmax:
        cmax = g
    elif g < cmin:
        cmin = g
    if b > cmax:
        cmax = b
    elif b < cmin:
        cmin = b
    delta = cmax - cmin

    if delta == 0:
        h = math.nan
    elif cmax == r:
        h = 60.0 * (((g - b) / delta) % 6.0)
    elif cmax == g:
        h = 60.0 * (((b - r) / delta) + 2.0)
    else:
        h = 60.0 * (((r - g) / delta) + 4.0)

    s = 0.0 if cmax == 0.0 else delta / cmax
    return h, s, cmax


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized unit RGB to HSV.

    Args:
        r, g, b: array-like or scalar in [0, 1]

    Returns:
        hsv: array of shape (..., 3), hue NaN for achromatic entries
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    cmax = np.where(g > r, g, r)
    cmin = np.where(g < r, g, r)
    b_is_max = b > cmax
    cmin = np.where(~b_is_max & (b < cmin), b, cmin)
    cmax = np.where(b_is_max, b, cmax)
    delta = cmax - cmin

    with np.errstate(divide='ignore', invalid='ignore'):
        h = np.select(
            [delta == 0, cmax == r, cmax == g],
            [
                np.nan,
                60.0 * np.mod((g - b) / delta, 6.0),
                60.0 * ((b - r) / delta + 2.0),
            ],
            default=60.0 * ((r - g) / delta + 4.0),
        )
        s = np.where(cmax == 0.0, 0.0, delta / cmax)

    return np.stack([h, s, cmax], axis=-1)
