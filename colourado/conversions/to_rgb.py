import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Rgb


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Rgb:
    """
    Convert HSV to unit RGB (0..1) with the chroma / hue-sector algorithm.

    Input:
        h in degrees, nominally [0, 360)
        s, v in [0, 1]

    Any hue outside [0, 360) (NaN and infinities included) lands in no sector and contributes
    nothing but the brightness offset, i.e. the result is gray at ``v - s*v``.
    """
    chroma = v * s
    h2 = h / 60.0

    # fmod rejects infinities; non-finite hues land in no sector anyway
    x = chroma * (1.0 - abs(math.fmod(h2, 2.0) - 1.0)) if math.isfinite(h2) else math.nan

    if 0.0 <= h2 < 1.0:
        r, g, b = chroma, x, 0.0
    elif 1.0 <= h2 < 2.0:
        r, g, b = x, chroma, 0.0
    elif 2.0 <= h2 < 3.0:
        r, g, b = 0.0, chroma, x
    elif 3.0 <= h2 < 4.0:
        r, g, b = 0.0, x, chroma
    elif 4.0 <= h2 < 5.0:
        r, g, b = x, 0.0, chroma
    elif 5.0 <= h2 < 6.0:
        r, g, b = chroma, 0.0, x
    else:
        r, g, b = 0.0, 0.0, 0.0

    m = v - chroma
    return r + m, g + m, b + m


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSV to unit RGB.

    Args:
        h, s, v: array-like or scalar, broadcastable against each other

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    chroma = v * s
    h2 = h / 60.0
    zero = np.zeros(out_shape)

    # NaN and inf compare False everywhere, so they fall through to the default
    with np.errstate(invalid='ignore'):
        x = chroma * (1.0 - np.abs(np.fmod(h2, 2.0) - 1.0))
        sector = np.floor(h2)
        conditions = [(sector == k) for k in range(6)]

    r = np.select(conditions, [chroma, x, zero, zero, x, chroma], default=0.0)
    g = np.select(conditions, [x, chroma, chroma, x, zero, zero], default=0.0)
    b = np.select(conditions, [zero, zero, x, chroma, chroma, x], default=0.0)

    m = v - chroma
    return np.stack([r + m, g + m, b + m], axis=-1)
