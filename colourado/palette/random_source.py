from __future__ import annotations
from typing import Union
import numpy as np

from ..types.color_types import UniformSource
from ..types.palette_type import HUE_360

RandomLike = Union[UniformSource, int, None]


def resolve_random_source(rng: RandomLike = None) -> UniformSource:
    """
    Normalize the ``rng`` argument accepted by the palettes.

    Args:
        rng: None for a fresh numpy generator, an int seed, or any object
             exposing ``uniform(low, high)``.

    Returns:
        An object satisfying UniformSource.
    """
    if rng is None:
        return np.random.default_rng()
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, bool):
        return np.random.default_rng(int(rng))
    if not isinstance(rng, UniformSource):
        raise TypeError(
            f"rng must be None, an int seed or expose uniform(low, high), got {type(rng).__name__}"
        )
    return rng


def starting_hue(rng: RandomLike) -> float:
    """Draw a hue uniformly from [0, 360)."""
    return float(resolve_random_source(rng).uniform(0.0, HUE_360))
