from __future__ import annotations
import math
from typing import Iterator, Sequence, Tuple
import numpy as np
from numpy import ndarray

from ..conversions import hsv_to_unit_rgb, unit_rgb_to_hsv
from ..types.color_types import Hsv, Rgb


def _channel_to_byte(channel: float) -> int:
    # round half away from zero, not banker's rounding
    return int(math.floor(channel * 255.0 + 0.5))


class Color:
    """
    A single RGB color with channels in [0.0, 1.0].

    Instances are immutable; every conversion returns a new value.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels = 3
    maxima = 1.0

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Sequence[float]) -> None:
        if isinstance(value, Color):
            value = value.value
        if isinstance(value, ndarray):
            value = value.tolist()
        if len(value) != self.num_channels:
            raise ValueError(f"Color expects a {self.num_channels}-channel value, got {len(value)}")

        # clamp value
        self._value = tuple(
            max(0.0, min(float(v), self.maxima)) for v in value
        )

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def from_hsv(cls, hue: float, saturation: float, value: float) -> Color:
        """Build a color from hue in degrees and saturation/value in [0, 1]."""
        return cls(hsv_to_unit_rgb(hue, saturation, value))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Rgb:
        return self._value

    @property
    def red(self) -> float:
        return self._value[0]

    @property
    def green(self) -> float:
        return self._value[1]

    @property
    def blue(self) -> float:
        return self._value[2]

    # ------------------ CONVERSIONS ------------------
    def to_hsv(self) -> Hsv:
        """
        Convert back to (hue, saturation, value).

        The hue is NaN for grays; ignore it whenever saturation is 0.
        """
        return unit_rgb_to_hsv(*self._value)

    def to_tuple(self) -> Tuple[float, float, float]:
        return self._value

    def to_array(self) -> ndarray:
        return np.array(self._value, dtype=np.float32)

    def to_rgba_array(self) -> ndarray:
        """Same channels with an opaque alpha appended."""
        return np.array(self._value + (1.0,), dtype=np.float32)

    def to_hex(self) -> str:
        r, g, b = (_channel_to_byte(c) for c in self._value)
        return f"#{r:02X}{g:02X}{b:02X}"

    # ------------------ DUNDERS ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        r, g, b = self._value
        return f"Color(({r!r}, {g!r}, {b!r}))"

    def __str__(self) -> str:
        return self.to_hex()
