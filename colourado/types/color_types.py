from __future__ import annotations
from typing import Protocol, Tuple, runtime_checkable

Hue = float
Saturation = float
Value = float
Hsv = Tuple[Hue, Saturation, Value]
Rgb = Tuple[float, float, float]


@runtime_checkable
class UniformSource(Protocol):
    """
    Anything that can draw a uniform float from ``[low, high)``.

    ``numpy.random.Generator`` and ``random.Random`` both qualify, and so does
    a two-line stub in tests.
    """

    def uniform(self, low: float, high: float) -> float: ...
