from __future__ import annotations
from typing import Iterator, List, Union
import numpy as np
from numpy import ndarray

from ..colors.color import Color
from ..conversions import np_hsv_to_unit_rgb
from ..types.palette_type import PaletteType
from .hsv_palette import HsvPalette
from .random_source import RandomLike


class ColorPalette:
    """
    Infinite generator of ``Color`` values.

    A thin wrapper over ``HsvPalette`` that converts each emitted HSV triple
    to RGB. Like the HSV generator it never exhausts.
    """
    __slots__ = ('_inner',)

    def __init__(
        self,
        palette_type: Union[PaletteType, str] = PaletteType.RANDOM,
        adjacent_colors: bool = False,
        rng: RandomLike = None,
    ) -> None:
        self._inner = HsvPalette.create(palette_type, adjacent_colors, rng)

    @classmethod
    def from_hsv_palette(cls, inner: HsvPalette) -> ColorPalette:
        palette = cls.__new__(cls)
        palette._inner = inner
        return palette

    @property
    def inner(self) -> HsvPalette:
        if self._inner is None:
            raise RuntimeError("ColorPalette was consumed by into_inner()")
        return self._inner

    def into_inner(self) -> HsvPalette:
        """
        Hand over the underlying HSV generator.

        The wrapper is consumed: any further generation raises RuntimeError.
        """
        inner = self.inner
        self._inner = None
        return inner

    def __iter__(self) -> Iterator[Color]:
        return self

    def __next__(self) -> Color:
        return Color.from_hsv(*next(self.inner))

    def take(self, n: int) -> List[Color]:
        return [Color.from_hsv(*hsv) for hsv in self.inner.take(n)]

    def take_hex(self, n: int) -> List[str]:
        return [color.to_hex() for color in self.take(n)]

    def take_array(self, n: int) -> ndarray:
        """
        Pull ``n`` colors as a float32 array of shape (n, 3).

        Channels are clipped to [0, 1] the same way ``Color`` clamps them.
        """
        hsv = np.array(self.inner.take(n), dtype=float).reshape(n, 3)
        rgb = np_hsv_to_unit_rgb(hsv[..., 0], hsv[..., 1], hsv[..., 2])
        return np.clip(rgb, 0.0, 1.0).astype(np.float32)

    def __repr__(self) -> str:
        if self._inner is None:
            return f"{self.__class__.__name__}(<consumed>)"
        return f"{self.__class__.__name__}({self._inner!r})"
