from __future__ import annotations
from typing import Iterator, List, Union

from ..types.color_types import Hsv
from ..types.palette_type import PaletteType, ADJACENT_DIVERGENCE, SPREAD_DIVERGENCE
from .random_source import RandomLike, starting_hue
from .schemes import SCHEMES, effective_divergence


class HsvPalette:
    """
    Infinite generator of HSV triples drifting around a starting hue.

    Every step feeds the previously emitted hue back in, shifted by the
    divergence plus a scheme-specific perturbation, so consecutive colors
    walk around the hue circle instead of being sampled independently.

    WARNING: the iterator never exhausts. Use ``take(n)`` or
    ``itertools.islice``, never ``list(palette)``.
    """

    def __init__(
        self,
        palette_type: Union[PaletteType, str],
        base_divergence: float,
        hue: float,
    ) -> None:
        self._palette_type = PaletteType(palette_type)
        self._base_divergence = float(base_divergence)
        self._scheme = SCHEMES[self._palette_type]
        self._hue = float(hue)
        self._iteration = 0

    @classmethod
    def create(
        cls,
        palette_type: Union[PaletteType, str],
        adjacent_colors: bool = False,
        rng: RandomLike = None,
    ) -> HsvPalette:
        """
        Build a palette with a random starting hue.

        Args:
            palette_type: Scheme to generate (random, pastel, dark)
            adjacent_colors: True keeps consecutive hues close together,
                False spreads them around the hue circle
            rng: Random source, int seed, or None for a fresh generator
        """
        base_divergence = ADJACENT_DIVERGENCE if adjacent_colors else SPREAD_DIVERGENCE
        return cls(palette_type, base_divergence, starting_hue(rng))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def palette_type(self) -> PaletteType:
        return self._palette_type

    @property
    def base_divergence(self) -> float:
        return self._base_divergence

    @property
    def effective_divergence(self) -> float:
        """Divergence actually added to the hue on every step."""
        return effective_divergence(self._base_divergence)

    @property
    def hue(self) -> float:
        return self._hue

    @property
    def iteration(self) -> int:
        return self._iteration

    # ------------------ GENERATION ------------------
    def get(self) -> Hsv:
        """Compute the next triple without advancing."""
        return self._scheme(self._iteration, self._hue, self._base_divergence)

    def __iter__(self) -> Iterator[Hsv]:
        return self

    def __next__(self) -> Hsv:
        hue, saturation, value = self.get()
        self._hue = hue
        self._iteration += 1
        return hue, saturation, value

    def take(self, n: int) -> List[Hsv]:
        if n < 0:
            raise ValueError(f"Cannot take a negative number of colors: {n}")
        return [next(self) for _ in range(n)]

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(palette_type={self._palette_type.value!r}, "
            f"base_divergence={self._base_divergence!r}, hue={self._hue!r}, "
            f"iteration={self._iteration!r})"
        )
