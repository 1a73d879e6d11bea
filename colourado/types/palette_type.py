# No dependencies
import warnings
from enum import Enum


class PaletteType(str, Enum):
    RANDOM = "random"
    PASTEL = "pastel"
    DARK = "dark"

    @classmethod
    def from_name(cls, name: str) -> "PaletteType":
        """
        Case-insensitive lookup that never fails.

        Unknown names fall back to RANDOM with a warning, which is what the
        preview script relies on when parsing its arguments.
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            warnings.warn(f"Unknown palette type: {name!r}, defaulting to {cls.RANDOM.value}")
            return cls.RANDOM


ADJACENT_DIVERGENCE = 25.0
SPREAD_DIVERGENCE = 80.0

# Per-step hue divergence never drops below this.
MIN_DIVERGENCE = 15.0

HUE_360 = 360.0
