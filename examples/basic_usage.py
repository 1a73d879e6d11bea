"""Basic colourado usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import itertools

from colourado import Color, ColorPalette, HsvPalette, PaletteType


def demonstrate_colors() -> None:
    # Build colors from HSV and export them.
    accent = Color.from_hsv(315.0, 0.5, 0.3)
    print("RGB as floats:", accent.to_tuple())
    print("RGBA array:", accent.to_rgba_array())
    print("Hex:", accent.to_hex())
    print("Back to HSV:", accent.to_hsv())


def demonstrate_palettes() -> None:
    # Spread palette: hues jump around the circle.
    spread = ColorPalette(PaletteType.RANDOM, adjacent_colors=False, rng=42)
    print("Spread random palette:", spread.take_hex(6))

    # Adjacent palette: hues stay close together.
    adjacent = ColorPalette(PaletteType.PASTEL, adjacent_colors=True, rng=42)
    print("Adjacent pastel palette:", adjacent.take_hex(6))

    # Raw HSV triples, bounded with islice since the generator never ends.
    dark = HsvPalette.create(PaletteType.DARK, adjacent_colors=False, rng=42)
    for hue, saturation, value in itertools.islice(dark, 3):
        print(f"HSV: {hue:7.2f} {saturation:.3f} {value:.3f}")

    # Batch export for plotting libraries.
    print("Array shape:", ColorPalette(PaletteType.DARK, rng=1).take_array(8).shape)


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_palettes()
