"""Console palette preview.

Run with:
    python examples/preview.py <random|pastel|dark> <count> <adjacent|spread>

Prints the generated colors as hex codes, ten per row.
"""
import sys
from typing import List, Sequence

from colourado import ColorPalette, PaletteType

COLUMNS = 10
DEFAULT_COUNT = 4


def parse_args(argv: Sequence[str]):
    if len(argv) != 3:
        raise SystemExit(
            "You must supply exactly 3 parameters: "
            "the palette type, the number of colors and the type of spread"
        )
    palette_type = PaletteType.from_name(argv[0])
    try:
        count = int(argv[1])
    except ValueError:
        count = DEFAULT_COUNT
    adjacent = argv[2].lower() == "adjacent"
    return palette_type, count, adjacent


def render_rows(hexes: List[str], columns: int = COLUMNS) -> List[str]:
    return [" ".join(hexes[i:i + columns]) for i in range(0, len(hexes), columns)]


def main(argv: Sequence[str]) -> None:
    palette_type, count, adjacent = parse_args(argv)
    palette = ColorPalette(palette_type, adjacent)
    spread = "adjacent" if adjacent else "spread"
    print(f"{palette_type.value} palette, {spread}, {count} colors:")
    for row in render_rows(palette.take_hex(count)):
        print(row)


if __name__ == "__main__":
    main(sys.argv[1:])
