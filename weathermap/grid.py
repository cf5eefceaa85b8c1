"""Text rendering of cities on a bordered, labelled coordinate plane."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, TextIO

from weathermap.cities import CityInfo, parse_coordinate

CELL_WIDTH = 5
_OFFSET = 2

_SAMPLE = [
    ("[1, 1]", "3", "Big_City"),
    ("[1, 2]", "3", "Big_City"),
    ("[1, 3]", "3", "Big_City"),
    ("[2, 1]", "3", "Big_City"),
    ("[2, 2]", "3", "Big_City"),
    ("[2, 3]", "3", "Big_City"),
    ("[2, 7]", "2", "Mid_City"),
    ("[2, 8]", "2", "Mid_City"),
    ("[3, 1]", "3", "Big_City"),
    ("[3, 2]", "3", "Big_City"),
    ("[3, 3]", "3", "Big_City"),
    ("[3, 7]", "2", "Mid_City"),
    ("[3, 8]", "2", "Mid_City"),
    ("[7, 7]", "1", "Small_City"),
]


def _cells(max_x: int, max_y: int, cities: Iterable[CityInfo]) -> dict[tuple[int, int], str]:
    cells: dict[tuple[int, int], str] = {}
    for city in cities:
        if not (0 <= city.x <= max_x and 0 <= city.y <= max_y):
            raise ValueError(
                f"city {city.name!r} at ({city.x}, {city.y}) lies outside "
                f"the grid 0..{max_x} x 0..{max_y}"
            )
        if not city.number:
            raise ValueError(f"city {city.name!r} at {city.coord} has no number")
        cells[(city.x, city.y)] = city.number[0]
    return cells


def render_grid(max_x: int, max_y: int, cities: Iterable[CityInfo]) -> str:
    """Render the grid with axis labels and a ``#`` border, top row first."""
    if max_x < 0 or max_y < 0:
        raise ValueError("grid bounds must not be negative")
    cells = _cells(max_x, max_y, cities)

    left = bottom = _OFFSET - 1
    right = max_x + _OFFSET + 1
    top = max_y + _OFFSET + 1

    def symbol(x: int, y: int) -> str:
        inside_x = _OFFSET <= x <= max_x + _OFFSET
        inside_y = _OFFSET <= y <= max_y + _OFFSET
        if x == 0 and y == 0:
            return " "
        if x == 0 and inside_y:
            return str(y - _OFFSET)
        if y == 0 and inside_x:
            return str(x - _OFFSET)
        if x in (left, right) or y in (bottom, top):
            return "#"
        if inside_x and inside_y:
            return cells.get((x - _OFFSET, y - _OFFSET), " ")
        return " "

    return "".join(
        "".join(symbol(x, y).rjust(CELL_WIDTH) for x in range(right + 1)) + "\n"
        for y in range(top, -1, -1)
    )


def display_coordinate(
    max_x: int, max_y: int, cities: Iterable[CityInfo], out: TextIO | None = None
) -> None:
    """Write the rendered grid to ``out`` (standard output by default)."""
    stream = sys.stdout if out is None else out
    stream.write(render_grid(max_x, max_y, cities))


def sample_cities() -> list[CityInfo]:
    """Return the built-in demonstration set of cities."""
    cities = []
    for coord, number, name in _SAMPLE:
        x, y = parse_coordinate(coord)
        cities.append(CityInfo(coord=coord, x=x, y=y, number=number, name=name))
    return cities


def main(argv: list[str] | None = None) -> int:
    """Draw the demonstration cities on a grid."""
    parser = argparse.ArgumentParser(description="Draw the sample city map.")
    parser.add_argument("max_x", nargs="?", type=int, default=12)
    parser.add_argument("max_y", nargs="?", type=int, default=12)
    args = parser.parse_args(argv)
    try:
        display_coordinate(args.max_x, args.max_y, sample_cities())
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())