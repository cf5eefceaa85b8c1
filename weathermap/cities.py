"""City location records and the line format they are stored in.

Each line of a city location file looks like ``[1, 1]-3-Big_City``: a
bracketed coordinate, a city size number and a city name, separated by
dashes.
"""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

DEFAULT_CITY_FILE = "citylocation.txt"

_COORD_RE = re.compile(r"\[([+-]?\d+),([+-]?\d+)")


@dataclass(frozen=True)
class CityInfo:
    """One grid cell occupied by a city."""

    coord: str
    x: int
    y: int
    number: str
    name: str

    def describe(self) -> str:
        """Return a one-line human readable summary of the record."""
        return (
            f"coord: {self.coord}, number: {self.number}, name: {self.name}, "
            f"coord_x: {self.x}(int), coord_y: {self.y}(int)"
        )


def parse_coordinate(text: str) -> tuple[int, int]:
    """Parse a coordinate such as ``[3, 8]`` into ``(3, 8)``.

    Spaces anywhere in the text are ignored.
    """
    match = _COORD_RE.match(text.replace(" ", ""))
    if match is None:
        raise ValueError(f"malformed coordinate: {text!r}")
    return int(match.group(1)), int(match.group(2))


def parse_city_line(line: str) -> CityInfo:
    """Parse one ``[x, y]-number-name`` line into a :class:`CityInfo`."""
    line = line.rstrip("\r\n")
    coord, number, name = (line.split("-", 2) + ["", ""])[:3]
    x, y = parse_coordinate(coord)
    return CityInfo(coord=coord, x=x, y=y, number=number, name=name)


def read_city_locations(lines: Iterable[str]) -> list[CityInfo]:
    """Parse every line of a city location listing, keeping their order."""
    return [parse_city_line(line) for line in lines]


def load_city_locations(path: str | Path) -> list[CityInfo]:
    """Read and parse a city location file."""
    with open(path, encoding="utf-8") as handle:
        return read_city_locations(handle)


def main(argv: list[str] | None = None) -> int:
    """Print every record of a city location file."""
    parser = argparse.ArgumentParser(description="List the cities in a location file.")
    parser.add_argument("path", nargs="?", default=DEFAULT_CITY_FILE)
    args = parser.parse_args(argv)
    try:
        cities = load_city_locations(args.path)
    except OSError:
        print("Cannot open the file!", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for city in cities:
        print(city.describe())
    return 0


if __name__ == "__main__":
    sys.exit(main())