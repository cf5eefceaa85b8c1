"""Command that reads a configuration file and draws its city map."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from weathermap.cities import load_city_locations
from weathermap.config import CITY_FILE_LINE, X_RANGE_LINE, parse_config
from weathermap.grid import display_coordinate

PROMPT = "Please enter config file :"


def run(config_path: str | Path, out: TextIO | None = None) -> int:
    """Echo the configuration, then draw the city map it names.

    Returns 0 on success and 1 when the city file cannot be opened.
    """
    stream = sys.stdout if out is None else out
    lines = Path(config_path).read_text(encoding="utf-8").splitlines()
    for line in lines:
        print(line, file=stream)

    config = parse_config(lines)
    print(f"Third line: {lines[X_RANGE_LINE]}", file=stream)
    print(f"Tenth line: {lines[CITY_FILE_LINE]}", file=stream)

    max_x = config.x_range[1]
    max_y = config.y_range[1]
    print(f"x_idxRange: {max_x}", file=stream)
    print(f"y_idxRange: {max_y}", file=stream)

    try:
        cities = load_city_locations(config.city_file)
    except OSError:
        print("Cannot open the file!", file=sys.stderr)
        return 1

    display_coordinate(max_x, max_y, cities, stream)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the map display for a config file given on the command line or asked for."""
    parser = argparse.ArgumentParser(description="Draw the city map named by a config file.")
    parser.add_argument("config", nargs="?")
    args = parser.parse_args(argv)

    config_path = args.config
    if config_path is None:
        try:
            words = input(PROMPT).split()
        except EOFError:
            words = []
        if not words:
            print("error: no configuration file given", file=sys.stderr)
            return 1
        config_path = words[0]

    try:
        return run(config_path)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())