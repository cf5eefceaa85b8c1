"""Reading the system configuration file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

X_RANGE_LINE = 2
Y_RANGE_LINE = 6
CITY_FILE_LINE = 9

_INT_RE = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Config:
    """Grid index ranges and the city location file named by a config file."""

    x_range: tuple[int, int]
    y_range: tuple[int, int]
    city_file: str


def _leading_int(text: str) -> int:
    match = _INT_RE.match(text)
    if match is None:
        raise ValueError(f"expected an integer in {text!r}")
    return int(match.group(1))


def parse_range(line: str) -> tuple[int, int]:
    """Parse a ``Name=start-end`` line into ``(start, end)``.

    Text up to the first ``=`` is ignored. Without a ``-`` the single
    number is used as both start and end.
    """
    _, sep, rest = line.partition("=")
    range_part = rest if sep else line
    start, dash, end = range_part.partition("-")
    if not dash:
        end = range_part
    return _leading_int(start), _leading_int(end)


def parse_config(lines: Iterable[str]) -> Config:
    """Build a :class:`Config` from the lines of a configuration file."""
    cleaned = [line.rstrip("\r\n") for line in lines]
    if len(cleaned) <= CITY_FILE_LINE:
        raise ValueError(
            f"configuration needs at least {CITY_FILE_LINE + 1} lines, got {len(cleaned)}"
        )
    return Config(
        x_range=parse_range(cleaned[X_RANGE_LINE]),
        y_range=parse_range(cleaned[Y_RANGE_LINE]),
        city_file=cleaned[CITY_FILE_LINE],
    )


def read_config(path: str | Path) -> Config:
    """Read and parse a configuration file."""
    return parse_config(Path(path).read_text(encoding="utf-8").splitlines())