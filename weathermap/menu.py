"""Main menu of the weather information processing system."""

from __future__ import annotations

import re
import sys

DEFAULT_STUDENT_ID = "0000000"
DEFAULT_STUDENT_NAME = "Unknown"

MENU_ITEMS = (
    "Read in and process a configuration file",
    "Display city map",
    "Display cloud coverage map (cloudiness index)",
    "Display cloud coverage map (LMH symbols)",
    "Display atmospheric pressure map (pressure index)",
    "Display atmospheric pressure map (LMH symbols)",
    "Show weather forecast summary report",
    "Quit",
)

PROMPT = "Please enter your choice : ".ljust(30)

_INT_RE = re.compile(r"\s*([+-]?\d+)")


def render_menu(
    student_id: str = DEFAULT_STUDENT_ID, student_name: str = DEFAULT_STUDENT_NAME
) -> str:
    """Return the menu text shown before the choice prompt."""
    parts = [
        f"{'Student ID':<20} : {student_id:<30}\n",
        f"{'Student Name':<20} : {student_name:<30}\n",
        "\n",
        "-" * 50 + "\n",
        "\n",
        "Welcome to Wether Information Processing System!\n",
        "\n",
    ]
    parts.extend(
        f"{f'{number})':<6}{item:<40}\n" for number, item in enumerate(MENU_ITEMS, start=1)
    )
    parts.append("\n")
    return "".join(parts)


def read_choice(text: str) -> int:
    """Read the leading integer of a menu answer."""
    match = _INT_RE.match(text)
    if match is None:
        raise ValueError(f"not a menu choice: {text!r}")
    return int(match.group(1))


def main(argv: list[str] | None = None) -> int:
    """Show the menu and read one choice."""
    print(render_menu(), end="")
    try:
        read_choice(input(PROMPT))
    except (EOFError, ValueError):
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())