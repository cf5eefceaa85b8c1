# weathermap

A small console tool that reads a weather-system configuration file, loads
the city locations it points to, and draws the cities on a bordered,
labelled coordinate grid.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `weathermap`

Draws the city map described by a configuration file. The path may be given
on the command line; without one, the command asks for it:

```
weathermap config.txt
weathermap
Please enter config file :config.txt
```

The command echoes every line of the configuration file, then prints the
third and tenth lines and the end of each index range, and finally draws the
grid.

The configuration file must have at least ten lines, of which three are used:

- line 3 holds the X index range, such as `GridX_IdxRange=0-8`
- line 7 holds the Y index range, such as `GridY_IdxRange=0-8`
- line 10 holds the path of the city location file

Text up to the first `=` of a range line is ignored; a range without a `-`
uses its single number as both start and end. The end of each range sets the
size of the grid.

If the city location file cannot be opened, the command prints
`Cannot open the file!` to standard error and exits with status 1. Other
problems (a missing or short configuration file, a malformed line, a city
outside the grid) are reported as `error: ...` with status 1.

### `weathermap-cities [PATH]`

Reads a city location file (`citylocation.txt` in the current directory by
default) and prints every entry with its parsed coordinates, for example:

```
coord: [1, 1], number: 3, name: Big_City, coord_x: 1(int), coord_y: 1(int)
```

### `weathermap-grid [MAX_X] [MAX_Y]`

Draws a built-in set of sample cities on a grid of the given size, 12 by 12
by default. Some sample cities lie at X or Y up to 8, so a smaller grid is
reported as an error.

### `weathermap-menu`

Shows the main menu of the weather information processing system, with a
placeholder student id and name, and reads one menu choice.

## City location files

Each line has the form `[x, y]-id-Name`:

```
[1, 1]-3-Big_City
[2, 7]-2-Mid_City
[7, 7]-1-Small_City
```

Spaces inside the coordinate are ignored. The first character of the id is
what appears in the grid cell. A coordinate that cannot be read raises
`ValueError`.

## Grid layout

Every cell is five characters wide and right-aligned. The top row is drawn
first. Y labels run down the left edge, X labels along the bottom, and the
plotted area is framed by `#` characters.

## Library use

```python
import sys

from weathermap.cities import read_city_locations, load_city_locations, CityInfo
from weathermap.config import parse_range, read_config
from weathermap.grid import render_grid, display_coordinate, sample_cities

cities = read_city_locations(["[1, 1]-3-Big_City", "[7, 7]-1-Small_City"])
start, end = parse_range("GridX_IdxRange=0-8")   # (0, 8)
print(render_grid(8, 8, cities))
display_coordinate(8, 8, cities, sys.stdout)
```

- `weathermap.cities`: `CityInfo` (fields `coord`, `x`, `y`, `number`,
  `name`, and `describe()`), `parse_coordinate`, `parse_city_line`,
  `read_city_locations`, `load_city_locations`.
- `weathermap.config`: `Config` (fields `x_range`, `y_range`, `city_file`),
  `parse_range`, `parse_config`, `read_config`.
- `weathermap.grid`: `render_grid` returns the grid as text,
  `display_coordinate` writes it to a stream (standard output by default),
  `sample_cities` returns the demonstration cities. A city outside the grid,
  a city with an empty id, or a negative grid size raises `ValueError`.
- `weathermap.app`: `run(config_path, out=None)` does what the `weathermap`
  command does and returns its exit status.
- `weathermap.menu`: `render_menu(student_id, student_name)` returns the menu
  text and `read_choice(text)` reads the leading integer of an answer.

## What it does not do

The menu lists cloud coverage maps, atmospheric pressure maps and a weather
forecast summary report, but the package has none of them: `weathermap-menu`
reads the choice and exits without acting on it. The package only draws
city locations; it reads no weather data.