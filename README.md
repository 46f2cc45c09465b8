# rescuekit

Small, dependency-free tools built around a recursive search problem and a
weekly shift calendar:

* **Disaster planning**: choose at most *k* cities to stockpile supplies in,
  so that every city in a road network either has supplies or is next to a
  city that does.
* **Shifts**: model work shifts on a weekly calendar, check overlaps and
  lengths, and compute how to lay them out for display.

It also has helpers for colours, fonts, styled text rendered as HTML, and
numbered menus in a terminal.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Placing emergency supplies

A road network is a mapping from each city name to the cities it connects
to. `rescuekit.planning.make_symmetric` returns a copy in which every road
runs both ways.

```python
from rescuekit.planning import is_covered, make_symmetric, place_emergency_supplies

network = make_symmetric({
    "A": {"B"},
    "B": {"C", "D"},
    "C": {"D"},
    "D": {"F", "G"},
    "E": {"F"},
    "F": {"G"},
})

print(place_emergency_supplies(network, 1))  # None: one city is not enough
plan = place_emergency_supplies(network, 2)
print(sorted(plan))                          # ['B', 'F']
assert all(is_covered(city, network, plan) for city in network)
```

`place_emergency_supplies` returns a set of cities when a plan within the
limit exists and `None` when none does; a negative limit raises
`ValueError`. Cities are examined in sorted order, so results are
deterministic.

## Loading networks from files

`rescuekit.parser.load_disaster` accepts a string or any iterable of lines
(such as an open text file) and returns a `DisasterTest` holding `network`
(city name to set of neighbours) and `city_locations` (city name to `Point`).
Each data line names a city with its coordinates, then a colon, then the
cities it links to:

```
# A comment
Alpha (0, 0): Beta, Gamma
Beta (1, 0): Gamma
Gamma (0.5, 1):
```

Blank lines and lines starting with `#` are skipped. Roads are made two-way
when loading. Malformed lines, blank or repeated link names, links to unknown
cities and two cities at the same location raise `DisasterParseError` (a
subclass of `ValueError`).

`rescuekit.disaster_view` provides:

* `solve_optimally(test)`: binary search for the fewest supply cities.
* `compute_geometry(test, canvas_width, canvas_height)`: fits city locations
  into a canvas; the returned `Geometry` maps points with
  `logical_to_physical`.
* `shorthand_for(name)`, `city_state(city, network, selected)` (a
  `CityState`), `sample_problems(base_path)` for listing `.dst` files, and
  the text helpers `pluralize`, `describe_map` and `describe_best_cities`.

## Command line

```
rescuekit-disaster [directory]
```

lists the `.dst` files in `directory` (default `res/`), lets you pick one from
a numbered menu, prints the network and reports the smallest set of cities
that covers it, then asks whether to try another file.

## Shifts

`rescuekit.shift` defines `Day` and the frozen, ordered `Shift`. A shift knows
its `length()`, its `profit()` and whether it `overlaps_with()` another.
`rescuekit.schedule_layout` has `Rectangle`, `expand`, `hour_to_string`,
`cell_bounding_boxes`, `assign_subcolumns`, `shifts_by_day`, `hour_range`,
`total_profit`, `total_length`, `randomize_values` and
`solution_description`, plus the `STANDARD_SHIFTS` week.

## Colours, fonts and styled output

* `rescuekit.color.Color`: 24-bit colours from RGB, `from_hex` or `from_hsv`,
  with `to_rgb()` and `to_html()` and named presets such as `Color.white()`.
* `rescuekit.font.Font`: immutable fonts with `with_family`, `with_style`,
  `with_size`, `with_color` and `library_font_string()`.
* `rescuekit.styled_console.StyledConsole`: a writable stream that keeps the
  style of each run of text and renders it with `render_html()`. The
  `styled(...)` context manager changes the style for a block and restores it
  afterwards.
* `rescuekit.console_utils`: `make_selection_from` and `make_file_selection`
  for numbered menus.

## What it does not do

* There is no graphical window: the package computes layouts, colours and
  HTML but draws nothing on screen.
* There is no solver that picks the most profitable set of shifts within a
  number of hours; the shift modules only model, summarise and lay out
  shifts.