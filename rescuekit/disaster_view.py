"""Layout, summaries and the console demo for disaster planning scenarios."""

from __future__ import annotations

import argparse
import enum
import math
import os
import sys
from collections.abc import Collection, Iterable, Mapping, Sequence
from dataclasses import dataclass

from rescuekit.console_utils import make_file_selection
from rescuekit.parser import DisasterParseError, DisasterTest, Point, load_disaster
from rescuekit.planning import place_emergency_supplies

PROBLEM_SUFFIX = ".dst"
BASE_PATH = "res/disaster-planning/"

BUFFER_SPACE = 60.0
LOGICAL_PADDING = 1e-5
MAX_SHORTHAND_LENGTH = 3


class CityState(enum.Enum):
    """How a city is covered by a set of supply locations."""

    UNCOVERED = 0
    COVERED_INDIRECTLY = 1
    COVERED_DIRECTLY = 2


@dataclass(frozen=True)
class Geometry:
    """Data bounds of a network and the screen box they are drawn into."""

    min_data_x: float
    min_data_y: float
    max_data_x: float
    max_data_y: float
    min_draw_x: float
    min_draw_y: float
    max_draw_x: float
    max_draw_y: float

    def logical_to_physical(self, point: Point) -> Point:
        """Map a point in data coordinates to screen coordinates."""
        x = (point.x - self.min_data_x) / (self.max_data_x - self.min_data_x) * (
            self.max_draw_x - self.min_draw_x
        ) + self.min_draw_x
        y = (point.y - self.min_data_y) / (self.max_data_y - self.min_data_y) * (
            self.max_draw_y - self.min_draw_y
        ) + self.min_draw_y
        return Point(x, y)


def compute_geometry(test: DisasterTest, canvas_width: float, canvas_height: float) -> Geometry:
    """Fit the network's city locations into a canvas, keeping their aspect ratio.

    Raises ``ValueError`` if there are no cities or the canvas leaves no room
    inside its border.
    """
    if not test.city_locations:
        raise ValueError("Cannot compute geometry for a network with no cities.")
    if canvas_width <= 2 * BUFFER_SPACE or canvas_height <= 2 * BUFFER_SPACE:
        raise ValueError("Canvas is too small to draw into.")

    xs = [p.x for p in test.city_locations.values()]
    ys = [p.y for p in test.city_locations.values()]
    min_x, max_x = min(xs) - LOGICAL_PADDING, max(xs) + LOGICAL_PADDING
    min_y, max_y = min(ys) - LOGICAL_PADDING, max(ys) + LOGICAL_PADDING

    win_width = canvas_width - 2 * BUFFER_SPACE
    win_height = canvas_height - 2 * BUFFER_SPACE
    win_aspect = win_width / win_height
    data_aspect = (max_x - min_x) / (max_y - min_y)

    # The side that runs out of room first limits the drawing size.
    if data_aspect >= win_aspect:
        data_width = win_width
        data_height = data_width / data_aspect
    else:
        data_height = win_height
        data_width = data_aspect * data_height

    min_draw_x = (win_width - data_width) / 2.0 + BUFFER_SPACE
    min_draw_y = (win_height - data_height) / 2.0 + BUFFER_SPACE
    return Geometry(
        min_x, min_y, max_x, max_y,
        min_draw_x, min_draw_y, min_draw_x + data_width, min_draw_y + data_height,
    )


def shorthand_for(name: str) -> str:
    """Return a short label: the first three letters of one word, else initials."""
    components = name.split(" ")
    if len(components) == 1:
        return components[0][:MAX_SHORTHAND_LENGTH]
    initials = "".join(component[0] for component in components if component)
    return initials[:MAX_SHORTHAND_LENGTH]


def city_state(
    city: str, network: Mapping[str, Iterable[str]], selected: Collection[str]
) -> CityState:
    """Classify how ``city`` is covered by the ``selected`` supply cities."""
    if city in selected:
        return CityState.COVERED_DIRECTLY
    if any(neighbor in selected for neighbor in network.get(city, ())):
        return CityState.COVERED_INDIRECTLY
    return CityState.UNCOVERED


def sample_problems(base_path: str) -> list[str]:
    """List the scenario file names in ``base_path``, sorted."""
    return sorted(name for name in os.listdir(base_path) if name.endswith(PROBLEM_SUFFIX))


def solve_optimally(test: DisasterTest) -> set[str]:
    """Binary-search the fewest supply cities that cover the network."""
    low, high = 0, len(test.network)
    result: set[str] = set()

    found = place_emergency_supplies(test.network, high)
    if found is not None:
        result = found

    while low < high:
        mid = low + (high - low) // 2
        attempt = place_emergency_supplies(test.network, mid)
        if attempt is not None:
            high = mid
            result = attempt
        else:
            low = mid + 1
    return result


def pluralize(count: int, singular: str, plural: str) -> str:
    """Return e.g. ``"1 city"`` or ``"3 cities"``."""
    return f"{count} {singular if count == 1 else plural}"


def describe_map(network: Mapping[str, Collection[str]]) -> str:
    """Describe every city of a network and its neighbours."""
    lines = [f"This transportation grid has {pluralize(len(network), 'city', 'cities')}."]
    for city in sorted(network):
        neighbors = network[city]
        lines.append(
            f"  The city {city} is adjacent to {pluralize(len(neighbors), 'city', 'cities')}."
        )
        lines.extend(f"    {neighbor}" for neighbor in sorted(neighbors))
    return "\n".join(lines)


def describe_best_cities(cities: Collection[str]) -> str:
    """Describe the cities chosen in an optimal solution."""
    lines = [
        f"You need to stockpile in {pluralize(len(cities), 'city', 'cities')} to provide coverage."
    ]
    lines.extend(f"  {city}" for city in sorted(cities))
    return "\n".join(lines)


def _get_yes_or_no(prompt: str) -> bool:
    while True:
        answer = input(prompt).strip().lower()
        if answer.startswith("y"):
            return True
        if answer.startswith("n"):
            return False
        print("Please type a word that starts with 'Y' or 'N'.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive disaster planning demo on the console."""
    parser = argparse.ArgumentParser(description="Find the fewest cities to stockpile supplies in.")
    parser.add_argument("directory", nargs="?", default="res/", help="directory holding .dst files")
    args = parser.parse_args(argv)

    print("Disaster Planning")
    while True:
        try:
            path = make_file_selection(PROBLEM_SUFFIX, args.directory, input, sys.stdout)
            with open(path, encoding="utf-8") as handle:
                scenario = load_disaster(handle)
        except (OSError, ValueError, DisasterParseError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

        print(describe_map(scenario.network))
        print("Running your code to find the fewest number of cities needed... ", end="", flush=True)
        cities = solve_optimally(scenario)
        print("done!")
        print(describe_best_cities(cities))

        if not _get_yes_or_no("Try another demo file? "):
            return 0


if __name__ == "__main__":
    sys.exit(main())