"""Reading disaster-planning scenarios from their line-based text format.

Each data line has the form ``Name (X, Y): Neighbour, Neighbour, ...``.
Blank lines and lines starting with ``#`` are ignored. Roads listed in one
direction are made bidirectional, and every city must sit at its own
location.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

_CITY_PATTERN = re.compile(
    r"([A-Za-z0-9 .\-]+)\(\s*(-?[0-9]+(?:\.[0-9]+)?)\s*,\s*(-?[0-9]+(?:\.[0-9]+)?)\s*\)"
)


class DisasterParseError(ValueError):
    """Raised when a scenario file is malformed."""


@dataclass(frozen=True, order=True)
class Point:
    """A location in logical (data) coordinates."""

    x: float
    y: float


@dataclass
class DisasterTest:
    """A road network together with where each city is drawn."""

    network: dict[str, set[str]] = field(default_factory=dict)
    city_locations: dict[str, Point] = field(default_factory=dict)


def _parse_city(city_info: str, result: DisasterTest) -> str:
    match = _CITY_PATTERN.fullmatch(city_info.strip())
    if match is None:
        raise DisasterParseError(f"Can't parse this data; is it city info? {city_info}")

    name = match.group(1).strip()
    if not name:
        raise DisasterParseError("City names can't be empty.")

    result.city_locations[name] = Point(float(match.group(2)), float(match.group(3)))
    result.network[name] = set()
    return name


def _parse_links(city_name: str, links: str, result: DisasterTest) -> None:
    if not links.strip():
        result.network[city_name] = set()
        return

    outgoing = result.network[city_name]
    for destination in links.split(","):
        clean_name = destination.strip()
        if not clean_name:
            raise DisasterParseError("Blank name in list of outgoing cities?")
        if clean_name in outgoing:
            raise DisasterParseError("City appears twice in outgoing list?")
        outgoing.add(clean_name)


def _parse_city_line(line: str, result: DisasterTest) -> None:
    if line.count(":") != 1:
        raise DisasterParseError("Each data line should have exactly one colon on it.")
    city_info, links = line.split(":", 1)
    name = _parse_city(city_info, result)
    _parse_links(name, links, result)


def _add_reverse_edges(result: DisasterTest) -> None:
    forward = [(source, dest) for source in sorted(result.network) for dest in sorted(result.network[source])]
    for source, dest in forward:
        if dest not in result.network:
            raise DisasterParseError(f"Outgoing link found to nonexistent city '{dest}'")
        result.network[dest].add(source)


def _validate_locations(result: DisasterTest) -> None:
    seen: dict[Point, str] = {}
    for city in sorted(result.city_locations):
        location = result.city_locations[city]
        if location in seen:
            raise DisasterParseError(f"{city} is at the same location as {seen[location]}")
        seen[location] = city


def load_disaster(source: str | Iterable[str]) -> DisasterTest:
    """Parse a scenario from a string or an iterable of lines (such as a text file)."""
    lines = source.splitlines() if isinstance(source, str) else source
    result = DisasterTest()
    for raw_line in lines:
        line = raw_line.rstrip("\n")
        if not line.strip() or line.startswith("#"):
            continue
        _parse_city_line(line, result)

    _add_reverse_edges(result)
    _validate_locations(result)
    return result