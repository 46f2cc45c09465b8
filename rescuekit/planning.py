"""Placing emergency supplies so that every city in a road network is covered.

A city is covered when it holds supplies itself or is directly linked by a
road to a city that does. Cities and their neighbours are always examined in
sorted order, so the search is deterministic.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping

RoadNetwork = Mapping[str, Iterable[str]]


def is_covered(city: str, road_network: RoadNetwork, supply_locations: Collection[str]) -> bool:
    """Return whether ``city`` holds supplies or neighbours a city that does."""
    if city in supply_locations:
        return True
    return any(neighbor in supply_locations for neighbor in road_network.get(city, ()))


def _first_uncovered(road_network: RoadNetwork, supply_locations: set[str]) -> str | None:
    return next(
        (city for city in sorted(road_network) if not is_covered(city, road_network, supply_locations)),
        None,
    )


def _plan(road_network: RoadNetwork, supply_locations: set[str], num_cities: int) -> set[str] | None:
    city = _first_uncovered(road_network, supply_locations)
    if city is None:
        return set(supply_locations)

    if len(supply_locations) >= num_cities:
        return None

    # The uncovered city must be covered either by itself or by one of its neighbours.
    for candidate in [city, *sorted(road_network.get(city, ()))]:
        supply_locations.add(candidate)
        found = _plan(road_network, supply_locations, num_cities)
        if found is not None:
            return found
        supply_locations.discard(candidate)

    return None


def place_emergency_supplies(road_network: RoadNetwork, num_cities: int) -> set[str] | None:
    """Find at most ``num_cities`` supply cities covering the whole network.

    Roads are assumed to be bidirectional and every city to be a key of
    ``road_network``. Returns the chosen cities, or ``None`` when no such
    placement exists. Raises ``ValueError`` if ``num_cities`` is negative.
    """
    if num_cities < 0:
        raise ValueError("Number of supply cities cannot be negative.")
    return _plan(road_network, set(), num_cities)


def make_symmetric(source: RoadNetwork) -> dict[str, set[str]]:
    """Return a copy of ``source`` in which every road runs both ways."""
    result: dict[str, set[str]] = {city: set(neighbors) for city, neighbors in source.items()}
    for origin, neighbors in source.items():
        for destination in neighbors:
            result.setdefault(origin, set()).add(destination)
            result.setdefault(destination, set()).add(origin)
    return result