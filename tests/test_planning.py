from itertools import permutations

import pytest

from rescuekit.planning import is_covered, make_symmetric, place_emergency_supplies


def _grid(max_row: str, max_col: int) -> dict[str, set[str]]:
    grid: dict[str, set[str]] = {}
    rows = [chr(c) for c in range(ord("A"), ord(max_row) + 1)]
    for row in rows:
        for col in range(1, max_col + 1):
            name = f"{row}{col}"
            grid.setdefault(name, set())
            if row != max_row:
                grid[name].add(f"{chr(ord(row) + 1)}{col}")
            if col != max_col:
                grid[name].add(f"{row}{col + 1}")
    return make_symmetric(grid)


DONT_BE_GREEDY = make_symmetric({
    "A": {"B"},
    "B": {"C", "D"},
    "C": {"D"},
    "D": {"F", "G"},
    "E": {"F"},
    "F": {"G"},
})


def _all_covered(network, chosen):
    return all(is_covered(city, network, chosen) for city in network)


def test_negative_count_raises():
    with pytest.raises(ValueError):
        place_emergency_supplies({}, -137)


def test_empty_map():
    assert place_emergency_supplies({}, 0) == set()
    assert place_emergency_supplies({}, 137) == set()


def test_one_city():
    network = make_symmetric({"Solipsist": set()})
    assert place_emergency_supplies(network, 0) is None
    assert place_emergency_supplies(network, 1) == {"Solipsist"}
    assert place_emergency_supplies(network, 2) == {"Solipsist"}


def test_two_linked_cities():
    network = make_symmetric({"A": {"B"}})
    assert place_emergency_supplies(network, 0) is None

    one = place_emergency_supplies(network, 1)
    assert one is not None
    assert len(one) == 1
    assert one <= {"A", "B"}

    two = place_emergency_supplies(network, 2)
    assert two is not None
    assert len(two) <= 2
    assert two <= {"A", "B"}


def test_four_disconnected_cities():
    network = make_symmetric({"A": set(), "B": set(), "C": set(), "D": set()})
    for count in range(4):
        assert place_emergency_supplies(network, count) is None
    assert place_emergency_supplies(network, 4) == {"A", "B", "C", "D"}


def test_ethene_every_ordering():
    for cities in permutations("ABCDEF"):
        network = make_symmetric({
            cities[2]: {cities[0], cities[1], cities[3]},
            cities[3]: {cities[4], cities[5]},
        })
        assert place_emergency_supplies(network, 2) == {cities[2], cities[3]}
        assert place_emergency_supplies(network, 1) is None


def test_six_cities_in_line_every_ordering():
    for cities in permutations("ABCDEF"):
        network = make_symmetric({
            cities[i]: {cities[i - 1], cities[i + 1]} for i in range(1, len(cities) - 1)
        })
        chosen = place_emergency_supplies(network, 2)
        assert chosen is not None
        assert len(chosen) == 2
        assert cities[1] in chosen
        assert cities[4] in chosen
        assert place_emergency_supplies(network, 1) is None


def test_dont_be_greedy():
    assert place_emergency_supplies(DONT_BE_GREEDY, 0) is None
    assert place_emergency_supplies(DONT_BE_GREEDY, 1) is None
    assert place_emergency_supplies(DONT_BE_GREEDY, 2) == {"B", "F"}


def test_dont_be_greedy_every_ordering():
    for cities in permutations("ABCDEFG"):
        network = make_symmetric({
            cities[1]: {cities[0], cities[2], cities[5]},
            cities[2]: {cities[3], cities[5], cities[6]},
            cities[3]: {cities[4], cities[6]},
        })
        assert place_emergency_supplies(network, 2) == {cities[1], cities[3]}
        assert place_emergency_supplies(network, 1) is None


def test_three_by_three_grid():
    grid = _grid("C", 3)
    locations = place_emergency_supplies(grid, 5)
    assert locations is not None
    assert len(locations) <= 5
    assert _all_covered(grid, locations)


def test_input_network_is_not_modified():
    network = make_symmetric({"A": {"B"}, "B": {"C"}})
    snapshot = {city: set(n) for city, n in network.items()}
    place_emergency_supplies(network, 1)
    assert network == snapshot


def test_make_symmetric_adds_reverse_edges():
    source = {"A": {"B", "C"}}
    result = make_symmetric(source)
    assert result == {"A": {"B", "C"}, "B": {"A"}, "C": {"A"}}
    assert source == {"A": {"B", "C"}}


def test_make_symmetric_is_idempotent():
    once = make_symmetric(DONT_BE_GREEDY)
    assert make_symmetric(once) == once
    for city, neighbors in once.items():
        for neighbor in neighbors:
            assert city in once[neighbor]


def test_is_covered():
    network = make_symmetric({"A": {"B"}, "C": set()})
    assert is_covered("A", network, {"A"})
    assert is_covered("B", network, {"A"})
    assert not is_covered("C", network, {"A"})
    assert not is_covered("A", network, set())


def test_result_never_exceeds_limit_and_covers():
    for count in range(len(DONT_BE_GREEDY) + 1):
        chosen = place_emergency_supplies(DONT_BE_GREEDY, count)
        if chosen is not None:
            assert len(chosen) <= count
            assert _all_covered(DONT_BE_GREEDY, chosen)
        else:
            assert count < 2