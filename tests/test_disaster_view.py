import pytest

from rescuekit.disaster_view import (
    BUFFER_SPACE,
    CityState,
    compute_geometry,
    city_state,
    describe_best_cities,
    describe_map,
    main,
    pluralize,
    sample_problems,
    shorthand_for,
    solve_optimally,
)
from rescuekit.parser import DisasterTest, Point, load_disaster
from rescuekit.planning import is_covered, make_symmetric

DONT_BE_GREEDY = make_symmetric({
    "A": {"B"},
    "B": {"C", "D"},
    "C": {"D"},
    "D": {"F", "G"},
    "E": {"F"},
    "F": {"G"},
})


def test_shorthand_single_word_truncated():
    assert shorthand_for("Boston") == "Bos"


def test_shorthand_short_word_kept():
    assert shorthand_for("NY") == "NY"


def test_shorthand_uses_initials_and_skips_empty():
    assert shorthand_for("San  Luis Obispo") == "SLO"
    assert shorthand_for("A B C D E") == "ABC"


def test_city_state_classification():
    network = make_symmetric({"A": {"B"}, "C": set()})
    selected = {"A"}
    assert city_state("A", network, selected) is CityState.COVERED_DIRECTLY
    assert city_state("B", network, selected) is CityState.COVERED_INDIRECTLY
    assert city_state("C", network, selected) is CityState.UNCOVERED


def test_solve_optimally_dont_be_greedy():
    test = DisasterTest(network=DONT_BE_GREEDY)
    assert solve_optimally(test) == {"B", "F"}


def test_solve_optimally_covers_grid():
    grid = {}
    for row in "ABC":
        for col in range(1, 4):
            neighbors = set()
            if row != "C":
                neighbors.add(chr(ord(row) + 1) + str(col))
            if col != 3:
                neighbors.add(row + str(col + 1))
            grid[row + str(col)] = neighbors
    grid = make_symmetric(grid)
    chosen = solve_optimally(DisasterTest(network=grid))
    assert all(is_covered(city, grid, chosen) for city in grid)
    assert len(chosen) <= 5


def test_solve_optimally_empty_network():
    assert solve_optimally(DisasterTest()) == set()


def test_pluralize():
    assert pluralize(1, "city", "cities") == "1 city"
    assert pluralize(0, "city", "cities") == "0 cities"


def test_describe_map_lists_neighbors():
    text = describe_map(make_symmetric({"A": {"B"}}))
    lines = text.splitlines()
    assert lines[0] == "This transportation grid has 2 cities."
    assert lines[1] == "  The city A is adjacent to 1 city."
    assert lines[2] == "    B"


def test_describe_best_cities():
    text = describe_best_cities({"B", "F"})
    assert text.splitlines() == [
        "You need to stockpile in 2 cities to provide coverage.",
        "  B",
        "  F",
    ]


def test_geometry_maps_points_inside_drawing_area():
    test = load_disaster("A (0, 0): B\nB (10, 5): C\nC (3, 8):\n")
    geo = compute_geometry(test, 1000, 800)
    for point in test.city_locations.values():
        mapped = geo.logical_to_physical(point)
        assert geo.min_draw_x <= mapped.x <= geo.max_draw_x
        assert geo.min_draw_y <= mapped.y <= geo.max_draw_y
    assert geo.min_draw_x >= BUFFER_SPACE
    assert geo.min_draw_y >= BUFFER_SPACE


def test_geometry_preserves_aspect_ratio():
    test = load_disaster("A (0, 0):\nB (4, 2):\n")
    geo = compute_geometry(test, 1000, 800)
    a = geo.logical_to_physical(Point(0, 0))
    b = geo.logical_to_physical(Point(4, 2))
    assert (b.x - a.x) / (b.y - a.y) == pytest.approx(2.0, rel=1e-4)


def test_geometry_rejects_empty_or_small():
    with pytest.raises(ValueError):
        compute_geometry(DisasterTest(), 1000, 800)
    test = load_disaster("A (0, 0):\n")
    with pytest.raises(ValueError):
        compute_geometry(test, 2 * BUFFER_SPACE, 800)


def test_sample_problems_filters_and_sorts(tmp_path):
    (tmp_path / "z.dst").write_text("")
    (tmp_path / "a.dst").write_text("")
    (tmp_path / "readme.txt").write_text("")
    assert sample_problems(str(tmp_path)) == ["a.dst", "z.dst"]


def test_main_runs_demo(tmp_path, monkeypatch, capsys):
    (tmp_path / "tiny.dst").write_text("A (0, 0): B\nB (1, 0):\n")
    answers = iter(["0", "n"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "You need to stockpile in 1 city to provide coverage." in out
    assert "\n  A\n" in out


def test_main_reports_missing_files(tmp_path, capsys):
    assert main([str(tmp_path)]) == 1
    assert "Error" in capsys.readouterr().err