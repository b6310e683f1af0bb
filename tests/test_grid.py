import pytest

from labyrinth.errors import InvalidMap
from labyrinth.map.grid import Grid, Position


def test_neighbors_stay_in_bounds_at_corners():
    grid = Grid(2, 2)

    assert set(grid.neighbors(Position(0, 0))) == {Position(1, 0), Position(0, 1)}
    assert set(grid.neighbors(Position(0, 1))) == {Position(1, 1), Position(0, 0)}
    assert set(grid.neighbors(Position(1, 0))) == {Position(0, 0), Position(1, 1)}
    assert set(grid.neighbors(Position(1, 1))) == {Position(0, 1), Position(1, 0)}


def test_neighbors_are_cardinal_only():
    grid = Grid(3, 3)
    assert list(grid.neighbors(Position(1, 1))) == [
        Position(0, 1),
        Position(2, 1),
        Position(1, 0),
        Position(1, 2),
    ]


def test_one_by_one_grid_has_no_neighbors():
    grid = Grid(1, 1)
    assert list(grid.neighbors(Position(0, 0))) == []


def test_safe_get_never_raises_but_get_does():
    grid = Grid.from_lines(["#.", ".#"])

    assert grid.safe_get(Position(-1, 0)) is None
    assert grid.safe_get(Position(0, 2)) is None
    assert grid.safe_get(Position(2, 0)) is None
    assert grid.safe_get(Position(0, 1)) == "."

    with pytest.raises(IndexError):
        grid.get(Position(0, -1))


def test_set_validates_character_and_bounds():
    grid = Grid(2, 2)
    grid.set(Position(1, 1), "7")
    assert grid.get(Position(1, 1)) == "7"

    with pytest.raises(ValueError):
        grid.set(Position(0, 0), "x")
    with pytest.raises(IndexError):
        grid.set(Position(2, 0), "#")


def test_find_uses_row_major_order():
    grid = Grid.from_lines(["#.3", "3..", "..."])
    assert grid.find("3") == Position(0, 2)
    assert grid.find(".") == Position(0, 1)
    assert grid.find("4") is None


def test_positions_are_row_major():
    grid = Grid(2, 3)
    positions = list(grid.positions())
    assert positions == sorted(positions)
    assert positions[0] == Position(0, 0)
    assert positions[3] == Position(1, 0)


def test_swap_exchanges_two_cells():
    grid = Grid.from_lines(["1.#"])
    grid.swap(Position(0, 0), Position(0, 1))
    assert grid.to_lines() == [".1#"]


def test_from_lines_rejects_bad_shapes():
    with pytest.raises(InvalidMap):
        Grid.from_lines([])
    with pytest.raises(InvalidMap):
        Grid.from_lines([""])
    with pytest.raises(InvalidMap):
        Grid.from_lines(["...", ".."])
    with pytest.raises(InvalidMap):
        Grid.from_lines(["..x"])


def test_copy_is_independent():
    grid = Grid.from_lines(["..", "##"])
    clone = grid.copy()
    clone.set(Position(0, 0), "5")
    assert grid.to_lines() == ["..", "##"]
    assert clone != grid


def test_from_lines_and_to_lines_roundtrip():
    ascii_map = [
        "###",
        "#1#",
        "#.#",
    ]
    grid = Grid.from_lines(ascii_map)
    assert (grid.rows, grid.cols) == (3, 3)
    assert grid.to_lines() == ascii_map
