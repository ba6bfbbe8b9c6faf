# tests/integration/test_grid_shrink.py

import pytest
from typing import Any

from expanding_grid import ExpandingGrid
from tests.test_utils import ORIGIN_GEOMETRY, geometry, make_diagonal_grid


def test_shrinks_to_fit_set_positions_and_fringe() -> None:
    grid = make_diagonal_grid()
    grid.unset(-1, 1).unset(1, -1)
    grid.shrink()
    assert grid.width == 1 + grid.fringe
    assert grid.height == 1 + grid.fringe
    assert grid.at(0, 0) == "mid"


@pytest.mark.parametrize("fringe", [0, 1, 3])
def test_shrink_matches_fresh_grid(fringe: int) -> None:
    grid: ExpandingGrid[Any] = ExpandingGrid(fringe=fringe)
    for x in range(-6, 7, 3):
        grid.set(x, x, "dot")
    grid.unset(-6, -6).unset(6, 6)
    grid.shrink()

    fresh: ExpandingGrid[Any] = ExpandingGrid(fringe=fringe)
    for x in (-3, 0, 3):
        fresh.set(x, x, "dot")
    assert geometry(grid) == geometry(fresh)
    assert grid.cells == fresh.cells


def test_shrink_empty_grid_resets_geometry() -> None:
    grid: ExpandingGrid[Any] = ExpandingGrid().set(5, 5, "dot").set(-5, -5, "dot")
    grid.unset(5, 5).unset(-5, -5)
    grid.shrink()
    assert geometry(grid) == ORIGIN_GEOMETRY
    assert len(grid.cells) == 0


def test_shrink_empty_fringed_grid() -> None:
    grid: ExpandingGrid[Any] = ExpandingGrid(fringe=2).set(9, 9, "dot").unset(9, 9)
    grid.shrink()
    assert geometry(grid) == geometry(ExpandingGrid(fringe=2))


def test_shrink_is_idempotent() -> None:
    grid = make_diagonal_grid(fringe=2).set(7, -4, "far")
    grid.unset(-1, 1)
    grid.shrink()
    once = geometry(grid)
    grid.shrink()
    assert geometry(grid) == once


def test_shrink_keeps_options_and_returns_self() -> None:
    grid: ExpandingGrid[str] = ExpandingGrid(fringe=1, default=".").set(4, 4, "dot")
    options = grid.options
    assert grid.shrink() is grid
    assert grid.options is options
    assert grid.fringe == 1
    assert grid.default == "."


def test_shrink_keeps_values() -> None:
    grid = make_diagonal_grid(default=".").set(5, 0, "far")
    before = list(grid.each("set"))
    grid.unset(5, 0)
    grid.shrink()
    assert list(grid.each("set")) == [cell for cell in before if cell[0] != "far"]
    assert grid.right == 1


def test_replace_adopts_other_grid() -> None:
    grid: ExpandingGrid[Any] = ExpandingGrid().set(1, 1, "a")
    other: ExpandingGrid[Any] = ExpandingGrid(fringe=2, default="-").set(-3, 0, "b")
    assert grid.replace(other) is grid
    assert grid.options == other.options
    assert grid.bounds == other.bounds
    assert grid.cells == other.cells
    assert grid.at(1, 1) == "-"


def test_replaced_grid_is_independent() -> None:
    grid: ExpandingGrid[Any] = ExpandingGrid()
    other: ExpandingGrid[Any] = ExpandingGrid().set(1, 0, "b")
    grid.replace(other)
    other.set(5, 5, "c")
    grid.unset(1, 0)
    assert grid.at(5, 5) is None
    assert other.at(1, 0) == "b"
