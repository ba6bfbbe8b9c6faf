"""Sparse, auto-expanding two-dimensional grid.

:class:`ExpandingGrid` maps integer ``(x, y)`` coordinates to values and keeps
track of a bounding rectangle that grows as values are placed near its edges.
Only values different from the grid's ``default`` are stored; every other
coordinate, inside the rectangle or not, reads back as ``default``.

Coordinates follow the mathematical convention: ``x`` grows to the right and
``y`` grows upwards, so traversals start at ``(left, top)`` and finish at
``(right, bottom)``.

Example::

    grid = ExpandingGrid(fringe=1).set(0, 0, "a").set(3, 0, "b")
    grid.width   # 6, from x=-1 to x=4
    [value for value, _, _ in grid.each(Selection.SET)]  # ["a", "b"]

The grid is a plain single-owner container; it performs no locking.
"""

from __future__ import annotations

from typing import Generic, Iterator, Optional, Union

from loguru import logger
from pyrsistent.typing import PMap

from expanding_grid.bounds import Bounds
from expanding_grid.coordinate import Coordinate
from expanding_grid.options import DEFAULT_FRINGE, DEFAULT_VALUE, GridOptions
from expanding_grid.state import GridState
from expanding_grid.types import Cell, Selection, T


class ExpandingGrid(Generic[T]):
    """Mutable owner of a :class:`GridState` plus its fixed options.

    Arguments:
        fringe: Padding kept between set coordinates and the rectangle edges.
        default: Value reported for absent coordinates.
        options: Ready-made options; takes precedence over ``fringe`` and
            ``default`` when given.
    """

    def __init__(
        self,
        fringe: int = DEFAULT_FRINGE,
        default: Optional[T] = DEFAULT_VALUE,
        *,
        options: Optional[GridOptions[T]] = None,
    ) -> None:
        if options is None:
            options = GridOptions(fringe=fringe, default=default)
        self._options: GridOptions[T] = options
        self._state: GridState[T] = GridState.initial(options.fringe)
        logger.debug("new grid {} with bounds {}", options, self._state.bounds)

    @classmethod
    def from_options(cls, options: GridOptions[T]) -> ExpandingGrid[T]:
        return cls(options=options)

    # -------- Configuration --------

    @property
    def options(self) -> GridOptions[T]:
        return self._options

    @property
    def fringe(self) -> int:
        return self._options.fringe

    @property
    def default(self) -> T:
        return self._options.default

    # -------- Geometry --------

    @property
    def bounds(self) -> Bounds:
        return self._state.bounds

    @property
    def top(self) -> int:
        return self._state.bounds.top

    @property
    def left(self) -> int:
        return self._state.bounds.left

    @property
    def bottom(self) -> int:
        return self._state.bounds.bottom

    @property
    def right(self) -> int:
        return self._state.bounds.right

    @property
    def width(self) -> int:
        return self._state.bounds.width

    @property
    def height(self) -> int:
        return self._state.bounds.height

    @property
    def cells(self) -> PMap[Coordinate, T]:
        """Persistent view of every stored (non-default) value."""
        return self._state.cells

    # -------- Cell access --------

    def at(self, x: int, y: int) -> T:
        """Return the value at ``(x, y)``, or ``default`` if nothing is stored.

        Never fails and never changes the bounds, whether or not the
        coordinate lies inside them.
        """
        return self._state.cells.get(Coordinate(x, y), self._options.default)

    def set(self, x: int, y: int, value: T) -> ExpandingGrid[T]:
        """Store ``value`` at ``(x, y)`` and grow the bounds around it.

        Setting the default value is the same as :meth:`unset`. Returns the
        grid itself so calls can be chained.
        """
        if value == self._options.default:
            return self.unset(x, y)
        before = self._state.bounds
        self._state = self._state.place(Coordinate(x, y), value, self._options.fringe)
        if self._state.bounds is not before:
            logger.debug(
                "grid grew from {} to {} placing ({}, {})",
                before,
                self._state.bounds,
                x,
                y,
            )
        return self

    def unset(self, x: int, y: int) -> ExpandingGrid[T]:
        """Remove whatever is stored at ``(x, y)``; the bounds stay as they are."""
        self._state = self._state.remove(Coordinate(x, y))
        return self

    # -------- Traversal --------

    def each(self, selection: Union[Selection, str] = Selection.ALL) -> Iterator[Cell[T]]:
        """Iterate the rectangle row by row, from top left to bottom right.

        Arguments:
            selection: ``Selection.ALL`` yields every coordinate in the
                rectangle (absent ones as ``default``); ``Selection.SET``
                skips coordinates holding the default value. The plain
                strings ``"all"`` and ``"set"`` are accepted too.

        Returns:
            Iterator[Cell[T]]: Lazy ``(value, x, y)`` triples over the bounds
            as they are when iteration starts.

        Raises:
            ValueError: If ``selection`` names no known selection.
        """
        return self._each(Selection(selection))

    def _each(self, selection: Selection) -> Iterator[Cell[T]]:
        bounds = self._state.bounds
        default = self._options.default
        for y in range(bounds.top, bounds.bottom - 1, -1):
            for x in range(bounds.left, bounds.right + 1):
                value = self.at(x, y)
                if selection is Selection.SET and value == default:
                    continue
                yield value, x, y

    def each_around(self, x: int, y: int) -> Iterator[Cell[T]]:
        """Iterate the set neighbours of ``(x, y)`` in the same row-major order.

        Covers the surrounding 3x3 block minus its centre and skips
        coordinates holding the default value. The block may reach outside
        the bounds.
        """
        default = self._options.default
        for at_y in range(y + 1, y - 2, -1):
            for at_x in range(x - 1, x + 2):
                if at_x == x and at_y == y:
                    continue
                value = self.at(at_x, at_y)
                if value == default:
                    continue
                yield value, at_x, at_y

    # -------- Whole-grid operations --------

    def replace(self, other: ExpandingGrid[T]) -> ExpandingGrid[T]:
        """Adopt ``other``'s options, bounds and cells wholesale."""
        self._options = other._options
        self._state = other._state
        return self

    def shrink(self) -> ExpandingGrid[T]:
        """Reduce the bounds to the minimum needed by the currently set cells.

        A fresh grid with the same options replays every set coordinate in
        traversal order; its state then replaces this grid's state. Without
        any set coordinates the result matches a newly constructed grid.
        """
        shrunk: ExpandingGrid[T] = type(self).from_options(self._options)
        for value, x, y in self.each(Selection.SET):
            shrunk.set(x, y, value)
        logger.debug(
            "grid shrank from {} to {} keeping {} cells",
            self._state.bounds,
            shrunk.bounds,
            len(shrunk.cells),
        )
        return self.replace(shrunk)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(fringe={self.fringe!r}, default={self.default!r}, "
            f"bounds={self.bounds!r}, cells={len(self.cells)})"
        )
