"""Immutable snapshot of a grid's contents.

:class:`GridState` bundles the bounding rectangle with the sparse cell store.
An :class:`expanding_grid.grid.ExpandingGrid` holds exactly one of these and
replaces it on every mutation, so swapping in a recomputed state (as
``shrink`` does) is a single assignment.

Design notes:

* ``cells`` is a **persistent map** (``pyrsistent.PMap``) keyed by
    :class:`Coordinate`. Absence of a key means the coordinate holds the
    grid's default value; entries equal to the default are never stored.
* ``bounds`` only grows through :meth:`GridState.place`.
"""

from dataclasses import dataclass, field
from typing import Generic

from pyrsistent import pmap
from pyrsistent.typing import PMap

from expanding_grid.bounds import Bounds
from expanding_grid.coordinate import Coordinate
from expanding_grid.types import T


@dataclass(frozen=True)
class GridState(Generic[T]):
    """Bounds plus sparse storage.

    Attributes:
        bounds (Bounds): Tracked rectangle.
        cells (PMap[Coordinate, T]): Non-default values keyed by coordinate.
    """

    bounds: Bounds = field(default_factory=Bounds.origin)
    cells: PMap[Coordinate, T] = field(default_factory=pmap)

    @classmethod
    def initial(cls, fringe: int) -> "GridState[T]":
        """Empty state whose bounds already carry ``fringe`` around the origin."""
        return cls(bounds=Bounds.origin().fit(0, 0, fringe))

    def place(self, coordinate: Coordinate, value: T, fringe: int) -> "GridState[T]":
        """Store ``value`` and grow the bounds around ``coordinate``."""
        return GridState(
            bounds=self.bounds.fit(coordinate.x, coordinate.y, fringe),
            cells=self.cells.set(coordinate, value),
        )

    def remove(self, coordinate: Coordinate) -> "GridState[T]":
        """Drop ``coordinate`` from storage, keeping the bounds."""
        if coordinate not in self.cells:
            return self
        return GridState(bounds=self.bounds, cells=self.cells.remove(coordinate))
