"""expanding_grid
=================

Sparse two-dimensional grid whose bounding rectangle follows the values placed
in it. The package surface is small::

    from expanding_grid import ExpandingGrid, Selection

    grid = ExpandingGrid(fringe=2, default=".")
    grid.set(0, 0, "#").set(4, -1, "#")
    for value, x, y in grid.each(Selection.SET):
        ...

Diagnostics go through ``loguru`` and are disabled by default, as befits a
library; call ``logger.enable("expanding_grid")`` to see them.
"""

from loguru import logger

from .bounds import Bounds
from .coordinate import Coordinate
from .grid import ExpandingGrid
from .options import DEFAULT_FRINGE, DEFAULT_VALUE, GridOptions
from .state import GridState
from .types import Cell, Selection

logger.disable(__name__)

__all__ = [
    "Bounds",
    "Cell",
    "Coordinate",
    "DEFAULT_FRINGE",
    "DEFAULT_VALUE",
    "ExpandingGrid",
    "GridOptions",
    "GridState",
    "Selection",
]
