"""Common type aliases and enumerations.

``Cell`` is the triple produced by every traversal helper on
:class:`expanding_grid.grid.ExpandingGrid`.
"""

from enum import StrEnum, auto
from typing import Tuple, TypeVar

T = TypeVar("T")

Cell = Tuple[T, int, int]
"""``(value, x, y)`` as yielded by ``each`` / ``each_around``."""


class Selection(StrEnum):
    """Which coordinates a row-major traversal visits."""

    ALL = auto()
    SET = auto()
