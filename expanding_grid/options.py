"""Construction options for :class:`expanding_grid.grid.ExpandingGrid`.

A grid keeps its ``GridOptions`` verbatim for its whole lifetime; ``shrink``
rebuilds from the very same value.
"""

from dataclasses import dataclass, replace
from typing import Any, Generic

from expanding_grid.types import T

DEFAULT_FRINGE = 0
"""Padding kept around set coordinates when none is requested."""

DEFAULT_VALUE = None
"""Value reported for absent coordinates when none is requested."""


@dataclass(frozen=True)
class GridOptions(Generic[T]):
    """Immutable grid configuration.

    Attributes:
        fringe (int): Minimum padding kept between the outermost set
            coordinates and the edges of the bounding rectangle.
        default (T): Value reported for absent coordinates. Setting a
            coordinate to this value removes it.
    """

    fringe: int = DEFAULT_FRINGE
    default: T = DEFAULT_VALUE  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if isinstance(self.fringe, bool) or not isinstance(self.fringe, int):
            raise TypeError(
                f"fringe must be an int, got {type(self.fringe).__name__}"
            )
        if self.fringe < 0:
            raise ValueError(f"fringe must be non-negative, got {self.fringe}")

    def with_changes(self, **changes: Any) -> "GridOptions[T]":
        """Return a copy with ``changes`` applied (validated again)."""
        return replace(self, **changes)
