"""Coordinate value type.

Immutable integer grid coordinates used as keys of the sparse cell store.
Unlike screen coordinates, ``y`` grows upwards: the top row has the largest
``y``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """Grid coordinate.

    Attributes:
        x: Column index (grows to the right).
        y: Row index (grows upwards).
    """

    x: int
    y: int
