"""Bounding rectangle helpers.

:class:`Bounds` is the inclusive rectangle an expanding grid tracks as its
visible extent. Like every other value in this package it is immutable;
growing the rectangle produces a new ``Bounds``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Bounds:
    """Inclusive rectangle ``left..right`` x ``bottom..top``.

    Attributes:
        top: Largest ``y`` inside the rectangle.
        left: Smallest ``x`` inside the rectangle.
        bottom: Smallest ``y`` inside the rectangle.
        right: Largest ``x`` inside the rectangle.
    """

    top: int = 0
    left: int = 0
    bottom: int = 0
    right: int = 0

    @classmethod
    def origin(cls) -> "Bounds":
        """Return the 1x1 rectangle holding only (0, 0)."""
        return cls(0, 0, 0, 0)

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        return self.top - self.bottom + 1

    def contains(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` lies within the rectangle."""
        return self.left <= x <= self.right and self.bottom <= y <= self.top

    def fit(self, x: int, y: int, fringe: int) -> "Bounds":
        """Grow the rectangle so ``(x, y)`` keeps ``fringe`` cells of padding.

        Each edge is moved to sit ``fringe`` away from the coordinate when the
        coordinate comes within ``fringe`` of it. All four comparisons are made
        against this rectangle, so a coordinate touching two edges moves both
        independently. Edges never move inwards.

        Arguments:
            x: Column of the coordinate being placed.
            y: Row of the coordinate being placed.
            fringe: Padding to keep between the coordinate and touched edges.

        Returns:
            Bounds: The grown rectangle (``self`` if nothing changed).
        """
        left = x - fringe if x <= self.left + fringe else self.left
        right = x + fringe if x >= self.right - fringe else self.right
        bottom = y - fringe if y <= self.bottom + fringe else self.bottom
        top = y + fringe if y >= self.top - fringe else self.top
        if (top, left, bottom, right) == (self.top, self.left, self.bottom, self.right):
            return self
        return Bounds(top=top, left=left, bottom=bottom, right=right)
