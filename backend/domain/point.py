"""
Point value type for grid coordinates.
"""

from typing import NamedTuple

from .constants import unit_vector


class Point(NamedTuple):
    """
    An (x, y) cell on the grid.

    x is the column, y is the row. Points compare equal to plain (x, y)
    tuples, so cells loaded from JSON replays can be used directly.
    """

    x: int
    y: int

    def wrap(self, columns: int, rows: int) -> "Point":
        """Normalize into [0, columns) x [0, rows) on the torus."""
        # Adding the dimensions keeps the operand non-negative for a single step.
        return Point((self.x + columns) % columns, (self.y + rows) % rows)

    def step(self, direction: str, columns: int, rows: int) -> "Point":
        """Return the neighbouring cell in `direction`, wrapping at the edges."""
        dx, dy = unit_vector(direction)
        return Point(self.x + dx, self.y + dy).wrap(columns, rows)
