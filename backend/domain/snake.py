"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Tuple

from .canvas import Canvas
from .point import Point


class SnakeCapacityError(RuntimeError):
    """Raised when extend() is called on a snake already holding capacity cells."""


class Snake:
    """
    Represents the player snake on the toroidal grid.

    Attributes:
        positions: deque of Points from the tail at index 0 to the head at the end
        capacity: max_length + 1, leaving one slack slot for the cell added by
            extend() before the tail is cut
        canvas: the Canvas this snake keeps its pixels lit on
    """

    def __init__(self, positions: Iterable[Tuple[int, int]], canvas: Canvas, max_length: int):
        self.positions = deque(Point(*p) for p in positions)
        self.max_length = max_length
        self.capacity = max_length + 1
        self.canvas = canvas

        if not self.positions:
            raise ValueError("A snake needs at least one cell.")
        if len(self.positions) > self.capacity:
            raise SnakeCapacityError(
                f"Snake of length {len(self.positions)} exceeds capacity {self.capacity}."
            )

        for cell in self.positions:
            canvas.set_pixel(cell, True)

    @classmethod
    def spawn(
        cls,
        canvas: Canvas,
        init_length: int,
        max_length: int,
        start: Tuple[int, int],
        heading: str,
    ) -> "Snake":
        """Lay out init_length contiguous cells from start (the tail) along heading."""
        cells = [Point(*start).wrap(canvas.columns, canvas.rows)]
        for _ in range(init_length - 1):
            cells.append(cells[-1].step(heading, canvas.columns, canvas.rows))
        return cls(cells, canvas, max_length)

    @property
    def head(self) -> Point:
        """Return the head position (last element)."""
        return self.positions[-1]

    @property
    def tail(self) -> Point:
        """Return the tail position (first element)."""
        return self.positions[0]

    @property
    def length(self) -> int:
        return len(self.positions)

    def __len__(self):
        return len(self.positions)

    def extend(self, direction: str) -> Point:
        """Append a new head one step along `direction` and light its pixel."""
        if len(self.positions) >= self.capacity:
            raise SnakeCapacityError(
                f"extend() called at capacity {self.capacity}; cut() was skipped."
            )
        new_head = self.head.step(direction, self.canvas.columns, self.canvas.rows)
        self.positions.append(new_head)
        self.canvas.set_pixel(new_head, True)
        return new_head

    def cut(self) -> Point:
        """Remove the tail cell and turn its pixel off."""
        tail = self.positions.popleft()
        # A head that just moved onto the old tail cell keeps that pixel lit.
        if tail not in self.positions:
            self.canvas.set_pixel(tail, False)
        return tail

    def is_occupied(self, point: Tuple[int, int]) -> bool:
        return point in self.positions

    def check_self_collision(self) -> bool:
        """
        Return True if the head sits on any other cell of the body.

        Only the head can newly collide after a single extend/cut, so this
        compares the head against the rest of the body instead of checking
        every pair. Call it once per tick, after the movement is resolved.
        """
        head = self.head
        return any(cell == head for cell in list(self.positions)[:-1])

    def __repr__(self):
        return f"<Snake length={len(self.positions)} head={self.head} tail={self.tail}>"
