"""
FoodSet entity - the food cells currently on the board.
"""

import logging
import random
from typing import List, Optional, Tuple

from .canvas import Canvas
from .point import Point
from .snake import Snake

logger = logging.getLogger(__name__)


class FoodSet:
    """
    An unordered, bounded collection of food cells.

    Food cells never overlap each other or the snake: place_food only
    accepts free cells, and the controller removes a cell the moment the
    head lands on it.
    """

    def __init__(self, canvas: Canvas, capacity: int, rng: Optional[random.Random] = None):
        self.canvas = canvas
        self.capacity = capacity
        self.cells: List[Point] = []
        self.rng = rng or random.Random()
        # Warned about the current run of short placements
        self._short_logged = False

    @property
    def count(self) -> int:
        return len(self.cells)

    def __len__(self):
        return len(self.cells)

    def __contains__(self, point) -> bool:
        return point in self.cells

    def place_food(self, snake: Snake, count: int, max_attempts: Optional[int] = None) -> int:
        """
        Place `count` food cells on random free cells.

        Each piece is found by rejection sampling: draw a uniform random cell
        and retry while it is taken by the snake or by other food. With
        max_attempts=None sampling is unbounded, except that placement stops
        once no free cell is left. With max_attempts set, a piece is given up
        after that many rejected draws.

        Returns:
            The number of pieces actually placed.
        """
        if len(self.cells) + count > self.capacity:
            raise ValueError(
                f"Cannot place {count} food: {len(self.cells)} of {self.capacity} slots used."
            )

        columns, rows = self.canvas.columns, self.canvas.rows
        placed = 0
        for _ in range(count):
            if self._free_cell_count(snake) == 0:
                self._log_shortfall("No free cell left for food; placed %d of %d", placed, count)
                break

            cell = self._sample_free_cell(snake, columns, rows, max_attempts)
            if cell is None:
                self._log_shortfall(
                    "Gave up placing food after %d attempts; placed %d of %d",
                    max_attempts, placed, count,
                )
                break

            self.cells.append(cell)
            self.canvas.set_pixel(cell, True)
            placed += 1
        if placed == count:
            self._short_logged = False
        return placed

    def _log_shortfall(self, msg: str, *args) -> None:
        if self._short_logged:
            logger.debug(msg, *args)
        else:
            logger.warning(msg, *args)
            self._short_logged = True

    def _sample_free_cell(
        self, snake: Snake, columns: int, rows: int, max_attempts: Optional[int]
    ) -> Optional[Point]:
        attempts = 0
        while max_attempts is None or attempts < max_attempts:
            attempts += 1
            cell = Point(self.rng.randrange(columns), self.rng.randrange(rows))
            if not snake.is_occupied(cell) and cell not in self.cells:
                return cell
        return None

    def _free_cell_count(self, snake: Snake) -> int:
        taken = set(snake.positions)
        taken.update(self.cells)
        return self.canvas.rows * self.canvas.columns - len(taken)

    def try_eat(self, point: Tuple[int, int]) -> bool:
        """
        Remove the food at `point`, if any.

        Removal swaps the last cell into the eaten slot, so the order of the
        remaining cells is not preserved. The pixel is left alone because the
        head now occupies it.
        """
        for i, cell in enumerate(self.cells):
            if cell == point:
                self.cells[i] = self.cells[-1]
                self.cells.pop()
                return True
        return False

    def __repr__(self):
        return f"<FoodSet count={len(self.cells)} capacity={self.capacity}>"
