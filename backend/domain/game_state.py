"""
GameState entity - everything one game owns, replaced wholesale on reset.
"""

from typing import Any, Dict

from .canvas import Canvas
from .constants import RUNNING
from .food import FoodSet
from .snake import Snake


class GameState:
    """
    The live state of one game.

    Attributes:
        canvas: pixel buffer the snake and food draw on
        snake: the player snake
        food: the food cells on the board
        heading: current direction of travel
        status: RUNNING, LOST or WON
        tick: number of ticks played in this game (0-based)
        score: food eaten in this game
    """

    def __init__(
        self,
        canvas: Canvas,
        snake: Snake,
        food: FoodSet,
        heading: str,
        status: str = RUNNING,
        tick: int = 0,
        score: int = 0,
    ):
        self.canvas = canvas
        self.snake = snake
        self.food = food
        self.heading = heading
        self.status = status
        self.tick = tick
        self.score = score

    @property
    def width(self) -> int:
        return self.canvas.columns

    @property
    def height(self) -> int:
        return self.canvas.rows

    def snapshot(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict of this state for replays."""
        return {
            "tick": self.tick,
            "snake": [list(cell) for cell in self.snake.positions],
            "food": [list(cell) for cell in self.food.cells],
            "heading": self.heading,
            "status": self.status,
            "score": self.score,
        }

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        * = food
        o = snake body
        H = snake head
        Row 0 is printed first, matching the display orientation.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for fx, fy in self.food.cells:
            board[fy][fx] = '*'

        for x, y in self.snake.positions:
            board[y][x] = 'o'
        hx, hy = self.snake.head
        board[hy][hx] = 'H'

        return "\n".join("".join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, status={self.status}, heading={self.heading}, "
            f"length={len(self.snake)}, food={self.food.cells}, score={self.score}>"
        )
