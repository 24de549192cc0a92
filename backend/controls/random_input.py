"""
Random input implementation - picks random safe turns.
"""

import random
from typing import List, Optional

from domain.constants import DIRECTIONS, NEUTRAL, resolve_heading
from domain.game_state import GameState
from .base import InputSource


class RandomInput(InputSource):
    """
    A random AI that picks a direction whose next cell is not body.

    The grid wraps, so there are no walls to avoid. The tail is treated as
    free because it moves away on a non-eating tick.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_direction(self, game_state: GameState) -> Optional[str]:
        snake = game_state.snake
        body = list(snake.positions)[1:]

        # Only moves the turn rule would accept are worth considering
        candidates = [
            d for d in DIRECTIONS
            if resolve_heading(game_state.heading, d) == d
        ]

        safe_moves: List[str] = []
        for move in candidates:
            next_cell = snake.head.step(move, game_state.width, game_state.height)
            if next_cell not in body:
                safe_moves.append(move)

        # If no valid moves, stay neutral (we'll die anyway)
        if not safe_moves:
            return NEUTRAL

        return self.rng.choice(safe_moves)
