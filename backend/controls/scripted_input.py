"""
Scripted input - replays a fixed sequence of direction intents.
"""

from typing import Iterable, Optional

from domain.constants import NEUTRAL, VALID_MOVES
from domain.game_state import GameState
from .base import InputSource


class ScriptedInput(InputSource):
    """
    Returns the given intents one per tick, then NEUTRAL forever.

    Useful for replays and for driving the engine deterministically.
    """

    def __init__(self, moves: Iterable[Optional[str]]):
        self.moves = list(moves)
        for move in self.moves:
            if move is not NEUTRAL and move not in VALID_MOVES:
                raise ValueError(f"Unknown direction in script: {move!r}")
        self.position = 0

    def get_direction(self, game_state: GameState) -> Optional[str]:
        if self.position >= len(self.moves):
            return NEUTRAL
        move = self.moves[self.position]
        self.position += 1
        return move
