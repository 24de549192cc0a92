"""
Analog stick input - turns a raw (x, y) deflection into a direction.
"""

from typing import Callable, Optional, Tuple

from domain.constants import DOWN, LEFT, NEUTRAL, RIGHT, UP
from domain.game_state import GameState
from .base import InputSource


class AnalogStickInput(InputSource):
    """
    Maps a stick reading to a direction intent.

    `read` returns (x, y) with both axes in [-1.0, 1.0]; positive x points
    right and positive y points down, matching the display rows. A reading
    whose dominant axis stays within `deadzone` is NEUTRAL. When both axes
    are deflected equally the horizontal axis wins.
    """

    def __init__(self, read: Callable[[], Tuple[float, float]], deadzone: float = 0.3):
        if not 0 <= deadzone < 1:
            raise ValueError("deadzone must be in [0, 1).")
        self.read = read
        self.deadzone = deadzone

    def get_direction(self, game_state: GameState) -> Optional[str]:
        x, y = self.read()
        if max(abs(x), abs(y)) <= self.deadzone:
            return NEUTRAL
        if abs(x) >= abs(y):
            return RIGHT if x > 0 else LEFT
        return DOWN if y > 0 else UP
