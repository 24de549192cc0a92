"""
Base input interface for the game engine.
"""

from typing import Optional

from domain.game_state import GameState


class InputSource:
    """
    Base class/interface for directional input.

    An input source reports the player's current direction intent. It is
    responsible for its own thresholding and debouncing; the engine only
    applies the turn rule to whatever it returns.
    """

    def get_direction(self, game_state: GameState) -> Optional[str]:
        """
        Return the current direction intent.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "LEFT", "UP", "RIGHT", "DOWN", or None (NEUTRAL)
        """
        raise NotImplementedError
