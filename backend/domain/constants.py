"""
Game constants for the toroidal snake engine.
"""

from typing import Optional, Tuple

# Movement directions, in cyclic order. The index of a direction in
# DIRECTIONS is what the turn rule compares.
LEFT = "LEFT"
UP = "UP"
RIGHT = "RIGHT"
DOWN = "DOWN"
DIRECTIONS = (LEFT, UP, RIGHT, DOWN)
VALID_MOVES = set(DIRECTIONS)

# Input collaborators report NEUTRAL when the stick rests inside the deadzone
NEUTRAL = None

# Row 0 is the top row of the display, so UP decreases y.
UNIT_VECTORS = {
    LEFT: (-1, 0),
    UP: (0, -1),
    RIGHT: (1, 0),
    DOWN: (0, 1),
}

# Game status values
RUNNING = "running"
LOST = "lost"
WON = "won"

# Food refill strategies
REFILL_IMMEDIATE = "immediate"
REFILL_LAZY_BATCH = "lazy_batch"
REFILL_STRATEGIES = (REFILL_IMMEDIATE, REFILL_LAZY_BATCH)

# Feedback signals
EAT_PULSE = "eat_pulse"
WIN_PATTERN = "win_pattern"
LOSE_PULSE = "lose_pulse"


def direction_index(direction: str) -> int:
    """Return the cyclic index of a direction, rejecting unknown values."""
    try:
        return DIRECTIONS.index(direction)
    except ValueError:
        raise ValueError(f"Unknown direction: {direction!r}") from None


def unit_vector(direction: str) -> Tuple[int, int]:
    """Return the (dx, dy) step for a direction."""
    if direction not in UNIT_VECTORS:
        raise ValueError(f"Unknown direction: {direction!r}")
    return UNIT_VECTORS[direction]


def is_opposite(a: str, b: str) -> bool:
    return (direction_index(a) - direction_index(b)) % 4 == 2


def resolve_heading(current: str, requested: Optional[str]) -> str:
    """
    Apply the turn rule: only 90 degree turns change the heading.

    A neutral request, a request for the current heading, or a reversal
    leaves the current heading in place.
    """
    if requested is NEUTRAL:
        return current
    if (direction_index(requested) - direction_index(current)) % 2 == 1:
        return requested
    return current
