"""
Domain entities for the toroidal snake engine.

This module contains the grid model (points, pixel canvas, snake, food)
that is independent of the display, input and feedback devices.
"""

from .constants import (
    LEFT, UP, RIGHT, DOWN, DIRECTIONS, VALID_MOVES, NEUTRAL,
    RUNNING, LOST, WON,
    REFILL_IMMEDIATE, REFILL_LAZY_BATCH, REFILL_STRATEGIES,
    EAT_PULSE, WIN_PATTERN, LOSE_PULSE,
    unit_vector, is_opposite, resolve_heading,
)
from .point import Point
from .canvas import Canvas
from .snake import Snake, SnakeCapacityError
from .food import FoodSet
from .game_state import GameState

__all__ = [
    'LEFT', 'UP', 'RIGHT', 'DOWN', 'DIRECTIONS', 'VALID_MOVES', 'NEUTRAL',
    'RUNNING', 'LOST', 'WON',
    'REFILL_IMMEDIATE', 'REFILL_LAZY_BATCH', 'REFILL_STRATEGIES',
    'EAT_PULSE', 'WIN_PATTERN', 'LOSE_PULSE',
    'unit_vector', 'is_opposite', 'resolve_heading',
    'Point',
    'Canvas',
    'Snake',
    'SnakeCapacityError',
    'FoodSet',
    'GameState',
]
