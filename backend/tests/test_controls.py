"""
Tests for the input sources.
"""

import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from controls import AnalogStickInput, RandomInput, ScriptedInput
from domain import LEFT, UP, RIGHT, DOWN, NEUTRAL, Canvas, FoodSet, GameState, Snake


def make_state(cells, heading=RIGHT, rows=5, columns=5):
    canvas = Canvas(rows, columns)
    snake = Snake(cells, canvas, max_length=20)
    return GameState(canvas, snake, FoodSet(canvas, 1), heading=heading)


class TestScriptedInput:
    """Tests for the ScriptedInput class."""

    def test_returns_moves_in_order_then_neutral(self):
        source = ScriptedInput([UP, None, LEFT])
        state = make_state([(0, 0), (1, 0)])

        moves = [source.get_direction(state) for _ in range(5)]

        assert moves == [UP, NEUTRAL, LEFT, NEUTRAL, NEUTRAL]

    def test_rejects_unknown_moves(self):
        with pytest.raises(ValueError):
            ScriptedInput(["SIDEWAYS"])


class TestRandomInput:
    """Tests for the RandomInput class."""

    def test_returns_acceptable_move(self):
        source = RandomInput(random.Random(0))
        state = make_state([(0, 2), (1, 2), (2, 2)])

        for _ in range(20):
            assert source.get_direction(state) in {UP, RIGHT, DOWN}

    def test_avoids_body(self):
        """With UP and RIGHT blocked by body, the only safe move is DOWN."""
        source = RandomInput(random.Random(0))
        state = make_state([(3, 3), (3, 2), (3, 1), (2, 1), (1, 1), (1, 2), (2, 2)])

        for _ in range(20):
            assert source.get_direction(state) == DOWN

    def test_considers_wrapped_neighbours(self):
        """The cell across the edge counts as a neighbour."""
        source = RandomInput(random.Random(0))
        # Head at (4, 2) heading RIGHT; RIGHT wraps to (0, 2), which is body.
        state = make_state([(0, 1), (0, 2), (1, 2), (2, 2), (3, 2), (4, 2)])

        for _ in range(20):
            assert source.get_direction(state) in {UP, DOWN}


class TestAnalogStickInput:
    """Tests for the AnalogStickInput class."""

    @pytest.mark.parametrize("reading,expected", [
        ((0.1, -0.2), NEUTRAL),
        ((0.3, 0.0), NEUTRAL),
        ((0.9, 0.1), RIGHT),
        ((-0.5, 0.2), LEFT),
        ((0.1, 0.8), DOWN),
        ((0.0, -0.8), UP),
        ((0.5, 0.5), RIGHT),
    ])
    def test_maps_reading_to_direction(self, reading, expected):
        source = AnalogStickInput(read=lambda: reading, deadzone=0.3)

        assert source.get_direction(make_state([(0, 0)])) == expected

    def test_invalid_deadzone(self):
        with pytest.raises(ValueError):
            AnalogStickInput(read=lambda: (0, 0), deadzone=1.5)
