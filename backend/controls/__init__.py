"""
Input sources for the snake engine.

This module contains the input abstraction and implementations that
report the player's direction intent each tick.
"""

from .base import InputSource
from .scripted_input import ScriptedInput
from .random_input import RandomInput
from .analog_stick import AnalogStickInput

__all__ = [
    'InputSource',
    'ScriptedInput',
    'RandomInput',
    'AnalogStickInput',
]
