"""
Feedback collaborators for game events (eat / win / lose).

The engine fires signals and never waits on them. A buzzer-style device
would start a tone on eat_pulse() and stop it on silence().
"""

import logging
from typing import List

from domain.constants import EAT_PULSE, LOSE_PULSE, WIN_PATTERN

logger = logging.getLogger(__name__)


class Feedback:
    """Base feedback sink. Every signal is a no-op."""

    def eat_pulse(self) -> None:
        pass

    def win_pattern(self) -> None:
        pass

    def lose_pulse(self) -> None:
        pass

    def silence(self) -> None:
        pass


class LoggingFeedback(Feedback):
    """Logs each signal."""

    def eat_pulse(self) -> None:
        logger.debug("Feedback: eat pulse")

    def win_pattern(self) -> None:
        logger.info("Feedback: win pattern")

    def lose_pulse(self) -> None:
        logger.info("Feedback: lose pulse")


class RecordingFeedback(Feedback):
    """Records signal names in order; silence() is recorded as 'silence'."""

    def __init__(self):
        self.events: List[str] = []

    def eat_pulse(self) -> None:
        self.events.append(EAT_PULSE)

    def win_pattern(self) -> None:
        self.events.append(WIN_PATTERN)

    def lose_pulse(self) -> None:
        self.events.append(LOSE_PULSE)

    def silence(self) -> None:
        self.events.append("silence")
