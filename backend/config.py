"""
Static game configuration.

Values come from keyword overrides first, then SNAKE_* environment
variables (a .env file is honoured via python-dotenv), then the defaults
below. The configuration is read when a game is reset; nothing is
reconfigured while a game runs.
"""

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Dict, Optional

from dotenv import load_dotenv

from domain.constants import REFILL_IMMEDIATE, REFILL_STRATEGIES

ENV_PREFIX = "SNAKE_"


@dataclass(frozen=True)
class GameConfig:
    rows: int = 8
    columns: int = 8
    init_length: int = 3
    max_length: int = 20
    food_count: int = 3
    refill_strategy: str = REFILL_IMMEDIATE
    deadzone: float = 0.3
    blink_frequency: int = 2
    step_period: float = 0.4  # seconds per tick
    sweep_delay: float = 0.02  # seconds per row of the end-of-game sweep
    terminal_delay: float = 0.5  # pause after the win/lose signal
    food_max_attempts: Optional[int] = None  # None = retry until a free cell is found
    seed: Optional[int] = None

    def validate(self) -> "GameConfig":
        """Raise ValueError if the values cannot describe a playable game."""
        if self.rows < 1 or self.columns < 1:
            raise ValueError(f"Grid must be at least 1x1, got {self.rows}x{self.columns}.")
        if self.init_length < 1:
            raise ValueError("init_length must be at least 1.")
        if self.init_length > self.columns:
            raise ValueError(
                f"init_length {self.init_length} does not fit in {self.columns} columns."
            )
        if self.max_length <= self.init_length:
            raise ValueError("max_length must be greater than init_length.")
        if self.max_length > self.rows * self.columns:
            raise ValueError(
                f"max_length {self.max_length} exceeds the {self.rows * self.columns} grid cells."
            )
        if self.food_count < 0:
            raise ValueError("food_count cannot be negative.")
        if self.refill_strategy not in REFILL_STRATEGIES:
            raise ValueError(
                f"Unknown refill strategy {self.refill_strategy!r}; "
                f"expected one of {', '.join(REFILL_STRATEGIES)}."
            )
        if not 0 <= self.deadzone < 1:
            raise ValueError("deadzone must be in [0, 1).")
        if self.blink_frequency < 1:
            raise ValueError("blink_frequency must be at least 1.")
        if min(self.step_period, self.sweep_delay, self.terminal_delay) < 0:
            raise ValueError("Durations cannot be negative.")
        if self.food_max_attempts is not None and self.food_max_attempts < 1:
            raise ValueError("food_max_attempts must be positive when set.")
        return self


def _optional_int(raw: str) -> Optional[int]:
    if raw.strip().lower() in ("", "none"):
        return None
    return int(raw)


_PARSERS: Dict[str, Callable[[str], Any]] = {
    "rows": int,
    "columns": int,
    "init_length": int,
    "max_length": int,
    "food_count": int,
    "refill_strategy": lambda raw: raw.strip().lower(),
    "deadzone": float,
    "blink_frequency": int,
    "step_period": float,
    "sweep_delay": float,
    "terminal_delay": float,
    "food_max_attempts": _optional_int,
    "seed": _optional_int,
}


def load_config(**overrides: Any) -> GameConfig:
    """
    Build a validated GameConfig.

    Args:
        **overrides: field values that win over the environment; None values
            are ignored so argparse defaults can be passed straight through.
    """
    load_dotenv()

    values: Dict[str, Any] = {}
    for field in fields(GameConfig):
        raw = os.getenv(ENV_PREFIX + field.name.upper())
        if raw is None:
            continue
        try:
            values[field.name] = _PARSERS[field.name](raw)
        except ValueError as e:
            raise ValueError(f"Invalid {ENV_PREFIX}{field.name.upper()}={raw!r}: {e}") from e

    unknown = set(overrides) - {f.name for f in fields(GameConfig)}
    if unknown:
        raise ValueError(f"Unknown config fields: {', '.join(sorted(unknown))}")
    values.update({k: v for k, v in overrides.items() if v is not None})

    return replace(GameConfig(), **values).validate()
