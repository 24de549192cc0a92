"""
Tests for config.py - configuration loading and validation.
"""

import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config
from config import GameConfig, load_config
from domain import REFILL_IMMEDIATE, REFILL_LAZY_BATCH


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep a developer's .env and SNAKE_* variables out of the tests."""
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    for key in list(os.environ):
        if key.startswith(config.ENV_PREFIX):
            monkeypatch.delenv(key)


class TestLoadConfig:
    """Tests for load_config()."""

    def test_defaults(self):
        cfg = load_config()

        assert cfg == GameConfig()
        assert cfg.refill_strategy == REFILL_IMMEDIATE
        assert cfg.food_max_attempts is None

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SNAKE_ROWS", "10")
        monkeypatch.setenv("SNAKE_REFILL_STRATEGY", "LAZY_BATCH")
        monkeypatch.setenv("SNAKE_SEED", "none")

        cfg = load_config()

        assert cfg.rows == 10
        assert cfg.refill_strategy == REFILL_LAZY_BATCH
        assert cfg.seed is None

    def test_overrides_win_over_environment(self, monkeypatch):
        monkeypatch.setenv("SNAKE_ROWS", "10")

        cfg = load_config(rows=12, columns=None)

        assert cfg.rows == 12
        assert cfg.columns == GameConfig().columns

    def test_bad_environment_value(self, monkeypatch):
        monkeypatch.setenv("SNAKE_COLUMNS", "wide")

        with pytest.raises(ValueError, match="SNAKE_COLUMNS"):
            load_config()

    def test_unknown_override(self):
        with pytest.raises(ValueError):
            load_config(colour="green")


class TestValidate:
    """Tests for GameConfig.validate()."""

    @pytest.mark.parametrize("overrides", [
        {"rows": 0},
        {"init_length": 0},
        {"init_length": 9},
        {"max_length": 2},
        {"max_length": 3},
        {"max_length": 65},
        {"food_count": -1},
        {"refill_strategy": "sometimes"},
        {"deadzone": 1.0},
        {"blink_frequency": 0},
        {"step_period": -0.1},
        {"food_max_attempts": 0},
    ])
    def test_rejects_unplayable_values(self, overrides):
        with pytest.raises(ValueError):
            load_config(**overrides)

    def test_accepts_snake_filling_the_grid(self):
        cfg = GameConfig(rows=2, columns=2, init_length=2, max_length=4).validate()
        assert cfg.max_length == 4
