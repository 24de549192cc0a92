import argparse
import json
import logging
import os
import random
import time
import uuid
from collections import deque
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from config import GameConfig, load_config
from controls import AnalogStickInput, InputSource, RandomInput
from domain import (
    LOST, RIGHT, RUNNING, WON,
    REFILL_IMMEDIATE, REFILL_LAZY_BATCH,
    Canvas, FoodSet, GameState, Snake,
    resolve_heading,
)
from services.displays import FrameRecorderDisplay, NullDisplay, TerminalDisplay
from services.feedback import Feedback, LoggingFeedback
from services.video_generator import SnakeVideoGenerator

logger = logging.getLogger(__name__)

INITIAL_HEADING = RIGHT
# Replay rounds kept in memory; older rounds are dropped first
DEFAULT_MAX_HISTORY = 10_000


class GameController:
    """
    Runs the per-tick state machine:
      - Reads the direction intent and applies the turn rule
      - Moves the snake, eats or cuts the tail
      - Refills food per the configured strategy
      - Flushes the canvas and checks for lose / win
      - Blinks the head, or plays the end-of-game sequence and resets

    All waits go through `sleep` so callers can run the engine without
    real time passing.
    """
    def __init__(
        self,
        config: GameConfig,
        input_source: InputSource,
        display=None,
        feedback: Optional[Feedback] = None,
        sleep: Callable[[float], None] = time.sleep,
        rng: Optional[random.Random] = None,
        max_history: Optional[int] = DEFAULT_MAX_HISTORY,
    ):
        self.config = config.validate()
        self.input_source = input_source
        self.display = display if display is not None else NullDisplay()
        self.feedback = feedback if feedback is not None else Feedback()
        self.sleep = sleep
        self.rng = rng if rng is not None else random.Random(config.seed)

        self.game_id = str(uuid.uuid4())
        self.start_time = time.time()

        # Session bookkeeping
        self.games_played = 0
        self.wins = 0
        self.losses = 0
        self.best_length = 0
        self.total_ticks = 0
        self.results: List[Dict[str, Any]] = []

        # For replay. max_history=None keeps every round.
        if max_history is not None and max_history < 1:
            raise ValueError("max_history must be at least 1.")
        self.history: deque = deque(maxlen=max_history)
        self.dropped_rounds = 0

        self.state: GameState = self.reset()

    def new_game_state(self) -> GameState:
        """Build a fresh canvas, snake and fully stocked food set."""
        cfg = self.config
        canvas = Canvas(cfg.rows, cfg.columns, self.display)
        snake = Snake.spawn(
            canvas,
            init_length=cfg.init_length,
            max_length=cfg.max_length,
            start=(0, cfg.rows // 2),
            heading=INITIAL_HEADING,
        )
        food = FoodSet(canvas, cfg.food_count, rng=self.rng)
        food.place_food(snake, cfg.food_count, max_attempts=cfg.food_max_attempts)
        return GameState(canvas, snake, food, heading=INITIAL_HEADING)

    def reset(self) -> GameState:
        """Replace the whole game state and show the first frame."""
        self.state = self.new_game_state()
        self.state.canvas.flush()
        self.record_history()
        logger.info(
            f"Game {self.games_played + 1} started: length {len(self.state.snake)}, "
            f"{self.state.food.count} food on a {self.config.columns}x{self.config.rows} grid"
        )
        return self.state

    def tick(self) -> str:
        """
        Execute one tick and return its outcome (RUNNING, LOST or WON).

        On LOST or WON the end-of-game sequence has already run and
        self.state is a fresh game when this returns.
        """
        state = self.state
        snake = state.snake

        # 1-2) Direction intent and turn rule
        requested = self.input_source.get_direction(state)
        state.heading = resolve_heading(state.heading, requested)

        # 3-4) Move, then eat or cut the tail
        snake.extend(state.heading)
        if state.food.try_eat(snake.head):
            state.score += 1
            self.feedback.eat_pulse()
            logger.debug(f"Ate food at {snake.head}; length now {len(snake)}")
        else:
            snake.cut()

        # 5) Refill
        self.refill_food()

        # 6) Commit the frame
        state.canvas.flush()

        # 7) Terminal checks, self-collision first
        if snake.check_self_collision():
            state.status = LOST
        elif len(snake) >= self.config.max_length:
            state.status = WON

        state.tick += 1
        self.total_ticks += 1
        self.best_length = max(self.best_length, len(snake))
        self.record_history()

        if state.status == RUNNING:
            # 8) Blink the head for one step period
            self.blink_head()
            self.feedback.silence()
            return RUNNING

        # 9) End of game
        outcome = state.status
        self.end_game(outcome)
        return outcome

    def refill_food(self) -> int:
        food = self.state.food
        target = self.config.food_count
        if self.config.refill_strategy == REFILL_IMMEDIATE:
            shortfall = target - food.count
        elif self.config.refill_strategy == REFILL_LAZY_BATCH:
            shortfall = target if food.count == 0 else 0
        else:
            raise ValueError(f"Unknown refill strategy: {self.config.refill_strategy}")

        if shortfall <= 0:
            return 0
        return food.place_food(self.state.snake, shortfall, max_attempts=self.config.food_max_attempts)

    def blink_head(self) -> None:
        """Toggle the head pixel 2 * blink_frequency times across one step period."""
        canvas = self.state.canvas
        head = self.state.snake.head
        toggles = 2 * self.config.blink_frequency
        interval = self.config.step_period / toggles
        for i in range(toggles):
            canvas.set_pixel(head, i % 2 == 1)
            canvas.flush()
            self.sleep(interval)

    def sweep(self) -> None:
        """Light the screen one row at a time, then clear it."""
        canvas = self.state.canvas
        for row in range(canvas.rows):
            canvas.fill_row(row, True)
            canvas.flush()
            self.sleep(self.config.sweep_delay)
        canvas.clear()
        canvas.flush()

    def end_game(self, outcome: str) -> None:
        state = self.state
        self.games_played += 1
        if outcome == WON:
            self.wins += 1
            self.feedback.win_pattern()
        else:
            self.losses += 1
            self.feedback.lose_pulse()

        self.results.append({
            "game": self.games_played,
            "result": outcome,
            "ticks": state.tick,
            "length": len(state.snake),
            "score": state.score,
        })
        logger.info(
            f"Game {self.games_played} {outcome} after {state.tick} ticks "
            f"with length {len(state.snake)}"
        )

        self.sweep()
        self.sleep(self.config.terminal_delay)
        self.feedback.silence()
        self.reset()

    def record_history(self):
        snapshot = self.state.snapshot()
        snapshot["game"] = self.games_played + 1
        if len(self.history) == self.history.maxlen:
            self.dropped_rounds += 1
        self.history.append(snapshot)

    def summary(self) -> Dict[str, Any]:
        return {
            "game_id": self.game_id,
            "games_played": self.games_played,
            "wins": self.wins,
            "losses": self.losses,
            "best_length": self.best_length,
            "total_ticks": self.total_ticks,
        }

    def save_history_to_json(self, filename: Optional[str] = None) -> str:
        if filename is None:
            os.makedirs('completed_games', exist_ok=True)
            filename = os.path.join('completed_games', f"snake_game_{self.game_id}.json")

        metadata = {
            "game_id": self.game_id,
            "start_time": datetime.fromtimestamp(self.start_time, tz=timezone.utc).isoformat(),
            "end_time": datetime.now(timezone.utc).isoformat(),
            "config": asdict(self.config),
            "results": self.results,
            "dropped_rounds": self.dropped_rounds,
            **{k: v for k, v in self.summary().items() if k != "game_id"},
        }
        data = {
            "metadata": metadata,
            "rounds": list(self.history)
        }

        with open(filename, "w") as f:
            json.dump(data, f, indent=2)
        logger.info(f"Saved replay with {len(self.history)} rounds to {filename}")
        return filename

    def run(self, max_ticks: Optional[int] = None, max_games: Optional[int] = None) -> Dict[str, Any]:
        """Tick until either budget is used up. With neither set, runs forever."""
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            if max_games is not None and self.games_played >= max_games:
                break
            self.tick()
            ticks += 1
        return self.summary()


# -------------------------------
# Game runner
# -------------------------------

def run_game(
    config: GameConfig,
    input_source: InputSource,
    display=None,
    feedback: Optional[Feedback] = None,
    max_ticks: Optional[int] = None,
    max_games: Optional[int] = None,
    replay_path: Optional[str] = None,
    sleep: Callable[[float], None] = time.sleep,
    max_history: Optional[int] = DEFAULT_MAX_HISTORY,
) -> Dict[str, Any]:
    """
    Run the engine and return the session summary.

    Args:
        config: validated game configuration
        input_source: where direction intents come from
        display: display collaborator (defaults to discarding frames)
        feedback: feedback collaborator (defaults to no-op)
        max_ticks / max_games: stop conditions
        replay_path: if set, the replay JSON is written here afterwards
        max_history: replay rounds kept in memory (None keeps all)
    """
    controller = GameController(
        config,
        input_source,
        display=display,
        feedback=feedback,
        sleep=sleep,
        max_history=max_history,
    )
    summary = controller.run(max_ticks=max_ticks, max_games=max_games)

    if replay_path:
        summary["replay_path"] = controller.save_history_to_json(replay_path)
    return summary


# -------------------------------
# Main Entry Point
# -------------------------------
def main():
    parser = argparse.ArgumentParser(
        description="Run the toroidal snake engine with a simulated input device."
    )
    parser.add_argument("--rows", type=int, help="Grid rows")
    parser.add_argument("--columns", type=int, help="Grid columns")
    parser.add_argument("--init-length", type=int, help="Initial snake length")
    parser.add_argument("--max-length", type=int, help="Length that wins the game")
    parser.add_argument("--food", type=int, help="Number of food cells")
    parser.add_argument("--refill", choices=[REFILL_IMMEDIATE, REFILL_LAZY_BATCH],
                        help="Food refill strategy")
    parser.add_argument("--step-period", type=float, help="Seconds per tick")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--ticks", type=int, default=200, help="Maximum number of ticks")
    parser.add_argument("--games", type=int, help="Stop after this many finished games")
    parser.add_argument("--input", choices=["random", "stick"], default="random",
                        help="Input source: random AI or a randomly wobbling analog stick")
    parser.add_argument("--display", choices=["terminal", "video", "none"], default="terminal",
                        help="Where flushed frames go")
    parser.add_argument("--video-path", type=str, default="snake_run.mp4",
                        help="MP4 output when --display video is used")
    parser.add_argument("--save-replay", type=str, help="Write the replay JSON to this path")
    parser.add_argument("--max-history", type=int, default=DEFAULT_MAX_HISTORY,
                        help="Replay rounds kept in memory; the oldest are dropped first")
    parser.add_argument("--log-level", default="INFO", help="Logging level")

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = load_config(
        rows=args.rows,
        columns=args.columns,
        init_length=args.init_length,
        max_length=args.max_length,
        food_count=args.food,
        refill_strategy=args.refill,
        step_period=args.step_period,
        seed=args.seed,
    )

    rng = random.Random(config.seed)
    if args.input == "stick":
        input_source = AnalogStickInput(
            read=lambda: (rng.uniform(-1, 1), rng.uniform(-1, 1)),
            deadzone=config.deadzone,
        )
    else:
        input_source = RandomInput(rng)

    if args.display == "terminal":
        display = TerminalDisplay()
    elif args.display == "video":
        display = FrameRecorderDisplay()
    else:
        display = NullDisplay()

    result = run_game(
        config,
        input_source,
        display=display,
        feedback=LoggingFeedback(),
        max_ticks=args.ticks,
        max_games=args.games,
        replay_path=args.save_replay,
        max_history=args.max_history,
        sleep=(lambda _: None) if args.display == "video" else time.sleep,
    )

    if args.display == "video":
        # Recording skips the waits; play frames back at the blink rate
        fps = max(1, round(2 * config.blink_frequency / config.step_period)) if config.step_period else 8
        result["video_path"] = SnakeVideoGenerator(fps=fps).write_video(display.images(), args.video_path)

    print("\nSession Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
