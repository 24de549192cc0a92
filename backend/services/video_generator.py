"""
Video Generation Service for Snake Game Replays

This service turns games into MP4 videos by:
1. Rendering each frame as an LED-matrix style image using PIL (Pillow)
2. Encoding frames to video using MoviePy/FFmpeg

Frames come either from a saved replay (one frame per tick, drawn from the
recorded snake and food cells) or from raw pixel buffers captured off the
Canvas by FrameRecorderDisplay.
"""

import json
import logging
import os
import tempfile
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
from moviepy import ImageSequenceClip
from PIL import Image, ImageDraw

logger = logging.getLogger(__name__)

# Video settings
DEFAULT_FPS = 4
CELL_SIZE = 32  # Size of each grid cell in pixels
LED_PADDING = 3


class ColorScheme:
    """Colors for the LED matrix look"""

    BACKGROUND = "#101418"
    LED_OFF = "#1F262D"
    LED_ON = "#F4F4F4"
    SNAKE_BODY = "#4F7022"
    SNAKE_HEAD = "#8CC63F"
    FOOD = "#EA2014"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def render_buffer(buffer: np.ndarray, cell_size: int = CELL_SIZE) -> Image.Image:
    """Render a rows x columns bool buffer as a monochrome LED image"""
    rows, columns = buffer.shape
    colors = {
        (int(x), int(y)): ColorScheme.LED_ON
        for y, x in zip(*np.nonzero(buffer))
    }
    return _render_cells(rows, columns, colors, cell_size)


def _render_cells(
    rows: int,
    columns: int,
    colors: Dict[Tuple[int, int], str],
    cell_size: int
) -> Image.Image:
    img = Image.new('RGB', (columns * cell_size, rows * cell_size), hex_to_rgb(ColorScheme.BACKGROUND))
    draw = ImageDraw.Draw(img)
    padding = min(LED_PADDING, cell_size // 4)

    for y in range(rows):
        for x in range(columns):
            color = colors.get((x, y), ColorScheme.LED_OFF)
            left = x * cell_size + padding
            top = y * cell_size + padding
            draw.ellipse(
                [left, top, left + cell_size - 2 * padding, top + cell_size - 2 * padding],
                fill=hex_to_rgb(color)
            )
    return img


class SnakeVideoGenerator:
    """Generate MP4 videos from snake game replays or captured frames"""

    def __init__(self, fps: int = DEFAULT_FPS, cell_size: int = CELL_SIZE):
        self.fps = fps
        self.cell_size = cell_size

    def render_frame(self, round_data: Dict[str, Any], rows: int, columns: int) -> Image.Image:
        """Render a single replay round, coloring food, body and head"""
        colors: Dict[Tuple[int, int], str] = {}
        for fx, fy in round_data.get('food', []):
            colors[(fx, fy)] = ColorScheme.FOOD

        snake = [tuple(cell) for cell in round_data.get('snake', [])]
        for cell in snake:
            colors[cell] = ColorScheme.SNAKE_BODY
        if snake:
            colors[snake[-1]] = ColorScheme.SNAKE_HEAD

        return _render_cells(rows, columns, colors, self.cell_size)

    def render_replay(self, replay_data: Dict[str, Any]) -> List[Image.Image]:
        metadata = replay_data.get('metadata', {})
        rounds = replay_data.get('rounds', [])
        config = metadata.get('config', {})
        rows, columns = config.get('rows'), config.get('columns')
        if not rows or not columns:
            raise ValueError("Replay metadata is missing the grid size (config.rows/config.columns).")

        frames = []
        for i, round_data in enumerate(rounds):
            if i % 50 == 0:
                logger.info(f"Rendering frame {i + 1}/{len(rounds)}")
            frames.append(self.render_frame(round_data, rows, columns))
        return frames

    def write_video(self, frames: Sequence[Image.Image], output_path: str) -> str:
        """Encode rendered frames to an MP4 file"""
        if not frames:
            raise ValueError("No frames to encode.")

        clip = ImageSequenceClip([np.array(frame) for frame in frames], fps=self.fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )
        logger.info(f"Video created successfully at {output_path}")
        return output_path

    def generate_video(
        self,
        replay_data: Optional[Dict[str, Any]] = None,
        replay_path: Optional[str] = None,
        output_path: Optional[str] = None
    ) -> str:
        """
        Generate a video from a game replay

        Args:
            replay_data: Replay dict as written by GameController.save_history_to_json
            replay_path: Path to a replay JSON file, used when replay_data is None
            output_path: Optional output path (if None, uses temp file)

        Returns:
            Path to the generated video file
        """
        if replay_data is None:
            if replay_path is None:
                raise ValueError("Either replay_data or replay_path is required.")
            if not os.path.exists(replay_path):
                raise ValueError(f"Could not find replay data at {replay_path}")
            logger.info(f"Loading replay data from {replay_path}")
            with open(replay_path, 'r') as f:
                replay_data = json.load(f)

        game_id = replay_data.get('metadata', {}).get('game_id', 'snake')
        frames = self.render_replay(replay_data)
        logger.info(f"Rendered {len(frames)} frames for game {game_id}, creating video...")

        if output_path is None:
            output_path = os.path.join(tempfile.gettempdir(), f"{game_id}_replay.mp4")

        return self.write_video(frames, output_path)
