"""
Display collaborators that receive flushed Canvas buffers.

Each display exposes show(buffer), where buffer is a rows x columns numpy
bool array copied at flush time.
"""

import logging
import sys
from collections import deque
from typing import List, Optional, TextIO

import numpy as np
from PIL import Image

from .video_generator import CELL_SIZE, render_buffer

logger = logging.getLogger(__name__)


class NullDisplay:
    """Discards every frame. Used for headless runs."""

    def show(self, buffer: np.ndarray) -> None:
        pass


class TerminalDisplay:
    """Prints each flushed frame as rows of '#' (on) and '.' (off)."""

    def __init__(self, stream: Optional[TextIO] = None, on: str = "#", off: str = "."):
        self.stream = stream or sys.stdout
        self.on = on
        self.off = off

    def render(self, buffer: np.ndarray) -> str:
        return "\n".join(
            "".join(self.on if pixel else self.off for pixel in row)
            for row in buffer
        )

    def show(self, buffer: np.ndarray) -> None:
        self.stream.write(self.render(buffer) + "\n\n")
        self.stream.flush()


class FrameRecorderDisplay:
    """
    Keeps every flushed buffer so the run can be rendered afterwards.

    max_frames bounds memory on long runs; the oldest frames are dropped
    once the limit is reached.
    """

    def __init__(self, max_frames: Optional[int] = None, cell_size: int = CELL_SIZE):
        self.max_frames = max_frames
        self.cell_size = cell_size
        self.buffers: deque = deque(maxlen=max_frames)
        self.dropped = 0

    def show(self, buffer: np.ndarray) -> None:
        if len(self.buffers) == self.buffers.maxlen:
            self.dropped += 1
        self.buffers.append(buffer)

    def images(self) -> List[Image.Image]:
        if self.dropped:
            logger.info(f"Frame recorder dropped {self.dropped} early frames")
        return [render_buffer(buffer, self.cell_size) for buffer in self.buffers]
